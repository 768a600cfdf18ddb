"""Collaborator protocols at the core's boundary.

Architecture:
    The core never constructs HTTP requests itself. Everything that needs the
    network goes through a RequestExecutor, and entities reach it through the
    owning client (ClientLike). Both are Protocols so tests can substitute
    small fakes without inheriting anything.

See Also:
    - RESTExecutor: aiohttp-backed RequestExecutor
    - Reddit: the client facade that satisfies ClientLike
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import IO, TYPE_CHECKING, Any, Protocol

from ..config import DEFAULT_LIMIT

if TYPE_CHECKING:
    from ..models.base import RedditObject
    from ..models.listing import Listing
    from ..runtime.stream import Stream


class RequestExecutor(Protocol):
    """Issues one API call and returns the parsed JSON body.

    Raises:
        AuthError, ForbiddenError, RateLimitError, NotFoundError,
        ServerError, TransportError
    """

    async def execute(
        self,
        path: str,
        method: str = "GET",
        params: Mapping[str, Any] | None = None,
        body: Any | None = None,
        files: Mapping[str, IO[bytes]] | None = None,
    ) -> Any: ...

    async def close(self) -> None: ...


class ClientLike(Protocol):
    """What entities, paginators and streams need from their owning client."""

    async def request_data(
        self,
        path: str,
        method: str = "GET",
        params: Mapping[str, Any] | None = None,
        body: Any | None = None,
        files: Mapping[str, IO[bytes]] | None = None,
    ) -> Any: ...

    async def collect(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        limit: int = DEFAULT_LIMIT,
        item_type: type[RedditObject] | None = None,
    ) -> Listing:
        """Collect up to ``limit`` items of a cursor feed."""
        ...

    def stream(self, path: str, params: Mapping[str, Any] | None = None, **options: Any) -> Stream:
        """Open a live stream over the head of a feed."""
        ...
