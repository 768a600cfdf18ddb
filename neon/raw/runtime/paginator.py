"""Cursor-following collection of listing feeds.

Architecture:
    A feed is a sequence of pages linked by ``after`` cursors. The paginator
    walks that chain one page at a time, hydrating each page into a Listing
    and accumulating children until the caller's limit is met or the feed
    ends.

Design Decisions:
    - Fetches are strictly sequential: each request needs the cursor the
      previous one returned
    - The per-request ``limit`` is ``min(remaining, 100)`` so the server never
      sends children that would be thrown away on the last page
    - A 404 mid-collection (a page that vanished between requests) returns
      what was collected so far instead of failing the whole call
    - When the last page is cut short, the returned ``after`` is the fullname
      of the last kept item so resuming from it skips nothing

See Also:
    - Listing: the accumulated result
    - Stream: live polling of a feed's head page
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..config import DEFAULT_LIMIT, MAX_PAGE_LIMIT
from ..core.base import ClientLike
from ..core.exceptions import NotFoundError
from ..models.base import RedditObject
from ..models.listing import Listing
from ..models.moderation import PrivilegedUser
from .telemetry import log_page_fetched, log_pagination_complete, log_pagination_truncated


class Paginator:
    """Collects items from a cursor feed through one client.

    A paginator holds no per-collection state, but callers should not run
    two collections through the same instance concurrently.
    """

    def __init__(self, client: ClientLike) -> None:
        self._client = client

    async def fetch_page(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        item_type: type[RedditObject] | None = None,
    ) -> Listing:
        """Fetch exactly one page.

        Args:
            path: Listing endpoint (``/r/python/new``)
            params: Query parameters, including ``after``/``limit`` if wanted
            item_type: Hydrate children as this class instead of by kind
        """
        data = await self._client.request_data(path, "GET", dict(params or {}))
        return Listing.from_response(self._client, data, item_type=item_type)

    async def collect(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        limit: int = DEFAULT_LIMIT,
        item_type: type[RedditObject] | None = None,
    ) -> Listing:
        """Collect up to ``limit`` items following ``after`` cursors.

        Args:
            path: Listing endpoint
            params: Extra query parameters (sort, time filter, ...)
            limit: Maximum number of items to return
            item_type: Hydrate children as this class instead of by kind

        Returns:
            Listing with at most ``limit`` items; ``after`` is None only when
            the feed is exhausted

        Raises:
            ValueError: If limit is not positive
            RedditError: Any failure other than a mid-collection 404
        """
        if limit < 1:
            raise ValueError(f"limit must be positive, got {limit}")

        query = dict(params or {})
        result = Listing()
        after = query.pop("after", None)
        pages = 0

        while len(result) < limit:
            remaining = limit - len(result)
            page_params = {**query, "limit": min(remaining, MAX_PAGE_LIMIT), "after": after}
            try:
                page = await self.fetch_page(path, page_params, item_type=item_type)
            except NotFoundError as e:
                log_pagination_truncated(path=path, total_items=len(result), error_message=str(e))
                break

            log_page_fetched(path=path, page_index=pages, items=len(page), after=page.after)
            pages += 1

            if len(page) > remaining:
                kept = page[:remaining]
                result._extend(kept, _fullname_of(kept[-1]) or page.after)
                break

            after = page.after
            result._extend(page, after)
            if after is None or len(page) == 0:
                break

        log_pagination_complete(
            path=path,
            pages=pages,
            total_items=len(result),
            limit=limit,
            exhausted=result.after is None,
        )
        return result

    async def collect_users(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        limit: int = DEFAULT_LIMIT,
    ) -> Listing:
        """Collect a ``UserList`` feed (banned, moderators, ...)."""
        return await self.collect(path, params, limit, item_type=PrivilegedUser)


def _fullname_of(item: RedditObject) -> str | None:
    return getattr(item, "fullname", None)
