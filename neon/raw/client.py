"""High-level Reddit client.

The client ties the pieces together for callers: it owns the request
executor (and through it the token lifecycle), hydrates responses into
entities bound to itself, and hands out paginated collections and live
streams.

Example:
    async with Reddit.from_credentials(Credentials.from_env()) as reddit:
        python = await reddit.subreddit("python")
        async for submission in python.stream("new", skip_existing=True):
            print(submission.title)
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import IO, Any

from .auth import Authenticator, TokenManager
from .config import DEFAULT_LIMIT, ClientConfig, Credentials
from .core.base import RequestExecutor
from .core.clock import Clock, SystemClock
from .core.enums import ThingKind
from .core.exceptions import MalformedResponseError
from .models import Listing, RedditObject, Submission, Subreddit, User, WikiPage, fetch_by_fullname, hydrate
from .models.wiki import wiki_path
from .runtime.paginator import Paginator
from .runtime.rest import HTTPClient, RESTExecutor
from .runtime.stream import Stream


class Reddit:
    """Async client for the Reddit REST API."""

    def __init__(
        self,
        executor: RequestExecutor,
        *,
        config: ClientConfig | None = None,
        clock: Clock | None = None,
        authenticator: Authenticator | None = None,
    ) -> None:
        """Initialize a client around an executor.

        Args:
            executor: Performs the authorized API calls
            config: Client tunables (stream defaults, base URLs)
            clock: Time source for streams
            authenticator: Closed together with the client when given
        """
        self._executor = executor
        self._config = config or ClientConfig()
        self._clock = clock or SystemClock()
        self._authenticator = authenticator
        self._paginator = Paginator(self)

    @classmethod
    def from_credentials(
        cls,
        credentials: Credentials,
        *,
        config: ClientConfig | None = None,
        clock: Clock | None = None,
    ) -> Reddit:
        """Build a client that authenticates with ``credentials``.

        The grant type follows from what the credentials hold (see
        Authenticator). No network call is made until the first request.
        """
        config = config or ClientConfig()
        clock = clock or SystemClock()
        headers = {"User-Agent": credentials.user_agent}
        authenticator = Authenticator(
            credentials,
            http=HTTPClient(base_url=config.www_base_url, timeout=config.timeout, headers=headers),
        )
        executor = RESTExecutor(
            TokenManager(authenticator, clock),
            base_url=config.oauth_base_url,
            user_agent=credentials.user_agent,
            timeout=config.timeout,
            default_params=config.default_params,
        )
        return cls(executor, config=config, clock=clock, authenticator=authenticator)

    @classmethod
    def from_env(cls, prefix: str = "REDDIT_", **kwargs: Any) -> Reddit:
        """Build a client from ``REDDIT_*`` environment variables."""
        return cls.from_credentials(Credentials.from_env(prefix), **kwargs)

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def paginator(self) -> Paginator:
        return self._paginator

    # ----------------------
    # Transport
    # ----------------------

    async def request_data(
        self,
        path: str,
        method: str = "GET",
        params: Mapping[str, Any] | None = None,
        body: Any | None = None,
        files: Mapping[str, IO[bytes]] | None = None,
    ) -> Any:
        """Perform one API call and return the parsed JSON."""
        return await self._executor.execute(path, method, params, body, files)

    async def collect(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        limit: int = DEFAULT_LIMIT,
        item_type: type[RedditObject] | None = None,
    ) -> Listing:
        return await self._paginator.collect(path, params, limit, item_type=item_type)

    def stream(self, path: str, params: Mapping[str, Any] | None = None, **options: Any) -> Stream:
        """Open a stream over ``path`` with the client's default interval and seen limit."""
        options.setdefault("poll_interval", self._config.poll_interval)
        options.setdefault("seen_limit", self._config.seen_limit)
        options.setdefault("clock", self._clock)
        return Stream(self, path, params, **options)

    # ----------------------
    # Lookups
    # ----------------------

    async def me(self) -> User:
        """The authenticated account."""
        data = await self.request_data("/api/v1/me")
        return User.hydrate(self, data)

    async def user(self, username: str) -> User:
        return await self._about(f"/user/{username}/about", User)

    async def subreddit(self, name: str) -> Subreddit:
        return await self._about(f"/r/{name}/about", Subreddit)

    async def submission(self, submission_id: str) -> Submission:
        """Fetch a submission by base36 id or fullname."""
        fullname = submission_id
        if not submission_id.startswith(f"{ThingKind.LINK.value}_"):
            fullname = ThingKind.LINK.fullname(submission_id)
        thing = await fetch_by_fullname(self, fullname)
        if not isinstance(thing, Submission):
            raise MalformedResponseError(f"{fullname} is not a submission")
        return thing

    async def info(self, fullnames: Iterable[str]) -> Listing:
        """Fetch any mix of things by fullname (100 at most)."""
        ids = ",".join(fullnames)
        return Listing.from_response(self, await self.request_data("/api/info", "GET", {"id": ids}))

    async def _about(self, path: str, expected: type[RedditObject]) -> Any:
        thing = hydrate(self, await self.request_data(path))
        if not isinstance(thing, expected):
            raise MalformedResponseError(f"Expected {expected.__name__} from {path}, got {type(thing).__name__}")
        return thing

    # ----------------------
    # Subreddit discovery
    # ----------------------

    async def find_subreddits(self, query: str) -> list[str]:
        """Names of subreddits related to a topic (50 characters maximum)."""
        data = await self.request_data("/api/subreddits_by_topic", "GET", {"query": query})
        if not isinstance(data, list):
            raise MalformedResponseError("Unexpected subreddits_by_topic response")
        return [entry["name"] for entry in data if isinstance(entry, Mapping) and "name" in entry]

    async def popular_subreddits(self, limit: int = DEFAULT_LIMIT, **params: Any) -> Listing:
        return await self.collect("/subreddits/popular", params, limit)

    async def new_subreddits(self, limit: int = DEFAULT_LIMIT, **params: Any) -> Listing:
        return await self.collect("/subreddits/new", params, limit)

    async def gold_subreddits(self, limit: int = DEFAULT_LIMIT, **params: Any) -> Listing:
        return await self.collect("/subreddits/gold", params, limit)

    async def default_subreddits(self, limit: int = DEFAULT_LIMIT, **params: Any) -> Listing:
        return await self.collect("/subreddits/default", params, limit)

    # ----------------------
    # Site wiki
    # ----------------------

    async def wikipage(self, page: str) -> WikiPage:
        data = await self.request_data(wiki_path(None, page), "GET", {"page": page})
        return WikiPage.from_response(self, data, page, None)

    async def wikipages(self) -> list[str]:
        data = await self.request_data(wiki_path(None, "pages"))
        if not isinstance(data, Mapping) or not isinstance(data.get("data"), list):
            raise MalformedResponseError("Unexpected wiki page list")
        return data["data"]

    # ----------------------
    # Lifecycle
    # ----------------------

    async def close(self) -> None:
        await self._executor.close()
        if self._authenticator is not None:
            await self._authenticator.close()

    async def __aenter__(self) -> Reddit:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
