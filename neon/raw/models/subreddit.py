"""Subreddit entity."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..capability import Createable, Refreshable, actions
from ..config import DEFAULT_LIMIT
from ..core.exceptions import MalformedResponseError
from .base import Thing, alias
from .listing import Listing
from .subreddit_moderation import SubredditModeration
from .wiki import WikiPage, wiki_path

if TYPE_CHECKING:
    from ..runtime.stream import Stream
    from .submission import Submission

STREAM_QUEUES = ("new", "comments", "log")
TIME_FILTERS = ("hour", "day", "week", "month", "year", "all")


class Subreddit(Createable, Refreshable, SubredditModeration, Thing):
    """A subreddit."""

    display_name: str
    title: str | None = None
    url: str | None = None
    public_description: str | None = None
    description: str | None = None
    description_html: str | None = None
    subreddit_type: str | None = None
    submission_type: str | None = None
    subscribers: int | None = None
    accounts_active: int | None = None
    over18: bool | None = None
    quarantine: bool | None = None
    user_is_subscriber: bool | None = None
    user_is_moderator: bool | None = None
    user_is_banned: bool | None = None
    user_is_contributor: bool | None = None

    is_nsfw = alias("over18")
    is_subscriber = alias("user_is_subscriber")
    is_moderator = alias("user_is_moderator")
    is_banned = alias("user_is_banned")
    subscriber_count = alias("subscribers")

    async def _fetch_fresh(self) -> Subreddit:
        from .hydration import hydrate

        client = actions.client_of(self)
        fresh = hydrate(client, await client.request_data(f"/r/{self.display_name}/about"))
        if not isinstance(fresh, Subreddit):
            raise MalformedResponseError(f"Expected a subreddit, got {type(fresh).__name__}")
        return fresh

    # Listings

    async def _listing(self, sort: str, limit: int, params: dict[str, Any]) -> Listing:
        return await actions.client_of(self).collect(f"/r/{self.display_name}/{sort}", params, limit)

    async def hot(self, limit: int = DEFAULT_LIMIT, **params: Any) -> Listing:
        return await self._listing("hot", limit, params)

    async def new(self, limit: int = DEFAULT_LIMIT, **params: Any) -> Listing:
        return await self._listing("new", limit, params)

    async def rising(self, limit: int = DEFAULT_LIMIT, **params: Any) -> Listing:
        return await self._listing("rising", limit, params)

    async def top(self, limit: int = DEFAULT_LIMIT, time_filter: str = "all", **params: Any) -> Listing:
        _check_time_filter(time_filter)
        return await self._listing("top", limit, {**params, "t": time_filter})

    async def controversial(self, limit: int = DEFAULT_LIMIT, time_filter: str = "all", **params: Any) -> Listing:
        _check_time_filter(time_filter)
        return await self._listing("controversial", limit, {**params, "t": time_filter})

    async def comments(self, limit: int = DEFAULT_LIMIT, **params: Any) -> Listing:
        """Newest comments across the subreddit."""
        return await self._listing("comments", limit, params)

    def stream(self, queue: str = "new", **options: Any) -> Stream:
        """Stream new submissions (``new``), comments or mod log entries.

        Args:
            queue: One of ``STREAM_QUEUES``
            **options: Stream options (poll_interval, skip_existing, ...)
        """
        if queue not in STREAM_QUEUES:
            raise ValueError(f"Unknown subreddit queue: {queue!r}")
        path = self._about("log") if queue == "log" else f"/r/{self.display_name}/{queue}"
        return actions.client_of(self).stream(path, None, **options)

    # Participation

    async def submit(
        self,
        title: str,
        text: str | None = None,
        url: str | None = None,
        **params: Any,
    ) -> Submission:
        """Submit a self post (``text``) or a link (``url``).

        Returns:
            The new submission, fetched after creation
        """
        from .hydration import fetch_by_fullname

        if (text is None) == (url is None):
            raise ValueError("Pass exactly one of text or url")
        payload = {
            **params,
            "api_type": "json",
            "kind": "self" if url is None else "link",
            "sr": self.display_name,
            "title": title,
            "text": text,
            "url": url,
        }
        data = await actions.post(self, "/api/submit", payload)
        try:
            fullname = data["json"]["data"]["name"]
        except (KeyError, TypeError) as e:
            raise MalformedResponseError(f"Unexpected submit response: {data!r}") from e
        return await fetch_by_fullname(actions.client_of(self), fullname)  # type: ignore[return-value]

    async def subscribe(self) -> None:
        await actions.act_and_refresh(self, "subscribe", "/api/subscribe", {"action": "sub", "sr": self.fullname})

    async def unsubscribe(self) -> None:
        await actions.act_and_refresh(self, "unsubscribe", "/api/subscribe", {"action": "unsub", "sr": self.fullname})

    # Wiki

    async def wikipage(self, page: str) -> WikiPage:
        client = actions.client_of(self)
        data = await client.request_data(wiki_path(self.display_name, page), "GET", {"page": page})
        return WikiPage.from_response(client, data, page, self.display_name)

    async def wikipages(self) -> list[str]:
        data = await actions.client_of(self).request_data(wiki_path(self.display_name, "pages"))
        if not isinstance(data, dict) or not isinstance(data.get("data"), list):
            raise MalformedResponseError(f"Unexpected wiki page list for {self.display_name}")
        return data["data"]


def _check_time_filter(value: str) -> None:
    if value not in TIME_FILTERS:
        raise ValueError(f"Unknown time filter: {value!r}")
