"""Wiki pages and their revisions."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field

from ..capability import Refreshable, actions
from ..config import DEFAULT_LIMIT
from ..core.clock import epoch_to_datetime
from ..core.exceptions import MalformedResponseError
from .base import RedditObject
from .listing import Listing


def wiki_path(subreddit: str | None, suffix: str) -> str:
    """Path of a wiki endpoint, site-wide when ``subreddit`` is None."""
    if subreddit is None:
        return f"/wiki/{suffix}"
    return f"/r/{subreddit}/wiki/{suffix}"


def _nested_username(value: Any) -> str | None:
    if isinstance(value, dict):
        data = value.get("data")
        if isinstance(data, dict):
            return data.get("name")
    return None


class WikiPage(Refreshable, RedditObject):
    """A wiki page of a subreddit (or of the site when ``subreddit`` is None).

    The API payload does not name the page; ``name`` and ``subreddit`` are
    injected by whoever fetched it.
    """

    name: str | None = None
    subreddit: str | None = None
    content_md: str | None = None
    content_html: str | None = None
    may_revise: bool | None = None
    reason: str | None = None
    revision_id: str | None = None

    raw_revision_date: float | None = Field(default=None, alias="revision_date", repr=False)
    raw_revision_by: dict[str, Any] | None = Field(default=None, alias="revision_by", repr=False)

    @classmethod
    def from_response(cls, client: Any, data: Any, name: str, subreddit: str | None) -> WikiPage:
        """Hydrate a ``{"kind": "wikipage", "data": ...}`` response."""
        if not isinstance(data, dict) or not isinstance(data.get("data"), dict):
            raise MalformedResponseError(f"Unexpected wiki page response for {name!r}")
        return cls.hydrate(client, {**data["data"], "name": name, "subreddit": subreddit})

    @property
    def revision_date(self) -> datetime | None:
        return epoch_to_datetime(self.raw_revision_date)

    @property
    def revised_by(self) -> str | None:
        """Username of the last editor."""
        return _nested_username(self.raw_revision_by)

    async def _fetch_fresh(self) -> WikiPage:
        client = actions.client_of(self)
        data = await client.request_data(wiki_path(self.subreddit, self.name), "GET", {"page": self.name})
        return WikiPage.from_response(client, data, self.name, self.subreddit)

    async def revise(self, content: str, reason: str | None = None) -> None:
        """Replace the page content, then refresh.

        Args:
            content: New markdown content
            reason: Edit reason (256 characters maximum)
        """
        params = {"page": self.name, "content": content, "reason": reason}
        path = "/api/wiki/edit" if self.subreddit is None else f"/r/{self.subreddit}/api/wiki/edit"
        await actions.act_and_refresh(self, "revise", path, params)

    async def revisions(self, limit: int = DEFAULT_LIMIT) -> Listing:
        """Revision history of the page, newest first."""
        client = actions.client_of(self)
        path = wiki_path(self.subreddit, f"revisions/{self.name}")
        return await client.collect(path, None, limit, item_type=WikiPageRevision)


class WikiPageRevision(RedditObject):
    """One revision in a wiki page's history."""

    id: str
    page: str | None = None
    reason: str | None = None

    raw_timestamp: float | None = Field(default=None, alias="timestamp", repr=False)
    raw_author: dict[str, Any] | None = Field(default=None, alias="author", repr=False)

    @property
    def fullname(self) -> str:
        return self.id

    @property
    def author(self) -> str | None:
        """Username of the user who made the revision."""
        return _nested_username(self.raw_author)

    @property
    def created(self) -> datetime | None:
        if self.raw_timestamp is None:
            return None
        return datetime.fromtimestamp(self.raw_timestamp)

    @property
    def created_utc(self) -> datetime | None:
        return epoch_to_datetime(self.raw_timestamp)
