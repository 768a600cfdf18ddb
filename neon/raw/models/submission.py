"""Submission (link or self post) entity."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..capability import (
    Createable,
    Editable,
    Gildable,
    Moderateable,
    Refreshable,
    Repliable,
    Saveable,
    Votable,
)
from ..config import WWW_BASE_URL
from ..core.exceptions import MalformedResponseError
from .base import Thing, alias

if TYPE_CHECKING:
    from .comment import Comment
    from .more_comments import MoreComments


class Submission(
    Createable,
    Editable,
    Gildable,
    Moderateable,
    Refreshable,
    Repliable,
    Saveable,
    Votable,
    Thing,
):
    """A link or self post."""

    title: str | None = None
    author: str | None = None
    url: str | None = None
    domain: str | None = None
    selftext: str | None = None
    selftext_html: str | None = None
    thumbnail: str | None = None
    score: int | None = None
    ups: int | None = None
    downs: int | None = None
    upvote_ratio: float | None = None
    likes: bool | None = None
    num_comments: int | None = None
    gilded: int | None = None
    edited: bool | float | None = None

    is_self: bool | None = None
    over_18: bool | None = None
    spoiler: bool | None = None
    saved: bool | None = None
    hidden: bool | None = None
    archived: bool | None = None
    locked: bool | None = None
    stickied: bool | None = None
    distinguished: str | None = None

    subreddit: str | None = None
    subreddit_id: str | None = None
    link_flair_text: str | None = None
    link_flair_css_class: str | None = None
    author_flair_text: str | None = None
    author_flair_css_class: str | None = None

    approved_by: str | None = None
    banned_by: str | bool | None = None
    num_reports: int | None = None
    mod_reports: list[Any] | None = None
    user_reports: list[Any] | None = None

    gold_count = alias("gilded")
    is_saved = alias("saved")
    is_nsfw = alias("over_18")
    is_hidden = alias("hidden")
    is_archived = alias("archived")
    is_locked = alias("locked")
    comment_count = alias("num_comments")

    @property
    def is_comment(self) -> bool:
        return False

    @property
    def is_submission(self) -> bool:
        return True

    @property
    def is_more_comments(self) -> bool:
        return False

    @property
    def permalink(self) -> str:
        wire = (self.model_extra or {}).get("permalink")
        if wire:
            return f"{WWW_BASE_URL}{wire}"
        return f"{WWW_BASE_URL}/r/{self.subreddit}/comments/{self.id}/"

    async def comments(
        self, sort: str | None = None, limit: int | None = None
    ) -> list[Comment | MoreComments]:
        """Fetch the top level of the comment tree.

        Nested replies are reachable through ``Comment.replies``.

        Args:
            sort: Comment sort (confidence, top, new, controversial, old, qa)
            limit: Maximum number of comments the server should return
        """
        from ..capability.actions import client_of
        from .listing import Listing

        params = {"sort": sort, "limit": limit}
        data = await client_of(self).request_data(f"/comments/{self.id}", "GET", params)
        if not isinstance(data, list) or len(data) != 2:
            raise MalformedResponseError(f"Unexpected comment tree response for {self.fullname}")
        return list(Listing.from_response(self.client, data[1]))  # type: ignore[arg-type]
