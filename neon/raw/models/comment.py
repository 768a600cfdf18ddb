"""Comment entity."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import Field

from ..capability import (
    Createable,
    Editable,
    Gildable,
    Inboxable,
    Moderateable,
    Refreshable,
    Repliable,
    Saveable,
    Votable,
)
from ..config import WWW_BASE_URL
from .base import Thing, alias

if TYPE_CHECKING:
    from .more_comments import MoreComments


class Comment(
    Createable,
    Editable,
    Gildable,
    Inboxable,
    Moderateable,
    Refreshable,
    Repliable,
    Saveable,
    Votable,
    Thing,
):
    """A comment on a submission.

    ``link_author``, ``link_title`` and ``link_url`` are only sent when the
    comment is fetched outside its thread (user pages, ``/r/x/comments``).
    ``num_reports``, ``approved_by`` and ``banned_by`` are None unless the
    caller moderates the subreddit.
    """

    author: str | None = None
    body: str | None = None
    body_html: str | None = None
    score: int | None = None
    likes: bool | None = None
    saved: bool | None = None
    score_hidden: bool | None = None
    archived: bool | None = None
    gilded: int | None = None
    edited: bool | float | None = None
    new: bool | None = None
    stickied: bool | None = None
    distinguished: str | None = None

    link_id: str | None = None
    parent_id: str | None = None
    link_author: str | None = None
    link_title: str | None = None
    link_url: str | None = None
    subreddit: str | None = None
    subreddit_id: str | None = None
    author_flair_css_class: str | None = None
    author_flair_text: str | None = None

    approved_by: str | None = None
    banned_by: str | bool | None = None
    num_reports: int | None = None
    mod_reports: list[Any] | None = None
    user_reports: list[Any] | None = None

    raw_replies: dict[str, Any] | None = Field(default=None, alias="replies", repr=False)

    removed_by = alias("banned_by")
    gold_count = alias("gilded")
    is_saved = alias("saved")
    is_score_hidden = alias("score_hidden")
    is_archived = alias("archived")
    link_name = alias("link_id")
    parent_name = alias("parent_id")

    @property
    def is_comment(self) -> bool:
        return True

    @property
    def is_submission(self) -> bool:
        return False

    @property
    def is_more_comments(self) -> bool:
        return False

    @property
    def has_replies(self) -> bool:
        return self.raw_replies is not None

    @property
    def replies(self) -> list[Comment | MoreComments]:
        """Direct replies, hydrated on each access.

        Replies are only included when the comment was loaded through its
        submission's comment tree, not through ``/api/info``.
        """
        if self.raw_replies is None:
            return []
        from .listing import Listing

        return list(Listing.from_response(self.client, self.raw_replies))  # type: ignore[arg-type]

    @property
    def permalink(self) -> str:
        wire = (self.model_extra or {}).get("permalink")
        if wire:
            return f"{WWW_BASE_URL}{wire}"
        submission_id = (self.link_id or "")[3:]
        # the empty slug segment is accepted by the site
        return f"{WWW_BASE_URL}/r/{self.subreddit}/comments/{submission_id}//{self.id}"
