"""Private message entity."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from ..capability import Createable, Inboxable, Repliable
from .base import Thing, alias


class Message(Createable, Inboxable, Repliable, Thing):
    """A private message or an inbox notification for a comment reply.

    Messages cannot be re-fetched by fullname, so read/unread state is kept
    locally after ``mark_as_read``/``mark_as_unread``.
    """

    author: str | None = None
    dest: str | None = None
    subject: str | None = None
    body: str | None = None
    body_html: str | None = None
    new: bool | None = None
    was_comment: bool | None = None
    context: str | None = None
    parent_id: str | None = None
    first_message_name: str | None = None
    subreddit: str | None = None
    distinguished: str | None = None

    raw_replies: dict[str, Any] | None = Field(default=None, alias="replies", repr=False)

    is_unread = alias("new")
    recipient = alias("dest")

    @property
    def replies(self) -> list[Message]:
        """Messages in the thread after this one."""
        if self.raw_replies is None:
            return []
        from .listing import Listing

        return list(Listing.from_response(self.client, self.raw_replies))  # type: ignore[arg-type]
