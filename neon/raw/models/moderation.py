"""Moderation log entries and privileged-user records."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field

from ..core.clock import epoch_to_datetime
from .base import RedditObject, alias


class ModAction(RedditObject):
    """One entry of a subreddit's moderation log.

    Mod log ids (``ModAction_...``) are unique, so ``fullname`` returns the
    id and streams can deduplicate on it.
    """

    id: str
    action: str | None = None
    mod: str | None = None
    mod_id36: str | None = None
    details: str | None = None
    description: str | None = None
    subreddit: str | None = None
    sr_id36: str | None = None
    target_fullname: str | None = None
    target_author: str | None = None
    target_permalink: str | None = None
    target_title: str | None = None
    target_body: str | None = None

    raw_created_utc: float | None = Field(default=None, alias="created_utc", repr=False)

    moderator = alias("mod")

    @property
    def fullname(self) -> str:
        return self.id

    @property
    def created_utc(self) -> datetime | None:
        return epoch_to_datetime(self.raw_created_utc)


class PrivilegedUser(RedditObject):
    """A user in one of a subreddit's lists (banned, moderators, ...).

    Attributes:
        name: Username
        id: Account fullname (``t2_...``)
        note: Moderator note (ban reason and similar)
        mod_permissions: Permission names, moderators only
    """

    name: str
    id: str | None = None
    note: str | None = None
    rel_id: str | None = None
    mod_permissions: list[Any] | None = None

    raw_date: float | None = Field(default=None, alias="date", repr=False)

    username = alias("name")

    @property
    def fullname(self) -> str | None:
        return self.id

    @property
    def date(self) -> datetime | None:
        """When the user was added to the list."""
        return epoch_to_datetime(self.raw_date)
