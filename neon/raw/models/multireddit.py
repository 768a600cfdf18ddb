"""Multireddit (custom feed) object."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from ..capability import Createable
from .base import RedditObject


class Multireddit(Createable, RedditObject):
    """A named collection of subreddits owned by a user.

    Multireddits have no fullname; they are addressed by ``path``
    (``/user/alice/m/python``).
    """

    name: str
    display_name: str | None = None
    path: str | None = None
    description_md: str | None = None
    visibility: str | None = None
    can_edit: bool | None = None
    over_18: bool | None = None
    icon_url: str | None = None

    raw_subreddits: list[dict[str, Any]] | None = Field(default=None, alias="subreddits", repr=False)
    raw_created: float | None = Field(default=None, alias="created", repr=False)
    raw_created_utc: float | None = Field(default=None, alias="created_utc", repr=False)

    @property
    def fullname(self) -> str | None:
        return self.path

    @property
    def subreddits(self) -> list[str]:
        """Display names of the member subreddits."""
        return [entry["name"] for entry in self.raw_subreddits or [] if isinstance(entry, dict) and "name" in entry]
