"""Trophy object."""

from __future__ import annotations

from .base import RedditObject


class Trophy(RedditObject):
    """A trophy shown on a user's profile.

    Trophies carry no fullname; ``name`` is the trophy's title.
    """

    name: str
    description: str | None = None
    award_id: str | None = None
    url: str | None = None
    icon_40: str | None = None
    icon_70: str | None = None
