"""Capability contracts composed into entity variants.

Each class is one named behavior contract with a fixed method set. A variant
declares the contracts it implements by listing them as bases, and the
``capability`` class attribute lets the registry discover them. The
contracts hold no state and declare no fields: every method works from the
entity's fullname and owning client and delegates to ``actions``.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any, ClassVar

from ..core.clock import epoch_to_datetime
from ..core.enums import Capability, DistinguishKind, VoteDirection
from ..core.exceptions import NotFoundError
from . import actions

if TYPE_CHECKING:
    from ..models.comment import Comment
    from ..models.message import Message


class Votable:
    """Up/down/clear votes on the entity."""

    capability: ClassVar[Capability] = Capability.VOTABLE

    async def upvote(self) -> None:
        await actions.vote(self, VoteDirection.UP)

    async def downvote(self) -> None:
        await actions.vote(self, VoteDirection.DOWN)

    async def clear_vote(self) -> None:
        await actions.vote(self, VoteDirection.CLEAR)


class Saveable:
    """Save/unsave and hide/unhide."""

    capability: ClassVar[Capability] = Capability.SAVEABLE

    async def save(self, category: str | None = None) -> None:
        """Save the entity, optionally into a (gold only) category."""
        await actions.save(self, category)

    async def unsave(self) -> None:
        await actions.unsave(self)

    async def hide(self) -> None:
        await actions.set_hidden(self, True)

    async def unhide(self) -> None:
        await actions.set_hidden(self, False)


class Moderateable:
    """Moderator actions and moderation state."""

    capability: ClassVar[Capability] = Capability.MODERATEABLE

    async def approve(self) -> None:
        await actions.approve(self)

    async def remove(self) -> None:
        await actions.remove(self, spam=False)

    async def spam(self) -> None:
        """Remove the entity and train the spam filter on it."""
        await actions.remove(self, spam=True)

    async def distinguish(self, how: DistinguishKind | str = DistinguishKind.YES) -> None:
        await actions.distinguish(self, how)

    async def report(self, reason: str) -> None:
        """Report to the subreddit's moderators (100 characters maximum)."""
        await actions.report(self, reason)

    async def ignore_reports(self) -> None:
        await actions.set_ignore_reports(self, True)

    async def unignore_reports(self) -> None:
        await actions.set_ignore_reports(self, False)

    @property
    def is_distinguished(self) -> bool:
        return self.distinguished_by is not None

    @property
    def distinguished_by(self) -> str | None:
        """Who distinguished the entity (moderator, admin, special) or None."""
        return getattr(self, "distinguished", None)

    @property
    def is_stickied(self) -> bool:
        return bool(getattr(self, "stickied", False))


class Repliable:
    """Replying with a new comment or message."""

    capability: ClassVar[Capability] = Capability.REPLIABLE

    async def reply(self, text: str) -> Comment | Message:
        return await actions.reply(self, text)


class Gildable:
    """Giving gold to the entity."""

    capability: ClassVar[Capability] = Capability.GILDABLE

    async def gild(self) -> None:
        await actions.gild(self)


class Createable:
    """Creation timestamps as datetimes."""

    capability: ClassVar[Capability] = Capability.CREATEABLE

    @property
    def created(self) -> datetime | None:
        """Creation time in the server's local offset, as a naive datetime."""
        raw = getattr(self, "raw_created", None)
        if raw is None:
            return None
        return datetime.fromtimestamp(float(raw))

    @property
    def created_utc(self) -> datetime | None:
        return epoch_to_datetime(getattr(self, "raw_created_utc", None))


class Refreshable:
    """Re-fetching the entity and replacing its state in place."""

    capability: ClassVar[Capability] = Capability.REFRESHABLE

    async def refresh(self) -> Any:
        """Re-fetch the entity and update this object in place.

        Returns:
            The same object, for chaining

        Raises:
            NotFoundError: If the entity no longer exists
        """
        fresh = await self._fetch_fresh()
        self._replace_state(fresh)  # type: ignore[attr-defined]
        return self

    async def _fetch_fresh(self) -> Any:
        from ..models.listing import Listing

        client = actions.client_of(self)
        fullname = self.fullname  # type: ignore[attr-defined]
        data = await client.request_data("/api/info", "GET", {"id": fullname})
        listing = Listing.from_response(client, data)
        for item in listing:
            if getattr(item, "fullname", None) == fullname:
                return item
        raise NotFoundError(f"{fullname} not found")


class Inboxable:
    """Read/unread state for inbox items."""

    capability: ClassVar[Capability] = Capability.INBOXABLE

    async def mark_as_read(self) -> None:
        await actions.mark_read(self, True)

    async def mark_as_unread(self) -> None:
        await actions.mark_read(self, False)


class Editable:
    """Editing and deleting the author's own text."""

    capability: ClassVar[Capability] = Capability.EDITABLE

    async def edit(self, text: str) -> None:
        await actions.edit(self, text)

    async def delete(self) -> None:
        await actions.delete(self)
