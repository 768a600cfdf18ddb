"""User account entity."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..capability import Createable, Refreshable, actions
from ..config import DEFAULT_LIMIT
from ..core.enums import ThingKind
from ..core.exceptions import MalformedResponseError
from .base import Thing, alias
from .listing import Listing
from .multireddit import Multireddit
from .trophy import Trophy

if TYPE_CHECKING:
    from ..runtime.stream import Stream

USER_LISTINGS = ("overview", "comments", "submitted", "gilded", "upvoted", "downvoted", "hidden", "saved")


class User(Createable, Refreshable, Thing):
    """A user account.

    The API sends the username as ``name``; it is moved to ``username`` and
    ``name`` holds the fullname like every other Thing.
    """

    username: str
    link_karma: int | None = None
    comment_karma: int | None = None
    is_friend: bool | None = None
    is_gold: bool | None = None
    is_mod: bool | None = None
    is_employee: bool | None = None
    is_suspended: bool = False
    has_verified_email: bool | None = None
    hide_from_robots: bool | None = None
    icon_img: str | None = None

    is_friend_of_me = alias("is_friend")
    has_gold = alias("is_gold")
    is_moderator = alias("is_mod")
    has_verified_email_address = alias("has_verified_email")
    is_hidden_from_robots = alias("hide_from_robots")

    @classmethod
    def _prepare(cls, data: dict[str, Any]) -> dict[str, Any]:
        # is_suspended is only sent for suspended accounts
        data.setdefault("is_suspended", False)
        if "username" not in data:
            data["username"] = data.pop("name", None)
            if data.get("id") is not None:
                data["name"] = ThingKind.ACCOUNT.fullname(data["id"])
        return data

    async def _fetch_fresh(self) -> User:
        from .hydration import hydrate

        client = actions.client_of(self)
        fresh = hydrate(client, await client.request_data(f"/user/{self.username}/about"))
        if not isinstance(fresh, User):
            raise MalformedResponseError(f"Expected a user, got {type(fresh).__name__}")
        return fresh

    async def _listing(self, kind: str, limit: int, params: dict[str, Any]) -> Listing:
        return await actions.client_of(self).collect(f"/user/{self.username}/{kind}", params, limit)

    async def overview(self, limit: int = DEFAULT_LIMIT, **params: Any) -> Listing:
        return await self._listing("overview", limit, params)

    async def comments(self, limit: int = DEFAULT_LIMIT, **params: Any) -> Listing:
        return await self._listing("comments", limit, params)

    async def submitted(self, limit: int = DEFAULT_LIMIT, **params: Any) -> Listing:
        return await self._listing("submitted", limit, params)

    async def gilded(self, limit: int = DEFAULT_LIMIT, **params: Any) -> Listing:
        return await self._listing("gilded", limit, params)

    async def upvoted(self, limit: int = DEFAULT_LIMIT, **params: Any) -> Listing:
        return await self._listing("upvoted", limit, params)

    async def downvoted(self, limit: int = DEFAULT_LIMIT, **params: Any) -> Listing:
        return await self._listing("downvoted", limit, params)

    async def hidden(self, limit: int = DEFAULT_LIMIT, **params: Any) -> Listing:
        return await self._listing("hidden", limit, params)

    async def saved(self, limit: int = DEFAULT_LIMIT, **params: Any) -> Listing:
        return await self._listing("saved", limit, params)

    def stream(self, queue: str, **options: Any) -> Stream:
        """Stream new items from one of the user's listings.

        Args:
            queue: One of ``USER_LISTINGS``
            **options: Stream options (poll_interval, skip_existing, ...)
        """
        if queue not in USER_LISTINGS:
            raise ValueError(f"Unknown user listing: {queue!r}")
        return actions.client_of(self).stream(f"/user/{self.username}/{queue}", None, **options)

    async def give_gold(self, months: int) -> None:
        """Give the user 1 to 36 months of gold, then refresh."""
        await actions.act_and_refresh(self, "give_gold", f"/api/v1/gold/give/{self.username}", {"months": months})

    async def message(self, subject: str, text: str, from_subreddit: str | None = None) -> None:
        """Send the user a private message.

        Args:
            subject: Subject line (100 characters maximum)
            text: Markdown body
            from_subreddit: Send as this subreddit's moderators
        """
        params = {
            "api_type": "json",
            "from_sr": from_subreddit,
            "subject": subject,
            "text": text,
            "to": self.username,
        }
        await actions.post(self, "/api/compose", params)

    async def friend(self) -> None:
        await actions.client_of(self).request_data(
            f"/api/v1/me/friends/{self.username}", "PUT", body={"name": self.username}
        )

    async def unfriend(self) -> None:
        await actions.client_of(self).request_data(
            f"/api/v1/me/friends/{self.username}", "DELETE", {"id": self.fullname}
        )

    async def trophies(self) -> list[Trophy]:
        data = await actions.client_of(self).request_data(f"/api/v1/user/{self.username}/trophies")
        try:
            entries = data["data"]["trophies"] or []
        except (KeyError, TypeError) as e:
            raise MalformedResponseError(f"Unexpected trophies response: {data!r}") from e
        return [Trophy.hydrate(self.client, entry.get("data")) for entry in entries]

    async def multireddits(self) -> list[Multireddit]:
        """The user's public multireddits, without expanded subreddit data."""
        data = await actions.client_of(self).request_data(
            f"/api/multi/user/{self.username}", "GET", {"expand_srs": False}
        )
        if not isinstance(data, list):
            raise MalformedResponseError(f"Unexpected multireddit response: {data!r}")
        return [
            Multireddit.hydrate(self.client, entry.get("data") if isinstance(entry, dict) else entry)
            for entry in data
        ]
