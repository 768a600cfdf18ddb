"""Moderator operations on a subreddit.

Split out of ``Subreddit`` to keep the browsing surface readable. Every
method requires the authenticated account to moderate the subreddit;
otherwise the API answers 403 and ForbiddenError propagates.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ..capability import actions
from ..config import DEFAULT_LIMIT
from ..core.exceptions import APIError, MalformedResponseError
from .listing import Listing
from .moderation import PrivilegedUser


class SubredditModeration:
    """Mixin for Subreddit. Relies on ``display_name`` and ``fullname``."""

    def _about(self, suffix: str) -> str:
        return f"/r/{self.display_name}/about/{suffix}"

    async def _collect(self, path: str, limit: int, params: dict[str, Any], item_type: Any = None) -> Listing:
        return await actions.client_of(self).collect(path, params, limit, item_type=item_type)

    # Listings

    async def modlog(self, limit: int = DEFAULT_LIMIT, **params: Any) -> Listing:
        """Moderation log, filterable with ``mod=`` and ``type=``."""
        return await self._collect(self._about("log"), limit, params)

    async def modmail(self, limit: int = DEFAULT_LIMIT, **params: Any) -> Listing:
        return await self._collect(self._about("message/inbox"), limit, params)

    async def reported(self, limit: int = DEFAULT_LIMIT, **params: Any) -> Listing:
        return await self._collect(self._about("reports"), limit, params)

    async def spam(self, limit: int = DEFAULT_LIMIT, **params: Any) -> Listing:
        return await self._collect(self._about("spam"), limit, params)

    async def modqueue(self, limit: int = DEFAULT_LIMIT, **params: Any) -> Listing:
        return await self._collect(self._about("modqueue"), limit, params)

    async def unmoderated(self, limit: int = DEFAULT_LIMIT, **params: Any) -> Listing:
        return await self._collect(self._about("unmoderated"), limit, params)

    async def edited(self, limit: int = DEFAULT_LIMIT, **params: Any) -> Listing:
        return await self._collect(self._about("edited"), limit, params)

    # User lists

    async def _users(self, kind: str, limit: int, params: dict[str, Any]) -> Listing:
        return await self._collect(self._about(kind), limit, params, item_type=PrivilegedUser)

    async def banned(self, limit: int = DEFAULT_LIMIT, **params: Any) -> Listing:
        return await self._users("banned", limit, params)

    async def muted(self, limit: int = DEFAULT_LIMIT, **params: Any) -> Listing:
        return await self._users("muted", limit, params)

    async def wikibanned(self, limit: int = DEFAULT_LIMIT, **params: Any) -> Listing:
        return await self._users("wikibanned", limit, params)

    async def contributors(self, limit: int = DEFAULT_LIMIT, **params: Any) -> Listing:
        return await self._users("contributors", limit, params)

    async def wikicontributors(self, limit: int = DEFAULT_LIMIT, **params: Any) -> Listing:
        return await self._users("wikicontributors", limit, params)

    async def moderators(self, limit: int = DEFAULT_LIMIT, **params: Any) -> Listing:
        return await self._users("moderators", limit, params)

    # Privileges

    async def accept_mod_invite(self) -> None:
        path = f"/r/{self.display_name}/api/accept_moderator_invite"
        await actions.act_and_refresh(self, "accept_mod_invite", path, {"api_type": "json"})

    async def leave_contributor(self) -> None:
        await actions.act_and_refresh(self, "leave_contributor", "/api/leavecontributor", {"id": self.fullname})  # type: ignore[attr-defined]

    async def leave_moderator(self) -> None:
        await actions.act_and_refresh(self, "leave_moderator", "/api/leavemoderator", {"id": self.fullname})  # type: ignore[attr-defined]

    # Styling

    async def upload_image(self, file_path: str | Path, file_type: str, image_name: str, upload_type: str) -> None:
        """Upload a subreddit image, then refresh.

        Args:
            file_path: Image file (500 KiB maximum)
            file_type: ``png`` or ``jpg``
            image_name: Name the stylesheet refers to the image by
            upload_type: ``img``, ``header``, ``icon`` or ``banner``
        """
        params = {"img_type": file_type, "name": image_name, "upload_type": upload_type}
        path = f"/r/{self.display_name}/api/upload_sr_img"
        with open(file_path, "rb") as handle:
            data = await actions.client_of(self).request_data(path, "POST", params, files={"file": handle})
        actions.check_json_errors(data)
        if isinstance(data, dict) and data.get("errors"):
            raise APIError(f"Image upload rejected: {data['errors']}", status_code=200)
        await actions.refresh_after(self, "upload_image")

    async def remove_banner(self) -> None:
        await self._remove_sr_image("banner")

    async def remove_header(self) -> None:
        await self._remove_sr_image("header")

    async def remove_icon(self) -> None:
        await self._remove_sr_image("icon")

    async def _remove_sr_image(self, kind: str) -> None:
        path = f"/r/{self.display_name}/api/delete_sr_{kind}"
        await actions.act_and_refresh(self, f"remove_{kind}", path, {"api_type": "json"})

    async def remove_image(self, name: str) -> None:
        path = f"/r/{self.display_name}/api/delete_sr_img"
        await actions.act_and_refresh(self, "remove_image", path, {"api_type": "json", "img_name": name})

    async def edit_stylesheet(self, css: str, reason: str | None = None) -> None:
        params = {"api_type": "json", "op": "save", "reason": reason, "stylesheet_contents": css}
        await actions.post(self, f"/r/{self.display_name}/api/subreddit_stylesheet", params)

    async def settings(self) -> dict[str, Any]:
        """Current subreddit settings as returned by ``about/edit``."""
        data = await actions.client_of(self).request_data(self._about("edit"))
        if not isinstance(data, dict) or not isinstance(data.get("data"), dict):
            raise MalformedResponseError(f"Unexpected settings response for {self.display_name}")
        return data["data"]
