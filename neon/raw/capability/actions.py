"""Shared endpoint helpers behind the capability contracts.

Every capability method delegates here. Helpers only touch an entity's
fullname and owning client, never another capability's internals, so the
contracts compose freely.

Mutating helpers follow one pattern: perform the action, then refresh the
entity in place. An action failure propagates unchanged; a refresh failure
after a successful action raises StaleStateError so callers know the
mutation most likely took effect even though local state is stale.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ..core.base import ClientLike
from ..core.enums import Capability, DistinguishKind, VoteDirection
from ..core.exceptions import APIError, MalformedResponseError, RedditError, StaleStateError
from .registry import supports

logger = logging.getLogger(__name__)


def label_of(thing: Any) -> str:
    return getattr(thing, "fullname", None) or type(thing).__name__


def client_of(thing: Any) -> ClientLike:
    client = getattr(thing, "client", None)
    if client is None:
        raise RedditError(f"{type(thing).__name__} is not bound to a client")
    return client


def check_json_errors(data: Any) -> None:
    """Raise APIError for ``api_type=json`` responses that carry errors."""
    if not isinstance(data, Mapping):
        return
    payload = data.get("json")
    if not isinstance(payload, Mapping):
        return
    errors = payload.get("errors")
    if errors:
        message = "; ".join(": ".join(str(part) for part in error) for error in errors)
        raise APIError(message, status_code=200)


async def post(thing: Any, path: str, params: Mapping[str, Any]) -> Any:
    data = await client_of(thing).request_data(path, "POST", params)
    check_json_errors(data)
    return data


async def refresh_after(thing: Any, action: str) -> None:
    """Refresh ``thing`` after a successful ``action``.

    Variants that cannot refresh themselves are left as they are.
    """
    if not supports(thing, Capability.REFRESHABLE):
        return
    try:
        await thing.refresh()
    except RedditError as e:
        logger.warning(
            "refresh_after_action_failed",
            extra={"action": action, "target": label_of(thing), "error_message": str(e)},
        )
        raise StaleStateError(
            f"{action} succeeded on {label_of(thing)} but the refresh failed: {e}",
            action=action,
        ) from e


async def act_and_refresh(thing: Any, action: str, path: str, params: Mapping[str, Any]) -> None:
    await post(thing, path, params)
    await refresh_after(thing, action)


# Votable


async def vote(thing: Any, direction: VoteDirection) -> None:
    params = {"id": thing.fullname, "dir": direction.value}
    await act_and_refresh(thing, "vote", "/api/vote", params)


# Saveable


async def save(thing: Any, category: str | None = None) -> None:
    await act_and_refresh(thing, "save", "/api/save", {"id": thing.fullname, "category": category})


async def unsave(thing: Any) -> None:
    await act_and_refresh(thing, "unsave", "/api/unsave", {"id": thing.fullname})


async def set_hidden(thing: Any, hidden: bool) -> None:
    action = "hide" if hidden else "unhide"
    await act_and_refresh(thing, action, f"/api/{action}", {"id": thing.fullname})


# Moderateable


async def approve(thing: Any) -> None:
    await act_and_refresh(thing, "approve", "/api/approve", {"id": thing.fullname})


async def remove(thing: Any, spam: bool = False) -> None:
    action = "spam" if spam else "remove"
    await act_and_refresh(thing, action, "/api/remove", {"id": thing.fullname, "spam": spam})


async def distinguish(thing: Any, how: DistinguishKind | str) -> None:
    params = {"api_type": "json", "how": DistinguishKind(how).value, "id": thing.fullname}
    await act_and_refresh(thing, "distinguish", "/api/distinguish", params)


async def report(thing: Any, reason: str) -> None:
    params = {"api_type": "json", "reason": reason, "thing_id": thing.fullname}
    await post(thing, "/api/report", params)


async def set_ignore_reports(thing: Any, ignore: bool) -> None:
    path = "/api/ignore_reports" if ignore else "/api/unignore_reports"
    await post(thing, path, {"id": thing.fullname})


# Repliable


async def reply(thing: Any, text: str) -> Any:
    """Post a reply and return the hydrated new comment or message."""
    from ..models.hydration import hydrate

    params = {"api_type": "json", "text": text, "thing_id": thing.fullname}
    data = await post(thing, "/api/comment", params)
    try:
        created = data["json"]["data"]["things"][0]
    except (KeyError, IndexError, TypeError) as e:
        raise MalformedResponseError(f"Unexpected reply response: {data!r}") from e
    return hydrate(client_of(thing), created)


# Gildable


async def gild(thing: Any) -> None:
    await act_and_refresh(thing, "gild", f"/api/v1/gold/gild/{thing.fullname}", {})


# Inboxable


async def mark_read(thing: Any, read: bool) -> None:
    action = "read_message" if read else "unread_message"
    await post(thing, f"/api/{action}", {"id": thing.fullname})
    if supports(thing, Capability.REFRESHABLE):
        await refresh_after(thing, action)
    else:
        thing.new = not read


# Editable


async def edit(thing: Any, text: str) -> None:
    params = {"api_type": "json", "text": text, "thing_id": thing.fullname}
    await act_and_refresh(thing, "edit", "/api/editusertext", params)


async def delete(thing: Any) -> None:
    await act_and_refresh(thing, "delete", "/api/del", {"id": thing.fullname})
