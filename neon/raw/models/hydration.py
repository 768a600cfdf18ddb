"""Kind dispatch: turn ``{"kind", "data"}`` envelopes into entities."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from ..core.base import ClientLike
from ..core.enums import ThingKind
from ..core.exceptions import MalformedResponseError, NotFoundError
from .base import RedditObject
from .comment import Comment
from .message import Message
from .moderation import ModAction
from .more_comments import MoreComments
from .multireddit import Multireddit
from .submission import Submission
from .subreddit import Subreddit
from .trophy import Trophy
from .user import User
from .wiki import WikiPage

if TYPE_CHECKING:
    from .listing import Listing

KIND_MAP: dict[str, type[RedditObject]] = {
    ThingKind.COMMENT.value: Comment,
    ThingKind.ACCOUNT.value: User,
    ThingKind.LINK.value: Submission,
    ThingKind.MESSAGE.value: Message,
    ThingKind.SUBREDDIT.value: Subreddit,
    ThingKind.AWARD.value: Trophy,
    ThingKind.MORE.value: MoreComments,
    ThingKind.WIKI_PAGE.value: WikiPage,
    ThingKind.MOD_ACTION.value: ModAction,
    ThingKind.MULTIREDDIT.value: Multireddit,
}


def variant_for(kind: str) -> type[RedditObject]:
    """Get the entity class for a ``kind`` tag.

    Raises:
        MalformedResponseError: If the kind is unknown
    """
    try:
        return KIND_MAP[kind]
    except KeyError:
        raise MalformedResponseError(f"Unknown kind: {kind!r}") from None


def hydrate(client: ClientLike | None, envelope: Mapping[str, Any]) -> RedditObject | Listing:
    """Hydrate one envelope into the entity variant its ``kind`` names.

    Nested ``Listing`` envelopes become Listing objects.

    Raises:
        MalformedResponseError: If the envelope has no kind, an unknown kind
            or invalid data
    """
    if not isinstance(envelope, Mapping) or "kind" not in envelope:
        raise MalformedResponseError(f"Not a kind/data envelope: {envelope!r}")

    kind = envelope["kind"]
    if kind == ThingKind.LISTING.value:
        from .listing import Listing

        return Listing.from_response(client, envelope)
    return variant_for(kind).hydrate(client, envelope.get("data"))


async def fetch_by_fullname(client: ClientLike, fullname: str) -> RedditObject:
    """Fetch one entity through ``/api/info``.

    Raises:
        NotFoundError: If the API does not return the entity
    """
    from .listing import Listing

    data = await client.request_data("/api/info", "GET", {"id": fullname})
    for item in Listing.from_response(client, data):
        if getattr(item, "fullname", None) == fullname:
            return item
    raise NotFoundError(f"{fullname} not found")
