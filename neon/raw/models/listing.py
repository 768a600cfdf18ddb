"""Listing: one page (or an accumulation of pages) of a cursor feed."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any, overload

from ..core.base import ClientLike
from ..core.enums import ThingKind
from ..core.exceptions import MalformedResponseError
from .base import RedditObject

_LISTING_KINDS = frozenset({ThingKind.LISTING.value, ThingKind.USER_LIST.value})


def _cursor(value: Any) -> str | None:
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise MalformedResponseError(f"Invalid listing cursor: {value!r}")
    return value


class Listing(Sequence[RedditObject]):
    """Ordered entities in server order plus ``before``/``after`` cursors.

    ``after is None`` means the feed is exhausted. Listings are read-only to
    callers; the paginator grows them through ``_extend``.
    """

    def __init__(
        self,
        children: Iterable[RedditObject] = (),
        *,
        before: str | None = None,
        after: str | None = None,
    ) -> None:
        self._children: list[RedditObject] = list(children)
        self._before = before
        self._after = after

    @classmethod
    def from_response(
        cls,
        client: ClientLike | None,
        data: Any,
        item_type: type[RedditObject] | None = None,
    ) -> Listing:
        """Build a Listing from a ``Listing``/``UserList`` envelope.

        Args:
            client: Client the hydrated children are bound to
            data: ``{"kind": "Listing", "data": {"children": [...], ...}}``
            item_type: Hydrate every child as this class instead of
                dispatching on its kind (user lists carry bare mappings)

        Raises:
            MalformedResponseError: If the payload is not a listing
        """
        from .hydration import hydrate

        if not isinstance(data, Mapping) or data.get("kind") not in _LISTING_KINDS:
            raise MalformedResponseError(f"Expected a Listing, got {_describe(data)}")
        body = data.get("data")
        if not isinstance(body, Mapping):
            raise MalformedResponseError("Listing has no data object")
        children = body.get("children") or []
        if not isinstance(children, list):
            raise MalformedResponseError("Listing children is not a list")

        items: list[RedditObject] = []
        for child in children:
            if item_type is not None:
                raw = child.get("data", child) if isinstance(child, Mapping) and "kind" in child else child
                items.append(item_type.hydrate(client, raw))
            else:
                items.append(hydrate(client, child))  # type: ignore[arg-type]
        return cls(items, before=_cursor(body.get("before")), after=_cursor(body.get("after")))

    @property
    def before(self) -> str | None:
        return self._before

    @property
    def after(self) -> str | None:
        return self._after

    @overload
    def __getitem__(self, index: int) -> RedditObject: ...

    @overload
    def __getitem__(self, index: slice) -> list[RedditObject]: ...

    def __getitem__(self, index: int | slice) -> RedditObject | list[RedditObject]:
        return self._children[index]

    def __len__(self) -> int:
        return len(self._children)

    def __iter__(self) -> Iterator[RedditObject]:
        return iter(self._children)

    def __repr__(self) -> str:
        return f"Listing(items={len(self._children)}, before={self._before!r}, after={self._after!r})"

    def _extend(self, items: Iterable[RedditObject], after: str | None) -> None:
        if not self._children and self._before is None and isinstance(items, Listing):
            self._before = items.before
        self._children.extend(items)
        self._after = after


def _describe(data: Any) -> str:
    if isinstance(data, Mapping):
        return f"kind={data.get('kind')!r}"
    return type(data).__name__
