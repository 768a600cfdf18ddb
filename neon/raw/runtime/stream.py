"""Live polling of a feed's head with deduplication.

Architecture:
    A Stream repeatedly fetches the first page of a listing endpoint and
    emits the items it has not seen before. Seen fullnames are kept in a
    bounded, insertion-ordered set; the oldest entries are evicted once the
    set is full.

Design Decisions:
    - Only the head page is polled (no ``after`` cursor), so a burst of more
      than one page between two polls loses the overflow
    - The seen-set is bounded to keep memory constant for long-running
      streams; an item evicted from it may be emitted again if it reappears
      on the head page
    - The clock's ``sleep`` between polls is the only suspension point
      besides the fetch itself, which makes streams fully drivable in tests
    - Transient errors (rate limits, 5xx, transport) become ERROR events and
      polling continues; anything else ends the stream by raising

See Also:
    - Paginator: cursor-following collection
    - StreamEvent: event envelope produced by ``events()``
"""

from __future__ import annotations

from collections import OrderedDict
from collections.abc import AsyncIterator, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from ..config import DEFAULT_POLL_INTERVAL, DEFAULT_SEEN_LIMIT, MAX_PAGE_LIMIT
from ..core.base import ClientLike
from ..core.clock import Clock, SystemClock
from ..core.enums import StreamEventType
from ..core.exceptions import RedditError
from ..models.base import RedditObject
from .paginator import Paginator
from .telemetry import log_poll_completed, log_poll_error


class SeenSet:
    """Insertion-ordered set of fullnames with FIFO eviction."""

    def __init__(self, limit: int = DEFAULT_SEEN_LIMIT, initial: Iterable[str] = ()) -> None:
        if limit < 1:
            raise ValueError(f"seen limit must be positive, got {limit}")
        self._limit = limit
        self._entries: OrderedDict[str, None] = OrderedDict()
        for key in initial:
            self.add(key)

    @property
    def limit(self) -> int:
        return self._limit

    def add(self, key: str) -> None:
        if key in self._entries:
            return
        self._entries[key] = None
        while len(self._entries) > self._limit:
            self._entries.popitem(last=False)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)


@dataclass(frozen=True)
class StreamEvent:
    """One stream event.

    Attributes:
        type: ITEM or ERROR
        item: Newly seen entity (ITEM only)
        error: Transient failure of a poll (ERROR only)
        poll_index: Zero-based index of the poll that produced the event
    """

    type: StreamEventType
    item: RedditObject | None = None
    error: RedditError | None = None
    poll_index: int = 0


class Stream:
    """Async iterator over new items at the head of a feed.

    Iterating a stream yields entities; ``events()`` yields StreamEvents and
    also surfaces transient poll failures. A stream is consumed once.
    """

    def __init__(
        self,
        client: ClientLike,
        path: str,
        params: Mapping[str, Any] | None = None,
        *,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        seen_limit: int = DEFAULT_SEEN_LIMIT,
        resume_from: Iterable[str] = (),
        reverse: bool = False,
        skip_existing: bool = False,
        page_limit: int = MAX_PAGE_LIMIT,
        clock: Clock | None = None,
    ) -> None:
        """Initialize a stream.

        Args:
            client: Owning client
            path: Listing endpoint to poll
            params: Extra query parameters
            poll_interval: Seconds to wait between polls
            seen_limit: Capacity of the seen-set
            resume_from: Fullnames already handled by a previous run
            reverse: Scan each page in reverse server order
            skip_existing: Record the first poll without emitting it
            page_limit: Size of the head page to request
            clock: Time source (defaults to the system clock)
        """
        if poll_interval < 0:
            raise ValueError(f"poll_interval must not be negative, got {poll_interval}")
        self._paginator = Paginator(client)
        self._path = path
        self._params = dict(params or {})
        self._poll_interval = poll_interval
        self._seen = SeenSet(seen_limit, resume_from)
        self._reverse = reverse
        self._skip_existing = skip_existing
        self._page_limit = min(page_limit, MAX_PAGE_LIMIT)
        self._clock = clock or SystemClock()
        self._stopped = False

    @property
    def path(self) -> str:
        return self._path

    @property
    def seen(self) -> SeenSet:
        return self._seen

    @property
    def stopped(self) -> bool:
        return self._stopped

    def stop(self) -> None:
        """Stop polling; results of a poll already in flight are discarded."""
        self._stopped = True

    def __aiter__(self) -> AsyncIterator[RedditObject]:
        return self._items()

    async def _items(self) -> AsyncIterator[RedditObject]:
        async for event in self.events():
            if event.type is StreamEventType.ITEM and event.item is not None:
                yield event.item

    async def events(self) -> AsyncIterator[StreamEvent]:
        """Poll until stopped, yielding ITEM and ERROR events.

        Raises:
            AuthError, ForbiddenError, NotFoundError, MalformedResponseError:
                Non-transient poll failures end the stream
        """
        poll_index = 0
        while not self._stopped:
            if poll_index > 0:
                await self._clock.sleep(self._poll_interval)
                if self._stopped:
                    return

            try:
                page = await self._paginator.fetch_page(
                    self._path, {**self._params, "limit": self._page_limit}
                )
            except RedditError as e:
                if self._stopped:
                    return
                log_poll_error(
                    path=self._path,
                    poll_index=poll_index,
                    error_type=type(e).__name__,
                    error_message=str(e),
                    transient=e.transient,
                )
                if not e.transient:
                    raise
                yield StreamEvent(StreamEventType.ERROR, error=e, poll_index=poll_index)
                poll_index += 1
                continue

            if self._stopped:
                return

            emit = not (self._skip_existing and poll_index == 0)
            items = list(reversed(page)) if self._reverse else list(page)
            emitted = 0
            for item in items:
                # items after a stop stay unseen so a saved seen-set can resume them
                if self._stopped:
                    return
                key = getattr(item, "fullname", None)
                if key is not None:
                    if key in self._seen:
                        continue
                    self._seen.add(key)
                if emit:
                    emitted += 1
                    yield StreamEvent(StreamEventType.ITEM, item=item, poll_index=poll_index)

            log_poll_completed(path=self._path, poll_index=poll_index, fetched=len(page), emitted=emitted)
            poll_index += 1
