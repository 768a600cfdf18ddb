"""Injectable time source.

Token expiry and stream poll intervals are the only timing concerns of the
core; both go through a Clock so tests can drive them deterministically.
"""

from __future__ import annotations

import asyncio
from datetime import UTC, datetime
from typing import Protocol


class Clock(Protocol):
    """Protocol for time sources."""

    def now(self) -> datetime:
        """Current instant (timezone-aware, UTC)."""
        ...

    async def sleep(self, seconds: float) -> None:
        """Suspend the caller for ``seconds``."""
        ...


class SystemClock:
    """Wall clock backed by ``datetime.now`` and ``asyncio.sleep``."""

    def now(self) -> datetime:
        return datetime.now(UTC)

    async def sleep(self, seconds: float) -> None:
        await asyncio.sleep(seconds)


def epoch_to_datetime(value: float | None) -> datetime | None:
    """Convert unix seconds to an aware UTC datetime."""
    if value is None:
        return None
    return datetime.fromtimestamp(float(value), tz=UTC)
