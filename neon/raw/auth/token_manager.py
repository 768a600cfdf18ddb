"""Serialized access-token lifecycle.

Architecture:
    TokenManager owns the one AccessToken a client uses. Requests ask it for
    a valid token; when the token is missing or expired, exactly one exchange
    is in flight at a time and every concurrent waiter reuses its result.

Design Decisions:
    - asyncio.Lock with a double check: the first waiter refreshes, later
      waiters find a fresh token once they get the lock and return it
    - In-place refresh: the same AccessToken object is updated, so anything
      holding a reference sees the new credential
"""

from __future__ import annotations

import asyncio
import logging
from typing import Protocol

from ..core.clock import Clock, SystemClock
from .access import AccessToken
from .authenticator import Authenticator

logger = logging.getLogger(__name__)


class TokenSource(Protocol):
    """What RESTExecutor needs to authorize requests."""

    async def get_token(self) -> AccessToken: ...

    async def invalidate(self) -> None: ...


class TokenManager:
    """Hands out a valid AccessToken, refreshing it at most once at a time."""

    def __init__(self, authenticator: Authenticator, clock: Clock | None = None) -> None:
        self._authenticator = authenticator
        self._clock = clock or SystemClock()
        self._token: AccessToken | None = None
        self._stale = False
        self._lock = asyncio.Lock()
        self.refresh_count = 0

    @property
    def token(self) -> AccessToken | None:
        """Current token without triggering an exchange."""
        return self._token

    def _needs_refresh(self) -> bool:
        return self._token is None or self._stale or self._token.is_expired(self._clock.now())

    async def get_token(self) -> AccessToken:
        """Return a valid token, authorizing or refreshing first if needed."""
        if not self._needs_refresh():
            assert self._token is not None
            return self._token

        async with self._lock:
            # Another waiter may have refreshed while we queued on the lock
            if self._needs_refresh():
                await self._refresh_locked()
            assert self._token is not None
            return self._token

    async def invalidate(self) -> None:
        """Force the next get_token() to refresh."""
        async with self._lock:
            self._stale = True

    async def _refresh_locked(self) -> None:
        now = self._clock.now()
        if self._token is None:
            self._token = await self._authenticator.authorize(now)
        else:
            data = await self._authenticator.renew()
            self._token.refresh(data, self._clock.now())
        self._stale = False
        self.refresh_count += 1
        logger.info(
            "token_refreshed",
            extra={
                "scope": self._token.scope,
                "expires_at": self._token.expires_at.isoformat(),
                "refresh_count": self.refresh_count,
            },
        )
