"""Unit tests for TokenManager lazy authorization and serialized refresh."""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from neon.raw import AccessToken, TokenManager


def _authenticator(payloads, clock):
    authenticator = MagicMock()
    authenticator.authorize = AsyncMock(
        side_effect=lambda now: AccessToken.from_response(payloads.token("first"), now)
    )
    authenticator.renew = AsyncMock(return_value=payloads.token("second"))
    return authenticator


class TestTokenManager:
    """Test TokenManager lifecycle."""

    @pytest.mark.asyncio
    async def test_authorizes_lazily_once(self, payloads, clock):
        authenticator = _authenticator(payloads, clock)
        manager = TokenManager(authenticator, clock)
        assert manager.token is None

        first = await manager.get_token()
        second = await manager.get_token()

        assert first is second
        assert first.access_token == "first"
        authenticator.authorize.assert_awaited_once()
        authenticator.renew.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_refreshes_expired_token_in_place(self, payloads, clock):
        authenticator = _authenticator(payloads, clock)
        manager = TokenManager(authenticator, clock)
        token = await manager.get_token()

        clock.advance(3600)
        refreshed = await manager.get_token()

        assert refreshed is token
        assert token.access_token == "second"
        assert manager.refresh_count == 2

    @pytest.mark.asyncio
    async def test_concurrent_callers_share_one_refresh(self, payloads, clock):
        authenticator = _authenticator(payloads, clock)
        gate = asyncio.Event()

        async def slow_renew():
            await gate.wait()
            return payloads.token("second")

        authenticator.renew = AsyncMock(side_effect=slow_renew)
        manager = TokenManager(authenticator, clock)
        token = await manager.get_token()
        clock.advance(3600)

        tasks = [asyncio.create_task(manager.get_token()) for _ in range(5)]
        await asyncio.sleep(0)
        gate.set()
        results = await asyncio.gather(*tasks)

        assert authenticator.renew.await_count == 1
        assert all(result is token for result in results)
        assert token.access_token == "second"

    @pytest.mark.asyncio
    async def test_invalidate_forces_refresh(self, payloads, clock):
        authenticator = _authenticator(payloads, clock)
        manager = TokenManager(authenticator, clock)
        await manager.get_token()

        await manager.invalidate()
        token = await manager.get_token()

        assert token.access_token == "second"
        authenticator.renew.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_token_refreshed_is_logged(self, payloads, clock, caplog):
        manager = TokenManager(_authenticator(payloads, clock), clock)
        with caplog.at_level("INFO", logger="neon.raw.auth.token_manager"):
            await manager.get_token()
        assert any(record.message == "token_refreshed" for record in caplog.records)
