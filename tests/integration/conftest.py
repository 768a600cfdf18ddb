"""Shared fixtures for integration tests."""

import os

import pytest
import pytest_asyncio

from neon.raw import Reddit

# Skip all integration tests unless RUN_NEONRAW_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_NEONRAW_NETWORK_TESTS") != "1",
    reason="Requires network access. Set RUN_NEONRAW_NETWORK_TESTS=1 to run",
)


@pytest_asyncio.fixture
async def reddit():
    """Client built from REDDIT_* credentials in the environment."""
    async with Reddit.from_env() as client:
        yield client
