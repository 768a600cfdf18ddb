"""Shared client constants and configuration containers.

This module centralizes URLs, paging limits and stream defaults so the
client, the auth layer and the runtime can stay small and focused.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

# REST base URLs
# Authenticated calls go to the oauth host, token exchange to the www host
OAUTH_BASE_URL = "https://oauth.reddit.com"
WWW_BASE_URL = "https://www.reddit.com"

TOKEN_PATH = "/api/v1/access_token"
REVOKE_PATH = "/api/v1/revoke_token"

DEFAULT_USER_AGENT = "python:neon-raw:0.1.0"

# Listing endpoints cap a single page at 100 children
MAX_PAGE_LIMIT = 100
DEFAULT_LIMIT = 25

# Tokens are treated as expired this many seconds before the server says so
EXPIRY_MARGIN_SECONDS = 10

DEFAULT_POLL_INTERVAL = 5.0
DEFAULT_SEEN_LIMIT = 1000

DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class Credentials:
    """OAuth2 application credentials.

    Attributes:
        client_id: Application id issued by Reddit
        client_secret: Application secret (None for installed apps)
        username: Account name for the script (password) grant
        password: Account password for the script (password) grant
        refresh_token: Long-lived refresh token for web/installed apps
        user_agent: User-Agent sent with every request
    """

    client_id: str
    client_secret: str | None = None
    username: str | None = None
    password: str | None = None
    refresh_token: str | None = None
    user_agent: str = DEFAULT_USER_AGENT

    @property
    def has_password_grant(self) -> bool:
        return self.username is not None and self.password is not None

    @classmethod
    def from_env(cls, prefix: str = "REDDIT_") -> Credentials:
        """Build credentials from ``REDDIT_*`` environment variables.

        Raises:
            KeyError: If ``REDDIT_CLIENT_ID`` is not set
        """
        env = os.environ
        return cls(
            client_id=env[f"{prefix}CLIENT_ID"],
            client_secret=env.get(f"{prefix}CLIENT_SECRET"),
            username=env.get(f"{prefix}USERNAME"),
            password=env.get(f"{prefix}PASSWORD"),
            refresh_token=env.get(f"{prefix}REFRESH_TOKEN"),
            user_agent=env.get(f"{prefix}USER_AGENT", DEFAULT_USER_AGENT),
        )


@dataclass(frozen=True)
class ClientConfig:
    """Tunables for a client instance."""

    oauth_base_url: str = OAUTH_BASE_URL
    www_base_url: str = WWW_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    poll_interval: float = DEFAULT_POLL_INTERVAL
    seen_limit: int = DEFAULT_SEEN_LIMIT
    default_params: dict[str, str] = field(default_factory=lambda: {"raw_json": "1"})
