"""OAuth2 access token with expiry tracking."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any

from ..config import EXPIRY_MARGIN_SECONDS
from ..core.exceptions import MalformedResponseError


@dataclass
class AccessToken:
    """Bearer credential returned by the token endpoint.

    The token expires ``EXPIRY_MARGIN_SECONDS`` before the lifetime the server
    reports, so requests issued right at the edge do not race the auth
    server's own clock and come back 401.

    Instances are mutated in place by ``refresh`` so every holder of the
    object observes the new credential.

    Attributes:
        access_token: The bearer token
        token_type: Token type (``bearer``)
        scope: Space separated scopes the token is valid for
        expires_in: Lifetime in seconds as issued by the server
        expires_at: Instant after which the token counts as expired
        refresh_token: Present for permanent web/installed grants
    """

    access_token: str
    token_type: str
    scope: str
    expires_in: int
    expires_at: datetime
    refresh_token: str | None = None

    @classmethod
    def from_response(cls, data: dict[str, Any], now: datetime) -> AccessToken:
        """Create a token from a token-endpoint response issued at ``now``."""
        fields = _parse(data, now)
        return cls(**fields)

    def is_expired(self, now: datetime) -> bool:
        return now > self.expires_at

    def refresh(self, data: dict[str, Any], now: datetime) -> None:
        """Replace every field with the contents of a fresh response.

        This is a total replacement: fields missing from ``data`` are reset,
        not carried over.
        """
        for name, value in _parse(data, now).items():
            setattr(self, name, value)

    @property
    def authorization(self) -> str:
        """Value for the ``Authorization`` header."""
        return f"{self.token_type} {self.access_token}"


def _parse(data: dict[str, Any], now: datetime) -> dict[str, Any]:
    try:
        access_token = data["access_token"]
        expires_in = int(data["expires_in"])
    except (KeyError, TypeError, ValueError) as e:
        raise MalformedResponseError(f"Invalid token response: {e}") from e

    return {
        "access_token": access_token,
        "token_type": data.get("token_type") or "bearer",
        "scope": data.get("scope") or "",
        "expires_in": expires_in,
        "expires_at": now + timedelta(seconds=expires_in - EXPIRY_MARGIN_SECONDS),
        "refresh_token": data.get("refresh_token"),
    }
