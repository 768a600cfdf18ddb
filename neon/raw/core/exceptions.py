"""Custom exception hierarchy."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .enums import Capability


class RedditError(Exception):
    """Base exception for all library errors."""

    transient = False


class APIError(RedditError):
    """Error response from the Reddit API."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code


class AuthError(APIError):
    """Token is invalid, expired and unrefreshable, or the exchange failed.

    Fatal to the calling operation, not to the whole client.
    """

    def __init__(self, message: str, status_code: int | None = 401) -> None:
        super().__init__(message, status_code=status_code)


class ForbiddenError(AuthError):
    """Token is valid but lacks permission (scope revoked, not a moderator, ...)."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=403)


class NotFoundError(APIError):
    """Entity or page no longer exists."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=404)


class RateLimitError(APIError):
    """Rate limit exceeded.

    Surfaced rather than retried; ``retry_after`` is the server-indicated delay.
    """

    transient = True

    def __init__(self, message: str, retry_after: float = 60) -> None:
        super().__init__(message, status_code=429)
        self.retry_after = retry_after


class ServerError(APIError):
    """5xx response."""

    transient = True


class TransportError(RedditError):
    """Network-level failure (connection reset, DNS, timeout)."""

    transient = True


class MalformedResponseError(RedditError):
    """Response could not be hydrated (missing required field, unknown kind)."""

    pass


class CapabilityError(RedditError):
    """Capability is not declared by the entity variant."""

    def __init__(self, message: str, capability: Capability | None = None) -> None:
        super().__init__(message)
        self.capability = capability


class StaleStateError(RedditError):
    """A mutating action succeeded but the follow-up refresh failed.

    The mutation most likely took effect on the server; local state is stale.
    The refresh failure is chained as ``__cause__``.
    """

    def __init__(self, message: str, action: str) -> None:
        super().__init__(message)
        self.action = action
