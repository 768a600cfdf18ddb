"""HTTP client helper."""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

from ..config import DEFAULT_TIMEOUT
from ..core.exceptions import (
    APIError,
    AuthError,
    ForbiddenError,
    MalformedResponseError,
    NotFoundError,
    RateLimitError,
    ServerError,
    TransportError,
)

logger = logging.getLogger(__name__)


class HTTPClient:
    """Async HTTP client wrapper.

    Maps error statuses to the library's exception hierarchy and decodes JSON
    bodies. Network failures surface as TransportError.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.headers = dict(headers or {})
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout, headers=self.headers)
        return self._session

    def build_url(self, url: str) -> str:
        # If base_url is set and url is relative, combine them
        if self.base_url and not url.startswith("http"):
            return f"{self.base_url}{url}"
        return url

    async def request(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        data: Any | None = None,
        json: Any | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Issue a request and return the decoded JSON body.

        Empty bodies (204, or endpoints that answer with nothing) return an
        empty dict.
        """
        url = self.build_url(url)
        try:
            async with self.session.request(
                method.upper(),
                url,
                params=params,
                data=data,
                json=json,
                headers=headers,
            ) as response:
                if response.status >= 400:
                    text = await response.text()
                    raise _error_for(response.status, response.headers, text, url)
                if response.status == 204:
                    return {}
                body = await response.read()
                if not body.strip():
                    return {}
                try:
                    return await response.json(content_type=None)
                except ValueError as e:
                    raise MalformedResponseError(f"Non-JSON response from {url}") from e
        except aiohttp.ClientError as e:
            logger.warning("http_transport_error", extra={"url": url, "error": str(e)})
            raise TransportError(f"{method.upper()} {url} failed: {e}") from e
        except TimeoutError as e:
            raise TransportError(f"{method.upper()} {url} timed out") from e

    async def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """GET request."""
        return await self.request("GET", url, params=params, headers=headers)

    async def post(
        self,
        url: str,
        data: Any | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """POST request with a form body."""
        return await self.request("POST", url, data=data, headers=headers)

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()


def _error_for(status: int, headers: Any, text: str, url: str) -> APIError:
    message = f"HTTP {status} from {url}: {text[:200]}"
    if status == 401:
        return AuthError(message)
    if status == 403:
        return ForbiddenError(message)
    if status == 404:
        return NotFoundError(message)
    if status == 429:
        return RateLimitError(message, retry_after=_retry_after(headers))
    if status >= 500:
        return ServerError(message, status_code=status)
    return APIError(message, status_code=status)


def _retry_after(headers: Any) -> float:
    for key in ("Retry-After", "x-ratelimit-reset"):
        value = headers.get(key) if headers is not None else None
        if value is None:
            continue
        try:
            return float(value)
        except (TypeError, ValueError):
            continue
    return 60
