"""Authorized REST request executor."""

from __future__ import annotations

import json
from collections.abc import Mapping
from enum import Enum
from time import perf_counter
from typing import IO, Any

import aiohttp

from ...auth.token_manager import TokenSource
from ...config import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, OAUTH_BASE_URL
from ...core.exceptions import AuthError
from ...utils.http import HTTPClient
from ..telemetry import log_request_completed

_BODY_METHODS = {"POST", "PUT", "PATCH", "DELETE"}


class RESTExecutor:
    """RequestExecutor backed by aiohttp.

    Each call asks the token source for a valid token and sends it as a bearer
    header. GET parameters go in the query string; for POST/PUT/PATCH/DELETE
    the parameters are form encoded unless a JSON ``body`` or ``files`` are
    given. A 401 invalidates the token once and retries the call; a second
    401 surfaces as AuthError. Uploads are rewound before the retry, and a
    401 on an upload that cannot seek is raised without retrying.
    """

    def __init__(
        self,
        tokens: TokenSource,
        *,
        base_url: str = OAUTH_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT,
        default_params: Mapping[str, str] | None = None,
        http: HTTPClient | None = None,
    ) -> None:
        self._tokens = tokens
        self._http = http or HTTPClient(
            base_url=base_url,
            timeout=timeout,
            headers={"User-Agent": user_agent},
        )
        self._default_params = dict(default_params or {"raw_json": "1"})

    async def execute(
        self,
        path: str,
        method: str = "GET",
        params: Mapping[str, Any] | None = None,
        body: Any | None = None,
        files: Mapping[str, IO[bytes]] | None = None,
    ) -> Any:
        method = method.upper()
        try:
            return await self._send(path, method, params, body, files)
        except AuthError as e:
            if e.status_code != 401:
                raise
            if files and not _rewind(files):
                raise
            await self._tokens.invalidate()
            return await self._send(path, method, params, body, files)

    async def _send(
        self,
        path: str,
        method: str,
        params: Mapping[str, Any] | None,
        body: Any | None,
        files: Mapping[str, IO[bytes]] | None,
    ) -> Any:
        token = await self._tokens.get_token()
        headers = {"Authorization": token.authorization}
        cleaned = _clean(params)

        query: dict[str, Any] = dict(self._default_params)
        form: Any | None = None
        payload: Any | None = None

        if method not in _BODY_METHODS:
            query.update(cleaned)
        elif files:
            form = aiohttp.FormData()
            for key, value in cleaned.items():
                form.add_field(key, str(value))
            for key, handle in files.items():
                form.add_field(key, handle, filename=getattr(handle, "name", key))
        elif body is not None:
            query.update(cleaned)
            payload = json.loads(body) if isinstance(body, str) else body
        else:
            form = cleaned

        start = perf_counter()
        data = await self._http.request(
            method,
            path,
            params=query,
            data=form,
            json=payload,
            headers=headers,
        )
        log_request_completed(
            method=method,
            path=path,
            latency_ms=(perf_counter() - start) * 1000.0,
        )
        return data

    async def close(self) -> None:
        await self._http.close()


def _clean(params: Mapping[str, Any] | None) -> dict[str, Any]:
    """Drop None values and encode booleans the way the API expects."""
    if not params:
        return {}
    cleaned: dict[str, Any] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, Enum):
            value = value.value
        if isinstance(value, bool):
            value = "true" if value else "false"
        cleaned[key] = value
    return cleaned


def _rewind(files: Mapping[str, IO[bytes]]) -> bool:
    """Seek every upload back to its start; False if one cannot seek."""
    for handle in files.values():
        seekable = getattr(handle, "seekable", None)
        if seekable is None or not seekable():
            return False
        handle.seek(0)
    return True
