"""OAuth2 token exchange against the Reddit token endpoint."""

from __future__ import annotations

import base64
import logging
from datetime import datetime
from typing import Any

from ..config import REVOKE_PATH, TOKEN_PATH, WWW_BASE_URL, Credentials
from ..core.exceptions import APIError, AuthError
from ..utils.http import HTTPClient
from .access import AccessToken

logger = logging.getLogger(__name__)


class Authenticator:
    """Performs token exchanges for one set of credentials.

    Grant selection:
        - password grant when a username and password are configured (script apps)
        - refresh_token grant when only a refresh token is known (web/installed apps)
        - client_credentials grant otherwise (application-only access)

    The refresh token returned by the first exchange is remembered here rather
    than on the AccessToken, so total replacement of the token on refresh
    never loses it.
    """

    def __init__(self, credentials: Credentials, http: HTTPClient | None = None) -> None:
        self._credentials = credentials
        self._http = http or HTTPClient(
            base_url=WWW_BASE_URL,
            headers={"User-Agent": credentials.user_agent},
        )
        self._refresh_token = credentials.refresh_token

    @property
    def refresh_token(self) -> str | None:
        return self._refresh_token

    async def authorize(self, now: datetime) -> AccessToken:
        """Run the initial exchange and return a new token."""
        data = await self._exchange(self._initial_grant())
        return AccessToken.from_response(data, now)

    async def renew(self) -> dict[str, Any]:
        """Fetch fresh token data for ``AccessToken.refresh``.

        Uses the refresh token when one is known, otherwise repeats the
        initial grant.
        """
        if self._refresh_token is not None:
            grant = {"grant_type": "refresh_token", "refresh_token": self._refresh_token}
        else:
            grant = self._initial_grant()
        return await self._exchange(grant)

    async def revoke(self, token: AccessToken) -> None:
        """Revoke an access token server side."""
        await self._post(
            REVOKE_PATH,
            {"token": token.access_token, "token_type_hint": "access_token"},
        )

    async def close(self) -> None:
        await self._http.close()

    def _initial_grant(self) -> dict[str, str]:
        creds = self._credentials
        if creds.has_password_grant:
            return {
                "grant_type": "password",
                "username": creds.username or "",
                "password": creds.password or "",
            }
        if creds.refresh_token is not None:
            return {"grant_type": "refresh_token", "refresh_token": creds.refresh_token}
        return {"grant_type": "client_credentials"}

    async def _exchange(self, grant: dict[str, str]) -> dict[str, Any]:
        data = await self._post(TOKEN_PATH, grant)
        if not isinstance(data, dict) or "error" in data:
            error = data.get("error") if isinstance(data, dict) else data
            raise AuthError(f"Token exchange failed ({grant['grant_type']}): {error}")
        if data.get("refresh_token"):
            self._refresh_token = data["refresh_token"]
        logger.debug(
            "token_exchanged",
            extra={"grant_type": grant["grant_type"], "scope": data.get("scope")},
        )
        return data

    async def _post(self, path: str, form: dict[str, str]) -> Any:
        try:
            return await self._http.post(path, data=form, headers={"Authorization": self._basic_authorization()})
        except AuthError:
            raise
        except APIError as e:
            # The token endpoint answers bad credentials with 400
            if e.status_code == 400:
                raise AuthError(str(e), status_code=400) from e
            raise

    def _basic_authorization(self) -> str:
        secret = self._credentials.client_secret or ""
        encoded = base64.b64encode(f"{self._credentials.client_id}:{secret}".encode()).decode()
        return f"Basic {encoded}"
