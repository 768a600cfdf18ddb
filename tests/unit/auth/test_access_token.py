"""Unit tests for AccessToken expiry and in-place refresh."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from neon.raw import AccessToken, MalformedResponseError

ISSUED = datetime(2024, 1, 1, 12, 0, tzinfo=UTC)


def _response(**overrides):
    data = {"access_token": "abc", "token_type": "bearer", "expires_in": 3600, "scope": "read"}
    data.update(overrides)
    return data


class TestAccessTokenExpiry:
    """Expiry applies a ten second safety margin."""

    def test_expires_at_subtracts_margin(self):
        token = AccessToken.from_response(_response(), ISSUED)
        assert token.expires_at == ISSUED + timedelta(seconds=3590)

    def test_not_expired_inside_margin_boundary(self):
        token = AccessToken.from_response(_response(), ISSUED)
        assert not token.is_expired(ISSUED + timedelta(seconds=3589))
        assert not token.is_expired(ISSUED + timedelta(seconds=3590))

    def test_expired_after_margin(self):
        token = AccessToken.from_response(_response(), ISSUED)
        assert token.is_expired(ISSUED + timedelta(seconds=3591))

    def test_authorization_header(self):
        token = AccessToken.from_response(_response(), ISSUED)
        assert token.authorization == "bearer abc"


class TestAccessTokenRefresh:
    """refresh() replaces every field on the same object."""

    def test_refresh_updates_in_place(self):
        token = AccessToken.from_response(_response(refresh_token="r1"), ISSUED)
        held = token
        later = ISSUED + timedelta(hours=2)

        token.refresh(_response(access_token="xyz", expires_in=60, scope="identity"), later)

        assert held is token
        assert token.access_token == "xyz"
        assert token.scope == "identity"
        assert token.expires_at == later + timedelta(seconds=50)
        assert not token.is_expired(later)

    def test_refresh_is_total_replacement(self):
        token = AccessToken.from_response(_response(refresh_token="r1"), ISSUED)
        token.refresh(_response(), ISSUED)
        assert token.refresh_token is None

    @pytest.mark.parametrize("missing", ["access_token", "expires_in"])
    def test_missing_required_field_raises(self, missing):
        data = _response()
        del data[missing]
        with pytest.raises(MalformedResponseError):
            AccessToken.from_response(data, ISSUED)

    def test_failed_refresh_keeps_old_state(self):
        token = AccessToken.from_response(_response(), ISSUED)
        with pytest.raises(MalformedResponseError):
            token.refresh({"token_type": "bearer"}, ISSUED)
        assert token.access_token == "abc"
