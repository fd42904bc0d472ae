from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, patch

import pytest

from aps_auth.constants.auth_errors import AuthErrorCode
from aps_auth.core.exceptions import AppException
from aps_auth.oauth.client import (
    OAuth2Client,
    TokenRetrieveError,
    UserInfoError,
    parse_token_response,
)
from aps_auth.oauth.types import (
    OAuth2Config,
    OAuth2Endpoint,
    OAuth2Token,
    set_auth_url_param,
)

NOW = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


def _config(auth_url: str = "https://idp.example.com/authorize", **kwargs) -> OAuth2Config:
    return OAuth2Config(
        client_id=kwargs.pop("client_id", "id"),
        client_secret="secret",
        redirect_url=kwargs.pop("redirect_url", "https://app.example.com/cb"),
        endpoint=OAuth2Endpoint(auth_url=auth_url, token_url="https://idp.example.com/token"),
        **kwargs,
    )


class TestAuthCodeURL:

    def test_params_are_sorted_and_encoded(self):
        client = OAuth2Client(_config())
        url = client.auth_code_url("xyz", set_auth_url_param("prompt", "login"))
        assert url == (
            "https://idp.example.com/authorize?client_id=id&prompt=login"
            "&redirect_uri=https%3A%2F%2Fapp.example.com%2Fcb&response_type=code&state=xyz"
        )

    def test_existing_query_is_extended(self):
        client = OAuth2Client(_config("https://idp.example.com/authorize?tenant=t1"))
        url = client.auth_code_url("")
        assert url.startswith("https://idp.example.com/authorize?tenant=t1&client_id=id")

    def test_empty_redirect_is_omitted(self):
        client = OAuth2Client(_config(redirect_url=""))
        assert "redirect_uri" not in client.auth_code_url("")

    def test_extra_param_overrides_default(self):
        client = OAuth2Client(_config())
        url = client.auth_code_url("", set_auth_url_param("response_type", "token"))
        assert "response_type=token" in url
        assert "response_type=code" not in url


class TestParseTokenResponse:

    def test_success(self):
        body = {
            "access_token": "at",
            "refresh_token": "rt",
            "token_type": "Bearer",
            "expires_in": 3599,
        }
        token = parse_token_response(200, body, now=NOW)
        assert token.access_token == "at"
        assert token.refresh_token == "rt"
        assert token.expiry == NOW + timedelta(seconds=3599)
        assert token.raw == body

    def test_without_expiry(self):
        token = parse_token_response(200, {"access_token": "at"})
        assert token.expiry is None
        assert token.token_type == "Bearer"
        assert token.valid

    def test_error_status(self):
        with pytest.raises(TokenRetrieveError) as exc_info:
            parse_token_response(401, {"error": "invalid_client"})
        assert exc_info.value.status_code == 401
        assert "401" in str(exc_info.value)
        assert exc_info.value.code == AuthErrorCode.OAUTH_TOKEN_EXCHANGE_FAILED
        assert isinstance(exc_info.value, AppException)

    @pytest.mark.parametrize("body", [{}, {"access_token": ""}, "plain text"])
    def test_missing_access_token(self, body):
        with pytest.raises(TokenRetrieveError, match="missing access_token"):
            parse_token_response(200, body)


class TestTokenValidity:

    def test_empty_token_is_invalid(self):
        assert not OAuth2Token(access_token="").valid

    def test_expired_token_is_invalid(self):
        expiry = datetime.now(timezone.utc) - timedelta(seconds=1)
        assert not OAuth2Token(access_token="at", expiry=expiry).valid

    def test_token_about_to_expire_is_invalid(self):
        expiry = datetime.now(timezone.utc) + timedelta(seconds=5)
        assert not OAuth2Token(access_token="at", expiry=expiry).valid

    def test_fresh_token_is_valid(self):
        expiry = datetime.now(timezone.utc) + timedelta(hours=1)
        assert OAuth2Token(access_token="at", expiry=expiry).valid


class TestFetchJSON:

    @pytest.mark.asyncio
    async def test_success(self):
        client = OAuth2Client(_config())
        with patch.object(
            OAuth2Client, "_get_json", new=AsyncMock(return_value=(200, {"sub": "1"}))
        ):
            data = await client.fetch_json("https://idp.example.com/me", OAuth2Token(access_token="at"))
        assert data == {"sub": "1"}

    @pytest.mark.asyncio
    async def test_error_status(self):
        client = OAuth2Client(_config())
        with patch.object(
            OAuth2Client, "_get_json", new=AsyncMock(return_value=(500, "boom"))
        ):
            with pytest.raises(UserInfoError) as exc_info:
                await client.fetch_json("https://idp.example.com/me", OAuth2Token(access_token="at"))
        assert exc_info.value.body == "boom"
        assert exc_info.value.status_code == 500
        assert exc_info.value.code == AuthErrorCode.OAUTH_USER_INFO_FAILED
