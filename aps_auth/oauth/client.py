import logging
from datetime import datetime, timedelta, timezone
from typing import Any
from urllib.parse import urlencode

import aiohttp

from aps_auth.constants.auth_errors import AuthErrorCode
from aps_auth.core.exceptions import AppException
from aps_auth.oauth.types import AuthUrlParam, OAuth2Config, OAuth2Token

logger = logging.getLogger(__name__)


class TokenRetrieveError(AppException):
    def __init__(self, status_code: int, body: Any, message: str | None = None):
        self.body = body
        super().__init__(
            code=AuthErrorCode.OAUTH_TOKEN_EXCHANGE_FAILED,
            message=message
            or f"oauth2: cannot fetch token: {status_code} Response: {body}",
            status_code=status_code,
        )


class UserInfoError(AppException):
    def __init__(self, status_code: int, body: Any):
        self.body = body
        super().__init__(
            code=AuthErrorCode.OAUTH_USER_INFO_FAILED,
            message=f"oauth2: cannot fetch user info: {status_code} Response: {body}",
            status_code=status_code,
        )


class OAuth2Client:
    """Authorization-code flow against the endpoints of an ``OAuth2Config``.

    The client authenticates to the token endpoint with HTTP basic auth and
    opens a short-lived aiohttp session per request.
    """

    def __init__(self, config: OAuth2Config, timeout: float = 30.0):
        self._config = config
        self._timeout = aiohttp.ClientTimeout(total=timeout)

    def auth_code_url(self, state: str, *options: AuthUrlParam) -> str:
        params = {
            "response_type": "code",
            "client_id": self._config.client_id,
        }
        if self._config.redirect_url:
            params["redirect_uri"] = self._config.redirect_url
        if self._config.scopes:
            params["scope"] = " ".join(self._config.scopes)
        if state:
            params["state"] = state
        for option in options:
            params[option.key] = option.value

        auth_url = self._config.endpoint.auth_url
        separator = "&" if "?" in auth_url else "?"
        url = f"{auth_url}{separator}{urlencode(sorted(params.items()))}"
        logger.debug(f"Built authorization URL with params {sorted(params)}")
        return url

    async def exchange(self, code: str) -> OAuth2Token:
        data = {"grant_type": "authorization_code", "code": code}
        if self._config.redirect_url:
            data["redirect_uri"] = self._config.redirect_url
        logger.debug(f"Exchanging authorization code at {self._config.endpoint.token_url}")
        return await self._retrieve_token(data)

    async def refresh(self, refresh_token: str) -> OAuth2Token:
        data = {"grant_type": "refresh_token", "refresh_token": refresh_token}
        logger.debug(f"Refreshing token at {self._config.endpoint.token_url}")
        token = await self._retrieve_token(data)
        if not token.refresh_token:
            token.refresh_token = refresh_token
        return token

    async def fetch_json(self, url: str, token: OAuth2Token) -> dict[str, Any]:
        headers = {
            "Authorization": token.authorization_header,
            "Accept": "application/json",
        }
        status_code, body = await self._get_json(url, headers)
        if not 200 <= status_code < 300:
            logger.error(f"Request to {url} failed with status {status_code}")
            raise UserInfoError(status_code, body)
        return body

    async def _retrieve_token(self, data: dict[str, str]) -> OAuth2Token:
        status_code, body = await self._post_form(
            self._config.endpoint.token_url, data
        )
        return parse_token_response(status_code, body)

    async def _post_form(
        self, url: str, data: dict[str, str]
    ) -> tuple[int, Any]:
        auth = aiohttp.BasicAuth(self._config.client_id, self._config.client_secret)
        headers = {"Accept": "application/json"}
        async with aiohttp.ClientSession(timeout=self._timeout) as client:
            async with client.post(url, data=data, auth=auth, headers=headers) as response:
                return response.status, await _read_body(response)

    async def _get_json(
        self, url: str, headers: dict[str, str]
    ) -> tuple[int, Any]:
        async with aiohttp.ClientSession(timeout=self._timeout) as client:
            async with client.get(url, headers=headers) as response:
                return response.status, await _read_body(response)


async def _read_body(response: aiohttp.ClientResponse) -> Any:
    try:
        return await response.json(content_type=None)
    except ValueError:
        return await response.text()


def parse_token_response(
    status_code: int, body: Any, now: datetime | None = None
) -> OAuth2Token:
    if not 200 <= status_code < 300:
        logger.warning(f"Token endpoint returned status {status_code}")
        raise TokenRetrieveError(status_code, body)
    if not isinstance(body, dict) or not body.get("access_token"):
        logger.warning("Token endpoint response is missing access_token")
        raise TokenRetrieveError(
            status_code, body, "oauth2: server response missing access_token"
        )

    expiry = None
    expires_in = body.get("expires_in")
    if expires_in:
        now = now or datetime.now(timezone.utc)
        expiry = now + timedelta(seconds=int(expires_in))

    return OAuth2Token(
        access_token=body["access_token"],
        token_type=body.get("token_type") or "Bearer",
        refresh_token=body.get("refresh_token") or "",
        expiry=expiry,
        raw=body,
    )
