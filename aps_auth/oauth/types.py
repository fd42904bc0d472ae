from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any

from pydantic import BaseModel, Field

EXPIRY_DELTA = timedelta(seconds=10)


class OAuth2Endpoint(BaseModel):
    auth_url: str
    token_url: str


class OAuth2Config(BaseModel):
    client_id: str
    client_secret: str
    redirect_url: str
    endpoint: OAuth2Endpoint
    scopes: list[str] = Field(default_factory=list)


class OAuth2Token(BaseModel):
    access_token: str
    token_type: str = "Bearer"
    refresh_token: str = ""
    expiry: datetime | None = None
    raw: dict[str, Any] = Field(default_factory=dict)

    @property
    def valid(self) -> bool:
        """A token is valid when it carries an access token that has not expired.

        Tokens are treated as expired slightly early so a request started
        now does not race the server-side expiry.
        """
        if not self.access_token:
            return False
        if self.expiry is None:
            return True
        return datetime.now(timezone.utc) < self.expiry - EXPIRY_DELTA

    @property
    def authorization_header(self) -> str:
        return f"{self.token_type or 'Bearer'} {self.access_token}"


@dataclass(frozen=True)
class AuthUrlParam:
    key: str
    value: str


def set_auth_url_param(key: str, value: str) -> AuthUrlParam:
    return AuthUrlParam(key=key, value=value)


class OAuthUser(BaseModel):
    provider: str
    user_id: str = ""
    email: str = ""
    name: str = ""
    first_name: str = ""
    last_name: str = ""
    nick_name: str = ""
    avatar_url: str = ""
    location: str = ""
    access_token: str = ""
    refresh_token: str = ""
    expires_at: datetime | None = None
    raw_data: dict[str, Any] = Field(default_factory=dict)
