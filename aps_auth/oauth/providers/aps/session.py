import re
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from aps_auth.core.exceptions import InvalidTokenError, NoAuthUrlError
from aps_auth.oauth.base import Session
from aps_auth.oauth.types import OAuth2Token

if TYPE_CHECKING:
    from aps_auth.oauth.providers.aps.provider import ApsProvider

RFC3339_PATTERN = re.compile(
    r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?(Z|[+-]\d{2}:\d{2})"
)


def format_timestamp(value: datetime) -> str:
    """Render ``value`` as RFC 3339 in UTC with millisecond precision."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
        f".{value.microsecond // 1000:03d}Z"
    )


class ApsSession(BaseModel, Session):
    """Stores data during the auth process with aps."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    auth_url: str = Field(default="", alias="AuthURL")
    access_token: str = Field(default="", alias="AccessToken")
    refresh_token: str = Field(default="", alias="RefreshToken")
    expires_at: datetime | None = Field(default=None, alias="ExpiresAt")

    @field_validator("auth_url", "access_token", "refresh_token", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("expires_at", mode="before")
    @classmethod
    def _rfc3339_only(cls, value: Any) -> Any:
        if value is None or isinstance(value, datetime):
            return value
        if isinstance(value, str) and RFC3339_PATTERN.fullmatch(value):
            return value
        raise ValueError("ExpiresAt must be an RFC 3339 timestamp")

    @field_validator("expires_at")
    @classmethod
    def _as_utc(cls, value: datetime | None) -> datetime | None:
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    @field_serializer("expires_at")
    def _serialize_expires_at(self, value: datetime | None) -> str | None:
        return format_timestamp(value) if value is not None else None

    @classmethod
    def from_token(cls, token: OAuth2Token) -> "ApsSession":
        return cls(
            access_token=token.access_token,
            refresh_token=token.refresh_token,
            expires_at=token.expiry,
        )

    def to_token(self) -> OAuth2Token:
        return OAuth2Token(
            access_token=self.access_token,
            refresh_token=self.refresh_token,
            expiry=self.expires_at,
        )

    def get_auth_url(self) -> str:
        if not self.auth_url:
            raise NoAuthUrlError()
        return self.auth_url

    async def authorize(self, provider: "ApsProvider", params: Mapping[str, str]) -> str:
        """Exchange the callback's ``code`` for tokens and store them on this session."""
        authorized = await provider.exchange_code(params.get("code", ""))
        if not authorized.to_token().valid:
            raise InvalidTokenError()

        self.access_token = authorized.access_token
        self.refresh_token = authorized.refresh_token
        self.expires_at = authorized.expires_at
        return self.access_token

    def marshal(self) -> str:
        return self.model_dump_json(by_alias=True)

    def __str__(self) -> str:
        return self.marshal()
