from aps_auth.oauth.base import Provider, Session
from aps_auth.oauth.client import OAuth2Client, TokenRetrieveError, UserInfoError
from aps_auth.oauth.registry import ProviderRegistry, provider_registry, use_providers
from aps_auth.oauth.types import (
    AuthUrlParam,
    OAuth2Config,
    OAuth2Endpoint,
    OAuth2Token,
    OAuthUser,
    set_auth_url_param,
)

__all__ = [
    "AuthUrlParam",
    "OAuth2Client",
    "OAuth2Config",
    "OAuth2Endpoint",
    "OAuth2Token",
    "OAuthUser",
    "Provider",
    "ProviderRegistry",
    "Session",
    "TokenRetrieveError",
    "UserInfoError",
    "provider_registry",
    "set_auth_url_param",
    "use_providers",
]
