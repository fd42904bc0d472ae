from aps_auth.oauth import (
    OAuthUser,
    Provider,
    Session,
    provider_registry,
    use_providers,
)
from aps_auth.oauth.providers.aps import ApsProvider, ApsSession

__all__ = [
    "ApsProvider",
    "ApsSession",
    "OAuthUser",
    "Provider",
    "Session",
    "provider_registry",
    "use_providers",
]
