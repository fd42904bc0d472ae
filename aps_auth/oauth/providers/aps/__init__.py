from aps_auth.oauth.providers.aps.provider import ApsProvider, new_config
from aps_auth.oauth.providers.aps.session import ApsSession

__all__ = ["ApsProvider", "ApsSession", "new_config"]
