from aps_auth.oauth.providers.aps import ApsProvider, ApsSession

__all__ = ["ApsProvider", "ApsSession"]
