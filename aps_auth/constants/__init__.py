from aps_auth.constants.auth_errors import AUTH_ERROR_MESSAGES, AuthErrorCode

__all__ = ["AUTH_ERROR_MESSAGES", "AuthErrorCode"]
