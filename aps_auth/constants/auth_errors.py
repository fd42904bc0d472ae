from enum import Enum


class AuthErrorCode(str, Enum):
    NO_AUTH_URL = "NO_AUTH_URL"
    SESSION_PARSE_FAILED = "SESSION_PARSE_FAILED"

    MISSING_ACCESS_TOKEN = "MISSING_ACCESS_TOKEN"
    INVALID_TOKEN = "INVALID_TOKEN"
    OAUTH_TOKEN_EXCHANGE_FAILED = "OAUTH_TOKEN_EXCHANGE_FAILED"
    OAUTH_USER_INFO_FAILED = "OAUTH_USER_INFO_FAILED"

    PROVIDER_NOT_FOUND = "PROVIDER_NOT_FOUND"


AUTH_ERROR_MESSAGES: dict[AuthErrorCode, str] = {
    AuthErrorCode.NO_AUTH_URL: "an AuthURL has not been set",
    AuthErrorCode.SESSION_PARSE_FAILED: "Stored session data could not be parsed.",
    AuthErrorCode.MISSING_ACCESS_TOKEN: "Access token is missing from the session.",
    AuthErrorCode.INVALID_TOKEN: "Invalid token received from provider.",
    AuthErrorCode.OAUTH_TOKEN_EXCHANGE_FAILED: "Failed to retrieve a token from the provider.",
    AuthErrorCode.OAUTH_USER_INFO_FAILED: "Failed to fetch user information from provider.",
    AuthErrorCode.PROVIDER_NOT_FOUND: "OAuth provider not found or not configured.",
}
