from aps_auth.constants.auth_errors import AUTH_ERROR_MESSAGES, AuthErrorCode


class AppException(Exception):
    def __init__(self, code: str, message: str, status_code: int = 400):
        self.code = code
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class AuthenticationException(AppException):
    def __init__(self, code: str, message: str):
        super().__init__(code, message, status_code=401)


class NotFoundException(AppException):
    def __init__(self, code: str, message: str):
        super().__init__(code, message, status_code=404)


class ValidationException(AppException):
    def __init__(self, code: str, message: str, details: list | None = None):
        super().__init__(code, message, status_code=400)
        self.details = details or []


class NoAuthUrlError(ValidationException):
    def __init__(self) -> None:
        super().__init__(
            code=AuthErrorCode.NO_AUTH_URL,
            message=AUTH_ERROR_MESSAGES[AuthErrorCode.NO_AUTH_URL],
        )


class SessionParseError(ValidationException):
    def __init__(self, details: list | None = None):
        super().__init__(
            code=AuthErrorCode.SESSION_PARSE_FAILED,
            message=AUTH_ERROR_MESSAGES[AuthErrorCode.SESSION_PARSE_FAILED],
            details=details,
        )


class MissingAccessTokenError(AuthenticationException):
    def __init__(self, provider_name: str):
        super().__init__(
            code=AuthErrorCode.MISSING_ACCESS_TOKEN,
            message=f"{provider_name} cannot get user information without accessToken",
        )


class InvalidTokenError(AuthenticationException):
    def __init__(self) -> None:
        super().__init__(
            code=AuthErrorCode.INVALID_TOKEN,
            message=AUTH_ERROR_MESSAGES[AuthErrorCode.INVALID_TOKEN],
        )


class ProviderNotFoundError(NotFoundException):
    def __init__(self, provider_name: str):
        super().__init__(
            code=AuthErrorCode.PROVIDER_NOT_FOUND,
            message=f"no provider for {provider_name} exists",
        )
