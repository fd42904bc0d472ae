import logging
from collections.abc import Sequence

from pydantic import ValidationError

from aps_auth.core.exceptions import (
    InvalidTokenError,
    MissingAccessTokenError,
    SessionParseError,
)
from aps_auth.core.settings import Settings, settings
from aps_auth.oauth.base import Provider
from aps_auth.oauth.client import OAuth2Client
from aps_auth.oauth.providers.aps.constants import (
    AUTH_URL,
    PROVIDER_NAME,
    TOKEN_URL,
    USERINFO_URL,
)
from aps_auth.oauth.providers.aps.session import ApsSession
from aps_auth.oauth.types import (
    AuthUrlParam,
    OAuth2Config,
    OAuth2Endpoint,
    OAuth2Token,
    OAuthUser,
    set_auth_url_param,
)

logger = logging.getLogger(__name__)


class ApsProvider(Provider):
    """OAuth2 provider for Autodesk Platform Services."""

    def __init__(
        self,
        client_key: str,
        secret: str,
        callback_url: str,
        *scopes: str,
        timeout: float | None = None,
    ):
        self.client_key = client_key
        self.secret = secret
        self.callback_url = callback_url
        self.timeout = settings.http_timeout if timeout is None else timeout
        self.prompt: AuthUrlParam | None = None
        self.config = new_config(self, scopes)

    @classmethod
    def from_settings(cls, app_settings: Settings | None = None) -> "ApsProvider":
        app_settings = app_settings or settings
        provider = cls(
            app_settings.client_id,
            app_settings.client_secret,
            app_settings.callback_url,
            *app_settings.scope_list,
            timeout=app_settings.http_timeout,
        )
        if app_settings.prompt:
            provider.set_prompt(*app_settings.prompt.split())
        provider.debug(app_settings.debug)
        return provider

    @property
    def name(self) -> str:
        return PROVIDER_NAME

    def debug(self, debug: bool) -> None:
        pass

    def refresh_token_available(self) -> bool:
        return True

    def set_prompt(self, *prompt: str) -> None:
        if not prompt:
            self.prompt = None
            return
        self.prompt = set_auth_url_param("prompt", " ".join(prompt))

    def begin_auth(self, state: str) -> ApsSession:
        options = [self.prompt] if self.prompt is not None else []
        auth_url = self._client().auth_code_url(state, *options)
        return ApsSession(auth_url=auth_url)

    async def exchange_code(self, code: str) -> ApsSession:
        token = await self._client().exchange(code)
        logger.info(f"Token exchange successful for provider: {self.name}")
        return ApsSession.from_token(token)

    async def refresh_token(self, refresh_token: str) -> OAuth2Token:
        token = await self._client().refresh(refresh_token)
        logger.info(f"Token refresh successful for provider: {self.name}")
        return token

    async def refresh_session(self, session: ApsSession) -> ApsSession:
        token = await self.refresh_token(session.refresh_token)
        if not token.valid:
            raise InvalidTokenError()
        refreshed = ApsSession.from_token(token)
        refreshed.auth_url = session.auth_url
        return refreshed

    async def fetch_user(self, session: ApsSession) -> OAuthUser:
        if not session.access_token:
            raise MissingAccessTokenError(self.name)

        token = session.to_token()
        logger.debug(f"Fetching user info from provider: {self.name}")
        data = await self._client().fetch_json(USERINFO_URL, token)

        return OAuthUser(
            provider=self.name,
            user_id=str(data.get("sub") or ""),
            email=data.get("email") or "",
            name=data.get("name") or "",
            first_name=data.get("given_name") or "",
            last_name=data.get("family_name") or "",
            nick_name=data.get("preferred_username") or "",
            avatar_url=data.get("picture") or "",
            location=data.get("locale") or "",
            access_token=session.access_token,
            refresh_token=session.refresh_token,
            expires_at=session.expires_at,
            raw_data=data,
        )

    def unmarshal_session(self, data: str) -> ApsSession:
        try:
            return ApsSession.model_validate_json(data)
        except ValidationError as e:
            logger.warning(f"Failed to parse stored {self.name} session")
            raise SessionParseError(details=e.errors(include_url=False)) from e

    def _client(self) -> OAuth2Client:
        return OAuth2Client(self.config, timeout=self.timeout)


def new_config(provider: ApsProvider, scopes: Sequence[str] | None) -> OAuth2Config:
    return OAuth2Config(
        client_id=provider.client_key,
        client_secret=provider.secret,
        redirect_url=provider.callback_url,
        endpoint=OAuth2Endpoint(auth_url=AUTH_URL, token_url=TOKEN_URL),
        scopes=list(scopes or []),
    )
