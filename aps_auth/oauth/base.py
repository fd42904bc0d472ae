from abc import ABC, abstractmethod
from collections.abc import Mapping

from aps_auth.oauth.types import OAuth2Token, OAuthUser


class Session(ABC):
    """State carried between the redirect and callback legs of a login."""

    @abstractmethod
    def get_auth_url(self) -> str:
        pass

    @abstractmethod
    def marshal(self) -> str:
        pass

    @abstractmethod
    async def authorize(self, provider: "Provider", params: Mapping[str, str]) -> str:
        pass


class Provider(ABC):

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @abstractmethod
    def begin_auth(self, state: str) -> Session:
        pass

    @abstractmethod
    async def exchange_code(self, code: str) -> Session:
        pass

    @abstractmethod
    def unmarshal_session(self, data: str) -> Session:
        pass

    @abstractmethod
    async def fetch_user(self, session: Session) -> OAuthUser:
        pass

    @abstractmethod
    def debug(self, debug: bool) -> None:
        pass

    @abstractmethod
    async def refresh_token(self, refresh_token: str) -> OAuth2Token:
        pass

    @abstractmethod
    def refresh_token_available(self) -> bool:
        pass
