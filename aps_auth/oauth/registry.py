import logging

from aps_auth.core.exceptions import ProviderNotFoundError
from aps_auth.oauth.base import Provider

logger = logging.getLogger(__name__)


class ProviderRegistry:
    """Registry for OAuth providers."""

    def __init__(self) -> None:
        self._providers: dict[str, Provider] = {}

    def register(self, provider: Provider) -> None:
        """Register an OAuth provider, replacing any provider with the same name."""
        logger.debug(f"Registering provider: {provider.name}")
        self._providers[provider.name] = provider

    def get(self, name: str) -> Provider | None:
        """Get an OAuth provider by name."""
        return self._providers.get(name)

    def require(self, name: str) -> Provider:
        provider = self._providers.get(name)
        if provider is None:
            logger.warning(f"OAuth provider not registered: {name}")
            raise ProviderNotFoundError(name)
        return provider

    def list_providers(self) -> list[str]:
        """List all registered provider names."""
        return list(self._providers.keys())

    def clear(self) -> None:
        self._providers.clear()


provider_registry = ProviderRegistry()


def use_providers(*providers: Provider) -> None:
    for provider in providers:
        provider_registry.register(provider)
