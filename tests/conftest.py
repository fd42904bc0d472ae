from datetime import datetime, timezone

import pytest

from aps_auth.oauth.providers.aps import ApsProvider
from aps_auth.oauth.registry import provider_registry
from aps_auth.oauth.types import OAuth2Config, OAuth2Endpoint

A_TIME = datetime(2014, 5, 16, 8, 28, 6, 801000, tzinfo=timezone.utc)


@pytest.fixture
def a_time() -> datetime:
    return A_TIME


@pytest.fixture
def provider() -> ApsProvider:
    return ApsProvider("key", "secret", "/callback")


@pytest.fixture
def short_config() -> OAuth2Config:
    return OAuth2Config(
        client_id="id",
        client_secret="secret",
        redirect_url="redir",
        endpoint=OAuth2Endpoint(auth_url="auth", token_url="token"),
        scopes=[],
    )


@pytest.fixture(autouse=True)
def clean_registry():
    yield
    provider_registry.clear()
