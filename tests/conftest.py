"""Shared pytest fixtures for Person Lookup SDK tests."""

import pytest

from person_lookup_sdk.api.client import LookupClient
from person_lookup_sdk.config.settings import LookupSettings
from person_lookup_sdk.providers.invoker import UpstreamInvoker
from tests.helpers.upstream_mocks import UpstreamStub, make_settings


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: end-to-end tests across client, providers and HTTP layer")


@pytest.fixture
def settings() -> LookupSettings:
    """Settings with fake credentials for every provider."""
    return make_settings()


@pytest.fixture
def empty_settings() -> LookupSettings:
    """Settings with no credentials at all."""
    return LookupSettings()


@pytest.fixture
def offline_invoker() -> UpstreamInvoker:
    """Invoker for tests that must never reach the network."""
    return UpstreamInvoker()


@pytest.fixture
def upstream() -> UpstreamStub:
    """Upstream answering 200 with an empty JSON object; tests reconfigure it."""
    return UpstreamStub()


@pytest.fixture
def client(settings, upstream) -> LookupClient:
    """LookupClient whose outbound calls hit the stub upstream."""
    return LookupClient(settings=settings, http_client=upstream.client())
