from unittest.mock import AsyncMock

import pytest
import pytest_asyncio

from agentdesk.domain.services.auth.refresh_coordinator import RefreshCoordinator
from agentdesk.infrastructure.services.authenticated_gateway import AuthenticatedGateway
from agentdesk.infrastructure.services.identity_client import HttpTokenRefresher
from agentdesk.infrastructure.session.stores import InMemorySessionStore
from tests.utils.fake_backend import REFRESH_URL, FakeBackend


@pytest.fixture
def backend():
    return FakeBackend()


@pytest_asyncio.fixture
async def backend_client(backend):
    async with backend.client() as client:
        yield client


@pytest.fixture
def coordinator(backend_client):
    return RefreshCoordinator(HttpTokenRefresher(backend_client, refresh_url=REFRESH_URL, timeout=5))


@pytest.fixture
def session_sink():
    """Sink recording every committed pair."""
    sink = InMemorySessionStore()
    sink.update = AsyncMock(wraps=sink.update)
    return sink


@pytest.fixture
def gateway(backend_client, coordinator, session_sink):
    return AuthenticatedGateway(backend_client, coordinator, session_sink)
