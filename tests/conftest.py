"""Pytest fixtures and shared test configuration.

Fixtures:
    - store / session / logged_in_session: In-memory session state
    - transport: ChatTransport pointed at the mocked backend
    - backend: respx router intercepting calls to the backend
    - async_client: HTTPX client for the host application
"""

from collections.abc import AsyncGenerator, Iterator

import pytest
import respx
from httpx import ASGITransport, AsyncClient

from wormchat.api import app
from wormchat.client.transport import ChatTransport
from wormchat.session.state import SessionState
from wormchat.session.storage import MappingStore

BACKEND_URL = "http://backend.test"
TEST_API_KEY = "test-functions-key"
TEST_EMAIL = "user@example.com"


@pytest.fixture
def store() -> MappingStore:
    """Return an empty in-memory store."""
    return MappingStore({})


@pytest.fixture
def session(store: MappingStore) -> SessionState:
    """Return a logged-out session over the in-memory store."""
    return SessionState(store)


@pytest.fixture
def logged_in_session(session: SessionState) -> SessionState:
    """Return a session logged in as TEST_EMAIL."""
    session.login(TEST_EMAIL)
    return session


@pytest.fixture
def transport() -> ChatTransport:
    """Return a transport for the mocked backend with an API key configured."""
    return ChatTransport(base_url=BACKEND_URL, api_key=TEST_API_KEY, timeout=5.0)


@pytest.fixture
def backend() -> Iterator[respx.MockRouter]:
    """Intercept all HTTP calls to the backend.

    Yields:
        Router to register routes on, relative to BACKEND_URL.
    """
    with respx.mock(base_url=BACKEND_URL, assert_all_called=False) as router:
        yield router


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client for the host application.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
