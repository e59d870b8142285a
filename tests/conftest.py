"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - fake_client: Recording ProviderClient double
    - object_store: In-memory object store
    - registry: SessionRegistry wired to the doubles
    - async_client: HTTPX client for API testing
    - session_id: API session with OpenAI credentials set
    - two_page_pdf: Real PDF bytes with two text pages
"""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from src.api.app import create_app
from src.chat.session import SessionRegistry
from tests.fakes import FakeObjectStore, FakeProviderClient, build_pdf


@pytest.fixture
def fake_client() -> FakeProviderClient:
    """Return a provider client double answering "Fake answer"."""
    return FakeProviderClient()


@pytest.fixture
def object_store() -> FakeObjectStore:
    """Return an in-memory object store that succeeds."""
    return FakeObjectStore()


@pytest.fixture
def registry(fake_client: FakeProviderClient, object_store: FakeObjectStore) -> SessionRegistry:
    """Return a registry whose factory always hands out ``fake_client``."""
    return SessionRegistry(
        object_store=object_store,
        client_factory=lambda provider, api_key: fake_client,
    )


@pytest.fixture
async def async_client(registry: SessionRegistry) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=create_app(registry))
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
async def session_id(async_client: AsyncClient) -> str:
    """Register an API session through POST /credentials and return its id."""
    response = await async_client.post(
        "/credentials", json={"provider": "openai", "api_key": "sk-test-key"}
    )
    assert response.status_code == 200
    return response.json()["session_id"]


@pytest.fixture
def two_page_pdf() -> bytes:
    """Return a two-page PDF whose pages read "Quarterly" and "Revenue"."""
    return build_pdf(["Quarterly", "Revenue"])
