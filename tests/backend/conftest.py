"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with mocked repositories and
services for testing FastAPI routes in isolation from the database.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient


# =============================================================================
# Repository Fixtures
# =============================================================================

@pytest.fixture
def mock_store_repository():
    """
    Create a fully mocked StoreRepository.

    All methods are AsyncMock, allowing you to configure return values:

        mock_store_repository.get_stores.return_value = [...]
    """
    repository = MagicMock()
    repository.create_store = AsyncMock()
    repository.get_stores = AsyncMock(return_value=[])
    repository.get_stores_by_user = AsyncMock(return_value=[])
    repository.get_store_by_id = AsyncMock(return_value=None)
    repository.update_store = AsyncMock()
    return repository


@pytest.fixture
def mock_auth_service():
    """Create a fully mocked AuthService."""
    service = MagicMock()
    service.get_auth_token = AsyncMock()
    service.sign_up = AsyncMock()
    return service


# =============================================================================
# App Override Helpers
# =============================================================================

@pytest_asyncio.fixture
async def client_with_mock_stores(app, mock_store_repository):
    """Async client whose store routes use mock_store_repository."""
    from store_api.routers.stores import get_store_repository

    async def _repository():
        return mock_store_repository

    app.dependency_overrides[get_store_repository] = _repository
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac


@pytest_asyncio.fixture
async def client_with_mock_auth(app, mock_auth_service):
    """Async client whose auth routes use mock_auth_service."""
    from store_api.routers.auth import get_auth_service

    async def _service():
        return mock_auth_service

    app.dependency_overrides[get_auth_service] = _service
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac


# =============================================================================
# Response Assertion Helpers
# =============================================================================

@pytest.fixture
def assert_error_response():
    """Helper to assert error response structure."""
    def _assert(response, status_code: int, detail_contains: str = None):
        assert response.status_code == status_code
        data = response.json()
        assert "detail" in data
        if detail_contains:
            assert detail_contains.lower() in data["detail"].lower()
    return _assert
