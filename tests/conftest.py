"""
Global test fixtures for SharpStore.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor)
- Gateway and repositories bound to the mock database
- Settings with a known signing key
- User and store factories
"""

import sys
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

from store_api.config import Settings  # noqa: E402


TEST_DB_NAME = "sharp_store_test"
TEST_PASSWORD = "SecurePassword123!"


# =============================================================================
# Settings Fixtures
# =============================================================================

@pytest.fixture
def test_settings() -> Settings:
    """Settings with deterministic JWT configuration."""
    return Settings(
        mongo_uri="mongodb://test:27017",
        database_name=TEST_DB_NAME,
        jwt_issuer="sharp-store-test",
        jwt_audience="sharp-store-test-clients",
        jwt_secret_key="test-secret-key-with-enough-entropy-0123456789",
        jwt_algorithm="HS256",
        jwt_access_token_expire_minutes=30,
    )


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest_asyncio.fixture
async def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.

    This provides an in-memory MongoDB that behaves like the real thing
    for testing purposes.
    """
    client = AsyncMongoMockClient()
    yield client
    client.close()


@pytest_asyncio.fixture
async def gateway(mock_async_mongo_client):
    """MongoGateway bound to the test database."""
    from store_api.database.gateway import MongoGateway

    return MongoGateway(mock_async_mongo_client, TEST_DB_NAME)


@pytest_asyncio.fixture
async def indexed_gateway(gateway):
    """Gateway whose collections carry the application indexes."""
    from store_api.database.registry import create_indexes

    await create_indexes(gateway)
    return gateway


@pytest_asyncio.fixture
async def store_repository(indexed_gateway):
    from store_api.repositories.store_repository import StoreRepository

    return StoreRepository(indexed_gateway)


@pytest_asyncio.fixture
async def user_repository(indexed_gateway):
    from store_api.repositories.user_repository import UserRepository

    return UserRepository(indexed_gateway)


# =============================================================================
# User Fixtures
# =============================================================================

@pytest.fixture(scope="session")
def hashed_test_password() -> str:
    """Bcrypt hash of TEST_PASSWORD, computed once."""
    from store_api.core.security import hash_password

    return hash_password(TEST_PASSWORD)


@pytest.fixture
def make_user(hashed_test_password):
    """Factory for User models."""
    from store_api.models.user import User

    def _make(
        user_id: str = "u1",
        email: str = "testuser@example.com",
        roles: list[str] | None = None,
        **overrides,
    ) -> User:
        return User(
            user_id=user_id,
            email=email,
            first_name=overrides.pop("first_name", "Test"),
            last_name=overrides.pop("last_name", "User"),
            avatar_id=overrides.pop("avatar_id", ""),
            hashed_password=overrides.pop("hashed_password", hashed_test_password),
            roles=roles if roles is not None else ["User"],
            **overrides,
        )

    return _make


# =============================================================================
# Store Fixtures
# =============================================================================

@pytest.fixture
def make_store():
    """Factory for Store models."""
    from store_api.models.store import Store

    def _make(
        store_id: str = "s1",
        owner_id: str = "u1",
        name: str = "Corner Shop",
        **overrides,
    ) -> Store:
        return Store(
            store_id=store_id,
            name=name,
            description=overrides.pop("description", "A small shop"),
            owner_id=owner_id,
            avatar_id=overrides.pop("avatar_id", "avatar-1"),
        )

    return _make


# =============================================================================
# Token Fixtures
# =============================================================================

@pytest.fixture
def token_service(test_settings):
    from store_api.services.token_service import TokenService

    return TokenService(test_settings)


@pytest.fixture
def admin_token(token_service) -> str:
    return token_service.issue_token("admin@example.com", "admin-1", ["Admin"])


@pytest.fixture
def user_token(token_service) -> str:
    return token_service.issue_token("testuser@example.com", "u1", ["User"])


@pytest.fixture
def bearer():
    """Build the Authorization header for a bearer token."""
    def _headers(token: str) -> dict:
        return {"Authorization": f"Bearer {token}"}
    return _headers


# =============================================================================
# FastAPI Test Client Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def app(gateway, test_settings):
    """
    FastAPI app with the gateway and settings overridden.

    The lifespan is not run, so no real MongoDB connection is attempted.
    """
    from store_api.config import get_settings
    from store_api.database.connections import get_gateway
    from store_api.main import app

    async def _gateway():
        return gateway

    app.dependency_overrides[get_gateway] = _gateway
    app.dependency_overrides[get_settings] = lambda: test_settings
    yield app
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def async_client(app):
    """
    Create an async test client.

    Use this for testing async endpoints.
    """
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac
