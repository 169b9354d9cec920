"""
Shared pytest fixtures for all tests.

This module provides settings, a file-backed SQLite database, the dependency
container, seed helpers and an HTTP client running the full lifespan.
"""

import os
from decimal import Decimal
from typing import AsyncGenerator, Generator
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

# Ensure test environment before any settings are read
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")

from storefront.config.settings import Settings  # noqa: E402
from storefront.core.app_factory import create_app  # noqa: E402
from storefront.core.container import DependencyContainer  # noqa: E402
from storefront.database import Database  # noqa: E402
from storefront.models.db import Product as ProductModel  # noqa: E402
from storefront.models.db import UserDB  # noqa: E402

ADMIN_EMAIL = "admin@storefront.io"
ADMIN_PASSWORD = "admin-secret"


# ============================================================================
# SETTINGS
# ============================================================================


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings pointing at a fresh SQLite file for each test."""
    return Settings(
        ENVIRONMENT="test",
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'storefront.db'}",
        DB_CREATE_TABLES=True,
        JWT_SECRET_KEY="test-secret-key",
        BCRYPT_ROUNDS=4,
        CHECKOUT_MAX_ATTEMPTS=5,
        CHECKOUT_RETRY_BACKOFF=0.01,
        ADMIN_EMAIL=ADMIN_EMAIL,
        ADMIN_PASSWORD=ADMIN_PASSWORD,
        ADMIN_NAME="Store Admin",
        SENTRY_DSN=None,
    )


# ============================================================================
# DATABASE FIXTURES
# ============================================================================


@pytest_asyncio.fixture
async def database(settings: Settings) -> AsyncGenerator[Database, None]:
    """Database handle with every table created."""
    db = Database.from_settings(settings)
    await db.create_all()
    yield db
    await db.dispose()


@pytest.fixture
def container(settings: Settings, database: Database) -> DependencyContainer:
    return DependencyContainer(settings, database)


@pytest_asyncio.fixture
async def make_product(database: Database):
    """Insert a product row and return its id."""

    async def _make(
        name: str = "Test Product",
        price: str = "10.00",
        stock: int = 5,
        deleted: bool = False,
        image_url: str | None = "/img/test.png",
    ) -> int:
        async with database.session() as session:
            model = ProductModel(
                name=name,
                description="A product used by the test-suite",
                price=Decimal(price),
                stock=stock,
                image_url=image_url,
                deleted=deleted,
            )
            session.add(model)
            await session.flush()
            return model.id

    return _make


@pytest_asyncio.fixture
async def make_user(database: Database, container: DependencyContainer):
    """Insert a user row and return its id."""

    async def _make(name: str = "Jane Buyer", email: str = "jane@shop.io", password: str = "secret1") -> int:
        async with database.session() as session:
            model = UserDB(
                name=name,
                email=email.lower(),
                password_hash=container.token_service.hash_password(password),
                is_admin=False,
            )
            session.add(model)
            await session.flush()
            return model.id

    return _make


# ============================================================================
# MOCK FIXTURES
# ============================================================================


@pytest.fixture
def mock_async_session() -> MagicMock:
    """AsyncSession stand-in for repository tests."""
    session = MagicMock()
    session.get = AsyncMock(return_value=None)
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.flush = AsyncMock()
    session.add = MagicMock()
    return session


# ============================================================================
# API CLIENT FIXTURES
# ============================================================================


@pytest.fixture
def api_client(settings: Settings) -> Generator[TestClient, None, None]:
    """TestClient with the lifespan running: tables created, admin seeded."""
    with TestClient(create_app(settings)) as client:
        yield client


def auth_headers(client: TestClient, email: str, password: str) -> dict[str, str]:
    response = client.post("/api/users/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['accessToken']}"}


@pytest.fixture
def admin_headers(api_client: TestClient) -> dict[str, str]:
    return auth_headers(api_client, ADMIN_EMAIL, ADMIN_PASSWORD)


@pytest.fixture
def register_user(api_client: TestClient):
    """Register a customer through the API and return (user_id, headers)."""

    def _register(name: str = "Jane Buyer", email: str = "jane@shop.io", password: str = "secret1"):
        response = api_client.post("/api/users/register", json={"name": name, "email": email, "password": password})
        assert response.status_code == 201, response.text
        return response.json()["user"]["id"], auth_headers(api_client, email, password)

    return _register


@pytest.fixture
def create_product(api_client: TestClient, admin_headers: dict[str, str]):
    """Create a product through the API and return its JSON."""

    def _create(name: str = "Desk Lamp", price: str = "10.00", stock: int = 5, **extra):
        payload = {"name": name, "price": price, "stock": stock, **extra}
        response = api_client.post("/api/products", json=payload, headers=admin_headers)
        assert response.status_code == 201, response.text
        return response.json()

    return _create
