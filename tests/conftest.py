"""Shared test fixtures and configuration."""
import pytest
import os
from pathlib import Path
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

# Set test environment variables before importing app
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("APP_NAME", "Foodly Test")
os.environ.setdefault("STORAGE_BACKEND", "database")

from foodly.main import app
from foodly.db.database import get_db
from foodly.db.models import Base
from foodly.core.config import Settings
from foodly.core.dependencies import get_restaurant_repository
from foodly.services.restaurants.repository import RestaurantRepository
from foodly.services.restaurants.in_memory_restaurants import InMemoryRestaurantProvider
from foodly.services.storage.in_memory import InMemoryStorage


# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def test_settings(tmp_path):
    """Override settings for testing."""
    return Settings(
        database_url=TEST_DATABASE_URL,
        app_name="Foodly Test",
        storage_backend="database",
        storage_dir=str(tmp_path / "storage"),
    )


@pytest.fixture
async def test_db_engine():
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Drop all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def test_db(test_db_engine):
    """Create test database session."""
    async_session = async_sessionmaker(
        test_db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session


@pytest.fixture
def test_restaurants_path():
    """Return path to test restaurant catalogue YAML file."""
    return Path(__file__).parent / "fixtures" / "test_restaurants.yaml"


@pytest.fixture
def test_restaurant_repository(test_restaurants_path):
    """Create restaurant repository with test data."""
    provider = InMemoryRestaurantProvider(restaurants_file=str(test_restaurants_path))
    return RestaurantRepository(provider)


@pytest.fixture
def memory_storage():
    """In-memory storage with its own backing dict."""
    return InMemoryStorage("test-client", backing={})


@pytest.fixture
def override_get_db(test_db):
    """Override get_db dependency with test database."""
    async def _override_get_db():
        yield test_db
    return _override_get_db


@pytest.fixture
def override_get_restaurant_repository(test_restaurant_repository):
    """Override get_restaurant_repository dependency with test catalogue."""
    def _override_get_restaurant_repository():
        return test_restaurant_repository
    return _override_get_restaurant_repository


@pytest.fixture
def test_client(override_get_db, override_get_restaurant_repository, test_settings, monkeypatch):
    """Create FastAPI test client with overrides."""
    # Override dependencies
    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_restaurant_repository] = override_get_restaurant_repository

    # Override settings in modules that use it
    monkeypatch.setattr("foodly.core.config.settings", test_settings)
    monkeypatch.setattr("foodly.core.dependencies.settings", test_settings)

    client = TestClient(app)

    yield client

    # Clear overrides
    app.dependency_overrides.clear()


@pytest.fixture
def authenticated_client(test_client):
    """Create test client with a signed-in user."""
    response = test_client.post(
        "/api/auth/login",
        json={"email": "diner@example.com", "password": "secret"}
    )
    assert response.status_code == 200

    # Client cookie is automatically stored in test_client
    return test_client


@pytest.fixture
def delivery_address():
    """A complete delivery address payload."""
    return {
        "full_name": "Dana Diner",
        "phone": "555-0100",
        "street": "1 Main St",
        "city": "Springfield",
        "state": "IL",
        "zip_code": "62701",
    }
