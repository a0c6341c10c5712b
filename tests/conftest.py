"""Shared test fixtures"""
import pytest
import pytest_asyncio
from datetime import datetime, timezone
from unittest.mock import AsyncMock
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from main import create_app
from product_api.core.config import Config
from product_api.db.database import Database
from product_api.models.product import Product
from product_api.repositories.product import ProductRepository

FRONTEND_URL = "http://localhost:5173"


def make_memory_database() -> Database:
    """In-memory SQLite database shared by every session of one handle"""
    return Database(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )


@pytest.fixture
def settings():
    """Configuration with a known frontend origin"""
    return Config(frontend_url=FRONTEND_URL, environment="test", enable_tracing=False)


@pytest.fixture
def client(settings):
    """Test client bound to a fresh in-memory database, calling from the frontend origin"""
    app = create_app(database=make_memory_database(), settings=settings)
    with TestClient(app, headers={"Origin": FRONTEND_URL}) as test_client:
        yield test_client


@pytest.fixture
def app_without_origin():
    """Builds test clients that send no Origin header, for a given frontend URL"""
    def build(frontend_url):
        settings = Config(frontend_url=frontend_url, environment="test", enable_tracing=False)
        return TestClient(create_app(database=make_memory_database(), settings=settings))
    return build


@pytest.fixture
def created_product(client):
    """A product created through the API"""
    response = client.post("/api/products", json={"name": "Monitor Curvo", "price": 300})
    assert response.status_code == 201
    return response.json()["data"]


@pytest_asyncio.fixture
async def database():
    """Connected in-memory database for repository tests"""
    db = make_memory_database()
    await db.connect()
    yield db
    await db.close()


@pytest_asyncio.fixture
async def repository(database):
    """Repository over a live session"""
    async with database.session() as session:
        yield ProductRepository(session)


@pytest.fixture
def mock_repository():
    """Mock ProductRepository"""
    return AsyncMock(spec=ProductRepository)


@pytest.fixture
def sample_product():
    """Detached Product row"""
    return Product(
        id=1,
        name="Monitor Curvo",
        price=300.0,
        availability=True,
        created_at=datetime.now(timezone.utc),
        updated_at=datetime.now(timezone.utc),
    )
