"""Pytest configuration and fixtures for BeerStock tests.

Tests run against an in-process mongomock database by default. Set
TEST_MONGODB_URL to run them against a real MongoDB server instead.
"""

import os
import uuid
from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from beanie import init_beanie
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient
from motor.motor_asyncio import AsyncIOMotorClient

from beerstock.database import get_document_models
from beerstock.models import BeerType
from beerstock.schemas import BeerDTO

# MongoDB connection URL for tests; unset means mongomock
TEST_MONGODB_URL = os.environ.get("TEST_MONGODB_URL")


@pytest_asyncio.fixture(scope="function")
async def mongo_client():
    """Create a MongoDB client for testing."""
    if TEST_MONGODB_URL:
        client = AsyncIOMotorClient(TEST_MONGODB_URL, maxPoolSize=10, minPoolSize=1)
        yield client
        client.close()
    else:
        yield AsyncMongoMockClient()


@pytest_asyncio.fixture(scope="function")
async def init_test_db(mongo_client):
    """Initialize Beanie with a unique test database.

    Creates a unique database for each test function. Databases on a real
    server are dropped after the test; mongomock ones go away with the client.
    """
    db_name = f"test_beerstock_{uuid.uuid4().hex[:8]}"
    db = mongo_client[db_name]

    await init_beanie(
        database=db,
        document_models=get_document_models(),
    )
    yield db

    if TEST_MONGODB_URL:
        await mongo_client.drop_database(db_name)


@pytest_asyncio.fixture(scope="function")
async def client(init_test_db) -> AsyncGenerator[AsyncClient, None]:
    """Create an async test client for the API.

    ASGITransport does not run the application lifespan, so the database
    set up by ``init_test_db`` is the one the routes see.
    """
    from beerstock.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def beer_dto() -> BeerDTO:
    """Return the reference beer used across tests."""
    return BeerDTO(
        id=1,
        name="Brahma",
        brand="Ambev",
        max=50,
        quantity=10,
        type=BeerType.LAGER,
    )


@pytest.fixture
def beer_payload() -> dict:
    """Return a request body for registering a beer."""
    return {
        "name": "Brahma",
        "brand": "Ambev",
        "max": 50,
        "quantity": 10,
        "type": "LAGER",
    }
