import pytest
from httpx import AsyncClient, ASGITransport
from fastapi import FastAPI
from mongomock_motor import AsyncMongoMockClient
from app.database.db import get_review_store
from app.services.review_store import ReviewStore
from config import DATABASE_NAME, REVIEW_COLLECTION


@pytest.fixture(scope="function")
def review_collection():
    """In-memory review collection, fresh for every test."""
    client = AsyncMongoMockClient()
    return client[DATABASE_NAME][REVIEW_COLLECTION]

@pytest.fixture(scope="function")
def review_store(review_collection) -> ReviewStore:
    return ReviewStore(review_collection)

@pytest.fixture(scope="session")
def app() -> FastAPI:
    """Create a FastAPI app instance for testing."""
    from main import app
    return app

@pytest.fixture(scope="function")
async def async_client(app, review_store):
    """Create an async client whose requests hit the in-memory store."""
    app.dependency_overrides[get_review_store] = lambda: review_store
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides = {}
