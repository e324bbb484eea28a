"""
pytest configuration and fixtures for the product API test suite
"""

import httpx
import pytest
import pytest_asyncio
from faker import Faker

from doubles import FakeDatabase, InMemoryProductsService
from product_api.app import create_app
from product_api.services.products_service import get_database, get_products_service


@pytest.fixture
def faker() -> Faker:
    fake = Faker()
    fake.seed_instance(4321)
    return fake


@pytest.fixture
def products_store() -> InMemoryProductsService:
    return InMemoryProductsService()


@pytest.fixture
def fake_database() -> FakeDatabase:
    return FakeDatabase()


@pytest.fixture
def app(products_store, fake_database):
    """Application with storage replaced by in-memory doubles (lifespan is not run)"""
    application = create_app()
    application.dependency_overrides[get_products_service] = lambda: products_store
    application.dependency_overrides[get_database] = lambda: fake_database
    return application


@pytest_asyncio.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as http_client:
        yield http_client
