"""Pytest configuration and fixtures"""
import os

import pytest
from fastapi.testclient import TestClient

os.environ.setdefault("LOG_LEVEL", "WARNING")

from museummart.cart.store import CartManager  # noqa: E402
from museummart.main import create_app  # noqa: E402
from museummart.seed import seed_store  # noqa: E402
from museummart.storage import EntityStore  # noqa: E402


@pytest.fixture
def store() -> EntityStore:
    """Fresh store holding the sample catalogue"""
    return seed_store(EntityStore())


@pytest.fixture
def empty_store() -> EntityStore:
    """Fresh store with nothing in it"""
    return EntityStore()


@pytest.fixture
def cart(store) -> CartManager:
    """Cart manager over the seeded store"""
    return CartManager(store)


@pytest.fixture
def client(store) -> TestClient:
    """Test client bound to the seeded store"""
    return TestClient(create_app(store))


@pytest.fixture
def session_headers():
    """Headers for the default test session"""
    return {"X-Session-Id": "session-one"}
