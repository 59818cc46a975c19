"""Pytest configuration and fixtures."""

import os
from collections.abc import Generator
from typing import Any

import pytest
from fastapi.testclient import TestClient

# Set test environment variables before importing application modules
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("DEBUG", "true")
os.environ["STORE_BACKEND"] = "memory"


@pytest.fixture(scope="session")
def test_settings() -> Generator[Any, None, None]:
    """Provide test settings with cleared cache.

    Yields:
        Settings: Test configuration settings.
    """
    from src.core.config import get_settings

    get_settings.cache_clear()

    settings = get_settings()
    yield settings

    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def fresh_record_store() -> Generator[None, None, None]:
    """Give every test its own empty in-memory record store."""
    from src.core.record_store import get_record_store

    get_record_store.cache_clear()
    yield
    get_record_store.cache_clear()


@pytest.fixture
def memory_store() -> Any:
    """Provide the store the services and routes will use in this test.

    Returns:
        InMemoryRecordStore: The cached, empty store.
    """
    from src.core.record_store import get_record_store

    return get_record_store()


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """Provide a test client for the FastAPI application.

    Yields:
        TestClient: FastAPI test client.
    """
    from src.main import app

    with TestClient(app) as test_client:
        yield test_client
