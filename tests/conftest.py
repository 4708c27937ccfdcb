# tests/conftest.py

import pytest
from fastapi.testclient import TestClient

from infrastructure.memory_store import InMemoryTaskStore
from interfaces.api import get_task_store
from main import app


@pytest.fixture()
def store() -> InMemoryTaskStore:
    return InMemoryTaskStore()


@pytest.fixture()
def client(store: InMemoryTaskStore):
    """TestClient wired to a fresh registry per test."""
    app.dependency_overrides[get_task_store] = lambda: store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
