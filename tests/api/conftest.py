"""API test fixtures."""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from todo_api.api.main import create_app
from todo_api.db.repository import InMemoryTodoStore


@pytest.fixture
def app(memory_store: InMemoryTodoStore) -> FastAPI:
    """Create test FastAPI app serving the in-memory store."""
    return create_app(store=memory_store)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create test client."""
    return TestClient(app, raise_server_exceptions=False)
