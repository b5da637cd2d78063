"""
Pytest configuration and fixtures
"""

from __future__ import annotations

from collections.abc import Iterator
from uuid import UUID, uuid4

import pytest

from todo_api.api.config import (
    get_api_settings,
    get_database_settings,
    get_logging_settings,
    get_store_settings,
)
from todo_api.core import Todo
from todo_api.db.repository import InMemoryTodoStore


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Iterator[None]:
    """Drop cached settings so env changes made by a test take effect."""
    for getter in (
        get_api_settings,
        get_store_settings,
        get_database_settings,
        get_logging_settings,
    ):
        getter.cache_clear()
    yield
    for getter in (
        get_api_settings,
        get_store_settings,
        get_database_settings,
        get_logging_settings,
    ):
        getter.cache_clear()


@pytest.fixture
def memory_store() -> InMemoryTodoStore:
    """Create empty in-memory todo store."""
    return InMemoryTodoStore()


@pytest.fixture
def todo_id() -> UUID:
    """Fixed todo ID."""
    return uuid4()


@pytest.fixture
def sample_todo(todo_id: UUID) -> Todo:
    """Sample todo."""
    return Todo(id=todo_id, description="Buy milk", completed=False)
