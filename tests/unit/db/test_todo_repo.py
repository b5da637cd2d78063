"""SQL todo repository tests.

Run against a throwaway SQLite database file.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from dataclasses import replace
from pathlib import Path
from unittest.mock import AsyncMock, patch
from uuid import uuid4

import pytest
from sqlalchemy.exc import OperationalError

from todo_api.core import StorageError, Todo
from todo_api.db.repository import TodoRepository
from todo_api.db.session import DatabaseSessionManager


@pytest.fixture
async def session_manager(tmp_path: Path) -> AsyncIterator[DatabaseSessionManager]:
    """Create session manager with the schema in place."""
    manager = DatabaseSessionManager(f"sqlite+aiosqlite:///{tmp_path / 'todos.db'}")
    await manager.create_all()
    yield manager
    await manager.close()


@pytest.fixture
def todo_repo(session_manager: DatabaseSessionManager) -> TodoRepository:
    """Create todo repository."""
    return TodoRepository(session_manager)


class TestCreateAndGet:
    """Tests for create, get_by_id and get_all."""

    @pytest.mark.asyncio
    async def test_round_trips_todo(self, todo_repo: TodoRepository, sample_todo: Todo) -> None:
        """A created todo is returned unchanged by get_by_id."""
        await todo_repo.create(sample_todo)

        assert await todo_repo.get_by_id(sample_todo.id) == sample_todo

    @pytest.mark.asyncio
    async def test_returns_none_for_unknown_id(self, todo_repo: TodoRepository) -> None:
        """Unknown ids are absent, not an error."""
        assert await todo_repo.get_by_id(uuid4()) is None

    @pytest.mark.asyncio
    async def test_get_all_returns_every_row(self, todo_repo: TodoRepository) -> None:
        """get_all returns each stored todo."""
        todos = [Todo(id=uuid4(), description=f"Task {i}", completed=i == 1) for i in range(3)]
        for todo in todos:
            await todo_repo.create(todo)

        result = await todo_repo.get_all()

        assert sorted(result, key=lambda t: t.id) == sorted(todos, key=lambda t: t.id)

    @pytest.mark.asyncio
    async def test_get_all_empty(self, todo_repo: TodoRepository) -> None:
        """get_all on an empty table returns an empty list."""
        assert await todo_repo.get_all() == []

    @pytest.mark.asyncio
    async def test_create_overwrites_on_id_collision(
        self,
        todo_repo: TodoRepository,
        sample_todo: Todo,
    ) -> None:
        """Creating twice with the same id keeps one row with the latest values."""
        await todo_repo.create(sample_todo)
        await todo_repo.create(replace(sample_todo, description="Other", completed=True))

        rows = await todo_repo.get_all()
        assert rows == [replace(sample_todo, description="Other", completed=True)]


class TestUpdate:
    """Tests for update method."""

    @pytest.mark.asyncio
    async def test_replaces_stored_fields(
        self,
        todo_repo: TodoRepository,
        sample_todo: Todo,
    ) -> None:
        """Update writes description and completed."""
        await todo_repo.create(sample_todo)
        changed = replace(sample_todo, description="Buy bread", completed=True)

        await todo_repo.update(changed)

        assert await todo_repo.get_by_id(sample_todo.id) == changed

    @pytest.mark.asyncio
    async def test_missing_row_is_not_inserted(
        self,
        todo_repo: TodoRepository,
        sample_todo: Todo,
    ) -> None:
        """Updating an unknown id writes nothing."""
        await todo_repo.update(sample_todo)

        assert await todo_repo.get_all() == []


class TestDelete:
    """Tests for delete method."""

    @pytest.mark.asyncio
    async def test_removes_row(self, todo_repo: TodoRepository, sample_todo: Todo) -> None:
        """Deleted todo is gone."""
        await todo_repo.create(sample_todo)

        await todo_repo.delete(sample_todo.id)

        assert await todo_repo.get_by_id(sample_todo.id) is None

    @pytest.mark.asyncio
    async def test_unknown_id_is_silent(self, todo_repo: TodoRepository) -> None:
        """Deleting an unknown id does not raise."""
        await todo_repo.delete(uuid4())


class TestStorageFailures:
    """Database errors surface as StorageError."""

    @pytest.mark.asyncio
    async def test_missing_schema_raises_storage_error(self, tmp_path: Path) -> None:
        """Queries against a database without the table raise StorageError."""
        manager = DatabaseSessionManager(f"sqlite+aiosqlite:///{tmp_path / 'empty.db'}")
        repo = TodoRepository(manager)

        try:
            with pytest.raises(StorageError) as exc_info:
                await repo.get_all()
        finally:
            await manager.close()

        assert exc_info.value.operation == "get_all"
        assert isinstance(exc_info.value.__cause__, OperationalError)

    @pytest.mark.asyncio
    async def test_write_failure_raises_storage_error(
        self,
        tmp_path: Path,
        sample_todo: Todo,
    ) -> None:
        """A failing insert raises StorageError for the create operation."""
        manager = DatabaseSessionManager(f"sqlite+aiosqlite:///{tmp_path / 'empty.db'}")
        repo = TodoRepository(manager)

        try:
            with pytest.raises(StorageError) as exc_info:
                await repo.create(sample_todo)
        finally:
            await manager.close()

        assert exc_info.value.operation == "create"

    @pytest.mark.asyncio
    async def test_ping_failure_raises_storage_error(self, todo_repo: TodoRepository) -> None:
        """An unreachable database makes ping raise StorageError."""
        failure = OperationalError("SELECT 1", {}, Exception("connection refused"))

        with patch.object(
            todo_repo.session_manager,
            "ping",
            new_callable=AsyncMock,
            side_effect=failure,
        ):
            with pytest.raises(StorageError) as exc_info:
                await todo_repo.ping()

        assert exc_info.value.operation == "ping"

    @pytest.mark.asyncio
    async def test_ping_succeeds(self, todo_repo: TodoRepository) -> None:
        """ping returns quietly when the database answers."""
        assert await todo_repo.ping() is None
