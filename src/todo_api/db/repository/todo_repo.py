"""SQL-backed todo store."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from uuid import UUID

import structlog
from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from todo_api.core import StorageError, Todo

from ..models.todo import TodoRecord
from ..session import DatabaseSessionManager

logger = structlog.get_logger()


class TodoRepository:
    """Todo store over a relational table.

    Each operation opens its own session and transaction, committed
    when the operation returns. Database errors are logged and raised
    as StorageError; nothing is retried.
    """

    def __init__(self, session_manager: DatabaseSessionManager) -> None:
        """Initialize todo repository.

        Args:
            session_manager: Database engine and session factory owner
        """
        self.session_manager = session_manager

    @asynccontextmanager
    async def _transaction(self, operation: str) -> AsyncIterator[AsyncSession]:
        try:
            async with self.session_manager.session_factory() as session, session.begin():
                yield session
        except SQLAlchemyError as e:
            logger.error("todo_store_failed", operation=operation, error=str(e))
            raise StorageError(operation, str(e)) from e

    async def get_all(self) -> list[Todo]:
        """Retrieve all todos.

        Returns:
            List of todos in no particular order
        """
        async with self._transaction("get_all") as session:
            result = await session.execute(select(TodoRecord))
            return [record.to_domain() for record in result.scalars().all()]

    async def get_by_id(self, todo_id: UUID) -> Todo | None:
        """Retrieve todo by ID.

        Args:
            todo_id: Todo UUID

        Returns:
            Todo or None if not found
        """
        async with self._transaction("get_by_id") as session:
            record = await session.get(TodoRecord, todo_id)
            return record.to_domain() if record is not None else None

    async def create(self, todo: Todo) -> None:
        """Insert a todo, overwriting any row with the same id.

        Args:
            todo: Todo to store
        """
        async with self._transaction("create") as session:
            await session.merge(TodoRecord.from_domain(todo))

    async def update(self, todo: Todo) -> None:
        """Replace the stored fields of an existing todo.

        Args:
            todo: Todo carrying the new field values
        """
        stmt = (
            update(TodoRecord)
            .where(TodoRecord.id == todo.id)
            .values(description=todo.description, completed=todo.completed)
        )
        async with self._transaction("update") as session:
            await session.execute(stmt)

    async def delete(self, todo_id: UUID) -> None:
        """Delete todo by ID if it exists.

        Args:
            todo_id: Todo UUID
        """
        async with self._transaction("delete") as session:
            await session.execute(delete(TodoRecord).where(TodoRecord.id == todo_id))

    async def ping(self) -> None:
        """Check database connectivity.

        Raises:
            StorageError: If the database cannot be reached
        """
        try:
            await self.session_manager.ping()
        except SQLAlchemyError as e:
            logger.error("todo_store_failed", operation="ping", error=str(e))
            raise StorageError("ping", str(e)) from e
