"""In-memory todo store."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from uuid import UUID

import structlog

from todo_api.core import Todo

logger = structlog.get_logger()


@dataclass
class InMemoryTodoStore:
    """Todo store backed by a lock-guarded dict.

    Stored values are immutable, so readers can be handed the stored
    objects directly. Writes take the lock and swap a whole value.
    """

    _todos: dict[UUID, Todo] = field(default_factory=dict)
    _lock: asyncio.Lock = field(default_factory=asyncio.Lock)

    async def get_all(self) -> list[Todo]:
        return list(self._todos.values())

    async def get_by_id(self, todo_id: UUID) -> Todo | None:
        return self._todos.get(todo_id)

    async def create(self, todo: Todo) -> None:
        async with self._lock:
            self._todos[todo.id] = todo

    async def update(self, todo: Todo) -> None:
        async with self._lock:
            if todo.id not in self._todos:
                logger.debug("memory_store_update_missing", todo_id=str(todo.id))
                return
            self._todos[todo.id] = todo

    async def delete(self, todo_id: UUID) -> None:
        async with self._lock:
            self._todos.pop(todo_id, None)

    async def ping(self) -> None:
        return None
