"""Storage contract shared by every todo store."""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from todo_api.core import Todo


class TodoStore(Protocol):
    """Durable keyed storage for todos.

    Implementations must replace each keyed record atomically as a
    whole so that concurrent writes never corrupt or lose a record.
    """

    async def get_all(self) -> list[Todo]:
        """Return every stored todo in no particular order."""

    async def get_by_id(self, todo_id: UUID) -> Todo | None:
        """Return the todo with this id, or None when unknown."""

    async def create(self, todo: Todo) -> None:
        """Insert a todo keyed by its id, overwriting on collision."""

    async def update(self, todo: Todo) -> None:
        """Replace the whole record at the todo's id.

        Callers confirm the record exists first; nothing is written
        when it does not.
        """

    async def delete(self, todo_id: UUID) -> None:
        """Remove the todo if present. Unknown ids are ignored."""

    async def ping(self) -> None:
        """Check the store is reachable.

        Raises:
            StorageError: If the backing store cannot be reached
        """
