"""Todo business rules."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

import structlog

from todo_api.core import (
    MAX_DESCRIPTION_LENGTH,
    UNSET,
    Err,
    Ok,
    Result,
    Todo,
    Unset,
    ValidationError,
)

if TYPE_CHECKING:
    from todo_api.db.repository import TodoStore

logger = structlog.get_logger()


def _clean_description(
    description: str | None,
    empty_message: str,
) -> Result[str, ValidationError]:
    """Trim a description and check it against the length rules.

    Args:
        description: Raw description from the caller
        empty_message: Message used when the text is missing or blank

    Returns:
        Ok with the trimmed text, or Err describing the violation
    """
    if description is None or not description.strip():
        return Err(ValidationError(empty_message))

    cleaned = description.strip()
    if len(cleaned) > MAX_DESCRIPTION_LENGTH:
        return Err(
            ValidationError(
                f"Description must be at most {MAX_DESCRIPTION_LENGTH} characters"
            )
        )
    return Ok(cleaned)


class TodoService:
    """Validation and business rules between the API and the store.

    The service keeps no state of its own. Every operation reads from
    the store, builds a new value and writes it back.
    """

    def __init__(
        self,
        store: TodoStore,
        id_factory: Callable[[], UUID] = uuid4,
    ) -> None:
        """Initialize todo service.

        Args:
            store: Store that owns the todo records
            id_factory: Generator for new todo ids
        """
        self.store = store
        self.id_factory = id_factory

    async def list_all(self) -> list[Todo]:
        return await self.store.get_all()

    async def get_by_id(self, todo_id: UUID) -> Todo | None:
        return await self.store.get_by_id(todo_id)

    async def create(
        self,
        description: str | None,
        completed: bool = False,
    ) -> Result[Todo, ValidationError]:
        """Create a todo.

        Args:
            description: Task text, trimmed before storing
            completed: Initial completion flag

        Returns:
            Ok with the created todo, or Err when the description is
            missing, blank or too long
        """
        cleaned = _clean_description(description, "Description is required")
        if isinstance(cleaned, Err):
            logger.info("todo_validation_failed", operation="create", reason=cleaned.error.message)
            return cleaned

        todo = Todo(id=self.id_factory(), description=cleaned.value, completed=completed)
        await self.store.create(todo)

        logger.info("todo_created", todo_id=str(todo.id), completed=todo.completed)
        return Ok(todo)

    async def update(
        self,
        todo_id: UUID,
        description: str | None | Unset = UNSET,
        completed: bool | Unset = UNSET,
    ) -> Result[bool, ValidationError]:
        """Apply a partial update.

        Fields left as UNSET keep their stored value. A supplied
        description is validated before anything is written.

        Args:
            todo_id: Todo UUID
            description: New task text, or UNSET to keep the current one
            completed: New completion flag, or UNSET to keep the current one

        Returns:
            Ok(True) when updated, Ok(False) when the todo does not
            exist, Err when the new description is invalid
        """
        existing = await self.store.get_by_id(todo_id)
        if existing is None:
            return Ok(False)

        changes: dict[str, str | bool] = {}
        if description is not UNSET:
            cleaned = _clean_description(description, "Description cannot be empty")
            if isinstance(cleaned, Err):
                logger.info(
                    "todo_validation_failed",
                    operation="update",
                    todo_id=str(todo_id),
                    reason=cleaned.error.message,
                )
                return cleaned
            changes["description"] = cleaned.value

        if completed is not UNSET:
            changes["completed"] = completed

        if changes:
            await self.store.update(replace(existing, **changes))
            logger.info("todo_updated", todo_id=str(todo_id), fields=sorted(changes))

        return Ok(True)

    async def toggle_completed(self, todo_id: UUID) -> bool:
        """Flip the completion flag.

        Args:
            todo_id: Todo UUID

        Returns:
            True when toggled, False when the todo does not exist
        """
        existing = await self.store.get_by_id(todo_id)
        if existing is None:
            return False

        await self.store.update(replace(existing, completed=not existing.completed))
        logger.info("todo_toggled", todo_id=str(todo_id), completed=not existing.completed)
        return True

    async def delete_by_id(self, todo_id: UUID) -> bool:
        """Delete a todo.

        Args:
            todo_id: Todo UUID

        Returns:
            True when deleted, False when the todo does not exist
        """
        existing = await self.store.get_by_id(todo_id)
        if existing is None:
            return False

        await self.store.delete(todo_id)
        logger.info("todo_deleted", todo_id=str(todo_id))
        return True
