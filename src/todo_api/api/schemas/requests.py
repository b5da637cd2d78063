"""Request schemas for API endpoints.

Field names follow the wire format used by existing clients
(``descricao`` for the task text, ``completo`` for the done flag).
Unknown fields are ignored. ``completo`` only accepts JSON booleans;
strings and numbers are not coerced.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, StrictBool

from todo_api.core import UNSET, Unset


class TodoCreate(BaseModel):
    """Request schema for creating a todo.

    ``descricao`` is optional here so that a missing, null or blank value
    is reported by the service with the same message either way.
    """

    descricao: str | None = Field(
        default=None,
        description="Task description",
    )
    completo: StrictBool | None = Field(
        default=None,
        description="Initial completion flag (null or omitted means false)",
    )


class TodoUpdate(BaseModel):
    """Request schema for a partial todo update.

    Omitted or null fields are left unchanged.
    """

    descricao: str | None = Field(
        default=None,
        description="New task description",
    )
    completo: StrictBool | None = Field(
        default=None,
        description="New completion flag",
    )

    def description_change(self) -> str | Unset:
        """Supplied description, or UNSET when omitted or null."""
        if self.descricao is None:
            return UNSET
        return self.descricao

    def completed_change(self) -> bool | Unset:
        """Supplied completion flag, or UNSET when omitted or null."""
        if self.completo is None:
            return UNSET
        return self.completo
