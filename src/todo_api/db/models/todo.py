"""Todo table model."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from sqlalchemy import VARCHAR, false, func
from sqlalchemy.orm import Mapped, mapped_column

from todo_api.core import MAX_DESCRIPTION_LENGTH, Todo

from .base import Base


class TodoRecord(Base):
    """Persisted todo row.

    Attributes:
        id: Primary key (UUID)
        description: Task text
        completed: Completion flag
        created_at: Creation timestamp
        updated_at: Last update timestamp
    """

    __tablename__ = "todos"

    id: Mapped[UUID] = mapped_column(primary_key=True)
    description: Mapped[str] = mapped_column(VARCHAR(MAX_DESCRIPTION_LENGTH))
    completed: Mapped[bool] = mapped_column(default=False, server_default=false())
    created_at: Mapped[datetime] = mapped_column(server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(server_default=func.now(), onupdate=func.now())

    @classmethod
    def from_domain(cls, todo: Todo) -> TodoRecord:
        return cls(id=todo.id, description=todo.description, completed=todo.completed)

    def to_domain(self) -> Todo:
        return Todo(id=self.id, description=self.description, completed=self.completed)

    def __repr__(self) -> str:
        return f"<TodoRecord(id={self.id}, completed={self.completed})>"
