"""Persistence layer: ORM models, session management and todo stores."""

from .models import Base, TodoRecord
from .repository import InMemoryTodoStore, TodoRepository, TodoStore
from .session import DatabaseSessionManager

__all__ = [
    "Base",
    "TodoRecord",
    "DatabaseSessionManager",
    "TodoStore",
    "InMemoryTodoStore",
    "TodoRepository",
]
