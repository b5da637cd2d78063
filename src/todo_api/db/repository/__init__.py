"""Todo stores."""

from .base import TodoStore
from .memory_store import InMemoryTodoStore
from .todo_repo import TodoRepository

__all__ = ["TodoStore", "InMemoryTodoStore", "TodoRepository"]
