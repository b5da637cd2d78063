"""FastAPI dependencies for dependency injection."""

from typing import Annotated

from fastapi import Depends, Request

from todo_api.db.repository import TodoStore
from todo_api.services import TodoService


def get_todo_store(request: Request) -> TodoStore:
    """Todo store dependency.

    The store is created once per application and kept on app.state.

    Args:
        request: Current request

    Returns:
        Application todo store
    """
    return request.app.state.todo_store


def get_todo_service(
    store: TodoStore = Depends(get_todo_store),
) -> TodoService:
    """Todo service dependency.

    Args:
        store: Todo store from DI

    Returns:
        TodoService bound to the application store
    """
    return TodoService(store)


# Type aliases for cleaner route signatures
Store = Annotated[TodoStore, Depends(get_todo_store)]
TodoServiceDep = Annotated[TodoService, Depends(get_todo_service)]
