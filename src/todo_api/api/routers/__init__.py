"""API routers for endpoint organization."""

from .health import router as health_router
from .todos import router as todos_router

__all__ = [
    "health_router",
    "todos_router",
]
