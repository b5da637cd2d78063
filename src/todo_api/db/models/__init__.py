"""SQLAlchemy ORM models."""

from .base import Base
from .todo import TodoRecord

__all__ = ["Base", "TodoRecord"]
