"""Pydantic schemas for API request/response validation."""

from .requests import TodoCreate, TodoUpdate
from .responses import ErrorResponse, HealthResponse, TodoResponse

__all__ = [
    # Requests
    "TodoCreate",
    "TodoUpdate",
    # Responses
    "TodoResponse",
    "ErrorResponse",
    "HealthResponse",
]
