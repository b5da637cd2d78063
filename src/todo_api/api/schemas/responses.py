"""Response schemas for API endpoints."""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, Field

from todo_api.core import Todo


class TodoResponse(BaseModel):
    """Response schema for todo data."""

    id: UUID
    descricao: str
    completo: bool

    @classmethod
    def from_domain(cls, todo: Todo) -> TodoResponse:
        return cls(id=todo.id, descricao=todo.description, completo=todo.completed)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str


class ErrorResponse(BaseModel):
    """Standardized error response."""

    error: str = Field(description="Error message")
    detail: str | None = Field(default=None, description="Detailed error information")
    code: str = Field(description="Error code (e.g., HTTP_404)")
    request_id: str = Field(description="Request ID for tracking")
