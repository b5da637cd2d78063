"""Errors raised by route handlers.

Each subclass fixes its HTTP status and error code; handlers.py turns
them into the shared error body.
"""

from typing import Any

from fastapi import HTTPException


class APIError(HTTPException):
    """Route-level error carrying a message, a machine code and a detail."""

    default_status: int = 400
    default_code: str = "BAD_REQUEST"

    def __init__(
        self,
        message: str,
        code: str | None = None,
        status_code: int | None = None,
        detail: str | None = None,
    ) -> None:
        self.message = message
        self.code = code or self.default_code
        super().__init__(
            status_code=status_code or self.default_status,
            detail={"message": message, "code": self.code, "detail": detail},
        )


class NotFoundError(APIError):
    """No todo (or other resource) under the requested id.

    Also raised for ids that do not parse, so ``resource_id`` is kept as
    received.
    """

    default_status = 404
    default_code = "NOT_FOUND"

    def __init__(self, resource: str, resource_id: Any) -> None:
        super().__init__(
            f"{resource} not found",
            detail=f"{resource} with id '{resource_id}' does not exist",
        )
        self.resource = resource
        self.resource_id = resource_id


class BadRequestError(APIError):
    """Input rejected by a business rule."""

    default_code = "VALIDATION_ERROR"

    def __init__(self, message: str, detail: str | None = None) -> None:
        super().__init__(message, detail=detail)


class ServiceUnavailableError(APIError):
    """A backing service (the todo store) cannot be reached."""

    default_status = 503
    default_code = "SERVICE_UNAVAILABLE"

    def __init__(self, service: str, detail: str | None = None) -> None:
        super().__init__(f"{service} service unavailable", detail=detail)
