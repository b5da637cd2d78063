"""Domain errors."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationError:
    """Input that breaks a business rule.

    Returned inside ``Err`` rather than raised.

    Attributes:
        message: Human-readable reason
        field: Name of the offending field
    """

    message: str
    field: str = "description"


class StorageError(Exception):
    """Backing store failed to complete an operation."""

    def __init__(self, operation: str, detail: str | None = None) -> None:
        """Initialize storage error.

        Args:
            operation: Store operation that failed (e.g., "create")
            detail: Underlying error description
        """
        super().__init__(f"Storage operation '{operation}' failed")
        self.operation = operation
        self.detail = detail
