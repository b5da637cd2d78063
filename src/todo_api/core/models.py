"""Todo domain model."""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

MAX_DESCRIPTION_LENGTH = 500


@dataclass(frozen=True)
class Todo:
    """A single task.

    Instances are immutable. Changing a task means building a new value
    with ``dataclasses.replace`` and writing it back through the store.

    Attributes:
        id: Identifier assigned at creation, never reused
        description: Trimmed, non-empty task text
        completed: Whether the task is done
    """

    id: UUID
    description: str
    completed: bool = False
