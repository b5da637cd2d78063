"""Tagged result and unset sentinel types."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying a value."""

    value: T


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed outcome carrying an error value."""

    error: E


Result: TypeAlias = Union[Ok[T], Err[E]]


class Unset(enum.Enum):
    """Marker for a field the caller did not supply.

    Distinct from ``None`` so that "leave unchanged" never gets confused
    with "set to nothing".
    """

    UNSET = "UNSET"

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET = Unset.UNSET
