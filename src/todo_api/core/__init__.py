"""Domain types shared by the store, service and API layers."""

from .errors import StorageError, ValidationError
from .models import MAX_DESCRIPTION_LENGTH, Todo
from .result import UNSET, Err, Ok, Result, Unset

__all__ = [
    "MAX_DESCRIPTION_LENGTH",
    "Todo",
    "ValidationError",
    "StorageError",
    "Ok",
    "Err",
    "Result",
    "Unset",
    "UNSET",
]
