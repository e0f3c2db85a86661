"""Utility functions and helpers."""

from rabt.utils.responses import created, error, preflight, success, validation_error
from rabt.utils.exceptions import (
    ConflictError,
    NotificationError,
    PersistenceError,
    RabtError,
    ValidationError,
)

__all__ = [
    # Response helpers
    "success",
    "created",
    "error",
    "preflight",
    "validation_error",
    # Exceptions
    "RabtError",
    "ValidationError",
    "ConflictError",
    "PersistenceError",
    "NotificationError",
]
