"""
Domain errors raised by the service layer.

Services raise these instead of HTTPException so the same operations can be
driven from the API, scripts and tests. ``main.py`` maps them to responses.
"""

from enum import Enum
from typing import Optional


class ErrorType(str, Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    STORAGE = "storage"


class DomainError(Exception):
    """Base class for all domain errors"""

    error_type: ErrorType = ErrorType.VALIDATION

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict:
        return {"type": self.error_type.value, "message": self.message, "details": self.details}


class ValidationError(DomainError):
    """A required field is missing or a value is not acceptable"""

    error_type = ErrorType.VALIDATION


class InvalidStatusTransitionError(ValidationError):
    def __init__(self, current: str, requested: str):
        super().__init__(
            f"Cannot change task status from '{current}' to '{requested}'",
            details={"current": current, "requested": requested},
        )


class NotFoundError(DomainError):
    error_type = ErrorType.NOT_FOUND


class StorageError(DomainError):
    """Underlying persistence failure (constraint violation, connectivity)"""

    error_type = ErrorType.STORAGE
