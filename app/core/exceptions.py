"""
Application error taxonomy.

Every error carries the HTTP status it maps to and a short ``code`` that is
returned to clients in the ``error`` field of the response envelope.
"""
from typing import Any, Iterable, Optional


class AppError(Exception):
    """Base class for errors that are rendered as an error response."""
    status_code: int = 500
    code: str = "Error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """Base class for request payload validation failures."""
    status_code = 422
    code = "ValidationError"

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field


class MissingField(ValidationError):
    code = "MissingField"

    def __init__(self, field: str):
        super().__init__(field, f"{field} is required")


class InvalidFormat(ValidationError):
    code = "InvalidFormat"

    def __init__(self, field: str, value: Any, expected: str):
        super().__init__(field, f"Invalid {field} value '{value}'. Must be {expected}")
        self.value = value


class InvalidValue(ValidationError):
    code = "InvalidValue"

    def __init__(self, field: str, message: str, allowed: Optional[Iterable[str]] = None):
        super().__init__(field, message)
        self.allowed = list(allowed) if allowed is not None else None


class InvalidDate(ValidationError):
    code = "InvalidDate"

    def __init__(self, field: str, value: Any):
        super().__init__(field, f"Invalid {field} format '{value}'. Use YYYY-MM-DD")
        self.value = value


class BadId(AppError):
    status_code = 400
    code = "BadId"

    def __init__(self, entity: str, value: Any):
        super().__init__(f"Invalid {entity} ID format")
        self.value = value


class NotFound(AppError):
    status_code = 404
    code = "NotFound"

    def __init__(self, entity: str):
        super().__init__(f"{entity} not found!")
        self.entity = entity


class Conflict(AppError):
    status_code = 409
    code = "Conflict"
