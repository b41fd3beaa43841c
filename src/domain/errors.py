"""
Client-facing faults raised by the workflows.

The API layer turns a ClientFault into a `{statusCode, message}` response with
the fault's status code. Anything else reaching the boundary is a 500.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldError:
    """A single field-level validation failure."""

    field: str
    message: str


class ClientFault(Exception):
    """Base fault carrying an HTTP status and a human-readable message."""

    status_code: int = 400

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationFault(ClientFault):
    """Input failed shape or length rules."""

    status_code = 400

    def __init__(self, errors: list[FieldError], message: str = "Validation failed") -> None:
        self.errors = errors
        super().__init__(message)


class Conflict(ClientFault):
    """A uniqueness rule would be violated."""

    status_code = 400


class NotFound(ClientFault):
    status_code = 404


class Unauthorized(ClientFault):
    status_code = 401


class DuplicateRecordError(Exception):
    """Raised by a store when a unique index rejects a write."""
