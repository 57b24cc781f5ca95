"""Error hierarchy for vulnerability exception operations.

Local errors (validation, illegal transitions) are raised before any request
reaches the console so callers can branch on the kind without a round trip.
"""

from __future__ import annotations

from typing import Any


def _label(value: Any) -> str:
    return str(getattr(value, "value", value))


class VulnExceptionError(Exception):
    """Base class for every error raised by vexclient."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(VulnExceptionError):
    """An exception record does not satisfy the field rules for its scope."""


class MissingField(ValidationError):
    """A required field is absent."""

    def __init__(self, field: str, message: str | None = None) -> None:
        self.field = field
        super().__init__(message or f"No {field}.")


class InvalidScope(ValidationError):
    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Invalid scope: {value}")


class InvalidReason(ValidationError):
    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Invalid reason: {value}")


class IllegalStateTransition(VulnExceptionError):
    """The requested transition is not allowed from the record's current status."""

    def __init__(self, operation: str, current: Any, required: Any) -> None:
        self.operation = operation
        self.current = current
        self.required = required
        super().__init__(
            f"Cannot {operation} an exception with status {_label(current)}; "
            f"status must be {_label(required)}."
        )


class ConsoleRequestError(VulnExceptionError):
    """The console reported failure for a request (strict listing only)."""

    def __init__(self, request: str, detail: str | None = None) -> None:
        self.request = request
        self.detail = detail
        super().__init__(f"{request} failed: {detail or 'no detail from console'}")
