"""Client for the vulnerability exception workflow of a security console."""

from vexclient.core.console import PROTOCOL_VERSION, ConsoleClient, ConsoleResponse
from vexclient.core.errors import (
    ConsoleRequestError,
    IllegalStateTransition,
    InvalidReason,
    InvalidScope,
    MissingField,
    ValidationError,
    VulnExceptionError,
)
from vexclient.core.exception_client import ExceptionClient
from vexclient.core.scope import validate
from vexclient.models import ExceptionDraft, Reason, Scope, Status, VulnException
from vexclient.protocol.parser import parse, parse_listing

__all__ = [
    "PROTOCOL_VERSION",
    "ConsoleClient",
    "ConsoleRequestError",
    "ConsoleResponse",
    "ExceptionClient",
    "ExceptionDraft",
    "IllegalStateTransition",
    "InvalidReason",
    "InvalidScope",
    "MissingField",
    "Reason",
    "Scope",
    "Status",
    "ValidationError",
    "VulnException",
    "VulnExceptionError",
    "parse",
    "parse_listing",
    "validate",
]
