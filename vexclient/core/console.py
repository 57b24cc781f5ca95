"""Contract with the console transport.

Opening sessions, authenticating and moving XML over HTTP belong to the
transport. vexclient only hands it a request element plus a protocol version
and reads back a ``ConsoleResponse``.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

PROTOCOL_VERSION = "1.2"

_TRUTHY = {"1", "true", "yes"}


@dataclass
class ConsoleResponse:
    success: bool
    attributes: dict[str, str] = field(default_factory=dict)
    document: ET.Element | None = None
    error: str | None = None           # failure text from the console, if any

    @classmethod
    def from_xml(cls, body: str | bytes) -> "ConsoleResponse":
        """Build a response from a raw response body.

        The root's ``success`` attribute decides the outcome. On failure the
        first ``Failure//message`` text (or the root text) becomes ``error``.
        """
        root = ET.fromstring(body)
        success = (root.get("success") or "").strip().lower() in _TRUTHY
        error = None
        if not success:
            message = root.find(".//Failure//message")
            if message is None:
                message = root.find(".//message")
            text = message.text if message is not None else root.text
            error = text.strip() if text and text.strip() else None
        return cls(success=success, attributes=dict(root.attrib), document=root, error=error)


@runtime_checkable
class ConsoleClient(Protocol):
    """Anything able to send one request to the console and return its response."""

    def execute(self, request: ET.Element, version: str) -> ConsoleResponse: ...
