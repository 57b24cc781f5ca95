"""Parse console response elements into VulnException records.

Listing responses and single-record responses share ``parse``; any subset of
attributes and comment elements may be missing.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from enum import Enum
from typing import TypeVar

from vexclient.core.logging import get_logger
from vexclient.models.vuln_exception import Reason, Scope, Status, VulnException

logger = get_logger(__name__)

RECORD_TAG = "VulnerabilityException"

E = TypeVar("E", bound=Enum)


def _int_or_raw(field: str, value: str | None) -> int | str | None:
    """Integer-parse ``value``; keep non-numeric strings as they are."""
    if value is None or not value.strip():
        return None
    try:
        return int(value)
    except ValueError:
        logger.warning("Non-numeric value in console response", field=field, value=value)
        return value


def _enum_or_raw(enum_cls: type[E], value: str | None) -> E | str | None:
    """Map a known value onto ``enum_cls``; keep unknown strings as they are."""
    if value is None:
        return None
    try:
        return enum_cls(value)
    except ValueError:
        logger.warning("Unrecognised value in console response", field=enum_cls.__name__, value=value)
        return value


def _status(value: str | None) -> Status | None:
    if value is None:
        return None
    try:
        return Status(value)
    except ValueError:
        logger.warning("Unrecognised exception status, ignoring", value=value)
        return None


def _child_text(xml: ET.Element, tag: str) -> str | None:
    child = xml.find(tag)
    if child is None:
        return None
    # <submitter-comment/> present but empty reads as ""
    return child.text or ""


def parse(xml: ET.Element) -> VulnException:
    attrs = xml.attrib
    exception = VulnException(
        attrs.get("vuln-id"),
        _enum_or_raw(Scope, attrs.get("scope")),
        _enum_or_raw(Reason, attrs.get("reason")),
        _status(attrs.get("status")),
    )
    exception.id = _int_or_raw("exception-id", attrs.get("exception-id"))
    exception.submitter = attrs.get("submitter")
    exception.reviewer = attrs.get("reviewer")
    exception.asset_id = _int_or_raw("device-id", attrs.get("device-id"))
    exception.port = _int_or_raw("port-no", attrs.get("port-no"))
    exception.vuln_key = attrs.get("vuln-key")
    exception.expiration = attrs.get("expiration-date")
    exception.submitter_comment = _child_text(xml, "submitter-comment")
    exception.reviewer_comment = _child_text(xml, "reviewer-comment")
    return exception


def parse_listing(document: ET.Element | None) -> list[VulnException]:
    """Parse every ``VulnerabilityException`` element found under ``document``."""
    if document is None:
        return []
    return [parse(ve) for ve in document.iter(RECORD_TAG)]
