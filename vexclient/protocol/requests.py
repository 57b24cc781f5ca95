"""Request elements for each vulnerability exception operation."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from datetime import date, datetime
from enum import Enum
from typing import Any, assert_never

from vexclient.core.errors import InvalidScope, MissingField
from vexclient.models.vuln_exception import ExceptionDraft, Reason, Scope, Status

LISTING = "VulnerabilityExceptionListingRequest"
CREATE = "VulnerabilityExceptionCreateRequest"
RESUBMIT = "VulnerabilityExceptionResubmitRequest"
RECALL = "VulnerabilityExceptionRecallRequest"
APPROVE = "VulnerabilityExceptionApproveRequest"
REJECT = "VulnerabilityExceptionRejectRequest"
DELETE = "VulnerabilityExceptionDeleteRequest"
UPDATE_COMMENT = "VulnerabilityExceptionUpdateCommentRequest"
UPDATE_EXPIRATION = "VulnerabilityExceptionUpdateExpirationDateRequest"


def _text(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def _element(tag: str, attributes: dict[str, Any] | None = None) -> ET.Element:
    """Build ``tag`` with every non-None attribute rendered as text."""
    attrib = {k: _text(v) for k, v in (attributes or {}).items() if v is not None}
    return ET.Element(tag, attrib)


def _add_text_child(parent: ET.Element, tag: str, text: str | None) -> ET.Element:
    child = ET.SubElement(parent, tag)
    if text is not None:
        child.text = text
    return child


def listing_request(status: Status | str | None = None, duration: str | None = None) -> ET.Element:
    """``duration`` is an ISO 8601 interval such as ``P1Y2M3DT4H5M6S``."""
    return _element(LISTING, {"status": status, "time-duration": duration})


def create_request(draft: ExceptionDraft) -> ET.Element:
    """Build the create request, enforcing the field rules of ``draft.scope``.

    Drafts from ``scope.draft`` always pass; hand-built drafts that lack an
    asset, or a port/key for instance scope, raise ``MissingField``.
    """
    xml = _element(
        CREATE,
        {"vuln-id": draft.vuln_id, "scope": draft.scope, "reason": draft.reason},
    )
    scope = draft.scope
    if scope is Scope.ALL_INSTANCES:
        pass
    elif scope is Scope.ALL_INSTANCES_ON_A_SPECIFIC_ASSET:
        if draft.asset_id is None:
            raise MissingField("asset_id")
        xml.set("device-id", _text(draft.asset_id))
    elif scope is Scope.SPECIFIC_INSTANCE_OF_SPECIFIC_ASSET:
        if draft.asset_id is None:
            raise MissingField("asset_id")
        if draft.port is None and not draft.vuln_key:
            raise MissingField("port", "Port or vuln_key is required.")
        xml.set("device-id", _text(draft.asset_id))
        if draft.port is not None:
            xml.set("port-no", _text(draft.port))
        if draft.vuln_key:
            xml.set("vuln-key", draft.vuln_key)
    elif scope is Scope.ALL_INSTANCES_IN_A_SPECIFIC_SITE:
        raise InvalidScope(scope.value)
    else:
        assert_never(scope)

    if draft.comment:
        _add_text_child(xml, "comment", draft.comment)
    return xml


def resubmit_request(
    exception_id: int, comment: str | None, reason: Reason | str | None = None
) -> ET.Element:
    xml = _element(RESUBMIT, {"exception-id": exception_id, "reason": reason})
    # the console expects the comment element even when it is empty
    _add_text_child(xml, "comment", comment)
    return xml


def recall_request(exception_id: int) -> ET.Element:
    return _element(RECALL, {"exception-id": exception_id})


def approve_request(exception_id: int, comment: str | None = None) -> ET.Element:
    xml = _element(APPROVE, {"exception-id": exception_id})
    if comment:
        _add_text_child(xml, "comment", comment)
    return xml


def reject_request(exception_id: int, comment: str | None = None) -> ET.Element:
    xml = _element(REJECT, {"exception-id": exception_id})
    if comment:
        _add_text_child(xml, "comment", comment)
    return xml


def delete_request(exception_id: int) -> ET.Element:
    return _element(DELETE, {"exception-id": exception_id})


def update_comment_request(exception_id: int, comment: str, *, reviewer: bool = False) -> ET.Element:
    xml = _element(UPDATE_COMMENT, {"exception-id": exception_id})
    _add_text_child(xml, "reviewer-comment" if reviewer else "submitter-comment", comment)
    return xml


def update_expiration_request(exception_id: int, new_date: date | str) -> ET.Element:
    return _element(
        UPDATE_EXPIRATION,
        {"exception-id": exception_id, "expiration-date": new_date},
    )


def to_string(xml: ET.Element) -> str:
    return ET.tostring(xml, encoding="unicode")
