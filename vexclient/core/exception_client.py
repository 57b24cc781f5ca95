"""Lifecycle operations on vulnerability exceptions.

Each operation builds one request element, hands it to the console client and
maps the response back. There is no retry and no caching; the console owns the
authoritative state, so a record's ``status`` only changes locally when it is
re-fetched with ``list``.

Local fields (``id``, comments) are written only after the console reports
success, except for comment updates when ``optimistic_comment_updates`` is on.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from datetime import date

from vexclient.core import scope as scope_validator
from vexclient.core.config import Settings, get_settings
from vexclient.core.console import ConsoleClient, ConsoleResponse
from vexclient.core.errors import ConsoleRequestError, IllegalStateTransition, MissingField
from vexclient.core.logging import get_logger
from vexclient.models.vuln_exception import Reason, Status, VulnException
from vexclient.protocol import parser
from vexclient.protocol import requests as wire

logger = get_logger(__name__)


class ExceptionClient:
    """Vulnerability exception workflow bound to one console client.

    Usage:
        client = ExceptionClient(console)
        exc = VulnException("vuln-123", Scope.ALL_INSTANCES, Reason.FALSE_POSITIVE)
        client.save(exc, "Scanner misreads the banner")
        client.approve(exc, "Confirmed")
    """

    def __init__(self, console: ConsoleClient, settings: Settings | None = None) -> None:
        self._console = console
        self._settings = settings or get_settings()

    # ── Transport ────────────────────────────────────────────────────────────

    def _execute(self, xml: ET.Element) -> ConsoleResponse:
        logger.debug("Sending request", request=xml.tag, attributes=dict(xml.attrib))
        response = self._console.execute(xml, self._settings.protocol_version)
        if not response.success:
            logger.warning(
                "Console rejected request",
                request=xml.tag,
                exception_id=xml.get("exception-id"),
                error=response.error,
            )
        return response

    @staticmethod
    def _require_id(exception: VulnException) -> int:
        if exception.id is None:
            raise MissingField("id", "Exception has no id; save it first.")
        return exception.id

    # ── Listing ──────────────────────────────────────────────────────────────

    def list(
        self,
        status: Status | str | None = None,
        duration: str | None = None,
        *,
        strict: bool | None = None,
    ) -> list[VulnException]:
        """Retrieve vulnerability exceptions, optionally filtered.

        Args:
            status: Only return exceptions in this workflow state.
            duration: Time interval in the ISO 8601 form ``PnYnMnDTnHnMnS``.
            strict: Raise ``ConsoleRequestError`` when the console reports
                failure. Defaults to ``Settings.strict_listing``; when off, a
                failed request is indistinguishable from an empty result.
        """
        response = self._execute(wire.listing_request(status, duration))
        if strict is None:
            strict = self._settings.strict_listing
        if not response.success:
            if strict:
                raise ConsoleRequestError(wire.LISTING, response.error)
            return []
        return parser.parse_listing(response.document)

    vuln_exceptions = list

    # ── Create ───────────────────────────────────────────────────────────────

    def save(self, exception: VulnException, comment: str | None = None) -> int | None:
        """Submit ``exception`` to the console and record its new id.

        Returns the assigned id, or ``None`` when the console refused it.
        """
        draft = scope_validator.draft(exception, comment)
        response = self._execute(wire.create_request(draft))
        if not response.success:
            return None

        raw_id = response.attributes.get("exception-id")
        if raw_id is None:
            logger.warning("Create succeeded without an exception-id", vuln_id=draft.vuln_id)
            return None
        exception.id = int(raw_id)
        if comment is not None:
            exception.submitter_comment = comment
        logger.info("Exception created", exception_id=exception.id, vuln_id=draft.vuln_id)
        return exception.id

    # ── Workflow transitions ─────────────────────────────────────────────────

    def resubmit(self, exception: VulnException) -> bool:
        """Resubmit a rejected exception with its current comment and reason.

        Only ``Rejected`` exceptions can be resubmitted; anything else raises
        ``IllegalStateTransition`` without contacting the console.
        """
        if exception.status != Status.REJECTED:
            raise IllegalStateTransition("resubmit", exception.status, Status.REJECTED)
        return self.resubmit_by_id(
            self._require_id(exception), exception.submitter_comment, exception.reason
        )

    def resubmit_by_id(
        self, exception_id: int, comment: str | None, reason: Reason | str | None = None
    ) -> bool:
        return self._execute(wire.resubmit_request(exception_id, comment, reason)).success

    def recall(self, exception: VulnException) -> bool:
        """Undo a submission that is still under review (enforced by the console)."""
        return self.recall_by_id(self._require_id(exception))

    def recall_by_id(self, exception_id: int) -> bool:
        return self._execute(wire.recall_request(exception_id)).success

    def approve(self, exception: VulnException, comment: str | None = None) -> bool:
        ok = self._execute(wire.approve_request(self._require_id(exception), comment)).success
        if ok and comment:
            exception.reviewer_comment = comment
        return ok

    def reject(self, exception: VulnException, comment: str | None = None) -> bool:
        return self._execute(wire.reject_request(self._require_id(exception), comment)).success

    def delete(self, exception: VulnException) -> bool:
        """Delete the remote record. The local object is not usable afterwards."""
        return self.delete_by_id(self._require_id(exception))

    def delete_by_id(self, exception_id: int) -> bool:
        return self._execute(wire.delete_request(exception_id)).success

    # ── Updates ──────────────────────────────────────────────────────────────

    def update_submitter_comment(self, exception: VulnException, comment: str) -> bool:
        """Replace the submitter comment.

        The console only accepts this while the exception is under review or
        expired.
        """
        return self._update_comment(exception, comment, reviewer=False)

    def update_reviewer_comment(self, exception: VulnException, comment: str) -> bool:
        return self._update_comment(exception, comment, reviewer=True)

    def _update_comment(self, exception: VulnException, comment: str, *, reviewer: bool) -> bool:
        if comment is None:
            raise MissingField("comment")
        field = "reviewer_comment" if reviewer else "submitter_comment"
        xml = wire.update_comment_request(self._require_id(exception), comment, reviewer=reviewer)

        if self._settings.optimistic_comment_updates:
            setattr(exception, field, comment)
            return self._execute(xml).success

        ok = self._execute(xml).success
        if ok:
            setattr(exception, field, comment)
        return ok

    def update_expiration_date(self, exception: VulnException, new_date: date | str) -> bool:
        """Move the expiration date. Dates in the past are refused by the console."""
        xml = wire.update_expiration_request(self._require_id(exception), new_date)
        ok = self._execute(xml).success
        if ok:
            exception.expiration = xml.get("expiration-date")
        return ok
