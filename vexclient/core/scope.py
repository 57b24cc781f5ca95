"""Scope validation for vulnerability exceptions.

Runs once, before a create request is built. Other transitions assume the
record already satisfied these rules when it was created.
"""

from __future__ import annotations

from typing import assert_never

from vexclient.core.errors import InvalidReason, InvalidScope, MissingField
from vexclient.models.vuln_exception import ExceptionDraft, Reason, Scope, VulnException


def coerce_scope(value: Scope | str) -> Scope:
    try:
        return Scope(value)
    except ValueError:
        raise InvalidScope(value) from None


def coerce_reason(value: Reason | str) -> Reason:
    try:
        return Reason(value)
    except ValueError:
        raise InvalidReason(value) from None


def validate(exception: VulnException) -> None:
    """Check ``exception`` against the field rules of its scope.

    Fields the scope ignores are cleared on the record so stale values from a
    previous scope never reach the console.

    Raises:
        MissingField: vuln_id, scope, reason, asset_id, or both port and
            vuln_key are absent where the scope needs them.
        InvalidScope: the scope is not one a create request accepts.
        InvalidReason: the reason is not a recognized value.
    """
    if not exception.vuln_id:
        raise MissingField("vuln_id")
    if not exception.scope:
        raise MissingField("scope")
    if not exception.reason:
        raise MissingField("reason")

    scope = coerce_scope(exception.scope)
    exception.scope = scope
    exception.reason = coerce_reason(exception.reason)

    if scope is Scope.ALL_INSTANCES:
        exception.asset_id = exception.port = exception.vuln_key = None
    elif scope is Scope.ALL_INSTANCES_ON_A_SPECIFIC_ASSET:
        if exception.asset_id is None:
            raise MissingField("asset_id")
        exception.port = exception.vuln_key = None
    elif scope is Scope.SPECIFIC_INSTANCE_OF_SPECIFIC_ASSET:
        if exception.asset_id is None:
            raise MissingField("asset_id")
        if exception.port is None and not exception.vuln_key:
            raise MissingField("port", "Port or vuln_key is required.")
    elif scope is Scope.ALL_INSTANCES_IN_A_SPECIFIC_SITE:
        # listed by the console, but not creatable through this request
        raise InvalidScope(scope.value)
    else:
        assert_never(scope)


def draft(exception: VulnException, comment: str | None = None) -> ExceptionDraft:
    """Validate ``exception`` and freeze its create payload."""
    validate(exception)
    return ExceptionDraft(
        vuln_id=exception.vuln_id,
        scope=coerce_scope(exception.scope),
        reason=coerce_reason(exception.reason),
        asset_id=exception.asset_id,
        port=exception.port,
        vuln_key=exception.vuln_key,
        comment=comment if comment is not None else exception.submitter_comment,
    )
