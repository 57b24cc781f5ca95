"""CLI commands that render the request element an operation would send."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from datetime import datetime

import click

from vexclient.cli.output import err_console, print_request
from vexclient.core import scope as scope_validator
from vexclient.core.errors import ValidationError
from vexclient.models.vuln_exception import Reason, Scope, Status, VulnException
from vexclient.protocol import requests as wire

_id_option = click.option("--id", "exception_id", type=int, required=True, help="Exception ID")
_comment_option = click.option("--comment", default=None, help="Comment to attach")


def _show(ctx: click.Context, xml: ET.Element) -> None:
    print_request(xml, ctx.obj["settings"].protocol_version)


@click.group("request")
def request_cmd() -> None:
    """Preview vulnerability exception requests without sending them."""


@request_cmd.command("list")
@click.option("--status", type=click.Choice([s.value for s in Status]), default=None)
@click.option("--duration", default=None, help="ISO 8601 interval, e.g. P30D")
@click.pass_context
def request_list(ctx: click.Context, status: str | None, duration: str | None) -> None:
    """Listing request, optionally filtered by status and age."""
    _show(ctx, wire.listing_request(status, duration))


@request_cmd.command("create")
@click.option("--vuln-id", required=True, help="Vulnerability definition ID")
@click.option("--scope", "scope", type=click.Choice([s.value for s in Scope]), required=True)
@click.option("--reason", type=click.Choice([r.value for r in Reason]), required=True)
@click.option("--asset-id", type=int, default=None, help="Asset (device) ID")
@click.option("--port", type=int, default=None, help="Port of the vulnerable instance")
@click.option("--vuln-key", default=None, help="Vulnerable component (file, account, program)")
@_comment_option
@click.pass_context
def request_create(
    ctx: click.Context,
    vuln_id: str,
    scope: str,
    reason: str,
    asset_id: int | None,
    port: int | None,
    vuln_key: str | None,
    comment: str | None,
) -> None:
    """Validate an exception and show its create request."""
    exception = VulnException(vuln_id, scope, reason, asset_id=asset_id, port=port, vuln_key=vuln_key)
    try:
        draft = scope_validator.draft(exception, comment)
    except ValidationError as e:
        err_console.print(f"[red]Invalid exception:[/red] {e.message}")
        raise SystemExit(1)
    _show(ctx, wire.create_request(draft))


@request_cmd.command("resubmit")
@_id_option
@_comment_option
@click.option("--reason", type=click.Choice([r.value for r in Reason]), default=None)
@click.pass_context
def request_resubmit(
    ctx: click.Context, exception_id: int, comment: str | None, reason: str | None
) -> None:
    """Resubmit request for a rejected exception."""
    _show(ctx, wire.resubmit_request(exception_id, comment, reason))


@request_cmd.command("recall")
@_id_option
@click.pass_context
def request_recall(ctx: click.Context, exception_id: int) -> None:
    _show(ctx, wire.recall_request(exception_id))


@request_cmd.command("approve")
@_id_option
@_comment_option
@click.pass_context
def request_approve(ctx: click.Context, exception_id: int, comment: str | None) -> None:
    _show(ctx, wire.approve_request(exception_id, comment))


@request_cmd.command("reject")
@_id_option
@_comment_option
@click.pass_context
def request_reject(ctx: click.Context, exception_id: int, comment: str | None) -> None:
    _show(ctx, wire.reject_request(exception_id, comment))


@request_cmd.command("delete")
@_id_option
@click.pass_context
def request_delete(ctx: click.Context, exception_id: int) -> None:
    _show(ctx, wire.delete_request(exception_id))


@request_cmd.command("comment")
@_id_option
@click.option("--comment", required=True, help="New comment text")
@click.option("--reviewer", is_flag=True, default=False, help="Update the reviewer comment")
@click.pass_context
def request_comment(ctx: click.Context, exception_id: int, comment: str, reviewer: bool) -> None:
    """Update-comment request (submitter comment unless --reviewer)."""
    _show(ctx, wire.update_comment_request(exception_id, comment, reviewer=reviewer))


@request_cmd.command("expire")
@_id_option
@click.option(
    "--date", "new_date", type=click.DateTime(formats=["%Y-%m-%d"]), required=True,
    help="New expiration date (YYYY-MM-DD)",
)
@click.pass_context
def request_expire(ctx: click.Context, exception_id: int, new_date: datetime) -> None:
    """Update-expiration request. The console refuses dates in the past."""
    _show(ctx, wire.update_expiration_request(exception_id, new_date.date()))
