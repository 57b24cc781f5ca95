"""CLI command for reading saved console responses."""

from __future__ import annotations

from pathlib import Path
from xml.etree.ElementTree import ParseError

import click

from vexclient.cli.output import console, err_console, exceptions_table
from vexclient.core.console import ConsoleResponse
from vexclient.models.vuln_exception import Status
from vexclient.protocol.parser import parse_listing


@click.command("parse")
@click.argument("response_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--status",
    type=click.Choice([s.value for s in Status]),
    default=None,
    help="Show only exceptions in this workflow state",
)
def parse_cmd(response_file: Path, status: str | None) -> None:
    """Display the exceptions contained in a saved listing response."""
    try:
        response = ConsoleResponse.from_xml(response_file.read_bytes())
    except ParseError as e:
        err_console.print(f"[red]Invalid XML in {response_file}:[/red] {e}")
        raise SystemExit(1)

    if not response.success:
        err_console.print(
            f"[red]Console reported failure:[/red] {response.error or 'no detail'}"
        )
        raise SystemExit(1)

    items = parse_listing(response.document)
    if status:
        items = [e for e in items if e.status == status]
    console.print(exceptions_table(items))
