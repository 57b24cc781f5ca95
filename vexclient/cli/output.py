"""Rich output helpers: exception tables, request rendering."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from enum import Enum

from rich.console import Console
from rich.table import Table

from vexclient.models.vuln_exception import VulnException

console = Console()
err_console = Console(stderr=True)


def status_style(status: str | None) -> str:
    return {
        "Approved": "green",
        "Under Review": "yellow",
        "Rejected": "red",
        "Deleted": "dim",
    }.get(status or "", "white")


def _label(value: object) -> str:
    if value is None or value == "":
        return "—"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def exceptions_table(items: list[VulnException]) -> Table:
    table = Table(
        title=f"Vulnerability exceptions ({len(items)})",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
        show_lines=False,
    )
    table.add_column("ID", justify="right", style="bold", no_wrap=True)
    table.add_column("Vuln")
    table.add_column("Status")
    table.add_column("Scope")
    table.add_column("Reason")
    table.add_column("Asset", justify="right")
    table.add_column("Port", justify="right")
    table.add_column("Key", style="dim")
    table.add_column("Expires", style="dim")
    table.add_column("Submitter", style="dim")

    for e in items:
        status = _label(e.status)
        table.add_row(
            _label(e.id),
            _label(e.vuln_id),
            f"[{status_style(status)}]{status}[/]",
            _label(e.scope),
            _label(e.reason),
            _label(e.asset_id),
            _label(e.port),
            _label(e.vuln_key),
            _label(e.expiration),
            _label(e.submitter),
        )

    return table


def print_request(xml: ET.Element, version: str) -> None:
    ET.indent(xml)
    console.print(f"[dim]protocol version {version}[/dim]")
    console.print(ET.tostring(xml, encoding="unicode"), markup=False, highlight=False, soft_wrap=True)
