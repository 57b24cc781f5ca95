"""vexclient CLI entry point: the `vex` command group."""

from __future__ import annotations

import click

from vexclient.cli.commands.parse import parse_cmd
from vexclient.cli.commands.request import request_cmd
from vexclient.core.config import get_settings


@click.group()
@click.version_option(package_name="vexclient")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """vexclient: vulnerability exception workflow tooling.

    \b
    Quick start:
      vex request create --vuln-id vuln-123 --scope "All Instances" --reason "False Positive"
      vex request approve --id 987 --comment "Confirmed with asset owner"
      vex parse listing-response.xml --status "Under Review"

    Settings are read from VEX_* environment variables or a .env file.
    """
    ctx.ensure_object(dict)
    ctx.obj["settings"] = get_settings()


# Register sub-commands
cli.add_command(request_cmd)
cli.add_command(parse_cmd)


if __name__ == "__main__":
    cli()
