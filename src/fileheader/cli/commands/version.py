# topmark:header:start
#
#   project      : FileHeader
#   file         : version.py
#   file_relpath : src/fileheader/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FileHeader `version` command.

Prints the FileHeader version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from fileheader.constants import FILEHEADER_VERSION

if TYPE_CHECKING:
    from fileheader.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of FileHeader.",
)
@click.option("--json", "as_json", is_flag=True, help="Emit the version as JSON.")
@click.pass_context
def version_command(ctx: click.Context, *, as_json: bool = False) -> None:
    """Show the current version of FileHeader."""
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    if as_json:
        console.print(json.dumps({"version": FILEHEADER_VERSION}))
    else:
        console.print(console.styled(FILEHEADER_VERSION, bold=True))
