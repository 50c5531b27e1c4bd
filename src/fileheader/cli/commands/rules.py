# topmark:header:start
#
#   project      : FileHeader
#   file         : rules.py
#   file_relpath : src/fileheader/cli/commands/rules.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FileHeader `rules` command.

Lists the registered checkers with their metadata, as plain text or JSON.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from fileheader.rule import get_checker_registry

if TYPE_CHECKING:
    from fileheader.cli.console import ClickConsole
    from fileheader.rule import RuleMetadata


def _metadata_to_dict(meta: RuleMetadata) -> dict[str, Any]:
    return {
        "rule_name": meta.rule_name,
        "description": meta.description,
        "options_description": meta.options_description,
        "option_examples": [list(example) for example in meta.option_examples],
        "has_fix": meta.has_fix,
        "type": meta.rule_type,
        "typescript_only": meta.typescript_only,
    }


@click.command(
    name="rules",
    help="List registered rules.",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Emit the rule metadata as JSON.",
)
@click.option(
    "--long",
    "show_details",
    is_flag=True,
    help="Show the options description and examples of each rule.",
)
@click.pass_context
def rules_command(ctx: click.Context, *, as_json: bool = False, show_details: bool = False) -> None:
    """List registered rules."""
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    metas: list[RuleMetadata] = [
        entry.metadata for _, entry in sorted(get_checker_registry().items())
    ]

    if as_json:
        console.print(json.dumps([_metadata_to_dict(m) for m in metas], indent=2))
        return

    for meta in metas:
        fix_marker: str = " (fixable)" if meta.has_fix else ""
        name: str = console.styled(meta.rule_name, bold=True)
        console.print(f"{name}{fix_marker}: {meta.description}")
        if show_details:
            for line in meta.options_description.splitlines():
                console.print(f"    {line}")
            for example in meta.option_examples:
                console.print(f"    example: {json.dumps(list(example))}")
