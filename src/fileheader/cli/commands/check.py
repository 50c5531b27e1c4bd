# topmark:header:start
#
#   project      : FileHeader
#   file         : check.py
#   file_relpath : src/fileheader/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FileHeader `check` command.

Checks that each file starts with a header comment matching the configured
pattern. By default this is a dry run: violations are reported and the exit
code tells whether they could be fixed. With ``--apply``, fixes are written
back to the files.

Configuration precedence (highest first):
    1. ``--pattern`` / ``--template`` options,
    2. the file given with ``--config``, or else the nearest discovered
       ``fileheader.toml`` / ``pyproject.toml`` ``[tool.fileheader]``.

Exit codes:
    0 all headers valid (or all fixes applied), 1 unfixable violations,
    2 fixable violations in dry run, 65/66/74 input errors, 78 config errors.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from fileheader.api import check_path, write_text
from fileheader.cli.errors import (
    FileheaderConfigError,
    FileheaderEncodingError,
    FileheaderFileNotFoundError,
    FileheaderIOError,
    FileheaderUsageError,
)
from fileheader.cli.exit_codes import ExitCode
from fileheader.config import HeaderConfigError, MutableConfig, discover_config_file
from fileheader.config.logging import get_logger
from fileheader.utils.diff import render_patch, unified_diff

if TYPE_CHECKING:
    from fileheader.api import FileResult
    from fileheader.cli.console import ClickConsole
    from fileheader.config import Config
    from fileheader.config.logging import FileheaderLogger

logger: FileheaderLogger = get_logger(__name__)


def resolve_config(
    *,
    config_path: Path | None,
    pattern: str | None,
    template: str | None,
    start: Path,
) -> Config:
    """Resolve the effective configuration for a `check` run.

    Args:
        config_path (Path | None): Explicit config file (``--config``).
        pattern (str | None): ``--pattern`` override.
        template (str | None): ``--template`` override.
        start (Path): Directory to start config discovery from.

    Returns:
        Config: The frozen configuration.

    Raises:
        HeaderConfigError: If the configuration is missing or invalid.
    """
    draft: MutableConfig = MutableConfig.from_defaults()

    source: Path | None = config_path or discover_config_file(start)
    if source is not None:
        loaded: MutableConfig | None = MutableConfig.from_toml_file(source)
        if loaded is None:
            raise HeaderConfigError("no [tool.fileheader] table", source=source)
        draft = draft.merge_with(loaded)

    draft = draft.merge_with(MutableConfig(pattern=pattern, template=template))
    logger.debug("Effective config draft: %s", draft)
    return draft.freeze()


def _check_one(path: Path, cfg: Config) -> FileResult:
    if not path.exists():
        raise FileheaderFileNotFoundError(f"No such file: {path}")
    if path.is_dir():
        raise FileheaderUsageError(f"Expected a file, got a directory: {path}")
    try:
        return check_path(path, cfg)
    except UnicodeDecodeError as e:
        raise FileheaderEncodingError(f"{path}: not valid UTF-8 ({e.reason})") from e
    except OSError as e:
        raise FileheaderIOError(f"{path}: {e}") from e


@click.command(
    name="check",
    help="Check that files start with a header comment matching a pattern.",
)
@click.argument(
    "paths",
    nargs=-1,
    required=True,
    type=click.Path(path_type=Path),
)
@click.option(
    "-p",
    "--pattern",
    default=None,
    help="Regular expression the leading comment must contain.",
)
@click.option(
    "-t",
    "--template",
    default=None,
    help="Header text to insert (rendered as a /* ... */ block) when fixing.",
)
@click.option(
    "-c",
    "--config",
    "config_path",
    default=None,
    type=click.Path(path_type=Path, exists=True, dir_okay=False),
    help="Config file (fileheader.toml or pyproject.toml); disables discovery.",
)
@click.option("--apply", "apply_changes", is_flag=True, help="Write fixes back to the files.")
@click.option("--diff", "show_diff", is_flag=True, help="Show a unified diff of each fix.")
@click.pass_context
def check_command(
    ctx: click.Context,
    *,
    paths: tuple[Path, ...],
    pattern: str | None,
    template: str | None,
    config_path: Path | None,
    apply_changes: bool,
    show_diff: bool,
) -> None:
    """Check (and optionally fix) the header comment of each file in PATHS."""
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]
    verbosity: int = ctx.obj.get("verbosity_level", 0)

    try:
        cfg: Config = resolve_config(
            config_path=config_path,
            pattern=pattern,
            template=template,
            start=Path.cwd(),
        )
    except HeaderConfigError as e:
        raise FileheaderConfigError(str(e)) from e

    if (apply_changes or show_diff) and not cfg.can_fix:
        console.warn("No insertion template configured; violations cannot be fixed.")

    n_unfixable: int = 0
    n_fixable: int = 0
    for path in paths:
        result: FileResult = _check_one(path, cfg)
        if result.diagnostic is None:
            if verbosity > 0:
                console.print(f"{path}: {console.styled('ok', fg='green')}")
            continue

        fixed: str | None = result.fixed_text
        if fixed is None:
            n_unfixable += 1
        else:
            n_fixable += 1

        if verbosity >= 0:
            suffix: str = " [fixable]" if fixed is not None else ""
            message: str = result.diagnostic.message
            if console.enable_color:
                message = result.diagnostic.level.color(message)
            console.print(
                f"{path}:{result.position}: {message} ({result.diagnostic.rule_name}){suffix}"
            )

        if fixed is None:
            continue
        if show_diff:
            patch: str = unified_diff(
                result.source.text, fixed, str(path), result.source.line_ending
            )
            if console.enable_color:
                console.print(render_patch(patch), nl=False)
            else:
                console.print(patch, nl=not patch.endswith("\n"))
        if apply_changes:
            try:
                write_text(path, fixed)
            except OSError as e:
                raise FileheaderIOError(f"{path}: {e}") from e
            logger.info("Applied header fix to %s", path)
            if verbosity >= 0:
                console.print(f"{path}: {console.styled('fixed', fg='green')}")

    if n_unfixable:
        ctx.exit(ExitCode.FAILURE)
    if n_fixable and not apply_changes:
        ctx.exit(ExitCode.WOULD_CHANGE)
    ctx.exit(ExitCode.SUCCESS)
