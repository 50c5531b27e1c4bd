# topmark:header:start
#
#   project      : FileHeader
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running FileHeader in a controlled working directory.

`run_cli_in()` changes the process working directory before invoking the
Click CLI, so relative paths and config discovery resolve against the test's
temporary directory.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from click.testing import CliRunner, Result

from fileheader.cli.exit_codes import ExitCode
from fileheader.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


def run_cli_in(tmp_path: Path, argv: Sequence[str]) -> Result:
    """Invoke the CLI with ``tmp_path`` as the working directory.

    Args:
        tmp_path (Path): Directory to run the command from.
        argv (Sequence[str]): CLI argument vector, e.g. ``["check", "a.js"]``.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, list(argv))
    finally:
        os.chdir(cwd)


def run_cli(argv: Sequence[str]) -> Result:
    """Invoke the CLI without changing the working directory."""
    return CliRunner().invoke(cli, list(argv))


def assert_exit(result: Result, code: ExitCode) -> None:
    """Assert the exit code, showing the output on failure."""
    assert result.exit_code == code, result.output
