# topmark:header:start
#
#   file         : diff.py
#   file_relpath : src/fileheader/utils/diff.py
#   project      : FileHeader
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unified diff generation and colorized preview for header fixes."""

from __future__ import annotations

import difflib
from typing import TYPE_CHECKING

from yachalk import chalk

from fileheader.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from fileheader.config.logging import FileheaderLogger

logger: FileheaderLogger = get_logger(__name__)


def unified_diff(original: str, updated: str, path: str, line_ending: str = "\n") -> str:
    """Return a unified diff between two versions of a file.

    Lines keep their original terminators; no CRLF conversion is introduced.

    Args:
        original (str): Current file content.
        updated (str): Fixed file content.
        path (str): Path shown in the diff headers.
        line_ending (str): Terminator for the diff's own header/hunk lines.

    Returns:
        str: The diff text, empty if the contents are equal.
    """
    patch_lines: list[str] = list(
        difflib.unified_diff(
            original.splitlines(keepends=True),
            updated.splitlines(keepends=True),
            fromfile=f"{path} (current)",
            tofile=f"{path} (updated)",
            n=3,
            lineterm=line_ending,
        )
    )
    logger.trace("Patch for %s: %d lines", path, len(patch_lines))
    return "".join(patch_lines)


def render_patch(patch: Sequence[str] | str, show_line_numbers: bool = False) -> str:
    """Render a colorized preview of a unified diff.

    Args:
        patch: A unified diff as **either** a sequence of lines **or** a single
            multiline string.
        show_line_numbers: Whether to prefix output with line numbers.

    Returns:
        The formatted, colorized diff preview.
    """
    # Split on LF only so that carriage returns stay visible as \r
    if isinstance(patch, str):
        lines: list[str] = patch.split("\n")
        if lines[-1] == "":
            lines.pop()
    else:
        lines = [line.removesuffix("\n") for line in patch]

    def process_line(line: str) -> str:
        # Show stray control characters explicitly
        content = line.replace("\r", "\\r").replace("\n", "\\n")
        match line[:1]:
            case "-":
                return chalk.bold.red(content)
            case "+":
                return chalk.bold.green(content)
            case "@":
                return chalk.cyan(content)
            case _:
                return chalk.bold.white(content)

    if show_line_numbers:
        return "".join(f"{i:04d}|{process_line(line)}\n" for i, line in enumerate(lines, 1))
    return "".join(f"{process_line(line)}\n" for line in lines)
