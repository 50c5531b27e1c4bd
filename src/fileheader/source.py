# topmark:header:start
#
#   project      : FileHeader
#   file         : source.py
#   file_relpath : src/fileheader/source.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Source unit: the text of one file plus its detected line ending."""

from __future__ import annotations

import bisect
import re
from dataclasses import dataclass, field
from typing import Final

_RE_LINE_START: Final[re.Pattern[str]] = re.compile(r"\r\n|\r|\n")


def detect_line_ending(text: str) -> str:
    r"""Return the line ending that terminates the first line of ``text``.

    The first line terminator decides: ``"\r\n"`` if the first line ends in a
    carriage return, ``"\n"`` otherwise (also when there is no terminator at all).

    Args:
        text (str): Source text.

    Returns:
        str: ``"\r\n"`` or ``"\n"``.
    """
    match = _RE_LINE_START.search(text)
    if match is not None and match.group().startswith("\r"):
        return "\r\n"
    return "\n"


@dataclass(frozen=True)
class SourcePosition:
    """1-based line and column of an offset."""

    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(frozen=True)
class SourceUnit:
    """Immutable text of one file and its line-ending convention.

    Attributes:
        text (str): Full file text, line endings preserved.
        line_ending (str): ``"\\n"`` or ``"\\r\\n"``, inferred from the first line.
    """

    text: str
    line_ending: str = field(default="\n")

    @classmethod
    def from_text(cls, text: str) -> SourceUnit:
        """Create a source unit, detecting its line ending."""
        return cls(text=text, line_ending=detect_line_ending(text))

    def position_of(self, offset: int) -> SourcePosition:
        """Map a character offset to a 1-based line/column position.

        ``\\r\\n``, ``\\r`` and ``\\n`` all count as one line break.

        Args:
            offset (int): Character offset into ``text`` (clamped to its bounds).

        Returns:
            SourcePosition: The position of ``offset``.
        """
        offset = max(0, min(offset, len(self.text)))
        line_index: int = bisect.bisect_right(self._line_starts, offset) - 1
        return SourcePosition(
            line=line_index + 1,
            column=offset - self._line_starts[line_index] + 1,
        )

    @property
    def _line_starts(self) -> list[int]:
        return [0, *(m.end() for m in _RE_LINE_START.finditer(self.text))]
