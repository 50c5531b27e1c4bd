# topmark:header:start
#
#   project      : FileHeader
#   file         : model.py
#   file_relpath : src/fileheader/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core diagnostic types for FileHeader.

Sections:
    * DiagnosticLevel: severity levels with associated terminal colors.
    * Replacement: a single contiguous text edit (``text[start:end] = text``).
    * Diagnostic: immutable rule failure with a zero-width location and an
      optional fix.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, cast

from yachalk import chalk

from fileheader.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from fileheader.config.logging import FileheaderLogger

logger: FileheaderLogger = get_logger(__name__)


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics, ordered ERROR > WARNING > INFO."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this severity level.

        Intended for human-readable output only; machine formats should not use colors.

        Returns:
            Callable[[str], str]: The `yachalk` color function for this level.
        """
        return cast(
            "Callable[[str], str]",
            {
                DiagnosticLevel.INFO: chalk.blue,
                DiagnosticLevel.WARNING: chalk.yellow,
                DiagnosticLevel.ERROR: chalk.red_bright,
            }[self],
        )


@dataclass(frozen=True)
class Replacement:
    """A text edit replacing the half-open range ``[start, end)`` with ``text``.

    An insertion is a replacement with ``start == end``.
    """

    start: int
    end: int
    text: str

    @classmethod
    def insert(cls, offset: int, text: str) -> Replacement:
        """Return an insertion of ``text`` at ``offset``."""
        return cls(offset, offset, text)

    @classmethod
    def replace(cls, start: int, end: int, text: str) -> Replacement:
        """Return a replacement of ``[start, end)`` by ``text``."""
        return cls(start, end, text)

    @property
    def is_insertion(self) -> bool:
        """Return True if this edit does not remove any text."""
        return self.start == self.end

    def apply(self, source: str) -> str:
        """Splice this edit into ``source``.

        Args:
            source (str): The text the edit was computed against.

        Returns:
            str: The edited text.

        Raises:
            ValueError: If the range lies outside ``source``.
        """
        if not 0 <= self.start <= self.end <= len(source):
            raise ValueError(
                f"Replacement range [{self.start}, {self.end}) outside text of length {len(source)}"
            )
        return f"{source[: self.start]}{self.text}{source[self.end :]}"


@dataclass(frozen=True)
class Diagnostic:
    """A single rule failure.

    The location is a zero-width marker (``range_start == range_end``) at the
    point where a header is expected: the failure is an absence or mismatch,
    not a faulty span of text.

    Attributes:
        range_start (int): Offset of the marker.
        range_end (int): Equal to ``range_start``.
        message (str): Human-readable failure message.
        rule_name (str): Name of the rule that produced the diagnostic.
        level (DiagnosticLevel): Severity.
        fix (Replacement | None): Optional auto-fix.
    """

    range_start: int
    range_end: int
    message: str
    rule_name: str
    level: DiagnosticLevel = DiagnosticLevel.ERROR
    fix: Replacement | None = None

    def __post_init__(self) -> None:
        if self.range_start != self.range_end:
            raise ValueError("Diagnostic range must be zero-width")

    @classmethod
    def at(
        cls,
        offset: int,
        message: str,
        rule_name: str,
        fix: Replacement | None = None,
    ) -> Diagnostic:
        """Create a zero-width diagnostic at ``offset``."""
        logger.trace("Diagnostic at %d: %r (fix=%s)", offset, message, fix)
        return cls(
            range_start=offset,
            range_end=offset,
            message=message,
            rule_name=rule_name,
            fix=fix,
        )

    @property
    def has_fix(self) -> bool:
        """Return True if this diagnostic carries a fix."""
        return self.fix is not None
