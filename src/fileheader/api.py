# topmark:header:start
#
#   project      : FileHeader
#   file         : api.py
#   file_relpath : src/fileheader/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public API for checking and fixing file headers.

Examples:
    >>> from fileheader.api import check_text, make_config
    >>> cfg = make_config(r"Copyright \\d{4}", "Copyright 2017")
    >>> check_text("console.log(1);", cfg).fix.text
    '/*\\n * Copyright 2017\\n */\\n\\n'

Files are read and written with ``newline=""`` so line endings are never
translated; offsets in diagnostics refer to the text exactly as stored.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from fileheader.config import Config, MutableConfig
from fileheader.config.logging import get_logger
from fileheader.rule import check_file_header, get_checker
from fileheader.source import SourceUnit

if TYPE_CHECKING:
    from pathlib import Path

    from fileheader.config.logging import FileheaderLogger
    from fileheader.diagnostic import Diagnostic
    from fileheader.source import SourcePosition

logger: FileheaderLogger = get_logger(__name__)


def make_config(pattern: str, template: str | None = None) -> Config:
    """Build a frozen configuration from a pattern and optional template.

    Raises:
        HeaderConfigError: If ``pattern`` is not a valid regular expression.
    """
    return MutableConfig(pattern=pattern, template=template).freeze()


def check_text(text: str, config: Config, rule_name: str | None = None) -> Diagnostic | None:
    """Check ``text`` and return at most one diagnostic.

    Args:
        text (str): Source text.
        config (Config): Frozen rule configuration.
        rule_name (str | None): Registered rule to run; defaults to ``file-header``.

    Returns:
        Diagnostic | None: The diagnostic, or ``None`` if the header is valid.
    """
    source: SourceUnit = SourceUnit.from_text(text)
    if rule_name is None:
        return check_file_header(source, config)
    return get_checker(rule_name).check(source, config)


def fix_text(text: str, config: Config) -> str:
    """Return ``text`` with the header fix applied, or unchanged if there is none."""
    diagnostic: Diagnostic | None = check_text(text, config)
    if diagnostic is None or diagnostic.fix is None:
        return text
    return diagnostic.fix.apply(text)


@dataclass(frozen=True)
class FileResult:
    """Outcome of checking one file.

    Attributes:
        path (Path): The checked file.
        source (SourceUnit): Its content.
        diagnostic (Diagnostic | None): The rule failure, if any.
    """

    path: Path
    source: SourceUnit
    diagnostic: Diagnostic | None

    @property
    def ok(self) -> bool:
        """Return True if the file has a valid header."""
        return self.diagnostic is None

    @property
    def position(self) -> SourcePosition | None:
        """Return the line/column of the diagnostic, if any."""
        if self.diagnostic is None:
            return None
        return self.source.position_of(self.diagnostic.range_start)

    @property
    def fixed_text(self) -> str | None:
        """Return the file content with the fix applied, or None if not fixable."""
        if self.diagnostic is None or self.diagnostic.fix is None:
            return None
        return self.diagnostic.fix.apply(self.source.text)


def read_source(path: Path) -> SourceUnit:
    """Read ``path`` as UTF-8 without translating line endings.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    with path.open("r", encoding="utf-8", newline="") as fh:
        return SourceUnit.from_text(fh.read())


def write_text(path: Path, text: str) -> None:
    """Write ``text`` to ``path`` as UTF-8 without translating line endings."""
    with path.open("w", encoding="utf-8", newline="") as fh:
        fh.write(text)


def check_path(path: Path, config: Config) -> FileResult:
    """Read and check one file.

    Args:
        path (Path): File to check.
        config (Config): Frozen rule configuration.

    Returns:
        FileResult: The outcome.
    """
    source: SourceUnit = read_source(path)
    diagnostic: Diagnostic | None = check_file_header(source, config)
    logger.debug("%s: %s", path, "ok" if diagnostic is None else diagnostic.message)
    return FileResult(path=path, source=source, diagnostic=diagnostic)
