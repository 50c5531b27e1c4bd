# topmark:header:start
#
#   project      : FileHeader
#   file         : errors.py
#   file_relpath : src/fileheader/config/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration errors.

A malformed configuration (bad regular expression, wrong option shape,
unparsable TOML) is a configuration-time failure. It is never folded into a
check result: a pattern that does not compile must not read as "no match".
"""

from __future__ import annotations

from pathlib import Path


class HeaderConfigError(ValueError):
    """Raised when the file-header configuration is invalid.

    Attributes:
        option (str | None): Name of the offending option, if known.
        source (Path | None): Config file the option was read from, if any.
    """

    def __init__(
        self,
        message: str,
        *,
        option: str | None = None,
        source: Path | None = None,
    ) -> None:
        self.option = option
        self.source = source
        if source is not None:
            message = f"{source}: {message}"
        super().__init__(message)
