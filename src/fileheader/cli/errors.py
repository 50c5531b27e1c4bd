# topmark:header:start
#
#   project      : FileHeader
#   file         : errors.py
#   file_relpath : src/fileheader/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the FileHeader CLI.

Raise these in CLI commands to exit with a standardized message and exit code.
Exceptions prefer the project console if one is present in the Click context;
otherwise they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from fileheader.cli.exit_codes import ExitCode


class FileheaderError(click.ClickException):
    """Base class for all FileHeader CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text, without color."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class FileheaderUsageError(FileheaderError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class FileheaderConfigError(FileheaderError):
    """Error for configuration errors (missing/invalid pattern, malformed TOML)."""

    exit_code = ExitCode.CONFIG_ERROR


class FileheaderFileNotFoundError(FileheaderError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class FileheaderIOError(FileheaderError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class FileheaderEncodingError(FileheaderError):
    """Error for text decoding errors (e.g., UnicodeDecodeError)."""

    exit_code = ExitCode.ENCODING_ERROR
