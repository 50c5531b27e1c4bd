# topmark:header:start
#
#   file         : exit_codes.py
#   file_relpath : src/fileheader/cli/exit_codes.py
#   project      : FileHeader
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the FileHeader CLI.

FileHeader aligns with the BSD `sysexits` convention where practical. The one
divergence is `WOULD_CHANGE=2`, signalling a dry run in which fixable header
violations were found; Click's own usage errors also exit with 2, so tests must
assert ``result.exception is None`` to tell them apart.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the FileHeader CLI.

    Attributes:
        SUCCESS: All checked files have a valid header (or all fixes were applied).
        FAILURE: At least one file has a header violation that cannot be fixed
            (no insertion template configured).
        WOULD_CHANGE: Dry run: every violation is fixable with ``--apply``.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        ENCODING_ERROR: Input is not valid UTF-8. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: I/O error reading/writing a file. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Invalid configuration (e.g. malformed header pattern).
            Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2  # deliberate divergence from sysexits; see module docstring

    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
