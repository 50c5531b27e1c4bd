# topmark:header:start
#
#   project      : FileHeader
#   file         : __init__.py
#   file_relpath : src/fileheader/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic primitives.

Design:
    - A check yields at most one immutable `Diagnostic`.
    - A diagnostic's location is zero-width; its optional fix is a single
      `Replacement` the caller splices into the text buffer.
"""

from __future__ import annotations

from fileheader.diagnostic.model import Diagnostic, DiagnosticLevel, Replacement

__all__ = [
    "Diagnostic",
    "DiagnosticLevel",
    "Replacement",
]
