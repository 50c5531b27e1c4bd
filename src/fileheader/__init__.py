# topmark:header:start
#
#   project      : FileHeader
#   file         : __init__.py
#   file_relpath : src/fileheader/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FileHeader package.

FileHeader checks that a source file begins with a comment matching a
required pattern and, if not, computes a minimal fix that inserts or replaces
the header comment. It exposes a small typed API and a CLI.
"""

from __future__ import annotations
