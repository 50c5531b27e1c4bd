# topmark:header:start
#
#   project      : FileHeader
#   file         : __init__.py
#   file_relpath : src/fileheader/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for the file-header rule.

Build a `MutableConfig` from rule arguments, TOML files or CLI options, then
`freeze()` it into an immutable `Config` before running a check. Freezing
compiles the header pattern and raises `HeaderConfigError` on invalid input.
"""

from __future__ import annotations

from fileheader.config.errors import HeaderConfigError
from fileheader.config.io import discover_config_file, load_toml_dict
from fileheader.config.model import Config, MutableConfig, compile_header_pattern

__all__ = [
    "Config",
    "HeaderConfigError",
    "MutableConfig",
    "compile_header_pattern",
    "discover_config_file",
    "load_toml_dict",
]
