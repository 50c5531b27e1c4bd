# topmark:header:start
#
#   project      : FileHeader
#   file         : constants.py
#   file_relpath : src/fileheader/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FileHeader Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

FILEHEADER_VERSION: str = get_version("fileheader")

# Environment variable consulted for the internal log level:
LOG_LEVEL_ENV_VAR: str = "FILEHEADER_LOG_LEVEL"

# Configuration discovery:
CONFIG_FILE_NAME: str = "fileheader.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_TABLE: str = "fileheader"

RULE_NAME: str = "file-header"
FAILURE_STRING: str = "missing file header"

SHEBANG_PREFIX: str = "#!"
UTF8_BOM: str = "\ufeff"
