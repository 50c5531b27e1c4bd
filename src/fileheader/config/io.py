# topmark:header:start
#
#   project      : FileHeader
#   file         : io.py
#   file_relpath : src/fileheader/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load and discover TOML configuration sources.

Supported sources:
- ``fileheader.toml`` with top-level keys, and
- ``pyproject.toml`` with a ``[tool.fileheader]`` table.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from fileheader.config.errors import HeaderConfigError
from fileheader.config.logging import get_logger
from fileheader.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME, PYPROJECT_TOOL_TABLE

if TYPE_CHECKING:
    from pathlib import Path

    from fileheader.config.logging import FileheaderLogger

TomlTable = dict[str, Any]

logger: FileheaderLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``fileheader.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        HeaderConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise HeaderConfigError(f"cannot read configuration: {e}", source=path) from e

    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise HeaderConfigError(f"invalid TOML: {e}", source=path) from e

    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def get_string_value_or_none(
    table: TomlTable,
    key: str,
    *,
    source: Path | None = None,
) -> str | None:
    """Extract an optional string value from a TOML table.

    Unlike lenient getters that coerce scalars, header options must be strings:
    a pattern given as a number is almost certainly a quoting mistake.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        source (Path | None): Config file the table came from (for error messages).

    Returns:
        str | None: The string value, or ``None`` when the key is absent.

    Raises:
        HeaderConfigError: If the key is present with a non-string value.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    raise HeaderConfigError(
        f"option '{key}' must be a string, got {type(value).__name__}",
        option=key,
        source=source,
    )


def extract_tool_table(data: TomlTable, path: Path) -> TomlTable | None:
    """Return the FileHeader table of a parsed config document.

    Args:
        data (TomlTable): Parsed TOML document.
        path (Path): Path the document was read from; ``pyproject.toml`` files are
            searched for ``[tool.fileheader]``.

    Returns:
        TomlTable | None: The relevant table, or ``None`` if a ``pyproject.toml``
            carries no ``[tool.fileheader]`` table.
    """
    if path.name != PYPROJECT_FILE_NAME:
        return data
    tool: Any = data.get("tool", {})
    section: Any = tool.get(PYPROJECT_TOOL_TABLE) if isinstance(tool, dict) else None
    if not isinstance(section, dict):
        return None
    return cast("TomlTable", section)


def _has_tool_table(pyproject: Path) -> bool:
    try:
        data: TomlTable = load_toml_dict(pyproject)
    except HeaderConfigError as e:
        logger.warning("Skipping unparsable %s during config discovery: %s", pyproject, e)
        return False
    return extract_tool_table(data, pyproject) is not None


def discover_config_file(start: Path) -> Path | None:
    """Find the nearest config file by walking upward from ``start``.

    In each directory ``fileheader.toml`` wins over ``pyproject.toml``; the latter
    only counts when it carries a ``[tool.fileheader]`` table. A ``pyproject.toml``
    that cannot be read or parsed is skipped with a warning: it may belong to an
    unrelated enclosing project.

    Args:
        start (Path): File or directory to start from.

    Returns:
        Path | None: The discovered config file, or ``None``.
    """
    anchor: Path = start.resolve()
    if not anchor.is_dir():
        anchor = anchor.parent

    for directory in (anchor, *anchor.parents):
        candidate: Path = directory / CONFIG_FILE_NAME
        if candidate.is_file():
            logger.debug("Discovered config file: %s", candidate)
            return candidate
        pyproject: Path = directory / PYPROJECT_FILE_NAME
        if pyproject.is_file() and _has_tool_table(pyproject):
            logger.debug("Discovered [tool.%s] in %s", PYPROJECT_TOOL_TABLE, pyproject)
            return pyproject
    logger.trace("No config file found above %s", anchor)
    return None
