# topmark:header:start
#
#   project      : FileHeader
#   file         : model.py
#   file_relpath : src/fileheader/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model for the file-header rule.

This module defines:
    - `Config`: an immutable snapshot used by the check. The header pattern is
      already compiled, so a frozen config is always valid.
    - `MutableConfig`: a mutable builder used while reading rule arguments,
      TOML files and CLI overrides; it is frozen into `Config` and can be
      thawed back for edits.

Validation happens in `MutableConfig.freeze`: an invalid regular expression, a
missing pattern, or a template whose rendered header would not match the
pattern raises `HeaderConfigError` there, never later during a check.
"""

from __future__ import annotations

import functools
import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from fileheader.config.errors import HeaderConfigError
from fileheader.config.io import extract_tool_table, get_string_value_or_none, load_toml_dict
from fileheader.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from fileheader.config.io import TomlTable
    from fileheader.config.logging import FileheaderLogger

logger: FileheaderLogger = get_logger(__name__)

KEY_PATTERN: str = "pattern"
KEY_TEMPLATE: str = "template"


@functools.lru_cache(maxsize=128)
def compile_header_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a header pattern, caching by pattern source.

    Args:
        pattern (str): Regular expression source.

    Returns:
        re.Pattern[str]: The compiled pattern.

    Raises:
        HeaderConfigError: If ``pattern`` is not a valid regular expression.
    """
    try:
        compiled: re.Pattern[str] = re.compile(pattern)
    except re.error as e:
        raise HeaderConfigError(
            f"invalid header pattern {pattern!r}: {e}", option=KEY_PATTERN
        ) from e
    logger.trace("Compiled header pattern %r", pattern)
    return compiled


@dataclass(frozen=True)
class Config:
    """Immutable configuration of the file-header rule.

    Attributes:
        header_pattern (re.Pattern[str]): Pattern the leading comment must contain.
        insertion_template (str | None): Body of the comment to synthesize for a fix;
            ``None`` disables fixes.
        config_files (tuple[str, ...]): Config files this snapshot was built from.
    """

    header_pattern: re.Pattern[str]
    insertion_template: str | None = None
    config_files: tuple[str, ...] = ()

    @property
    def pattern_source(self) -> str:
        """Return the source string of the header pattern."""
        return self.header_pattern.pattern

    @property
    def can_fix(self) -> bool:
        """Return True if an insertion template is configured."""
        return self.insertion_template is not None

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this configuration."""
        return MutableConfig(
            pattern=self.header_pattern.pattern,
            template=self.insertion_template,
            config_files=list(self.config_files),
        )


@dataclass
class MutableConfig:
    """Mutable builder for `Config`.

    Attributes:
        pattern (str | None): Regular expression source, not yet compiled.
        template (str | None): Optional insertion template.
        config_files (list[str]): Config files merged into this draft.
    """

    pattern: str | None = None
    template: str | None = None
    config_files: list[str] = field(default_factory=lambda: [])

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return an empty draft; a pattern must be supplied before freezing."""
        return cls()

    @classmethod
    def from_rule_arguments(cls, args: Sequence[object]) -> MutableConfig:
        """Build a draft from a rule option array.

        The array holds the mandatory header pattern followed by an optional
        insertion template, e.g. ``["Copyright \\\\d{4}", "Copyright 2017"]``.

        Args:
            args (Sequence[object]): One or two string options.

        Returns:
            MutableConfig: The resulting draft.

        Raises:
            HeaderConfigError: If the array has the wrong length or non-string items.
        """
        if isinstance(args, str) or not 1 <= len(args) <= 2:
            raise HeaderConfigError(
                "expected a header pattern and an optional insertion template "
                f"(1 or 2 options), got {args!r}"
            )
        for name, value in zip((KEY_PATTERN, KEY_TEMPLATE), args):
            if not isinstance(value, str):
                raise HeaderConfigError(
                    f"option '{name}' must be a string, got {type(value).__name__}",
                    option=name,
                )
        pattern: str = args[0]  # type: ignore[assignment]
        template: str | None = args[1] if len(args) == 2 else None  # type: ignore[assignment]
        return cls(pattern=pattern, template=template)

    @classmethod
    def from_toml_dict(cls, data: TomlTable, config_file: Path | None = None) -> MutableConfig:
        """Create a draft from a parsed FileHeader TOML table.

        Args:
            data (TomlTable): Table holding ``pattern`` and ``template`` keys.
            config_file (Path | None): Optional path of the source file.

        Returns:
            MutableConfig: The resulting draft.
        """
        unknown: list[str] = sorted(set(data) - {KEY_PATTERN, KEY_TEMPLATE})
        if unknown:
            logger.warning(
                "Ignoring unknown config keys in %s: %s",
                config_file or "<dict>",
                ", ".join(unknown),
            )
        draft = cls(
            pattern=get_string_value_or_none(data, KEY_PATTERN, source=config_file),
            template=get_string_value_or_none(data, KEY_TEMPLATE, source=config_file),
        )
        if config_file is not None:
            draft.config_files = [str(config_file)]
        logger.trace("TOML config %s: %s", config_file, draft)
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``fileheader.toml`` and ``pyproject.toml`` files, extracting
        the ``[tool.fileheader]`` table from the latter.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableConfig | None: The draft, or ``None`` if a ``pyproject.toml``
                has no ``[tool.fileheader]`` table.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        table: TomlTable | None = extract_tool_table(load_toml_dict(path), path)
        if table is None:
            logger.warning("[tool.fileheader] table missing in %s", path)
            return None
        return cls.from_toml_dict(table, config_file=path)

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` take precedence.

        Args:
            other (MutableConfig): The overriding layer (e.g. CLI options).

        Returns:
            MutableConfig: The merged draft.
        """
        return MutableConfig(
            pattern=other.pattern if other.pattern is not None else self.pattern,
            template=other.template if other.template is not None else self.template,
            config_files=[*self.config_files, *other.config_files],
        )

    def freeze(self) -> Config:
        """Validate and freeze this draft.

        Returns:
            Config: The immutable configuration.

        Raises:
            HeaderConfigError: If no pattern is set, the pattern does not compile, or
                the comment rendered from the template would not match the pattern.
        """
        # Deferred: the rule package imports config modules
        from fileheader.rule.fixer import rendered_header_matches

        if self.pattern is None:
            raise HeaderConfigError("no header pattern configured", option=KEY_PATTERN)
        header_pattern: re.Pattern[str] = compile_header_pattern(self.pattern)
        if self.template is not None and not rendered_header_matches(
            self.template, header_pattern
        ):
            raise HeaderConfigError(
                f"the header rendered from template {self.template!r} does not match "
                f"pattern {self.pattern!r}; fixing would never converge",
                option=KEY_TEMPLATE,
            )
        return Config(
            header_pattern=header_pattern,
            insertion_template=self.template,
            config_files=tuple(self.config_files),
        )
