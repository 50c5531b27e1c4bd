# topmark:header:start
#
#   project      : FileHeader
#   file         : registry.py
#   file_relpath : src/fileheader/rule/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Registry of checkers.

A checker is a plain function ``(SourceUnit, Config) -> Diagnostic | None``.
Checkers are registered by rule name together with their metadata, using the
`register_checker` decorator; hosts look them up in the registry rather than
subclassing a rule base class.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from fileheader.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from fileheader.config import Config
    from fileheader.config.logging import FileheaderLogger
    from fileheader.diagnostic import Diagnostic
    from fileheader.source import SourceUnit

logger: FileheaderLogger = get_logger(__name__)


class Checker(Protocol):
    """Structural interface of a checker function."""

    def __call__(self, source: SourceUnit, config: Config) -> Diagnostic | None:
        """Check ``source`` and return at most one diagnostic."""
        ...


@dataclass(frozen=True)
class RuleMetadata:
    """Descriptive metadata of a rule.

    Attributes:
        rule_name (str): Unique rule name, e.g. ``"file-header"``.
        description (str): One-line description.
        options_description (str): Explanation of the rule's options.
        option_examples (tuple[tuple[object, ...], ...]): Example option arrays.
        has_fix (bool): Whether the rule can produce fixes.
        rule_type (str): Rule category, e.g. ``"style"``.
        typescript_only (bool): Whether the rule only applies to TypeScript sources.
    """

    rule_name: str
    description: str
    options_description: str = ""
    option_examples: tuple[tuple[object, ...], ...] = field(default_factory=tuple)
    has_fix: bool = False
    rule_type: str = "style"
    typescript_only: bool = False


@dataclass(frozen=True)
class RegisteredChecker:
    """A checker function bound to its metadata."""

    metadata: RuleMetadata
    check: Checker


_registry: dict[str, RegisteredChecker] = {}


def register_checker(
    metadata: RuleMetadata,
) -> Callable[[Checker], Checker]:
    """Function decorator to register a checker under ``metadata.rule_name``.

    Args:
        metadata (RuleMetadata): Metadata of the rule implemented by the checker.

    Returns:
        Callable[[Checker], Checker]: A decorator returning the function unchanged.

    Raises:
        ValueError: If a checker is already registered under the same name.
    """

    def decorator(func: Checker) -> Checker:
        name: str = metadata.rule_name
        if name in _registry:
            raise ValueError(f"Rule '{name}' already has a registered checker.")
        logger.debug("Registering checker %s for rule: %s", getattr(func, "__name__", func), name)
        _registry[name] = RegisteredChecker(metadata=metadata, check=func)
        return func

    return decorator


def get_checker_registry() -> dict[str, RegisteredChecker]:
    """Return the registry of rule names to registered checkers."""
    return _registry


def get_checker(name: str) -> RegisteredChecker:
    """Return the checker registered under ``name``.

    Raises:
        KeyError: If no checker is registered under ``name``.
    """
    try:
        return _registry[name]
    except KeyError:
        raise KeyError(f"Unknown rule: {name}") from None
