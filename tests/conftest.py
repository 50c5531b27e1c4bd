# topmark:header:start
#
#   project      : FileHeader
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the FileHeader test suite.

Sets up typed pytest marks, shared configuration fixtures, and TRACE-level
logging so the check stages' decisions show up in captured output of failing
tests.

Notes:
    Build configurations with `fileheader.config.MutableConfig` and `freeze()`
    them; the check only ever sees a frozen `fileheader.config.Config`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from fileheader.config import MutableConfig, logging

if TYPE_CHECKING:
    from pathlib import Path

    from fileheader.config import Config

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]

COPYRIGHT_PATTERN: str = r"Copyright \d{4}"
COPYRIGHT_TEMPLATE: str = "Copyright 2017"


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


@pytest.fixture(autouse=True)
def silence_fileheader_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests."""
    monkeypatch.delenv("FILEHEADER_LOG_LEVEL", raising=False)


def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


def make_config(pattern: str = COPYRIGHT_PATTERN, template: str | None = None) -> Config:
    """Return a frozen `Config` for ``pattern`` and an optional ``template``."""
    return MutableConfig(pattern=pattern, template=template).freeze()


@pytest.fixture
def copyright_config() -> Config:
    """Config with the copyright pattern and no insertion template."""
    return make_config()


@pytest.fixture
def fixing_config() -> Config:
    """Config with the copyright pattern and the ``Copyright 2017`` template."""
    return make_config(template=COPYRIGHT_TEMPLATE)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a test in an empty working directory (no config discovery surprises).

    Returns:
        Path: The temporary working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd
