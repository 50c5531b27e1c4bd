# topmark:header:start
#
#   project      : FileHeader
#   file         : noxfile.py
#   file_relpath : noxfile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FileHeader project automation via Nox (using uv-backed virtualenvs).

Sessions:
  - `lint`: Ruff lint on the whole tree.
  - `format_check`: Verify formatting with Ruff.
  - `qa`: Per-Python session that runs pytest (property tests excluded).
  - `property_test`: Long-running hypothesis property tests (opt-in).

Common invocations:
  - `nox -s lint`
  - `nox -s qa` (runs for all configured Python versions)
  - `nox -s qa -- -k check` (arguments after `--` are forwarded to pytest)
"""

from __future__ import annotations

import pathlib
import sys
from typing import Any

import nox

CURRENT_PYTHON_VERSION: str = f"{sys.version_info[0]}.{sys.version_info[1]}"

CLASSIFIER_PREFIX: str = "Programming Language :: Python :: 3."


def get_supported_pythons() -> list[str]:
    """Resolve supported Python versions from `pyproject.toml` classifiers.

    Falls back to the running interpreter when `tomllib` is unavailable or the
    classifiers list no minor versions.

    Returns:
        list[str]: Supported versions like ["3.10", "3.11", ...], sorted.
    """
    try:
        import tomllib
    except ModuleNotFoundError:
        return [CURRENT_PYTHON_VERSION]

    path: pathlib.Path = pathlib.Path(__file__).parent / "pyproject.toml"
    doc: dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8"))
    classifiers: list[str] = doc.get("project", {}).get("classifiers", [])
    versions: list[str] = [
        c.removeprefix("Programming Language :: Python :: ")
        for c in classifiers
        if c.startswith(CLASSIFIER_PREFIX)
    ]
    if not versions:
        return [CURRENT_PYTHON_VERSION]
    return sorted(versions, key=lambda v: tuple(int(p) for p in v.split(".")))


# Resolve versions once at startup
PYTHONS: list[str] = get_supported_pythons()

# Keep defaults fast; run QA (multi-Python) explicitly or in CI.
nox.options.sessions = ["lint", "format_check"]
nox.options.default_venv_backend = "uv"


@nox.session(python=PYTHONS)
def qa(session: nox.Session) -> None:
    """Run the test suite (per Python version)."""
    session.log("Supported Python versions: " + ", ".join(PYTHONS))

    session.install("-e", ".[test]")

    # We add *session.posargs to the end of the command
    session.run("pytest", "-q", "tests", "-m", "not hypothesis_slow", *session.posargs)


@nox.session
def lint(session: nox.Session) -> None:
    """Static analysis."""
    session.install("ruff")

    session.run("ruff", "check", ".")


@nox.session
def format_check(session: nox.Session) -> None:
    """Verify formatting without modifying files."""
    session.install("ruff")

    session.run("ruff", "format", "--check", ".")


@nox.session
def property_test(session: nox.Session) -> None:
    """Run the long-running property tests (developer only)."""
    session.install("-e", ".[test]")

    session.run("pytest", "-vv", "-m", "hypothesis_slow", "tests", *session.posargs)
