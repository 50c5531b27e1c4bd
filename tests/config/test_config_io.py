# topmark:header:start
#
#   project      : FileHeader
#   file         : test_config_io.py
#   file_relpath : tests/config/test_config_io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for TOML loading and config file discovery."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from fileheader.config import HeaderConfigError, MutableConfig, discover_config_file, load_toml_dict

if TYPE_CHECKING:
    from pathlib import Path

FILEHEADER_TOML = """\
pattern = 'Copyright \\d{4}'
template = "Copyright 2017"
"""

PYPROJECT_TOML = """\
[project]
name = "demo"

[tool.fileheader]
pattern = 'Copyright \\d{4}'
"""


def test_load_toml_dict(tmp_path: Path) -> None:
    path = tmp_path / "fileheader.toml"
    path.write_text(FILEHEADER_TOML, encoding="utf-8")
    assert load_toml_dict(path) == {"pattern": r"Copyright \d{4}", "template": "Copyright 2017"}


def test_load_toml_dict_missing_file(tmp_path: Path) -> None:
    with pytest.raises(HeaderConfigError, match="cannot read configuration"):
        load_toml_dict(tmp_path / "nope.toml")


def test_load_toml_dict_malformed(tmp_path: Path) -> None:
    path = tmp_path / "fileheader.toml"
    path.write_text("pattern = [unclosed\n", encoding="utf-8")
    with pytest.raises(HeaderConfigError, match="invalid TOML") as excinfo:
        load_toml_dict(path)
    assert excinfo.value.source == path
    assert str(excinfo.value).startswith(str(path))


def test_from_toml_file_fileheader_toml(tmp_path: Path) -> None:
    path = tmp_path / "fileheader.toml"
    path.write_text(FILEHEADER_TOML, encoding="utf-8")
    draft = MutableConfig.from_toml_file(path)
    assert draft is not None
    cfg = draft.freeze()
    assert cfg.pattern_source == r"Copyright \d{4}"
    assert cfg.insertion_template == "Copyright 2017"
    assert cfg.config_files == (str(path),)


def test_from_toml_file_pyproject_table(tmp_path: Path) -> None:
    path = tmp_path / "pyproject.toml"
    path.write_text(PYPROJECT_TOML, encoding="utf-8")
    draft = MutableConfig.from_toml_file(path)
    assert draft is not None
    assert draft.pattern == r"Copyright \d{4}"
    assert draft.template is None


def test_from_toml_file_pyproject_without_table(tmp_path: Path) -> None:
    path = tmp_path / "pyproject.toml"
    path.write_text('[project]\nname = "demo"\n', encoding="utf-8")
    assert MutableConfig.from_toml_file(path) is None


def test_discovery_walks_up(tmp_path: Path) -> None:
    (tmp_path / "fileheader.toml").write_text(FILEHEADER_TOML, encoding="utf-8")
    nested = tmp_path / "src" / "pkg"
    nested.mkdir(parents=True)
    assert discover_config_file(nested) == (tmp_path / "fileheader.toml").resolve()


def test_discovery_prefers_fileheader_toml(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(PYPROJECT_TOML, encoding="utf-8")
    (tmp_path / "fileheader.toml").write_text(FILEHEADER_TOML, encoding="utf-8")
    assert discover_config_file(tmp_path) == (tmp_path / "fileheader.toml").resolve()


def test_discovery_skips_pyproject_without_table(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(PYPROJECT_TOML, encoding="utf-8")
    inner = tmp_path / "inner"
    inner.mkdir()
    (inner / "pyproject.toml").write_text('[project]\nname = "inner"\n', encoding="utf-8")
    assert discover_config_file(inner) == (tmp_path / "pyproject.toml").resolve()


def test_discovery_from_file_starts_at_parent(tmp_path: Path) -> None:
    (tmp_path / "fileheader.toml").write_text(FILEHEADER_TOML, encoding="utf-8")
    source = tmp_path / "a.js"
    source.write_text("x", encoding="utf-8")
    assert discover_config_file(source) == (tmp_path / "fileheader.toml").resolve()


def test_discovery_skips_malformed_pyproject(tmp_path: Path) -> None:
    (tmp_path / "fileheader.toml").write_text(FILEHEADER_TOML, encoding="utf-8")
    inner = tmp_path / "inner"
    inner.mkdir()
    (inner / "pyproject.toml").write_text("[project\nname = \n", encoding="utf-8")
    assert discover_config_file(inner) == (tmp_path / "fileheader.toml").resolve()


def test_explicit_malformed_pyproject_still_fails(tmp_path: Path) -> None:
    path = tmp_path / "pyproject.toml"
    path.write_text("[project\nname = \n", encoding="utf-8")
    with pytest.raises(HeaderConfigError, match="invalid TOML"):
        MutableConfig.from_toml_file(path)
