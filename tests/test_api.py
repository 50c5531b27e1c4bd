# topmark:header:start
#
#   project      : FileHeader
#   file         : test_api.py
#   file_relpath : tests/test_api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the public API in `fileheader.api`."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from fileheader.api import check_path, check_text, fix_text, make_config, read_source
from fileheader.config import HeaderConfigError
from fileheader.source import SourcePosition

if TYPE_CHECKING:
    from pathlib import Path


def test_check_text_returns_fixable_diagnostic() -> None:
    cfg = make_config(r"Copyright \d{4}", "Copyright 2017")
    diagnostic = check_text("console.log(1);", cfg)
    assert diagnostic is not None
    assert diagnostic.fix is not None
    assert diagnostic.fix.text == "/*\n * Copyright 2017\n */\n\n"


def test_check_text_by_rule_name() -> None:
    cfg = make_config(r"Copyright \d{4}")
    assert check_text("/* Copyright 2020 */", cfg, rule_name="file-header") is None
    with pytest.raises(KeyError):
        check_text("", cfg, rule_name="no-such-rule")


def test_fix_text() -> None:
    cfg = make_config(r"Copyright \d{4}", "Copyright 2017")
    assert fix_text("foo();\n", cfg) == "/*\n * Copyright 2017\n */\n\nfoo();\n"
    assert fix_text("/* Copyright 2017 */\n", cfg) == "/* Copyright 2017 */\n"


def test_fix_text_without_template_is_identity() -> None:
    assert fix_text("foo();\n", make_config(r"Copyright \d{4}")) == "foo();\n"


def test_make_config_invalid_pattern() -> None:
    with pytest.raises(HeaderConfigError):
        make_config("[")


def test_check_path_preserves_crlf(tmp_path: Path) -> None:
    path = tmp_path / "a.js"
    path.write_bytes(b"#!/usr/bin/env node\r\nfoo();\r\n")
    result = check_path(path, make_config(r"Copyright \d{4}", "Copyright 2017"))
    assert not result.ok
    assert result.source.line_ending == "\r\n"
    assert result.position == SourcePosition(2, 1)
    assert result.fixed_text == (
        "#!/usr/bin/env node\r\n/*\r\n * Copyright 2017\r\n */\r\n\r\nfoo();\r\n"
    )


def test_check_path_valid_file(tmp_path: Path) -> None:
    path = tmp_path / "a.js"
    path.write_text("// Copyright 2024\n", encoding="utf-8")
    result = check_path(path, make_config(r"Copyright \d{4}"))
    assert result.ok
    assert result.position is None
    assert result.fixed_text is None


def test_read_source_rejects_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / "a.js"
    path.write_bytes(b"\xff\xfe\x00")
    with pytest.raises(UnicodeDecodeError):
        read_source(path)


def test_fix_text_keeps_byte_order_mark_first() -> None:
    cfg = make_config(r"Copyright \d{4}", "Copyright 2017")
    assert fix_text("\ufeffconsole.log(1);\n", cfg) == (
        "\ufeff/*\n * Copyright 2017\n */\n\nconsole.log(1);\n"
    )
    assert fix_text("\ufeff#!/usr/bin/env node\nfoo();\n", cfg) == (
        "\ufeff#!/usr/bin/env node\n/*\n * Copyright 2017\n */\n\nfoo();\n"
    )


def test_make_config_rejects_template_that_never_matches() -> None:
    with pytest.raises(HeaderConfigError) as excinfo:
        make_config(r"Copyright \d{4}\nAll rights reserved", "Copyright 2017\nAll rights reserved")
    assert excinfo.value.option == "template"
