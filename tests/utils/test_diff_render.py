# topmark:header:start
#
#   project      : FileHeader
#   file         : test_diff_render.py
#   file_relpath : tests/utils/test_diff_render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diff utils: unified diff generation and colorized rendering."""

from __future__ import annotations

from fileheader.utils.diff import render_patch, unified_diff


def test_unified_diff_headers_and_hunk() -> None:
    patch = unified_diff("foo();\n", "/* x */\nfoo();\n", "a.js")
    lines = patch.splitlines()
    assert lines[0] == "--- a.js (current)"
    assert lines[1] == "+++ a.js (updated)"
    assert "+/* x */" in lines


def test_unified_diff_equal_contents_is_empty() -> None:
    assert unified_diff("same\n", "same\n", "a.js") == ""


def test_unified_diff_keeps_crlf_lines() -> None:
    patch = unified_diff("foo();\r\n", "/* x */\r\nfoo();\r\n", "a.js", "\r\n")
    assert "+/* x */\r\n" in patch


def test_render_patch_accepts_str_and_list() -> None:
    """`render_patch` should accept both a diff string and a sequence of lines."""
    diff_text = "--- a\n+++ b\n-foo\n+bar\n"
    s1 = render_patch(diff_text)
    s2 = render_patch(diff_text.splitlines(False))
    assert s1 == s2
    assert "foo" in s1 and "bar" in s1


def test_render_patch_escapes_carriage_returns() -> None:
    rendered = render_patch(["+a\rb"])
    assert "\\r" in rendered


def test_render_patch_line_numbers() -> None:
    rendered = render_patch("+x\n-y\n", show_line_numbers=True)
    assert "0001|" in rendered and "0002|" in rendered


def test_render_patch_empty_input_is_safe() -> None:
    assert render_patch("") == ""


def test_render_patch_shows_carriage_returns_in_string_input() -> None:
    """A CRLF diff given as one string keeps its ``\\r`` visible on each line."""
    rendered = render_patch("+a\r\n-b\r\n")
    lines = rendered.splitlines()
    assert len(lines) == 2
    assert all("\\r" in line for line in lines)
