# topmark:header:start
#
#   project      : FileHeader
#   file         : test_idempotency_property.py
#   file_relpath : tests/rule/test_idempotency_property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Property-based tests for the file-header fix.

For any generated source text, applying the fix (if there is one) yields a
text the checker accepts, and the fix never introduces a line ending the file
did not already use.
"""

from __future__ import annotations

import pytest
from hypothesis import HealthCheck, given, settings

from fileheader.rule import check_file_header
from fileheader.source import SourceUnit
from tests.conftest import make_config
from tests.strategies_fileheader import s_source_text, s_template_and_pattern

CONFIG = make_config(pattern=r"Copyright \d{4}", template="Copyright 2017")

_SETTINGS = settings(
    max_examples=200,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)


@pytest.mark.hypothesis_slow
@_SETTINGS
@given(sample=s_source_text())
def test_fix_then_check_is_clean(sample: tuple[str, str]) -> None:
    text, _ = sample
    diagnostic = check_file_header(SourceUnit.from_text(text), CONFIG)
    if diagnostic is None:
        return
    assert diagnostic.range_start == diagnostic.range_end
    assert diagnostic.fix is not None
    fixed = diagnostic.fix.apply(text)
    assert check_file_header(SourceUnit.from_text(fixed), CONFIG) is None


@pytest.mark.hypothesis_slow
@_SETTINGS
@given(sample=s_source_text())
def test_fix_preserves_crlf(sample: tuple[str, str]) -> None:
    text, le = sample
    if le != "\r\n" or "\r\n" not in text:
        return
    diagnostic = check_file_header(SourceUnit.from_text(text), CONFIG)
    if diagnostic is None or diagnostic.fix is None:
        return
    fixed = diagnostic.fix.apply(text)
    assert "\n" not in fixed.replace("\r\n", "")


@pytest.mark.hypothesis_slow
@_SETTINGS
@given(sample=s_source_text())
def test_fix_only_touches_the_header_slot(sample: tuple[str, str]) -> None:
    """Everything after the fixed range is kept verbatim."""
    text, _ = sample
    diagnostic = check_file_header(SourceUnit.from_text(text), CONFIG)
    if diagnostic is None or diagnostic.fix is None:
        return
    fix = diagnostic.fix
    fixed = fix.apply(text)
    assert fixed.startswith(text[: fix.start])
    assert fixed.endswith(text[fix.end :])


@pytest.mark.hypothesis_slow
@_SETTINGS
@given(sample=s_source_text(), template_and_pattern=s_template_and_pattern())
def test_fix_converges_for_generated_templates(
    sample: tuple[str, str], template_and_pattern: tuple[str, str]
) -> None:
    """Any template whose lines the pattern names yields a header that passes."""
    text, _ = sample
    template, pattern = template_and_pattern
    config = make_config(pattern=pattern, template=template)
    diagnostic = check_file_header(SourceUnit.from_text(text), config)
    if diagnostic is None:
        return
    assert diagnostic.fix is not None
    fixed = diagnostic.fix.apply(text)
    assert check_file_header(SourceUnit.from_text(fixed), config) is None
    assert fixed.startswith("\ufeff") == text.startswith("\ufeff")
