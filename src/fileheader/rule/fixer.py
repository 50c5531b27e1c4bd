# topmark:header:start
#
#   project      : FileHeader
#   file         : fixer.py
#   file_relpath : src/fileheader/rule/fixer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Fix synthesis for the file-header rule.

Turns a `ValidationResult` into at most one `Diagnostic`. With an insertion
template configured, the diagnostic carries a fix:

- MISSING: insert a fresh block comment at the header offset, followed by one
  blank line.
- MISMATCHED, comment in the header slot: replace just the comment; the
  spacing that follows it is left alone.
- MISMATCHED, something else before the comment: insert at the header offset
  instead, so text that is not the comment is never overwritten.

Rendered comments look like::

    /*
     * <template line 1>
     * <template line 2>
     */

and use the source unit's line ending throughout.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from fileheader.config.logging import get_logger
from fileheader.constants import FAILURE_STRING, RULE_NAME, UTF8_BOM
from fileheader.diagnostic.model import Diagnostic, Replacement
from fileheader.rule.comments import find_leading_comment
from fileheader.rule.validator import HeaderStatus

if TYPE_CHECKING:
    from fileheader.config.logging import FileheaderLogger
    from fileheader.rule.comments import CommentSpan
    from fileheader.rule.validator import ValidationResult
    from fileheader.source import SourceUnit

logger: FileheaderLogger = get_logger(__name__)

_RE_TEMPLATE_LINE_BREAK: Final[re.Pattern[str]] = re.compile(r"\r\n|\r|\n")

# Trailing line endings after an inserted header: the header's own line end
# plus one blank line.
INSERTION_TRAILING_NEWLINES: Final[int] = 2


def render_comment(template: str, line_ending: str, trailing_newlines: int = 2) -> str:
    """Render ``template`` as a ``/* ... */`` block comment.

    Template lines are split on any line break so the output never mixes
    conventions, whatever line endings the template itself was written with.

    Args:
        template (str): Comment body.
        line_ending (str): Line ending of the target file.
        trailing_newlines (int): Number of line endings appended after ``*/``.

    Returns:
        str: The rendered comment.
    """
    lines: list[str] = [
        "/*",
        *(f" * {line}" for line in _RE_TEMPLATE_LINE_BREAK.split(template)),
        " */",
    ]
    return line_ending.join(lines) + line_ending * trailing_newlines


def rendered_header_matches(template: str, pattern: re.Pattern[str]) -> bool:
    """Return True if the comment rendered from ``template`` satisfies ``pattern``.

    The check runs on the comment body as the validator sees it, ``" * "``
    prefixes included, for both supported line endings. A template failing it
    would be rewritten on every fix run.
    """
    for line_ending in ("\n", "\r\n"):
        rendered: str = render_comment(template, line_ending, 0)
        span: CommentSpan | None = find_leading_comment(rendered)
        if span is None or not pattern.search(span.inner_text(rendered)):
            logger.debug(
                "Rendered template %r does not match %r (line ending %r)",
                template,
                pattern.pattern,
                line_ending,
            )
            return False
    return True


def _insertion(source: SourceUnit, offset: int, template: str) -> Replacement:
    text: str = render_comment(template, source.line_ending, INSERTION_TRAILING_NEWLINES)
    # A shebang-only file has no line end to put the header after
    if offset > 0 and offset == len(source.text) and source.text[-1] not in "\r\n" + UTF8_BOM:
        text = source.line_ending + text
    return Replacement.insert(offset, text)


def synthesize_fix(
    source: SourceUnit,
    offset: int,
    result: ValidationResult,
    template: str,
) -> Replacement | None:
    """Compute the edit that makes ``source`` satisfy the header rule.

    Args:
        source (SourceUnit): The checked source unit.
        offset (int): Header offset returned by `skip_shebang`.
        result (ValidationResult): The validation outcome.
        template (str): Insertion template.

    Returns:
        Replacement | None: The fix, or ``None`` for a valid header.
    """
    if result.status is HeaderStatus.VALID:
        return None
    if result.status is HeaderStatus.MISMATCHED and result.occupies_header_slot:
        assert result.span is not None
        logger.debug("Replacing mismatched header at [%d, %d)", result.span.start, result.span.end)
        return Replacement.replace(
            result.span.start,
            result.span.end,
            render_comment(template, source.line_ending, 0),
        )
    logger.debug("Inserting header at offset %d", offset)
    return _insertion(source, offset, template)


def synthesize_diagnostic(
    source: SourceUnit,
    offset: int,
    result: ValidationResult,
    template: str | None,
) -> Diagnostic | None:
    """Produce the rule's diagnostic for a validation outcome.

    The diagnostic always sits at ``offset``, where a correct header should
    begin, and reads "missing file header" for both MISSING and MISMATCHED.

    Args:
        source (SourceUnit): The checked source unit.
        offset (int): Header offset returned by `skip_shebang`.
        result (ValidationResult): The validation outcome.
        template (str | None): Optional insertion template; ``None`` yields a
            diagnostic without a fix.

    Returns:
        Diagnostic | None: The diagnostic, or ``None`` for a valid header.
    """
    if result.is_valid:
        return None
    fix: Replacement | None = (
        synthesize_fix(source, offset, result, template) if template is not None else None
    )
    return Diagnostic.at(offset, FAILURE_STRING, RULE_NAME, fix)
