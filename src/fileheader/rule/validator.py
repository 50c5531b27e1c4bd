# topmark:header:start
#
#   project      : FileHeader
#   file         : validator.py
#   file_relpath : src/fileheader/rule/validator.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Header validation: classify the leading comment against the header pattern."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from fileheader.config.logging import get_logger
from fileheader.rule.comments import is_trivia_whitespace

if TYPE_CHECKING:
    import re

    from fileheader.config.logging import FileheaderLogger
    from fileheader.rule.comments import CommentSpan

logger: FileheaderLogger = get_logger(__name__)


class HeaderStatus(Enum):
    """Outcome of validating the leading comment.

    Members:
        VALID: The leading comment contains a match for the pattern.
        MISSING: The file has no leading comment.
        MISMATCHED: A leading comment exists but does not match.
    """

    VALID = "valid"
    MISSING = "missing"
    MISMATCHED = "mismatched"


@dataclass(frozen=True)
class ValidationResult:
    """Validation outcome with the facts the fix synthesizer needs.

    Attributes:
        status (HeaderStatus): The classification.
        span (CommentSpan | None): The leading comment (None when MISSING).
        occupies_header_slot (bool): For MISMATCHED, whether only whitespace
            separates the header offset from the comment, i.e. replacing the
            comment cannot destroy unrelated content.
    """

    status: HeaderStatus
    span: CommentSpan | None = None
    occupies_header_slot: bool = False

    @property
    def is_valid(self) -> bool:
        """Return True if the header satisfies the pattern."""
        return self.status is HeaderStatus.VALID


def validate_header(
    text: str,
    offset: int,
    span: CommentSpan | None,
    pattern: re.Pattern[str],
) -> ValidationResult:
    """Test the leading comment's body against ``pattern``.

    The pattern need only match somewhere in the body (``re.search``).

    Args:
        text (str): Source text.
        offset (int): Header offset returned by `skip_shebang`.
        span (CommentSpan | None): Leading comment returned by `find_leading_comment`.
        pattern (re.Pattern[str]): Compiled header pattern.

    Returns:
        ValidationResult: The classification.
    """
    if span is None:
        logger.debug("Header missing (no leading comment after offset %d)", offset)
        return ValidationResult(HeaderStatus.MISSING)

    body: str = span.inner_text(text)
    if pattern.search(body):
        logger.trace("Header comment matches %r", pattern.pattern)
        return ValidationResult(HeaderStatus.VALID, span)

    gap: str = text[offset : span.start]
    occupies_header_slot: bool = all(is_trivia_whitespace(ch) for ch in gap)
    logger.debug(
        "Header comment at [%d, %d) does not match %r (header slot: %s)",
        span.start,
        span.end,
        pattern.pattern,
        occupies_header_slot,
    )
    return ValidationResult(HeaderStatus.MISMATCHED, span, occupies_header_slot)
