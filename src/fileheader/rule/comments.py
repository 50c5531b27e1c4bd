# topmark:header:start
#
#   project      : FileHeader
#   file         : comments.py
#   file_relpath : src/fileheader/rule/comments.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Leading comment locator for C-style comment syntax.

Scans forward from the header offset, skipping whitespace only, and returns the
first comment token if that is what the file starts with:

    // line comment            -> CommentKind.LINE, ends at the line terminator
    /* block comment */        -> CommentKind.BLOCK, ends after the closing */

Any other non-whitespace character means the file has no leading comment. Only
the first token is returned; consecutive ``//`` lines are not merged.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Final

from fileheader.config.logging import get_logger
from fileheader.constants import UTF8_BOM

if TYPE_CHECKING:
    from fileheader.config.logging import FileheaderLogger

logger: FileheaderLogger = get_logger(__name__)

LINE_COMMENT_OPEN: Final[str] = "//"
BLOCK_COMMENT_OPEN: Final[str] = "/*"
BLOCK_COMMENT_CLOSE: Final[str] = "*/"

# Characters that terminate a line comment
_LINE_BREAKS: Final[frozenset[str]] = frozenset("\n\r\u2028\u2029")


class CommentKind(Enum):
    """The two comment forms of C-style syntax."""

    LINE = "line"
    BLOCK = "block"


@dataclass(frozen=True)
class CommentSpan:
    """Half-open range ``[start, end)`` of one comment token.

    Attributes:
        start (int): Offset of the opening delimiter.
        end (int): For a line comment, offset of the line terminator (or end of
            text); for a block comment, offset just past the closing ``*/`` (or
            end of text if unterminated).
        kind (CommentKind): Line or block comment.
        terminated (bool): False for a block comment missing its ``*/``.
    """

    start: int
    end: int
    kind: CommentKind
    terminated: bool = True

    def inner_text(self, text: str) -> str:
        """Return the comment body with its delimiters stripped.

        Args:
            text (str): The text this span was located in.

        Returns:
            str: The text between the opening and (if any) closing delimiter.
        """
        body_end: int = self.end
        if self.kind is CommentKind.BLOCK and self.terminated:
            body_end -= len(BLOCK_COMMENT_CLOSE)
        # Both openers are two characters long
        return text[self.start + 2 : body_end]


def is_trivia_whitespace(ch: str) -> bool:
    """Return True if ``ch`` may precede a header comment.

    Unicode whitespace and the byte order mark count as whitespace.
    """
    return ch.isspace() or ch == UTF8_BOM


def find_leading_comment(text: str, offset: int = 0) -> CommentSpan | None:
    """Locate the first comment at or after ``offset``, skipping only whitespace.

    Args:
        text (str): Source text.
        offset (int): Offset where the header slot begins (see `skip_shebang`).

    Returns:
        CommentSpan | None: The leading comment, or ``None`` if the first
            non-whitespace content is not a comment opener.
    """
    pos: int = offset
    n: int = len(text)
    while pos < n and is_trivia_whitespace(text[pos]):
        pos += 1

    opener: str = text[pos : pos + 2]
    if opener == LINE_COMMENT_OPEN:
        end: int = pos + 2
        while end < n and text[end] not in _LINE_BREAKS:
            end += 1
        span = CommentSpan(pos, end, CommentKind.LINE)
    elif opener == BLOCK_COMMENT_OPEN:
        close: int = text.find(BLOCK_COMMENT_CLOSE, pos + 2)
        if close < 0:
            logger.debug("Unterminated block comment at offset %d", pos)
            span = CommentSpan(pos, n, CommentKind.BLOCK, terminated=False)
        else:
            span = CommentSpan(pos, close + len(BLOCK_COMMENT_CLOSE), CommentKind.BLOCK)
    else:
        logger.trace(
            "No leading comment: first content at offset %d is %r", pos, text[pos : pos + 1]
        )
        return None

    logger.trace("Leading %s comment at [%d, %d)", span.kind.value, span.start, span.end)
    return span
