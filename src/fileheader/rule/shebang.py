# topmark:header:start
#
#   project      : FileHeader
#   file         : shebang.py
#   file_relpath : src/fileheader/rule/shebang.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shebang skipping.

A header may not precede an interpreter directive (``#!...``) or a byte order
mark, so the header slot starts after them.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from fileheader.config.logging import get_logger
from fileheader.constants import SHEBANG_PREFIX, UTF8_BOM

if TYPE_CHECKING:
    from fileheader.config.logging import FileheaderLogger

logger: FileheaderLogger = get_logger(__name__)

_RE_LINE_TERMINATOR: Final[re.Pattern[str]] = re.compile(r"\r\n|\r|\n")


def skip_shebang(text: str) -> int:
    """Return the offset at which a header comment may begin.

    A leading byte order mark is stepped over first: it must stay the first
    character of the file, so nothing may be inserted before it.

    If the text (after any BOM) starts with ``#!``, this is the offset just past
    the shebang line's terminator (``"\\r\\n"`` is skipped as a whole). A shebang
    without any line terminator occupies the whole text and yields ``len(text)``.
    Otherwise the offset is 0, or 1 after a BOM.

    Args:
        text (str): Source text.

    Returns:
        int: The header offset.
    """
    start: int = len(UTF8_BOM) if text.startswith(UTF8_BOM) else 0
    if not text.startswith(SHEBANG_PREFIX, start):
        return start
    match = _RE_LINE_TERMINATOR.search(text, start + len(SHEBANG_PREFIX))
    offset: int = len(text) if match is None else match.end()
    logger.trace("Shebang detected; header offset moved to %d", offset)
    return offset
