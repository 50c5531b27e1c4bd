# topmark:header:start
#
#   project      : FileHeader
#   file         : checker.py
#   file_relpath : src/fileheader/rule/checker.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The ``file-header`` checker.

Runs the four stages in order:

    skip_shebang -> find_leading_comment -> validate_header -> synthesize_diagnostic

Each stage is a pure function of the source text and the configuration, so a
checker may be run concurrently on many source units.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fileheader.config.logging import get_logger
from fileheader.constants import RULE_NAME
from fileheader.rule.comments import find_leading_comment
from fileheader.rule.fixer import synthesize_diagnostic
from fileheader.rule.registry import RuleMetadata, register_checker
from fileheader.rule.shebang import skip_shebang
from fileheader.rule.validator import validate_header

if TYPE_CHECKING:
    from fileheader.config import Config
    from fileheader.config.logging import FileheaderLogger
    from fileheader.diagnostic import Diagnostic
    from fileheader.rule.comments import CommentSpan
    from fileheader.rule.validator import ValidationResult
    from fileheader.source import SourceUnit

logger: FileheaderLogger = get_logger(__name__)


RULE_METADATA = RuleMetadata(
    rule_name=RULE_NAME,
    description=(
        "Enforces a certain header comment for all files, matched by a regular expression."
    ),
    options_description=(
        "The first option, which is mandatory, is a regular expression that all headers "
        "should match.\n"
        "The second argument, which is optional, is a string that should be inserted as a "
        "header comment if fixing is enabled and no header that matches the first argument "
        "is found."
    ),
    option_examples=((True, "Copyright \\d{4}", "Copyright 2017"),),
    has_fix=True,
    rule_type="style",
    typescript_only=False,
)


@register_checker(RULE_METADATA)
def check_file_header(source: SourceUnit, config: Config) -> Diagnostic | None:
    """Check that ``source`` starts with a header comment matching the configured pattern.

    Args:
        source (SourceUnit): The source unit to check.
        config (Config): Frozen rule configuration.

    Returns:
        Diagnostic | None: A "missing file header" diagnostic (with a fix when an
            insertion template is configured), or ``None`` if the header is valid.
    """
    offset: int = skip_shebang(source.text)
    span: CommentSpan | None = find_leading_comment(source.text, offset)
    result: ValidationResult = validate_header(source.text, offset, span, config.header_pattern)
    logger.debug("%s: %s (offset=%d)", RULE_NAME, result.status.value, offset)
    return synthesize_diagnostic(source, offset, result, config.insertion_template)
