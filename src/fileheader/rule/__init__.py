# topmark:header:start
#
#   project      : FileHeader
#   file         : __init__.py
#   file_relpath : src/fileheader/rule/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The file-header rule and its pipeline stages.

Importing this package registers `check_file_header` in the checker registry.
"""

from __future__ import annotations

from fileheader.rule.checker import RULE_METADATA, check_file_header
from fileheader.rule.comments import CommentKind, CommentSpan, find_leading_comment
from fileheader.rule.fixer import (
    render_comment,
    rendered_header_matches,
    synthesize_diagnostic,
    synthesize_fix,
)
from fileheader.rule.registry import (
    Checker,
    RegisteredChecker,
    RuleMetadata,
    get_checker,
    get_checker_registry,
    register_checker,
)
from fileheader.rule.shebang import skip_shebang
from fileheader.rule.validator import HeaderStatus, ValidationResult, validate_header

__all__ = [
    "RULE_METADATA",
    "Checker",
    "CommentKind",
    "CommentSpan",
    "HeaderStatus",
    "RegisteredChecker",
    "RuleMetadata",
    "ValidationResult",
    "check_file_header",
    "find_leading_comment",
    "get_checker",
    "get_checker_registry",
    "register_checker",
    "render_comment",
    "rendered_header_matches",
    "skip_shebang",
    "synthesize_diagnostic",
    "synthesize_fix",
    "validate_header",
]
