"""
Rule validation for parsed pull request titles.

Types are matched exactly (case-sensitive) against an allow-list. Scopes are
matched against regular expressions, case-insensitively, anchored only at the
end of the scope string.
"""

import logging
import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List, Optional, Pattern, Sequence

from ..errors import (
    ErrorKind,
    InvalidScopePatternError,
    ScopeNotAllowedError,
    TitleValidatorError,
    TypeNotAllowedError,
)
from .parser import DESIRED_FORMAT, TitleComponents

logger = logging.getLogger(__name__)

DEFAULT_TYPES = (
    "fix", "feat", "chore", "docs", "build", "ci", "refactor", "perf", "test",
)


@dataclass
class ValidationResult:
    """Outcome of a single validation run."""

    passed: bool
    components: Optional[TitleComponents] = None
    error: Optional[TitleValidatorError] = None
    allowed_types: List[str] = field(default_factory=list)
    allowed_scopes: List[str] = field(default_factory=list)

    @property
    def kind(self) -> Optional[ErrorKind]:
        """Kind of the error that failed the run, if any."""
        return self.error.kind if self.error else None

    @property
    def exit_code(self) -> int:
        return 0 if self.passed else 1


@lru_cache(maxsize=128)
def _compile_scope_pattern(pattern: str) -> Pattern[str]:
    # Concatenated without grouping: "a|b" anchors only the last alternative.
    try:
        return re.compile(pattern + r"\Z", re.IGNORECASE)
    except re.error as e:
        logger.error(
            "scope pattern is not a valid regular expression",
            extra={"extra_data": {"pattern": pattern, "error": str(e)}}
        )
        raise InvalidScopePatternError(
            f"scope pattern '{pattern}' is not a valid regular expression",
            {"pattern": pattern, "reason": str(e)}
        ) from e


def validate_type(title_type: str, allowed_types: Sequence[str]) -> None:
    """
    Check a type against the allow-list.

    Args:
        title_type: Parsed type
        allowed_types: Allowed types, compared by exact equality

    Raises:
        TypeNotAllowedError: no entry equals the type
    """
    for allowed_type in allowed_types:
        if title_type == allowed_type:
            return

    logger.error(
        "type not allowed by the convention",
        extra={"extra_data": {"type": title_type, "allowed_types": list(allowed_types)}}
    )
    raise TypeNotAllowedError(
        f"type '{title_type}' is not allowed",
        {
            "type": title_type,
            "desired_format": DESIRED_FORMAT,
            "allowed_types": list(allowed_types),
        }
    )


def validate_scope(title_scope: str, allowed_patterns: Sequence[str]) -> None:
    """
    Check a scope against regex patterns.

    Each pattern must match a trailing substring of the scope. An empty
    pattern list matches nothing; callers that want "no restriction" must
    skip this check themselves.

    Args:
        title_scope: Parsed scope, possibly ""
        allowed_patterns: Regular expressions, matched case-insensitively

    Raises:
        ScopeNotAllowedError: no pattern matches
        InvalidScopePatternError: a pattern does not compile
    """
    for pattern in allowed_patterns:
        if _compile_scope_pattern(pattern).search(title_scope):
            return

    raise ScopeNotAllowedError(
        f"scope '{title_scope}' is not allowed",
        {
            "scope": title_scope,
            "desired_format": DESIRED_FORMAT,
            "allowed_scopes": list(allowed_patterns),
        }
    )


def validate_title(
    components: TitleComponents,
    allowed_types: Sequence[str],
    allowed_scopes: Sequence[str]
) -> None:
    """
    Apply the configured convention to a parsed title.

    The type must always be allowed. The scope is only checked when at least
    one scope pattern is configured.

    Raises:
        TypeNotAllowedError, ScopeNotAllowedError, InvalidScopePatternError
    """
    try:
        validate_type(components.type, allowed_types)
    except TypeNotAllowedError:
        logger.error(
            "error while checking the type against the allowed types",
            extra={"extra_data": {"convention_types": list(allowed_types)}}
        )
        raise

    if not allowed_scopes:
        return

    try:
        validate_scope(components.scope, allowed_scopes)
    except ScopeNotAllowedError as e:
        logger.error(
            "error while checking the scope against the allowed scopes",
            extra={"extra_data": {"error": str(e), "allowed_scopes": list(allowed_scopes)}}
        )
        raise
