"""
Error types and formatting for the pull request title validator.
"""

from .categories import (
    ErrorKind,
    ErrorCategory,
    TitleValidatorError,
    InvalidEventKindError,
    PayloadReadError,
    PayloadParseError,
    MissingSeparatorError,
    MissingTypeError,
    TypeNotAllowedError,
    ScopeNotAllowedError,
    InvalidScopePatternError,
    categorize_error,
)
from .formatter import ErrorFormatter, format_error_for_user

__all__ = [
    "ErrorKind",
    "ErrorCategory",
    "TitleValidatorError",
    "InvalidEventKindError",
    "PayloadReadError",
    "PayloadParseError",
    "MissingSeparatorError",
    "MissingTypeError",
    "TypeNotAllowedError",
    "ScopeNotAllowedError",
    "InvalidScopePatternError",
    "categorize_error",
    "ErrorFormatter",
    "format_error_for_user",
]
