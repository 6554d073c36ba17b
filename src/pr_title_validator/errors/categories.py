"""
Error kinds and categories for title validation failures.

Every failure the validator can hit is a TitleValidatorError subclass carrying
an ErrorKind and a dict of diagnostic fields (offending value, desired format,
allowed set). All of them are terminal for the run.
"""

from enum import Enum
from typing import Any, Dict, Optional, Tuple


class ErrorKind(Enum):
    """Kinds of failures that end a validation run"""
    INVALID_EVENT_KIND = "InvalidEventKind"
    PAYLOAD_READ_FAILURE = "PayloadReadFailure"
    PAYLOAD_PARSE_FAILURE = "PayloadParseFailure"
    MISSING_SEPARATOR = "MissingSeparator"
    MISSING_TYPE = "MissingType"
    TYPE_NOT_ALLOWED = "TypeNotAllowed"
    SCOPE_NOT_ALLOWED = "ScopeNotAllowed"
    INVALID_SCOPE_PATTERN = "InvalidScopePattern"


class ErrorCategory(Enum):
    """Broad groups used when reporting an error to the user"""
    EVENT = "event"
    PARSE = "parse"
    VALIDATION = "validation"
    CONFIGURATION = "configuration"
    INTERNAL = "internal"


class TitleValidatorError(Exception):
    """Base exception for every failure of a validation run"""

    kind: ErrorKind

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details: Dict[str, Any] = dict(details or {})


class InvalidEventKindError(TitleValidatorError):
    """The triggering event is not a pull request event"""
    kind = ErrorKind.INVALID_EVENT_KIND


class PayloadReadError(TitleValidatorError):
    """The event payload file could not be read"""
    kind = ErrorKind.PAYLOAD_READ_FAILURE


class PayloadParseError(TitleValidatorError):
    """The event payload is not the expected JSON document"""
    kind = ErrorKind.PAYLOAD_PARSE_FAILURE


class MissingSeparatorError(TitleValidatorError):
    """Title has no ':' between prefix and message"""
    kind = ErrorKind.MISSING_SEPARATOR


class MissingTypeError(TitleValidatorError):
    """Title prefix is empty"""
    kind = ErrorKind.MISSING_TYPE


class TypeNotAllowedError(TitleValidatorError):
    """Title type is not in the configured allow-list"""
    kind = ErrorKind.TYPE_NOT_ALLOWED


class ScopeNotAllowedError(TitleValidatorError):
    """Title scope matches none of the configured patterns"""
    kind = ErrorKind.SCOPE_NOT_ALLOWED


class InvalidScopePatternError(TitleValidatorError):
    """A configured scope pattern is not a valid regular expression"""
    kind = ErrorKind.INVALID_SCOPE_PATTERN


_CATEGORY_BY_KIND = {
    ErrorKind.INVALID_EVENT_KIND: ErrorCategory.EVENT,
    ErrorKind.PAYLOAD_READ_FAILURE: ErrorCategory.EVENT,
    ErrorKind.PAYLOAD_PARSE_FAILURE: ErrorCategory.EVENT,
    ErrorKind.MISSING_SEPARATOR: ErrorCategory.PARSE,
    ErrorKind.MISSING_TYPE: ErrorCategory.PARSE,
    ErrorKind.TYPE_NOT_ALLOWED: ErrorCategory.VALIDATION,
    ErrorKind.SCOPE_NOT_ALLOWED: ErrorCategory.VALIDATION,
    ErrorKind.INVALID_SCOPE_PATTERN: ErrorCategory.CONFIGURATION,
}

_EXPLANATIONS = {
    ErrorCategory.EVENT: "Could not read the pull request title from the triggering event",
    ErrorCategory.PARSE: "Pull request title does not follow the expected format",
    ErrorCategory.VALIDATION: "Pull request title is not allowed by the configured convention",
    ErrorCategory.CONFIGURATION: "Validator configuration is invalid",
    ErrorCategory.INTERNAL: "An unexpected error occurred",
}


def categorize_error(error: Exception) -> Tuple[ErrorCategory, str]:
    """
    Categorize an error and provide a user-friendly explanation.

    Args:
        error: The exception to categorize

    Returns:
        Tuple of (ErrorCategory, explanation)
    """
    if isinstance(error, TitleValidatorError):
        category = _CATEGORY_BY_KIND[error.kind]
    else:
        category = ErrorCategory.INTERNAL
    return category, _EXPLANATIONS[category]
