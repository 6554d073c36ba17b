"""
Pull request title validator.

Checks that a pull request title follows ``type(scope): message`` with an
allow-list of types and a list of scope patterns.
"""

from .config import ValidatorConfig, parse_comma_separated_list
from .title import (
    DEFAULT_TYPES,
    DESIRED_FORMAT,
    TitleComponents,
    ValidationResult,
    parse_title,
    validate_scope,
    validate_title,
    validate_type,
)

__version__ = "1.0.0"

__all__ = [
    "ValidatorConfig",
    "parse_comma_separated_list",
    "DEFAULT_TYPES",
    "DESIRED_FORMAT",
    "TitleComponents",
    "ValidationResult",
    "parse_title",
    "validate_scope",
    "validate_title",
    "validate_type",
]
