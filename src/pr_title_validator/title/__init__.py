"""
Pull request title parsing and validation.

**Main Components:**
- **parser**: splits a title into type, scope and message
- **validator**: checks type and scope against the configured convention
"""

from .parser import (
    DESIRED_FORMAT,
    TitleComponents,
    extract_type_and_scope,
    parse_title
)

from .validator import (
    DEFAULT_TYPES,
    ValidationResult,
    validate_type,
    validate_scope,
    validate_title
)

__all__ = [
    # Parsing
    "DESIRED_FORMAT",
    "TitleComponents",
    "extract_type_and_scope",
    "parse_title",
    # Validation
    "DEFAULT_TYPES",
    "ValidationResult",
    "validate_type",
    "validate_scope",
    "validate_title",
]
