"""Tests for errors – categorization and formatting."""

from __future__ import annotations

from pr_title_validator.errors import (
    ErrorCategory,
    ErrorFormatter,
    InvalidScopePatternError,
    MissingSeparatorError,
    PayloadReadError,
    TypeNotAllowedError,
    categorize_error,
    format_error_for_user,
)
from pr_title_validator.title import DESIRED_FORMAT


def test_categorize_error() -> None:
    assert categorize_error(PayloadReadError("x"))[0] is ErrorCategory.EVENT
    assert categorize_error(MissingSeparatorError("x"))[0] is ErrorCategory.PARSE
    assert categorize_error(TypeNotAllowedError("x"))[0] is ErrorCategory.VALIDATION
    assert categorize_error(InvalidScopePatternError("x"))[0] is ErrorCategory.CONFIGURATION
    assert categorize_error(RuntimeError("boom"))[0] is ErrorCategory.INTERNAL


def test_details_default_to_empty_dict() -> None:
    assert MissingSeparatorError("x").details == {}


def test_format_error_concise() -> None:
    error = TypeNotAllowedError("type 'chore' is not allowed", {"type": "chore"})
    assert ErrorFormatter.format_error_concise(error) == (
        "VALIDATION: TypeNotAllowed - type 'chore' is not allowed"
    )


def test_format_error_report_lists_diagnostics() -> None:
    error = TypeNotAllowedError(
        "type 'chore' is not allowed",
        {"type": "chore", "desired_format": DESIRED_FORMAT, "allowed_types": ["fix", "feat"]},
    )
    report = format_error_for_user(error, "report")
    assert report.startswith("Pull request title check failed (TypeNotAllowed)")
    assert "  Type: 'chore'" in report
    assert f"  Desired format: '{DESIRED_FORMAT}'" in report
    assert "  Allowed types: 'fix', 'feat'" in report
    assert "Suggestions:" in report


def test_format_error_for_user_defaults_to_concise() -> None:
    assert format_error_for_user(RuntimeError("boom")) == "INTERNAL: RuntimeError - boom"
