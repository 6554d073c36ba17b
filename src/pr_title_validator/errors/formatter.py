"""
Error message formatting for validation failures.
"""

from typing import Any, List

from .categories import ErrorCategory, TitleValidatorError, categorize_error


class ErrorFormatter:
    """
    Formats validation errors for the workflow log.
    """

    # Suggestions for each error category
    SUGGESTIONS = {
        ErrorCategory.EVENT: [
            "Run the validator on `pull_request` or `pull_request_target` events",
            "Check that GITHUB_EVENT_PATH points to the event payload",
        ],
        ErrorCategory.PARSE: [
            "Rename the pull request to `<type>(optional: <scope>): <message>`",
            "Separate the type and scope from the message with a colon",
        ],
        ErrorCategory.VALIDATION: [
            "Use one of the allowed types and scopes listed above",
            "Type matching is case-sensitive, scope matching is not",
        ],
        ErrorCategory.CONFIGURATION: [
            "Check that every entry of the `scopes` input is a valid regular expression",
        ],
        ErrorCategory.INTERNAL: [
            "Re-run the workflow and report this issue if it persists",
        ],
    }

    # Detail keys in display order
    DETAIL_LABELS = (
        ("title", "Title"),
        ("type", "Type"),
        ("scope", "Scope"),
        ("event", "Event"),
        ("path", "Event path"),
        ("pattern", "Pattern"),
        ("desired_format", "Desired format"),
        ("allowed_types", "Allowed types"),
        ("allowed_scopes", "Allowed scopes"),
        ("allowed_events", "Allowed events"),
        ("reason", "Reason"),
    )

    @staticmethod
    def _render_value(value: Any) -> str:
        if isinstance(value, (list, tuple)):
            return ", ".join(repr(item) for item in value)
        return repr(value)

    @staticmethod
    def format_error_report(error: Exception) -> str:
        """
        Format an error as a multi-line report.

        Args:
            error: The exception to format

        Returns:
            Report naming the error kind, the offending input and the allowed set
        """
        category, explanation = categorize_error(error)
        kind = error.kind.value if isinstance(error, TitleValidatorError) else type(error).__name__
        details = error.details if isinstance(error, TitleValidatorError) else {}

        lines: List[str] = [
            f"Pull request title check failed ({kind})",
            f"{explanation}: {error}",
        ]

        for key, label in ErrorFormatter.DETAIL_LABELS:
            if key in details:
                lines.append(f"  {label}: {ErrorFormatter._render_value(details[key])}")

        suggestions = ErrorFormatter.SUGGESTIONS.get(category, [])
        if suggestions:
            lines.append("")
            lines.append("Suggestions:")
            for suggestion in suggestions:
                lines.append(f"  - {suggestion}")

        return "\n".join(lines)

    @staticmethod
    def format_error_concise(error: Exception) -> str:
        """
        Format an error concisely for logs or inline display.

        Args:
            error: The exception to format

        Returns:
            Concise error string
        """
        category, _ = categorize_error(error)
        kind = error.kind.value if isinstance(error, TitleValidatorError) else type(error).__name__
        return f"{category.value.upper()}: {kind} - {str(error)[:200]}"


def format_error_for_user(error: Exception, format_type: str = "concise") -> str:
    """
    Convenience function to format an error for display to users.

    Args:
        error: The exception to format
        format_type: Format type ("report" or "concise")

    Returns:
        Formatted error message
    """
    if format_type == "report":
        return ErrorFormatter.format_error_report(error)
    return ErrorFormatter.format_error_concise(error)
