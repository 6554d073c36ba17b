"""
Main entry point for the pull request title validator.

Reads the triggering pull request event, parses its title and checks it
against the configured convention. The process exits 0 when the title
passes and 1 on any failure.
"""

import argparse
import sys
from typing import List, Optional

from dotenv import load_dotenv

from .config import ValidatorConfig
from .errors import ErrorFormatter, TitleValidatorError, format_error_for_user
from .event import fetch_title, validate_event_name
from .logging_config import configure_logging, get_logger
from .title import ValidationResult, parse_title, validate_title

logger = get_logger(__name__)


def run(config: ValidatorConfig) -> ValidationResult:
    """
    Validate one pull request title.

    Args:
        config: Run configuration

    Returns:
        ValidationResult; failures carry the TitleValidatorError that ended the run
    """
    logger.info(
        "starting pull-request-title-validator",
        extra={"extra_data": {"event": config.event_name}}
    )

    allowed_types = config.resolved_types()
    allowed_scopes = config.resolved_scopes()
    result = ValidationResult(
        passed=False,
        allowed_types=allowed_types,
        allowed_scopes=allowed_scopes
    )

    try:
        if config.title_override is not None:
            title = config.title_override
        else:
            validate_event_name(config.event_name)
            title = fetch_title(config.event_path)

        result.components = parse_title(title)
        validate_title(result.components, allowed_types, allowed_scopes)
    except TitleValidatorError as e:
        # The raising module already logged the failure at ERROR.
        logger.debug(
            ErrorFormatter.format_error_concise(e),
            extra={"extra_data": {"kind": e.kind.value, **e.details}}
        )
        result.error = e
        return result

    components = result.components
    logger.info(
        "title validated successfully",
        extra={"extra_data": {
            "type": components.type,
            "scope": components.scope,
            "message": components.message,
        }}
    )
    logger.info("the title adheres to the configured standard")

    result.passed = True
    return result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pr-title-validator",
        description="Validate that a pull request title follows type(scope): message"
    )
    parser.add_argument("--event-name", help="Override GITHUB_EVENT_NAME")
    parser.add_argument("--event-path", help="Override GITHUB_EVENT_PATH")
    parser.add_argument("--types", help="Comma-separated allowed types (overrides INPUT_TYPES)")
    parser.add_argument("--scopes", help="Comma-separated scope patterns (overrides INPUT_SCOPES)")
    parser.add_argument("--title", help="Validate this title instead of reading the event payload")
    parser.add_argument("--log-level", help="Override LOG_LEVEL")
    parser.add_argument("--log-format", choices=["json", "detailed", "simple"], help="Override LOG_FORMAT")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the validator and return the process exit code."""
    args = build_parser().parse_args(argv)

    load_dotenv()
    configure_logging(level=args.log_level, format_style=args.log_format)

    config = ValidatorConfig.from_env()
    if args.event_name is not None:
        config.event_name = args.event_name
    if args.event_path is not None:
        config.event_path = args.event_path
    if args.types is not None:
        config.types = args.types
    if args.scopes is not None:
        config.scopes = args.scopes
    config.title_override = args.title

    result = run(config)
    if not result.passed:
        print(format_error_for_user(result.error, "report"), file=sys.stderr)
    return result.exit_code


if __name__ == "__main__":
    raise SystemExit(main())
