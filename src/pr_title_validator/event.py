"""
Access to the GitHub event that triggered the run.

Only pull request events are supported, and only the
``pull_request.title`` field of the payload is read.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict

from .errors import InvalidEventKindError, PayloadParseError, PayloadReadError

logger = logging.getLogger(__name__)

SUPPORTED_EVENTS = ("pull_request", "pull_request_target")


def validate_event_name(event_name: str) -> None:
    """
    Ensure the run was triggered by a pull request event.

    Raises:
        InvalidEventKindError: any other event name
    """
    if event_name not in SUPPORTED_EVENTS:
        logger.error("invalid event type", extra={"extra_data": {"event": event_name}})
        raise InvalidEventKindError(
            f"invalid event type: {event_name}",
            {"event": event_name, "allowed_events": list(SUPPORTED_EVENTS)}
        )


def load_event(event_path: str) -> Dict[str, Any]:
    """
    Read and decode the event payload.

    Args:
        event_path: Path to the JSON payload written by the runner

    Returns:
        Decoded payload

    Raises:
        PayloadReadError: file missing or unreadable
        PayloadParseError: not valid JSON, or not a JSON object (null counts as {})
    """
    try:
        if not event_path:
            raise FileNotFoundError("event path is empty")
        # Invalid UTF-8 is replaced, not rejected; only pull_request.title is read.
        raw = Path(event_path).read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        logger.error(
            "problem reading the event JSON file",
            extra={"extra_data": {"path": event_path, "error": str(e)}}
        )
        raise PayloadReadError(
            f"unable to read event payload: {e}",
            {"path": event_path, "reason": str(e)}
        ) from e

    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.error("failed to decode event JSON", extra={"extra_data": {"error": str(e)}})
        raise PayloadParseError(
            f"event payload is not valid JSON: {e}",
            {"path": event_path, "reason": str(e)}
        ) from e

    if payload is None:
        payload = {}

    if not isinstance(payload, dict):
        logger.error("event payload is not a JSON object")
        raise PayloadParseError(
            "event payload is not a JSON object",
            {"path": event_path, "reason": f"got {type(payload).__name__}"}
        )

    return payload


def extract_title(payload: Dict[str, Any]) -> str:
    """
    Get ``pull_request.title`` from a decoded payload.

    A missing field yields "", which later fails title parsing.

    Raises:
        PayloadParseError: pull_request is not an object or title is not a string
    """
    pull_request = payload.get("pull_request")
    if pull_request is None:
        return ""
    if not isinstance(pull_request, dict):
        logger.error("event field pull_request is not an object")
        raise PayloadParseError(
            "event field 'pull_request' is not an object",
            {"reason": f"got {type(pull_request).__name__}"}
        )

    title = pull_request.get("title")
    if title is None:
        return ""
    if not isinstance(title, str):
        logger.error("event field pull_request.title is not a string")
        raise PayloadParseError(
            "event field 'pull_request.title' is not a string",
            {"reason": f"got {type(title).__name__}"}
        )
    return title


def fetch_title(event_path: str) -> str:
    """Read the pull request title from the event payload at event_path."""
    return extract_title(load_event(event_path))
