"""Tests for event – event kind checks and payload reading."""

from __future__ import annotations

from pathlib import Path

import pytest

from pr_title_validator.errors import (
    ErrorKind,
    InvalidEventKindError,
    PayloadParseError,
    PayloadReadError,
)
from pr_title_validator.event import extract_title, fetch_title, load_event, validate_event_name


@pytest.mark.parametrize("name", ["pull_request", "pull_request_target"])
def test_validate_event_name_accepts_pull_requests(name: str) -> None:
    validate_event_name(name)


@pytest.mark.parametrize("name", ["push", "", "PULL_REQUEST", "issue_comment"])
def test_validate_event_name_rejects_others(name: str) -> None:
    with pytest.raises(InvalidEventKindError) as excinfo:
        validate_event_name(name)
    assert excinfo.value.kind is ErrorKind.INVALID_EVENT_KIND
    assert excinfo.value.details["event"] == name


def test_fetch_title(write_event) -> None:
    path = write_event({"action": "opened", "pull_request": {"title": "feat(api): x", "number": 3}})
    assert fetch_title(path) == "feat(api): x"


def test_load_event_missing_file(tmp_path: Path) -> None:
    with pytest.raises(PayloadReadError) as excinfo:
        load_event(str(tmp_path / "missing.json"))
    assert excinfo.value.kind is ErrorKind.PAYLOAD_READ_FAILURE


def test_load_event_empty_path() -> None:
    with pytest.raises(PayloadReadError):
        load_event("")


def test_load_event_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "event.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(PayloadParseError) as excinfo:
        load_event(str(path))
    assert excinfo.value.kind is ErrorKind.PAYLOAD_PARSE_FAILURE


def test_load_event_rejects_non_object(write_event) -> None:
    with pytest.raises(PayloadParseError):
        load_event(write_event(["not", "an", "object"]))


def test_extract_title_missing_fields_yield_empty_title() -> None:
    assert extract_title({}) == ""
    assert extract_title({"pull_request": {}}) == ""
    assert extract_title({"pull_request": {"title": None}}) == ""


def test_extract_title_rejects_wrong_types() -> None:
    with pytest.raises(PayloadParseError):
        extract_title({"pull_request": "feat: x"})
    with pytest.raises(PayloadParseError):
        extract_title({"pull_request": {"title": 42}})


def test_load_event_replaces_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / "event.json"
    path.write_bytes(b'{"pull_request": {"title": "feat(api): x", "body": "\xff\xfe"}}')
    payload = load_event(str(path))
    assert payload["pull_request"]["title"] == "feat(api): x"
    assert payload["pull_request"]["body"] == "\ufffd\ufffd"


def test_load_event_null_payload_is_empty(write_event) -> None:
    assert load_event(write_event(None)) == {}
    assert fetch_title(write_event(None)) == ""
