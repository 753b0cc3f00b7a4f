"""Tests for project ID path parsing and validation error formatting."""

import pytest
from fastapi import HTTPException
from fastapi.exceptions import RequestValidationError

from src.tracker.api.dependencies import parse_project_id
from src.tracker.core.exceptions import format_validation_errors

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("1", 1), ("42", 42), (" 7 ", 7), ("007", 7), ("2147483647", 2147483647)],
)
def test_valid_ids_parse(raw: str, expected: int):
    assert parse_project_id(raw) == expected


@pytest.mark.parametrize(
    "raw", ["abc", "", "-1", "0", "1.0", "1e3", "٣", "2147483648", "99999999999999999999"]
)
def test_invalid_ids_raise_400(raw: str):
    with pytest.raises(HTTPException) as exc_info:
        parse_project_id(raw)

    assert exc_info.value.status_code == 400
    assert exc_info.value.detail == "Invalid project ID"


def test_format_validation_errors_drops_location_prefix():
    exc = RequestValidationError(
        [
            {"loc": ("body", "title"), "msg": "Field required", "type": "missing"},
            {"loc": ("body", "dueDate"), "msg": "Input should be a valid datetime", "type": "x"},
        ]
    )

    assert format_validation_errors(exc) == (
        "title: Field required; dueDate: Input should be a valid datetime"
    )


def test_format_validation_errors_keeps_lone_location():
    exc = RequestValidationError([{"loc": ("body",), "msg": "Field required", "type": "missing"}])

    assert format_validation_errors(exc) == "body: Field required"
