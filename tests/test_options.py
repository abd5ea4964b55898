"""Tests for status code coercion and option merging."""

from __future__ import annotations

import logging
from types import SimpleNamespace

import pytest

from json_http_errors.options import get_options_from_object, get_status_code, parse_error_options

ERROR_CODES = list(range(100, 700))

NAME = "MyCustomError"
TITLE = "My Custom Error"
MESSAGE = "This is a custom error"
STATUS_CODE = 456


class TestGetStatusCode:
    def test_integer_codes_in_range(self):
        assert all(get_status_code(c) == c for c in ERROR_CODES)

    def test_string_codes_in_range(self):
        assert all(get_status_code(str(c)) == c for c in ERROR_CODES)

    def test_float_codes_in_range(self):
        assert all(get_status_code(c + 0.0) == c for c in ERROR_CODES)

    @pytest.mark.parametrize("value", [0, 99, 700, 7000, -5, "abc", "", "-404", "99", "700"])
    def test_out_of_range_or_non_numeric(self, value):
        assert get_status_code(value) is None

    def test_fractional_string_is_truncated(self):
        assert get_status_code("404.9") == 404
        assert get_status_code("404.5") == 404

    def test_string_with_trailing_text(self):
        assert get_status_code("404 Not Found") == 404
        assert get_status_code("  +404") == 404

    def test_fractional_number_keeps_original_value(self):
        assert get_status_code(404.5) == 404.5
        assert get_status_code(699.9) == 699.9
        assert get_status_code(99.9) is None

    @pytest.mark.parametrize("value", [None, True, False, [404], {"status_code": 404}, float("nan"), float("inf")])
    def test_other_types_yield_none(self, value):
        assert get_status_code(value) is None


@pytest.mark.parametrize(
    ("data", "expected"),
    [
        ("abc", {"message": "abc"}),
        ({"foo": "bar", "status_code": 405}, {"status_code": 405}),
        (405, {"status_code": 405}),
        ("405", {"status_code": 405}),
        ([405, "Bad Request"], {"status_code": 405, "message": "Bad Request"}),
        (
            {
                "body": {"error_text": MESSAGE},
                "message": MESSAGE,
                "name": NAME,
                "status_code": STATUS_CODE,
                "title": TITLE,
            },
            {
                "body": {"error_text": MESSAGE},
                "message": MESSAGE,
                "name": NAME,
                "title": TITLE,
                "status_code": STATUS_CODE,
            },
        ),
        (
            {"body": MESSAGE, "name": NAME, "title": TITLE, "status_code": STATUS_CODE, "message": MESSAGE},
            {"body": MESSAGE, "name": NAME, "title": TITLE, "status_code": STATUS_CODE, "message": MESSAGE},
        ),
        (
            {"name": NAME, "title": TITLE, "status_code": STATUS_CODE, "message": MESSAGE},
            {"name": NAME, "title": TITLE, "status_code": STATUS_CODE, "message": MESSAGE},
        ),
    ],
)
def test_parse_error_options(data, expected) -> None:
    assert parse_error_options(data) == expected


def test_later_values_override_earlier() -> None:
    options = parse_error_options(404, "first", {"message": "second", "detail": "d"}, 410)
    assert options == {"status_code": 410, "message": "second", "detail": "d"}


def test_nested_sequences_are_flattened_depth_first() -> None:
    options = parse_error_options([[404], ("x", [410, "y"])], "z")
    assert options == {"status_code": 410, "message": "z"}


@pytest.mark.parametrize("value", [None, "", 0, False, True, {}, [], 7000, 3.5])
def test_ignored_values_contribute_nothing(value) -> None:
    assert parse_error_options(value) == {}


def test_numeric_failure_is_not_a_message() -> None:
    assert parse_error_options("hello", 42) == {"message": "hello"}


def test_wrong_typed_fields_are_dropped() -> None:
    options = parse_error_options(
        {
            "name": 1,
            "title": ["t"],
            "status_code": "404",
            "body": [1, 2],
            "message": None,
            "detail": "kept",
            "type": 3,
        }
    )
    assert options == {"detail": "kept"}


def test_number_body_is_dropped() -> None:
    assert parse_error_options({"body": 12, "title": "T"}) == {"title": "T"}


def test_out_of_range_status_in_mapping_is_dropped() -> None:
    assert parse_error_options({"status_code": 7000, "title": "T"}) == {"title": "T"}


def test_status_spellings_normalize_to_status_code() -> None:
    assert parse_error_options({"status": 401}) == {"status_code": 401}
    assert parse_error_options({"statusCode": 402}) == {"status_code": 402}
    assert parse_error_options({"status": 401, "statusCode": 402, "status_code": 403}) == {
        "status_code": 403
    }


def test_plain_exception() -> None:
    options = parse_error_options(ValueError("boom"))
    assert options == {"name": "ValueError", "message": "boom"}


def test_raised_exception_carries_stack() -> None:
    try:
        raise KeyError("missing")
    except KeyError as e:
        options = parse_error_options(404, e)

    assert options["status_code"] == 404
    assert options["name"] == "KeyError"
    assert "KeyError" in options["stack"]


def test_exception_attributes_win_over_derived_values() -> None:
    err = RuntimeError("boom")
    err.title = "Custom"  # type: ignore[attr-defined]
    err.message = "explicit"  # type: ignore[attr-defined]
    err.status_code = 503  # type: ignore[attr-defined]

    options = parse_error_options(err)
    assert options == {
        "name": "RuntimeError",
        "title": "Custom",
        "message": "explicit",
        "status_code": 503,
    }


def test_error_like_object() -> None:
    obj = SimpleNamespace(title="T", status_code="404", message="m")
    assert parse_error_options(obj) == {"title": "T", "message": "m"}


def test_object_without_known_attributes_is_ignored() -> None:
    assert parse_error_options(object()) == {}


def test_get_options_from_object_reads_mapping_keys() -> None:
    assert get_options_from_object({"type": "https://example.com/e", "extra": 1}) == {
        "type": "https://example.com/e"
    }


def test_parse_returns_new_dict() -> None:
    body = {"error_text": "x"}
    first = parse_error_options({"body": body})
    second = parse_error_options({"body": body})
    assert first == second
    assert first is not second


def test_dropped_fields_are_logged(caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="json_http_errors.options")
    parse_error_options({"title": 5})
    assert any(getattr(r, "field", None) == "title" for r in caplog.records)


def test_very_long_digit_string_is_a_message() -> None:
    digits = "1" * 5000
    assert get_status_code(digits) is None
    assert get_status_code("0000404") == 404
    assert parse_error_options(digits) == {"message": digits}


class _FailingMessage:
    title = "T"

    @property
    def message(self) -> str:
        raise RuntimeError("lookup failed")


def test_failing_attribute_is_treated_as_missing(caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="json_http_errors.options")
    assert parse_error_options(_FailingMessage()) == {"title": "T"}
    assert any(getattr(r, "field", None) == "message" for r in caplog.records)


def test_builtin_exception_name_attribute_is_ignored() -> None:
    options = parse_error_options(ImportError("no mod", name="foo"))
    assert options == {"name": "ImportError", "message": "no mod"}


def test_name_set_on_exception_is_kept() -> None:
    err = RuntimeError("boom")
    err.name = "Custom"  # type: ignore[attr-defined]
    assert parse_error_options(err)["name"] == "Custom"
