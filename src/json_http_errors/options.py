"""Status code coercion and error option merging."""

from __future__ import annotations

import logging
import math
import re
import traceback
from collections.abc import Callable, Iterator, Mapping
from typing import Any, TypedDict

log = logging.getLogger(__name__)

MIN_STATUS_CODE = 100
MAX_STATUS_CODE = 699

# Leading integer, the way a lenient parseInt reads it.
_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


class ErrorOptions(TypedDict, total=False):
    name: str
    title: str
    status_code: int
    body: str | Mapping[str, Any]
    message: str
    detail: str
    stack: str
    type: str


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def get_status_code(value: Any) -> int | float | None:
    """Return *value* as a status code if it is one, else None.

    Strings are read up to the first non-digit ("404.9" -> 404). Numbers are
    truncated for the range check only; an in-range number is returned as
    given.
    """
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if not match:
            return None
        digits = match.group(1).lstrip("+-").lstrip("0")
        # Anything past three digits is out of range; skip the int() conversion.
        if len(digits) > 3:
            return None
        candidate: int | float = int(match.group(1))
        truncated = candidate
    elif _is_number(value):
        if not math.isfinite(value):
            return None
        candidate = value
        truncated = math.trunc(value)
    else:
        return None

    if truncated and MIN_STATUS_CODE <= truncated <= MAX_STATUS_CODE:
        return candidate
    return None


def _is_str(value: Any) -> bool:
    return isinstance(value, str)


def _is_status_code(value: Any) -> bool:
    return _is_number(value) and get_status_code(value) is not None


def _is_body(value: Any) -> bool:
    return isinstance(value, (str, Mapping))


# (source attribute, target key, predicate). Status spellings are read in
# order so that ``status_code`` wins when several are present.
FIELD_CHECKS: tuple[tuple[str, str, Callable[[Any], bool]], ...] = (
    ("name", "name", _is_str),
    ("title", "title", _is_str),
    ("status", "status_code", _is_status_code),
    ("statusCode", "status_code", _is_status_code),
    ("status_code", "status_code", _is_status_code),
    ("body", "body", _is_body),
    ("message", "message", _is_str),
    ("detail", "detail", _is_str),
    ("stack", "stack", _is_str),
    ("type", "type", _is_str),
)

_MISSING = object()


def _read_field(obj: Any, attr: str, is_mapping: bool) -> Any:
    """Read *attr* from *obj*, treating a failing lookup as a missing field."""
    try:
        if is_mapping:
            return obj.get(attr, _MISSING)
        return getattr(obj, attr, _MISSING)
    except Exception:
        log.debug("unreadable_option", extra={"field": attr})
        return _MISSING


def _exception_defaults(exc: BaseException) -> ErrorOptions:
    derived: ErrorOptions = {"name": type(exc).__name__}
    text = str(exc)
    if text:
        derived["message"] = text
    if exc.__traceback__ is not None:
        derived["stack"] = "".join(
            traceback.format_exception(type(exc), exc, exc.__traceback__)
        )
    return derived


def _is_error_like(obj: Any) -> bool:
    if isinstance(obj, BaseException):
        return True
    return any(_read_field(obj, attr, False) is not _MISSING for attr, _, _ in FIELD_CHECKS)


def get_options_from_object(obj: Any) -> ErrorOptions:
    """Extract the recognized, well-typed option fields from *obj*.

    Mappings are read by key, everything else by attribute.
    """
    options: ErrorOptions = {}
    is_mapping = isinstance(obj, Mapping)

    # Plain exceptions carry their data in args and __traceback__.
    plain_exception = isinstance(obj, BaseException) and not getattr(obj, "is_http_error", False)
    if plain_exception:
        options.update(_exception_defaults(obj))

    for attr, key, predicate in FIELD_CHECKS:
        # Built-in attributes such as ImportError.name are not error names.
        if plain_exception and attr == "name" and "name" not in vars(obj):
            continue
        value = _read_field(obj, attr, is_mapping)
        if value is _MISSING or value is None:
            continue
        if not predicate(value):
            log.debug("dropped_option", extra={"field": attr})
            continue
        options[key] = value  # type: ignore[literal-required]
    return options


def _iter_flat(values: Any) -> Iterator[Any]:
    for value in values:
        if isinstance(value, (list, tuple)):
            yield from _iter_flat(value)
        else:
            yield value


def parse_error_options(*values: Any) -> ErrorOptions:
    """Merge numbers, strings, option mappings and error objects into one
    ErrorOptions dict.

    Items are applied left to right (nested lists depth-first) and later
    items override earlier ones field by field. Unrecognized input is
    ignored.
    """
    options: ErrorOptions = {}
    for value in _iter_flat(values):
        if not value:
            continue

        if isinstance(value, str) or _is_number(value):
            status_code = get_status_code(value)
            if status_code is not None:
                options["status_code"] = status_code  # type: ignore[typeddict-item]
            elif isinstance(value, str):
                options["message"] = value
        elif isinstance(value, Mapping) or _is_error_like(value):
            options.update(get_options_from_object(value))

    return options
