from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar

from .catalog import DEFAULT_ERROR_MESSAGE, DEFAULT_STATUS_CODE, DEFAULT_TITLE, get_preset
from .config import settings
from .options import parse_error_options


class HttpError(Exception):
    """An error carrying an HTTP status code, title and message.

    Accepts any mix of status codes, messages, option mappings, exceptions
    and lists of those; see ``parse_error_options`` for the merge rules.
    Errors below 500 get a ``{"error_text": message}`` body unless one is
    given.
    """

    is_http_error: ClassVar[bool] = True
    # Set by named variants to pull their catalog preset in first.
    preset_status: ClassVar[int | None] = None

    status_code: int
    title: str
    message: str
    body: str | Mapping[str, Any] | None
    name: str | None
    detail: str | None
    stack: str | None
    type: str | None

    def __init__(self, *options: Any) -> None:
        preset = get_preset(self.preset_status) if self.preset_status is not None else None

        self.status_code = DEFAULT_STATUS_CODE
        self.title = DEFAULT_TITLE
        self.message = DEFAULT_ERROR_MESSAGE
        self.body = None
        self.name = None
        self.detail = None
        self.stack = None
        self.type = None

        for key, value in parse_error_options(preset, *options).items():
            setattr(self, key, value)

        if (self.body is None or self.body == "") and self.status_code < 500:
            self.body = {"error_text": self.message or DEFAULT_ERROR_MESSAGE}

        super().__init__(self.message)

    @property
    def status(self) -> int:
        """Alias of ``status_code``."""
        return self.status_code

    @status.setter
    def status(self, value: int) -> None:
        self.status_code = value

    def to_dict(self, *, include_stack: bool | None = None) -> dict[str, Any]:
        """Return a JSON-ready dict of the fields that are set."""
        if include_stack is None:
            include_stack = settings.include_stack

        payload: dict[str, Any] = {
            "status_code": self.status_code,
            "title": self.title,
            "message": self.message,
        }
        for key in ("name", "detail", "type"):
            value = getattr(self, key)
            if value is not None:
                payload[key] = value
        if self.body is not None:
            payload["body"] = self.body if isinstance(self.body, str) else dict(self.body)
        if include_stack and self.stack is not None:
            payload["stack"] = self.stack
        return payload

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.to_dict(include_stack=True),))

    def __str__(self) -> str:
        return f"{self.status_code} {self.title}: {self.message}"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(status_code={self.status_code!r}, "
            f"title={self.title!r}, message={self.message!r})"
        )
