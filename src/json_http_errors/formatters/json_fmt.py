"""JSON formatter."""

from __future__ import annotations

import json
from typing import Any

from ..config import settings
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Format errors as JSON; a single error is written as an object."""

    def __init__(self, indent: int | None = None) -> None:
        self.indent = settings.indent if indent is None else indent

    def format(self, errors: list[dict[str, Any]]) -> str:
        data: Any = errors[0] if len(errors) == 1 else errors
        return json.dumps(data, ensure_ascii=False, indent=self.indent or None)
