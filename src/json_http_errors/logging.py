from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any

# Structured fields the library passes through ``extra=``.
_EXTRA_KEYS = ("field", "status_code", "code")

_CONFIGURED = False


class JsonFormatter(logging.Formatter):
    """One JSON object per record, carrying the option field or status involved."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update({key: getattr(record, key) for key in _EXTRA_KEYS if hasattr(record, key)})

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))


def configure_logging(*, level: str | None = None) -> None:
    """Route records to stderr as JSON; only the CLI calls this.

    Defaults to WARNING so the DEBUG notes about dropped options stay quiet
    unless LOG_LEVEL asks for them. Calling it again is a no-op.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    log_level = (level or os.getenv("LOG_LEVEL") or "WARNING").upper()

    # stdout carries the command's JSON/table output.
    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(JsonFormatter())

    root = logging.getLogger()
    root.setLevel(log_level)
    root.handlers[:] = [handler]

    _CONFIGURED = True
