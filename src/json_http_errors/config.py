from __future__ import annotations

import os
from dataclasses import dataclass, field

_PREFIX = "JSON_HTTP_ERRORS_"


def _get_str(name: str, default: str) -> str:
    return os.getenv(_PREFIX + name, default)


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(_PREFIX + name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_bool(name: str, default: bool) -> bool:
    raw = os.getenv(_PREFIX + name)
    if raw is None:
        return default
    return raw not in {"", "0", "false", "False"}


@dataclass(frozen=True, slots=True)
class Settings:
    # Serialization
    include_stack: bool = field(default_factory=lambda: _get_bool("INCLUDE_STACK", False))

    # CLI output
    default_format: str = field(default_factory=lambda: _get_str("DEFAULT_FORMAT", "json"))
    indent: int = field(default_factory=lambda: _get_int("INDENT", 2))


settings = Settings()
