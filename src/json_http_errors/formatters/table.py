"""Table formatter for human-readable output."""

from __future__ import annotations

from typing import Any

from .base import BaseFormatter


class TableFormatter(BaseFormatter):
    """Format errors as a human-readable table."""

    def format(self, errors: list[dict[str, Any]]) -> str:
        lines: list[str] = []

        lines.append(f"{'=' * 60}")
        lines.append(f"  {'CODE':>4}  TITLE")
        lines.append(f"{'=' * 60}")

        for err in errors:
            lines.append(f"  {err.get('status_code', ''):>4}  {err.get('title', 'N/A')}")
            message = err.get("message")
            if message:
                lines.append(f"        {message}")
            detail = err.get("detail")
            if detail:
                lines.append(f"        Detail: {detail}")
            link = err.get("type")
            if link:
                lines.append(f"        See: {link}")

        lines.append(f"{'=' * 60}")

        return "\n".join(lines)
