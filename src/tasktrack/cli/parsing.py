# src/tasktrack/cli/parsing.py

"""
Pure text -> value parsing for the shell.

Every parser follows the same contract:
- blank input (empty or whitespace) -> None, meaning "not given"
- valid input -> typed value
- anything else -> ValueError with a user-facing message
"""

from __future__ import annotations

from datetime import date

from ..tasks.task_models import Priority, Status

DATE_HINT = "YYYY-MM-DD"


def parse_text(raw: str | None) -> str | None:
    """Free text: blank -> None, otherwise stripped."""
    text = (raw or "").strip()
    return text or None


def parse_date(raw: str | None) -> date | None:
    text = parse_text(raw)
    if text is None:
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        raise ValueError(f"Invalid date format, expected {DATE_HINT}.") from None


def parse_priority(raw: str | None) -> Priority | None:
    text = parse_text(raw)
    if text is None:
        return None
    try:
        return Priority(text.upper())
    except ValueError:
        names = ", ".join(p.value for p in Priority)
        raise ValueError(f"Invalid priority, enter one of: {names}.") from None


def parse_status(raw: str | None) -> Status | None:
    text = parse_text(raw)
    if text is None:
        return None
    try:
        return Status(text.upper())
    except ValueError:
        names = ", ".join(s.value for s in Status)
        raise ValueError(f"Invalid status, enter one of: {names}.") from None


def parse_task_id(raw: str | None) -> int | None:
    text = parse_text(raw)
    if text is None:
        return None
    try:
        return int(text)
    except ValueError:
        raise ValueError("Invalid id.") from None
