# tests/test_parsing.py

from __future__ import annotations

from datetime import date

import pytest

from tasktrack.cli.parsing import (
    parse_date,
    parse_priority,
    parse_status,
    parse_task_id,
    parse_text,
)
from tasktrack.tasks.task_models import Priority, Status


@pytest.mark.parametrize(
    "parser", [parse_text, parse_date, parse_priority, parse_status, parse_task_id]
)
@pytest.mark.parametrize("raw", [None, "", "   "])
def test_blank_means_not_given(parser, raw) -> None:
    assert parser(raw) is None


def test_valid_values() -> None:
    assert parse_text("  hi  ") == "hi"
    assert parse_date(" 2024-01-10 ") == date(2024, 1, 10)
    assert parse_priority("high") is Priority.HIGH
    assert parse_status("in_progress") is Status.IN_PROGRESS
    assert parse_task_id(" 12 ") == 12


@pytest.mark.parametrize(
    ("parser", "raw", "message"),
    [
        (parse_date, "10.01.2024", "YYYY-MM-DD"),
        (parse_date, "2024-13-01", "YYYY-MM-DD"),
        (parse_priority, "urgent", "LOW, MEDIUM, HIGH"),
        (parse_status, "later", "TODO, IN_PROGRESS, DONE"),
        (parse_task_id, "abc", "Invalid id"),
    ],
)
def test_invalid_values_raise_value_error(parser, raw, message) -> None:
    with pytest.raises(ValueError, match=message):
        parser(raw)
