# tasks/task_models.py

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from enum import StrEnum
from typing import Any

from .errors import PersistenceError

DISPLAY_DATE_FORMAT = "%d.%m.%Y"
_RECORD_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


class Priority(StrEnum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"

    @property
    def rank(self) -> int:
        """Sort rank, lowest first. Independent of declaration order."""
        return _PRIORITY_RANK[self]


_PRIORITY_RANK: dict[Priority, int] = {
    Priority.LOW: 0,
    Priority.MEDIUM: 1,
    Priority.HIGH: 2,
}


class Status(StrEnum):
    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"


@dataclass(slots=True)
class Task:
    id: int
    title: str
    description: str
    due_date: date
    priority: Priority
    status: Status = Status.TODO

    @property
    def is_done(self) -> bool:
        return self.status is Status.DONE

    def is_overdue(self, today: date) -> bool:
        return self.due_date < today and not self.is_done

    def matches(self, keyword: str) -> bool:
        """
        Case-insensitive match used by search:
        - substring of title or description
        - exact priority or status name
        """
        needle = keyword.lower()
        return (
            needle in self.title.lower()
            or needle in self.description.lower()
            or needle == self.priority.value.lower()
            or needle == self.status.value.lower()
        )

    def __str__(self) -> str:
        return (
            f"ID: {self.id} | {self.title} | Date: {self.due_date.strftime(DISPLAY_DATE_FORMAT)}"
            f" | Priority: {self.priority.value} | Status: {self.status.value}\n"
            f"Description: {self.description}"
        )

    # ---- JSON record conversion ----

    def to_record(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "dueDate": self.due_date.isoformat(),
            "priority": self.priority.value,
            "status": self.status.value,
        }

    @classmethod
    def from_record(cls, raw: Any) -> Task:
        """Build a Task from a persisted record; PersistenceError if malformed."""
        if not isinstance(raw, dict):
            raise PersistenceError(f"Task record must be an object, got {type(raw).__name__}")

        missing = [k for k in ("id", "title", "dueDate", "priority") if k not in raw]
        if missing:
            raise PersistenceError(f"Task record missing fields: {', '.join(missing)}")

        task_id = raw["id"]
        # bool is an int subclass; reject it explicitly
        if not isinstance(task_id, int) or isinstance(task_id, bool):
            raise PersistenceError(f"Task id must be an integer, got {task_id!r}")

        title = raw["title"]
        if not isinstance(title, str) or not title.strip():
            raise PersistenceError(f"Task {task_id} has an empty or invalid title")

        description = raw.get("description", "")
        if description is None:
            description = ""
        if not isinstance(description, str):
            raise PersistenceError(f"Task {task_id} has an invalid description")

        raw_due = raw["dueDate"]
        # only the written form; fromisoformat alone also takes "20240110"
        if not isinstance(raw_due, str) or not _RECORD_DATE_RE.fullmatch(raw_due):
            raise PersistenceError(f"Task {task_id} has an invalid dueDate: {raw_due!r}")
        try:
            due_date = date.fromisoformat(raw_due)
        except ValueError as e:
            raise PersistenceError(f"Task {task_id} has an invalid dueDate: {raw_due!r}") from e

        raw_priority = raw["priority"]
        raw_status = raw.get("status", Status.TODO.value)
        if not isinstance(raw_priority, str) or not isinstance(raw_status, str):
            raise PersistenceError(f"Task {task_id} has a non-text priority or status")
        try:
            priority = Priority(raw_priority)
            status = Status(raw_status)
        except ValueError as e:
            raise PersistenceError(f"Task {task_id}: {e}") from e

        return cls(
            id=task_id,
            title=title,
            description=description,
            due_date=due_date,
            priority=priority,
            status=status,
        )


@dataclass(frozen=True, slots=True)
class TaskPatch:
    """
    Sparse update for edit_task.

    A field left as None keeps the task's current value.
    """

    title: str | None = None
    description: str | None = None
    due_date: date | None = None
    priority: Priority | None = None
    status: Status | None = None

    @property
    def is_empty(self) -> bool:
        return (
            self.title is None
            and self.description is None
            and self.due_date is None
            and self.priority is None
            and self.status is None
        )
