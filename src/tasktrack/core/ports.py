# src/tasktrack/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the shell.

Command handlers depend on this Protocol instead of the concrete TaskStore,
so they can be exercised against fakes.
"""

from datetime import date
from typing import Protocol

from ..tasks.task_models import Priority, Task, TaskPatch


class TaskRepo(Protocol):
    warnings: list[str]

    # Mutations (persisted before returning)
    def add_task(
            self,
            *,
            title: str,
            description: str = "",
            due_date: date,
            priority: Priority = Priority.MEDIUM,
    ) -> Task: ...
    def edit_task(self, task_id: int, patch: TaskPatch) -> Task: ...
    def delete_task(self, task_id: int) -> Task: ...
    def save(self) -> bool: ...

    # In-place ordering (not persisted on its own)
    def sort_by_date(self) -> None: ...
    def sort_by_priority(self) -> None: ...

    # Queries
    def get_task(self, task_id: int) -> Task | None: ...
    def count_tasks(self) -> int: ...
    def list_tasks(self) -> list[Task]: ...
    def list_overdue_tasks(self, today: date | None = None) -> list[Task]: ...
    def list_done_tasks(self) -> list[Task]: ...
    def search(self, keyword: str) -> list[Task]: ...
