# tasks/task_store.py

from __future__ import annotations

import json
import logging
import os
from collections.abc import Callable
from datetime import date
from pathlib import Path

from .errors import DataIntegrityError, NotFoundError, PersistenceError, ValidationError
from .task_models import Priority, Status, Task, TaskPatch

logger = logging.getLogger(__name__)

WarningSink = Callable[[str], None]


class TaskStore:
    """
    JSON-file task store.

    The whole collection lives in memory; every mutating call rewrites the
    whole file before returning. Read-only calls never touch the file.

    Load failures (unreadable file, malformed JSON, duplicate ids) leave the
    store empty and usable. Save failures keep the in-memory change. Both are
    reported as warnings: logged, kept in `warnings`, and passed to
    `on_warning` when given.
    """

    def __init__(
        self,
        path: str | Path = "tasks.json",
        *,
        on_warning: WarningSink | None = None,
    ) -> None:
        self._path = Path(path)
        self._on_warning = on_warning
        self._tasks: list[Task] = []
        self._next_id = 1

        self.warnings: list[str] = []
        self.load_error: PersistenceError | None = None
        self.last_save_error: PersistenceError | None = None

        self._load()
        logger.info("TaskStore ready path=%s total=%s", self._path, len(self._tasks))

    @property
    def path(self) -> Path:
        return self._path

    @property
    def next_id(self) -> int:
        return self._next_id

    # ---- low-level helpers ----

    def _warn(self, message: str) -> None:
        logger.warning(message)
        self.warnings.append(message)
        if self._on_warning is not None:
            self._on_warning(message)

    def _allocate_id(self) -> int:
        nid = self._next_id
        self._next_id += 1
        return nid

    def _find(self, task_id: int) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def _require(self, task_id: int) -> Task:
        task = self._find(task_id)
        if task is None:
            raise NotFoundError(task_id)
        return task

    @staticmethod
    def _require_text(value: str | None, what: str) -> str:
        if value is None or not value.strip():
            raise ValidationError(f"{what} cannot be empty.")
        return value.strip()

    def _read_records(self) -> list[Task]:
        try:
            raw = self._path.read_text("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise PersistenceError(f"Failed to read task file {self._path}: {e}") from e

        try:
            data = json.loads(raw)
        except (ValueError, RecursionError) as e:
            raise PersistenceError(f"Failed to parse task file {self._path}: {e}") from e

        if data is None:
            return []
        if not isinstance(data, list):
            raise PersistenceError(
                f"Task file {self._path} must hold a JSON array, got {type(data).__name__}"
            )

        tasks = [Task.from_record(item) for item in data]

        seen: set[int] = set()
        for task in tasks:
            if task.id in seen:
                raise DataIntegrityError(f"Duplicate task id {task.id} in {self._path}")
            seen.add(task.id)
        return tasks

    def _load(self) -> None:
        if not self._path.exists():
            logger.info("Task file %s not found, starting with an empty list.", self._path)
            return

        try:
            tasks = self._read_records()
        except PersistenceError as e:
            self.load_error = e
            self._tasks = []
            self._next_id = 1
            self._warn(f"{e}. Starting with an empty task list.")
            return

        self._tasks = tasks
        self._next_id = max((t.id for t in tasks), default=0) + 1
        logger.info("Loaded %d tasks from %s (next_id=%d)", len(tasks), self._path, self._next_id)

    # ---- persistence ----

    def save(self) -> bool:
        """
        Write the full collection, replacing the file atomically.

        Returns False (and records a warning) if the write failed; the
        in-memory state is left as is.
        """
        payload = json.dumps(
            [t.to_record() for t in self._tasks], ensure_ascii=False, indent=2
        )
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(payload + "\n", "utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            try:
                tmp.unlink(missing_ok=True)
            except OSError:
                logger.debug("Could not remove temp file %s", tmp, exc_info=True)
            self.last_save_error = PersistenceError(f"Failed to save tasks to {self._path}: {e}")
            self._warn(str(self.last_save_error))
            return False

        self.last_save_error = None
        logger.debug("Saved %d tasks to %s", len(self._tasks), self._path)
        return True

    # ---- public API: mutations ----

    def add_task(
        self,
        *,
        title: str,
        description: str = "",
        due_date: date,
        priority: Priority = Priority.MEDIUM,
    ) -> Task:
        clean_title = self._require_text(title, "Task title")

        task = Task(
            id=self._allocate_id(),
            title=clean_title,
            description=description or "",
            due_date=due_date,
            priority=priority,
            status=Status.TODO,
        )
        self._tasks.append(task)
        logger.debug(
            "Task added id=%s priority=%s due=%s", task.id, task.priority, task.due_date
        )
        self.save()
        return task

    def edit_task(self, task_id: int, patch: TaskPatch) -> Task:
        """Apply a sparse patch; fields left as None keep their value."""
        task = self._require(task_id)

        # validate everything before touching the task
        title = None if patch.title is None else self._require_text(patch.title, "Task title")

        if title is not None:
            task.title = title
        if patch.description is not None:
            task.description = patch.description
        if patch.due_date is not None:
            task.due_date = patch.due_date
        if patch.priority is not None:
            task.priority = patch.priority
        if patch.status is not None:
            task.status = patch.status

        logger.debug("Task edited id=%s patch=%s", task_id, patch)
        self.save()
        return task

    def delete_task(self, task_id: int) -> Task:
        task = self._require(task_id)
        self._tasks.remove(task)
        logger.debug("Task deleted id=%s", task_id)
        self.save()
        return task

    # ---- public API: ordering (not persisted by itself) ----

    def sort_by_date(self) -> None:
        self._tasks.sort(key=lambda t: t.due_date)
        logger.debug("Tasks sorted by due date")

    def sort_by_priority(self) -> None:
        self._tasks.sort(key=lambda t: t.priority.rank)
        logger.debug("Tasks sorted by priority")

    # ---- public API: queries ----

    def get_task(self, task_id: int) -> Task | None:
        return self._find(task_id)

    def count_tasks(self) -> int:
        return len(self._tasks)

    def list_tasks(self) -> list[Task]:
        return list(self._tasks)

    def list_overdue_tasks(self, today: date | None = None) -> list[Task]:
        """Tasks due strictly before today that are not DONE."""
        if today is None:
            today = date.today()
        return [t for t in self._tasks if t.is_overdue(today)]

    def list_done_tasks(self) -> list[Task]:
        return [t for t in self._tasks if t.is_done]

    def search(self, keyword: str) -> list[Task]:
        """Blank keywords are rejected; anything else is matched as typed."""
        self._require_text(keyword, "Search keyword")
        return [t for t in self._tasks if t.matches(keyword)]
