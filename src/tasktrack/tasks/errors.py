# src/tasktrack/tasks/errors.py

from __future__ import annotations


class TaskError(Exception):
    """Base class for task subsystem failures."""


class ValidationError(TaskError, ValueError):
    """Caller-supplied data violates an invariant (blank title, blank keyword)."""


class NotFoundError(TaskError, LookupError):
    """Referenced task id does not exist."""

    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task {task_id} not found.")
        self.task_id = task_id


class PersistenceError(TaskError):
    """
    Backing file could not be read, parsed or written.

    The store never lets this escape: it is converted into a warning.
    """


class DataIntegrityError(PersistenceError):
    """Loaded data is well-formed but inconsistent (duplicate ids)."""
