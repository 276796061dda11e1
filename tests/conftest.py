# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from tasktrack.core.state import AppState
from tasktrack.tasks.task_store import TaskStore


@pytest.fixture()
def tasks_path(tmp_path: Path) -> Path:
    return tmp_path / "tasks.json"


@pytest.fixture()
def settings(tmp_path: Path, tasks_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the shell.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="tasktrack-test",
        log_level="DEBUG",
        log_to_file=False,
        data_dir=tmp_path / "data",
        tasks_path=tasks_path,
        default_priority="MEDIUM",
    )


@pytest.fixture()
def store(tasks_path: Path) -> TaskStore:
    return TaskStore(tasks_path)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    """
    AppState wired with a real JSON-backed TaskStore under tmp_path.

    NOTE: We keep the real store here because its persistence behaviour is
    part of what the shell tests check.
    """
    return AppState(settings=settings, task_store=store)
