# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from tasktrack.config import Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "TASKTRACK_APP_NAME",
        "TASKTRACK_LOG_LEVEL",
        "TASKTRACK_LOG_TO_FILE",
        "TASKTRACK_DATA_DIR",
        "TASKTRACK_TASKS_PATH",
        "TASKTRACK_DEFAULT_PRIORITY",
    ):
        monkeypatch.delenv(name, raising=False)

    s = Settings.from_env()

    assert s.app_name == "tasktrack"
    assert s.log_level == "INFO"
    assert s.log_to_file is True
    assert s.tasks_path == Path("tasks.json")
    assert s.data_dir == Path(".local/tasktrack")
    assert s.default_priority == "MEDIUM"


def test_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKTRACK_LOG_LEVEL", "debug")
    monkeypatch.setenv("TASKTRACK_LOG_TO_FILE", "off")
    monkeypatch.setenv("TASKTRACK_TASKS_PATH", str(tmp_path / "mine.json"))
    monkeypatch.setenv("TASKTRACK_DEFAULT_PRIORITY", "low")

    s = Settings.from_env()

    assert s.log_level == "DEBUG"
    assert s.log_to_file is False
    assert s.tasks_path == tmp_path / "mine.json"
    assert s.default_priority == "LOW"
