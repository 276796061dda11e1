# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from tasktrack.logging_setup import _ConsoleNoiseFilter, resolve_level, setup_logging


@pytest.fixture()
def restore_root_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_noise_filter_keeps_own_logs_and_drops_third_party_info() -> None:
    f = _ConsoleNoiseFilter()
    assert f.filter(_record("tasktrack.tasks.task_store", logging.DEBUG))
    assert not f.filter(_record("urllib3", logging.WARNING))
    assert f.filter(_record("urllib3", logging.ERROR))
    assert not f.filter(_record("py.warnings", logging.WARNING))


def test_setup_logging_writes_file(tmp_path: Path, restore_root_logging) -> None:
    log_file = setup_logging(log_dir=tmp_path / "logs", console_level=logging.ERROR)

    logging.getLogger("tasktrack.test").debug("hello file")
    for h in logging.getLogger().handlers:
        h.flush()

    assert log_file == tmp_path / "logs" / "tasktrack.log"
    assert "hello file" in log_file.read_text("utf-8")


def test_setup_logging_without_file(tmp_path: Path, restore_root_logging) -> None:
    assert setup_logging(log_dir=tmp_path / "logs", log_to_file=False) is None
    assert not (tmp_path / "logs").exists()
    assert len(logging.getLogger().handlers) == 1


@pytest.mark.parametrize(
    ("level", "expected"),
    [
        (logging.DEBUG, logging.DEBUG),
        ("debug", logging.DEBUG),
        (" Warning ", logging.WARNING),
        ("LOUD", logging.INFO),
    ],
)
def test_resolve_level(level, expected) -> None:
    assert resolve_level(level) == expected


def test_noise_filter_accepts_extra_app_prefixes() -> None:
    f = _ConsoleNoiseFilter(app_loggers=("tasktrack", "plugins"), min_foreign_level=logging.WARNING)
    assert f.filter(_record("plugins.csv", logging.DEBUG))
    assert not f.filter(_record("pluginsx", logging.INFO))
    assert f.filter(_record("pluginsx", logging.WARNING))


def test_setup_logging_level_names_and_file_name(
    tmp_path: Path, restore_root_logging, capsys: pytest.CaptureFixture[str]
) -> None:
    log_file = setup_logging(
        log_dir=tmp_path,
        console_level="info",
        file_level="WARNING",
        log_file_name="run.log",
    )
    console, file_handler = logging.getLogger().handlers

    assert log_file == tmp_path / "run.log"
    assert console.level == logging.INFO
    assert file_handler.level == logging.WARNING

    logging.getLogger("tasktrack.test").info("only on console")
    file_handler.flush()

    assert "INFO tasktrack.test: only on console" in capsys.readouterr().err
    assert "only on console" not in log_file.read_text("utf-8")


def test_setup_logging_twice_replaces_handlers(tmp_path: Path, restore_root_logging) -> None:
    setup_logging(log_dir=tmp_path)
    setup_logging(log_dir=tmp_path)
    assert len(logging.getLogger().handlers) == 2
