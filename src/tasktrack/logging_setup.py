# src/tasktrack/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

APP_LOGGERS: tuple[str, ...] = ("tasktrack",)
DEFAULT_LOG_FILE = "tasktrack.log"

# The menu prints to stdout; console logs on stderr stay short.
_CONSOLE_FORMAT = "%(levelname)s %(name)s: %(message)s"
_FILE_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
_FILE_DATEFMT = "%Y-%m-%d %H:%M:%S"


def resolve_level(level: int | str, default: int = logging.INFO) -> int:
    """Accept 10, "DEBUG", "debug" or " warning "; unknown names fall back to default."""
    if isinstance(level, int):
        return level
    value = logging.getLevelNamesMapping().get(level.strip().upper())
    return default if value is None else value


class _ConsoleNoiseFilter(logging.Filter):
    """
    Console filter for the interactive menu.

    Records from the app's own loggers pass at the handler's level; anything
    else (third-party libraries, `py.warnings`) only at `min_foreign_level`.
    """

    def __init__(
        self,
        app_loggers: tuple[str, ...] = APP_LOGGERS,
        min_foreign_level: int = logging.ERROR,
    ) -> None:
        super().__init__()
        self._app_loggers = app_loggers
        self._min_foreign_level = min_foreign_level

    def _is_app(self, name: str) -> bool:
        return any(name == p or name.startswith(p + ".") for p in self._app_loggers)

    def filter(self, record: logging.LogRecord) -> bool:
        if self._is_app(record.name):
            return True
        return record.levelno >= self._min_foreign_level


def _reset_root(root: logging.Logger) -> None:
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()


def setup_logging(
    *,
    log_dir: str | Path = ".local/tasktrack",
    console_level: int | str = logging.WARNING,
    file_level: int | str = logging.DEBUG,
    log_to_file: bool = True,
    log_file_name: str = DEFAULT_LOG_FILE,
) -> Path | None:
    """
    Configure root logging for the task tracker.

    - stderr handler: short format, filtered so only tasktrack logs show
      below ERROR
    - file handler (optional): `<log_dir>/<log_file_name>`, timestamps,
      everything from `file_level` up

    Safe to call again: previous root handlers are closed and replaced.
    Returns the log file path, or None when file logging is off.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    _reset_root(root)

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(resolve_level(console_level, logging.WARNING))
    ch.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    log_file: Path | None = None
    if log_to_file:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / log_file_name

        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(resolve_level(file_level, logging.DEBUG))
        fh.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt=_FILE_DATEFMT))
        root.addHandler(fh)

    # warnings.warn(...) shows up as 'py.warnings'
    logging.captureWarnings(True)
    return log_file
