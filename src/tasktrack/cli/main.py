# src/tasktrack/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console menu loop.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
from pathlib import Path

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="tasktrack", description="Local single-user task tracker.")
    p.add_argument(
        "-f",
        "--file",
        type=Path,
        default=None,
        help="Path to the tasks JSON file (default: TASKTRACK_TASKS_PATH or tasks.json)",
    )
    p.add_argument(
        "--log-level",
        default=None,
        help="Console log level (default: TASKTRACK_LOG_LEVEL or INFO)",
    )
    return p


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    settings = get_settings()
    overrides: dict[str, object] = {}
    if args.file is not None:
        overrides["tasks_path"] = args.file.expanduser()
    if args.log_level:
        overrides["log_level"] = args.log_level.upper()
    if overrides:
        settings = dataclasses.replace(settings, **overrides)

    setup_logging(
        log_dir=settings.data_dir,
        console_level=settings.log_level,
        log_to_file=settings.log_to_file,
    )

    logger.info("Starting %s (tasks file: %s)...", settings.app_name, settings.tasks_path)

    # IMPORTANT: reuse same settings object
    state = create_initial_state(settings=settings)

    try:
        run_console_loop(state)
    finally:
        logger.info("Bye.")


if __name__ == "__main__":
    main()
