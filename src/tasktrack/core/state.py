# src/tasktrack/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from .ports import TaskRepo


@dataclass
class AppState:
    # Settings kept on the state so command handlers can read shell defaults.
    settings: object

    task_store: TaskRepo
