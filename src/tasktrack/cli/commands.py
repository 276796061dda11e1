# src/tasktrack/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import date
from typing import TypeVar

from ..core.state import AppState
from ..tasks.errors import NotFoundError, ValidationError
from ..tasks.task_models import Priority, Task, TaskPatch
from .parsing import (
    DATE_HINT,
    parse_date,
    parse_priority,
    parse_status,
    parse_task_id,
    parse_text,
)

Ask = Callable[[str], str]
CommandEmitter = Callable[[str], None]
CommandHandler = Callable[[AppState, Ask, CommandEmitter], str]

T = TypeVar("T")

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Menu action registry used by the console connector (1..9, list, add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        ask: Ask,
        emit: CommandEmitter | None = None,
    ) -> str:
        """
        Run the action selected by `line` (menu key or alias).
        Returns the reply text to show.
        """
        name = line.strip().lower()
        handler = self._handlers.get(name)
        if not handler:
            return f"Invalid choice: {line.strip()!r}. Type 'help' to see the menu."
        return handler(state, ask, emit or _discard)

    def build_help(self) -> str:
        lines = ["TO-DO LIST MENU"]
        for name, help_text in self._help.items():
            lines.append(f"  {name}. {help_text}")
        lines.append("  0. Exit")
        return "\n".join(lines)


registry = CommandRegistry()


def _discard(_text: str) -> None:
    return None


def _render(tasks: Iterable[Task]) -> str:
    return "\n\n".join(str(t) for t in tasks)


def _ask_until_valid(
    ask: Ask,
    emit: CommandEmitter,
    prompt: str,
    parser: Callable[[str], T | None],
) -> T | None:
    """Re-prompt until the answer parses; blank answers return None."""
    while True:
        raw = ask(prompt)
        try:
            return parser(raw)
        except ValueError as e:
            emit(str(e))


def _ask_task_id(ask: Ask, prompt: str) -> int | None:
    try:
        return parse_task_id(ask(prompt))
    except ValueError:
        return None


def _default_priority(state: AppState) -> Priority:
    raw = getattr(state.settings, "default_priority", Priority.MEDIUM.value)
    try:
        return parse_priority(str(raw)) or Priority.MEDIUM
    except ValueError:
        logger.warning("Unknown default priority %r in settings, using MEDIUM.", raw)
        return Priority.MEDIUM


def cmd_help(state: AppState, ask: Ask, emit: CommandEmitter) -> str:
    return registry.build_help()


def cmd_list(state: AppState, ask: Ask, emit: CommandEmitter) -> str:
    tasks = state.task_store.list_tasks()
    if not tasks:
        return "Task list is empty."
    return _render(tasks)


def cmd_add(state: AppState, ask: Ask, emit: CommandEmitter) -> str:
    title: str | None = None
    while title is None:
        title = parse_text(ask("Title (at least 1 character): "))
        if title is None:
            emit("Task title cannot be empty.")

    description = ask("Description: ").strip()

    due_date = _ask_until_valid(ask, emit, f"Due date ({DATE_HINT}): ", parse_date)
    if due_date is None:
        due_date = date.today()
        emit("No date given, using today.")

    priority = _ask_until_valid(ask, emit, "Priority (LOW, MEDIUM, HIGH): ", parse_priority)
    if priority is None:
        priority = _default_priority(state)
        emit(f"No priority given, using {priority.value}.")

    try:
        task = state.task_store.add_task(
            title=title,
            description=description,
            due_date=due_date,
            priority=priority,
        )
    except ValidationError as e:
        return str(e)
    return f"Task added (id={task.id})."


def cmd_edit(state: AppState, ask: Ask, emit: CommandEmitter) -> str:
    task_id = _ask_task_id(ask, "Task id to edit: ")
    if task_id is None:
        return "Invalid id."

    current = state.task_store.get_task(task_id)
    if current is None:
        return "Task not found."
    emit(str(current))

    patch = TaskPatch(
        title=parse_text(ask("New title (Enter keeps current): ")),
        description=parse_text(ask("New description (Enter keeps current): ")),
        due_date=_ask_until_valid(
            ask, emit, f"New date ({DATE_HINT}, Enter keeps current): ", parse_date
        ),
        priority=_ask_until_valid(
            ask, emit, "New priority (LOW, MEDIUM, HIGH, Enter keeps current): ", parse_priority
        ),
        status=_ask_until_valid(
            ask, emit, "New status (TODO, IN_PROGRESS, DONE, Enter keeps current): ", parse_status
        ),
    )

    try:
        state.task_store.edit_task(task_id, patch)
    except NotFoundError:
        return "Task not found."
    except ValidationError as e:
        return str(e)
    return "Task updated."


def cmd_delete(state: AppState, ask: Ask, emit: CommandEmitter) -> str:
    task_id = _ask_task_id(ask, "Task id to delete: ")
    if task_id is None:
        return "Invalid id."
    try:
        state.task_store.delete_task(task_id)
    except NotFoundError:
        return "Task not found."
    return "Task deleted."


def cmd_sort_date(state: AppState, ask: Ask, emit: CommandEmitter) -> str:
    state.task_store.sort_by_date()
    return "Tasks sorted by date."


def cmd_sort_priority(state: AppState, ask: Ask, emit: CommandEmitter) -> str:
    state.task_store.sort_by_priority()
    return "Tasks sorted by priority."


def cmd_search(state: AppState, ask: Ask, emit: CommandEmitter) -> str:
    keyword = ask("Keyword (title, description, priority or status): ")
    try:
        found = state.task_store.search(keyword)
    except ValidationError:
        return "Keyword cannot be empty."
    if not found:
        return "Nothing found."
    return _render(found)


def cmd_overdue(state: AppState, ask: Ask, emit: CommandEmitter) -> str:
    overdue = state.task_store.list_overdue_tasks()
    if not overdue:
        return "No overdue tasks."
    return "Overdue tasks:\n" + _render(overdue)


def cmd_done(state: AppState, ask: Ask, emit: CommandEmitter) -> str:
    done = state.task_store.list_done_tasks()
    if not done:
        return "No completed tasks."
    return "Completed tasks:\n" + _render(done)


registry.register("1", cmd_list, help_text="Show all tasks", aliases=["list", "ls"])
registry.register("2", cmd_add, help_text="Add task", aliases=["add"])
registry.register("3", cmd_edit, help_text="Edit task", aliases=["edit"])
registry.register("4", cmd_delete, help_text="Delete task", aliases=["delete", "rm"])
registry.register("5", cmd_sort_date, help_text="Sort by date", aliases=["sort-date"])
registry.register("6", cmd_sort_priority, help_text="Sort by priority", aliases=["sort-priority"])
registry.register("7", cmd_search, help_text="Search tasks", aliases=["search", "find"])
registry.register("8", cmd_overdue, help_text="List overdue tasks", aliases=["overdue"])
registry.register("9", cmd_done, help_text="List completed tasks", aliases=["done"])
registry.register("help", cmd_help, help_text="Show this menu", aliases=["h", "?"])
