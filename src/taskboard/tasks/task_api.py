# src/taskboard/tasks/task_api.py

"""
Command facade.

The thin layer a UI (console REPL, GUI, test harness) calls into:
- normalizes input (trim, parse numbers),
- delegates to TaskRegistry / the store,
- converts every core error into a CommandResult so nothing escapes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from ..core.errors import ErrorKind, OutOfRange, ParseError, TaskBoardError
from ..core.ports import TaskStorePort
from .task_models import Task, check_progress
from .task_registry import TaskRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CommandResult:
    ok: bool
    message: str
    error: ErrorKind | None = None
    value: Any = None

    @staticmethod
    def success(message: str, value: Any = None) -> CommandResult:
        return CommandResult(ok=True, message=message, value=value)

    @staticmethod
    def failure(err: TaskBoardError) -> CommandResult:
        return CommandResult(ok=False, message=err.message, error=err.kind)


def _parse_int(text: str) -> int:
    raw = text.strip()
    # int() also accepts "1_000" and unicode digits; only plain decimal is valid input
    body = raw[1:] if raw[:1] in ("+", "-") else raw
    if not body or not body.isascii() or not body.isdigit():
        raise ParseError(text)
    try:
        return int(raw)
    except ValueError as e:
        # digit strings past the interpreter's conversion limit: a number, just far out of range
        raise OutOfRange(text, "Number is too large.") from e


def parse_progress(value: int | str) -> int:
    """
    Normalize progress input.

    Text is trimmed and parsed as a base-10 integer:
    - non-numeric -> ParseError (never coerced to 0)
    - outside [0, 100] -> OutOfRange
    """
    if isinstance(value, str):
        value = _parse_int(value)
    return check_progress(value)


def parse_index(text: str) -> int:
    """Turn a user-facing 1-based position into a 0-based index."""
    return _parse_int(text) - 1


class TaskCommands:
    """Operations exposed to collaborators. Every method returns a CommandResult."""

    def __init__(self, registry: TaskRegistry, store: TaskStorePort) -> None:
        self.registry = registry
        self.store = store

    def _run(self, op: str, fn, *args: Any) -> CommandResult:
        try:
            return fn(*args)
        except TaskBoardError as e:
            logger.info("Command %s failed (%s): %s", op, e.kind.value, e.message)
            return CommandResult.failure(e)

    # ---- pending ----

    def add_task(self, name: str) -> CommandResult:
        def do() -> CommandResult:
            task = Task.create(name)
            self.registry.add_pending(task)
            return CommandResult.success(f'Added "{task.name}".', task)

        return self._run("add_task", do)

    def edit_task(self, index: int, name: str) -> CommandResult:
        def do() -> CommandResult:
            task = self.registry.edit_pending(index, name)
            return CommandResult.success(f'Renamed to "{task.name}".', task)

        return self._run("edit_task", do)

    def sort_tasks(self) -> CommandResult:
        def do() -> CommandResult:
            self.registry.sort_pending()
            return CommandResult.success("Task list sorted.")

        return self._run("sort_tasks", do)

    def move_to_in_progress(self, index: int) -> CommandResult:
        def do() -> CommandResult:
            task = self.registry.move_to_in_progress(index)
            return CommandResult.success(f'"{task.name}" moved to In Progress.', task)

        return self._run("move_to_in_progress", do)

    # ---- in progress ----

    def set_progress(self, index: int, value: int | str) -> CommandResult:
        def do() -> CommandResult:
            progress = parse_progress(value)
            task = self.registry.set_in_progress_progress(index, progress)
            return CommandResult.success(f"Progress updated: {task.display()}", task)

        return self._run("set_progress", do)

    def complete_task(self, index: int) -> CommandResult:
        def do() -> CommandResult:
            task = self.registry.complete_task(index)
            return CommandResult.success(f'"{task.name}" marked as completed.', task)

        return self._run("complete_task", do)

    # ---- completed ----

    def clear_completed(self) -> CommandResult:
        def do() -> CommandResult:
            n = self.registry.clear_completed()
            return CommandResult.success(f"Cleared {n} completed task(s).", n)

        return self._run("clear_completed", do)

    # ---- persistence ----

    def save(self) -> CommandResult:
        def do() -> CommandResult:
            snapshot = self.store.save(self.registry)
            return CommandResult.success("Tasks saved successfully!", snapshot)

        return self._run("save", do)

    def load(self) -> CommandResult:
        def do() -> CommandResult:
            # decode fully before touching the registry: a failed load changes nothing
            snapshot = self.store.load()
            self.registry.replace_all(snapshot)
            return CommandResult.success("Tasks loaded successfully!", snapshot)

        return self._run("load", do)
