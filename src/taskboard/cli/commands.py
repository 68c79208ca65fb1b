# src/taskboard/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.errors import TaskBoardError
from ..core.state import AppState
from ..tasks.task_api import CommandResult, parse_index
from ..tasks.task_models import STATUS_ORDER
from ..tasks.task_registry import TaskRegistry

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandArgs(list):
    """Whitespace-split arguments that also keep the raw text after the command word."""

    def __init__(self, raw: str) -> None:
        super().__init__(raw.split())
        self.raw = raw.strip()

    def rest(self, skip: int = 0) -> str:
        """Raw text after the first `skip` arguments, inner spacing intact."""
        text = self.raw
        for _ in range(skip):
            parts = text.split(maxsplit=1)
            text = parts[1] if len(parts) > 1 else ""
        return text


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /add, ...)."""

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

    def names(self) -> list[str]:
        return list(self._help)

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split(maxsplit=1)
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = CommandArgs(parts[1] if len(parts) > 1 else "")

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


# --------------------------------------------------------------------------------------
# Rendering
# --------------------------------------------------------------------------------------


def render_board(registry: TaskRegistry) -> str:
    """Three titled sections with 1-based positions (what the user types back)."""
    lines: list[str] = []
    for status in STATUS_ORDER:
        tasks = registry.bucket(status)
        lines.append(f"{status.heading} ({len(tasks)})")
        if not tasks:
            lines.append("  (empty)")
        for i, task in enumerate(tasks, start=1):
            lines.append(f"  {i:>2}. {task.display()}")
    return "\n".join(lines)


# --------------------------------------------------------------------------------------
# Handlers
# --------------------------------------------------------------------------------------


def _finish(state: AppState, result: CommandResult, *, mutating: bool = True) -> str:
    """Reply text for a facade result; autosave after successful edits if enabled."""
    if not result.ok:
        return f"[{result.error}] {result.message}"

    if mutating and getattr(state.settings, "autosave", False):
        saved = state.commands.save()
        if not saved.ok:
            logger.warning("Autosave failed: %s", saved.message)
            return f"{result.message}\n[autosave] {saved.message}"
        state.dirty = False
    return result.message


def _index_arg(args: list[str], usage: str) -> int | str:
    """0-based index from the first arg, or an error/usage reply."""
    if not args:
        return usage
    try:
        return parse_index(args[0])
    except TaskBoardError as e:
        return f"[{e.kind}] {e.message}"


def _rest(args: list[str], skip: int = 0) -> str:
    """Name text for /add and /edit; keeps the spacing the user typed."""
    if isinstance(args, CommandArgs):
        return args.rest(skip)
    return " ".join(args[skip:])


def cmd_list(state: AppState, args: list[str]) -> str:
    return render_board(state.registry)


def cmd_add(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /add <name>"
    return _finish(state, state.commands.add_task(_rest(args)))


def cmd_edit(state: AppState, args: list[str]) -> str:
    usage = "Usage: /edit <n> <new name>"
    idx = _index_arg(args, usage)
    if isinstance(idx, str):
        return idx
    if len(args) < 2:
        return usage
    return _finish(state, state.commands.edit_task(idx, _rest(args, 1)))


def cmd_start(state: AppState, args: list[str]) -> str:
    idx = _index_arg(args, "Usage: /start <n>  (position in Task List)")
    if isinstance(idx, str):
        return idx
    return _finish(state, state.commands.move_to_in_progress(idx))


def cmd_progress(state: AppState, args: list[str]) -> str:
    usage = "Usage: /progress <n> <0-100>  (position in In Progress)"
    idx = _index_arg(args, usage)
    if isinstance(idx, str):
        return idx
    if len(args) != 2:
        return usage
    return _finish(state, state.commands.set_progress(idx, args[1]))


def cmd_done(state: AppState, args: list[str]) -> str:
    idx = _index_arg(args, "Usage: /done <n>  (position in In Progress)")
    if isinstance(idx, str):
        return idx
    return _finish(state, state.commands.complete_task(idx))


def cmd_sort(state: AppState, args: list[str]) -> str:
    return _finish(state, state.commands.sort_tasks())


def cmd_clear(state: AppState, args: list[str]) -> str:
    result = state.commands.clear_completed()
    # nothing dropped: no change to persist
    return _finish(state, result, mutating=bool(result.value))


def cmd_save(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    if emit:
        emit(f"Saving to {state.store.path} ...")
    result = state.commands.save()
    if result.ok:
        state.dirty = False
    return _finish(state, result, mutating=False)


def cmd_load(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    if emit:
        emit(f"Loading from {state.store.path} ...")
    result = state.commands.load()
    if result.ok:
        state.dirty = False
    return _finish(state, result, mutating=False)


def cmd_status(state: AppState, args: list[str]) -> str:
    store_path = state.store.path
    return (
        "Status:\n"
        f"  {state.registry}\n"
        f"  File: {store_path} ({'exists' if state.store.exists() else 'not saved yet'})\n"
        f"  Unsaved changes: {'yes' if state.dirty else 'no'}\n"
        f"  Autosave: {'ON' if getattr(state.settings, 'autosave', False) else 'OFF'}"
    )


def build_command_registry(settings=None) -> CommandRegistry:
    """
    Register the console commands.

    /sort and /clear are optional (the two UI variants differ only there);
    they are left out when the matching settings flag is off.
    """
    reg = CommandRegistry()

    def cmd_help(state: AppState, args: list[str]) -> str:
        return reg.build_help() + "\n  /exit - Quit (unsaved changes are lost unless autosave is on)."

    reg.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
    reg.register("list", cmd_list, help_text="Show the board.", aliases=["ls"])
    reg.register("add", cmd_add, help_text="Add a task to the Task List: /add <name>.")
    reg.register("edit", cmd_edit, help_text="Rename a Task List entry: /edit <n> <name>.")
    reg.register("start", cmd_start, help_text="Move to In Progress: /start <n>.")
    reg.register(
        "progress", cmd_progress, help_text="Set progress: /progress <n> <0-100>.", aliases=["p"]
    )
    reg.register("done", cmd_done, help_text="Mark an In Progress task completed: /done <n>.")
    if getattr(settings, "sort_enabled", True):
        reg.register("sort", cmd_sort, help_text="Sort the Task List by name.")
    if getattr(settings, "clear_completed_enabled", True):
        reg.register("clear", cmd_clear, help_text="Clear all completed tasks.")
    reg.register("save", cmd_save, help_text="Save tasks to file.")
    reg.register("load", cmd_load, help_text="Load tasks from file (replaces the board).")
    reg.register("status", cmd_status, help_text="Show counts, file and autosave state.")

    return reg
