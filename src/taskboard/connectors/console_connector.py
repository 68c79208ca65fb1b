# src/taskboard/connectors/console_connector.py

from __future__ import annotations

import logging
from datetime import datetime

from ..cli.commands import CommandRegistry, build_command_registry, render_board
from ..core.state import AppState

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def run_console_loop(state: AppState, command_registry: CommandRegistry | None = None) -> None:
    """
    Line-oriented REPL over the command facade.

    The board is re-rendered whenever the registry reports a change, so the
    console acts purely as an observer of the core.
    """
    if command_registry is None:
        command_registry = build_command_registry(state.settings)

    app_name = str(getattr(getattr(state, "settings", None), "app_name", "taskboard"))
    changed = {"flag": True}

    def on_change(_registry) -> None:
        changed["flag"] = True

    def emit(text: str) -> None:
        # Immediate user-visible feedback for slow operations (file I/O)
        print(f"[{_ts_local()}] {text}", flush=True)

    state.registry.subscribe(on_change)
    logger.info("Console connector started (file=%s).", state.store.path)
    _print_ts(f"[{app_name}] Use /help for commands. Use /exit to quit.\n")

    try:
        while True:
            if changed["flag"]:
                print(render_board(state.registry))
                print()
                changed["flag"] = False

            try:
                user_input = input("> ").strip()
            except EOFError:
                logger.info("Console EOF received, exiting.")
                break
            except KeyboardInterrupt:
                logger.info("Console KeyboardInterrupt, exiting.")
                print()
                break

            if not user_input:
                continue

            if user_input.lower() in ("/exit", "/quit"):
                logger.info("Console exit command received.")
                break

            if not user_input.startswith("/"):
                # Bare text is shorthand for adding a task.
                user_input = "/add " + user_input

            try:
                reply = command_registry.handle(state, user_input, emit=emit)
            except Exception:
                logger.exception("Command handler crashed.")
                reply = "Internal error while handling a command."

            if reply is not None:
                _print_ts(reply)
    finally:
        state.registry.unsubscribe(on_change)

    if state.dirty:
        _print_ts("Unsaved changes were not written. Use /save next time (or TASKBOARD_AUTOSAVE=1).")
    logger.info("Console connector finished.")
