# src/taskboard/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the registry + file store into AppState,
- optionally hydrates the registry from the saved file.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_registry import TaskRegistry
from ..tasks.task_store import TaskFileStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    state = AppState(
        settings=settings,
        registry=TaskRegistry(),
        store=TaskFileStore(settings.tasks_path),
    )

    if getattr(settings, "autoload", False) and state.store.exists():
        result = state.commands.load()
        if not result.ok:
            logger.warning("Autoload skipped: %s", result.message)

    def _mark_dirty(_registry: TaskRegistry) -> None:
        state.dirty = True

    # subscribed after autoload so a fresh load does not count as an edit
    state.registry.subscribe(_mark_dirty)
    return state
