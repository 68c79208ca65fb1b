# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskboard.core.state import AppState
from taskboard.tasks.task_api import TaskCommands
from taskboard.tasks.task_registry import TaskRegistry
from taskboard.tasks.task_store import TaskFileStore

from .fakes import InMemoryTaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI layer.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="taskboard-test",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        tasks_path=tmp_path / "data" / "tasks.json",
        autoload=False,
        autosave=False,
        sort_enabled=True,
        clear_completed_enabled=True,
    )


@pytest.fixture()
def registry() -> TaskRegistry:
    return TaskRegistry()


@pytest.fixture()
def store(tmp_path: Path) -> TaskFileStore:
    return TaskFileStore(tmp_path / "tasks.json")


@pytest.fixture()
def memory_store() -> InMemoryTaskStore:
    return InMemoryTaskStore()


@pytest.fixture()
def commands(registry: TaskRegistry, memory_store: InMemoryTaskStore) -> TaskCommands:
    return TaskCommands(registry, memory_store)


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """
    AppState wired with a real file store under tmp_path.

    NOTE: We keep the real TaskFileStore here because the save/load path
    is part of what the command tests exercise.
    """
    return AppState(
        settings=settings,
        registry=TaskRegistry(),
        store=TaskFileStore(settings.tasks_path),
    )
