# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from taskboard.config import Settings

_VARS = (
    "APP_NAME",
    "LOG_LEVEL",
    "DATA_DIR",
    "TASKS_PATH",
    "AUTOLOAD",
    "AUTOSAVE",
    "SORT_ENABLED",
    "CLEAR_COMPLETED_ENABLED",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for suffix in _VARS:
        monkeypatch.delenv(f"TASKBOARD_{suffix}", raising=False)


def test_defaults() -> None:
    s = Settings.from_env()
    assert s.app_name == "taskboard"
    assert s.log_level == "INFO"
    assert s.data_dir == Path(".local/taskboard")
    assert s.tasks_path == Path(".local/taskboard/tasks.json")
    assert (s.autoload, s.autosave) == (False, False)
    assert (s.sort_enabled, s.clear_completed_enabled) == (True, True)


def test_tasks_path_follows_data_dir_unless_set(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv("TASKBOARD_DATA_DIR", str(tmp_path))
    assert Settings.from_env().tasks_path == tmp_path / "tasks.json"

    monkeypatch.setenv("TASKBOARD_TASKS_PATH", str(tmp_path / "elsewhere.json"))
    assert Settings.from_env().tasks_path == tmp_path / "elsewhere.json"


@pytest.mark.parametrize("raw", ["off", "0", "false", "No", " n "])
def test_falsy_flags_turn_options_off(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("TASKBOARD_SORT_ENABLED", raw)
    assert Settings.from_env().sort_enabled is False


@pytest.mark.parametrize("raw", ["maybe", "2", "enabled?", ""])
def test_unrecognized_flags_keep_the_default(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("TASKBOARD_SORT_ENABLED", raw)
    monkeypatch.setenv("TASKBOARD_AUTOSAVE", raw)
    s = Settings.from_env()
    assert s.sort_enabled is True
    assert s.autosave is False


def test_truthy_flags_turn_options_on(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TASKBOARD_AUTOSAVE", "yes")
    monkeypatch.setenv("TASKBOARD_AUTOLOAD", "ON")
    s = Settings.from_env()
    assert (s.autoload, s.autosave) == (True, True)
