# src/taskboard/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from ..core.ports import TaskStorePort
from ..tasks.task_api import TaskCommands
from ..tasks.task_registry import TaskRegistry


@dataclass
class AppState:
    # Settings kept on the state so collaborators can read feature flags.
    settings: object

    registry: TaskRegistry
    store: TaskStorePort
    commands: TaskCommands = field(init=False)

    # Set by listeners when the registry changed since the last save/load.
    dirty: bool = False

    def __post_init__(self) -> None:
        self.commands = TaskCommands(self.registry, self.store)
