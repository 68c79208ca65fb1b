# src/taskboard/tasks/task_registry.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from ..core.errors import IndexOutOfRange
from .task_models import PROGRESS_MAX, STATUS_ORDER, Task, TaskStatus

logger = logging.getLogger(__name__)

RegistryListener = Callable[["TaskRegistry"], None]


@dataclass(frozen=True, slots=True)
class RegistrySnapshot:
    """Detached copy of the three buckets (what gets persisted / compared in tests)."""

    pending: tuple[Task, ...] = field(default_factory=tuple)
    in_progress: tuple[Task, ...] = field(default_factory=tuple)
    completed: tuple[Task, ...] = field(default_factory=tuple)

    def bucket(self, status: TaskStatus) -> tuple[Task, ...]:
        return getattr(self, status.value)

    def total(self) -> int:
        return len(self.pending) + len(self.in_progress) + len(self.completed)


class TaskRegistry:
    """
    Owns every Task, split across three ordered buckets.

    Invariants:
    - a task lives in exactly one bucket (moves are remove + append),
    - tasks only flow pending -> in_progress -> completed,
    - listeners are notified once per successful mutation.

    Read accessors return tuples; callers mutate only through the methods below.
    """

    def __init__(self, snapshot: RegistrySnapshot | None = None) -> None:
        self._buckets: dict[TaskStatus, list[Task]] = {s: [] for s in STATUS_ORDER}
        self._listeners: list[RegistryListener] = []
        if snapshot is not None:
            self._fill(snapshot)

    # ---- read access ----

    @property
    def pending(self) -> tuple[Task, ...]:
        return tuple(self._buckets[TaskStatus.PENDING])

    @property
    def in_progress(self) -> tuple[Task, ...]:
        return tuple(self._buckets[TaskStatus.IN_PROGRESS])

    @property
    def completed(self) -> tuple[Task, ...]:
        return tuple(self._buckets[TaskStatus.COMPLETED])

    def bucket(self, status: TaskStatus) -> tuple[Task, ...]:
        return tuple(self._buckets[status])

    def snapshot(self) -> RegistrySnapshot:
        return RegistrySnapshot(
            pending=tuple(t.copy() for t in self._buckets[TaskStatus.PENDING]),
            in_progress=tuple(t.copy() for t in self._buckets[TaskStatus.IN_PROGRESS]),
            completed=tuple(t.copy() for t in self._buckets[TaskStatus.COMPLETED]),
        )

    def counts(self) -> dict[TaskStatus, int]:
        return {s: len(self._buckets[s]) for s in STATUS_ORDER}

    # ---- listeners ----

    def subscribe(self, listener: RegistryListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: RegistryListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:
                logger.exception("Registry listener %r failed.", listener)

    # ---- low-level helpers ----

    def _at(self, status: TaskStatus, index: int) -> Task:
        tasks = self._buckets[status]
        # no negative wrap-around: -1 is a stale selection, not "the last one"
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(tasks):
            raise IndexOutOfRange(status.value, index, len(tasks))
        return tasks[index]

    def _fill(self, snapshot: RegistrySnapshot) -> None:
        self._buckets = {s: [t.copy() for t in snapshot.bucket(s)] for s in STATUS_ORDER}

    # ---- mutations ----

    def add_pending(self, task: Task) -> None:
        self._buckets[TaskStatus.PENDING].append(task)
        logger.debug("Task added to pending: %s", task.name)
        self._notify()

    def edit_pending(self, index: int, new_name: str) -> Task:
        task = self._at(TaskStatus.PENDING, index)
        old = task.name
        task.rename(new_name)
        logger.debug("Pending task renamed index=%s %r -> %r", index, old, task.name)
        self._notify()
        return task

    def sort_pending(self) -> None:
        # list.sort is stable, so duplicate names keep their relative order
        self._buckets[TaskStatus.PENDING].sort(key=lambda t: t.name)
        logger.debug("Pending tasks sorted (n=%d).", len(self._buckets[TaskStatus.PENDING]))
        self._notify()

    def move_to_in_progress(self, index: int) -> Task:
        self._at(TaskStatus.PENDING, index)
        task = self._buckets[TaskStatus.PENDING].pop(index)
        self._buckets[TaskStatus.IN_PROGRESS].append(task)
        logger.debug("Task started: %s", task.name)
        self._notify()
        return task

    def set_in_progress_progress(self, index: int, value: int) -> Task:
        task = self._at(TaskStatus.IN_PROGRESS, index)
        task.set_progress(value)
        logger.debug("Progress set: %s -> %s%%", task.name, task.progress)
        self._notify()
        return task

    def complete_task(self, index: int) -> Task:
        self._at(TaskStatus.IN_PROGRESS, index)
        task = self._buckets[TaskStatus.IN_PROGRESS].pop(index)
        task.set_progress(PROGRESS_MAX)
        self._buckets[TaskStatus.COMPLETED].append(task)
        logger.debug("Task completed: %s", task.name)
        self._notify()
        return task

    def clear_completed(self) -> int:
        dropped = len(self._buckets[TaskStatus.COMPLETED])
        if not dropped:
            return 0
        self._buckets[TaskStatus.COMPLETED].clear()
        logger.debug("Completed tasks cleared (n=%d).", dropped)
        self._notify()
        return dropped

    def replace_all(self, snapshot: RegistrySnapshot) -> None:
        """Swap all three buckets at once (used by Load)."""
        self._fill(snapshot)
        logger.debug("Registry replaced (total=%d).", snapshot.total())
        self._notify()

    def iter_all(self) -> Iterable[tuple[TaskStatus, Task]]:
        for status in STATUS_ORDER:
            for task in self._buckets[status]:
                yield status, task

    def __str__(self) -> str:
        return (
            f"Pending: {len(self._buckets[TaskStatus.PENDING])} tasks, "
            f"In Progress: {len(self._buckets[TaskStatus.IN_PROGRESS])} tasks, "
            f"Completed: {len(self._buckets[TaskStatus.COMPLETED])} tasks"
        )
