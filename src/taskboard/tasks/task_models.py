# src/taskboard/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from ..core.errors import InvalidArgument, OutOfRange

PROGRESS_MIN = 0
PROGRESS_MAX = 100


class TaskStatus(StrEnum):
    """
    Which bucket a task lives in.

    The only allowed transitions are PENDING -> IN_PROGRESS -> COMPLETED.
    """

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"

    @property
    def heading(self) -> str:
        return _TITLES[self]


_TITLES = {
    TaskStatus.PENDING: "Task List",
    TaskStatus.IN_PROGRESS: "In Progress",
    TaskStatus.COMPLETED: "Completed Tasks",
}

# Fixed bucket order for rendering and persistence.
STATUS_ORDER: tuple[TaskStatus, ...] = (
    TaskStatus.PENDING,
    TaskStatus.IN_PROGRESS,
    TaskStatus.COMPLETED,
)


def _clean_name(name: str) -> str:
    if not isinstance(name, str) or not name.strip():
        raise InvalidArgument("Task name must not be empty.")
    return name.strip()


def check_progress(value: int) -> int:
    # bool is an int subclass; True/False are not progress values
    if isinstance(value, bool) or not isinstance(value, int):
        raise OutOfRange(value, f"Progress must be an integer, got {value!r}.")
    if not PROGRESS_MIN <= value <= PROGRESS_MAX:
        raise OutOfRange(value)
    return value


@dataclass(slots=True)
class Task:
    name: str
    progress: int = field(default=PROGRESS_MIN)

    @classmethod
    def create(cls, name: str) -> Task:
        """New task with progress 0. Raises InvalidArgument on a blank name."""
        return cls(name=_clean_name(name))

    def rename(self, new_name: str) -> None:
        self.name = _clean_name(new_name)

    def set_progress(self, value: int) -> None:
        """Raises OutOfRange (progress unchanged) unless 0 <= value <= 100."""
        self.progress = check_progress(value)

    def display(self) -> str:
        return f"{self.name} ({self.progress}%)"

    def copy(self) -> Task:
        return Task(name=self.name, progress=self.progress)

    def __str__(self) -> str:
        return self.display()
