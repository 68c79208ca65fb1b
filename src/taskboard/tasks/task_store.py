# src/taskboard/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import os
import tempfile
from pathlib import Path

from ..core.errors import IOFailure
from . import task_codec
from .task_registry import RegistrySnapshot, TaskRegistry

logger = logging.getLogger(__name__)


class TaskFileStore:
    """
    Flat-file store for the registry.

    Writes are durable:
    - encode to a temp file in the target directory,
    - fsync,
    - os.replace onto the target (atomic on the same filesystem).

    A failed save leaves the previous file untouched. Loading never touches a
    registry; callers apply the returned snapshot themselves.
    """

    def __init__(self, path: str | Path = "tasks.json") -> None:
        self._path = Path(path)
        logger.info("TaskFileStore ready path=%s exists=%s", self._path, self._path.exists())

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    # ---- public API ----

    def save(self, registry: TaskRegistry) -> RegistrySnapshot:
        snapshot = registry.snapshot()
        self.save_snapshot(snapshot)
        return snapshot

    def save_snapshot(self, snapshot: RegistrySnapshot) -> None:
        data = task_codec.encode(snapshot)
        tmp_name: str | None = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self._path.name}.", suffix=".tmp", dir=str(self._path.parent)
            )
            with os.fdopen(fd, "wb") as f:
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self._path)
            tmp_name = None
        except OSError as e:
            logger.warning("Failed to save tasks to %s: %s", self._path, e)
            raise IOFailure(f"Error saving tasks: {e}") from e
        finally:
            if tmp_name is not None:
                with contextlib.suppress(OSError):
                    os.unlink(tmp_name)

        logger.info("Saved tasks: %d total to %s", snapshot.total(), self._path)

    def load(self) -> RegistrySnapshot:
        """Read and decode the file. IOFailure if missing/unreadable, CorruptData if malformed."""
        try:
            data = self._path.read_bytes()
        except OSError as e:
            logger.warning("Failed to load tasks from %s: %s", self._path, e)
            raise IOFailure(f"Error loading tasks: {e}") from e

        snapshot = task_codec.decode(data)
        logger.info("Loaded tasks: %d total from %s", snapshot.total(), self._path)
        return snapshot
