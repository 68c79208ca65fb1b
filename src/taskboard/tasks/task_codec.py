# src/taskboard/tasks/task_codec.py

"""
Persisted record format for the three buckets.

Layout (UTF-8 JSON):

    {
      "format": "taskboard",
      "version": 1,
      "buckets": [
        {"status": "pending",     "tasks": [{"name": "...", "progress": 0}, ...]},
        {"status": "in_progress", "tasks": [...]},
        {"status": "completed",   "tasks": [...]}
      ]
    }

Buckets are always written in the fixed order pending, in_progress, completed
and must be read back in that order. Pure functions only; file I/O lives in
task_store.py.
"""

from __future__ import annotations

import json
from typing import Any

from ..core.errors import CorruptData, TaskBoardError
from .task_models import STATUS_ORDER, Task
from .task_registry import RegistrySnapshot

FORMAT_TAG = "taskboard"
FORMAT_VERSION = 1


def _task_to_record(task: Task) -> dict[str, Any]:
    return {"name": task.name, "progress": task.progress}


def _record_to_task(raw: Any, where: str) -> Task:
    if not isinstance(raw, dict):
        raise CorruptData(f"{where}: task record is not an object")
    name = raw.get("name")
    progress = raw.get("progress")
    try:
        task = Task.create(name)
        task.set_progress(progress)
    except TaskBoardError as e:
        raise CorruptData(f"{where}: {e.message}") from e
    return task


def encode(snapshot: RegistrySnapshot) -> bytes:
    doc = {
        "format": FORMAT_TAG,
        "version": FORMAT_VERSION,
        "buckets": [
            {
                "status": status.value,
                "tasks": [_task_to_record(t) for t in snapshot.bucket(status)],
            }
            for status in STATUS_ORDER
        ],
    }
    return json.dumps(doc, ensure_ascii=False, indent=2).encode("utf-8")


def decode(data: bytes) -> RegistrySnapshot:
    """Parse persisted bytes. Raises CorruptData on anything unexpected."""
    try:
        doc = json.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, ValueError, RecursionError) as e:
        raise CorruptData(f"Unreadable task data: {e}") from e

    if not isinstance(doc, dict) or doc.get("format") != FORMAT_TAG:
        raise CorruptData("Not a taskboard file (missing format tag).")

    version = doc.get("version")
    if type(version) is not int or version != FORMAT_VERSION:
        raise CorruptData(f"Unsupported format version: {version!r}")

    buckets = doc.get("buckets")
    if not isinstance(buckets, list) or len(buckets) != len(STATUS_ORDER):
        n = len(buckets) if isinstance(buckets, list) else None
        raise CorruptData(f"Expected {len(STATUS_ORDER)} buckets, got {n}.")

    out: dict[str, tuple[Task, ...]] = {}
    for status, raw_bucket in zip(STATUS_ORDER, buckets):
        if not isinstance(raw_bucket, dict) or raw_bucket.get("status") != status.value:
            raise CorruptData(f"Bucket out of order: expected {status.value!r}.")
        raw_tasks = raw_bucket.get("tasks")
        if not isinstance(raw_tasks, list):
            raise CorruptData(f"{status.value}: tasks is not a list")
        out[status.value] = tuple(
            _record_to_task(raw, f"{status.value}[{i}]") for i, raw in enumerate(raw_tasks)
        )

    return RegistrySnapshot(**out)
