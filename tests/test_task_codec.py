# tests/test_task_codec.py

from __future__ import annotations

import json

import pytest

from taskboard.core.errors import CorruptData, ErrorKind
from taskboard.tasks import task_codec
from taskboard.tasks.task_api import TaskCommands
from taskboard.tasks.task_models import Task
from taskboard.tasks.task_registry import RegistrySnapshot, TaskRegistry

from .fakes import InMemoryTaskStore


def _sample() -> RegistrySnapshot:
    return RegistrySnapshot(
        pending=(Task("B", 0), Task("A", 0), Task("A", 0)),
        in_progress=(Task("Half done", 50),),
        completed=(Task("Shipped ✓", 100),),
    )


def _doc(**overrides) -> bytes:
    doc = json.loads(task_codec.encode(_sample()))
    doc.update(overrides)
    return json.dumps(doc).encode("utf-8")


def test_round_trip_preserves_membership_and_order() -> None:
    snap = _sample()
    assert task_codec.decode(task_codec.encode(snap)) == snap


def test_round_trip_empty() -> None:
    assert task_codec.decode(task_codec.encode(RegistrySnapshot())) == RegistrySnapshot()


def test_encoded_layout_is_tagged_and_ordered() -> None:
    doc = json.loads(task_codec.encode(_sample()).decode("utf-8"))
    assert doc["format"] == "taskboard"
    assert doc["version"] == task_codec.FORMAT_VERSION
    assert [b["status"] for b in doc["buckets"]] == ["pending", "in_progress", "completed"]
    assert doc["buckets"][1]["tasks"] == [{"name": "Half done", "progress": 50}]


@pytest.mark.parametrize(
    "data",
    [
        b"",
        b"\xff\xfe\x00garbage",
        b'{"format": "taskboard", "version": 1, "buckets": [',
        b"[]",
        b'{"version": 1, "buckets": []}',
    ],
)
def test_truncated_or_foreign_bytes_are_corrupt(data: bytes) -> None:
    with pytest.raises(CorruptData) as exc:
        task_codec.decode(data)
    assert exc.value.kind is ErrorKind.CORRUPT_DATA


def test_unknown_version_is_corrupt() -> None:
    with pytest.raises(CorruptData, match="version"):
        task_codec.decode(_doc(version=2))


def test_bucket_count_mismatch_is_corrupt() -> None:
    doc = json.loads(task_codec.encode(_sample()))
    doc["buckets"] = doc["buckets"][:2]
    with pytest.raises(CorruptData, match="Expected 3 buckets, got 2"):
        task_codec.decode(json.dumps(doc).encode())


def test_bucket_order_is_enforced() -> None:
    doc = json.loads(task_codec.encode(_sample()))
    doc["buckets"][0], doc["buckets"][1] = doc["buckets"][1], doc["buckets"][0]
    with pytest.raises(CorruptData, match="out of order"):
        task_codec.decode(json.dumps(doc).encode())


@pytest.mark.parametrize(
    "record",
    [
        {"name": "", "progress": 0},
        {"name": "x", "progress": 101},
        {"name": "x", "progress": "50"},
        {"name": "x"},
        {"progress": 10},
        "not a record",
    ],
)
def test_malformed_task_records_are_corrupt(record) -> None:
    doc = json.loads(task_codec.encode(_sample()))
    doc["buckets"][1]["tasks"] = [record]
    with pytest.raises(CorruptData):
        task_codec.decode(json.dumps(doc).encode())


@pytest.mark.parametrize(
    "data",
    [
        b"[" * 200_000,
        b"[" * 200_000 + b"]" * 200_000,
        b'{"a":' * 200_000,
    ],
)
def test_deeply_nested_input_is_corrupt(data: bytes) -> None:
    with pytest.raises(CorruptData):
        task_codec.decode(data)


def test_deeply_nested_file_is_reported_by_load() -> None:
    registry = TaskRegistry()
    registry.add_pending(Task("keep me", 0))
    commands = TaskCommands(registry, InMemoryTaskStore(data=b"[" * 200_000))

    res = commands.load()
    assert not res.ok
    assert res.error is ErrorKind.CORRUPT_DATA
    assert [t.name for t in registry.pending] == ["keep me"]


@pytest.mark.parametrize("version", [True, 1.0, "1"])
def test_version_must_be_the_integer_one(version) -> None:
    with pytest.raises(CorruptData, match="version"):
        task_codec.decode(_doc(version=version))
