# src/taskboard/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the command facade.

The facade depends on Protocols instead of concrete implementations.
This keeps storage swappable and makes testing easier (see tests/fakes.py).
"""

from pathlib import Path
from typing import Any, Protocol


class TaskStorePort(Protocol):
    """Durable storage for the three buckets."""

    @property
    def path(self) -> Path: ...

    def exists(self) -> bool: ...

    # Persists registry.snapshot(); raises IOFailure.
    def save(self, registry: Any) -> Any: ...

    # Returns a RegistrySnapshot; raises IOFailure / CorruptData.
    def load(self) -> Any: ...
