# src/bosh/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The task list depends on a Protocol instead of the concrete file store.
This keeps storage swappable and lets tests run without touching disk.
"""

from collections.abc import Callable, Iterable, Sequence
from typing import Protocol

from ..tasks.task_models import Task

Emitter = Callable[[str], None]
# Presentation sink: receives formatted, user-facing text.


class TaskRepo(Protocol):
    """Durable load/save of the exact task sequence."""

    def load(self) -> list[Task]: ...

    def save(self, tasks: Sequence[Task]) -> None: ...


LineSource = Iterable[str]
# Successive raw input lines (terminal, test harness, ...).
