# src/bosh/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..tasks.task_list import TaskList


@dataclass
class AppState:
    # Settings (or a SimpleNamespace in tests).
    settings: Any

    tasks: TaskList

    # Messages to show once the session starts (e.g. load failure fallback).
    notices: list[str] = field(default_factory=list)
