# src/bosh/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- wires the file TaskStore into the TaskList,
- degrades to an in-memory, non-saving list when the store cannot be read.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import TaskRepo
from ..core.state import AppState
from ..errors import StorageError
from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None, store: TaskRepo | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings (and the store) injectable makes the app easier to test.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()
    if store is None:
        store = TaskStore(settings.tasks_path)

    try:
        loaded = store.load()
    except StorageError as e:
        logger.exception("Failed to load tasks; continuing without saving.")
        return AppState(
            settings=settings,
            tasks=TaskList(),
            notices=[f"Starting with an empty list (load failed): {e}"],
        )

    return AppState(settings=settings, tasks=TaskList(loaded, store=store))
