# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from bosh.core.state import AppState
from bosh.tasks.task_list import TaskList
from bosh.tasks.task_store import TaskStore

from .fakes import FakeTaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="Bosh",
        log_level="WARNING",
        log_to_file=False,
        data_dir=data_dir,
        tasks_path=data_dir / "bosh.txt",
        log_dir=data_dir,
    )


@pytest.fixture()
def file_store(settings: SimpleNamespace) -> TaskStore:
    return TaskStore(settings.tasks_path)


@pytest.fixture()
def fake_store() -> FakeTaskStore:
    return FakeTaskStore()


@pytest.fixture()
def tasks(fake_store: FakeTaskStore) -> TaskList:
    """Empty TaskList saving into an in-memory fake (no disk access)."""
    return TaskList(store=fake_store)


@pytest.fixture()
def state(settings: SimpleNamespace, tasks: TaskList) -> AppState:
    return AppState(settings=settings, tasks=tasks)
