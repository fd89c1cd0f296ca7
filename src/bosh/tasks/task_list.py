# src/bosh/tasks/task_list.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import date, datetime
from functools import cmp_to_key

from ..core.ports import TaskRepo
from ..core.replies import Reply, ReplyKind
from ..errors import IndexOutOfRangeError, StorageError
from .task_models import Task, due_sort_date

logger = logging.getLogger(__name__)

FIRST_TASK_INDEX = 1


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def _desc_key(task: Task) -> str:
    return task.description.lower()


def _cmp_desc(t1: Task, t2: Task) -> int:
    return _cmp(_desc_key(t1), _desc_key(t2))


def _cmp_due(d1: datetime | date, d2: datetime | date) -> int:
    # Mixed date vs date-time compares on the calendar date only.
    both_dt = isinstance(d1, datetime) and isinstance(d2, datetime)
    if not both_dt:
        d1 = d1.date() if isinstance(d1, datetime) else d1
        d2 = d2.date() if isinstance(d2, datetime) else d2
    return _cmp(d1, d2)


def _cmp_deadline(t1: Task, t2: Task) -> int:
    """
    Dated deadlines first (chronological), then everything else by description.
    Equal dates fall back to description.
    """
    d1 = due_sort_date(t1.due)
    d2 = due_sort_date(t2.due)
    if d1 is not None and d2 is None:
        return -1
    if d1 is None and d2 is not None:
        return 1
    if d1 is None or d2 is None:
        return _cmp_desc(t1, t2)
    return _cmp_due(d1, d2) or _cmp_desc(t1, t2)


class TaskList:
    """
    Ordered in-memory task collection.

    - User-facing numbering is 1-based (index in list + 1).
    - Every mutation (add/mark/unmark/delete/sort) saves through `store`.
    - `store=None` means no persistence (fallback after a failed load, tests).
    - A failed save keeps the in-memory change; the reply carries a warning.
    """

    def __init__(self, initial: Iterable[Task] = (), store: TaskRepo | None = None) -> None:
        self._tasks: list[Task] = list(initial)
        self._store = store

    # ---- queries ----

    def __len__(self) -> int:
        return len(self._tasks)

    def size(self) -> int:
        return len(self._tasks)

    @property
    def tasks(self) -> list[Task]:
        """Snapshot copy; the collection is the only writer."""
        return list(self._tasks)

    @property
    def persistent(self) -> bool:
        return self._store is not None

    def get(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks[index - FIRST_TASK_INDEX]

    def list(self) -> Reply:
        return Reply(ReplyKind.LISTED, tasks=self.tasks, count=len(self._tasks))

    def find(self, keyword: str) -> Reply:
        """Matching tasks in original order; display renumbers them 1..k."""
        matches = [t for t in self._tasks if t.matches(keyword)]
        return Reply(ReplyKind.FOUND, tasks=matches, count=len(self._tasks))

    # ---- mutations ----

    def add(self, task: Task) -> Reply:
        self._tasks.append(task)
        logger.debug("Task added kind=%s total=%d", task.kind.value, len(self._tasks))
        return self._saved(Reply(ReplyKind.ADDED, task=task, count=len(self._tasks)))

    def mark(self, index: int) -> Reply:
        task = self.get(index)
        task.mark_done()
        return self._saved(Reply(ReplyKind.MARKED, task=task, count=len(self._tasks)))

    def unmark(self, index: int) -> Reply:
        task = self.get(index)
        task.mark_undone()
        return self._saved(Reply(ReplyKind.UNMARKED, task=task, count=len(self._tasks)))

    def delete(self, index: int) -> Reply:
        self._check_index(index)
        removed = self._tasks.pop(index - FIRST_TASK_INDEX)
        logger.debug("Task deleted index=%d total=%d", index, len(self._tasks))
        return self._saved(Reply(ReplyKind.DELETED, task=removed, count=len(self._tasks)))

    # ---- sorting ----

    def sort_by_description(self) -> Reply:
        return self._sort("description", _desc_key)

    def sort_by_type(self) -> Reply:
        return self._sort("type", lambda t: (t.kind.rank, _desc_key(t)))

    def sort_by_deadline(self) -> Reply:
        return self._sort("deadline", cmp_to_key(_cmp_deadline))

    def sort_by_status(self) -> Reply:
        return self._sort("status", lambda t: (t.done, _desc_key(t)))

    def _sort(self, criterion: str, key: Callable[[Task], object]) -> Reply:
        self._tasks.sort(key=key)  # type: ignore[arg-type]
        logger.debug("Tasks sorted by %s", criterion)
        return self._saved(
            Reply(ReplyKind.SORTED, tasks=self.tasks, count=len(self._tasks), criterion=criterion)
        )

    # ---- helpers ----

    def _check_index(self, index: int) -> None:
        if index < FIRST_TASK_INDEX or index > len(self._tasks):
            raise IndexOutOfRangeError(index, len(self._tasks))

    def _saved(self, reply: Reply) -> Reply:
        if self._store is None:
            return reply
        try:
            self._store.save(self._tasks)
        except StorageError as e:
            logger.exception("Failed to save tasks.")
            reply.warning = f"{e} (the copy on disk may be out of date)"
        return reply
