# tests/test_task_list.py

from __future__ import annotations

import pytest

from bosh.core.replies import ReplyKind
from bosh.errors import IndexOutOfRangeError
from bosh.tasks.task_list import TaskList
from bosh.tasks.task_models import Task

from .fakes import FailingTaskStore, FakeTaskStore


def _descriptions(tasks: TaskList) -> list[str]:
    return [t.description for t in tasks.tasks]


def test_add_appends_and_saves(tasks: TaskList, fake_store: FakeTaskStore) -> None:
    reply = tasks.add(Task.todo("read book"))

    assert reply.kind is ReplyKind.ADDED
    assert reply.count == 1
    assert tasks.size() == 1
    assert fake_store.saves == 1
    assert fake_store.records == ["T | 0 | read book"]


def test_mark_then_unmark(tasks: TaskList, fake_store: FakeTaskStore) -> None:
    tasks.add(Task.todo("read book"))

    assert tasks.mark(1).task.done is True
    assert tasks.mark(1).task.done is True
    assert tasks.unmark(1).task.done is False
    assert fake_store.saves == 4


@pytest.mark.parametrize("index", [0, -1, 3, 99])
def test_out_of_range_does_not_mutate_or_save(
    tasks: TaskList, fake_store: FakeTaskStore, index: int
) -> None:
    tasks.add(Task.todo("a"))
    tasks.add(Task.todo("b"))
    saves_before = fake_store.saves

    for op in (tasks.mark, tasks.unmark, tasks.delete):
        with pytest.raises(IndexOutOfRangeError) as exc:
            op(index)
        assert exc.value.index == index

    assert _descriptions(tasks) == ["a", "b"]
    assert all(not t.done for t in tasks.tasks)
    assert fake_store.saves == saves_before


def test_delete_compacts_numbering(tasks: TaskList) -> None:
    for d in ("a", "b", "c"):
        tasks.add(Task.todo(d))

    reply = tasks.delete(2)

    assert reply.task.description == "b"
    assert reply.count == 2
    assert _descriptions(tasks) == ["a", "c"]
    assert tasks.get(2).description == "c"


def test_find_keeps_order_and_does_not_save(tasks: TaskList, fake_store: FakeTaskStore) -> None:
    for d in ("ok go", "nope", "OK fine"):
        tasks.add(Task.todo(d))
    saves_before = fake_store.saves

    reply = tasks.find("ok")

    assert reply.kind is ReplyKind.FOUND
    assert [t.description for t in reply.tasks] == ["ok go", "OK fine"]
    assert fake_store.saves == saves_before

    tasks.list()
    assert fake_store.saves == saves_before


def test_sort_by_deadline_dated_first() -> None:
    store = FakeTaskStore()
    tasks = TaskList(
        [
            Task.deadline("b", "2020-01-01"),
            Task.deadline("a", "2019-01-01"),
            Task.todo("c"),
        ],
        store=store,
    )

    reply = tasks.sort_by_deadline()

    assert reply.kind is ReplyKind.SORTED
    assert reply.criterion == "deadline"
    assert [t.description for t in reply.tasks] == ["a", "b", "c"]
    assert store.saves == 1


def test_sort_by_deadline_mixed_and_undated() -> None:
    tasks = TaskList(
        [
            Task.todo("zeta"),
            Task.deadline("later same day", "2019-10-15 1800"),
            Task.deadline("whenever", "next Monday"),
            Task.deadline("early", "2019-10-15 0800"),
            Task.deadline("another", "2019-10-15"),
            Task.event("alpha", "Mon", "Tue"),
        ]
    )

    tasks.sort_by_deadline()

    # Date-only vs date-time on the same day ties on the date, then description.
    assert _descriptions(tasks) == [
        "another",
        "early",
        "later same day",
        "alpha",
        "whenever",
        "zeta",
    ]


def test_sort_by_description_type_and_status() -> None:
    done = Task.todo("Banana")
    done.mark_done()
    tasks = TaskList(
        [
            Task.event("cherry", "a", "b"),
            done,
            Task.deadline("apple", "2020-01-01"),
            Task.todo("date"),
        ]
    )

    tasks.sort_by_description()
    assert _descriptions(tasks) == ["apple", "Banana", "cherry", "date"]

    tasks.sort_by_type()
    assert _descriptions(tasks) == ["Banana", "date", "apple", "cherry"]

    tasks.sort_by_status()
    assert _descriptions(tasks) == ["apple", "cherry", "date", "Banana"]


def test_sort_by_description_is_stable_for_ties() -> None:
    tasks = TaskList([Task.todo("Same"), Task.deadline("same", "x"), Task.todo("SAME")])

    tasks.sort_by_description()

    assert [t.kind.value for t in tasks.tasks] == ["T", "D", "T"]
    assert [t.description for t in tasks.tasks] == ["Same", "same", "SAME"]


def test_no_store_never_persists() -> None:
    tasks = TaskList()
    assert tasks.persistent is False

    reply = tasks.add(Task.todo("x"))
    assert reply.warning is None


def test_save_failure_keeps_mutation_and_warns() -> None:
    store = FailingTaskStore()
    tasks = TaskList(store=store)

    reply = tasks.add(Task.todo("x"))

    assert tasks.size() == 1
    assert reply.warning is not None
    assert "disk full" in reply.warning
