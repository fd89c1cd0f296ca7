# tests/test_task_models.py

from __future__ import annotations

from datetime import date, datetime

from bosh.tasks.task_models import (
    DueDate,
    DueDateTime,
    DueText,
    Task,
    TaskKind,
    due_to_storage,
    format_due,
    parse_due,
)


def test_date_time_is_tried_before_date() -> None:
    due = parse_due("2019-10-15 1800")
    assert due == DueDateTime(datetime(2019, 10, 15, 18, 0))

    t = Task.deadline("pay bills", "2019-10-15 1800")
    assert "(by: Oct 15 2019 6:00PM)" in t.render()


def test_date_only_renders_without_time() -> None:
    t = Task.deadline("return book", "2019-10-15")
    assert t.due == DueDate(date(2019, 10, 15))
    assert t.render() == "[D][ ] return book (by: Oct 15 2019)"


def test_unparseable_due_is_kept_verbatim() -> None:
    t = Task.deadline("meet", "next Monday")
    assert t.due == DueText("next Monday")
    assert t.render().endswith("(by: next Monday)")
    assert due_to_storage(t.due) == "next Monday"


def test_storage_form_keeps_the_input_format() -> None:
    assert due_to_storage(parse_due("2019-10-15 1800")) == "2019-10-15 1800"
    assert due_to_storage(parse_due("2019-10-15")) == "2019-10-15"


def test_near_miss_dates_stay_text() -> None:
    # Unpadded or impossible values are not silently normalized.
    assert isinstance(parse_due("2019-1-5"), DueText)
    assert isinstance(parse_due("2019-02-30"), DueText)
    assert isinstance(parse_due("2019-10-15 2500"), DueText)
    assert isinstance(parse_due("2019-10-15 180"), DueText)


def test_midnight_and_noon_formatting() -> None:
    assert format_due(parse_due("2020-01-02 0005")) == "Jan 2 2020 12:05AM"
    assert format_due(parse_due("2020-01-02 1200")) == "Jan 2 2020 12:00PM"


def test_mark_is_idempotent() -> None:
    t = Task.todo("read book")
    t.mark_done()
    t.mark_done()
    assert t.done is True
    assert t.render() == "[T][X] read book"

    t.mark_undone()
    t.mark_undone()
    assert t.done is False
    assert t.render() == "[T][ ] read book"


def test_matches_is_case_insensitive_and_description_only() -> None:
    t = Task.deadline("Submit Report", "2019-10-15")
    assert t.matches("report")
    assert t.matches("SUBMIT rep")
    assert not t.matches("2019")
    assert not t.matches("Oct")


def test_event_render_and_kinds() -> None:
    t = Task.event("project meeting", "Mon 2pm", "4pm")
    assert t.kind is TaskKind.EVENT
    assert t.render() == "[E][ ] project meeting (from: Mon 2pm to: 4pm)"
    assert TaskKind.TODO.rank < TaskKind.DEADLINE.rank < TaskKind.EVENT.rank
