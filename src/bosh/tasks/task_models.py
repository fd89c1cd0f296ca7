# src/bosh/tasks/task_models.py

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum

# Input formats, tried in this order (date-time first so "2019-10-15 1800"
# is never mistaken for a malformed date).
IN_DATE_TIME = "%Y-%m-%d %H%M"
IN_DATE = "%Y-%m-%d"

# strptime accepts unpadded fields; the stored form must equal the input.
_DATE_TIME_SHAPE = re.compile(r"\d{4}-\d{2}-\d{2} \d{4}")
_DATE_SHAPE = re.compile(r"\d{4}-\d{2}-\d{2}")

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


class TaskKind(StrEnum):
    """
    Task kind tag.

    The value is the single-letter symbol used both on screen (`[T]`) and in
    the persisted record.
    """

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"

    @property
    def rank(self) -> int:
        """Sort rank for `sort type`: todo < deadline < event."""
        return {TaskKind.TODO: 0, TaskKind.DEADLINE: 1, TaskKind.EVENT: 2}[self]


@dataclass(frozen=True, slots=True)
class DueDate:
    value: date


@dataclass(frozen=True, slots=True)
class DueDateTime:
    value: datetime


@dataclass(frozen=True, slots=True)
class DueText:
    """Due marker that matched no known format; kept verbatim."""

    raw: str


Due = DueDate | DueDateTime | DueText


def parse_due(raw: str) -> Due:
    """
    Parse a deadline's `/by` text.

    `YYYY-MM-DD HHmm` is tried first, then `YYYY-MM-DD`; anything else is kept
    as text so nothing the user typed is lost.
    """
    text = (raw or "").strip()
    if _DATE_TIME_SHAPE.fullmatch(text):
        try:
            return DueDateTime(datetime.strptime(text, IN_DATE_TIME))
        except ValueError:
            pass
    if _DATE_SHAPE.fullmatch(text):
        try:
            return DueDate(datetime.strptime(text, IN_DATE).date())
        except ValueError:
            pass
    return DueText(text)


def _month_day_year(d: date) -> str:
    # Fixed English month names; strftime("%b") follows the process locale.
    return f"{_MONTHS[d.month - 1]} {d.day} {d.year}"


def format_due(due: Due) -> str:
    """Human form: `Oct 15 2019`, `Oct 15 2019 6:00PM` or the raw text."""
    match due:
        case DueDateTime(value=dt):
            hour = dt.hour % 12 or 12
            half = "AM" if dt.hour < 12 else "PM"
            return f"{_month_day_year(dt.date())} {hour}:{dt.minute:02d}{half}"
        case DueDate(value=d):
            return _month_day_year(d)
        case DueText(raw=raw):
            return raw
    raise TypeError(f"unsupported due marker: {due!r}")


def due_to_storage(due: Due) -> str:
    """Canonical stored form: the input format that parsed, or the raw text."""
    match due:
        case DueDateTime(value=dt):
            return dt.strftime(IN_DATE_TIME)
        case DueDate(value=d):
            return d.strftime(IN_DATE)
        case DueText(raw=raw):
            return raw
    raise TypeError(f"unsupported due marker: {due!r}")


def due_sort_date(due: Due | None) -> datetime | date | None:
    match due:
        case DueDateTime(value=dt):
            return dt
        case DueDate(value=d):
            return d
    return None


@dataclass(slots=True)
class Task:
    """
    One tracked task.

    Notes:
    - `due` is only set for DEADLINE tasks.
    - `start` / `end` are only set for EVENT tasks and are opaque text.
    - description is validated by the command parser, not here.
    """

    kind: TaskKind
    description: str
    done: bool = False

    due: Due | None = None
    start: str | None = None
    end: str | None = None

    @classmethod
    def todo(cls, description: str) -> Task:
        return cls(kind=TaskKind.TODO, description=description)

    @classmethod
    def deadline(cls, description: str, by: str) -> Task:
        return cls(kind=TaskKind.DEADLINE, description=description, due=parse_due(by))

    @classmethod
    def event(cls, description: str, start: str, end: str) -> Task:
        return cls(kind=TaskKind.EVENT, description=description, start=start, end=end)

    # ---- state ----

    def mark_done(self) -> None:
        self.done = True

    def mark_undone(self) -> None:
        self.done = False

    # ---- queries ----

    def matches(self, keyword: str) -> bool:
        return keyword.lower() in self.description.lower()

    @property
    def status_icon(self) -> str:
        return "X" if self.done else " "

    def render(self) -> str:
        base = f"[{self.kind.value}][{self.status_icon}] {self.description}"
        match self.kind:
            case TaskKind.DEADLINE:
                return f"{base} (by: {format_due(self.due or DueText(''))})"
            case TaskKind.EVENT:
                return f"{base} (from: {self.start} to: {self.end})"
        return base

    def __str__(self) -> str:
        return self.render()
