# src/bosh/core/replies.py

"""
Structured results returned by the core.

The task list and command handlers never print; they return a Reply that the
presentation adapter turns into text (see cli/formatting.py).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from ..tasks.task_models import Task


class ReplyKind(StrEnum):
    ADDED = "added"
    MARKED = "marked"
    UNMARKED = "unmarked"
    DELETED = "deleted"
    LISTED = "listed"
    FOUND = "found"
    SORTED = "sorted"
    HELP = "help"


@dataclass(slots=True)
class Reply:
    kind: ReplyKind

    # The task acted on (add/mark/unmark/delete).
    task: Task | None = None
    # Tasks to display, already in display order (list/find/sort).
    tasks: list[Task] = field(default_factory=list)
    # Collection size after the operation.
    count: int = 0
    # Sort criterion name ("description", "type", "deadline", "status").
    criterion: str | None = None
    # Free-form lines (help text).
    lines: list[str] = field(default_factory=list)
    # Set when the mutation succeeded in memory but could not be saved.
    warning: str | None = None
