# src/bosh/cli/formatting.py

"""Turn core Replies into boxed console text."""

from __future__ import annotations

from collections.abc import Iterable

from ..core.replies import Reply, ReplyKind
from ..tasks.task_models import Task

DIVIDER = "_" * 60


def box(*lines: str) -> str:
    if not lines:
        return ""
    return "\n".join([DIVIDER, *lines, DIVIDER])


def numbered(tasks: Iterable[Task]) -> list[str]:
    return [f"{i}.{t}" for i, t in enumerate(tasks, start=1)]


def _count_line(count: int) -> str:
    return f"Now you have {count} tasks in the list."


def reply_lines(reply: Reply) -> list[str]:
    match reply.kind:
        case ReplyKind.ADDED:
            lines = ["Got it. I've added this task:", f"  {reply.task}", _count_line(reply.count)]
        case ReplyKind.MARKED:
            lines = ["Nice! Marked as done:", f"  {reply.task}"]
        case ReplyKind.UNMARKED:
            lines = ["OK! Marked as not done:", f"  {reply.task}"]
        case ReplyKind.DELETED:
            lines = ["Noted. I've removed this task:", f"  {reply.task}", _count_line(reply.count)]
        case ReplyKind.LISTED:
            lines = ["Here are the tasks in your list:", *numbered(reply.tasks)]
        case ReplyKind.FOUND:
            lines = ["Here are the matching tasks in your list:", *numbered(reply.tasks)]
        case ReplyKind.SORTED:
            lines = [
                f"Tasks have been sorted by {reply.criterion}!",
                "Here are the tasks in your list:",
                *numbered(reply.tasks),
            ]
        case _:
            lines = list(reply.lines)

    if reply.warning:
        lines.append(f"Warning: {reply.warning}")
    return lines


def format_reply(reply: Reply) -> str:
    return box(*reply_lines(reply))


def format_error(message: str) -> str:
    return box(message)
