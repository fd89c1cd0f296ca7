# src/bosh/cli/commands.py

"""
Command parsing and dispatch.

`parse_command` is a pure translation from one input line to a `Command`;
`execute` applies it to a TaskList and returns the TaskList's Reply.
Neither prints anything.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from ..core.replies import Reply, ReplyKind
from ..errors import (
    EmptyDescriptionError,
    IndexOutOfRangeError,
    InvalidIndexError,
    InvalidSortCriterionError,
    MissingArgumentError,
    ReservedCharacterError,
    UnknownCommandError,
)
from ..tasks.task_list import TaskList
from ..tasks.task_models import Task
from ..tasks.task_store import FIELD_CHAR

logger = logging.getLogger(__name__)

EXIT_COMMAND = "bye"

SORT_CRITERIA: dict[str, str] = {
    "description": "description",
    "desc": "description",
    "type": "type",
    "date": "deadline",
    "deadline": "deadline",
    "status": "status",
    "done": "status",
}


class CommandKind(StrEnum):
    LIST = "list"
    SORT = "sort"
    MARK = "mark"
    UNMARK = "unmark"
    DELETE = "delete"
    ADD = "add"
    FIND = "find"
    HELP = "help"


@dataclass(frozen=True, slots=True)
class Command:
    kind: CommandKind
    index: int | None = None
    task: Task | None = None
    keyword: str | None = None
    criterion: str | None = None


# A parser receives the text after the keyword (None when the keyword stands
# alone) and returns a Command, or None to let the line fall through to the
# implicit todo.
CommandParser = Callable[[str | None], Command | None]


class CommandRegistry:
    """Keyword -> parser registry (list, mark, todo, ...)."""

    def __init__(self) -> None:
        self._parsers: dict[str, CommandParser] = {}
        self._help: dict[str, tuple[str, str]] = {}

    def register(
        self,
        name: str,
        parser: CommandParser,
        help_text: str,
        usage: str | None = None,
    ) -> None:
        self._parsers[name] = parser
        self._help[name] = (usage or name, help_text)

    def parse(self, line: str) -> Command:
        """
        Parse one line. Keywords are case-sensitive.
        Any non-empty line that no parser claims becomes a todo.
        """
        line = line.strip()
        if not line:
            raise UnknownCommandError("(empty line)")

        name, sep, rest = line.partition(" ")
        parser = self._parsers.get(name)
        if parser is not None:
            cmd = parser(rest.strip() if sep else None)
            if cmd is not None:
                return cmd

        # Compatibility: unknown lines (including typos such as "dadline ...")
        # are added as plain todos.
        logger.debug("No command matched, adding as todo: %r", line)
        _check_field_text(line)
        return Command(CommandKind.ADD, task=Task.todo(line))

    def build_help(self) -> list[str]:
        lines = ["Available commands:"]
        for usage, help_text in self._help.values():
            lines.append(f"  {usage} - {help_text}")
        lines.append(f"  {EXIT_COMMAND} - Exit the application")
        return lines


registry = CommandRegistry()


def parse_positive_index(raw: str) -> int:
    try:
        idx = int(raw.strip())
    except ValueError:
        raise InvalidIndexError(raw) from None
    if idx <= 0:
        raise InvalidIndexError(raw)
    return idx


def _check_field_text(*texts: str) -> None:
    # Stored fields are split on "|", so it cannot appear inside one.
    if any(FIELD_CHAR in t for t in texts):
        raise ReservedCharacterError(FIELD_CHAR)


# ---- parsers ----


def _no_args(kind: CommandKind) -> CommandParser:
    def parse(rest: str | None) -> Command | None:
        return Command(kind) if rest is None else None

    return parse


def parse_sort(rest: str | None) -> Command:
    if rest is None:
        return Command(CommandKind.SORT, criterion="description")
    criterion = SORT_CRITERIA.get(rest.lower())
    if criterion is None:
        raise InvalidSortCriterionError(rest)
    return Command(CommandKind.SORT, criterion=criterion)


def _index_command(kind: CommandKind) -> CommandParser:
    def parse(rest: str | None) -> Command:
        if not rest:
            raise MissingArgumentError(f"Usage: {kind.value} <task-number>")
        return Command(kind, index=parse_positive_index(rest))

    return parse


def parse_todo(rest: str | None) -> Command:
    if not rest:
        raise EmptyDescriptionError("todo")
    _check_field_text(rest)
    return Command(CommandKind.ADD, task=Task.todo(rest))


def parse_deadline(rest: str | None) -> Command:
    if rest is None:
        raise MissingArgumentError("Usage: deadline <desc> /by <time>")
    by_idx = rest.find("/by")
    if by_idx == -1:
        raise MissingArgumentError('Missing "/by". Example: deadline return book /by Sunday')
    desc = rest[:by_idx].strip()
    by = rest[by_idx + 3 :].strip()
    if not desc:
        raise EmptyDescriptionError("deadline")
    if not by:
        raise MissingArgumentError("Please specify a time after /by.")
    _check_field_text(desc, by)
    return Command(CommandKind.ADD, task=Task.deadline(desc, by))


def parse_event(rest: str | None) -> Command:
    if rest is None:
        raise MissingArgumentError("Usage: event <desc> /from <start> /to <end>")
    from_idx = rest.find("/from")
    to_idx = rest.find("/to")
    if from_idx == -1 or to_idx == -1 or to_idx < from_idx:
        raise MissingArgumentError(
            "Event needs both /from and /to. Example: event meeting /from Mon 2pm /to 4pm"
        )
    desc = rest[:from_idx].strip()
    start = rest[from_idx + 5 : to_idx].strip()
    end = rest[to_idx + 3 :].strip()
    if not desc:
        raise EmptyDescriptionError("event")
    if not start or not end:
        raise MissingArgumentError("Both start and end times are required.")
    _check_field_text(desc, start, end)
    return Command(CommandKind.ADD, task=Task.event(desc, start, end))


def parse_find(rest: str | None) -> Command:
    if not rest:
        raise MissingArgumentError("Usage: find <keyword>")
    return Command(CommandKind.FIND, keyword=rest)


registry.register("todo", parse_todo, "Add a todo task", usage="todo <description>")
registry.register(
    "deadline", parse_deadline, "Add a deadline task", usage="deadline <desc> /by <time>"
)
registry.register(
    "event", parse_event, "Add an event task", usage="event <desc> /from <start> /to <end>"
)
registry.register("list", _no_args(CommandKind.LIST), "Show all tasks")
registry.register(
    "mark", _index_command(CommandKind.MARK), "Mark task as done", usage="mark <task-number>"
)
registry.register(
    "unmark",
    _index_command(CommandKind.UNMARK),
    "Mark task as not done",
    usage="unmark <task-number>",
)
registry.register(
    "delete", _index_command(CommandKind.DELETE), "Delete a task", usage="delete <task-number>"
)
registry.register(
    "find", parse_find, "Find tasks containing keyword", usage="find <keyword>"
)
registry.register(
    "sort",
    parse_sort,
    "Sort by: description, type, date, status (default: description)",
    usage="sort [criteria]",
)
registry.register("help", _no_args(CommandKind.HELP), "Show this help message")


def parse_command(line: str) -> Command:
    return registry.parse(line)


# ---- dispatch ----


def execute(cmd: Command, tasks: TaskList) -> Reply:
    match cmd:
        case Command(kind=CommandKind.LIST):
            return tasks.list()
        case Command(kind=CommandKind.HELP):
            return Reply(ReplyKind.HELP, lines=registry.build_help(), count=tasks.size())
        case Command(kind=CommandKind.ADD, task=Task() as task):
            return tasks.add(task)
        case Command(kind=CommandKind.MARK, index=int(index)):
            return tasks.mark(index)
        case Command(kind=CommandKind.UNMARK, index=int(index)):
            return tasks.unmark(index)
        case Command(kind=CommandKind.DELETE, index=int(index)):
            if index > tasks.size():
                raise IndexOutOfRangeError(index, tasks.size(), f"No task #{index} exists.")
            return tasks.delete(index)
        case Command(kind=CommandKind.FIND, keyword=str(keyword)):
            return tasks.find(keyword)
        case Command(kind=CommandKind.SORT):
            return _sort(tasks, cmd.criterion or "description")
    raise ValueError(f"malformed command: {cmd!r}")


def _sort(tasks: TaskList, criterion: str) -> Reply:
    match criterion:
        case "description":
            return tasks.sort_by_description()
        case "type":
            return tasks.sort_by_type()
        case "deadline":
            return tasks.sort_by_deadline()
        case "status":
            return tasks.sort_by_status()
    raise InvalidSortCriterionError(criterion)


def handle(line: str, tasks: TaskList) -> Reply:
    """Parse and apply one line. Raises BoshError subclasses on bad input."""
    return execute(parse_command(line), tasks)
