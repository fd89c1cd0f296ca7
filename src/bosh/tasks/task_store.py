# src/bosh/tasks/task_store.py

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from pathlib import Path

from ..errors import StorageError
from .task_models import Task, TaskKind, due_to_storage

logger = logging.getLogger(__name__)

FIELD_CHAR = "|"
FIELD_SEP = f" {FIELD_CHAR} "
FIELD_SPLIT = re.compile(r"\s*\|\s*")


def serialize_task(task: Task) -> str:
    """`KIND | DONE | DESCRIPTION[ | extra...]` for one task."""
    done = "1" if task.done else "0"
    fields = [task.kind.value, done, task.description]
    match task.kind:
        case TaskKind.DEADLINE:
            fields.append(due_to_storage(task.due) if task.due is not None else "")
        case TaskKind.EVENT:
            fields.extend([task.start or "", task.end or ""])
    return FIELD_SEP.join(fields)


def parse_record(line: str) -> Task:
    """
    Parse one stored record.

    Raises ValueError (or IndexError for missing fields) on anything malformed;
    the caller decides whether to skip the line.
    """
    parts = FIELD_SPLIT.split(line.strip())
    if len(parts) < 3:
        raise ValueError(f"expected at least 3 fields, got {len(parts)}")

    tag, done_flag, description = parts[0], parts[1], parts[2]
    try:
        kind = TaskKind(tag)
    except ValueError:
        raise ValueError(f"unknown task kind {tag!r}") from None

    match kind:
        case TaskKind.TODO:
            task = Task.todo(description)
        case TaskKind.DEADLINE:
            task = Task.deadline(description, parts[3])
        case TaskKind.EVENT:
            task = Task.event(description, parts[3], parts[4])

    if done_flag == "1":
        task.mark_done()
    return task


class TaskStore:
    """
    Line-based text task store.

    File format (UTF-8, no header), one task per line:
        T | 1 | read book
        D | 0 | return book | 2019-10-15        (or `2019-10-15 1800`, or raw text)
        E | 0 | meeting | Mon 2pm | 4pm

    Loading is tolerant: corrupted lines (including bytes that are not UTF-8)
    are skipped, not fatal. `|` never occurs inside a field; the command
    parser rejects it.
    Saving rewrites the whole file.
    """

    def __init__(self, path: str | Path = "data/bosh.txt") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Task]:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            if not self._path.exists():
                logger.info("TaskStore first run, no file at %s", self._path)
                return []
            raw = self._path.read_bytes()
        except OSError as e:
            raise StorageError(f"Could not load tasks from {self._path}: {e}") from e

        out: list[Task] = []
        skipped = 0
        # Decoded per line: a line that is not UTF-8 is just another corrupted record.
        for lineno, chunk in enumerate(raw.splitlines(), start=1):
            if not chunk.strip():
                continue
            try:
                out.append(parse_record(chunk.decode("utf-8")))
            except (ValueError, IndexError) as e:
                skipped += 1
                logger.warning("Skipping corrupted line %d in %s: %s", lineno, self._path, e)

        logger.info("TaskStore loaded path=%s total=%d skipped=%d", self._path, len(out), skipped)
        return out

    def save(self, tasks: Sequence[Task]) -> None:
        lines = [serialize_task(t) for t in tasks]
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            text = "".join(line + "\n" for line in lines)
            self._path.write_text(text, "utf-8")
        except OSError as e:
            raise StorageError(f"Could not save tasks: {e}") from e
        logger.debug("TaskStore saved path=%s total=%d", self._path, len(lines))
