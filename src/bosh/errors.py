# src/bosh/errors.py

"""
User-facing error hierarchy.

Every error here is recoverable and scoped to a single command: the console
boundary shows `str(err)` and keeps reading input.
"""

from __future__ import annotations


class BoshError(Exception):
    """Base class; the message is what the user sees."""


class UnknownCommandError(BoshError):
    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(f'I don\'t recognize the command: "{command}".')


class EmptyDescriptionError(BoshError):
    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(f"The {command} description cannot be empty.")


class MissingArgumentError(BoshError):
    pass


class ReservedCharacterError(BoshError):
    def __init__(self, char: str = "|") -> None:
        self.char = char
        super().__init__(f'Task text cannot contain "{char}"; it separates fields in the save file.')


class InvalidIndexError(BoshError):
    def __init__(self, raw: str = "") -> None:
        self.raw = raw
        super().__init__("Please give a valid positive task number.")


class IndexOutOfRangeError(BoshError):
    def __init__(self, index: int, size: int | None = None, message: str | None = None) -> None:
        self.index = index
        self.size = size
        super().__init__(message or f"Task number {index} is out of range.")


class InvalidSortCriterionError(BoshError):
    def __init__(self, criterion: str) -> None:
        self.criterion = criterion
        super().__init__(
            "Invalid sort criteria. Available options: description, type, date, status"
        )


class StorageError(BoshError):
    """Reading or writing the task file failed."""
