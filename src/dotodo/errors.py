"""Error kinds raised by task parsing, storage, and command dispatch."""

from __future__ import annotations


class TodoError(Exception):
    """Base class for every error dotodo reports to the user."""


class ConfigError(TodoError):
    """A required environment value (``HOME``) is missing."""


class ParseError(TodoError):
    """Malformed storage line or malformed command argument."""

    def __init__(self, message: str, *, line_no: int | None = None) -> None:
        self.line_no = line_no
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message)


class InvalidCommand(ParseError):
    """Input line does not match any known command."""

    def __init__(self, line: str) -> None:
        self.line = line
        super().__init__(f"Invalid input: {line!r}. Use 'help' to list commands.")


class StorageError(TodoError):
    """Reading or writing the storage file failed."""
