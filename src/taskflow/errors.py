"""Error types raised by the taskflow core."""

from __future__ import annotations

from pathlib import Path

MISSING_TEXT = "MISSING_TEXT"
EMPTY_TEXT = "EMPTY_TEXT"
INVALID_TYPE = "INVALID_TYPE"
INVALID_PRIORITY = "INVALID_PRIORITY"


class TaskflowError(Exception):
    """Base class for errors the CLI reports to the user."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__

    def __str__(self) -> str:
        return self.message


class ParseError(TaskflowError):
    """The task file exists but cannot be read as a task document."""

    def __init__(self, path: Path, detail: str) -> None:
        self.path = Path(path)
        self.detail = detail
        super().__init__(f"Invalid {self.path.name}: {detail}", code="PARSE_ERROR")


class ValidationError(TaskflowError):
    """Bad input from the caller, tagged with a reason code."""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(message, code=code)
