"""Task storage - reading and writing the YAML task file.

The task file is a small YAML document:

    version: 1
    tasks:
    - id: 1
      text: Fix login bug
      ...

Loading is lenient about the document's shape (a missing or malformed
``tasks`` list reads as no tasks) but strict about its syntax: text that is
not valid YAML raises ``ParseError`` so the user can fix the file by hand.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date
from pathlib import Path

import yaml
from pydantic import ValidationError as PydanticValidationError

from taskflow.config import SCHEMA_VERSION
from taskflow.errors import (
    EMPTY_TEXT,
    INVALID_TYPE,
    MISSING_TEXT,
    ParseError,
    ValidationError,
)
from taskflow.models import DEFAULT_PRIORITY, DEFAULT_STATUS, Task


class _TaskDumper(yaml.SafeDumper):
    """Safe dumper that never emits anchors or aliases."""

    def ignore_aliases(self, data: object) -> bool:
        return True


class TaskStore:
    """The task file at a given path."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"TaskStore({str(self.path)!r})"

    def load(self) -> list[Task]:
        """Load all tasks in file order.

        Returns an empty list when the file is missing, blank, or does not
        contain a ``tasks`` list.

        Raises:
            ParseError: The file is not valid YAML, or a task entry cannot be
                read as a task record.
        """
        if not self.path.exists():
            return []

        content = self.path.read_bytes()
        if not content.strip():
            return []

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ParseError(self.path, str(e)) from e

        if not isinstance(data, dict):
            return []

        items = data.get("tasks")
        if not isinstance(items, list):
            return []

        tasks = []
        for index, item in enumerate(items):
            if not isinstance(item, dict):
                raise ParseError(self.path, f"task entry {index + 1} is not a mapping")
            try:
                tasks.append(Task.model_validate(item))
            except PydanticValidationError as e:
                raise ParseError(self.path, f"task entry {index + 1}: {e}") from e

        return tasks

    def save(self, tasks: Iterable[Task] | None) -> None:
        """Write the full task list, replacing whatever the file held."""
        document = {
            "version": SCHEMA_VERSION,
            "tasks": [task.to_record() for task in tasks or []],
        }

        self.path.parent.mkdir(parents=True, exist_ok=True)

        with open(self.path, "w", encoding="utf-8") as f:
            yaml.dump(
                document,
                f,
                Dumper=_TaskDumper,
                sort_keys=False,
                default_flow_style=False,
                allow_unicode=True,
            )


def today() -> date:
    """Return the current local calendar date."""
    return date.today()


def next_id(tasks: Iterable[Task] | None) -> int:
    """Return the id for a new task: one past the highest id in use.

    Ids are never reused, so gaps left by removed tasks stay gaps.
    Records without an id count as 0.
    """
    return max((task.id or 0 for task in tasks or []), default=0) + 1


def create_task(
    text: object,
    *,
    id: int | None = None,
    priority: str | None = None,
    tags: Iterable[str] | None = None,
    status: str | None = None,
    created: date | None = None,
    completed: date | None = None,
) -> Task:
    """Create a new task with defaults applied.

    The id is left unset unless given; callers assign one with ``next_id``
    before saving.

    Raises:
        ValidationError: ``text`` is missing, not a string, or blank.
    """
    if text is None:
        raise ValidationError(MISSING_TEXT, "Task text is required")
    if not isinstance(text, str):
        raise ValidationError(INVALID_TYPE, "Task text must be a string")
    if not text.strip():
        raise ValidationError(EMPTY_TEXT, "Task text is required (cannot be empty)")

    return Task(
        id=id,
        text=text.strip(),
        priority=priority or DEFAULT_PRIORITY,
        tags=list(tags) if tags is not None else [],
        status=status or DEFAULT_STATUS,
        created=created or today(),
        completed=completed,
    )


def find_task(tasks: Iterable[Task] | None, task_id: int) -> Task | None:
    """Find a task by id, or None if no task has it."""
    for task in tasks or []:
        if task.id == task_id:
            return task
    return None
