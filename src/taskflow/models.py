"""Task record model and the open -> done transition."""

from __future__ import annotations

from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator

Priority = Literal["high", "medium", "low"]
Status = Literal["open", "done"]

VALID_PRIORITIES: tuple[str, ...] = ("high", "medium", "low")
VALID_STATUSES: tuple[str, ...] = ("open", "done")

DEFAULT_PRIORITY: Priority = "medium"
DEFAULT_STATUS: Status = "open"

# Order in which fields are written to the task file.
FIELD_ORDER: tuple[str, ...] = (
    "id",
    "text",
    "priority",
    "tags",
    "status",
    "created",
    "completed",
)


class Task(BaseModel):
    """A single task as stored in the task file.

    Fields are optional at this level so a record read from disk reflects
    exactly what the file holds. Defaults are applied by
    ``taskflow.storage.create_task`` when a task is first created.
    Unknown keys in the file are ignored, numbers in string fields are read
    as text, and timestamps in date fields keep only their date.
    """

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    id: int | None = None
    text: str | None = None
    priority: str | None = None
    tags: list[str] | None = None
    status: str | None = None
    created: date | None = None
    completed: date | None = None

    @field_validator("created", "completed", mode="before")
    @classmethod
    def _date_only(cls, value: object) -> object:
        if isinstance(value, datetime):
            return value.date()
        return value

    @property
    def is_done(self) -> bool:
        return self.status == "done"

    def to_record(self) -> dict:
        """Serialise to a plain dict in file field order."""
        data = self.model_dump(mode="json")
        return {key: data[key] for key in FIELD_ORDER}


def mark_done(task: Task, on: date | None = None) -> tuple[Task, bool]:
    """Mark a task as complete.

    Returns ``(task, changed)``. When the task is already done it is returned
    untouched with ``changed=False`` so its completion date never moves.
    Otherwise a new record is returned with ``status="done"`` and
    ``completed`` set to ``on`` (today by default). The input is never mutated.
    """
    if task.is_done:
        return task, False

    if on is None:
        from taskflow.storage import today

        on = today()

    return task.model_copy(update={"status": "done", "completed": on}, deep=True), True
