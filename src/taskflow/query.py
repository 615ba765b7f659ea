"""Filtering and ordering tasks for display."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel

from taskflow.errors import INVALID_PRIORITY, ValidationError
from taskflow.models import VALID_PRIORITIES, Task

# Lower rank sorts first; unknown priorities sort after all known ones.
PRIORITY_ORDER: dict[str, int] = {"high": 0, "medium": 1, "low": 2}
_UNRANKED = len(PRIORITY_ORDER)


class ListFilters(BaseModel):
    """Criteria for ``tf list``. All supplied criteria must match."""

    done: bool = False
    all: bool = False
    priority: str | None = None
    tag: str | None = None


def validate_priority(priority: str | None) -> None:
    """Reject a priority outside high/medium/low. None means unset."""
    if priority is not None and priority not in VALID_PRIORITIES:
        raise ValidationError(
            INVALID_PRIORITY,
            f'Invalid priority "{priority}"\n\n'
            f"Valid priorities: {', '.join(VALID_PRIORITIES)}",
        )


def validate_filters(filters: ListFilters) -> None:
    validate_priority(filters.priority)


def _matches(task: Task, filters: ListFilters) -> bool:
    if filters.done:
        if task.status != "done":
            return False
    elif not filters.all:
        if task.status == "done":
            return False

    if filters.priority and task.priority != filters.priority:
        return False

    if filters.tag and filters.tag not in (task.tags or []):
        return False

    return True


def filter_tasks(tasks: Iterable[Task] | None, filters: ListFilters) -> list[Task]:
    """Return the tasks matching every active filter, in input order.

    By default only open tasks pass; ``done`` selects completed tasks only
    and ``all`` disables status filtering.
    """
    validate_filters(filters)
    return [task for task in tasks or [] if _matches(task, filters)]


def _sort_key(task: Task) -> tuple[int, int]:
    return PRIORITY_ORDER.get(task.priority or "", _UNRANKED), task.id or 0


def sort_tasks(tasks: Iterable[Task] | None) -> list[Task]:
    """Sort by priority (high first), then by id. Returns a new list."""
    return sorted(tasks or [], key=_sort_key)


def list_tasks(tasks: Iterable[Task] | None, filters: ListFilters) -> list[Task]:
    """Filter then sort tasks for display."""
    return sort_tasks(filter_tasks(tasks, filters))
