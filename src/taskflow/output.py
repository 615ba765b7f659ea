"""Rendering tasks for the terminal.

All functions return rich markup strings; user-supplied text is escaped so
brackets in task text or tags are printed literally.
"""

from __future__ import annotations

from collections.abc import Sequence

from rich.markup import escape

from taskflow.models import Task
from taskflow.query import ListFilters

PRIORITY_INDICATORS: dict[str, str] = {
    "high": "🔴",
    "medium": "🟡",
    "low": "🟢",
}
UNKNOWN_INDICATOR = "⚪"
DONE_INDICATOR = "✅"

PRIORITY_STYLES: dict[str, str] = {
    "high": "red",
    "medium": "yellow",
    "low": "green",
}


def _tag_str(task: Task) -> str:
    return " ".join(f"#{escape(tag)}" for tag in task.tags or [])


def _summary(task: Task) -> str:
    line = f'"{escape(task.text or "")}" {escape(f"[{task.priority}]")}'
    tags = _tag_str(task)
    if tags:
        line += f" [cyan]{tags}[/cyan]"
    return line


def format_task(task: Task) -> str:
    """Format a single task as one list line."""
    if task.is_done:
        indicator = DONE_INDICATOR
    else:
        indicator = PRIORITY_INDICATORS.get(task.priority or "", UNKNOWN_INDICATOR)

    style = "dim" if task.is_done else PRIORITY_STYLES.get(task.priority or "", "")
    priority = escape(f"[{task.priority}]")
    if style:
        priority = f"[{style}]{priority}[/{style}]"

    line = f"{indicator} [bold]#{task.id}[/bold] {escape(task.text or '')} {priority}"

    tags = _tag_str(task)
    if tags:
        line += f" [cyan]{tags}[/cyan]"

    if task.is_done:
        line += " [dim](done)[/dim]"

    return line


def empty_message(filters: ListFilters) -> str:
    """Message shown when no tasks match, worded after the active filters."""
    tag = escape(filters.tag or "")

    if filters.done:
        if filters.priority:
            return f"No completed {filters.priority} priority tasks found."
        if filters.tag:
            return f'No completed tasks with tag "{tag}" found.'
        return "No completed tasks."

    if filters.priority and filters.tag:
        return f'No {filters.priority} priority tasks with tag "{tag}" found.'
    if filters.priority:
        return f"No {filters.priority} priority tasks found."
    if filters.tag:
        return f'No tasks with tag "{tag}" found.'
    if filters.all:
        return "No tasks found. Use 'tf add \"task\"' to create one."

    return "No open tasks. Use 'tf add \"task\"' to create one."


def format_task_list(tasks: Sequence[Task] | None, filters: ListFilters) -> str:
    if not tasks:
        return empty_message(filters)
    return "\n".join(format_task(task) for task in tasks)


def format_task_details(task: Task) -> str:
    """Multi-line detail view used by ``tf show``."""
    lines = [f"[bold]Task #{task.id}[/bold]"]
    lines.append(f"  Text:     {escape(task.text or '')}")
    lines.append(f"  Priority: {escape(str(task.priority))}")

    if task.is_done:
        lines.append("  Status:   [green]done ✓[/green]")
    else:
        lines.append(f"  Status:   {escape(str(task.status))}")

    tags = _tag_str(task)
    if tags:
        lines.append(f"  Tags:     {tags}")

    if task.created:
        lines.append(f"  Created:  {task.created.isoformat()}")

    if task.is_done and task.completed:
        lines.append(f"  Completed: {task.completed.isoformat()}")

    return "\n".join(lines)


def format_added(task: Task) -> str:
    return f"[green]✓[/green] Added task #{task.id}\n  {_summary(task)}"


def format_completed(task: Task, already_done: bool) -> str:
    if already_done:
        return f"[yellow]Task #{task.id} was already complete[/yellow]\n  {_summary(task)}"
    return f"[green]✓[/green] Completed task #{task.id}\n  {_summary(task)} → done"
