"""CLI interface for taskflow."""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from taskflow import __version__
from taskflow.config import TaskflowConfig
from taskflow.errors import TaskflowError
from taskflow.models import Task, mark_done
from taskflow.output import (
    format_added,
    format_completed,
    format_task_details,
    format_task_list,
)
from taskflow.query import ListFilters, list_tasks, validate_priority
from taskflow.storage import TaskStore, create_task, find_task, next_id

console = Console()
logger = logging.getLogger("taskflow")


def _configure_logging(verbose: bool) -> None:
    """Send taskflow log records to stderr through rich."""
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False


def _fail(ctx: click.Context, message: str, prefix: str = "Error:") -> None:
    console.print(f"[red]{prefix}[/red] {escape(message)}")
    ctx.exit(1)


def _parse_task_id(ctx: click.Context, raw: str | None, command: str) -> int:
    """Parse a task id argument, exiting with a usage hint when invalid."""
    if raw is None or not raw.strip():
        _fail(
            ctx,
            f"Task ID is required\n\nUsage: tf {command} <id>\n\nExample: tf {command} 1",
        )

    try:
        number = float(raw)
    except ValueError:
        _fail(ctx, f'Invalid task ID "{raw}"\n\nTask ID must be a number.')

    if not number.is_integer():
        _fail(ctx, f'Invalid task ID "{raw}"\n\nTask ID must be a whole number.')

    if number <= 0:
        _fail(ctx, f'Invalid task ID "{raw}"\n\nTask ID must be a positive number.')

    return int(number)


@click.group(invoke_without_command=True)
@click.version_option(__version__, "--version", "-v", prog_name="taskflow")
@click.option(
    "--file",
    "-f",
    "task_file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Task file to use (default: .taskflow.yaml in the current directory)",
)
@click.option("--verbose", "-V", is_flag=True, help="Log what each command reads and writes")
@click.pass_context
def main(ctx: click.Context, task_file: Path | None, verbose: bool) -> None:
    """taskflow - A minimalist task manager for developers.

    Tasks live in .taskflow.yaml in the current directory.

    \b
    Examples:
      tf add "Fix login bug"
      tf add "Urgent task" -p high -t backend
      tf list
      tf done 1
    """
    config = TaskflowConfig.load()
    if task_file is not None:
        config.task_file = str(task_file)
    if verbose:
        config.verbose = True

    _configure_logging(config.verbose)

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["store"] = TaskStore(config.task_path())

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


def _load(ctx: click.Context) -> list[Task]:
    store: TaskStore = ctx.obj["store"]
    try:
        tasks = store.load()
    except (TaskflowError, OSError) as e:
        _fail(ctx, str(e), prefix="Error loading tasks:")

    logger.debug("Loaded %d task(s) from %s", len(tasks), store.path)
    return tasks


def _save(ctx: click.Context, tasks: list[Task]) -> None:
    store: TaskStore = ctx.obj["store"]
    try:
        store.save(tasks)
    except OSError as e:
        _fail(ctx, str(e), prefix="Error saving tasks:")

    logger.debug("Saved %d task(s) to %s", len(tasks), store.path)


@main.command()
@click.argument("text", required=False)
@click.option("--priority", "-p", help="Priority level: high, medium, low (default: medium)")
@click.option("--tag", "-t", "tags", multiple=True, help="Add a tag (can be used multiple times)")
@click.pass_context
def add(ctx: click.Context, text: str | None, priority: str | None, tags: tuple[str, ...]) -> None:
    """Add a new task.

    \b
    Examples:
      tf add "Fix login bug"
      tf add "Write tests" -p high
      tf add "Refactor DB" --priority low -t backend -t urgent
    """
    if priority is not None:
        priority = priority.lower()

    try:
        validate_priority(priority)
        task = create_task(text, priority=priority, tags=[t.strip() for t in tags if t.strip()])
    except TaskflowError as e:
        message = e.message
        if text is None:
            message += '\n\nUsage: tf add <text> [options]\n\nExample: tf add "Fix the login bug" -p high'
        _fail(ctx, message)

    tasks = _load(ctx)
    task = task.model_copy(update={"id": next_id(tasks)})
    tasks.append(task)
    _save(ctx, tasks)

    console.print(format_added(task))


@main.command("list")
@click.option("--done", is_flag=True, help="Show completed tasks only")
@click.option("--all", "-a", "show_all", is_flag=True, help="Show all tasks (open + done)")
@click.option("--priority", "-p", help="Filter by priority: high, medium, low")
@click.option("--tag", "-t", help="Filter by tag")
@click.pass_context
def list_command(
    ctx: click.Context,
    done: bool,
    show_all: bool,
    priority: str | None,
    tag: str | None,
) -> None:
    """List and filter your tasks.

    \b
    Examples:
      tf list                     # Show open tasks
      tf list --done              # Show completed tasks
      tf list --all               # Show all tasks
      tf list -p high -t api      # Combine filters

    \b
    Output:
      🔴 = high priority
      🟡 = medium priority
      🟢 = low priority
      ✅ = completed
    """
    filters = ListFilters(
        done=done,
        all=show_all,
        priority=priority.lower() if priority is not None else None,
        tag=tag.strip() if tag is not None else None,
    )

    try:
        validate_priority(filters.priority)
    except TaskflowError as e:
        _fail(ctx, e.message)

    tasks = list_tasks(_load(ctx), filters)
    console.print(format_task_list(tasks, filters))


@main.command()
@click.argument("task_id", required=False)
@click.pass_context
def done(ctx: click.Context, task_id: str | None) -> None:
    """Mark a task as complete.

    \b
    Examples:
      tf done 1       # Mark task #1 as complete
    """
    number = _parse_task_id(ctx, task_id, "done")
    tasks = _load(ctx)

    task = find_task(tasks, number)
    if task is None:
        _fail(ctx, f"Task #{number} not found\n\nRun 'tf list --all' to see available tasks.")

    updated, changed = mark_done(task)
    if changed:
        index = next(i for i, t in enumerate(tasks) if t is task)
        tasks[index] = updated
        _save(ctx, tasks)

    console.print(format_completed(updated, already_done=not changed))


@main.command()
@click.argument("task_id", required=False)
@click.pass_context
def show(ctx: click.Context, task_id: str | None) -> None:
    """Display detailed information about a task.

    \b
    Examples:
      tf show 1       # Show details of task #1
    """
    number = _parse_task_id(ctx, task_id, "show")
    tasks = _load(ctx)

    task = find_task(tasks, number)
    if task is None:
        _fail(ctx, f"Task #{number} not found\n\nRun 'tf list --all' to see available tasks.")

    console.print(format_task_details(task))


if __name__ == "__main__":
    main()
