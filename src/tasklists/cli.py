#!/usr/bin/env python3
"""Task Lists CLI.

Command-line interface for initialising the database, serving the API and
inspecting or editing task lists from a terminal.
"""

import json
from datetime import datetime
from typing import NoReturn
from uuid import UUID

import typer
import uvicorn
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .config import get_settings
from .database import create_db_and_tables, get_session_context
from .errors import TaskListsError
from .logging_config import setup_logging
from .schemas.unified_models import TaskCore, TaskListCore, TaskPriority
from .services import TaskListService, TaskService
from .utils.task_calculations import TaskCalculations


# Initialize CLI and console
app = typer.Typer(help="Task Lists CLI")
console = Console()


def _fail(error: TaskListsError) -> NoReturn:
    console.print(f"[bold red]{error}[/bold red]")
    raise typer.Exit(code=1)


def _format_progress(progress: float | None) -> str:
    return "-" if progress is None else f"{progress:.0%}"


@app.command()
def init_db():
    """Create the database tables."""
    create_db_and_tables()
    console.print(f"[green]Database ready at {get_settings().database.url}[/green]")


@app.command()
def serve(
    host: str | None = typer.Option(None, "--host", help="Interface to bind"),
    port: int | None = typer.Option(None, "--port", "-p", help="Port to listen on"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
):
    """Run the HTTP API with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "tasklists.api.app:create_app",
        factory=True,
        host=host or settings.api.host,
        port=port or settings.api.port,
        reload=reload,
    )


@app.command()
def lists():
    """List task lists with their task count and progress."""
    with get_session_context() as session:
        task_lists = TaskListService(session=session).list_task_lists()

    if not task_lists:
        console.print("[yellow]No task lists found[/yellow]")
        return

    table = Table(title="Task Lists", show_header=True, header_style="bold magenta")
    table.add_column("ID", style="cyan")
    table.add_column("Title", style="white", max_width=40)
    table.add_column("Tasks", style="green", justify="right")
    table.add_column("Progress", style="yellow", justify="right")

    for task_list in task_lists:
        table.add_row(
            str(task_list.id),
            task_list.title,
            str(TaskCalculations.task_count(task_list.tasks)),
            _format_progress(TaskCalculations.progress(task_list.tasks)),
        )

    console.print(table)


@app.command()
def tasks(
    task_list_id: UUID = typer.Argument(..., help="ID of the task list"),
):
    """Show the tasks of a task list."""
    with get_session_context() as session:
        task_list = TaskListService(session=session).get_task_list(task_list_id)

    if task_list is None:
        console.print(f"[bold red]Task list {task_list_id} not found[/bold red]")
        raise typer.Exit(code=1)

    console.print(
        Panel.fit(
            f"[bold blue]Title:[/bold blue] {task_list.title}\n"
            f"[bold blue]Description:[/bold blue] {task_list.description or '-'}\n"
            f"[bold blue]Progress:[/bold blue] "
            f"{_format_progress(TaskCalculations.progress(task_list.tasks))}",
            title=str(task_list.id),
        )
    )

    if not task_list.tasks:
        console.print("[yellow]No tasks in this list[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("ID", style="cyan")
    table.add_column("Title", style="white", max_width=40)
    table.add_column("Priority", style="yellow")
    table.add_column("Status", style="blue")
    table.add_column("Due", style="green")

    for task in task_list.tasks:
        table.add_row(
            str(task.id),
            task.title,
            task.priority.value,
            task.status.value,
            task.due_date.isoformat(timespec="minutes") if task.due_date else "-",
        )

    console.print(table)


@app.command()
def create_list(
    title: str = typer.Argument(..., help="Title of the new task list"),
    description: str | None = typer.Option(
        None, "--description", "-d", help="Optional description"
    ),
):
    """Create a task list."""
    try:
        with get_session_context() as session:
            created = TaskListService(session=session).create_task_list(
                TaskListCore(title=title, description=description)
            )
    except TaskListsError as e:
        _fail(e)
    console.print(f"[green]Created task list {created.id}[/green]")


@app.command()
def add_task(
    task_list_id: UUID = typer.Argument(..., help="ID of the owning task list"),
    title: str = typer.Argument(..., help="Title of the new task"),
    priority: TaskPriority | None = typer.Option(
        None, "--priority", "-p", help="Task priority (defaults to MEDIUM)"
    ),
    due: datetime | None = typer.Option(None, "--due", help="Due date"),
):
    """Add a task to a task list."""
    try:
        with get_session_context() as session:
            created = TaskService(session=session).create_task(
                task_list_id, TaskCore(title=title, priority=priority, due_date=due)
            )
    except TaskListsError as e:
        _fail(e)
    console.print(f"[green]Created task {created.id}[/green]")


@app.command()
def config(
    show: bool = typer.Option(False, "--show", help="Show current configuration"),
):
    """Show the effective configuration."""
    if not show:
        console.print("[yellow]Use --show to print the configuration[/yellow]")
        return

    console.print(
        Panel(
            json.dumps(get_settings().model_dump(mode="json"), indent=2),
            title="Current Configuration",
            border_style="blue",
        )
    )


@app.callback()
def main():
    """Task Lists CLI.

    Manage task lists and tasks and run the HTTP API.
    """
    settings = get_settings()
    setup_logging(settings.effective_log_level, settings.log_file)


if __name__ == "__main__":
    app()
