"""CLI commands that drive a running board server over HTTP."""

from __future__ import annotations

from typing import Any

import httpx
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

app = typer.Typer(
    name="tasks",
    help="Work with the board on a running server.",
    no_args_is_help=True,
)
console = Console()


def _get_client() -> httpx.Client:
    """Create an HTTP client pointed at the configured server."""
    from stageboard.config.settings import get_settings

    settings = get_settings()
    base_url = f"http://{settings.server.host}:{settings.server.port}"
    return httpx.Client(base_url=base_url, timeout=5.0)


def _request(method: str, path: str, **kwargs: Any) -> Any:
    """Send one request and return the decoded body, exiting on failure."""
    client = _get_client()
    try:
        resp = client.request(method, path, **kwargs)
    except httpx.TransportError as exc:
        console.print(f"[red]Server not reachable at {client.base_url}: {escape(str(exc))}[/red]")
        console.print("[dim]Start it with: stageboard serve[/dim]")
        raise typer.Exit(1)
    finally:
        client.close()

    if resp.is_error:
        try:
            detail = resp.json().get("detail", resp.text)
        except ValueError:
            detail = resp.text
        console.print(f"[red]{escape(str(detail))}[/red]")
        raise typer.Exit(1)

    if resp.status_code == 204 or not resp.content:
        return None
    return resp.json()


def _task_table(title: str, tasks: list[dict]) -> Table:
    table = Table(title=title, show_lines=False)
    table.add_column("ID", style="dim", justify="right")
    table.add_column("Group", justify="right")
    table.add_column("Title", style="bold")
    table.add_column("Persona")
    table.add_column("Description", max_width=40)
    for task in tasks:
        table.add_row(
            str(task["id"]),
            str(task["group"]),
            task["title"],
            task["persona"],
            task["description"],
        )
    return table


@app.command("list")
def list_tasks():
    """Show the board as To Do / In Progress / Completed."""
    tasks = _request("GET", "/tasks")

    if not tasks:
        console.print("[dim]The board is empty.[/dim]")
        console.print('[dim]Add one: stageboard tasks add "Title" --group 1[/dim]')
        raise typer.Exit()

    todo = [t for t in tasks if not t["completed"] and not t["assigned"]]
    in_progress = [t for t in tasks if t["assigned"] and not t["completed"]]
    done = [t for t in tasks if t["completed"]]

    console.print(_task_table(f"To Do ({len(todo)})", todo))
    console.print(_task_table(f"In Progress ({len(in_progress)})", in_progress))
    console.print(_task_table(f"Completed ({len(done)})", done))


@app.command("add")
def add_task(
    title: str = typer.Argument(help="Task title (must be unique)"),
    group: int = typer.Option(1, "--group", "-g", min=1, help="Stage number"),
    description: str = typer.Option("", "--description", "-d", help="Longer description"),
    persona: str = typer.Option("", "--persona", "-p", help="Who does the work"),
):
    """Add a task to the board."""
    task = _request(
        "POST",
        "/tasks",
        json={
            "title": title,
            "description": description,
            "persona": persona,
            "group": group,
        },
    )
    console.print(f"  [green]✓[/green] Added task [bold]{task['title']}[/bold] (ID: {task['id']})")
    if task["assigned"]:
        console.print("  [dim]Now in progress.[/dim]")


@app.command("edit")
def edit_task(
    task_id: int = typer.Argument(help="Task ID to edit"),
    title: str | None = typer.Option(None, "--title", "-t", help="New title"),
    description: str | None = typer.Option(None, "--description", "-d", help="New description"),
    persona: str | None = typer.Option(None, "--persona", "-p", help="New persona"),
    group: int | None = typer.Option(None, "--group", "-g", min=1, help="New stage number"),
):
    """Change fields of an existing task."""
    changes = {
        key: value
        for key, value in {
            "title": title,
            "description": description,
            "persona": persona,
            "group": group,
        }.items()
        if value is not None
    }
    if not changes:
        console.print("[yellow]Nothing to change.[/yellow] Pass at least one option.")
        raise typer.Exit(1)

    task = _request("PATCH", f"/tasks/{task_id}", json=changes)
    console.print(f"  [green]✓[/green] Updated task [bold]{task['title']}[/bold] (ID: {task['id']})")


@app.command("complete")
def complete_task(
    title: str = typer.Argument(help="Title of the task to complete"),
):
    """Mark a task as completed."""
    task = _request("POST", "/tasks/complete", json={"title": title})
    console.print(f"  [green]✓[/green] Completed [bold]{task['title']}[/bold].")


@app.command("remove")
def remove_task(
    task_id: int = typer.Argument(help="Task ID to remove"),
):
    """Remove a task from the board."""
    _request("DELETE", f"/tasks/{task_id}")
    console.print(f"  [green]✓[/green] Removed task [bold]{task_id}[/bold].")


@app.command("reset")
def reset_board(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt"),
):
    """Restore the board to its seed tasks."""
    if not yes:
        typer.confirm("Discard all changes and reload the seed tasks?", abort=True)
    tasks = _request("POST", "/tasks/reset")
    console.print(f"  [green]✓[/green] Board reset ({len(tasks)} tasks).")
