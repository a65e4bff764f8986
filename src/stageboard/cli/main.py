"""Stageboard CLI — the main entry point."""

from __future__ import annotations

from typing import TYPE_CHECKING

import typer
from rich.console import Console
from rich.markup import escape

from stageboard import __version__
from stageboard.cli.task_commands import app as tasks_app

if TYPE_CHECKING:
    from stageboard.config.settings import Settings

app = typer.Typer(
    name="stageboard",
    help="Staged task board with two-at-a-time assignment.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)
app.add_typer(tasks_app, name="tasks")
console = Console()


@app.callback(invoke_without_command=True)
def version_callback(
    version: bool = typer.Option(False, "--version", "-v", help="Show version"),
):
    if version:
        console.print(f"stageboard [dim]v{__version__}[/dim]")
        raise typer.Exit()


@app.command()
def serve(
    host: str | None = typer.Option(None, "--host", help="Interface to bind"),
    port: int | None = typer.Option(None, "--port", "-p", help="Port to listen on"),
):
    """Run the board API server in the foreground."""
    import uvicorn

    from stageboard.config.settings import get_settings
    from stageboard.logging_setup import setup_logging
    from stageboard.server.app import create_app
    from stageboard.tasks.errors import SeedFileError

    settings = get_settings()
    overrides = {
        key: value for key, value in {"host": host, "port": port}.items() if value is not None
    }
    if overrides:
        server = settings.server.model_copy(update=overrides)
        settings = settings.model_copy(update={"server": server})

    setup_logging(settings.log_level)

    try:
        app_instance = create_app(settings)
    except SeedFileError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(1)

    _show_status(settings)
    uvicorn.run(
        app_instance,
        host=settings.server.host,
        port=settings.server.port,
        access_log=False,
        log_level=settings.log_level.lower(),
    )


@app.command()
def status():
    """Show the current configuration."""
    from stageboard.config.settings import get_settings

    _show_status(get_settings())


def _show_status(settings: Settings) -> None:
    """Print config summary."""
    console.print()
    console.print(f"  [bold]App:[/bold]       {settings.app_name}")
    console.print(f"  [bold]Server:[/bold]    http://{settings.server.host}:{settings.server.port}")
    console.print(f"  [bold]Slots:[/bold]     {settings.board.max_assigned} per active group")
    console.print(f"  [bold]Seed:[/bold]      {settings.board.seed_file or 'built-in'}")
    console.print(f"  [bold]Log level:[/bold] {settings.log_level}")
    console.print()


if __name__ == "__main__":
    app()
