"""
Command line interface for cmdpal.

Runs the palette engine against the sample admin catalog: search it the way
the palette would, inspect or update the recently-used list, or open the
interactive palette.
"""

from typing import Optional

import typer
from rich.table import Table
from rich.text import Text

from cmdpal import __version__
from cmdpal.catalog import build_admin_commands
from cmdpal.commands import CommandRegistry
from cmdpal.config.settings import get_state_path
from cmdpal.dispatcher import Dispatcher
from cmdpal.exceptions import CmdpalError
from cmdpal.fuzzy import highlight
from cmdpal.ranking import rank
from cmdpal.recency import RecencyStore
from cmdpal.storage import JsonFileStorage
from cmdpal.utils.logging_utils import configure_cli_logging, setup_tui_logging
from cmdpal.utils.output import console, print_json

app = typer.Typer(help="Keyboard-driven command palette engine", no_args_is_help=True)


def _recency() -> RecencyStore:
    return RecencyStore(JsonFileStorage(get_state_path()))


def _catalog() -> CommandRegistry:
    return build_admin_commands(lambda route: console.print(f"[cyan]→ {route}[/cyan]"))


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"cmdpal version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to the log file"),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
) -> None:
    """cmdpal - fuzzy command search and dispatch"""
    configure_cli_logging(verbose)


@app.command()
def search(
    query: str = typer.Argument("", help="Query text; empty shows the grouped start list"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """Show the candidates the palette would list for QUERY."""
    recent_ids = _recency().load()
    ranked = rank(_catalog(), query, recent_ids)

    if json_output:
        print_json(
            {
                "query": query,
                "candidates": [c.id for c in ranked.candidates],
                "sections": [{"label": s.label, "start": s.start} for s in ranked.sections],
            }
        )
        return

    if not ranked.candidates:
        console.print(f"[yellow]No results for “{query}”[/yellow]")
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Section", style="magenta")
    table.add_column("Command")
    table.add_column("Description", style="dim")
    table.add_column("Keys", style="dim")
    table.add_column("ID", style="dim")

    for i, command in enumerate(ranked.candidates):
        label = Text()
        for segment in highlight(command.label, query):
            label.append(segment.text, style="bold yellow" if segment.matched else "")
        table.add_row(
            str(i),
            ranked.section_at(i) or "",
            label,
            command.description,
            " ".join(command.shortcut),
            command.id,
        )

    console.print(table)


@app.command()
def recent(
    json_output: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """List recently executed commands, most recent first."""
    ids = _recency().load()
    if json_output:
        print_json(ids)
        return

    if not ids:
        console.print("[dim]No recent commands[/dim]")
        return

    registry = _catalog()
    for position, command_id in enumerate(ids, 1):
        command = registry.get(command_id)
        label = command.label if command else "[dim](no longer available)[/dim]"
        console.print(f"{position}. {label} [dim]{command_id}[/dim]")


@app.command()
def run(command_id: str = typer.Argument(..., help="Id of the command to execute")) -> None:
    """Execute a command by id and record it as recently used."""
    try:
        command = _catalog().require(command_id)
    except CmdpalError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    Dispatcher(_recency()).execute(command)
    console.print(f"[green]✓ Ran {command.label}[/green]")


@app.command("open")
def open_palette(
    query: Optional[str] = typer.Option(None, "--query", "-q", help="Pre-fill the palette query"),
) -> None:
    """Open the interactive demo shell with the palette showing."""
    from cmdpal.ui.app import PaletteApp

    setup_tui_logging(__name__)
    PaletteApp(initial_query=query if query is not None else "").run()


def run_cli() -> None:
    """Entry point for the CLI"""
    app()


if __name__ == "__main__":
    run_cli()
