"""
CLI interface for FishFinder using Typer.

Search the Hay Day fish catalog by name, spot or lure colour, show the whole
catalog as a table, look up the reference images, or browse interactively.
"""

import asyncio
import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.prompt import Prompt
from rich.table import Table
from rich.traceback import install as install_rich_traceback

from ..config import Settings, get_settings
from ..core import assets, filters, mappers
from ..core.catalog import catalog_source, load_catalog
from ..core.filters import SearchMode, SpotPolicy
from ..core.models import FishRecord
from ..core.session import SearchSession
from ..utils.exceptions import (
    ConfigurationError,
    ErrorCategory,
    FishFinderError,
    LoadError,
)
from ..utils.logging import generate_correlation_id, get_logger, setup_logging

install_rich_traceback(show_locals=False)

app = typer.Typer(
    name="fishfinder",
    help="[bold blue]FishFinder[/bold blue] - Hay Day fishing reference 🎣",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)

console = Console()
# Errors and warnings stay off stdout so --json output parses
err_console = Console(stderr=True)

_logger = get_logger(__name__)


class ExitCodes:
    SUCCESS = 0
    GENERAL_ERROR = 1
    CONFIGURATION_ERROR = 2
    NETWORK_ERROR = 3
    DATA_ERROR = 4
    VALIDATION_ERROR = 5
    USER_INTERRUPTED = 130


def get_exit_code_for_error(error: Exception) -> int:
    """Determine appropriate exit code based on error type."""
    if isinstance(error, FishFinderError):
        category_to_exit_code = {
            ErrorCategory.CONFIGURATION_ERROR: ExitCodes.CONFIGURATION_ERROR,
            ErrorCategory.NETWORK_ERROR: ExitCodes.NETWORK_ERROR,
            ErrorCategory.DATA_ERROR: ExitCodes.DATA_ERROR,
            ErrorCategory.USER_ERROR: ExitCodes.VALIDATION_ERROR,
        }
        return category_to_exit_code.get(error.category, ExitCodes.GENERAL_ERROR)

    if isinstance(error, KeyboardInterrupt):
        return ExitCodes.USER_INTERRUPTED

    return ExitCodes.GENERAL_ERROR


def get_configured_settings(config_path: Path | None = None) -> Settings:
    """Load settings, optionally from a specific env file."""
    try:
        if config_path is not None:
            settings = Settings(_env_file=str(config_path))
            _logger.debug("Loaded configuration", config_file=str(config_path))
        else:
            settings = get_settings()
    except Exception as e:
        raise ConfigurationError(
            f"Failed to load configuration: {e!s}",
            config_key="configuration_file" if config_path else "default_settings",
            actual_value=str(config_path) if config_path else "default",
        ) from e

    try:
        SpotPolicy(settings.default_spot_policy)
    except ValueError as e:
        raise ConfigurationError(
            f"Unknown spot policy: {settings.default_spot_policy}",
            config_key="default_spot_policy",
            actual_value=settings.default_spot_policy,
        ) from e

    return settings


def display_error(
    message: str, exception: Exception | None = None, show_hints: bool = True
) -> None:
    """Display an error with its troubleshooting hints."""
    err_console.print(f"[red]✗ Error:[/red] {message}")

    if isinstance(exception, FishFinderError):
        if exception.user_message != exception.message:
            err_console.print(f"[dim red]Details: {exception.message}[/dim red]")

        err_console.print(
            f"[dim]Category: {exception.category.value.replace('_', ' ').title()}[/dim]"
        )

        if show_hints and exception.troubleshooting_hints:
            err_console.print(
                "\n[bold yellow]💡 Troubleshooting Tips:[/bold yellow]"
            )
            for i, hint in enumerate(exception.troubleshooting_hints, 1):
                err_console.print(f"  {i}. {hint}")

    elif exception:
        err_console.print(f"[dim red]Details: {exception}[/dim red]")

    _logger.error(f"CLI Error: {message}", error=exception)


def display_warning(message: str) -> None:
    err_console.print(f"[yellow]⚠[/yellow] {message}")


def display_info(message: str) -> None:
    console.print(f"[blue]i[/blue] {message}")


def fish_table(records: Sequence[FishRecord], title: str) -> Table:
    """Build the Rich table used for search results and the table view."""
    table = Table(
        title=f"[bold magenta]{title}[/bold magenta]",
        show_header=True,
        header_style="bold magenta",
        border_style="blue",
    )
    table.add_column("Name", style="white")
    table.add_column("Lure", style="cyan")
    table.add_column("Spots", style="green")
    table.add_column("Circle", style="white")
    table.add_column("Event Only", justify="center")

    for record in records:
        row = mappers.map_fish_to_row(record)
        event_style = "yellow" if record.event_only else "dim"
        table.add_row(
            row["Name"],
            row["Lure"],
            row["Spots"],
            row["Circle"],
            f"[{event_style}]{row['Event Only']}[/{event_style}]",
        )

    return table


def fish_json(records: Sequence[FishRecord], settings: Settings) -> dict[str, Any]:
    """Records in catalog shape, each with the location of its image."""
    return {
        "fish": [
            {
                **mappers.map_fish_to_raw(record),
                "image": assets.fish_image_location(record.name, settings),
            }
            for record in records
        ]
    }


def display_fish(
    records: Sequence[FishRecord],
    title: str,
    settings: Settings,
    json_output: bool = False,
) -> None:
    if json_output:
        typer.echo(json.dumps(fish_json(records, settings), indent=2))
        return

    if not records:
        console.print("[yellow]No fish found[/yellow]")
        return

    console.print(fish_table(records, title))
    console.print(f"[dim]{len(records)} fish[/dim]")


def load_catalog_for_cli(settings: Settings) -> tuple[FishRecord, ...]:
    """Load the catalog; a failed load is reported and treated as empty."""
    try:
        return asyncio.run(load_catalog(settings))
    except LoadError as e:
        display_error(f"Could not load fish catalog from {catalog_source(settings)}", e)
        display_warning("Continuing with an empty catalog")
        return ()


def _context_catalog(ctx: typer.Context) -> tuple[FishRecord, ...]:
    if ctx.obj.get("catalog") is None:
        ctx.obj["catalog"] = load_catalog_for_cli(ctx.obj["settings"])
    return ctx.obj["catalog"]


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose logging"
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Only show warnings and errors"
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file path (.env)",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
    log_format: str | None = typer.Option(
        None, "--log-format", help="Log format: console or json"
    ),
):
    """
    [bold blue]FishFinder[/bold blue] - find which Hay Day fish bite where

    [bold]Examples:[/bold]
        fishfinder search name carp
        fishfinder search spot 3 --policy specific-only
        fishfinder search lure red
        fishfinder table
        fishfinder shell
    """
    try:
        settings = get_configured_settings(config)
    except ConfigurationError as e:
        display_error("Configuration error", e)
        raise typer.Exit(get_exit_code_for_error(e))

    json_logs = (log_format or settings.log_format) == "json"
    setup_logging(verbose=verbose, quiet=quiet, json_logs=json_logs)
    _logger.with_correlation_id(generate_correlation_id())

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings
    ctx.obj["verbose"] = verbose
    ctx.obj["catalog"] = None


@app.command("search")
def search_command(
    ctx: typer.Context,
    mode: SearchMode = typer.Argument(..., help="What to search: name, spot or lure"),
    query: str = typer.Argument(..., help="Search text or spot number"),
    policy: SpotPolicy | None = typer.Option(
        None,
        "--policy",
        "-p",
        help="Spot search: include fish catchable anywhere, or only specific spots",
    ),
    json_output: bool = typer.Option(False, "--json", help="Print results as JSON"),
):
    """
    Search the fish catalog.

    [bold]Examples:[/bold]
        fishfinder search name "golden"
        fishfinder search spot 7 --policy specific-only
        fishfinder search lure blue --json
    """
    settings = ctx.obj["settings"]
    catalog = _context_catalog(ctx)
    spot_policy = policy or SpotPolicy(settings.default_spot_policy)

    results = filters.search(catalog, mode, query, spot_policy)

    _logger.audit(
        "search",
        mode=mode.value,
        query=query,
        policy=spot_policy.value,
        result_count=len(results),
    )

    title = f"Fish matching {mode.value} '{query.strip()}'"
    if mode is SearchMode.SPOT:
        title += f" ({spot_policy.value})"
    display_fish(results, title, settings, json_output)


@app.command("table")
def table_command(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", help="Print records as JSON"),
):
    """Show every fish in the catalog."""
    catalog = _context_catalog(ctx)
    display_fish(
        filters.table_view(catalog), "All Fish", ctx.obj["settings"], json_output
    )


@app.command("map")
def map_command(ctx: typer.Context):
    """Show where the fishing map image lives."""
    console.print(assets.map_image_location(ctx.obj["settings"]))


@app.command("info")
def info_command(ctx: typer.Context):
    """Show where the lure and rarity sheets and the fishing map live."""
    for location in assets.info_sheet_locations(ctx.obj["settings"]):
        console.print(location)


SHELL_HELP = """[bold]Commands:[/bold]
  :mode name|spot|lure          switch search mode (clears the query)
  :policy include-any|specific-only   spot search policy
  :table                        toggle the table of all fish
  :map                          toggle the fishing map
  :info                         toggle the lure and rarity sheets
  :help                         show this help
  :quit                         leave
Anything else is searched in the current mode."""


def _render_session(session: SearchSession, settings: Settings) -> None:
    if session.show_table:
        console.print(fish_table(session.results, "All Fish"))
        return

    if session.show_info:
        display_info(f"Lures: {assets.info_image_location(settings)}")
        display_info(f"Rarity: {assets.rarity_image_location(settings)}")
    if session.show_map or session.show_info:
        display_info(f"Map: {assets.map_image_location(settings)}")

    if session.query.strip():
        display_fish(
            session.results, f"Fish matching {session.mode.value}", settings
        )
    elif session.results:
        # Left over from closing the table
        display_fish(session.results, "All Fish", settings)


def _handle_shell_command(
    session: SearchSession, settings: Settings, line: str
) -> bool:
    """Apply one shell command. Returns False when the shell should exit."""
    command, _, argument = line[1:].partition(" ")
    argument = argument.strip()

    if command in ("quit", "q", "exit"):
        return False

    if command == "mode":
        try:
            changed = session.set_mode(argument)
        except ValueError:
            display_warning(f"Unknown mode '{argument}' (name, spot or lure)")
        else:
            if changed:
                display_info(f"Searching by {session.mode.value}")
            else:
                display_warning("Close the table first (:table)")
    elif command == "policy":
        try:
            session.set_policy(argument)
        except ValueError:
            display_warning(f"Unknown policy '{argument}'")
        else:
            display_info(f"Spot policy: {session.policy.value}")
            _render_session(session, settings)
    elif command == "table":
        session.toggle_table()
        _render_session(session, settings)
    elif command == "map":
        if not session.toggle_map():
            display_warning("Close the table and info sheet first")
        _render_session(session, settings)
    elif command == "info":
        if not session.toggle_info():
            display_warning("Close the table and map first")
        _render_session(session, settings)
    elif command == "help":
        console.print(SHELL_HELP)
    else:
        display_warning(f"Unknown command ':{command}', try :help")

    return True


@app.command("shell")
def shell_command(ctx: typer.Context):
    """Browse the catalog interactively."""
    settings = ctx.obj["settings"]
    session = SearchSession(
        catalog=_context_catalog(ctx),
        policy=SpotPolicy(settings.default_spot_policy),
    )

    console.print("[bold blue]Hay Day Fishing Finder 🎣[/bold blue]")
    console.print(SHELL_HELP)

    while True:
        try:
            line = Prompt.ask(f"[bold cyan]{session.mode.value}[/bold cyan]", default="")
        except (EOFError, KeyboardInterrupt):
            break

        if line.startswith(":"):
            if not _handle_shell_command(session, settings, line.strip()):
                break
            continue

        if not session.searchable:
            display_warning("Close the table first (:table)")
            continue

        session.set_query(line)
        _render_session(session, settings)

    _logger.debug("Shell closed")


@app.command("config-validate")
def config_validate_command(ctx: typer.Context):
    """Show the effective configuration."""
    settings: Settings = ctx.obj["settings"]

    table = Table(
        title="[bold magenta]Configuration[/bold magenta]",
        show_header=True,
        border_style="blue",
    )
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="white")

    config_items: list[tuple[str, Any]] = [
        ("Log Level", settings.log_level),
        ("Log Format", settings.log_format),
        ("Catalog URL", settings.catalog_url or "Not Set"),
        ("Catalog Path", str(settings.catalog_path)),
        ("HTTP Timeout", f"{settings.http_timeout}s"),
        ("Asset Base URL", settings.asset_base_url),
        ("Map Image", settings.map_image),
        ("Info Image", settings.info_image),
        ("Rarity Image", settings.rarity_image),
        ("Default Spot Policy", settings.default_spot_policy),
    ]
    for setting, value in config_items:
        table.add_row(setting, str(value))

    console.print(table)

    if not settings.catalog_url and not Path(settings.catalog_path).exists():
        display_warning(f"Catalog file not found: {settings.catalog_path}")
        raise typer.Exit(ExitCodes.CONFIGURATION_ERROR)


if __name__ == "__main__":
    app()
