"""Main CLI application."""

import typer
from pydantic import ValidationError

from ..common.exceptions import ConfigError
from ..common.logging import setup_logging
from ..config.settings import get_settings
from .arguments import UsageErrorExitCommand
from .config_cmd import config_app
from .formatters import print_error
from .reconcile_cmd import reconcile
from .scan_cmd import scan

app = typer.Typer(
    name="file-merger",
    help="Find byte-identical files and check unclassified files against a destination",
    add_completion=False,
)

# Register subcommands
app.add_typer(config_app, name="config")

# Add main commands
app.command(name="reconcile", cls=UsageErrorExitCommand)(reconcile)
app.command(name="scan", cls=UsageErrorExitCommand)(scan)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    """Byte-for-byte duplicate finder for directory trees."""
    try:
        settings = get_settings()
        log_level = "DEBUG" if verbose else settings.log_level
        setup_logging(level=log_level, log_file=settings.log_file)
    except (ValidationError, ConfigError) as e:
        print_error(f"Invalid configuration: {e}")
        raise typer.Exit(1)
