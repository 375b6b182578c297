"""Configuration commands."""

import typer

from ..config.settings import get_settings
from .formatters import console, create_table

config_app = typer.Typer(help="Inspect configuration settings")


@config_app.command()
def show() -> None:
    """Show the effective configuration."""
    settings = get_settings()

    table = create_table(title="Configuration")
    table.add_column("Setting", style="cyan", width=24)
    table.add_column("Value", style="white")

    table.add_row("Min file size", str(settings.min_file_size))
    table.add_row("Chunk size", str(settings.chunk_size))
    table.add_row("Ignored directories", ", ".join(settings.ignored_directory_names))
    table.add_row("Log level", settings.log_level)
    table.add_row("Log file", str(settings.log_file) if settings.log_file else "None")

    console.print(table)
