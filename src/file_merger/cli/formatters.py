"""Rich formatting utilities for terminal output."""

from typing import Any, Optional

from humanize import naturalsize
from rich.console import Console
from rich.panel import Panel
from rich.progress import (
    Progress,
    SpinnerColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table

from ..detector.models import FileGroup

console = Console()
error_console = Console(stderr=True)


def print_success(message: str) -> None:
    """Print success message."""
    console.print(f"[green]✓[/green] {message}")


def print_error(message: str) -> None:
    """Print error message to stderr."""
    error_console.print(f"[red]✗[/red] {message}", style="red")


def print_warning(message: str) -> None:
    """Print warning message."""
    console.print(f"[yellow]⚠[/yellow] {message}", style="yellow")


def print_info(message: str) -> None:
    """Print info message."""
    console.print(f"[blue]ℹ[/blue] {message}")


def print_panel(title: str, content: str, style: str = "blue") -> None:
    """Print content in a panel.

    Args:
        title: Panel title
        content: Panel content
        style: Panel border style
    """
    console.print(Panel(content, title=title, border_style=style))


def create_progress() -> Progress:
    """Create a spinner for scans of unknown length.

    Returns:
        Configured Progress instance
    """
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        TextColumn("{task.completed} files"),
        TimeElapsedColumn(),
        console=console,
        transient=True,
    )


def create_table(title: Optional[str] = None, **kwargs: Any) -> Table:
    """Create a Rich table with common styling.

    Args:
        title: Optional table title
        **kwargs: Additional Table arguments

    Returns:
        Configured Table instance
    """
    return Table(title=title, show_header=True, header_style="bold cyan", **kwargs)


def print_duplicate_groups(groups: list[FileGroup], title: str) -> None:
    """Print duplicate groups, one row per member path.

    Args:
        groups: Duplicate groups, already ordered for display
        title: Table title
    """
    table = create_table(title=title)
    table.add_column("Group", style="cyan", width=6)
    table.add_column("Size", style="green", width=12)
    table.add_column("Wasted", style="red", width=12)
    table.add_column("Path", style="white", overflow="fold")

    for group_id, group in enumerate(groups, start=1):
        for position, member in enumerate(group.members):
            if position == 0:
                table.add_row(
                    str(group_id),
                    naturalsize(group.size, binary=True),
                    naturalsize(group.wasted_size, binary=True),
                    member.path,
                )
            else:
                table.add_row("", "", "", member.path)
        table.add_section()

    console.print(table)
