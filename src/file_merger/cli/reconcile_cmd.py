"""Reconcile command."""

from pathlib import Path
from typing import Optional

import typer
from humanize import naturalsize

from ..common.constants import CONFIRM_ANSWERS, PROGRAM_NAME, PROGRAM_VERSION
from ..common.exceptions import FileMergerError
from ..config.settings import get_settings
from ..detector.comparator import ByteComparator
from ..detector.pipeline import DESTINATION_TREE, UNCLASSIFIED_TREE, ScanPipeline
from ..detector.reconciler import ReconciliationReport
from ..reporting.exporter import ReportExporter, export_format
from .arguments import validate_input_arguments
from .formatters import (
    console,
    create_progress,
    create_table,
    print_duplicate_groups,
    print_error,
    print_info,
    print_panel,
    print_success,
    print_warning,
)


def confirm_apply() -> bool:
    """Ask before a run that is allowed to modify the file system."""
    print_warning("Make changes is set to TRUE, the file system WILL be modified!")
    answer = typer.prompt("Do you wish to continue?", default="n")

    if answer.strip().lower() in CONFIRM_ANSWERS:
        print_info(f"'{answer}' received, continuing...")
        return True

    print_info(f"Aborting! ({answer}) received.")
    return False

def print_report(report: ReconciliationReport) -> None:
    """Print unique files, then unclassified files already at the destination."""
    unique_files = report.unique_files()
    if unique_files:
        table = create_table(title="Unique files")
        table.add_column("Size", style="green", width=12)
        table.add_column("Path", style="white", overflow="fold")
        for file in unique_files:
            table.add_row(naturalsize(file.size, binary=True), file.path)
        console.print(table)
    else:
        print_info("No unique files found.")

    duplicates = report.duplicate_groups()
    if duplicates:
        table = create_table(title="Already at destination")
        table.add_column("Size", style="green", width=12)
        table.add_column("Path", style="white", overflow="fold")
        table.add_column("Destination", style="yellow", overflow="fold")
        for item in duplicates:
            match_path = item.match.representative.path if item.match else ""
            for file in item.group.members:
                table.add_row(naturalsize(file.size, binary=True), file.path, match_path)
        console.print(table)
    else:
        print_info("No unclassified file is present at the destination.")

def reconcile(
    input_path: Path = typer.Argument(
        ..., help="Directory holding 'unclassified', 'unique' and 'duplicate'"
    ),
    destination_path: Path = typer.Argument(..., help="Already organized directory"),
    apply: bool = typer.Option(
        False, "--apply", help="Allow file system changes (asks for confirmation)"
    ),
    min_size: Optional[int] = typer.Option(
        None, "--min-size", min=0, help="Minimum file size in bytes [default: from settings]"
    ),
    ignore: Optional[list[str]] = typer.Option(
        None, "--ignore", "-i", help="Extra directory name to skip (repeatable)"
    ),
    export: Optional[Path] = typer.Option(
        None, "--export", "-o", help="Write the classification to a .csv or .json file"
    ),
) -> None:
    """Reconcile the unclassified tree against the destination tree."""
    settings = get_settings()

    print_info(f"Starting {PROGRAM_NAME} version {PROGRAM_VERSION}")

    try:
        arguments = validate_input_arguments(input_path, destination_path, apply)
        if export is not None:
            export_format(export)
    except FileMergerError as e:
        print_error(f"Error processing input arguments: {e}")
        raise typer.Exit(1)

    print_info(f"Input path: {arguments.input_path}")
    print_info(f"Destination path: {arguments.destination_path}")

    if arguments.apply:
        if not confirm_apply():
            return
    else:
        print_info("Make changes is set to false, no file system changes will be made.")

    try:
        pipeline = ScanPipeline(
            settings.scan_config(min_size=min_size, extra_ignored=ignore or ()),
            ByteComparator(settings.chunk_size),
        )
        progress = create_progress()
        with progress:
            tasks = {
                label: progress.add_task(f"[cyan]Scanning {label} files...", total=None)
                for label in (UNCLASSIFIED_TREE, DESTINATION_TREE)
            }
            # Both maps are complete before reconciliation starts
            unclassified, destination, report = pipeline.reconcile(
                arguments.unclassified_path,
                arguments.destination_path,
                progress_callback=lambda label, _: progress.advance(tasks[label]),
            )

        print_success(f"Scanned unclassified files: {unclassified.file_count:,} files")
        print_success(f"Scanned destination files: {destination.file_count:,} files")

        if export is not None:
            ReportExporter().export_report(report, export)
            print_success(f"Exported report to: {export}")

    except FileMergerError as e:
        print_error(f"Reconciliation failed: {e}")
        raise typer.Exit(1)

    summary_text = f"""
Unclassified files: {unclassified.file_count:,} ({len(unclassified):,} sizes)
Destination files: {destination.file_count:,} ({len(destination):,} sizes)
Unique files: {report.unique_count:,}
Duplicate files: {report.duplicate_count:,}
"""
    print_panel("Reconciliation Summary", summary_text.strip(), style="green")
    print_report(report)

    inner_duplicates = unclassified.duplicate_groups()
    if inner_duplicates:
        print_duplicate_groups(
            inner_duplicates, title="Duplicate groups inside unclassified"
        )

    if arguments.apply:
        print_warning("Applying changes is not implemented; no files were moved.")
