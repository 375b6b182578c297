"""Scan command."""

from pathlib import Path
from typing import Optional

import typer
from humanize import naturalsize

from ..common.exceptions import FileMergerError
from ..config.settings import get_settings
from ..detector.comparator import ByteComparator
from ..detector.models import SizeIndex
from ..detector.pipeline import ScanPipeline
from ..reporting.exporter import ReportExporter, export_format
from .formatters import (
    create_progress,
    print_duplicate_groups,
    print_error,
    print_info,
    print_panel,
    print_success,
)


def build_index_with_progress(pipeline: ScanPipeline, root: Path, label: str) -> SizeIndex:
    """Build the index of one tree behind a spinner."""
    progress = create_progress()

    with progress:
        task = progress.add_task(f"[cyan]Scanning {label}...", total=None)
        index = pipeline.build_index(
            root, progress_callback=lambda _: progress.advance(task)
        )

    print_success(f"Scanned {label}: {index.file_count:,} files")
    return index


def scan(
    root: Path = typer.Argument(..., help="Directory to scan"),
    min_size: Optional[int] = typer.Option(
        None, "--min-size", min=0, help="Minimum file size in bytes [default: from settings]"
    ),
    ignore: Optional[list[str]] = typer.Option(
        None, "--ignore", "-i", help="Extra directory name to skip (repeatable)"
    ),
    export: Optional[Path] = typer.Option(
        None, "--export", "-o", help="Write duplicate groups to a .csv or .json file"
    ),
) -> None:
    """Scan a directory tree for byte-identical files."""
    settings = get_settings()

    try:
        if export is not None:
            export_format(export)

        pipeline = ScanPipeline(
            settings.scan_config(min_size=min_size, extra_ignored=ignore or ()),
            ByteComparator(settings.chunk_size),
        )
        index = build_index_with_progress(pipeline, root, str(root))
        duplicate_groups = index.duplicate_groups()

        if export is not None:
            ReportExporter().export_groups(duplicate_groups, export)
            print_success(f"Exported report to: {export}")

    except FileMergerError as e:
        print_error(f"Scan failed: {e}")
        raise typer.Exit(1)

    print_info(f"Total duplicate group count = {len(duplicate_groups)}")

    if not duplicate_groups:
        print_success("No duplicates found!")
        return

    total_duplicates = sum(g.count for g in duplicate_groups)
    total_wasted = sum(g.wasted_size for g in duplicate_groups)

    summary_text = f"""
Files scanned: {index.file_count:,}
Duplicate groups: {len(duplicate_groups):,}
Duplicate files: {total_duplicates:,}
Wasted space: {naturalsize(total_wasted, binary=True)}
"""

    print_panel("Scan Summary", summary_text.strip(), style="green")
    print_duplicate_groups(duplicate_groups, title="Duplicate groups by size")
