"""CSV and JSON export functionality."""

import csv
import json
from pathlib import Path
from typing import Any

from ..common.constants import EXPORT_FORMATS
from ..common.exceptions import ExportError, InvalidArgumentError
from ..common.logging import get_logger
from ..detector.models import FileGroup
from ..detector.reconciler import ReconciliationReport

logger = get_logger(__name__)


def export_format(output_path: Path) -> str:
    """Pick the export format from the output file suffix.

    Raises:
        InvalidArgumentError: If the suffix is not .csv or .json
    """
    suffix = output_path.suffix.lower()
    if suffix not in EXPORT_FORMATS:
        raise InvalidArgumentError(
            f"Unsupported export format '{suffix or output_path.name}'. "
            f"Use one of: {', '.join(EXPORT_FORMATS)}"
        )
    return EXPORT_FORMATS[suffix]


class ReportExporter:
    """Exports duplicate groups and reconciliation reports to CSV or JSON."""

    def export_groups(self, groups: list[FileGroup], output_path: Path) -> None:
        """Export duplicate groups of a single tree.

        Args:
            groups: Duplicate groups to write
            output_path: Output file path, .csv or .json
        """
        if export_format(output_path) == "csv":
            rows = [
                [group_id, group.size, member.path]
                for group_id, group in enumerate(groups, start=1)
                for member in group.members
            ]
            self._write_csv(output_path, ["group_id", "size", "path"], rows)
        else:
            data = {
                "total_groups": len(groups),
                "total_files": sum(g.count for g in groups),
                "total_wasted_space": sum(g.wasted_size for g in groups),
                "groups": [
                    self._group_dict(group_id, group)
                    for group_id, group in enumerate(groups, start=1)
                ],
            }
            self._write_json(output_path, data)

        logger.info(f"Exported {len(groups)} groups to {output_path}")

    def export_report(self, report: ReconciliationReport, output_path: Path) -> None:
        """Export the classification of every unclassified file.

        Args:
            report: Reconciliation report
            output_path: Output file path, .csv or .json
        """
        if export_format(output_path) == "csv":
            rows = [
                [
                    group_id,
                    item.classification.value,
                    item.group.size,
                    member.path,
                    item.match.representative.path if item.match else "",
                ]
                for group_id, item in enumerate(report.items, start=1)
                for member in item.group.members
            ]
            self._write_csv(
                output_path,
                ["group_id", "classification", "size", "path", "destination_match"],
                rows,
            )
        else:
            data = {
                "unique_files": report.unique_count,
                "duplicate_files": report.duplicate_count,
                "groups": [
                    {
                        **self._group_dict(group_id, item.group),
                        "classification": item.classification.value,
                        "destination_match": (
                            item.match.paths if item.match else None
                        ),
                    }
                    for group_id, item in enumerate(report.items, start=1)
                ],
            }
            self._write_json(output_path, data)

        logger.info(f"Exported {len(report.items)} classified groups to {output_path}")

    @staticmethod
    def _group_dict(group_id: int, group: FileGroup) -> dict[str, Any]:
        return {
            "group_id": group_id,
            "size": group.size,
            "count": group.count,
            "wasted_size": group.wasted_size,
            "paths": group.paths,
        }

    @staticmethod
    def _write_csv(output_path: Path, header: list[str], rows: list[list[Any]]) -> None:
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(
                output_path, "w", newline="", encoding="utf-8", errors="surrogateescape"
            ) as f:
                writer = csv.writer(f)
                writer.writerow(header)
                writer.writerows(rows)
        except (OSError, UnicodeError) as e:
            raise ExportError(f"Failed to write {output_path}: {e}") from e

    @staticmethod
    def _write_json(output_path: Path, data: dict[str, Any]) -> None:
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(
                output_path, "w", encoding="utf-8", errors="surrogateescape"
            ) as f:
                json.dump(data, f, indent=2)
        except (OSError, UnicodeError) as e:
            raise ExportError(f"Failed to write {output_path}: {e}") from e
