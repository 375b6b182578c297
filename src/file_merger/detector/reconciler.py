"""Cross-tree reconciliation of unclassified files against a destination."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from ..common.exceptions import DetectionError
from ..common.logging import get_logger
from .comparator import ByteComparator
from .models import DiscoveredFile, FileGroup, SizeIndex

logger = get_logger(__name__)


class Classification(str, Enum):
    """Outcome for one unclassified group."""

    UNIQUE = "unique"
    DUPLICATE = "duplicate"


@dataclass
class GroupClassification:
    """An unclassified group and what the destination says about it."""

    group: FileGroup
    classification: Classification
    match: Optional[FileGroup] = None

    @property
    def is_duplicate(self) -> bool:
        return self.classification is Classification.DUPLICATE


@dataclass
class ReconciliationReport:
    """Classification of every group in an unclassified tree."""

    items: list[GroupClassification] = field(default_factory=list)

    def unique_groups(self) -> list[GroupClassification]:
        return [item for item in self.items if not item.is_duplicate]

    def duplicate_groups(self) -> list[GroupClassification]:
        return [item for item in self.items if item.is_duplicate]

    def unique_files(self) -> list[DiscoveredFile]:
        """Every unclassified file with no copy at the destination."""
        return [
            member for item in self.unique_groups() for member in item.group.members
        ]

    def duplicate_files(self) -> list[DiscoveredFile]:
        """Every unclassified file already present at the destination."""
        return [
            member
            for item in self.duplicate_groups()
            for member in item.group.members
        ]

    def classification_of(self, path: str) -> Optional[Classification]:
        """Look up the classification of one unclassified file by path."""
        for item in self.items:
            if any(member.path == path for member in item.group.members):
                return item.classification
        return None

    @property
    def unique_count(self) -> int:
        return len(self.unique_files())

    @property
    def duplicate_count(self) -> int:
        return len(self.duplicate_files())


class Reconciler:
    """Classifies unclassified groups as unique or duplicate of the destination."""

    def __init__(self, comparator: Optional[ByteComparator] = None) -> None:
        """Initialize reconciler.

        Args:
            comparator: Byte comparator used on group representatives
        """
        self.comparator = comparator or ByteComparator()

    def reconcile(
        self, unclassified: SizeIndex, destination: SizeIndex
    ) -> ReconciliationReport:
        """Classify every group of the unclassified index.

        A size missing from the destination makes its groups unique without
        any byte comparison. Otherwise each group is compared against every
        destination group of that size and is a duplicate on the first match.

        Args:
            unclassified: Frozen index of the unclassified tree
            destination: Frozen index of the destination tree

        Returns:
            Reconciliation report, ordered by ascending size

        Raises:
            DetectionError: If either index is still being built
        """
        if not unclassified.frozen or not destination.frozen:
            raise DetectionError(
                "Both size indexes must be fully built before reconciliation"
            )

        logger.info(
            f"Reconciling {unclassified.group_count} groups against "
            f"{destination.group_count} destination groups"
        )

        report = ReconciliationReport()

        for size in unclassified.sizes():
            candidates = destination.bucket(size)

            for group in unclassified.bucket(size):
                match = self._find_match(group, candidates)
                if match is None:
                    report.items.append(
                        GroupClassification(group, Classification.UNIQUE)
                    )
                else:
                    report.items.append(
                        GroupClassification(group, Classification.DUPLICATE, match)
                    )

        logger.info(
            f"Reconciliation complete: {report.unique_count} unique files, "
            f"{report.duplicate_count} duplicate files"
        )
        return report

    def _find_match(
        self, group: FileGroup, candidates: list[FileGroup]
    ) -> Optional[FileGroup]:
        path = group.representative.path
        for candidate in candidates:
            if self.comparator.same_content(path, candidate.representative.path):
                return candidate
        return None
