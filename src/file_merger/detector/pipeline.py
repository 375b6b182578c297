"""Scan and reconciliation pipeline."""

import functools
import os
from typing import Callable, Iterable, Iterator, Optional, Union

from ..common.logging import get_logger
from ..config.settings import ScanConfig
from ..scanner.walker import DirectoryWalker
from .comparator import ByteComparator
from .grouper import ContentGrouper
from .models import DiscoveredFile, SizeIndex
from .reconciler import ReconciliationReport, Reconciler

logger = get_logger(__name__)

PathArg = Union[str, os.PathLike[str]]

UNCLASSIFIED_TREE = "unclassified"
DESTINATION_TREE = "destination"


class ScanPipeline:
    """Orchestrates walking, grouping and reconciliation."""

    def __init__(
        self,
        config: Optional[ScanConfig] = None,
        comparator: Optional[ByteComparator] = None,
    ) -> None:
        """Initialize scan pipeline.

        Args:
            config: Walker configuration shared by every tree
            comparator: Byte comparator shared by grouping and reconciliation
        """
        self.config = config or ScanConfig()
        self.comparator = comparator or ByteComparator()
        self.walker = DirectoryWalker(self.config)
        self.grouper = ContentGrouper(self.comparator)
        self.reconciler = Reconciler(self.comparator)

    def build_index(
        self,
        root: PathArg,
        progress_callback: Optional[Callable[[DiscoveredFile], None]] = None,
    ) -> SizeIndex:
        """Walk one tree and group its files by content.

        Args:
            root: Directory to scan
            progress_callback: Called once per discovered file

        Returns:
            Frozen SizeIndex of the tree
        """
        logger.info(f"Building file map for {os.fspath(root)}")
        comparisons_before = self.comparator.comparisons

        files: Iterable[DiscoveredFile] = self.walker.walk(root)
        if progress_callback is not None:
            files = _report_each(files, progress_callback)

        index = self.grouper.build_index(files)

        duplicates = index.duplicate_groups()
        logger.info(
            f"Found {index.file_count} files in {index.group_count} groups "
            f"across {len(index)} sizes ({len(duplicates)} duplicate groups, "
            f"{self.comparator.comparisons - comparisons_before} comparisons)"
        )
        return index

    def reconcile(
        self,
        unclassified_root: PathArg,
        destination_root: PathArg,
        progress_callback: Optional[Callable[[str, DiscoveredFile], None]] = None,
    ) -> tuple[SizeIndex, SizeIndex, ReconciliationReport]:
        """Build both indexes completely, then classify the unclassified tree.

        Args:
            unclassified_root: Directory of files awaiting classification
            destination_root: Already organized directory
            progress_callback: Called with the tree label ("unclassified" or
                "destination") and each discovered file

        Returns:
            Tuple of (unclassified index, destination index, report)
        """
        indexes = []
        for label, root in (
            (UNCLASSIFIED_TREE, unclassified_root),
            (DESTINATION_TREE, destination_root),
        ):
            callback = None
            if progress_callback is not None:
                callback = functools.partial(progress_callback, label)
            indexes.append(self.build_index(root, callback))

        unclassified, destination = indexes
        report = self.reconciler.reconcile(unclassified, destination)
        return unclassified, destination, report


def _report_each(
    files: Iterable[DiscoveredFile], callback: Callable[[DiscoveredFile], None]
) -> Iterator[DiscoveredFile]:
    for file in files:
        callback(file)
        yield file
