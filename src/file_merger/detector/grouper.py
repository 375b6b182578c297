"""Incremental grouping of discovered files into identical-content groups."""

from typing import Iterable, Optional

from ..common.logging import get_logger
from .comparator import ByteComparator
from .models import DiscoveredFile, FileGroup, SizeIndex

logger = get_logger(__name__)


class ContentGrouper:
    """Partitions files into groups of byte-identical content.

    Files are bucketed by size first; equal size alone never puts two files
    in the same group, the bytes are always compared.
    """

    def __init__(self, comparator: Optional[ByteComparator] = None) -> None:
        """Initialize content grouper.

        Args:
            comparator: Byte comparator used to confirm equality
        """
        self.comparator = comparator or ByteComparator()

    def add_file(self, index: SizeIndex, file: DiscoveredFile) -> int:
        """Place a file in the index.

        The file joins the first group in its size bucket whose representative
        has the same bytes, or starts a new singleton group.

        Args:
            index: Index being built (mutated in place)
            file: File to place

        Returns:
            Handle of the group the file ended up in
        """
        for handle in index.handles(file.size):
            representative = index.group(handle).representative
            if self.comparator.same_content(file.path, representative.path):
                index.add_to_group(handle, file)
                logger.debug(f"{file.path} matches {representative.path}")
                return handle

        return index.add_group(FileGroup.from_file(file))

    def build_index(self, files: Iterable[DiscoveredFile]) -> SizeIndex:
        """Group every file and return the frozen index.

        Args:
            files: Files to group, usually straight from a DirectoryWalker

        Returns:
            Frozen SizeIndex
        """
        index = SizeIndex()
        for file in files:
            self.add_file(index, file)
        return index.freeze()
