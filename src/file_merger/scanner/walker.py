"""Breadth-first directory walker."""

import os
from collections import deque
from typing import Iterator, Optional, Union

from ..common.exceptions import InvalidInputError, IOFailureError
from ..common.logging import get_logger
from ..config.settings import ScanConfig
from ..detector.models import DiscoveredFile

logger = get_logger(__name__)


class DirectoryWalker:
    """Walks a directory tree level by level and yields its files.

    Pending directories are kept in an explicit queue, so tree depth never
    grows the call stack. Symlinked directories are never followed, so link
    cycles cannot make the walk loop.
    """

    def __init__(self, config: Optional[ScanConfig] = None) -> None:
        """Initialize directory walker.

        Args:
            config: Ignored directory names and minimum file size
        """
        self.config = config or ScanConfig()

    def walk(self, root: Union[str, os.PathLike[str]]) -> Iterator[DiscoveredFile]:
        """Yield every file under root.

        Args:
            root: Directory to walk

        Yields:
            DiscoveredFile instances in breadth-first order

        Raises:
            InvalidInputError: If root is not a directory
            IOFailureError: If a directory or entry cannot be read
        """
        root_path = os.fspath(root)
        if not os.path.isdir(root_path):
            raise InvalidInputError(f"'{root_path}' is not a directory")

        logger.debug(f"Walking {root_path}")

        pending: deque[str] = deque([root_path])
        directories_visited = 0
        files_skipped = 0

        while pending:
            directory = pending.popleft()
            directories_visited += 1

            try:
                with os.scandir(directory) as entries:
                    for entry in entries:
                        if entry.is_dir(follow_symlinks=False):
                            if self.config.is_ignored(entry.name):
                                logger.debug(f"Skipping ignored directory {entry.path}")
                                continue
                            pending.append(entry.path)
                            continue

                        if entry.is_dir():
                            logger.debug(f"Not following directory link {entry.path}")
                            continue

                        size = entry.stat().st_size
                        if size < self.config.min_file_size:
                            files_skipped += 1
                            continue

                        yield DiscoveredFile(size=size, path=entry.path)
            except OSError as e:
                raise IOFailureError(f"Failed to read {directory}: {e}") from e

        logger.debug(
            f"Walked {directories_visited} directories under {root_path}, "
            f"skipped {files_skipped} files below {self.config.min_file_size} bytes"
        )
