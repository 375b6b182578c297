"""Chunked byte-for-byte file comparison."""

from ..common.constants import CHUNK_SIZE
from ..common.exceptions import IOFailureError
from ..common.logging import get_logger

logger = get_logger(__name__)


class ByteComparator:
    """Compares two files chunk by chunk, stopping at the first difference.

    No checksums are involved, so there are no false positives from hash
    collisions. Callers are expected to compare only files of equal size.
    """

    def __init__(self, chunk_size: int = CHUNK_SIZE) -> None:
        """Initialize byte comparator.

        Args:
            chunk_size: Bytes read from each file per step
        """
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self.chunk_size = chunk_size
        self.comparisons = 0

    def same_content(self, path_a: str, path_b: str) -> bool:
        """Check whether two files hold exactly the same bytes.

        Args:
            path_a: First file path
            path_b: Second file path

        Returns:
            True if both files are byte-identical

        Raises:
            IOFailureError: If either file cannot be opened or read
        """
        self.comparisons += 1

        try:
            with open(path_a, "rb") as stream_a, open(path_b, "rb") as stream_b:
                while True:
                    chunk_a = stream_a.read(self.chunk_size)
                    chunk_b = stream_b.read(self.chunk_size)

                    if len(chunk_a) != len(chunk_b):
                        # Sizes should already match; a short read means they differ
                        logger.debug(f"Length mismatch: {path_a} vs {path_b}")
                        return False

                    if chunk_a != chunk_b:
                        return False

                    if not chunk_a:
                        return True
        except OSError as e:
            raise IOFailureError(
                f"Failed to compare {path_a} and {path_b}: {e}"
            ) from e


_default_comparator = ByteComparator()


def same_content(path_a: str, path_b: str) -> bool:
    """Compare two files with the default 1024-byte chunk comparator."""
    return _default_comparator.same_content(path_a, path_b)
