"""Data models for discovered files, content groups and the size index."""

import os
from dataclasses import dataclass, field
from typing import Iterator

from ..common.exceptions import DetectionError


@dataclass(frozen=True)
class DiscoveredFile:
    """A regular file found while walking a directory tree."""

    size: int
    path: str

    @property
    def name(self) -> str:
        """File name without its directory."""
        return os.path.basename(self.path)

    @property
    def parent(self) -> str:
        """Directory containing the file."""
        return os.path.dirname(self.path)


@dataclass
class FileGroup:
    """Files confirmed to hold byte-identical content.

    The first member is the representative: later candidates of the same
    size are compared against it only.
    """

    size: int
    members: list[DiscoveredFile] = field(default_factory=list)
    _frozen: bool = field(default=False, init=False, repr=False, compare=False)

    @classmethod
    def from_file(cls, file: DiscoveredFile) -> "FileGroup":
        """Start a singleton group."""
        return cls(size=file.size, members=[file])

    @property
    def representative(self) -> DiscoveredFile:
        """The canonical member used for comparisons."""
        if not self.members:
            raise DetectionError("File group has no members")
        return self.members[0]

    @property
    def count(self) -> int:
        """Number of files in this group."""
        return len(self.members)

    @property
    def is_duplicate(self) -> bool:
        """True when more than one file shares this content."""
        return len(self.members) > 1

    @property
    def total_size(self) -> int:
        """Total size of all files in this group."""
        return self.size * len(self.members)

    @property
    def wasted_size(self) -> int:
        """Space taken by every copy except one."""
        return self.size * (len(self.members) - 1)

    @property
    def paths(self) -> list[str]:
        return [member.path for member in self.members]

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Stop accepting new members."""
        self._frozen = True

    def add(self, file: DiscoveredFile) -> None:
        """Append a file already confirmed identical to the representative."""
        if self._frozen:
            raise DetectionError(
                f"Cannot add {file.path}: group of {self.representative.path} is frozen"
            )
        if file.size != self.size:
            raise DetectionError(
                f"Cannot add {file.path} ({file.size} bytes) to a group of "
                f"{self.size}-byte files"
            )
        self.members.append(file)


class SizeIndex:
    """All groups discovered in one tree, bucketed by file size.

    Groups live in an arena and are addressed by integer handle; each size
    bucket holds handles in insertion order. Once frozen the index rejects
    further changes.
    """

    def __init__(self) -> None:
        self._groups: list[FileGroup] = []
        self._buckets: dict[int, list[int]] = {}
        self._frozen = False

    def add_group(self, group: FileGroup) -> int:
        """Store a group in the bucket for its size.

        Args:
            group: Group to store

        Returns:
            Handle of the stored group

        Raises:
            DetectionError: If the index is frozen
        """
        self._check_mutable()
        handle = len(self._groups)
        self._groups.append(group)
        self._buckets.setdefault(group.size, []).append(handle)
        return handle

    def add_to_group(self, handle: int, file: DiscoveredFile) -> None:
        """Append a file to an existing group."""
        self._check_mutable()
        self._groups[handle].add(file)

    def group(self, handle: int) -> FileGroup:
        return self._groups[handle]

    def handles(self, size: int) -> list[int]:
        """Handles of the groups in one size bucket (empty if none)."""
        return list(self._buckets.get(size, ()))

    def bucket(self, size: int) -> list[FileGroup]:
        """Groups of one size, in insertion order (empty if none)."""
        return [self._groups[handle] for handle in self._buckets.get(size, ())]

    def sizes(self) -> list[int]:
        """Sizes present in the index, ascending."""
        return sorted(self._buckets)

    def groups(self) -> Iterator[FileGroup]:
        """Iterate groups by ascending size, insertion order within a bucket."""
        for size in self.sizes():
            yield from self.bucket(size)

    def duplicate_groups(self) -> list[FileGroup]:
        """Groups with more than one member, by ascending size."""
        return [group for group in self.groups() if group.is_duplicate]

    @property
    def group_count(self) -> int:
        return len(self._groups)

    @property
    def file_count(self) -> int:
        """Total number of files across all groups."""
        return sum(group.count for group in self._groups)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> "SizeIndex":
        """Mark the index and all its groups as complete. Returns self for chaining."""
        for group in self._groups:
            group.freeze()
        self._frozen = True
        return self

    def _check_mutable(self) -> None:
        if self._frozen:
            raise DetectionError("Size index is frozen and cannot be modified")

    def __contains__(self, size: object) -> bool:
        return size in self._buckets

    def __len__(self) -> int:
        return len(self._buckets)

    def __repr__(self) -> str:
        return (
            f"SizeIndex(sizes={len(self._buckets)}, groups={len(self._groups)}, "
            f"files={self.file_count}, frozen={self._frozen})"
        )
