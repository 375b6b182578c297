"""Tests for data models."""

import pytest

from file_merger.common.exceptions import DetectionError
from file_merger.detector.models import DiscoveredFile, FileGroup, SizeIndex


def test_discovered_file_is_immutable() -> None:
    """Test DiscoveredFile cannot be changed after creation."""
    file = DiscoveredFile(size=600, path="/photos/a.jpg")

    with pytest.raises(AttributeError):
        file.size = 1  # type: ignore[misc]

    assert file.name == "a.jpg"
    assert file.parent == "/photos"


def test_file_group_sizes() -> None:
    """Test FileGroup size calculations."""
    group = FileGroup.from_file(DiscoveredFile(size=1024, path="/a"))
    group.add(DiscoveredFile(size=1024, path="/b"))
    group.add(DiscoveredFile(size=1024, path="/c"))

    assert group.count == 3
    assert group.is_duplicate
    assert group.total_size == 3072
    assert group.wasted_size == 2048
    assert group.representative.path == "/a"
    assert group.paths == ["/a", "/b", "/c"]


def test_file_group_rejects_other_size() -> None:
    """Test a group only accepts files of its own size."""
    group = FileGroup.from_file(DiscoveredFile(size=10, path="/a"))

    with pytest.raises(DetectionError):
        group.add(DiscoveredFile(size=11, path="/b"))


def test_empty_group_has_no_representative() -> None:
    """Test an empty group reports an error instead of a representative."""
    with pytest.raises(DetectionError):
        FileGroup(size=10).representative


def test_size_index_buckets_and_order() -> None:
    """Test groups are bucketed by size and iterated size-ascending."""
    index = SizeIndex()
    big = index.add_group(FileGroup.from_file(DiscoveredFile(size=900, path="/big")))
    first = index.add_group(FileGroup.from_file(DiscoveredFile(size=100, path="/s1")))
    second = index.add_group(FileGroup.from_file(DiscoveredFile(size=100, path="/s2")))

    assert 100 in index
    assert 500 not in index
    assert len(index) == 2
    assert index.sizes() == [100, 900]
    assert index.handles(100) == [first, second]
    assert index.handles(500) == []
    assert [g.representative.path for g in index.groups()] == ["/s1", "/s2", "/big"]
    assert index.group(big).size == 900
    assert index.file_count == 3


def test_size_index_duplicate_groups() -> None:
    """Test only multi-member groups are reported as duplicates."""
    index = SizeIndex()
    handle = index.add_group(FileGroup.from_file(DiscoveredFile(size=5, path="/a")))
    index.add_group(FileGroup.from_file(DiscoveredFile(size=7, path="/c")))
    index.add_to_group(handle, DiscoveredFile(size=5, path="/b"))

    duplicates = index.duplicate_groups()

    assert len(duplicates) == 1
    assert duplicates[0].paths == ["/a", "/b"]


def test_frozen_size_index_rejects_changes() -> None:
    """Test a frozen index cannot gain groups or members."""
    index = SizeIndex()
    handle = index.add_group(FileGroup.from_file(DiscoveredFile(size=5, path="/a")))
    assert index.freeze() is index
    assert index.frozen

    with pytest.raises(DetectionError):
        index.add_group(FileGroup.from_file(DiscoveredFile(size=6, path="/b")))
    with pytest.raises(DetectionError):
        index.add_to_group(handle, DiscoveredFile(size=5, path="/c"))


def test_frozen_size_index_freezes_its_groups() -> None:
    """Test groups handed out by a frozen index cannot gain members."""
    index = SizeIndex()
    handle = index.add_group(FileGroup.from_file(DiscoveredFile(size=5, path="/a")))
    index.freeze()

    group = index.group(handle)
    assert group.frozen
    with pytest.raises(DetectionError):
        group.add(DiscoveredFile(size=5, path="/b"))
    with pytest.raises(DetectionError):
        index.bucket(5)[0].add(DiscoveredFile(size=5, path="/c"))
    assert group.paths == ["/a"]
