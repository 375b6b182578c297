"""Tests for the breadth-first directory walker."""

import os
import sys
from pathlib import Path

import pytest

from file_merger.common.exceptions import InvalidInputError, IOFailureError
from file_merger.config.settings import ScanConfig
from file_merger.scanner.walker import DirectoryWalker


def _names(files) -> set[str]:
    return {Path(f.path).name for f in files}


def test_walk_yields_every_file(tmp_path: Path, write_file, no_filter_config) -> None:
    """Test files at every depth are found with their sizes."""
    write_file(tmp_path / "top.txt", b"1")
    write_file(tmp_path / "a" / "mid.txt", b"22")
    write_file(tmp_path / "a" / "b" / "c" / "deep.txt", b"333")

    files = list(DirectoryWalker(no_filter_config).walk(tmp_path))

    assert {(Path(f.path).name, f.size) for f in files} == {
        ("top.txt", 1),
        ("mid.txt", 2),
        ("deep.txt", 3),
    }
    assert all(os.path.isabs(f.path) for f in files)


def test_walk_is_breadth_first(tmp_path: Path, write_file, no_filter_config) -> None:
    """Test shallower files are yielded before deeper ones."""
    write_file(tmp_path / "x" / "y" / "deep.txt", b"d")
    write_file(tmp_path / "x" / "shallow.txt", b"s")
    write_file(tmp_path / "root.txt", b"r")

    depths = [
        len(Path(f.path).relative_to(tmp_path).parts)
        for f in DirectoryWalker(no_filter_config).walk(tmp_path)
    ]

    assert depths == sorted(depths)


def test_ignored_directories_are_skipped(tmp_path: Path, write_file) -> None:
    """Test ignored directory names are never entered, at any depth."""
    write_file(tmp_path / "keep.txt", b"k")
    write_file(tmp_path / ".git" / "objects" / "blob", b"b")
    write_file(tmp_path / "project" / ".git" / "HEAD", b"h")
    write_file(tmp_path / "project" / "main.py", b"m")
    write_file(tmp_path / "node_modules" / "lib.js", b"l")

    config = ScanConfig(
        ignored_directory_names=frozenset({".git", "node_modules"}), min_file_size=0
    )
    files = list(DirectoryWalker(config).walk(tmp_path))

    assert _names(files) == {"keep.txt", "main.py"}


def test_ignore_applies_to_directories_only(tmp_path: Path, write_file) -> None:
    """Test a regular file named like an ignored directory is still reported."""
    write_file(tmp_path / ".git", b"gitdir: elsewhere")

    files = list(DirectoryWalker(ScanConfig(min_file_size=0)).walk(tmp_path))

    assert _names(files) == {".git"}


def test_min_file_size_filter(tmp_path: Path, write_file) -> None:
    """Test files below the threshold are dropped silently."""
    write_file(tmp_path / "small.bin", b"s" * 511)
    write_file(tmp_path / "exact.bin", b"e" * 512)
    write_file(tmp_path / "large.bin", b"l" * 2048)

    files = list(DirectoryWalker(ScanConfig(min_file_size=512)).walk(tmp_path))

    assert _names(files) == {"exact.bin", "large.bin"}


def test_empty_directory(tmp_path: Path) -> None:
    """Test an empty tree yields nothing."""
    assert list(DirectoryWalker().walk(tmp_path)) == []


def test_root_must_be_a_directory(tmp_path: Path, write_file) -> None:
    """Test walking a file or a missing path fails immediately."""
    target = write_file(tmp_path / "file.txt", b"x")

    with pytest.raises(InvalidInputError):
        next(DirectoryWalker().walk(target.path))
    with pytest.raises(InvalidInputError):
        next(DirectoryWalker().walk(tmp_path / "missing"))


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
def test_directory_links_are_not_followed(tmp_path: Path, write_file, no_filter_config) -> None:
    """Test a symlink cycle does not make the walk loop."""
    write_file(tmp_path / "real" / "file.txt", b"f")
    try:
        os.symlink(tmp_path, tmp_path / "real" / "loop", target_is_directory=True)
    except OSError:
        pytest.skip("cannot create symlinks")

    files = list(DirectoryWalker(no_filter_config).walk(tmp_path))

    assert _names(files) == {"file.txt"}


@pytest.mark.skipif(
    sys.platform == "win32" or (hasattr(os, "geteuid") and os.geteuid() == 0),
    reason="permission bits are not enforced",
)
def test_unreadable_directory_is_fatal(tmp_path: Path, write_file, no_filter_config) -> None:
    """Test an unreadable subdirectory aborts the walk."""
    write_file(tmp_path / "locked" / "secret.txt", b"s")
    locked = tmp_path / "locked"
    locked.chmod(0)
    try:
        with pytest.raises(IOFailureError):
            list(DirectoryWalker(no_filter_config).walk(tmp_path))
    finally:
        locked.chmod(0o755)
