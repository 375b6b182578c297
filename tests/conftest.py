"""Shared pytest fixtures."""

from pathlib import Path
from typing import Callable, Iterator

import pytest

from file_merger.config.settings import ScanConfig, reset_settings
from file_merger.detector.models import DiscoveredFile

WriteFile = Callable[[Path, bytes], DiscoveredFile]


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Give every test default settings, unaffected by the environment."""
    for name in (
        "FILE_MERGER_MIN_FILE_SIZE",
        "FILE_MERGER_CHUNK_SIZE",
        "FILE_MERGER_IGNORED_DIRECTORY_NAMES",
        "FILE_MERGER_LOG_LEVEL",
        "FILE_MERGER_LOG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def write_file() -> WriteFile:
    """Write bytes to a path (creating parents) and describe the result."""

    def _write(path: Path, content: bytes) -> DiscoveredFile:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        return DiscoveredFile(size=len(content), path=str(path))

    return _write


@pytest.fixture
def no_filter_config() -> ScanConfig:
    """Walker configuration that keeps files of every size."""
    return ScanConfig(min_file_size=0)


@pytest.fixture
def input_layout(tmp_path: Path) -> Path:
    """Create input/{unclassified,unique,duplicate} and return input/."""
    input_path = tmp_path / "input"
    for name in ("unclassified", "unique", "duplicate"):
        (input_path / name).mkdir(parents=True)
    return input_path


@pytest.fixture
def destination(tmp_path: Path) -> Path:
    """Create an empty destination directory."""
    path = tmp_path / "destination"
    path.mkdir()
    return path
