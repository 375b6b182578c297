"""Application settings."""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..common.constants import CHUNK_SIZE, IGNORED_DIRECTORY_NAMES, MIN_FILE_SIZE


@dataclass(frozen=True)
class ScanConfig:
    """Immutable walker configuration, built once per run."""

    ignored_directory_names: frozenset[str] = IGNORED_DIRECTORY_NAMES
    min_file_size: int = 0

    def is_ignored(self, directory_name: str) -> bool:
        """Check if a directory name is excluded from traversal."""
        return directory_name in self.ignored_directory_names


class Settings(BaseSettings):
    """Application configuration."""

    model_config = SettingsConfigDict(
        env_prefix="FILE_MERGER_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Scan settings
    min_file_size: int = Field(
        default=MIN_FILE_SIZE,
        ge=0,
        description="Minimum file size in bytes to consider",
    )
    chunk_size: int = Field(
        default=CHUNK_SIZE,
        gt=0,
        description="Bytes read per step during byte comparison",
    )
    ignored_directory_names: list[str] = Field(
        default_factory=lambda: sorted(IGNORED_DIRECTORY_NAMES),
        description="Directory names skipped during traversal",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    log_file: Optional[Path] = Field(
        default=None,
        description="Optional log file path",
    )

    @field_validator("ignored_directory_names")
    @classmethod
    def _strip_names(cls, names: list[str]) -> list[str]:
        return [name.strip() for name in names if name.strip()]

    def scan_config(
        self,
        min_size: Optional[int] = None,
        extra_ignored: Iterable[str] = (),
    ) -> ScanConfig:
        """Build the walker configuration for one run.

        Args:
            min_size: Overrides min_file_size when given
            extra_ignored: Additional directory names to skip

        Returns:
            Frozen ScanConfig
        """
        return ScanConfig(
            ignored_directory_names=frozenset(self.ignored_directory_names)
            | frozenset(extra_ignored),
            min_file_size=self.min_file_size if min_size is None else min_size,
        )


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset global settings instance."""
    global _settings
    _settings = None
