"""Validation of the reconcile command's input layout."""

import os
from dataclasses import dataclass
from pathlib import Path

import typer
from typer.core import TyperCommand

from ..common.constants import (
    DUPLICATE_DIR_NAME,
    UNCLASSIFIED_DIR_NAME,
    UNIQUE_DIR_NAME,
)
from ..common.exceptions import InvalidInputError

# Parse failures (missing argument, unknown option) as raised by typer
UsageError = typer.BadParameter.__bases__[0]


class UsageErrorExitCommand(TyperCommand):
    """Command whose usage errors (missing or unknown arguments) exit with 1."""

    def parse_args(self, ctx: typer.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except UsageError as e:
            e.exit_code = 1
            raise


@dataclass(frozen=True)
class InputArguments:
    """Validated paths for a reconcile run."""

    input_path: Path
    unclassified_path: Path
    unique_path: Path
    duplicate_path: Path
    destination_path: Path
    apply: bool = False


def check_directory(parent: Path, name: str, required_empty: bool) -> Path:
    """Check that parent/name is a directory, and empty when required.

    Args:
        parent: Directory expected to contain the subdirectory
        name: Subdirectory name
        required_empty: Whether the subdirectory must have no entries

    Returns:
        Path of the subdirectory

    Raises:
        InvalidInputError: If the subdirectory is missing, not a directory,
            or not empty when it has to be
    """
    path = parent / name

    if not path.is_dir():
        raise InvalidInputError(f"Input directory '{path}' is not a directory.")

    if required_empty:
        try:
            with os.scandir(path) as entries:
                has_entries = any(True for _ in entries)
        except OSError as e:
            raise InvalidInputError(f"Cannot read input directory '{path}': {e}") from e
        if has_entries:
            raise InvalidInputError(f"Input directory '{path}' is not empty!")

    return path


def validate_input_arguments(
    input_path: Path, destination_path: Path, apply: bool = False
) -> InputArguments:
    """Validate the input layout before any scanning.

    The input path must contain 'unclassified', plus empty 'unique' and
    'duplicate' directories. The destination must be a directory.

    Raises:
        InvalidInputError: On the first problem found
    """
    if not input_path.is_dir():
        raise InvalidInputError(f"Input path '{input_path}' is not a directory.")

    if not destination_path.is_dir():
        raise InvalidInputError(
            f"Destination path '{destination_path}' is not a directory."
        )

    return InputArguments(
        input_path=input_path,
        unclassified_path=check_directory(input_path, UNCLASSIFIED_DIR_NAME, False),
        unique_path=check_directory(input_path, UNIQUE_DIR_NAME, True),
        duplicate_path=check_directory(input_path, DUPLICATE_DIR_NAME, True),
        destination_path=destination_path,
        apply=apply,
    )
