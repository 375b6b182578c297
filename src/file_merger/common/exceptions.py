"""Custom exception hierarchy."""


class FileMergerError(Exception):
    """Base exception for all file-merger errors."""


class InvalidArgumentError(FileMergerError):
    """Command-line arguments are malformed."""


class InvalidInputError(FileMergerError):
    """An input path is missing, not a directory, or not in the expected state."""


class IOFailureError(FileMergerError):
    """A directory or file could not be read during scanning or comparison."""


class DetectionError(FileMergerError):
    """Error during duplicate detection or reconciliation."""


class ExportError(FileMergerError):
    """Error writing a report file."""


class ConfigError(FileMergerError):
    """Configuration error."""
