"""Constants used throughout the application."""

PROGRAM_NAME = "File Merger Helper"
PROGRAM_VERSION = "0.0.1"

# Byte comparison
CHUNK_SIZE = 1024  # bytes read per step from each file

# Directory walking
MIN_FILE_SIZE = 512  # files smaller than this are skipped by default
IGNORED_DIRECTORY_NAMES = frozenset({".git"})

# Input layout
UNCLASSIFIED_DIR_NAME = "unclassified"
UNIQUE_DIR_NAME = "unique"
DUPLICATE_DIR_NAME = "duplicate"

# Answers accepted by the --apply confirmation prompt
CONFIRM_ANSWERS = frozenset({"y", "yes"})

# Report export
EXPORT_FORMATS = {".csv": "csv", ".json": "json"}
