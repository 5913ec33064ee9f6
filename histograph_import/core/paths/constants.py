"""
Project-wide Constants and Filesystem Conventions.

Single source of truth for the names the importer relies on: logger identity,
the on-disk dataset layout, the directories ignored while scanning import roots,
and the default configuration location.

Module Attributes:
    LOGGER_NAME: Global logger identity used by all modules for log synchronization.
    CONFIG_ENV_VAR: Environment variable pointing at the YAML configuration file.
    DEFAULT_CONFIG_PATH: Fallback configuration path (relative to the working directory).
    CURRENT_DIR_MARKER: Directory entry that never denotes a dataset.
    IGNORED_DIRS: Version-control and dependency-cache directory names skipped by the scanner.
    DATASET_FILE_SUFFIX: Suffix of the dataset descriptor file.
    DATA_FILE_SUFFIX: Suffix of the newline-delimited JSON data files.
"""

from pathlib import Path
from typing import Final, FrozenSet

# GLOBAL CONSTANTS
# Global logger identity used by all modules to ensure log synchronization
LOGGER_NAME: Final[str] = "histograph"

# CONFIGURATION DISCOVERY
CONFIG_ENV_VAR: Final[str] = "HISTOGRAPH_CONFIG"
DEFAULT_CONFIG_PATH: Final[Path] = Path("config.yaml")

# IMPORT ROOT SCANNING
CURRENT_DIR_MARKER: Final[str] = "."
IGNORED_DIRS: Final[FrozenSet[str]] = frozenset({".git", "node_modules"})

# DATASET LAYOUT
DATASET_FILE_SUFFIX: Final[str] = ".dataset.json"
DATA_FILE_SUFFIX: Final[str] = ".ndjson"
