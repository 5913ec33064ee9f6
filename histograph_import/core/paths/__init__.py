"""
Filesystem Conventions Package.

Centralizes the constants describing where configuration lives, which
directory entries are never datasets, and how dataset files are named.

Example:
    >>> from histograph_import.core.paths import IGNORED_DIRS
    >>> ".git" in IGNORED_DIRS
    True
"""

from .constants import (
    CONFIG_ENV_VAR,
    CURRENT_DIR_MARKER,
    DATA_FILE_SUFFIX,
    DATASET_FILE_SUFFIX,
    DEFAULT_CONFIG_PATH,
    IGNORED_DIRS,
    LOGGER_NAME,
)

__all__ = [
    "LOGGER_NAME",
    "CONFIG_ENV_VAR",
    "DEFAULT_CONFIG_PATH",
    "CURRENT_DIR_MARKER",
    "IGNORED_DIRS",
    "DATASET_FILE_SUFFIX",
    "DATA_FILE_SUFFIX",
]
