"""
Import Root Scanner.

Enumerates the immediate children of each configured import root and turns
every eligible directory into a DatasetDescriptor. Results from several roots
are concatenated in configured order; identical names found under two roots
are both kept.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Collection, Iterable

from ..core.paths import CURRENT_DIR_MARKER, IGNORED_DIRS, LOGGER_NAME
from ..exceptions import ScanError
from .descriptor import DatasetDescriptor

logger = logging.getLogger(LOGGER_NAME)


def is_dataset_candidate(name: str, requested: Collection[str] = ()) -> bool:
    """
    Name-level filter applied to every directory entry.

    Args:
        name: Directory entry name.
        requested: Explicit dataset filter; empty means every dataset.

    Returns:
        True unless the entry is the current-directory marker, an ignored
        directory, or excluded by an active filter.
    """
    if name == CURRENT_DIR_MARKER or name in IGNORED_DIRS:
        return False
    return not requested or name in requested


def scan_import_root(root: Path, requested: Collection[str] = ()) -> list[DatasetDescriptor]:
    """
    List the datasets contained in a single import root.

    Args:
        root: Import root directory.
        requested: Explicit dataset filter; empty means every dataset.

    Returns:
        Descriptors for the eligible subdirectories, sorted by name.

    Raises:
        ScanError: If *root* does not exist, is not a directory, or cannot be read.
    """
    root = Path(root)
    try:
        names = sorted(os.listdir(root))
    except OSError as e:
        raise ScanError(root, e.strerror or str(e)) from e

    descriptors: list[DatasetDescriptor] = []
    for name in names:
        if not is_dataset_candidate(name, requested):
            continue
        path = root / name
        if not path.is_dir():
            logger.debug(f"Skipping non-directory entry: {path}")
            continue
        descriptors.append(DatasetDescriptor(id=name, dir=path))

    logger.debug(f"Found {len(descriptors)} dataset(s) in {root}")
    return descriptors


def scan_import_roots(
    roots: Iterable[Path], requested: Collection[str] = ()
) -> list[DatasetDescriptor]:
    """
    Scan every import root in order and concatenate the results.

    The first unreadable root aborts the whole scan.

    Args:
        roots: Import roots in configured order.
        requested: Explicit dataset filter; empty means every dataset.

    Returns:
        All descriptors, root by root, without de-duplication.
    """
    wanted = frozenset(requested)
    descriptors: list[DatasetDescriptor] = []
    for root in roots:
        descriptors.extend(scan_import_root(root, wanted))
    return descriptors
