"""
Dataset Descriptor.

A dataset is a directory inside an import root whose base name doubles as the
remote dataset identifier. The directory holds one JSON descriptor and up to
two newline-delimited JSON data files:

    <root>/<id>/<id>.dataset.json
    <root>/<id>/<id>.pits.ndjson
    <root>/<id>/<id>.relations.ndjson
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Final, Tuple

from ..core.paths import DATA_FILE_SUFFIX, DATASET_FILE_SUFFIX


class DataFileKind(str, Enum):
    """Well-known data files, named after their upload endpoint."""

    PITS = "pits"
    RELATIONS = "relations"


# Files are always uploaded in this order
UPLOAD_ORDER: Final[Tuple[DataFileKind, ...]] = (DataFileKind.PITS, DataFileKind.RELATIONS)


@dataclass(frozen=True)
class DatasetDescriptor:
    """
    Immutable reference to a dataset directory discovered by the scanner.

    Attributes:
        id: Directory base name, used as the remote dataset identifier.
        dir: Filesystem path of the dataset directory.
    """

    id: str
    dir: Path

    @property
    def descriptor_file(self) -> Path:
        """Path of the ``<id>.dataset.json`` descriptor."""
        return self.dir / f"{self.id}{DATASET_FILE_SUFFIX}"

    def data_file(self, kind: DataFileKind) -> Path:
        """Path of the ``<id>.<kind>.ndjson`` data file."""
        return self.dir / f"{self.id}.{kind.value}{DATA_FILE_SUFFIX}"
