"""
Dataset Discovery Package.

Turns configured import roots into an ordered sequence of dataset
descriptors and reconciles them against the identifiers requested on the
command line.
"""

from .descriptor import UPLOAD_ORDER, DataFileKind, DatasetDescriptor
from .resolver import DatasetResolver, normalize_requested
from .scanner import is_dataset_candidate, scan_import_root, scan_import_roots

__all__ = [
    "DatasetDescriptor",
    "DataFileKind",
    "UPLOAD_ORDER",
    "DatasetResolver",
    "normalize_requested",
    "is_dataset_candidate",
    "scan_import_root",
    "scan_import_roots",
]
