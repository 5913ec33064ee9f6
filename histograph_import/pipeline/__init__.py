"""
Synchronization Pipeline Package.

Sequential orchestration of dataset creation, upload and deletion, plus the
tagged outcome types describing what happened to every dataset and file.
"""

from .orchestrator import SyncOrchestrator
from .outcomes import (
    DatasetOutcome,
    ErrorKind,
    FileOutcome,
    FileStatus,
    RunSummary,
    SyncError,
    SyncMode,
)
from .phases import run_import

__all__ = [
    "SyncOrchestrator",
    "run_import",
    "SyncMode",
    "ErrorKind",
    "SyncError",
    "FileStatus",
    "FileOutcome",
    "DatasetOutcome",
    "RunSummary",
]
