"""
Synchronization Outcome Types.

Tagged result values produced by the SyncOrchestrator. Every failure the
importer can encounter is classified by an ErrorKind and carried as a
SyncError, so that callers (CLI, tests, summary logging) never have to
interpret ad hoc strings.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from ..datasets import DataFileKind, DatasetDescriptor
from ..exceptions import ApiError, TransportError

UNKNOWN_CODE = "unknown"


class ErrorKind(str, Enum):
    """Classification of every failure the importer reports."""

    FATAL_SCAN = "fatal-scan"
    NOT_FOUND = "not-found"
    DESCRIPTOR_MISSING = "descriptor-missing"
    APPLICATION = "application"
    TRANSPORT = "transport"
    LOCAL_IO = "local-io"


class SyncMode(str, Enum):
    """Run-wide operating mode, selected once from the command line."""

    SYNC = "sync"
    DELETE = "delete"


class FileStatus(str, Enum):
    UPLOADED = "uploaded"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class SyncError:
    """
    A single classified failure.

    Attributes:
        kind: Error classification.
        message: Operator-facing message.
        status: HTTP status for APPLICATION errors.
        code: Transport error code for TRANSPORT errors (None when unknown).
        details: Nested validation details supplied by the server, if any.
    """

    kind: ErrorKind
    message: str
    status: int | None = None
    code: str | None = None
    details: Any = None

    @classmethod
    def from_exception(cls, exc: ApiError | TransportError) -> "SyncError":
        """Convert an API client exception into a tagged error value."""
        if isinstance(exc, ApiError):
            return cls(
                kind=ErrorKind.APPLICATION,
                message=exc.message,
                status=exc.status,
                details=exc.details,
            )
        return cls(kind=ErrorKind.TRANSPORT, message=exc.message, code=exc.code)

    def describe(self) -> str:
        """Render the error as a single line of operator text."""
        if self.kind is ErrorKind.APPLICATION:
            return f"HTTP {self.status}: {self.message}"
        if self.kind is ErrorKind.TRANSPORT:
            return f"{self.code or UNKNOWN_CODE}: {self.message}"
        return self.message

    def details_block(self, indent: str = "\t") -> str | None:
        """
        Pretty-print the server's error body when it carried ``details``.

        Returns:
            The JSON rendering of ``{message, details}`` with every line
            prefixed by *indent*, or None when no details were supplied.
        """
        if not self.details:
            return None
        payload = {"message": self.message, "details": self.details}
        rendered = json.dumps(payload, indent=2, default=str)
        return "\n".join(indent + line for line in rendered.split("\n"))


@dataclass(frozen=True)
class FileOutcome:
    kind: DataFileKind
    path: Path
    status: FileStatus
    error: SyncError | None = None


@dataclass
class DatasetOutcome:
    """
    Result of processing one dataset.

    Attributes:
        dataset: The descriptor that was processed.
        created: True once creation succeeded (created or already existing).
        deleted: True once deletion succeeded (delete mode only).
        files: Per-file upload outcomes in upload order.
        error: Dataset-level failure (descriptor missing, create or delete failed).
    """

    dataset: DatasetDescriptor
    created: bool = False
    deleted: bool = False
    files: list[FileOutcome] = field(default_factory=list)
    error: SyncError | None = None

    @property
    def failed_files(self) -> list[FileOutcome]:
        return [f for f in self.files if f.status is FileStatus.FAILED]

    @property
    def succeeded(self) -> bool:
        return self.error is None and not self.failed_files


@dataclass
class RunSummary:
    """Aggregated outcome of a whole import run."""

    mode: SyncMode
    datasets: list[DatasetOutcome] = field(default_factory=list)
    not_found: list[str] = field(default_factory=list)

    @property
    def failed(self) -> list[DatasetOutcome]:
        return [d for d in self.datasets if not d.succeeded]

    @property
    def ok(self) -> bool:
        return not self.failed and not self.not_found

    @property
    def exit_code(self) -> int:
        """0 when every dataset succeeded and every requested id was found, else 1."""
        return 0 if self.ok else 1
