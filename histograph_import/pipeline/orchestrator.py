"""
Dataset Synchronization Orchestrator.

Drives one import run over an ordered list of dataset descriptors, strictly
one dataset (and one file) at a time. Two mutually exclusive modes exist:

- SYNC: check the descriptor file, create the dataset (an already existing
  dataset counts as created), then upload ``pits`` and ``relations`` in
  that order. Missing data files are skipped; failed uploads do not stop the
  remaining files and nothing is rolled back.
- DELETE: delete every dataset, continuing past failures.

Failures are caught at dataset or file granularity, logged for the operator
and recorded in the returned RunSummary. Only the scan that produces the
descriptors can abort a run, and that happens before the orchestrator runs.
"""

from __future__ import annotations

import logging
from typing import Iterable

from ..api import ApiClient, CreateStatus
from ..core.logger import LogStyle
from ..core.paths import LOGGER_NAME
from ..datasets import UPLOAD_ORDER, DataFileKind, DatasetDescriptor, DatasetResolver
from ..exceptions import ApiClientError
from .outcomes import (
    DatasetOutcome,
    ErrorKind,
    FileOutcome,
    FileStatus,
    RunSummary,
    SyncError,
    SyncMode,
)

logger = logging.getLogger(LOGGER_NAME)


class SyncOrchestrator:
    """
    Sequential create/upload or delete driver for a batch of datasets.

    Attributes:
        client (ApiClient): API client used for every network operation.
        resolver (DatasetResolver): Tracks requested ids not yet processed.
        mode (SyncMode): Run-wide operating mode.
        log (logging.Logger): Destination for operator-facing messages.

    Example:
        >>> orchestrator = SyncOrchestrator(client, DatasetResolver(["a"]))
        >>> summary = orchestrator.run(scan_import_roots(cfg.import_.dirs, ["a"]))
        >>> summary.exit_code
        0
    """

    def __init__(
        self,
        client: ApiClient,
        resolver: DatasetResolver | None = None,
        mode: SyncMode = SyncMode.SYNC,
        logger_instance: logging.Logger | None = None,
    ) -> None:
        self.client = client
        self.resolver = resolver if resolver is not None else DatasetResolver()
        self.mode = mode
        self.log = logger_instance or logger

    def run(self, datasets: Iterable[DatasetDescriptor]) -> RunSummary:
        """
        Process every dataset in order, then report requested ids never seen.

        Args:
            datasets: Descriptors produced by the scanner.

        Returns:
            RunSummary with one DatasetOutcome per processed descriptor.
        """
        summary = RunSummary(mode=self.mode)

        for dataset in datasets:
            self.resolver.mark_processed(dataset)
            summary.datasets.append(self.process(dataset))

        summary.not_found = self.resolver.not_found
        if summary.not_found:
            self.log.error(
                "Dataset(s) not found in any configured import directory: "
                + ", ".join(summary.not_found)
            )
        return summary

    def process(self, dataset: DatasetDescriptor) -> DatasetOutcome:
        """Process a single dataset according to the run mode."""
        self.log.info(f"[{self.mode.value.capitalize()}] {dataset.id} ({dataset.dir})")
        if self.mode is SyncMode.DELETE:
            return self.delete_dataset(dataset)
        return self.sync_dataset(dataset)

    # DELETE MODE
    def delete_dataset(self, dataset: DatasetDescriptor) -> DatasetOutcome:
        outcome = DatasetOutcome(dataset=dataset)
        try:
            self.client.delete_dataset(dataset.id)
        except ApiClientError as e:
            outcome.error = SyncError.from_exception(e)
            self.log.error(f"Deleting dataset {dataset.id} failed: {outcome.error.describe()}")
            return outcome

        outcome.deleted = True
        self.log.info(f"{LogStyle.INDENT}{LogStyle.SUCCESS} Deleted dataset: {dataset.id}")
        return outcome

    # SYNC MODE
    def sync_dataset(self, dataset: DatasetDescriptor) -> DatasetOutcome:
        """
        Create the dataset, then upload its data files.

        A missing or unreadable descriptor, or a failed create request, ends
        processing of this dataset before any upload is attempted.
        """
        outcome = DatasetOutcome(dataset=dataset)

        outcome.error = self._create(dataset)
        if outcome.error is not None:
            self.log.error(f"Creating dataset {dataset.id} failed: {outcome.error.describe()}")
            return outcome

        outcome.created = True
        for kind in UPLOAD_ORDER:
            outcome.files.append(self.upload_data_file(dataset, kind))
        return outcome

    def upload_data_file(self, dataset: DatasetDescriptor, kind: DataFileKind) -> FileOutcome:
        """
        Upload one data file; a missing file is skipped without any request.

        Returns:
            FileOutcome recording UPLOADED, SKIPPED or FAILED.
        """
        path = dataset.data_file(kind)
        if not path.is_file():
            self.log.warning(f"{LogStyle.INDENT}File not found: {path.name}")
            return FileOutcome(kind=kind, path=path, status=FileStatus.SKIPPED)

        try:
            self.client.upload_file(dataset.id, kind, path)
        except ApiClientError as e:
            error = SyncError.from_exception(e)
        except OSError as e:
            error = SyncError(kind=ErrorKind.LOCAL_IO, message=f"cannot read {path.name}: {e}")
        else:
            self.log.info(f"{LogStyle.INDENT}{LogStyle.SUCCESS} Upload successful: {path.name}")
            return FileOutcome(kind=kind, path=path, status=FileStatus.UPLOADED)

        self._log_upload_failure(path.name, error)
        return FileOutcome(kind=kind, path=path, status=FileStatus.FAILED, error=error)

    # PRIVATE HELPERS
    def _create(self, dataset: DatasetDescriptor) -> SyncError | None:
        """Read the descriptor and create the dataset; returns the failure, if any."""
        descriptor_file = dataset.descriptor_file
        if not descriptor_file.is_file():
            return SyncError(
                kind=ErrorKind.DESCRIPTOR_MISSING,
                message=f"dataset JSON file `{descriptor_file.name}` not found",
            )

        try:
            body = descriptor_file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            return SyncError(
                kind=ErrorKind.LOCAL_IO, message=f"cannot read {descriptor_file.name}: {e}"
            )

        try:
            status = self.client.create_dataset(body)
        except ApiClientError as e:
            return SyncError.from_exception(e)

        if status is CreateStatus.CONFLICT:
            self.log.info(f"{LogStyle.INDENT}{LogStyle.SUCCESS} Found existing dataset: {dataset.id}")
        else:
            self.log.info(f"{LogStyle.INDENT}{LogStyle.SUCCESS} Created dataset: {dataset.id}")
        return None

    def _log_upload_failure(self, filename: str, error: SyncError) -> None:
        self.log.error(f"{LogStyle.INDENT}Upload failed: {filename}")
        block = error.details_block()
        if block is not None:
            self.log.error(block)
        else:
            self.log.error(f"\t{error.describe()}")
