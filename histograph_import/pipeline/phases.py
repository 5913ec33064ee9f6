"""
Import Run Phases.

Composes the scan and synchronization steps into one run:

    1. Scan: list every configured import root (fatal on failure)
    2. Synchronize: create/upload or delete each dataset in order
    3. Report: log requested-but-missing ids and the run summary
"""

from __future__ import annotations

import logging
import time
from typing import Sequence

from ..api import ApiClient
from ..core import LOGGER_NAME, Config, format_duration, log_run_header, log_run_summary
from ..datasets import DatasetResolver, scan_import_roots
from .orchestrator import SyncOrchestrator
from .outcomes import RunSummary, SyncMode

logger = logging.getLogger(LOGGER_NAME)


def run_import(
    cfg: Config,
    requested: Sequence[str] = (),
    mode: SyncMode = SyncMode.SYNC,
    force: bool = False,
    client: ApiClient | None = None,
    logger_instance: logging.Logger | None = None,
) -> RunSummary:
    """
    Execute a full import run.

    Args:
        cfg: Validated configuration.
        requested: Dataset ids to restrict the run to (empty means all).
        mode: SYNC (create and upload) or DELETE.
        force: Send the force-override flag with every upload.
        client: Pre-built API client (a client from ``cfg.api`` is created and
            closed when omitted).
        logger_instance: Logger instance to use (defaults to module logger)

    Returns:
        RunSummary describing every processed dataset.

    Raises:
        ScanError: If an import root cannot be listed; nothing is processed.
    """
    log = logger_instance or logger
    start = time.perf_counter()

    resolver = DatasetResolver(requested)
    log_run_header(
        mode=mode.value,
        import_dirs=cfg.import_.dirs,
        requested=resolver.requested,
        force=force,
        base_url=cfg.api.base_url,
        logger_instance=log,
    )

    datasets = scan_import_roots(cfg.import_.dirs, resolver.requested)

    owns_client = client is None
    api_client = client if client is not None else ApiClient.from_config(cfg.api, force=force)
    try:
        summary = SyncOrchestrator(api_client, resolver, mode, logger_instance=log).run(datasets)
    finally:
        if owns_client:
            api_client.close()

    log_run_summary(summary, format_duration(time.perf_counter() - start), logger_instance=log)
    return summary
