"""
Run Progress Logging.

Formatted header and completion summary for an import run.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Sequence

from ..paths import LOGGER_NAME
from .styles import LogStyle

if TYPE_CHECKING:  # pragma: no cover
    from ...pipeline.outcomes import RunSummary

logger = logging.getLogger(LOGGER_NAME)


def log_run_header(
    mode: str,
    import_dirs: Sequence[Path],
    requested: Sequence[str],
    force: bool,
    base_url: str,
    logger_instance: logging.Logger | None = None,
) -> None:
    """
    Log the run banner and its parameters.

    Args:
        mode: Run mode name ("sync" or "delete").
        import_dirs: Configured import roots, in scan order.
        requested: Explicit dataset ids (empty means all).
        force: Whether uploads carry the force-override flag.
        base_url: API base URL (credentials are never logged).
        logger_instance: Logger instance to use (defaults to module logger)
    """
    log = logger_instance or logger

    LogStyle.log_phase_header(log, f"DATASET {mode.upper()}")
    log.info(f"{LogStyle.INDENT}{LogStyle.ARROW} {'API':<14}: {base_url}")
    for root in import_dirs:
        log.info(f"{LogStyle.INDENT}{LogStyle.ARROW} {'Import Dir':<14}: {root}")
    datasets = ", ".join(requested) if requested else "all"
    log.info(f"{LogStyle.INDENT}{LogStyle.ARROW} {'Datasets':<14}: {datasets}")
    if mode == "sync":
        log.info(f"{LogStyle.INDENT}{LogStyle.ARROW} {'Force':<14}: {force}")
    log.info(LogStyle.LIGHT)


def log_run_summary(
    summary: "RunSummary",
    duration: str,
    logger_instance: logging.Logger | None = None,
) -> None:
    """
    Log the final run summary.

    Args:
        summary: Aggregated outcome of the run.
        duration: Human-readable duration string.
        logger_instance: Logger instance to use (defaults to module logger)
    """
    log = logger_instance or logger

    processed = len(summary.datasets)
    failed = summary.failed

    LogStyle.log_phase_header(log, "IMPORT COMPLETE", LogStyle.DOUBLE)
    log.info(f"{LogStyle.INDENT}{LogStyle.ARROW} Mode       : {summary.mode.value}")
    log.info(f"{LogStyle.INDENT}{LogStyle.ARROW} Processed  : {processed}")
    if not failed:
        log.info(f"{LogStyle.INDENT}{LogStyle.SUCCESS} Succeeded  : {processed}")
    else:
        log.info(f"{LogStyle.INDENT}{LogStyle.ARROW} Succeeded  : {processed - len(failed)}")
        ids = ", ".join(d.dataset.id for d in failed)
        log.info(f"{LogStyle.INDENT}{LogStyle.FAILURE} Failed     : {len(failed)} ({ids})")
    if summary.not_found:
        log.info(
            f"{LogStyle.INDENT}{LogStyle.FAILURE} Not Found  : {', '.join(summary.not_found)}"
        )
    log.info(f"{LogStyle.INDENT}{LogStyle.ARROW} Duration   : {duration}")
    log.info(LogStyle.DOUBLE)


def format_duration(seconds: float) -> str:
    """Render a duration as ``1m 05.3s`` or ``4.2s``."""
    minutes, secs = divmod(max(seconds, 0.0), 60)
    if minutes >= 1:
        return f"{int(minutes)}m {secs:04.1f}s"
    return f"{secs:.1f}s"
