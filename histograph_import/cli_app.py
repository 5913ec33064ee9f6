"""
Histograph Import Command-Line Interface.

Provides the ``histograph-import`` entry point, which synchronizes the
datasets found in the configured import directories with the Histograph API.

Usage:
    histograph-import                      # create + upload every dataset
    histograph-import tgn geonames         # only these datasets
    histograph-import tgn --force          # overwrite existing data on upload
    histograph-import tgn --clear          # delete the dataset instead
    histograph-import -c /etc/histograph/config.yaml

Exit codes:
    0  every dataset succeeded and every requested dataset was found
    1  at least one dataset failed, or a requested dataset was not found
    2  configuration or import directory error (nothing was processed)
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .core import LOGGER_NAME, Config, Logger, LogStyle, resolve_config_path
from .exceptions import ImporterConfigError, ScanError
from .pipeline import SyncMode, run_import

EXIT_FAILURE = 1
EXIT_FATAL = 2

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

app = typer.Typer(
    name="histograph-import",
    add_completion=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        from . import __version__

        typer.echo(f"histograph-import {__version__}")
        raise typer.Exit()


def _validate_log_level(value: str | None) -> str | None:
    if value is None:
        return None
    if value.upper() not in _LOG_LEVELS:
        raise typer.BadParameter(f"must be one of {', '.join(_LOG_LEVELS)}, got: '{value}'")
    return value.upper()


@app.command()
def main(
    datasets: Annotated[
        list[str] | None,
        typer.Argument(help="Dataset ids to process. Default: every dataset found."),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", help="Ask the API to overwrite existing data on upload."),
    ] = False,
    clear: Annotated[
        bool,
        typer.Option("--clear", help="Delete the datasets instead of importing them."),
    ] = False,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="YAML configuration file. Default: $HISTOGRAPH_CONFIG, then ./config.yaml.",
        ),
    ] = None,
    log_level: Annotated[
        str | None,
        typer.Option(
            "--log-level",
            callback=_validate_log_level,
            help="Override telemetry.log_level (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
        ),
    ] = None,
    _: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=_version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Import datasets from the configured directories into the Histograph API."""
    config_path = resolve_config_path(config)
    try:
        cfg = Config.from_yaml(config_path)
    except ImporterConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=EXIT_FATAL)

    run_logger = Logger.setup(
        name=LOGGER_NAME,
        log_dir=cfg.telemetry.log_dir,
        level=log_level or cfg.telemetry.log_level,
    )

    mode = SyncMode.DELETE if clear else SyncMode.SYNC
    if clear and force:
        run_logger.warning(f"{LogStyle.WARNING} --force has no effect together with --clear")

    try:
        summary = run_import(
            cfg,
            requested=datasets or [],
            mode=mode,
            force=force,
            logger_instance=run_logger,
        )
    except ScanError as e:
        run_logger.error(f"{LogStyle.WARNING} {e}")
        raise typer.Exit(code=EXIT_FATAL)
    except KeyboardInterrupt:
        run_logger.warning(f"{LogStyle.WARNING} Interrupted by user.")
        raise typer.Exit(code=EXIT_FAILURE)

    raise typer.Exit(code=summary.exit_code)
