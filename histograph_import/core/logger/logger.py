"""
Logging Management Module

Handles centralized logging configuration for the importer. Bootstraps with
console-only output at import time and is reconfigured by the CLI once the
configuration file has been read, optionally adding a rotating log file.

The console handler is colored only on a terminal; the optional log file
is always plain text and rotates at 5 MB, keeping five backups.
"""

from __future__ import annotations

import logging
import os
import re
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final

from ..paths import LOGGER_NAME
from .styles import LogStyle

# Separator characters used to detect decorative lines
_SEPARATOR_CHARS = {"━", "═", "─"}

# Matches subtitle tags like [Sync], [Delete], [Summary]
# but NOT data brackets like [201] or [!]
_SUBTITLE_RE = re.compile(r"\[([A-Za-z][A-Za-z ]*)\]")


class ColorFormatter(logging.Formatter):
    """Formatter that applies ANSI colors to console output.

    Colors are applied based on log level and message content:
        - WARNING: yellow level prefix and message
        - ERROR/CRITICAL: red level prefix and message
        - Lines with ✓: green
        - Lines with ✗: red
        - Separator lines (━, ═, ─): dim
        - Centered UPPER CASE headers: bold magenta
        - Subtitle tags like [Sync], [Delete]: bold magenta
    """

    _LEVEL_COLORS = {
        logging.WARNING: LogStyle.YELLOW,
        logging.ERROR: LogStyle.RED,
        logging.CRITICAL: LogStyle.RED + LogStyle.BOLD,
    }

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record with ANSI color codes.

        Colors are applied **only to the message text**; the timestamp and
        level prefix on the left remain uncolored unless the level is WARNING+.
        """
        formatted = super().format(record)
        msg = record.getMessage()

        level_color = self._LEVEL_COLORS.get(record.levelno)
        if level_color:
            formatted = formatted.replace(
                record.levelname,
                f"{level_color}{record.levelname}{LogStyle.RESET}",
                1,
            )
            return self._color_message_only(formatted, msg, level_color)

        if record.levelno == logging.INFO:
            stripped = msg.strip()

            # Separator lines → dim
            if stripped and all(c in _SEPARATOR_CHARS for c in stripped):
                return self._color_message_only(formatted, msg, LogStyle.DIM)

            # Centered headers (e.g. "DATASET SYNCHRONIZATION") → bold magenta
            if (
                stripped == stripped.upper()
                and len(stripped) > 5
                and any(c.isalpha() for c in stripped)
            ):
                return self._color_message_only(formatted, msg, LogStyle.BOLD + LogStyle.MAGENTA)

            if LogStyle.SUCCESS in msg:
                return self._color_message_only(formatted, msg, LogStyle.GREEN)

            if LogStyle.FAILURE in msg:
                return self._color_message_only(formatted, msg, LogStyle.RED)

        if _SUBTITLE_RE.search(msg):
            formatted = self._color_subtitles(formatted, msg)

        return formatted

    def _color_message_only(self, formatted: str, msg: str, color: str) -> str:
        """Apply *color* only to the message portion of *formatted*, leaving the prefix plain."""
        idx = formatted.find(msg)
        if idx == -1 or not msg:
            return formatted
        prefix = formatted[:idx]
        return f"{prefix}{color}{formatted[idx:]}{LogStyle.RESET}"

    def _color_subtitles(self, formatted: str, msg: str) -> str:
        """Apply bold magenta to ``[Subtitle]`` tags in the message portion only."""
        idx = formatted.find(msg)
        if idx == -1:
            return formatted
        prefix = formatted[:idx]
        msg_part = formatted[idx:]
        colored_msg = _SUBTITLE_RE.sub(
            rf"{LogStyle.BOLD}{LogStyle.MAGENTA}\g<0>{LogStyle.RESET}",
            msg_part,
        )
        return prefix + colored_msg


# LOGGER SETUP
_LOG_FORMAT: Final[str] = "%(asctime)s - %(levelname)s - %(message)s"
_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"
_ROTATE_MAX_BYTES: Final[int] = 5 * 1024 * 1024
_ROTATE_BACKUPS: Final[int] = 5


def _console_handler() -> logging.Handler:
    """Stdout handler, colored only when attached to a terminal."""
    handler = logging.StreamHandler(sys.stdout)
    formatter_cls = ColorFormatter if sys.stdout.isatty() else logging.Formatter
    handler.setFormatter(formatter_cls(_LOG_FORMAT, _DATE_FORMAT))
    return handler


def _file_handler(name: str, log_dir: Path) -> logging.Handler:
    """Rotating plain-text handler writing ``<log_dir>/<name>_<utc timestamp>.log``."""
    log_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
    handler = RotatingFileHandler(
        log_dir / f"{name}_{timestamp}.log",
        maxBytes=_ROTATE_MAX_BYTES,
        backupCount=_ROTATE_BACKUPS,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    return handler


class Logger:
    """
    Configures the importer's named logger.

    A logger is wired once (console handler) at import time. Later calls to
    ``setup`` only adjust its level, unless a log directory is given, in which
    case the handlers are rebuilt with a rotating file next to the console.
    """

    _configured: Final[set[str]] = set()

    @classmethod
    def setup(
        cls, name: str = LOGGER_NAME, log_dir: Path | None = None, level: str = "INFO"
    ) -> logging.Logger:
        """
        Configure and return the logger called *name*.

        Args:
            name: Logger identifier (typically LOGGER_NAME constant)
            log_dir: Directory for a rotating log file (None = console only)
            level: Logging level as string (DEBUG, INFO, WARNING, ERROR, CRITICAL)

        Environment Variables:
            DEBUG: If set to "1", forces DEBUG regardless of *level*
        """
        if os.getenv("DEBUG") == "1":
            numeric_level = logging.DEBUG
        else:
            numeric_level = getattr(logging, level.upper(), logging.INFO)

        log = logging.getLogger(name)
        log.setLevel(numeric_level)
        if name in cls._configured and log_dir is None:
            return log

        log.propagate = False
        for handler in log.handlers[:]:
            handler.close()
            log.removeHandler(handler)
        log.addHandler(_console_handler())
        if log_dir is not None:
            log.addHandler(_file_handler(name, Path(log_dir)))

        cls._configured.add(name)
        return log


# Console-only bootstrap; the CLI calls setup() again once config is loaded.
logger: Final[logging.Logger] = Logger.setup()
