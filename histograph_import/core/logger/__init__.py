"""
Telemetry and Reporting Package.

Centralizes console/file logging and the formatted run header and summary.

Available Components:

- Logger: Static utility for stream and file logging initialization.
- LogStyle: Unified logging style constants.
- Progress functions: Run header and completion summary logging.
"""

from .logger import ColorFormatter, Logger
from .progress import format_duration, log_run_header, log_run_summary
from .styles import LogStyle

__all__ = [
    "Logger",
    "ColorFormatter",
    "LogStyle",
    "log_run_header",
    "log_run_summary",
    "format_duration",
]
