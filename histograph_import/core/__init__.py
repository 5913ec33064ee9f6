"""
Core Utilities Package

Exposes the essential components for configuration, logging, file loading
and project constants.
"""

# Configuration
from .config import (
    AdminCredentials,
    ApiConfig,
    Config,
    ImportConfig,
    TelemetryConfig,
    resolve_config_path,
)

# Input/Output Utilities
from .io import load_config_from_yaml

# Logging
from .logger import Logger, LogStyle, format_duration, log_run_header, log_run_summary

# Constants & Paths
from .paths import (
    CONFIG_ENV_VAR,
    DEFAULT_CONFIG_PATH,
    IGNORED_DIRS,
    LOGGER_NAME,
)

__all__ = [
    # Configuration
    "Config",
    "ImportConfig",
    "ApiConfig",
    "AdminCredentials",
    "TelemetryConfig",
    "resolve_config_path",
    # Constants & Paths
    "LOGGER_NAME",
    "CONFIG_ENV_VAR",
    "DEFAULT_CONFIG_PATH",
    "IGNORED_DIRS",
    # I/O
    "load_config_from_yaml",
    # Logging
    "Logger",
    "LogStyle",
    "log_run_header",
    "log_run_summary",
    "format_duration",
]
