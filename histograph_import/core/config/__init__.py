"""
Configuration Package Initialization.

Provides a flat public API for the pydantic configuration sections.

Example:
    >>> from histograph_import.core.config import Config
    >>> cfg = Config.from_yaml(Path("config.yaml"))
"""

from .api_config import AdminCredentials, ApiConfig
from .import_config import ImportConfig
from .manifest import Config, resolve_config_path
from .telemetry_config import TelemetryConfig
from .types import HttpUrlStr, LogLevel, ValidatedPath

__all__ = [
    "Config",
    "ImportConfig",
    "ApiConfig",
    "AdminCredentials",
    "TelemetryConfig",
    "ValidatedPath",
    "HttpUrlStr",
    "LogLevel",
    "resolve_config_path",
]
