"""
Telemetry Configuration Schema.

Logging verbosity and optional persistent log directory for import runs.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .types import LogLevel, ValidatedPath


class TelemetryConfig(BaseModel):
    """
    The optional ``telemetry`` section of the configuration file.

    Attributes:
        log_level: Logging verbosity (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_dir: When set, a rotating log file is written there in addition to the console.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    log_level: LogLevel = Field(default="INFO")
    log_dir: ValidatedPath | None = Field(default=None)

    @model_validator(mode="before")
    @classmethod
    def handle_empty_config(cls, data: Any) -> Any:
        """
        Handle empty YAML section by returning default dict.

        When YAML contains 'telemetry:' with no values, Pydantic receives None.
        """
        if data is None:
            return {}
        return data
