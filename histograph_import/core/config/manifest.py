"""
Root Configuration Manifest.

Aggregates the sections the importer reads from the shared Histograph
configuration file. Unknown top-level sections belong to other Histograph
services and are ignored; the sections owned here reject unknown keys.

Example:
    >>> cfg = Config.from_yaml(Path("config.yaml"))
    >>> cfg.import_.dirs
    [PosixPath('/data/histograph')]
    >>> cfg.api.base_url
    'http://localhost:3001'
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...exceptions import ImporterConfigError
from ..io import load_config_from_yaml
from ..paths import CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH
from .api_config import ApiConfig
from .import_config import ImportConfig
from .telemetry_config import TelemetryConfig


class Config(BaseModel):
    """
    Validated, immutable configuration for one import run.

    Attributes:
        import_: Import roots (YAML key ``import``).
        api: API location and administrator credentials.
        telemetry: Logging policy.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    import_: ImportConfig = Field(alias="import")
    api: ApiConfig
    telemetry: TelemetryConfig = Field(default_factory=TelemetryConfig)

    @classmethod
    def from_dict(cls, data: Any, base_dir: Path | None = None) -> "Config":
        """
        Validate a raw mapping.

        Args:
            data: Parsed configuration mapping.
            base_dir: Directory relative import roots are anchored to.

        Raises:
            ImporterConfigError: If the mapping is not a valid configuration.
        """
        if not isinstance(data, dict):
            raise ImporterConfigError("Configuration must be a mapping of sections")
        try:
            return cls.model_validate(data, context={"base_dir": base_dir})
        except ValidationError as e:
            raise ImporterConfigError(f"Invalid configuration:\n{e}") from e

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "Config":
        """
        Load and validate a YAML configuration file.

        Relative import roots are resolved against the file's directory.

        Raises:
            ImporterConfigError: If the file is missing, unparsable or invalid.
        """
        yaml_path = Path(yaml_path).expanduser()
        try:
            data = load_config_from_yaml(yaml_path)
        except FileNotFoundError as e:
            raise ImporterConfigError(str(e)) from e
        except (OSError, ValueError) as e:
            raise ImporterConfigError(f"Cannot read configuration {yaml_path}: {e}") from e

        return cls.from_dict(data, base_dir=yaml_path.resolve().parent)


def resolve_config_path(explicit: Path | None = None) -> Path:
    """
    Pick the configuration file for this run.

    Precedence: explicit ``--config`` value, then ``$HISTOGRAPH_CONFIG``,
    then ``./config.yaml``.
    """
    if explicit is not None:
        return Path(explicit)
    env_value = os.getenv(CONFIG_ENV_VAR)
    if env_value:
        return Path(env_value)
    return DEFAULT_CONFIG_PATH
