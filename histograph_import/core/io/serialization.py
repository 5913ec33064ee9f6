"""
Configuration File Loading.

Reads the YAML configuration shared by the Histograph services into a raw
mapping; validation is left to the pydantic models in ``core.config``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from ..paths import LOGGER_NAME


def load_config_from_yaml(yaml_path: Path) -> dict[str, Any]:
    """
    Loads a raw configuration dictionary from a YAML file.

    Args:
        yaml_path (Path): Path to the source YAML file.

    Returns:
        dict[str, Any]: The loaded configuration manifest (empty for an empty file).

    Raises:
        FileNotFoundError: If the specified path does not exist.
        ValueError: If the file is not valid YAML.
    """
    logger = logging.getLogger(LOGGER_NAME)

    if not yaml_path.exists():
        raise FileNotFoundError(f"YAML configuration file not found at: {yaml_path}")

    with open(yaml_path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"YAML parsing error: {e}") from e

    logger.debug(f"Configuration loaded from → {yaml_path}")
    return data if data is not None else {}
