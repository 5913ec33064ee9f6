"""
Input/Output Utilities.

Filesystem helpers for reading the importer's configuration file.
"""

from .serialization import load_config_from_yaml

__all__ = [
    "load_config_from_yaml",
]
