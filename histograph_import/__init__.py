"""
Histograph Import: synchronize dataset directories with the Histograph API.

Top-level convenience API re-exporting the most commonly used components
from subpackages, so scripts and the ``histograph-import`` CLI can write:

    from histograph_import import Config, run_import
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version

try:
    __version__ = _pkg_version("histograph-import")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0+unknown"

from .api import ApiClient, CreateStatus
from .core import Config, Logger, LogStyle
from .datasets import DatasetDescriptor, DatasetResolver, scan_import_roots
from .pipeline import RunSummary, SyncMode, SyncOrchestrator, run_import

__all__ = [
    "__version__",
    # Core
    "Config",
    "Logger",
    "LogStyle",
    # Datasets
    "DatasetDescriptor",
    "DatasetResolver",
    "scan_import_roots",
    # API
    "ApiClient",
    "CreateStatus",
    # Pipeline
    "SyncOrchestrator",
    "SyncMode",
    "RunSummary",
    "run_import",
]
