"""
Remote API Package.

Exposes the HTTP client used by the synchronization pipeline together with
the wire-level constants of the Histograph dataset endpoints.
"""

from .client import (
    FORCE_HEADER,
    JSON_CONTENT_TYPE,
    NDJSON_CONTENT_TYPE,
    ApiClient,
    CreateStatus,
    error_from_response,
    transport_error_code,
)

__all__ = [
    "ApiClient",
    "CreateStatus",
    "error_from_response",
    "transport_error_code",
    "FORCE_HEADER",
    "JSON_CONTENT_TYPE",
    "NDJSON_CONTENT_TYPE",
]
