"""
Histograph Import Exception Hierarchy.

ImporterError (base, Exception)
├── ImporterConfigError(ImporterError, ValueError)   ← config loading/validation
├── ScanError(ImporterError)                         ← import root cannot be listed
└── ApiClientError(ImporterError)                    ← any failed API call
    ├── ApiError(ApiClientError)                     ← non-success HTTP status
    └── TransportError(ApiClientError)               ← connection-level failure

ImporterConfigError multi-inherits from ValueError so pydantic-style
``except ValueError`` blocks keep working.
"""

from __future__ import annotations

from typing import Any


class ImporterError(Exception):
    """Base exception for all importer errors."""


class ImporterConfigError(ImporterError, ValueError):
    """Configuration file missing, unreadable, or invalid."""


class ScanError(ImporterError):
    """An import root directory could not be listed. Fatal for the whole run."""

    def __init__(self, root: Any, reason: str) -> None:
        self.root = root
        self.reason = reason
        super().__init__(f"Cannot read import directory {root}: {reason}")


class ApiClientError(ImporterError):
    """Base class for failures talking to the remote API."""


class ApiError(ApiClientError):
    """
    The API answered with a non-success HTTP status.

    Attributes:
        status: HTTP status code returned by the server.
        message: Server-provided ``message`` field, or the raw body when the
            body is not a JSON object carrying one.
        details: Optional nested validation ``details`` supplied by the server.
    """

    def __init__(
        self,
        status: int,
        message: str,
        details: Any = None,
    ) -> None:
        self.status = status
        self.message = message
        self.details = details
        super().__init__(f"HTTP {status}: {message}")


class TransportError(ApiClientError):
    """
    The request never produced an HTTP response (DNS, refused, timeout).

    Attributes:
        code: OS-level error code name (e.g. ``ECONNREFUSED``) when the
            transport exposes one, else None.
    """

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code
        super().__init__(message)
