"""
Semantic type Definitions & Validation Primitives.

Annotated pydantic types shared by the configuration sections. Paths are
expanded and made absolute without touching the disk, and URL strings are
checked for a usable scheme and host before any request is attempted.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Literal
from urllib.parse import urlsplit

from pydantic import AfterValidator, Field, PlainSerializer


# VALIDATORS
def _sanitize_path(v: str | Path) -> Path:
    """
    Resolve path to absolute form without disk side-effects.

    Expands user home directory (~) and converts to absolute path
    for consistency across environments.
    """
    return Path(v).expanduser().resolve()


def _validate_http_url(v: str) -> str:
    """
    Ensure the value is an absolute http(s) URL with a host.

    Raises:
        ValueError: If the scheme is not http/https or the host is missing.
    """
    parts = urlsplit(v)
    if parts.scheme not in ("http", "https"):
        raise ValueError(f"URL must use http or https, got: '{v}'")
    if not parts.hostname:
        raise ValueError(f"URL has no host: '{v}'")
    return v


# GENERIC PRIMITIVES
PositiveFloat = Annotated[float, Field(gt=0.0)]
NonEmptyStr = Annotated[str, Field(min_length=1)]

# FILESYSTEM
ValidatedPath = Annotated[
    Path,
    AfterValidator(_sanitize_path),
    PlainSerializer(lambda v: str(v), when_used="json", return_type=str),
]

# NETWORK
HttpUrlStr = Annotated[str, AfterValidator(_validate_http_url)]

# TELEMETRY
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
