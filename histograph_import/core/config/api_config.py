"""
API Connection Configuration Schema.

Declares where the Histograph API lives and which administrator credentials
are embedded in request URLs. Field names follow the camelCase keys used by
the shared Histograph configuration file (``baseUrl``).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .types import HttpUrlStr, NonEmptyStr, PositiveFloat


class AdminCredentials(BaseModel):
    """
    Administrator account used for basic authentication.

    Attributes:
        name: Administrator user name.
        password: Administrator password (hidden from repr).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: NonEmptyStr
    password: str = Field(repr=False)


class ApiConfig(BaseModel):
    """
    The ``api`` section of the configuration file.

    Attributes:
        base_url: API root URL (YAML key ``baseUrl``).
        admin: Administrator credentials.
        timeout: Optional per-request timeout in seconds; None waits indefinitely.

    Example:
        >>> ApiConfig(baseUrl="http://localhost:3001", admin={"name": "a", "password": "b"})
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    base_url: HttpUrlStr = Field(alias="baseUrl")
    admin: AdminCredentials
    timeout: PositiveFloat | None = Field(default=None, description="Request timeout (seconds)")
