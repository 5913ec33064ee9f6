"""
Import Roots Configuration Schema.

Declares the ordered list of directories scanned for datasets. Relative
entries are anchored to the directory of the configuration file when one is
supplied through the validation context (``{"base_dir": Path}``), otherwise to
the current working directory.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class ImportConfig(BaseModel):
    """
    The ``import`` section of the configuration file.

    Attributes:
        dirs: Import roots in scan order (at least one).

    Example:
        >>> ImportConfig(dirs=["/data/histograph"]).dirs
        [PosixPath('/data/histograph')]
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    dirs: list[Path] = Field(min_length=1, description="Import root directories, in scan order")

    @field_validator("dirs", mode="after")
    @classmethod
    def anchor_relative_dirs(cls, dirs: list[Path], info: ValidationInfo) -> list[Path]:
        """Expand ``~`` and anchor relative paths to the config file directory."""
        base_dir = (info.context or {}).get("base_dir")
        anchored = []
        for d in dirs:
            d = d.expanduser()
            if not d.is_absolute() and base_dir is not None:
                d = Path(base_dir) / d
            anchored.append(d.resolve())
        return anchored
