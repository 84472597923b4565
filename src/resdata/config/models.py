"""Pydantic models describing the per-user paths configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


class ResearchPathsConfig(BaseModel):
    """Root configuration object: where external data lives and where outputs go.

    Values are stored exactly as they appear in the file; normalization
    against the filesystem happens in :mod:`resdata.resolver`.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    data_root: Path
    output_root: Optional[Path] = None

    @field_validator("data_root", "output_root", mode="before")
    @classmethod
    def _require_text(cls, value: object) -> object:
        """Reject blank strings and non-path scalars; surrounding whitespace is kept."""

        if value is None:
            return value
        if isinstance(value, Path):
            return value
        if not isinstance(value, str):
            raise ValueError(f"expected a path string, got {type(value).__name__}")
        if not value.strip():
            raise ValueError("path must not be blank")
        return value


__all__ = ["ResearchPathsConfig"]
