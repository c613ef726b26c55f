"""Pydantic schemas for runtime validation of conversion inputs."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator


class ConversionConfig(BaseModel):
    """Validated run configuration: requested output format and input path."""

    model_config = ConfigDict(extra="forbid", frozen=True, strict=True)

    output_format: Literal["png", "jpg", "jpeg"]
    input_path: Path

    @field_validator("input_path", mode="before")
    @classmethod
    def _coerce_input_path(cls, value: object) -> object:
        if isinstance(value, str):
            return Path(value)
        return value
