"""Shared type aliases."""

from __future__ import annotations

from collections.abc import Callable
from typing import Literal, TypeAlias

OutputFormat: TypeAlias = Literal["png", "jpg", "jpeg"]

OUTPUT_FORMATS: tuple[str, ...] = ("png", "jpg", "jpeg")

Reporter: TypeAlias = Callable[[str], None]
