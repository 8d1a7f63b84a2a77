"""Pydantic schemas for runtime validation of invocation and conversion inputs."""

from __future__ import annotations

import re
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

MIN_QUALITY = 1
MAX_QUALITY = 100
DEFAULT_QUALITY = 80

_LEADING_INT = re.compile(r"[+-]?[0-9]+")


def _coerce_quality(value: object) -> object:
    """Parse string quality values from their leading base-10 digits.

    Surrounding whitespace and trailing non-digits are ignored, so ``"50abc"``
    is 50 and ``"1.5"`` is 1. Strings with no leading digits are rejected.
    """
    if isinstance(value, bool):
        raise ValueError("quality must be an integer, not a boolean.")
    if isinstance(value, str):
        match = _LEADING_INT.match(value.strip())
        if match is None:
            raise ValueError(f"quality must start with a base-10 integer, got {value!r}.")
        return int(match.group(), 10)
    return value


class ParsedInvocation(BaseModel):
    """Validated command-line invocation."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    input_file: str = Field(min_length=1)
    quality: int = Field(default=DEFAULT_QUALITY, ge=MIN_QUALITY, le=MAX_QUALITY)
    output_file: str | None = None

    @field_validator("quality", mode="before")
    @classmethod
    def _validate_quality(cls, value: object) -> object:
        return _coerce_quality(value)


class WebpConversionConfig(BaseModel):
    """Validated input for file-based WebP conversion."""

    model_config = ConfigDict(extra="forbid")

    input_path: Path
    output_path: Path
    quality: int = Field(default=DEFAULT_QUALITY, ge=MIN_QUALITY, le=MAX_QUALITY)

    @field_validator("quality", mode="before")
    @classmethod
    def _validate_quality(cls, value: object) -> object:
        return _coerce_quality(value)
