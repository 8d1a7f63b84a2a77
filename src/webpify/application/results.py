"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ImageMetadata:
    """Header information read from a source image."""

    width: int
    height: int
    format: str | None = None
    mode: str | None = None


@dataclass(frozen=True)
class ConversionResult:
    """Structured conversion outcome."""

    output_path: Path
    width: int
    height: int
    quality: int
    source_path: Path
    source_format: str | None = None

    @property
    def dimensions(self) -> str:
        """Return dimensions formatted as ``WIDTHxHEIGHT``."""
        return f"{self.width}x{self.height}"
