"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from webpify.application.results import ImageMetadata


class ImageCodec(Protocol):
    """Decode source images and encode WebP output."""

    def read_metadata(self, image_path: Path) -> ImageMetadata:
        """Return dimensions and format details for an image."""

    def encode_webp(self, image_path: Path, output_path: Path, quality: int) -> None:
        """Encode ``image_path`` as WebP at ``output_path``; raise on failure."""
