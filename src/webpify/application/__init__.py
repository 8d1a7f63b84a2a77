"""Application-layer use-cases and option objects."""

from __future__ import annotations

from pathlib import Path

from webpify.application.options import ConversionOptions
from webpify.application.ports import ImageCodec
from webpify.application.results import ConversionResult, ImageMetadata
from webpify.schemas import DEFAULT_QUALITY


def build_conversion_options(*, quality: int = DEFAULT_QUALITY) -> ConversionOptions:
    """Build typed conversion options via lazy use-case import."""
    from webpify.application.use_cases import build_conversion_options as _impl

    return _impl(quality=quality)


def convert_image_file(
    *,
    input_path: str | Path,
    output_path: str | Path,
    options: ConversionOptions,
    codec: ImageCodec | None = None,
) -> ConversionResult:
    """Convert an image file to WebP via lazy use-case import."""
    from webpify.application.use_cases import convert_image_file as _impl

    return _impl(
        input_path=input_path,
        output_path=output_path,
        options=options,
        codec=codec,
    )


__all__ = [
    "ConversionOptions",
    "ConversionResult",
    "ImageCodec",
    "ImageMetadata",
    "build_conversion_options",
    "convert_image_file",
]
