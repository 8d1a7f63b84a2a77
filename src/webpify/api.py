"""Public file-based conversion API (delegates to application use-cases)."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from webpify.application.ports import ImageCodec
from webpify.application.results import ConversionResult
from webpify.application.use_cases import build_conversion_options
from webpify.application.use_cases import convert_image_file
from webpify.paths import resolve_output_path
from webpify.schemas import DEFAULT_QUALITY


def convert_file_to_webp(
    input_path: str | Path,
    output_path: Optional[str | Path] = None,
    quality: int = DEFAULT_QUALITY,
    codec: Optional[ImageCodec] = None,
) -> ConversionResult:
    """Convert an image file to WebP, deriving the output path when omitted."""
    resolved_output = resolve_output_path(
        str(input_path), str(output_path) if output_path else None
    )
    options = build_conversion_options(quality=quality)
    return convert_image_file(
        input_path=input_path,
        output_path=resolved_output,
        options=options,
        codec=codec,
    )
