"""Top-level API for image-to-WebP conversion."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from webpify.paths import resolve_output_path

if TYPE_CHECKING:
    from webpify.application.results import ConversionResult

__version__ = "0.1.0"


def convert_to_webp(
    input_path: str | Path,
    output_path: str | Path | None = None,
    quality: int = 80,
) -> ConversionResult:
    """Convert an image file to WebP.

    Parameters
    ----------
    input_path : str | Path
        Source image path.
    output_path : str | Path | None, default=None
        Destination path. When omitted, defaults to the input's directory
        and stem with a ``.webp`` extension.
    quality : int, default=80
        WebP quality in ``[1, 100]``.

    Returns
    -------
    ConversionResult
        Output path, source dimensions and the quality used.
    """
    from .api import convert_file_to_webp as _impl

    return _impl(input_path=input_path, output_path=output_path, quality=quality)


__all__ = [
    "__version__",
    "convert_to_webp",
    "resolve_output_path",
]
