"""Application use-cases orchestrating conversion workflows."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from pydantic import ValidationError

from webpify.adapters.codecs import PillowImageCodec
from webpify.application.options import ConversionOptions
from webpify.application.ports import ImageCodec
from webpify.application.results import ConversionResult
from webpify.errors import ConversionError, InputNotFoundError
from webpify.schemas import DEFAULT_QUALITY, WebpConversionConfig

logger = logging.getLogger(__name__)


def convert_image_file(
    *,
    input_path: str | Path,
    output_path: str | Path,
    options: ConversionOptions,
    codec: ImageCodec | None = None,
) -> ConversionResult:
    """Use-case: convert an image file to WebP.

    Parameters
    ----------
    input_path : str | Path
        Source image. Must exist; the codec is not invoked otherwise.
    output_path : str | Path
        Destination file, created or overwritten. Its parent must exist.
    options : ConversionOptions
        Encoding options.
    codec : ImageCodec | None, default=None
        Codec adapter; defaults to :class:`PillowImageCodec`.

    Returns
    -------
    ConversionResult
        Output path, source dimensions and the quality used.

    Raises
    ------
    InputNotFoundError
        If ``input_path`` does not exist.
    ConversionError
        If the parameters fail validation.
    CodecError
        If decoding or encoding fails.
    """
    try:
        config = WebpConversionConfig(
            input_path=Path(input_path),
            output_path=Path(output_path),
            quality=options.quality,
        )
    except ValidationError as exc:
        raise ConversionError(f"Invalid WebP conversion parameters: {exc}") from exc

    if not config.input_path.exists():
        raise InputNotFoundError(f"File not found: {os.fspath(input_path)}")

    codec = codec or PillowImageCodec()

    logger.debug(
        "converting %s -> %s at quality %d",
        config.input_path,
        config.output_path,
        config.quality,
    )
    metadata = codec.read_metadata(config.input_path)
    logger.debug(
        "source %s: %dx%d format=%s mode=%s",
        config.input_path,
        metadata.width,
        metadata.height,
        metadata.format,
        metadata.mode,
    )
    codec.encode_webp(config.input_path, config.output_path, config.quality)

    return ConversionResult(
        output_path=config.output_path,
        width=metadata.width,
        height=metadata.height,
        quality=config.quality,
        source_path=config.input_path,
        source_format=metadata.format,
    )


def build_conversion_options(*, quality: int = DEFAULT_QUALITY) -> ConversionOptions:
    """Build typed option object from command/API params."""
    return ConversionOptions(quality=quality)
