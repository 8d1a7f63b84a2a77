"""Pillow-backed image codec."""

from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image, UnidentifiedImageError, features

from webpify.application.results import ImageMetadata
from webpify.errors import CodecError, DependencyError

logger = logging.getLogger(__name__)

WEBP_FORMAT = "WEBP"
_WEBP_MODES = frozenset({"RGB", "RGBA"})


def _has_alpha(image: Image.Image) -> bool:
    return "A" in image.getbands() or "transparency" in image.info


def _to_webp_mode(image: Image.Image) -> Image.Image:
    """Convert pixel modes the WebP encoder rejects to RGB or RGBA."""
    if image.mode in _WEBP_MODES:
        return image
    target = "RGBA" if _has_alpha(image) else "RGB"
    logger.debug("converting pixel mode %s -> %s", image.mode, target)
    return image.convert(target)


def _open_image(image_path: Path) -> Image.Image:
    try:
        return Image.open(image_path)
    except (UnidentifiedImageError, OSError) as exc:
        raise CodecError(str(exc)) from exc


class PillowImageCodec:
    """Read image headers and encode WebP through Pillow."""

    def read_metadata(self, image_path: Path) -> ImageMetadata:
        """Read image dimensions without decoding pixel data.

        Parameters
        ----------
        image_path : Path
            Source image path.

        Returns
        -------
        ImageMetadata
            Width, height, detected format and pixel mode.
        """
        with _open_image(image_path) as image:
            return ImageMetadata(
                width=image.width,
                height=image.height,
                format=image.format,
                mode=image.mode,
            )

    def encode_webp(self, image_path: Path, output_path: Path, quality: int) -> None:
        """Encode the first frame of ``image_path`` as WebP.

        Parameters
        ----------
        image_path : Path
            Source image path.
        output_path : Path
            Destination file; created or overwritten. Parent directories are
            not created.
        quality : int
            WebP quality in ``[1, 100]``.
        """
        if not features.check("webp"):
            raise DependencyError(
                "Pillow was built without WebP support. "
                "Reinstall Pillow with libwebp available."
            )

        with _open_image(image_path) as image:
            try:
                _to_webp_mode(image).save(output_path, format=WEBP_FORMAT, quality=quality)
            except (OSError, ValueError) as exc:
                raise CodecError(str(exc)) from exc
