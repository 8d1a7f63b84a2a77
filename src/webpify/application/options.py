"""Typed option objects shared across conversion use-cases."""

from __future__ import annotations

from dataclasses import dataclass

from webpify.schemas import DEFAULT_QUALITY


@dataclass(frozen=True)
class ConversionOptions:
    """Options passed through the WebP conversion use-case."""

    quality: int = DEFAULT_QUALITY
