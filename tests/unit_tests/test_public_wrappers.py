"""Unit tests for thin public wrapper modules."""

from __future__ import annotations

from pathlib import Path

import pytest

import webpify
import webpify.api as api_module
from webpify import application
from webpify.application.results import ConversionResult, ImageMetadata


class _Codec:
    def __init__(self) -> None:
        self.encoded: list[tuple[Path, Path, int]] = []

    def read_metadata(self, image_path: Path) -> ImageMetadata:
        return ImageMetadata(width=3, height=2)

    def encode_webp(self, image_path: Path, output_path: Path, quality: int) -> None:
        self.encoded.append((image_path, output_path, quality))


def test_top_level_wrapper_forwards(monkeypatch: pytest.MonkeyPatch) -> None:
    """Forward top-level wrapper arguments to the API implementation."""
    called: dict[str, object] = {}

    def fake_impl(**kwargs: object) -> str:
        called.update(kwargs)
        return "sentinel"

    monkeypatch.setattr(api_module, "convert_file_to_webp", fake_impl)

    out = webpify.convert_to_webp("in.png", quality=42)

    assert out == "sentinel"
    assert called == {"input_path": "in.png", "output_path": None, "quality": 42}


def test_api_derives_output_path(tmp_path: Path) -> None:
    source = tmp_path / "shots" / "pic.JPG"
    source.parent.mkdir()
    source.write_bytes(b"x")
    codec = _Codec()

    result = api_module.convert_file_to_webp(source, codec=codec)

    expected = tmp_path / "shots" / "pic.webp"
    assert codec.encoded == [(source, expected, 80)]
    assert result.output_path == expected


def test_api_explicit_output_wins(tmp_path: Path) -> None:
    source = tmp_path / "pic.png"
    source.write_bytes(b"x")
    target = tmp_path / "elsewhere.bin"
    codec = _Codec()

    result = api_module.convert_file_to_webp(source, target, quality=10, codec=codec)

    assert codec.encoded == [(source, target, 10)]
    assert result.quality == 10


def test_application_wrappers_forward(tmp_path: Path) -> None:
    source = tmp_path / "pic.png"
    source.write_bytes(b"x")
    codec = _Codec()

    options = application.build_conversion_options(quality=33)
    result = application.convert_image_file(
        input_path=source,
        output_path=tmp_path / "pic.webp",
        options=options,
        codec=codec,
    )

    assert isinstance(result, ConversionResult)
    assert result.dimensions == "3x2"
    assert codec.encoded[0][2] == 33


def test_resolve_output_path_is_exported() -> None:
    assert webpify.resolve_output_path("a/b/img.png") == "a/b/img.webp"
    assert webpify.__version__
