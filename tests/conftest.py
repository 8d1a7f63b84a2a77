"""Shared pytest configuration, marker assignment and image fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from PIL import Image

ImageFactory = Callable[..., Path]


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def make_image(tmp_path: Path) -> ImageFactory:
    """Return a factory writing a solid-colour image under ``tmp_path``."""

    def _make(
        name: str = "img.png",
        size: tuple[int, int] = (100, 50),
        mode: str = "RGB",
        color: object = None,
        **save_kwargs: object,
    ) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        image = Image.new(mode, size, color=color if color is not None else 0)
        image.save(path, **save_kwargs)
        return path

    return _make
