"""Test configuration and fixtures for cl_fit_tools.

This module provides:
- Function-scoped fixtures generating synthetic images with PIL
"""

from collections.abc import Callable
from pathlib import Path

import pytest
from PIL import Image

RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)
WHITE = (255, 255, 255, 255)

ImageFactory = Callable[..., Path]


# ============================================================================
# Function-Scoped Fixtures (Run Per Test)
# ============================================================================


@pytest.fixture
def temp_output_dir(tmp_path: Path) -> Path:
    """Provide clean temporary directory for test outputs."""
    output_dir = tmp_path / "output"
    output_dir.mkdir()
    return output_dir


@pytest.fixture
def make_image(tmp_path: Path) -> ImageFactory:
    """Factory writing a solid-color image and returning its path."""

    def _make(
        width: int,
        height: int,
        color: tuple[int, ...] = RED,
        name: str = "source.png",
        mode: str = "RGBA",
    ) -> Path:
        path = tmp_path / name
        Image.new(mode, (width, height), color).save(path)
        return path

    return _make


@pytest.fixture
def wide_image_path(make_image: ImageFactory) -> Path:
    """100x50 solid red PNG."""
    return make_image(100, 50, RED, name="wide.png")


@pytest.fixture
def split_image_path(tmp_path: Path) -> Path:
    """100x50 PNG, left half red and right half blue."""
    path = tmp_path / "split.png"
    img = Image.new("RGBA", (100, 50), RED)
    img.paste(Image.new("RGBA", (50, 50), BLUE), (50, 0))
    img.save(path)
    return path


@pytest.fixture
def synthetic_jpeg(tmp_path: Path) -> Path:
    """Generate an 800x600 RGB JPEG with a grid pattern."""
    from PIL import ImageDraw

    output_path = tmp_path / "synthetic.jpg"

    img = Image.new("RGB", (800, 600), color=(73, 109, 137))
    draw = ImageDraw.Draw(img)
    for i in range(0, 800, 50):
        draw.line([(i, 0), (i, 600)], fill=(255, 255, 255), width=2)
    for i in range(0, 600, 50):
        draw.line([(0, i), (800, i)], fill=(255, 255, 255), width=2)
    draw.ellipse([300, 200, 500, 400], fill=(200, 100, 100))

    img.save(output_path, "JPEG", quality=85)
    return output_path
