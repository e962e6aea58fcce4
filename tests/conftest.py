"""Shared fixtures: a raster source image and a minimal site host."""

from pathlib import Path

import pytest
from PIL import Image, ImageDraw


class FakeSite:
    def __init__(self, output_dir: Path):
        self.output_dir = output_dir
        self.shortcodes = {}

    def add_shortcode(self, name, func):
        self.shortcodes[name] = func


@pytest.fixture
def source_png(tmp_path):
    path = tmp_path / "src" / "logo.png"
    path.parent.mkdir()
    img = Image.new("RGBA", (600, 600), (0, 0, 0, 0))
    ImageDraw.Draw(img).ellipse((50, 50, 550, 550), fill=(200, 30, 30, 255))
    img.save(path, format="PNG")
    return path


@pytest.fixture
def png_512(tmp_path):
    path = tmp_path / "icon-512.png"
    Image.new("RGBA", (512, 512), (10, 120, 200, 255)).save(path, format="PNG")
    return path


@pytest.fixture
def site_root(tmp_path):
    return tmp_path / "dist"


@pytest.fixture
def fake_site(site_root):
    return FakeSite(site_root)
