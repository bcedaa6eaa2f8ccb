"""Shared fixtures: fake rasterizers so tests run without external tools."""
from pathlib import Path

import numpy as np
import pytest
from PIL import Image

from svg2puml.rasterizing.backends import Rasterizer


class FakeRasterizer(Rasterizer):
    name = "fake-rasterizer"

    def build_command(self, input_path, output_path):
        return [self.name, str(input_path), str(output_path)]


class FakeLocator:
    """Locator that returns a fixed result and counts probes."""

    def __init__(self, rasterizer=None):
        self.rasterizer = rasterizer
        self.calls = 0

    def locate(self):
        self.calls += 1
        return self.rasterizer


class FakeInvoker:
    """
    Writes a solid 64x64 PNG instead of running a rasterizer.

    Files whose name contains "bad" fail like a rasterizer exiting non-zero;
    files whose name contains "garbage" produce an undecodable raster.
    """

    def __init__(self, color=(255, 255, 255, 255)):
        self.color = color
        self.calls = []

    def convert(self, rasterizer, input_path, output_path):
        self.calls.append(Path(input_path))
        name = Path(input_path).name
        if "bad" in name:
            return False
        if "garbage" in name:
            Path(output_path).write_bytes(b"not a png")
            return True
        pixels = np.full((64, 64, 4), self.color, dtype=np.uint8)
        Image.fromarray(pixels, "RGBA").save(output_path)
        return True


def rgba(pixels):
    return np.array(pixels, dtype=np.uint8)


@pytest.fixture
def fake_rasterizer():
    return FakeRasterizer()


@pytest.fixture
def svg_tree(tmp_path):
    """Input tree with one good and one malformed icon."""
    root = tmp_path / "svg"
    (root / "icons").mkdir(parents=True)
    (root / "icons" / "ok.svg").write_text("<svg/>")
    (root / "icons" / "bad.svg").write_text("<svg")
    return root
