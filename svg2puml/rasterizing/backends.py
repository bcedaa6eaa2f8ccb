"""Command-line builders for the supported external SVG rasterizers."""
import sys
from pathlib import Path
from typing import Dict, List, Optional, Type

# Sprites are small icons; every backend renders onto this fixed canvas.
CANVAS_SIZE = 64


def is_windows() -> bool:
    return sys.platform.startswith("win")


class Rasterizer:
    """
    One external program able to render an SVG file to a PNG.

    Subclasses set ``name`` (the executable looked up on PATH) and implement
    ``build_command``. Every command renders onto a transparent
    CANVAS_SIZE x CANVAS_SIZE canvas.
    """

    name: str = ""

    def build_command(self, input_path: Path, output_path: Path) -> List[str]:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class InkscapeRasterizer(Rasterizer):
    """Inkscape 1.x. Best rendering quality; flag spelling differs on Windows."""

    name = "inkscape"

    def __init__(self, windows: Optional[bool] = None):
        self.windows = is_windows() if windows is None else windows

    def build_command(self, input_path: Path, output_path: Path) -> List[str]:
        if self.windows:
            return [
                self.name,
                f"--export-filename={output_path}",
                f"--export-width={CANVAS_SIZE}",
                f"--export-height={CANVAS_SIZE}",
                "--export-background-opacity=0",
                str(input_path),
            ]
        return [
            self.name,
            "-o", str(output_path),
            "-w", str(CANVAS_SIZE),
            "-h", str(CANVAS_SIZE),
            "--export-background-opacity=0",
            str(input_path),
        ]


class ImageMagickRasterizer(Rasterizer):
    """ImageMagick ``convert``; pads the resized image out to the full canvas."""

    name = "convert"

    def build_command(self, input_path: Path, output_path: Path) -> List[str]:
        size = f"{CANVAS_SIZE}x{CANVAS_SIZE}"
        return [
            self.name,
            "-background", "none",
            "-density", "300",
            "-resize", size,
            "-gravity", "center",
            "-extent", size,
            str(input_path),
            str(output_path),
        ]


class RsvgRasterizer(Rasterizer):
    """librsvg's ``rsvg-convert``."""

    name = "rsvg-convert"

    def build_command(self, input_path: Path, output_path: Path) -> List[str]:
        return [
            self.name,
            "-w", str(CANVAS_SIZE),
            "-h", str(CANVAS_SIZE),
            "--background-color=none",
            "-o", str(output_path),
            str(input_path),
        ]


RASTERIZERS: Dict[str, Type[Rasterizer]] = {
    InkscapeRasterizer.name: InkscapeRasterizer,
    ImageMagickRasterizer.name: ImageMagickRasterizer,
    RsvgRasterizer.name: RsvgRasterizer,
}

DEFAULT_PREFERENCE = [
    InkscapeRasterizer.name,
    ImageMagickRasterizer.name,
    RsvgRasterizer.name,
]
