"""Quantize RGBA bitmaps into PlantUML sprite documents."""
from pathlib import Path

import numpy as np

from ..errors import DecodeError
from ..utils.logger import get_logger

logger = get_logger(__name__)

ALPHA_THRESHOLD = 128
LIGHT_THRESHOLD = 200

TRANSPARENT_GLYPH = " "
LIGHT_GLYPH = "0"
DARK_GLYPH = "F"


class SpriteEncoder:
    """
    Turn a bitmap into a three-glyph PlantUML sprite.

    Pixels with alpha below ALPHA_THRESHOLD are transparent; opaque pixels
    whose red, green and blue all exceed LIGHT_THRESHOLD are light; every
    other pixel is dark. Hue and gradients are discarded.
    """

    def glyph_grid(self, bitmap: np.ndarray) -> np.ndarray:
        """Map an (H, W, 4) RGBA array to an (H, W) array of glyphs."""
        bitmap = np.asarray(bitmap)
        if bitmap.ndim != 3 or bitmap.shape[2] != 4:
            raise DecodeError(f"Expected an RGBA bitmap, got shape {bitmap.shape}")

        rgb = bitmap[:, :, :3].astype(np.int16)
        alpha = bitmap[:, :, 3].astype(np.int16)

        light = np.all(rgb > LIGHT_THRESHOLD, axis=2)
        glyphs = np.where(light, LIGHT_GLYPH, DARK_GLYPH)
        return np.where(alpha < ALPHA_THRESHOLD, TRANSPARENT_GLYPH, glyphs)

    def encode(self, bitmap: np.ndarray, identifier: str) -> str:
        """
        Build the sprite document text.

        Args:
            bitmap: RGBA array of shape (height, width, 4).
            identifier: Sprite name, without the leading ``$``.

        Returns:
            The full ``@startuml`` ... ``@enduml`` document.
        """
        grid = self.glyph_grid(bitmap)

        lines = ["@startuml", f"sprite ${identifier} ["]
        lines.extend("".join(row) for row in grid)
        lines.extend(["]", "", "@enduml"])
        return "\n".join(lines) + "\n"

    def write(self, output_path, bitmap: np.ndarray, identifier: str) -> Path:
        """Encode ``bitmap`` and save it as UTF-8 text at ``output_path``."""
        document = self.encode(bitmap, identifier)
        output_path = Path(output_path)
        with open(output_path, "w", encoding="utf-8", newline="\n") as f:
            f.write(document)
        logger.debug(f"Wrote sprite ${identifier} to {output_path}")
        return output_path
