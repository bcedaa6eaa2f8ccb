"""Decode rasterized intermediates into RGBA pixel arrays."""
from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from ..errors import DecodeError


def read_bitmap(image_path) -> np.ndarray:
    """
    Load an image file as an RGBA array.

    Args:
        image_path: Path to a PNG (or any format Pillow can read).

    Returns:
        uint8 array of shape (height, width, 4).

    Raises:
        DecodeError: the file is not a readable image.
        OSError: the file cannot be opened.
    """
    image_path = Path(image_path)
    try:
        with Image.open(image_path) as img:
            rgba = img.convert("RGBA")
    except UnidentifiedImageError as e:
        raise DecodeError(f"Failed to read image: {image_path}") from e

    return np.asarray(rgba, dtype=np.uint8)
