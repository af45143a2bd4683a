"""
Image output.

Rendered images are float64 arrays of shape (height, width, 3), top
scanline first. They are quantized to 8 bits per channel and written as
plain-text PPM (P3) or, for any other extension, through Pillow.
"""

from __future__ import annotations
import logging
import sys
from pathlib import Path
from typing import TextIO, Optional, Union
import numpy as np

logger = logging.getLogger(__name__)

MAX_INTENSITY = 255


def quantize(image: np.ndarray) -> np.ndarray:
    """Convert radiance to 8-bit channel values.

    Each channel becomes floor(c * 255), saturated to [0, 255], so
    overflowing highlights come out as full intensity instead of wrapping.

    Args:
        image: Radiance array (float)

    Returns:
        uint8 array of the same shape
    """
    scaled = np.floor(np.nan_to_num(image, nan=0.0) * MAX_INTENSITY)
    return np.clip(scaled, 0, MAX_INTENSITY).astype(np.uint8)


def overflow_mask(image: np.ndarray) -> np.ndarray:
    """Boolean (height, width) mask of pixels with any channel above 1."""
    return np.any(image > 1.0, axis=-1)


def write_ppm(image: np.ndarray, stream: Optional[TextIO] = None) -> None:
    """Write an image as plain-text PPM.

    Args:
        image: Radiance array (float) or already quantized uint8 array
        stream: Text stream to write to (default: stdout)
    """
    if stream is None:
        stream = sys.stdout
    if image.dtype != np.uint8:
        image = quantize(image)

    height, width = image.shape[:2]
    stream.write(f"P3\n{width} {height}\n{MAX_INTENSITY}\n")
    for row in image:
        stream.write(" ".join(f"{r} {g} {b}" for r, g, b in row))
        stream.write("\n")


def save_image(image: np.ndarray, filename: Union[str, Path]) -> None:
    """Save image to file.

    Args:
        image: Radiance array or uint8 array
        filename: Output filename; .ppm is written as text, anything else
            through Pillow (extension determines format)
    """
    path = Path(filename)
    if path.suffix.lower() == '.ppm':
        with path.open('w') as f:
            write_ppm(image, f)
    else:
        from PIL import Image as PILImage

        if image.dtype != np.uint8:
            image = quantize(image)
        PILImage.fromarray(image, 'RGB').save(path)

    logger.info("Saved %dx%d image to %s", image.shape[1], image.shape[0], path)
