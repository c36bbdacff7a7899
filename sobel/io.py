"""
Image decoding and encoding at the pipeline boundary.

Decoding uses OpenCV (arrays arrive as gray, BGR or BGRA, 8 or 16 bit).
Encoding unpacks ARGB words and writes PNG files with Pillow.
"""

import logging
from pathlib import Path

import cv2
import numpy as np
from PIL import Image

from config import IMAGE_EXTENSIONS, OUTPUT_PREFIX
from .errors import DecodeError
from .raster import Raster

logger = logging.getLogger(__name__)


def decode(path) -> Raster:
    """Read an image file into a Raster.

    Args:
        path: Path to the image file.

    Returns:
        Raster with the pixel encoding resolved from the decoded array.

    Raises:
        DecodeError: If the file is missing, has an unsupported extension,
            or cannot be decoded.
        UnsupportedPixelFormat: If the decoded layout has no PixelEncoding.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise DecodeError(f"{path} is not a file")
    if file_path.suffix.lower() not in IMAGE_EXTENSIONS:
        raise DecodeError(f"{path} is not a supported image file")

    img = cv2.imread(str(file_path), cv2.IMREAD_UNCHANGED)
    if img is None:
        raise DecodeError(f"Could not decode image {path}")

    raster = Raster.from_array(img)
    logger.debug(
        "Decoded %s: %dx%d %s",
        file_path.name, raster.width, raster.height, raster.encoding.value,
    )
    return raster


def words_to_rgba(pixels: np.ndarray, width: int, height: int) -> np.ndarray:
    """Unpack 0xAARRGGBB words into an (H, W, 4) uint8 RGBA array."""
    words = np.asarray(pixels, dtype=np.uint32)
    if words.size != width * height:
        raise ValueError(
            f"Expected {width * height} pixels for {width}x{height}, got {words.size}"
        )
    words = words.reshape(height, width)
    rgba = np.empty((height, width, 4), dtype=np.uint8)
    rgba[:, :, 0] = (words >> 16) & 0xFF
    rgba[:, :, 1] = (words >> 8) & 0xFF
    rgba[:, :, 2] = words & 0xFF
    rgba[:, :, 3] = (words >> 24) & 0xFF
    return rgba


def encode(pixels: np.ndarray, width: int, height: int, output_path) -> None:
    """Write ARGB words to a PNG file.

    The parent directory is created if needed. Filesystem and Pillow
    failures propagate as OSError.
    """
    rgba = words_to_rgba(pixels, width, height)
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.fromarray(rgba).save(path, format="PNG")
    logger.debug("Wrote %s", path)


def artifact_path(
    output_dir,
    base_name: str,
    stage: str,
    label: str = "",
    prefix: str = OUTPUT_PREFIX,
) -> Path:
    """Build the output path for one artifact.

    Examples:
        >>> str(artifact_path("outputs", "house", "sum", label="all_"))
        'outputs/sobel_all_house_sum.png'
    """
    return Path(output_dir) / f"{prefix}{label}{base_name}_{stage}.png"
