"""
Luminance extraction.

Converts a Raster into a single-channel int32 buffer with values in
[0, 255]. Pure: the raster samples are never modified.
"""

import numpy as np

from .errors import UnsupportedPixelFormat
from .raster import PixelEncoding, Raster

# ITU-R BT.601 luma weights
RED_WEIGHT = 0.299
GREEN_WEIGHT = 0.587
BLUE_WEIGHT = 0.114


def round_half_up(values) -> np.ndarray:
    """Round to the nearest integer, ties toward +infinity.

    Used for every float-to-int conversion in the pipeline so luminance,
    contrast normalization and output quantization agree on ties.
    """
    return np.floor(np.asarray(values, dtype=np.float64) + 0.5)


def luminance(r, g, b) -> np.ndarray:
    """Weighted luminance of 8-bit channels, rounded half-up.

    Examples:
        >>> int(luminance(255, 0, 0))
        76
        >>> int(luminance(255, 255, 255))
        255
    """
    r = np.asarray(r, dtype=np.float64)
    g = np.asarray(g, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    weighted = RED_WEIGHT * r + GREEN_WEIGHT * g + BLUE_WEIGHT * b
    return round_half_up(weighted).astype(np.int32)


def _unpack_words(words: np.ndarray) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    words = words.astype(np.uint32, copy=False)
    r = (words >> 16) & 0xFF
    g = (words >> 8) & 0xFF
    b = words & 0xFF
    return r, g, b


def extract_luminance(raster: Raster) -> np.ndarray:
    """Read a raster into a (H, W) int32 luminance buffer.

    Args:
        raster: Decoded input image.

    Returns:
        New int32 array of shape (height, width), values in [0, 255].

    Raises:
        UnsupportedPixelFormat: If the raster encoding is not supported.
    """
    encoding = raster.encoding
    samples = raster.samples

    if encoding in (PixelEncoding.PACKED_RGB, PixelEncoding.PACKED_ARGB):
        result = luminance(*_unpack_words(samples))
    elif encoding is PixelEncoding.BYTE_GRAY:
        result = samples.astype(np.int32)
    elif encoding is PixelEncoding.USHORT_GRAY:
        result = (samples.astype(np.int32) >> 8)
    elif encoding is PixelEncoding.BYTE_BGR:
        b = samples[:, :, 0]
        g = samples[:, :, 1]
        r = samples[:, :, 2]
        result = luminance(r, g, b)
    else:
        raise UnsupportedPixelFormat(f"Unsupported pixel encoding: {encoding!r}")

    return np.ascontiguousarray(result.reshape(raster.height, raster.width))
