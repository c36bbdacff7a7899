"""
Output quantization.

Turns any intensity buffer into 0xAARRGGBB words ready for the encoder:
either an opaque grayscale image or a hard black/white edge mask.
"""

import numpy as np

from config import EDGE_THRESHOLD
from .luminance import round_half_up

OPAQUE_BLACK = np.uint32(0xFF000000)
OPAQUE_WHITE = np.uint32(0xFFFFFFFF)


def to_levels(buffer: np.ndarray, scale: float = 1.0, invert: bool = False) -> np.ndarray:
    """Scale, round, clip and optionally invert a buffer to [0, 255].

    Returns:
        New uint32 array of the same shape with values in [0, 255].
    """
    scaled = np.asarray(buffer, dtype=np.float64) * scale
    levels = np.clip(round_half_up(scaled), 0, 255).astype(np.uint32)
    if invert:
        levels = np.uint32(255) - levels
    return levels


def threshold_edges(
    levels: np.ndarray,
    threshold: int = EDGE_THRESHOLD,
    invert: bool = False,
) -> np.ndarray:
    """Convert levels into a binary mask of opaque white / black words.

    When inverted, levels have already been flipped, so a pixel is
    foreground when it lies above 255 - threshold.
    """
    cutoff = 255 - threshold if invert else threshold
    return np.where(levels > cutoff, OPAQUE_WHITE, OPAQUE_BLACK).astype(np.uint32)


def gray_words(levels: np.ndarray) -> np.ndarray:
    """Pack levels into opaque gray ARGB words (same value in R, G and B)."""
    levels = levels.astype(np.uint32)
    return OPAQUE_BLACK | (levels << 16) | (levels << 8) | levels


def quantize(
    buffer: np.ndarray,
    scale: float = 1.0,
    invert: bool = False,
    edge: bool = False,
    threshold: int = EDGE_THRESHOLD,
) -> np.ndarray:
    """Quantize a buffer into displayable ARGB words.

    Args:
        buffer: Integer or float intensity buffer.
        scale: Brightness factor applied before rounding (1.0 = identity).
        invert: Flip levels (255 - v) before packing or thresholding.
        edge: Produce a binary edge mask instead of a grayscale image.
        threshold: Edge threshold in [0, 255], used only when edge is set.

    Returns:
        New uint32 array of 0xAARRGGBB words, same shape as the input.
    """
    levels = to_levels(buffer, scale=scale, invert=invert)
    if edge:
        return threshold_edges(levels, threshold=threshold, invert=invert)
    return gray_words(levels)
