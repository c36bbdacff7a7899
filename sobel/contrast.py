"""
Contrast normalization via a cumulative-histogram remap.
"""

import numpy as np

from .errors import ValueOutOfRange
from .luminance import round_half_up

LEVELS = 256


def _as_levels(buffer: np.ndarray) -> np.ndarray:
    """Round a buffer to integer levels and check they fit in [0, 255]."""
    if np.issubdtype(buffer.dtype, np.integer):
        values = buffer.astype(np.int64)
    else:
        values = round_half_up(buffer).astype(np.int64)

    if values.size and (values.min() < 0 or values.max() > LEVELS - 1):
        raise ValueOutOfRange(
            f"Contrast normalization needs samples in [0, {LEVELS - 1}], "
            f"got range [{values.min()}, {values.max()}]"
        )
    return values


def build_remap(values: np.ndarray) -> np.ndarray:
    """Build the 256-entry remap table for integer samples in [0, 255].

    Bins are walked in order with a running sum. Each bin i claims every
    output level from the previous bin's target (exclusive) up to
    running_sum * 255 // total (inclusive). Level 0 always maps to 0.

    Returns:
        int64 array of 256 non-decreasing entries.
    """
    values = _as_levels(values)
    total = values.size
    remap = np.zeros(LEVELS, dtype=np.int64)
    if total == 0:
        return remap

    histogram = np.bincount(values.ravel(), minlength=LEVELS)
    targets = np.cumsum(histogram) * (LEVELS - 1) // total

    # remap[level] = first bin whose target reaches `level`
    levels = np.arange(1, LEVELS)
    remap[1:] = np.searchsorted(targets, levels, side="left")
    return remap


def normalize_contrast(buffer: np.ndarray) -> np.ndarray:
    """Flatten the intensity distribution of a buffer.

    Float buffers are rounded half-up to integer levels first.

    Args:
        buffer: 2D buffer with samples in [0, 255].

    Returns:
        New float64 buffer of remapped levels, same shape as the input.

    Raises:
        ValueOutOfRange: If any sample falls outside [0, 255].
    """
    values = _as_levels(buffer)
    remap = build_remap(values)
    return remap[values].astype(np.float64)
