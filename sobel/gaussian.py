"""
Gaussian smoothing.

The kernel is generated per call and normalized to unit mass. Convolution
only touches interior pixels: anything within `size // 2` of an edge keeps
its input value, and no clipping is applied to the result.
"""

import math

import numpy as np


def _check_kernel_args(sigma: float, size: int) -> None:
    if not math.isfinite(sigma) or sigma <= 0:
        raise ValueError(f"sigma must be positive and finite, got {sigma}")
    if not isinstance(size, int) or isinstance(size, bool):
        raise TypeError(f"size must be int, got {type(size).__name__}")
    if size < 1 or size % 2 == 0:
        raise ValueError(f"size must be an odd integer >= 1, got {size}")


def gaussian_kernel(sigma: float, size: int) -> np.ndarray:
    """Generate a normalized (size, size) Gaussian kernel.

    Args:
        sigma: Spread of the Gaussian. Must be positive.
        size: Kernel width. Must be odd so a unique center cell exists.

    Returns:
        float64 array of shape (size, size) whose weights sum to 1.0.
        kernel[offset + dy, offset + dx] is the weight for offset (dx, dy).

    Raises:
        ValueError: If sigma is not a positive finite number or size is
            not an odd positive integer.
        TypeError: If size is not an int.
    """
    _check_kernel_args(sigma, size)

    offset = size // 2
    coords = np.arange(-offset, offset + 1, dtype=np.float64)
    xx, yy = np.meshgrid(coords, coords)
    two_sigma_sq = 2.0 * sigma * sigma
    if two_sigma_sq == 0.0:
        # sigma so small its square underflows: all mass sits on the center
        kernel = np.zeros((size, size), dtype=np.float64)
        kernel[offset, offset] = 1.0
        return kernel

    # The 1 / (2 pi sigma^2) prefactor cancels in the normalization
    with np.errstate(over="ignore", under="ignore", divide="ignore"):
        kernel = np.exp(-(xx * xx + yy * yy) / two_sigma_sq)
    return kernel / kernel.sum()


def apply_gaussian(buffer: np.ndarray, sigma: float, size: int) -> np.ndarray:
    """Convolve a buffer with a normalized Gaussian kernel.

    Pure function: returns a new float64 array.

    Args:
        buffer: 2D intensity buffer.
        sigma: Spread of the Gaussian.
        size: Odd kernel width.

    Returns:
        Smoothed buffer. Pixels closer than size // 2 to any edge are copied
        unchanged from the input. If the image is smaller than the kernel
        the output equals the input.
    """
    if buffer.ndim != 2:
        raise ValueError(
            f"apply_gaussian requires a 2D buffer, got shape {buffer.shape}"
        )

    kernel = gaussian_kernel(sigma, size)
    offset = size // 2
    source = buffer.astype(np.float64)
    result = source.copy()

    height, width = source.shape
    if height <= 2 * offset or width <= 2 * offset:
        return result

    interior_h = height - 2 * offset
    interior_w = width - 2 * offset
    acc = np.zeros((interior_h, interior_w), dtype=np.float64)
    # The kernel is symmetric, so correlation and convolution coincide
    for ky in range(size):
        for kx in range(size):
            window = source[ky:ky + interior_h, kx:kx + interior_w]
            acc += kernel[ky, kx] * window

    result[offset:height - offset, offset:width - offset] = acc
    return result
