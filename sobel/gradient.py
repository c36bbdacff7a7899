"""
Sobel gradient computation.

Applies the fixed 3x3 Sobel masks:

    Gx = [[-1, 0, 1],        Gy = [[-1, -2, -1],
          [-2, 0, 2],              [ 0,  0,  0],
          [-1, 0, 1]]              [ 1,  2,  1]]

The masks are never applied on the outermost row/column; those pixels are 0
in every output buffer. Edge strength is the L1 magnitude |Gx| + |Gy|,
clipped to [0, 255]. Gx and Gy are kept raw for inspection.
"""

from dataclasses import dataclass

import numpy as np

MAX_MAGNITUDE = 255.0


@dataclass
class SobelGradients:
    """Output of the Sobel stage.

    Attributes:
        x_gradient: Raw horizontal gradient, signed and unclipped.
        y_gradient: Raw vertical gradient, signed and unclipped.
        magnitude: |Gx| + |Gy| clipped to [0, 255].
    """

    x_gradient: np.ndarray
    y_gradient: np.ndarray
    magnitude: np.ndarray


def apply_sobel(buffer: np.ndarray) -> SobelGradients:
    """Compute Sobel gradients for a 2D buffer.

    Pure function: the input is read only.

    Args:
        buffer: 2D intensity buffer of shape (H, W).

    Returns:
        SobelGradients with three new float64 buffers of shape (H, W).
        Buffers of images smaller than 3x3 are all zero.
    """
    if buffer.ndim != 2:
        raise ValueError(f"apply_sobel requires a 2D buffer, got shape {buffer.shape}")

    p = buffer.astype(np.float64)
    height, width = p.shape
    gx = np.zeros((height, width), dtype=np.float64)
    gy = np.zeros((height, width), dtype=np.float64)
    magnitude = np.zeros((height, width), dtype=np.float64)

    if height < 3 or width < 3:
        return SobelGradients(x_gradient=gx, y_gradient=gy, magnitude=magnitude)

    # Neighbour views over the interior, named by (row, column) offset
    up_left, up, up_right = p[:-2, :-2], p[:-2, 1:-1], p[:-2, 2:]
    left, right = p[1:-1, :-2], p[1:-1, 2:]
    down_left, down, down_right = p[2:, :-2], p[2:, 1:-1], p[2:, 2:]

    inner_gx = (2 * right + up_right + down_right) - (2 * left + up_left + down_left)
    inner_gy = (2 * down + down_left + down_right) - (2 * up + up_left + up_right)

    gx[1:-1, 1:-1] = inner_gx
    gy[1:-1, 1:-1] = inner_gy
    magnitude[1:-1, 1:-1] = np.clip(
        np.abs(inner_gx) + np.abs(inner_gy), 0.0, MAX_MAGNITUDE
    )

    return SobelGradients(x_gradient=gx, y_gradient=gy, magnitude=magnitude)
