"""
Decoded raster images and their pixel encodings.

A Raster is the read-only input of the pipeline. The pixel encoding is
resolved once, when the raster is built, so the luminance extractor can
dispatch on a PixelEncoding member instead of inspecting array shapes.
"""

from dataclasses import dataclass
from enum import Enum

import numpy as np

from .errors import UnsupportedPixelFormat


class PixelEncoding(Enum):
    """Sample layouts the luminance extractor understands.

    Attributes:
        PACKED_RGB: (H, W) uint32 words, 0x00RRGGBB (alpha bits ignored).
        PACKED_ARGB: (H, W) uint32 words, 0xAARRGGBB.
        BYTE_GRAY: (H, W) uint8 intensities.
        USHORT_GRAY: (H, W) uint16 intensities.
        BYTE_BGR: (H, W, 3) uint8, channel bytes in B, G, R order.
    """

    PACKED_RGB = "packed_rgb"
    PACKED_ARGB = "packed_argb"
    BYTE_GRAY = "byte_gray"
    USHORT_GRAY = "ushort_gray"
    BYTE_BGR = "byte_bgr"


@dataclass(frozen=True)
class Raster:
    """A decoded image.

    Attributes:
        width: Image width in pixels.
        height: Image height in pixels.
        encoding: How `samples` is laid out.
        samples: Raw pixel data, see PixelEncoding for the layout.
    """

    width: int
    height: int
    encoding: PixelEncoding
    samples: np.ndarray

    @property
    def size(self) -> int:
        return self.width * self.height

    @classmethod
    def from_array(cls, img: np.ndarray) -> "Raster":
        """Build a raster from an OpenCV-style array (gray, BGR or BGRA)."""
        encoding = resolve_encoding(img)
        height, width = img.shape[:2]
        if encoding is PixelEncoding.PACKED_ARGB:
            samples = pack_argb(img[:, :, 2], img[:, :, 1], img[:, :, 0], img[:, :, 3])
        elif encoding is PixelEncoding.BYTE_GRAY and img.ndim == 3:
            # Single channel - squeeze and copy
            samples = img[:, :, 0].copy()
        else:
            samples = img.copy()
        samples.setflags(write=False)
        return cls(width=width, height=height, encoding=encoding, samples=samples)

    @classmethod
    def from_rgb(cls, rgb: np.ndarray) -> "Raster":
        """Build a PACKED_RGB raster from an (H, W, 3) uint8 RGB array."""
        if rgb.ndim != 3 or rgb.shape[2] != 3:
            raise ValueError(f"Expected (H, W, 3) RGB array, got shape {rgb.shape}")
        height, width = rgb.shape[:2]
        samples = pack_argb(rgb[:, :, 0], rgb[:, :, 1], rgb[:, :, 2], alpha=0)
        samples.setflags(write=False)
        return cls(
            width=width,
            height=height,
            encoding=PixelEncoding.PACKED_RGB,
            samples=samples,
        )


def pack_argb(r, g, b, alpha=255) -> np.ndarray:
    """Pack 8-bit channels into 0xAARRGGBB uint32 words."""
    r = np.asarray(r, dtype=np.uint32)
    g = np.asarray(g, dtype=np.uint32)
    b = np.asarray(b, dtype=np.uint32)
    a = np.asarray(alpha, dtype=np.uint32)
    return (a << 24) | (r << 16) | (g << 8) | b


def resolve_encoding(img: np.ndarray) -> PixelEncoding:
    """Map a decoded OpenCV array to its PixelEncoding.

    Raises:
        UnsupportedPixelFormat: If the dtype / channel layout has no
            matching encoding (e.g. 16-bit color or 2-channel images).
    """
    if img.ndim == 2:
        if img.dtype == np.uint8:
            return PixelEncoding.BYTE_GRAY
        if img.dtype == np.uint16:
            return PixelEncoding.USHORT_GRAY
    elif img.ndim == 3 and img.dtype == np.uint8:
        channels = img.shape[2]
        if channels == 1:
            return PixelEncoding.BYTE_GRAY
        if channels == 3:
            return PixelEncoding.BYTE_BGR
        if channels == 4:
            return PixelEncoding.PACKED_ARGB
    raise UnsupportedPixelFormat(
        f"Unsupported image layout: dtype={img.dtype}, shape={img.shape}"
    )
