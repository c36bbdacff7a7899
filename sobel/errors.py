"""Exception types raised by the edge detection pipeline.

Every error is fatal to the run it occurs in. Nothing is retried: the
pipeline is deterministic, so a retry would fail the same way.
"""


class EdgeDetectionError(Exception):
    """Base class for all edge detection failures."""


class DecodeError(EdgeDetectionError):
    """The input image could not be read or decoded."""


class UnsupportedPixelFormat(EdgeDetectionError, ValueError):
    """The raster uses a pixel encoding the luminance extractor cannot read."""


class ValueOutOfRange(EdgeDetectionError, ValueError):
    """A buffer handed to a stage holds samples outside the accepted range."""
