"""
Sobel edge detection for single images.

This module provides pure, deterministic functions that turn a decoded
raster into an edge map. All functions follow the pattern: input -> output
with no mutation of the original arrays.

Key components:
- raster: Raster and PixelEncoding for decoded input images
- config: EdgeConfig dataclass for parameterizing all stages
- luminance: luminance extraction from any supported encoding
- gaussian: Gaussian kernel generation and smoothing
- contrast: cumulative-histogram contrast normalization
- gradient: Sobel gradients and L1 magnitude
- quantize: conversion of buffers to gray or binary ARGB words
- io: decoding (OpenCV) and PNG encoding (Pillow)
- pipeline: run_pipeline(), write_artifacts() and detect_edges()
"""

from .config import EdgeConfig
from .errors import (
    EdgeDetectionError,
    DecodeError,
    UnsupportedPixelFormat,
    ValueOutOfRange,
)
from .raster import Raster, PixelEncoding, pack_argb
from .luminance import extract_luminance, luminance
from .gaussian import gaussian_kernel, apply_gaussian
from .contrast import build_remap, normalize_contrast
from .gradient import SobelGradients, apply_sobel
from .quantize import quantize
from .io import decode, encode, artifact_path
from .pipeline import (
    EdgeResult,
    StageResult,
    run_pipeline,
    write_artifacts,
    detect_edges,
)

__all__ = [
    # Config and errors
    "EdgeConfig",
    "EdgeDetectionError",
    "DecodeError",
    "UnsupportedPixelFormat",
    "ValueOutOfRange",
    # Input
    "Raster",
    "PixelEncoding",
    "pack_argb",
    # Stages
    "extract_luminance",
    "luminance",
    "gaussian_kernel",
    "apply_gaussian",
    "build_remap",
    "normalize_contrast",
    "SobelGradients",
    "apply_sobel",
    "quantize",
    # I/O
    "decode",
    "encode",
    "artifact_path",
    # Pipeline
    "EdgeResult",
    "StageResult",
    "run_pipeline",
    "write_artifacts",
    "detect_edges",
]
