"""Shared fixtures and the --slow switch.

Tests marked `slow` run the pipeline on large random images and are only
collected for execution with `pytest --slow`.
"""
import numpy as np
import pytest

from sobel import Raster


def pytest_addoption(parser):
    parser.addoption(
        "--slow",
        action="store_true",
        help="Also run tests marked slow (large images)",
    )


def pytest_collection_modifyitems(config, items):
    if config.getoption("--slow"):
        return
    skip = pytest.mark.skip(reason="needs --slow")
    for item in items:
        if item.get_closest_marker("slow"):
            item.add_marker(skip)


@pytest.fixture
def gray_raster():
    """Deterministic 12x16 BYTE_GRAY raster with a mix of flat and busy areas."""
    rng = np.random.default_rng(1234)
    img = rng.integers(0, 256, (12, 16), dtype=np.uint8)
    img[:, :4] = 90
    return Raster.from_array(img)


@pytest.fixture
def bgr_image():
    """Small BGR image with a bright square on a dark background."""
    img = np.full((20, 30, 3), 20, dtype=np.uint8)
    img[5:15, 10:20] = (40, 200, 230)
    return img
