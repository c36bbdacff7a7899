"""
Unit tests for luminance extraction and pixel encodings.
"""

import numpy as np
import pytest

from sobel import (
    PixelEncoding,
    Raster,
    UnsupportedPixelFormat,
    extract_luminance,
    luminance,
    pack_argb,
)
from sobel.luminance import round_half_up
from sobel.raster import resolve_encoding


class TestLuminanceFormula:
    """Tests for the weighted luminance formula."""

    def test_pure_red(self):
        assert int(luminance(255, 0, 0)) == 76

    def test_pure_green(self):
        assert int(luminance(0, 255, 0)) == 150

    def test_pure_blue(self):
        assert int(luminance(0, 0, 255)) == 29

    def test_white_and_black(self):
        assert int(luminance(255, 255, 255)) == 255
        assert int(luminance(0, 0, 0)) == 0

    def test_round_half_up(self):
        assert round_half_up([0.5, 1.5, 2.5, 2.49]).tolist() == [1.0, 2.0, 3.0, 2.0]


class TestExtractLuminance:
    """Tests for extract_luminance across encodings."""

    def test_packed_rgb(self):
        rgb = np.array([[[255, 0, 0], [255, 255, 255], [0, 0, 0]]], dtype=np.uint8)
        raster = Raster.from_rgb(rgb)
        assert raster.encoding is PixelEncoding.PACKED_RGB
        assert extract_luminance(raster).tolist() == [[76, 255, 0]]

    def test_packed_argb_ignores_alpha(self):
        words = np.array([[pack_argb(255, 0, 0, alpha=0), pack_argb(255, 0, 0, alpha=255)]])
        raster = Raster(width=2, height=1, encoding=PixelEncoding.PACKED_ARGB, samples=words)
        assert extract_luminance(raster).tolist() == [[76, 76]]

    def test_byte_gray_passthrough(self):
        img = np.array([[0, 17], [128, 255]], dtype=np.uint8)
        raster = Raster.from_array(img)
        assert raster.encoding is PixelEncoding.BYTE_GRAY
        assert extract_luminance(raster).tolist() == [[0, 17], [128, 255]]

    def test_ushort_gray_scales_down(self):
        img = np.array([[0, 255, 256, 65535]], dtype=np.uint16)
        raster = Raster.from_array(img)
        assert raster.encoding is PixelEncoding.USHORT_GRAY
        assert extract_luminance(raster).tolist() == [[0, 0, 1, 255]]

    def test_byte_bgr_reads_blue_first(self):
        # Pure red is stored as (B, G, R) = (0, 0, 255)
        img = np.array([[[0, 0, 255], [255, 0, 0]]], dtype=np.uint8)
        raster = Raster.from_array(img)
        assert raster.encoding is PixelEncoding.BYTE_BGR
        assert extract_luminance(raster).tolist() == [[76, 29]]

    def test_bgra_becomes_packed_argb(self):
        img = np.zeros((1, 1, 4), dtype=np.uint8)
        img[0, 0] = (0, 0, 255, 128)
        raster = Raster.from_array(img)
        assert raster.encoding is PixelEncoding.PACKED_ARGB
        assert int(raster.samples[0, 0]) == 0x80FF0000
        assert extract_luminance(raster).tolist() == [[76]]

    def test_output_shape_and_range(self, gray_raster):
        result = extract_luminance(gray_raster)
        assert result.shape == (gray_raster.height, gray_raster.width)
        assert result.dtype == np.int32
        assert result.min() >= 0 and result.max() <= 255

    def test_pure_function_no_mutation(self, bgr_image):
        original = bgr_image.copy()
        raster = Raster.from_array(bgr_image)
        _ = extract_luminance(raster)
        assert np.array_equal(bgr_image, original)
        assert raster.samples is not bgr_image

    def test_unknown_encoding_raises(self):
        raster = Raster(
            width=1, height=1, encoding="cmyk", samples=np.zeros((1, 1), dtype=np.uint8)
        )
        with pytest.raises(UnsupportedPixelFormat, match="Unsupported pixel encoding"):
            extract_luminance(raster)


class TestResolveEncoding:
    """Tests for mapping decoded arrays to encodings."""

    def test_single_channel_3d_is_gray(self):
        img = np.full((2, 3, 1), 7, dtype=np.uint8)
        raster = Raster.from_array(img)
        assert raster.encoding is PixelEncoding.BYTE_GRAY
        assert raster.samples.shape == (2, 3)

    def test_float_image_raises(self):
        with pytest.raises(UnsupportedPixelFormat):
            resolve_encoding(np.zeros((4, 4), dtype=np.float32))

    def test_16bit_color_raises(self):
        with pytest.raises(UnsupportedPixelFormat):
            resolve_encoding(np.zeros((4, 4, 3), dtype=np.uint16))

    def test_two_channel_raises(self):
        with pytest.raises(UnsupportedPixelFormat):
            resolve_encoding(np.zeros((4, 4, 2), dtype=np.uint8))

    def test_unsupported_format_is_value_error(self):
        with pytest.raises(ValueError):
            resolve_encoding(np.zeros((4,), dtype=np.uint8))

    def test_from_rgb_rejects_gray(self):
        with pytest.raises(ValueError, match="RGB array"):
            Raster.from_rgb(np.zeros((4, 4), dtype=np.uint8))
