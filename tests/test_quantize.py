"""
Unit tests for output quantization.
"""

import numpy as np

from sobel import quantize
from sobel.quantize import to_levels

WHITE = 0xFFFFFFFF
BLACK = 0xFF000000


class TestGrayscaleOutput:
    """Tests for non-edge quantization."""

    def test_gray_word_layout(self):
        result = quantize(np.array([[128.0]]))
        assert result.dtype == np.uint32
        assert int(result[0, 0]) == 0xFF808080

    def test_values_are_clipped(self):
        result = quantize(np.array([[-10.0, 300.0, 1020.0, -1020.0]]))
        assert [int(v) for v in result[0]] == [BLACK, WHITE, WHITE, BLACK]

    def test_rounds_half_up(self):
        assert to_levels(np.array([127.5, 127.49])).tolist() == [128, 127]

    def test_scale_factor(self):
        result = to_levels(np.array([100.0, 200.0]), scale=2.0)
        assert result.tolist() == [200, 255]

    def test_invert(self):
        result = quantize(np.array([[0, 255, 55]]), invert=True)
        assert [int(v) for v in result[0]] == [WHITE, BLACK, 0xFFC8C8C8]

    def test_levels_never_leave_byte_range(self):
        rng = np.random.default_rng(8)
        buf = rng.normal(0, 1000, (30, 30))
        levels = to_levels(buf, scale=3.7, invert=True)
        assert levels.min() >= 0 and levels.max() <= 255

    def test_accepts_integer_buffers(self):
        result = quantize(np.array([[0, 255]], dtype=np.int32))
        assert [int(v) for v in result[0]] == [BLACK, WHITE]

    def test_shape_preserved(self):
        result = quantize(np.zeros((7, 3)))
        assert result.shape == (7, 3)


class TestEdgeOutput:
    """Tests for binary edge masks."""

    def test_strong_magnitude_is_foreground(self):
        result = quantize(np.array([[200.0]]), edge=True, threshold=50)
        assert int(result[0, 0]) == WHITE

    def test_weak_magnitude_is_background(self):
        result = quantize(np.array([[10.0]]), edge=True, threshold=50)
        assert int(result[0, 0]) == BLACK

    def test_threshold_is_strict(self):
        result = quantize(np.array([[50.0, 51.0]]), edge=True, threshold=50)
        assert [int(v) for v in result[0]] == [BLACK, WHITE]

    def test_inverted_mask(self):
        # Inverted: strong edges end up black on a white background
        result = quantize(np.array([[200.0, 0.0]]), edge=True, invert=True, threshold=50)
        assert [int(v) for v in result[0]] == [BLACK, WHITE]

    def test_custom_threshold(self):
        result = quantize(np.array([[80.0, 120.0]]), edge=True, threshold=100)
        assert [int(v) for v in result[0]] == [BLACK, WHITE]

    def test_mask_is_binary(self):
        rng = np.random.default_rng(2)
        result = quantize(rng.random((10, 10)) * 255, edge=True)
        assert set(np.unique(result).tolist()) <= {WHITE, BLACK}

    def test_calls_are_independent(self):
        buf = np.array([[60.0]])
        first = quantize(buf, edge=True, invert=True)
        second = quantize(buf, edge=True)
        third = quantize(buf, edge=True, invert=True)
        assert int(second[0, 0]) == WHITE
        assert np.array_equal(first, third)
