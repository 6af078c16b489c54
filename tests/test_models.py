"""
Smoke tests for typed models.
"""

import numpy as np
import pytest

from models.pixels import PixelBuffer
from models.tensor import InputTensor, SaliencyTensor, TensorShape
from models.focus import FocusPoint, CropTransform


class TestPixelBuffer:
    def test_from_numpy(self, rgb_image):
        pixels = PixelBuffer.from_numpy(rgb_image)
        assert pixels.width == 200
        assert pixels.height == 120
        assert pixels.size == (200, 120)
        assert pixels.channels == 3
        assert not pixels.is_empty

    def test_is_read_only_copy(self, rgb_image):
        pixels = PixelBuffer.from_numpy(rgb_image)
        rgb_image[0, 0] = (9, 9, 9)
        assert tuple(pixels.pixels[0, 0]) != (9, 9, 9)
        with pytest.raises(ValueError):
            pixels.pixels[0, 0] = (1, 1, 1)

    def test_from_bgr_swaps_channels(self):
        bgr = np.array([[[0, 128, 255]]], dtype=np.uint8)
        pixels = PixelBuffer.from_bgr(bgr)
        assert tuple(pixels.pixels[0, 0]) == (255, 128, 0)

    def test_from_bgra_keeps_alpha(self):
        bgra = np.array([[[1, 2, 3, 4]]], dtype=np.uint8)
        pixels = PixelBuffer.from_bgr(bgra)
        assert tuple(pixels.pixels[0, 0]) == (3, 2, 1, 4)
        assert tuple(pixels.rgb()[0, 0]) == (3, 2, 1)

    def test_rejects_bad_shape(self):
        with pytest.raises(ValueError):
            PixelBuffer.from_numpy(np.zeros((10, 10), dtype=np.uint8))

    def test_empty(self):
        assert PixelBuffer.from_numpy(np.zeros((0, 5, 3), dtype=np.uint8)).is_empty


class TestTensors:
    def test_input_from_pixels(self):
        rgb = np.full((2, 4, 3), 255, dtype=np.uint8)
        tensor = InputTensor.from_pixels(rgb)
        assert tensor.shape == TensorShape(1, 2, 4, 3)
        assert tensor.as_array().shape == (1, 2, 4, 3)
        np.testing.assert_array_equal(tensor.data, np.ones(24, dtype=np.float32))

    def test_saliency_empty(self):
        tensor = SaliencyTensor.empty(22, 22)
        assert tensor.shape.as_tuple() == (1, 22, 22, 1)
        assert tensor.rows == 22
        assert tensor.cols == 22
        assert tensor.data.dtype == np.float32
        assert not tensor.data.any()

    def test_saliency_view_writes_through(self):
        tensor = SaliencyTensor.empty(3, 4)
        tensor.as_array()[0, 2, 1, 0] = 7.0
        assert tensor.data[tensor.shape.index(0, 2, 1, 0)] == 7.0


class TestFocusModels:
    def test_focus_point(self):
        focus = FocusPoint(0.25, 0.5)
        assert focus.as_tuple() == (0.25, 0.5)
        assert focus.to_pixels(400, 200) == (100, 100)

    def test_crop_transform_defaults(self):
        t = CropTransform(scale=1.5)
        assert t.translation == (0.0, 0.0)
