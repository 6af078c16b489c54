"""
Conversions between pixel buffers, model tensors and flat score sequences.
"""

from __future__ import annotations

from typing import Sequence, Union

import cv2
import numpy as np

from models.pixels import PixelBuffer
from models.tensor import InputTensor, SaliencyTensor
from .errors import InvalidDimensionsError


def to_input_tensor(pixels: PixelBuffer, target_w: int, target_h: int) -> InputTensor:
    """
    Resample pixels to exactly target_w x target_h and normalize to [0, 1].

    Resampling is nearest-neighbour (no filtering). Each pixel contributes
    three floats in R, G, B order, each ``byte / 255.0``; alpha is dropped.

    Raises:
        InvalidDimensionsError: If the buffer is empty or a target side is not positive.
    """
    if pixels.is_empty:
        raise InvalidDimensionsError("pixel buffer is empty")
    if target_w <= 0 or target_h <= 0:
        raise InvalidDimensionsError(
            f"target size must be positive, got {target_w}x{target_h}"
        )

    rgb = pixels.rgb()
    if (pixels.width, pixels.height) != (target_w, target_h):
        rgb = cv2.resize(
            np.ascontiguousarray(rgb),
            (target_w, target_h),
            interpolation=cv2.INTER_NEAREST,
        )
    return InputTensor.from_pixels(rgb)


def from_output_tensor(tensor: SaliencyTensor) -> np.ndarray:
    """Flatten a [1, H, W, 1] saliency tensor into H*W scores, row-major."""
    return tensor.as_array()[0, :, :, 0].reshape(-1).copy()


def to_grid(values: Union[Sequence[float], np.ndarray], rows: int, cols: int) -> np.ndarray:
    """
    Reshape a flat row-major sequence into a rows x cols grid.

    Raises:
        InvalidDimensionsError: If rows * cols does not match the sequence length.
    """
    arr = np.asarray(values, dtype=np.float64).reshape(-1)
    if rows <= 0 or cols <= 0 or arr.size != rows * cols:
        raise InvalidDimensionsError(
            f"cannot reshape {arr.size} values into {rows}x{cols}"
        )
    return arr.reshape(rows, cols)
