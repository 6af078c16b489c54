"""
Fixed-shape tensor buffers exchanged with the inference backend.

Tensors are flat float32 buffers plus an explicit NHWC shape, so indexing is
plain row-major arithmetic instead of nested containers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np


@dataclass(frozen=True)
class TensorShape:
    """NHWC tensor shape."""
    batch: int
    height: int
    width: int
    channels: int

    @property
    def size(self) -> int:
        return self.batch * self.height * self.width * self.channels

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return (self.batch, self.height, self.width, self.channels)

    def index(self, b: int, y: int, x: int, c: int) -> int:
        """Flat row-major offset of element (b, y, x, c)."""
        return ((b * self.height + y) * self.width + x) * self.channels + c


@dataclass
class InputTensor:
    """
    Model input, logical shape [1, H, W, 3], values normalized to [0, 1].

    Attributes:
        data: Flat float32 buffer of length shape.size.
        shape: Logical NHWC shape.
    """
    data: np.ndarray
    shape: TensorShape

    @classmethod
    def from_pixels(cls, rgb: np.ndarray) -> "InputTensor":
        """Normalize an (H, W, 3) uint8 array channel by channel."""
        h, w = rgb.shape[:2]
        data = (rgb.astype(np.float32) / 255.0).reshape(-1)
        return cls(data=data, shape=TensorShape(1, h, w, 3))

    def as_array(self) -> np.ndarray:
        """Shaped view of the flat buffer."""
        return self.data.reshape(self.shape.as_tuple())


@dataclass
class SaliencyTensor:
    """
    Model output, logical shape [1, H/8, W/8, 1].

    Created empty before inference and populated in place by the backend.
    """
    data: np.ndarray
    shape: TensorShape

    @classmethod
    def empty(cls, height: int, width: int) -> "SaliencyTensor":
        shape = TensorShape(1, height, width, 1)
        return cls(data=np.zeros(shape.size, dtype=np.float32), shape=shape)

    @property
    def rows(self) -> int:
        return self.shape.height

    @property
    def cols(self) -> int:
        return self.shape.width

    def as_array(self) -> np.ndarray:
        """Shaped view of the flat buffer; writes go through to ``data``."""
        return self.data.reshape(self.shape.as_tuple())
