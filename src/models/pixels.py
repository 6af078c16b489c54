"""
PixelBuffer model for decoded images handed to the saliency pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import cv2
import numpy as np


@dataclass(frozen=True, eq=False)
class PixelBuffer:
    """
    Read-only grid of 8-bit RGB(A) samples.

    Attributes:
        pixels: uint8 array of shape (height, width, 3) or (height, width, 4),
            channels in R, G, B(, A) order.
    """
    pixels: np.ndarray

    @classmethod
    def from_numpy(cls, pixels: np.ndarray) -> "PixelBuffer":
        """Wrap an RGB or RGBA array. The buffer is copied and frozen."""
        arr = np.array(pixels, dtype=np.uint8, copy=True)
        if arr.ndim != 3 or arr.shape[2] not in (3, 4):
            raise ValueError(f"expected (H, W, 3|4) pixels, got shape {arr.shape}")
        arr.setflags(write=False)
        return cls(pixels=arr)

    @classmethod
    def from_bgr(cls, frame: np.ndarray) -> "PixelBuffer":
        """Create from an OpenCV-ordered (BGR or BGRA) frame."""
        if frame.ndim == 3 and frame.shape[2] == 4:
            rgb = cv2.cvtColor(frame, cv2.COLOR_BGRA2RGBA)
        elif frame.ndim == 2:
            rgb = cv2.cvtColor(frame, cv2.COLOR_GRAY2RGB)
        else:
            rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
        return cls.from_numpy(rgb)

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def channels(self) -> int:
        return int(self.pixels.shape[2])

    @property
    def size(self) -> Tuple[int, int]:
        """Return (width, height)."""
        return (self.width, self.height)

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def rgb(self) -> np.ndarray:
        """Return the RGB channels, dropping alpha if present."""
        return self.pixels[:, :, :3]
