"""
Focus point and crop transform models.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np


@dataclass(frozen=True)
class FocusPoint:
    """
    Normalized focus location.

    Attributes:
        x: Horizontal position in [0, 1], relative to the grid width.
        y: Vertical position in [0, 1], relative to the grid height.
    """
    x: float
    y: float

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def to_pixels(self, width: int, height: int) -> Tuple[int, int]:
        """Convert to pixel coordinates for an image of the given size."""
        return (int(self.x * width), int(self.y * height))


@dataclass(frozen=True)
class CropTransform:
    """
    Uniform scale followed by a translation, mapping source pixels into the
    output frame: ``out = src * scale + (tx, ty)``.
    """
    scale: float
    tx: float = 0.0
    ty: float = 0.0

    @property
    def translation(self) -> Tuple[float, float]:
        return (self.tx, self.ty)

    def to_matrix(self) -> np.ndarray:
        """2x3 affine matrix in the layout cv2.warpAffine expects."""
        return np.array(
            [[self.scale, 0.0, self.tx], [0.0, self.scale, self.ty]],
            dtype=np.float32,
        )

    def apply(self, x: float, y: float) -> Tuple[float, float]:
        """Map a source-space point into output space."""
        return (x * self.scale + self.tx, y * self.scale + self.ty)
