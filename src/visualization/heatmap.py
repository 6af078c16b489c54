"""
False-colour heat-map of a probability grid, for debugging focus selection.

Colours per cell:
- the focus (apex) cell: red
- other cells inside the focus region: green-tinted intensity
- everything else: grayscale intensity, 255 * value / max(grid)
"""

from __future__ import annotations

from typing import Tuple

import cv2
import numpy as np

from models.focus import FocusPoint
from algorithms.saliency.focus_area import GridLike, as_grid, focus_mask, DEFAULT_LOWER_BOUND

APEX_COLOR: Tuple[int, int, int] = (255, 0, 0)
DEFAULT_DISPLAY_SIZE = 176


def render(
    probabilities: GridLike,
    focus: FocusPoint,
    lower_bound: float = DEFAULT_LOWER_BOUND,
    display_size: int = DEFAULT_DISPLAY_SIZE,
) -> np.ndarray:
    """
    Render the grid as an RGB uint8 image of display_size x display_size.

    The apex cell is the one the focus point falls in, so a FocusPoint from
    focus_area.extract() highlights exactly the selected cell.
    """
    grid = as_grid(probabilities)
    rows, cols = grid.shape

    peak = grid.max()
    if peak <= 0:
        peak = 1.0
    intensity = (255.0 * grid / peak).clip(0, 255).astype(np.int32)
    focused = focus_mask(grid, lower_bound)

    image = np.empty((rows, cols, 3), dtype=np.uint8)
    image[..., 0] = intensity
    image[..., 1] = intensity
    image[..., 2] = intensity
    tint = intensity[focused]
    image[focused] = np.stack([tint // 2, tint, tint // 2], axis=-1)

    # Truncate to the containing cell; the epsilon absorbs col / cols * cols
    # landing just below an integer.
    apex_col = min(int(np.floor(focus.x * cols + 1e-9)), cols - 1)
    apex_row = min(int(np.floor(focus.y * rows + 1e-9)), rows - 1)
    image[apex_row, apex_col] = APEX_COLOR

    return cv2.resize(image, (display_size, display_size), interpolation=cv2.INTER_NEAREST)
