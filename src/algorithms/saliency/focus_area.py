"""
Focus area extraction from a probability grid.

The thresholded focus region (every cell within ``lower_bound`` of the peak)
is only used for the diagnostic heat-map. The crop anchor is the single peak
cell, not the centroid of the region.
"""

from __future__ import annotations

from typing import Sequence, Tuple, Union

import numpy as np

from models.focus import FocusPoint
from .errors import EmptyGridError

DEFAULT_LOWER_BOUND = 0.25

GridLike = Union[Sequence[Sequence[float]], np.ndarray]


def as_grid(grid: GridLike) -> np.ndarray:
    arr = np.asarray(grid, dtype=np.float64)
    if arr.ndim != 2 or arr.shape[0] == 0 or arr.shape[1] == 0:
        raise EmptyGridError(f"grid must have rows and columns, got shape {arr.shape}")
    return arr


def focus_mask(grid: GridLike, lower_bound: float = DEFAULT_LOWER_BOUND) -> np.ndarray:
    """Boolean mask of cells whose value is >= max(grid) * lower_bound."""
    arr = as_grid(grid)
    return arr >= arr.max() * lower_bound


def apex_cell(grid: GridLike) -> Tuple[int, int]:
    """
    (row, col) of the global maximum.

    Ties resolve to the first occurrence in row-major scan order.
    """
    arr = as_grid(grid)
    row, col = np.unravel_index(int(np.argmax(arr)), arr.shape)
    return int(row), int(col)


def extract(grid: GridLike, lower_bound: float = DEFAULT_LOWER_BOUND) -> FocusPoint:
    """
    Find the focus point of a probability grid.

    Args:
        grid: rows x cols probabilities.
        lower_bound: Fraction of the peak above which a cell counts as focused.

    Returns:
        FocusPoint with x = col / cols and y = row / rows of the peak cell.

    Raises:
        EmptyGridError: If the grid has zero rows or columns.
    """
    arr = as_grid(grid)
    focused = focus_mask(arr, lower_bound)
    # A negative peak (raw logits rather than probabilities) can fail its own
    # threshold; fall back to the whole grid then.
    candidates = np.where(focused, arr, -np.inf) if focused.any() else arr
    row, col = apex_cell(candidates)

    rows, cols = arr.shape
    return FocusPoint(x=col / cols, y=row / rows)
