"""
Tests for the diagnostic heat-map renderer.
"""

import numpy as np
import pytest

from models.focus import FocusPoint
from algorithms.saliency.focus_area import extract
from algorithms.saliency.errors import EmptyGridError
from visualization.heatmap import render, APEX_COLOR


def _cell(image, grid_shape, row, col):
    """Sample the centre of an upscaled cell."""
    rows, cols = grid_shape
    h, w = image.shape[:2]
    y = int((row + 0.5) * h / rows)
    x = int((col + 0.5) * w / cols)
    return tuple(int(v) for v in image[y, x])


class TestRender:
    def test_output_size_and_type(self):
        grid = np.full((22, 22), 1.0 / 484)
        image = render(grid, FocusPoint(0.0, 0.0), 0.25)
        assert image.shape == (176, 176, 3)
        assert image.dtype == np.uint8

    def test_custom_display_size(self):
        grid = np.full((4, 4), 1.0 / 16)
        image = render(grid, FocusPoint(0.0, 0.0), 0.25, display_size=40)
        assert image.shape == (40, 40, 3)

    def test_cell_colours(self):
        grid = np.array([
            [0.50, 0.20, 0.00, 0.00],
            [0.10, 0.00, 0.00, 0.00],
            [0.00, 0.00, 0.00, 0.00],
            [0.00, 0.00, 0.00, 0.20],
        ])
        focus = extract(grid, 0.25)
        image = render(grid, focus, 0.25, display_size=176)

        # apex
        assert _cell(image, grid.shape, 0, 0) == APEX_COLOR
        # focused (0.2 >= 0.5 * 0.25): green tint
        v = int(255 * 0.2 / 0.5)
        assert _cell(image, grid.shape, 0, 1) == (v // 2, v, v // 2)
        assert _cell(image, grid.shape, 3, 3) == (v // 2, v, v // 2)
        # not focused: gray
        g = int(255 * 0.1 / 0.5)
        assert _cell(image, grid.shape, 1, 0) == (g, g, g)
        assert _cell(image, grid.shape, 2, 2) == (0, 0, 0)

    def test_apex_matches_extracted_cell_on_full_grid(self):
        rows, cols = 22, 22
        for row, col in [(0, 21), (3, 3), (21, 0), (11, 17)]:
            grid = np.full((rows, cols), 1e-4)
            grid[row, col] = 0.9
            focus = extract(grid, 0.25)
            image = render(grid, focus, 0.25)
            assert _cell(image, grid.shape, row, col) == APEX_COLOR

    def test_only_one_apex(self):
        grid = np.ones((5, 5))
        image = render(grid, FocusPoint(0.4, 0.2), 1.0, display_size=5)
        red = np.all(image == APEX_COLOR, axis=-1)
        assert red.sum() == 1
        assert red[1, 2]

    @pytest.mark.parametrize("focus, cell", [
        (FocusPoint(0.49, 0.0), (0, 0)),
        (FocusPoint(0.51, 0.0), (0, 1)),
        (FocusPoint(0.0, 0.99), (1, 0)),
        (FocusPoint(1.0, 1.0), (1, 1)),
    ])
    def test_apex_is_cell_containing_focus(self, focus, cell):
        grid = np.full((2, 2), 0.25)
        image = render(grid, focus, 1.0, display_size=2)
        red = np.argwhere(np.all(image == APEX_COLOR, axis=-1))
        assert red.tolist() == [list(cell)]

    def test_empty_grid(self):
        with pytest.raises(EmptyGridError):
            render(np.zeros((0, 3)), FocusPoint(0.0, 0.0), 0.25)
