"""
Saliency post-processing.

Turns a model's raw saliency map into a single focus point:
- tensor_interop: pixel buffer -> input tensor, output tensor -> flat scores
- softmax: temperature-scaled normalization of the scores
- focus_area: thresholded focus region and its peak cell
"""

from .errors import (
    FocusError,
    InvalidDimensionsError,
    InvalidTemperatureError,
    EmptyInputError,
    EmptyGridError,
)
from .tensor_interop import to_input_tensor, from_output_tensor, to_grid
from .softmax import softmax, DEFAULT_TEMPERATURE
from .focus_area import extract, focus_mask, apex_cell, DEFAULT_LOWER_BOUND

__all__ = [
    "FocusError",
    "InvalidDimensionsError",
    "InvalidTemperatureError",
    "EmptyInputError",
    "EmptyGridError",
    "to_input_tensor",
    "from_output_tensor",
    "to_grid",
    "softmax",
    "DEFAULT_TEMPERATURE",
    "extract",
    "focus_mask",
    "apex_cell",
    "DEFAULT_LOWER_BOUND",
]
