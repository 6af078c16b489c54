"""
Validation errors raised by the saliency and cropping algorithms.

All of these indicate malformed caller input and are never retried.
"""

from __future__ import annotations


class FocusError(ValueError):
    """Base class for focus/crop input validation failures."""


class InvalidDimensionsError(FocusError):
    """Empty pixel buffer, or a non-positive width/height."""


class InvalidTemperatureError(FocusError):
    """Softmax temperature is not strictly positive."""


class EmptyInputError(FocusError):
    """Softmax was given zero values."""


class EmptyGridError(FocusError):
    """Probability grid has zero rows or columns."""
