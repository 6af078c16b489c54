"""
Content-aware cropping.

Given a focus point, compute a cover-scaling transform into the target size
and apply it to an image.
"""

from .geometry import compute_transform, apply_transform, crop

__all__ = [
    "compute_transform",
    "apply_transform",
    "crop",
]
