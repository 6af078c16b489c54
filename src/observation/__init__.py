"""
Observation layer for pluggable image sources.

This layer owns image decoding so the saliency pipeline only ever sees
PixelBuffers. Each source implements the PixelSource interface.
"""

from .base import PixelSource, SourceConfig
from .image_source import ImageFileSource, ImageFileSourceConfig, read_image

__all__ = [
    "PixelSource",
    "SourceConfig",
    "ImageFileSource",
    "ImageFileSourceConfig",
    "read_image",
]
