"""
Typed models for the focus-crop pipeline.

Value types passed between the pipeline stages, plus the typed configuration.
"""

from .pixels import PixelBuffer
from .tensor import TensorShape, InputTensor, SaliencyTensor
from .focus import FocusPoint, CropTransform
from .config import (
    Config,
    ModelConfig,
    FocusConfig,
    HeatmapConfig,
)

__all__ = [
    # Pixels
    "PixelBuffer",
    # Tensors
    "TensorShape",
    "InputTensor",
    "SaliencyTensor",
    # Focus / crop
    "FocusPoint",
    "CropTransform",
    # Config
    "Config",
    "ModelConfig",
    "FocusConfig",
    "HeatmapConfig",
]
