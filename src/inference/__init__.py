"""
Inference backends for the saliency model.
"""

from .backend import SaliencyBackend, GuardedBackend
from .tflite_backend import TFLiteBackend, TFLiteConfig

__all__ = [
    "SaliencyBackend",
    "GuardedBackend",
    "TFLiteBackend",
    "TFLiteConfig",
]
