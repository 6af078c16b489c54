"""
Pipeline module for the focus-crop system.

The pipeline orchestrates the full processing flow:
- Tensor preparation from decoded pixels
- Saliency inference on the shared backend
- Softmax normalization and focus extraction
- Cropping and diagnostic heat-maps
"""

from .engine import FocusPipeline, PipelineConfig, create_pipeline_from_config

__all__ = [
    "FocusPipeline",
    "PipelineConfig",
    "create_pipeline_from_config",
]
