"""
Focus pipeline.

Runs the full flow for one image:
- resize and normalize pixels into the model input tensor
- run the shared saliency backend (serialized by GuardedBackend)
- tempered softmax over the saliency map, reshaped into a probability grid
- focus point extraction, then crop or heat-map rendering
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Union

import numpy as np

from models.config import Config
from models.focus import FocusPoint
from models.pixels import PixelBuffer
from models.tensor import SaliencyTensor
from algorithms.saliency import (
    DEFAULT_LOWER_BOUND,
    DEFAULT_TEMPERATURE,
    extract,
    from_output_tensor,
    softmax,
    to_grid,
    to_input_tensor,
)
from algorithms.cropping import crop as crop_image
from inference.backend import GuardedBackend, SaliencyBackend
from ops.timing import StageTimer
from visualization.heatmap import DEFAULT_DISPLAY_SIZE, render


@dataclass
class PipelineConfig:
    """
    Configuration for the focus pipeline.

    Attributes:
        input_size: Side of the square model input (pixels are resized to it).
        output_stride: Downsampling factor between model input and saliency map.
        temperature: Softmax temperature applied to the saliency logits.
        lower_bound: Fraction of the peak above which a cell counts as focused.
        display_size: Side of the rendered debug heat-map.
    """
    input_size: int = 176
    output_stride: int = 8
    temperature: float = DEFAULT_TEMPERATURE
    lower_bound: float = DEFAULT_LOWER_BOUND
    display_size: int = DEFAULT_DISPLAY_SIZE

    @property
    def grid_size(self) -> int:
        return self.input_size // self.output_stride

    @classmethod
    def from_config(cls, config: Config) -> "PipelineConfig":
        """Adapter: build from the typed application config."""
        return cls(
            input_size=config.model.input_size,
            output_stride=config.model.output_stride,
            temperature=config.focus.temperature,
            lower_bound=config.focus.lower_bound,
            display_size=config.heatmap.display_size,
        )


class FocusPipeline:
    """
    Finds the focus point of an image and crops around it.

    The backend is the only shared state; every other stage allocates fresh
    buffers per call, so one pipeline can serve many threads.

    Example:
        backend = TFLiteBackend(TFLiteConfig(model_path="models/saliency.tflite"))
        pipeline = FocusPipeline(backend)
        focus = pipeline.find_focus(pixels)
        thumb = pipeline.crop(pixels, 400, 400)
    """

    def __init__(
        self,
        backend: Union[SaliencyBackend, GuardedBackend],
        config: Optional[PipelineConfig] = None,
    ):
        self.backend = backend if isinstance(backend, GuardedBackend) else GuardedBackend(backend)
        self.config = config or PipelineConfig()

    def saliency_grid(self, pixels: PixelBuffer) -> np.ndarray:
        """
        Run the model and return the softmax-normalized probability grid.

        Backend errors propagate unchanged.
        """
        cfg = self.config
        timer = StageTimer("predict")

        input_tensor = to_input_tensor(pixels, cfg.input_size, cfg.input_size)
        timer.split("prepare input")

        output_tensor = SaliencyTensor.empty(cfg.grid_size, cfg.grid_size)
        self.backend.run(input_tensor, output_tensor)
        timer.split("inference")

        probabilities = softmax(from_output_tensor(output_tensor), temperature=cfg.temperature)
        grid = to_grid(probabilities, output_tensor.rows, output_tensor.cols)
        timer.split("post-process")

        timer.dump()
        return grid

    def find_focus(self, pixels: PixelBuffer) -> FocusPoint:
        focus = extract(self.saliency_grid(pixels), lower_bound=self.config.lower_bound)
        logging.debug(f"Focus point: x={focus.x:.3f} y={focus.y:.3f}")
        return focus

    def crop(
        self,
        pixels: PixelBuffer,
        out_w: int,
        out_h: int,
        focus: Optional[FocusPoint] = None,
        recycled: Optional[np.ndarray] = None,
    ) -> np.ndarray:
        """
        Crop the image to out_w x out_h around its focus point (RGB(A) output).

        Pass ``focus`` to reuse a point from find_focus() and skip inference.
        """
        if focus is None:
            focus = self.find_focus(pixels)
        return crop_image(np.ascontiguousarray(pixels.pixels), focus, out_w, out_h, recycled=recycled)

    def heatmap(self, pixels: PixelBuffer) -> np.ndarray:
        """Diagnostic heat-map of the probability grid with the focus cell highlighted."""
        grid = self.saliency_grid(pixels)
        focus = extract(grid, lower_bound=self.config.lower_bound)
        return render(grid, focus, self.config.lower_bound, display_size=self.config.display_size)


def create_pipeline_from_config(config: Config, backend: Optional[SaliencyBackend] = None) -> FocusPipeline:
    """
    Build a FocusPipeline from the application config.

    Args:
        config: Typed application config.
        backend: Backend to use; when None one is created from config.model.
    """
    if backend is None:
        if config.model.backend != "tflite":
            raise ValueError(f"Unknown model backend: {config.model.backend}")
        from inference.tflite_backend import TFLiteBackend, TFLiteConfig

        backend = TFLiteBackend(
            TFLiteConfig(model_path=config.model.path, num_threads=config.model.num_threads)
        )
    return FocusPipeline(backend, PipelineConfig.from_config(config))
