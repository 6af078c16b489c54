"""
TensorFlow Lite inference backend.

Uses tflite-runtime if installed (lightweight, edge devices), otherwise the
interpreter bundled with full TensorFlow.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from models.tensor import InputTensor, SaliencyTensor
from .backend import SaliencyBackend


@dataclass(frozen=True)
class TFLiteConfig:
    model_path: str
    num_threads: Optional[int] = None


def _load_interpreter_class():
    try:
        from tflite_runtime.interpreter import Interpreter  # type: ignore
    except ImportError:
        try:
            from tensorflow.lite import Interpreter  # type: ignore
        except ImportError as e:  # pragma: no cover
            raise ImportError(
                "No TFLite interpreter is installed. Install with "
                "`pip install tflite-runtime` or `pip install tensorflow`."
            ) from e
    return Interpreter


class TFLiteBackend(SaliencyBackend):
    def __init__(self, cfg: TFLiteConfig):
        self.cfg = cfg
        interpreter_cls = _load_interpreter_class()
        self._interpreter = interpreter_cls(model_path=cfg.model_path, num_threads=cfg.num_threads)
        self._interpreter.allocate_tensors()
        self._input_details = self._interpreter.get_input_details()[0]
        self._output_details = self._interpreter.get_output_details()[0]
        logging.info(
            f"Loaded saliency model {cfg.model_path}: "
            f"input={tuple(self._input_details['shape'])} "
            f"output={tuple(self._output_details['shape'])}"
        )

    def run(self, input_tensor: InputTensor, output_tensor: SaliencyTensor) -> None:
        # Shape mismatches are rejected by the interpreter itself.
        self._interpreter.set_tensor(
            self._input_details["index"],
            input_tensor.as_array().astype(np.float32, copy=False),
        )
        self._interpreter.invoke()
        result = self._interpreter.get_tensor(self._output_details["index"])
        output_tensor.as_array()[...] = result
