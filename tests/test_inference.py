"""
Tests for the TFLite backend adapter (interpreter mocked).
"""

import numpy as np
import pytest
from unittest.mock import patch

from models.tensor import InputTensor, SaliencyTensor
from inference import tflite_backend
from inference.tflite_backend import TFLiteBackend, TFLiteConfig


class FakeInterpreter:
    """Minimal stand-in for tflite Interpreter: output = mean input channel, pooled 8x8."""

    instances = []

    def __init__(self, model_path, num_threads=None):
        self.model_path = model_path
        self.num_threads = num_threads
        self.allocated = False
        self._tensors = {}
        FakeInterpreter.instances.append(self)

    def allocate_tensors(self):
        self.allocated = True

    def get_input_details(self):
        return [{"index": 0, "shape": np.array([1, 176, 176, 3])}]

    def get_output_details(self):
        return [{"index": 1, "shape": np.array([1, 22, 22, 1])}]

    def set_tensor(self, index, value):
        self._tensors[index] = np.array(value)

    def invoke(self):
        x = self._tensors[0][0].mean(axis=-1)
        pooled = x.reshape(22, 8, 22, 8).mean(axis=(1, 3))
        self._tensors[1] = pooled.reshape(1, 22, 22, 1).astype(np.float32)

    def get_tensor(self, index):
        return self._tensors[index]


@pytest.fixture
def fake_interpreter():
    FakeInterpreter.instances = []
    with patch.object(tflite_backend, "_load_interpreter_class", return_value=FakeInterpreter):
        yield FakeInterpreter


class TestTFLiteBackend:
    def test_loads_model(self, fake_interpreter):
        TFLiteBackend(TFLiteConfig(model_path="m.tflite", num_threads=2))

        interp = fake_interpreter.instances[0]
        assert interp.model_path == "m.tflite"
        assert interp.num_threads == 2
        assert interp.allocated

    def test_run_fills_output_in_place(self, fake_interpreter):
        backend = TFLiteBackend(TFLiteConfig(model_path="m.tflite"))
        rgb = np.zeros((176, 176, 3), dtype=np.uint8)
        rgb[8:16, 16:24] = 255
        input_tensor = InputTensor.from_pixels(rgb)
        output = SaliencyTensor.empty(22, 22)

        backend.run(input_tensor, output)

        grid = output.as_array()[0, :, :, 0]
        assert grid[1, 2] == pytest.approx(1.0)
        assert grid.sum() == pytest.approx(1.0)

    def test_shape_mismatch_propagates(self, fake_interpreter):
        backend = TFLiteBackend(TFLiteConfig(model_path="m.tflite"))
        input_tensor = InputTensor.from_pixels(np.zeros((176, 176, 3), dtype=np.uint8))
        output = SaliencyTensor.empty(11, 11)

        with pytest.raises(ValueError):
            backend.run(input_tensor, output)
