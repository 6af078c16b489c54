"""
Pytest configuration and shared fixtures.
"""

import os
import sys

import numpy as np
import pytest

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from models.tensor import InputTensor, SaliencyTensor  # noqa: E402


class PeakBackend:
    """Fake backend writing a constant map with one hot cell."""

    def __init__(self, row: int, col: int, peak: float = 5.0):
        self.row = row
        self.col = col
        self.peak = peak
        self.calls = 0
        self.last_input_shape = None

    def run(self, input_tensor: InputTensor, output_tensor: SaliencyTensor) -> None:
        self.calls += 1
        self.last_input_shape = input_tensor.shape.as_tuple()
        out = output_tensor.as_array()
        out[...] = 0.0
        out[0, self.row, self.col, 0] = self.peak


class FailingBackend:
    """Backend that always raises."""

    def run(self, input_tensor, output_tensor):
        raise RuntimeError("interpreter crashed")


@pytest.fixture
def peak_backend():
    return PeakBackend(row=5, col=17)


@pytest.fixture
def temp_config_dir(tmp_path):
    """Create a temporary config directory with default.yaml."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()

    default_yaml = config_dir / "default.yaml"
    default_yaml.write_text("""
model:
  backend: "tflite"
  path: "models/saliency.tflite"
  input_size: 176
  output_stride: 8

focus:
  temperature: 0.2
  lower_bound: 0.25

log_path: "logs/test.log"
log_level: "INFO"
""")

    return config_dir


@pytest.fixture
def valid_config():
    """Return a valid configuration dictionary."""
    return {
        "model": {
            "backend": "tflite",
            "path": "models/saliency.tflite",
            "input_size": 176,
            "output_stride": 8,
        },
        "focus": {
            "temperature": 0.2,
            "lower_bound": 0.25,
        },
        "heatmap": {
            "display_size": 176,
        },
        "log_path": "logs/test.log",
        "log_level": "INFO",
    }


@pytest.fixture
def rgb_image():
    """A 120x200 RGB gradient image."""
    h, w = 120, 200
    img = np.zeros((h, w, 3), dtype=np.uint8)
    img[..., 0] = np.linspace(0, 255, w, dtype=np.uint8)[None, :]
    img[..., 1] = np.linspace(0, 255, h, dtype=np.uint8)[:, None]
    img[..., 2] = 64
    return img
