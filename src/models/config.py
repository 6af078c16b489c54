"""
Typed configuration models matching the YAML config structure.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class ModelConfig:
    """Saliency model configuration."""
    backend: str = "tflite"
    path: str = "models/saliency.tflite"
    input_size: int = 176
    output_stride: int = 8
    num_threads: Optional[int] = None

    @property
    def output_size(self) -> int:
        """Side length of the saliency grid produced by the model."""
        return self.input_size // self.output_stride

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "ModelConfig":
        """Adapter: Create from config dictionary."""
        return cls(
            backend=d.get("backend", "tflite"),
            path=d.get("path", "models/saliency.tflite"),
            input_size=d.get("input_size", 176),
            output_stride=d.get("output_stride", 8),
            num_threads=d.get("num_threads"),
        )

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {
            "backend": self.backend,
            "path": self.path,
            "input_size": self.input_size,
            "output_stride": self.output_stride,
        }
        if self.num_threads is not None:
            d["num_threads"] = self.num_threads
        return d


@dataclass
class FocusConfig:
    """Softmax temperature and focus-region threshold."""
    temperature: float = 0.2
    lower_bound: float = 0.25

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "FocusConfig":
        return cls(
            temperature=d.get("temperature", 0.2),
            lower_bound=d.get("lower_bound", 0.25),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "temperature": self.temperature,
            "lower_bound": self.lower_bound,
        }


@dataclass
class HeatmapConfig:
    """Diagnostic heat-map rendering."""
    display_size: int = 176

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "HeatmapConfig":
        return cls(display_size=d.get("display_size", 176))

    def to_dict(self) -> Dict[str, Any]:
        return {"display_size": self.display_size}


@dataclass
class Config:
    """
    Complete application configuration.

    This is a typed representation of the YAML config structure.
    """
    model: ModelConfig = field(default_factory=ModelConfig)
    focus: FocusConfig = field(default_factory=FocusConfig)
    heatmap: HeatmapConfig = field(default_factory=HeatmapConfig)
    log_path: str = "logs/focus_crop.log"
    log_level: str = "INFO"

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Config":
        """Adapter: Create Config from raw dictionary (e.g., from load_config)."""
        return cls(
            model=ModelConfig.from_dict(d.get("model", {}) or {}),
            focus=FocusConfig.from_dict(d.get("focus", {}) or {}),
            heatmap=HeatmapConfig.from_dict(d.get("heatmap", {}) or {}),
            log_path=d.get("log_path", "logs/focus_crop.log"),
            log_level=d.get("log_level", "INFO"),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert back to dictionary (for saving or passing to existing code)."""
        return {
            "model": self.model.to_dict(),
            "focus": self.focus.to_dict(),
            "heatmap": self.heatmap.to_dict(),
            "log_path": self.log_path,
            "log_level": self.log_level,
        }
