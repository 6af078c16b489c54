"""
PixelSource interface for pluggable image sources.

A pixel source owns the platform-specific decode step and hands decoded
PixelBuffers to the saliency pipeline:
- image files on disk
- directories of images
- frames supplied by a hosting application
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional

from models.pixels import PixelBuffer


@dataclass
class SourceConfig:
    """
    Base configuration for pixel sources.

    Attributes:
        source_id: Identifier for this source (e.g., "uploads", "gallery").
        metadata: Additional source-specific configuration.
    """
    source_id: str = "default"
    metadata: Dict[str, Any] = field(default_factory=dict)


class PixelSource(ABC):
    """
    Abstract base class for pixel sources.

    Lifecycle:
        1. Create instance with config
        2. Call open() to initialize the source
        3. Call read() repeatedly to get images
        4. Call close() to release resources

    Can also be used as a context manager:
        with ImageFileSource(config) as source:
            for pixels in source:
                process(pixels)
    """

    def __init__(self, config: SourceConfig):
        self._config = config
        self._is_open = False
        self._read_count = 0

    @property
    def source_id(self) -> str:
        """Identifier for this source."""
        return self._config.source_id

    @property
    def is_open(self) -> bool:
        """Whether the source is currently open and ready to read."""
        return self._is_open

    @property
    def read_count(self) -> int:
        """Number of buffers returned since open."""
        return self._read_count

    @abstractmethod
    def open(self) -> None:
        """
        Open/initialize the source.

        Raises:
            RuntimeError: If the source cannot be opened.
        """

    @abstractmethod
    def read(self) -> Optional[PixelBuffer]:
        """
        Return the next decoded image, or None when the source is exhausted.
        """

    @abstractmethod
    def close(self) -> None:
        """Release the source. Safe to call multiple times."""

    def __enter__(self) -> "PixelSource":
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __iter__(self) -> Iterator[PixelBuffer]:
        """
        Iterate over images from the source.

        The source must be open before iterating.
        """
        if not self._is_open:
            raise RuntimeError("Source must be open before iterating")

        while True:
            pixels = self.read()
            if pixels is None:
                break
            yield pixels
