"""
Image-file pixel source.

Decodes image files with OpenCV and hands them out as RGB PixelBuffers.
Accepts explicit file paths and directories (non-recursive, sorted by name).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

import cv2

from models.pixels import PixelBuffer
from .base import PixelSource, SourceConfig

IMAGE_EXTENSIONS: Tuple[str, ...] = (".jpg", ".jpeg", ".png", ".webp", ".bmp")


@dataclass
class ImageFileSourceConfig(SourceConfig):
    """
    Attributes:
        paths: Image files and/or directories of images.
        extensions: Extensions picked up when scanning directories.
    """
    paths: Sequence[str] = field(default_factory=list)
    extensions: Tuple[str, ...] = IMAGE_EXTENSIONS


def list_images(folder: str, exts: Tuple[str, ...] = IMAGE_EXTENSIONS) -> List[str]:
    return sorted(
        os.path.join(folder, fn)
        for fn in os.listdir(folder)
        if fn.lower().endswith(exts)
    )


def read_image(path: str) -> Optional[PixelBuffer]:
    """Decode one file; None if OpenCV cannot read it."""
    frame = cv2.imread(path, cv2.IMREAD_COLOR)
    if frame is None:
        return None
    return PixelBuffer.from_bgr(frame)


class ImageFileSource(PixelSource):
    """
    Reads images from disk one at a time.

    Unreadable files are logged and skipped.

    Example:
        config = ImageFileSourceConfig(paths=["photos/"])
        with ImageFileSource(config) as source:
            for pixels in source:
                pipeline.find_focus(pixels)
    """

    def __init__(self, config: ImageFileSourceConfig):
        super().__init__(config)
        self._file_config = config
        self._files: List[str] = []
        self._pos = 0
        self._current_path: Optional[str] = None

    @property
    def current_path(self) -> Optional[str]:
        """Path of the image most recently returned by read()."""
        return self._current_path

    def open(self) -> None:
        files: List[str] = []
        for path in self._file_config.paths:
            if os.path.isdir(path):
                files.extend(list_images(path, self._file_config.extensions))
            elif os.path.isfile(path):
                files.append(path)
            else:
                raise RuntimeError(f"Image path does not exist: {path}")

        self._files = files
        self._pos = 0
        self._read_count = 0
        self._current_path = None
        self._is_open = True
        logging.info(f"Image source opened: source={self.source_id} files={len(files)}")

    def read(self) -> Optional[PixelBuffer]:
        if not self._is_open:
            return None

        while self._pos < len(self._files):
            path = self._files[self._pos]
            self._pos += 1
            pixels = read_image(path)
            if pixels is None:
                logging.warning(f"Skipping unreadable image: {path}")
                continue
            self._current_path = path
            self._read_count += 1
            return pixels

        return None

    def close(self) -> None:
        self._is_open = False
        self._files = []
