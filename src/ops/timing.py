"""
Split timer for logging how long each pipeline stage takes.
"""

from __future__ import annotations

import logging
import time
from typing import List, Tuple


class StageTimer:
    """
    Records named splits and dumps them as a single DEBUG line.

    Example:
        timer = StageTimer("predict")
        resize()
        timer.split("scale input")
        infer()
        timer.split("inference")
        timer.dump()
    """

    def __init__(self, label: str):
        self.label = label
        self._start = time.perf_counter()
        self._last = self._start
        self._splits: List[Tuple[str, float]] = []

    @property
    def splits(self) -> List[Tuple[str, float]]:
        """(name, milliseconds) for each split so far."""
        return list(self._splits)

    def split(self, name: str) -> None:
        now = time.perf_counter()
        self._splits.append((name, (now - self._last) * 1000.0))
        self._last = now

    def total_ms(self) -> float:
        return (self._last - self._start) * 1000.0

    def dump(self) -> None:
        if not logging.getLogger().isEnabledFor(logging.DEBUG):
            return
        parts = ", ".join(f"{name}={ms:.1f}ms" for name, ms in self._splits)
        logging.debug(f"[TIMING] {self.label}: {parts} (total={self.total_ms():.1f}ms)")
