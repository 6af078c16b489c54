"""
Inference backend interface.

Backends take a normalized [1, H, W, 3] input tensor and fill a pre-allocated
[1, H/8, W/8, 1] saliency tensor in place. A backend instance holds stateful
interpreter buffers, so it is shared through a GuardedBackend that lets only
one inference run at a time.
"""

from __future__ import annotations

import logging
import threading
import weakref
from contextlib import contextmanager
from typing import Iterator, Protocol

from models.tensor import InputTensor, SaliencyTensor


class SaliencyBackend(Protocol):
    def run(self, input_tensor: InputTensor, output_tensor: SaliencyTensor) -> None:
        ...


# One lock per backend instance, shared by every GuardedBackend wrapping it.
_backend_locks: "weakref.WeakKeyDictionary[SaliencyBackend, threading.Lock]" = weakref.WeakKeyDictionary()
_registry_lock = threading.Lock()


def _lock_for(backend: SaliencyBackend) -> threading.Lock:
    with _registry_lock:
        lock = _backend_locks.get(backend)
        if lock is None:
            lock = threading.Lock()
            _backend_locks[backend] = lock
        return lock


class GuardedBackend:
    """
    Mutex-protected handle to a shared SaliencyBackend.

    The lock belongs to the wrapped backend, not to this handle: any number of
    GuardedBackend objects (and pipelines) around the same backend serialize
    against each other. Concurrent callers block until the backend is free.
    The lock is released even when the backend raises; backend errors are not
    caught.
    """

    def __init__(self, backend: SaliencyBackend):
        if isinstance(backend, GuardedBackend):
            backend = backend.backend
        self._backend = backend
        self._lock = _lock_for(backend)

    @property
    def backend(self) -> SaliencyBackend:
        return self._backend

    @contextmanager
    def locked(self) -> Iterator[SaliencyBackend]:
        """Hold the backend lock for the duration of the block."""
        with self._lock:
            yield self._backend

    def run(self, input_tensor: InputTensor, output_tensor: SaliencyTensor) -> None:
        with self.locked() as backend:
            logging.debug(
                f"Running inference: input={input_tensor.shape.as_tuple()} "
                f"output={output_tensor.shape.as_tuple()}"
            )
            backend.run(input_tensor, output_tensor)
