"""
Temperature-scaled softmax over saliency logits.
"""

from __future__ import annotations

from typing import Sequence, Union

import numpy as np

from .errors import EmptyInputError, InvalidTemperatureError

DEFAULT_TEMPERATURE = 0.2


def softmax(
    values: Union[Sequence[float], np.ndarray],
    temperature: float = DEFAULT_TEMPERATURE,
) -> np.ndarray:
    """
    Tempered softmax: ``exp(v / T) / sum(exp(v / T))``.

    Lower temperatures sharpen the distribution toward its maximum. The max is
    subtracted before exponentiation so large logits cannot overflow.

    Args:
        values: Flat sequence of logits.
        temperature: Strictly positive divisor applied before exponentiation.

    Returns:
        float64 array of the same length, positive, summing to 1.

    Raises:
        InvalidTemperatureError: If temperature <= 0.
        EmptyInputError: If values is empty.
    """
    if not temperature > 0:
        raise InvalidTemperatureError(f"temperature must be > 0, got {temperature}")

    logits = np.asarray(values, dtype=np.float64).reshape(-1)
    if logits.size == 0:
        raise EmptyInputError("softmax of an empty sequence")

    exps = np.exp((logits - logits.max()) / temperature)
    return exps / exps.sum()
