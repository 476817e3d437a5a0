import math

import numpy as np


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (``2.5 -> 3``)."""
    return math.floor(value + 0.5)


def np_round_half_up(values: np.ndarray) -> np.ndarray:
    """Vectorized :func:`round_half_up`, returns an integer array."""
    return np.floor(np.asarray(values, dtype=float) + 0.5).astype(int)
