import math
import numpy as np
from numpy import ndarray as NDArray

RealNumber = int | float

def round_half_up(value: RealNumber) -> int:
    """Round to the nearest integer, halves rounded up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))

def np_round_half_up(values: NDArray) -> NDArray:
    """Vectorized ``round_half_up``. numpy's own ``round`` rounds halves to even."""
    return np.floor(np.asarray(values, dtype=float) + 0.5)
