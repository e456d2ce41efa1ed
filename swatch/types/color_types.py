from __future__ import annotations
from typing import Literal, Tuple, Union
import numpy as np
from numpy import ndarray

Scalar = int | float
ScalarVector = Tuple[Scalar, ...]
ColorElement = Tuple[Scalar, Scalar, Scalar, Scalar]
ColorValue = Union[ColorElement, ndarray]  # Includes array support
ColorSpace = Literal["rgba", "hsla"]
COLOR_SPACES = {"rgba", "hsla"}

def element_to_array(element: Union[ScalarVector, ndarray]) -> np.ndarray:
    """
    Convert a color element to a float numpy array.

    Args:
        element: tuple of channel values, or already an ndarray

    Returns:
        numpy array representation
    """
    if isinstance(element, ndarray):
        return element.astype(float, copy=False)
    return np.array(element, dtype=float)

def is_color_space(color_space: str) -> bool:
    """
    Check if the given string names a supported color space.

    Args:
        color_space: Color space string
    Returns:
        True if it is "rgba" or "hsla" (case-insensitive), False otherwise
    """
    return color_space.lower() in COLOR_SPACES
