import numpy as np
from boundednumbers.np_functions import clamp as np_clamp
from typing import Callable

from ..types.format_type import CHANNEL_MAX, max_non_hue
from ..types.color_types import ColorElement, ColorSpace, element_to_array, is_color_space
from .css_to_hsl import np_css_rgb_to_hsl, np_css_hsl_to_rgb
from .numbers import np_round_half_up

CONVERT_NUMPY: dict[tuple[str, str], Callable[[np.ndarray, np.ndarray, np.ndarray], np.ndarray]] = {
    ("rgba", "hsla"): np_css_rgb_to_hsl,
    ("hsla", "rgba"): np_css_hsl_to_rgb,
}

def normalize(color: np.ndarray, space: str) -> np.ndarray:
    """Bring the three base channels of node scale into unit space (hue stays in degrees)."""
    maxval = max_non_hue[space]

    if space == "rgba":
        return color / maxval

    if space == "hsla":
        h = color[..., 0]
        s = color[..., 1] / maxval
        l = color[..., 2] / maxval
        return np.stack([h, s, l], axis=-1)

    raise ValueError(f"Unknown space: {space}")

def scale(color: np.ndarray, space: str) -> np.ndarray:
    """Inverse of ``normalize``. RGB channels come out as integers in 0..255."""
    maxval = max_non_hue[space]

    if space == "rgba":
        scaled = np_round_half_up(color * maxval)
        return np_clamp(scaled, 0, CHANNEL_MAX)

    if space == "hsla":
        h = color[..., 0]
        s = color[..., 1] * maxval
        l = color[..., 2] * maxval
        return np.stack([h, s, l], axis=-1)

    raise ValueError(f"Unknown space: {space}")

def _convert_core(color: np.ndarray, from_space: str, to_space: str) -> np.ndarray:
    if not (is_color_space(from_space) and is_color_space(to_space)):
        raise ValueError(f"Unsupported conversion: {from_space} -> {to_space}")
    if color.shape[-1] != 4:
        raise ValueError(f"{from_space} expects last dimension to be 4, got shape {color.shape}")

    base = color[..., :3]
    alpha = color[..., 3]

    if from_space == to_space:
        return color

    converted = CONVERT_NUMPY[(from_space, to_space)](*np.moveaxis(normalize(base, from_space), -1, 0))
    out = scale(converted, to_space)

    # alpha is carried through untouched
    return np.concatenate([out, alpha[..., None]], axis=-1)

def convert(
    color: ColorElement,
    from_space: ColorSpace,
    to_space: ColorSpace,
) -> ColorElement:
    """
    Convert a single (c0, c1, c2, alpha) tuple between node-scale color spaces.

    RGB output channels are ints in 0..255; HSL output is left unrounded.
    """
    from_space, to_space = from_space.lower(), to_space.lower()
    if from_space == to_space:
        return color  # No conversion needed
    # run as a batch of one so the kernels always see 1-d channel arrays
    result = _convert_core(element_to_array(color)[None, :], from_space, to_space)[0]
    c0, c1, c2, a = (float(v) for v in result.flat)
    if to_space == "rgba":
        return int(c0), int(c1), int(c2), a
    return c0, c1, c2, a

def np_convert(
    color: np.ndarray,
    from_space: ColorSpace,
    to_space: ColorSpace,
) -> np.ndarray:
    """Vectorized ``convert`` over an array of shape (..., 4)."""
    return _convert_core(
        np.asarray(color, dtype=float),
        from_space.lower(),
        to_space.lower(),
    )

