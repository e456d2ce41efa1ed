import math
import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import UnitFloat
from boundednumbers.np_functions import clamp01 as np_clamp01
from ..types.format_type import HUE_360

def normalize_hue(h: float) -> float:
    """Normalize hue to [0, 360) range."""
    return h % HUE_360

## HSL to RGB conversions

def css_hsl_to_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """
    Convert HSL to RGB using the CSS Color 4 algorithm.
    Based on: https://en.wikipedia.org/wiki/HSL_and_HSV#Converting_to_RGB

    Args:
        h: Hue in degrees, any real value (wrapped into [0, 360))
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    h = normalize_hue(h)
    s = UnitFloat(s)
    l = UnitFloat(l)

    m1 = l + s * (l if l < 0.5 else 1 - l)
    m2 = m1 - (m1 - l) * 2 * abs(((h / 60) % 2) - 1)
    low = 2 * l - m1

    hue_section = int(math.floor(h / 60))

    if hue_section == 0:
        return m1, m2, low
    if hue_section == 1:
        return m2, m1, low
    if hue_section == 2:
        return low, m1, m2
    if hue_section == 3:
        return low, m2, m1
    if hue_section == 4:
        return m2, low, m1
    return m1, low, m2

def np_css_hsl_to_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to RGB using the CSS Color 4 algorithm.

    Args:
        h: array-like or scalar, hue in degrees
        s: array-like or scalar, saturation in [0, 1]
        l: array-like or scalar, lightness in [0, 1]

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 1]
    """
    h = np.asarray(h, dtype=float) % 360
    s = np_clamp01(np.asarray(s, dtype=float))
    l = np_clamp01(np.asarray(l, dtype=float))
    h, s, l = np.broadcast_arrays(h, s, l)

    m1 = l + s * np.where(l < 0.5, l, 1 - l)
    m2 = m1 - (m1 - l) * 2 * np.abs(((h / 60) % 2) - 1)
    low = 2 * l - m1

    # sections 0..5, anything past 5 only happens through float error at 360
    section = np.minimum(np.floor(h / 60).astype(int), 5)
    masks = [section == i for i in range(6)]

    r = np.select(masks, [m1, m2, low, low, m2, m1])
    g = np.select(masks, [m2, m1, m1, m2, low, low])
    b = np.select(masks, [low, low, m2, m1, m1, m2])

    return np.stack([r, g, b], axis=-1)

## RGB to HSL conversions

def css_rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, UnitFloat, UnitFloat]:
    """
    Convert RGB to HSL using the CSS Color 4 algorithm.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, UnitFloat, UnitFloat]: (hue [0,360), saturation [0,1], lightness [0,1])
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    if delta == 0:
        return 0.0, UnitFloat(0.0), UnitFloat(lightness)

    spread = 1 - abs(2 * lightness - 1)
    # only out-of-range channels push lightness to 0 or 1 while chromatic
    saturation = delta / spread if spread > 0 else 1.0

    if max_c == r:
        hue = (60 * ((g - b) / delta) + 360) % 360
    elif max_c == g:
        hue = (60 * ((b - r) / delta) + 120) % 360
    else:
        hue = (60 * ((r - g) / delta) + 240) % 360

    return hue, UnitFloat(saturation), UnitFloat(lightness)

def np_css_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to HSL using the CSS Color 4 algorithm.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        hsl: array of shape (..., 3): (hue [0,360), saturation [0,1], lightness [0,1])
    """
    r, g, b = np.broadcast_arrays(
        np.asarray(r, dtype=float),
        np.asarray(g, dtype=float),
        np.asarray(b, dtype=float),
    )

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    chromatic = delta > 0
    # achromatic entries divide by 1 instead of 0 and are masked out below
    safe_delta = np.where(chromatic, delta, 1.0)
    spread = 1 - np.abs(2 * lightness - 1)
    divisible = chromatic & (spread > 0)
    saturation = np.select(
        [divisible, chromatic],
        [delta / np.where(divisible, spread, 1.0), 1.0],
        default=0.0,
    )

    # first match wins, so a tie between r and g picks r like the scalar path
    mask_r = chromatic & (max_c == r)
    mask_g = chromatic & ~mask_r & (max_c == g)
    mask_b = chromatic & ~mask_r & ~mask_g

    hue = np.select(
        [mask_r, mask_g, mask_b],
        [
            (60 * ((g - b) / safe_delta) + 360) % 360,
            (60 * ((b - r) / safe_delta) + 120) % 360,
            (60 * ((r - g) / safe_delta) + 240) % 360,
        ],
        default=0.0,
    )

    return np.stack([hue, np_clamp01(saturation), lightness], axis=-1)
