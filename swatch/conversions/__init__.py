"""
Swatch Color Space Conversions
==============================

RGB <-> HSL conversion used by the color nodes, with scalar and vectorized
(numpy) implementations.

Unit space
----------
The kernels in ``css_to_hsl`` work in unit space: r, g, b, s and l in
[0, 1], hue in degrees.

    css_rgb_to_hsl(r, g, b) / np_css_rgb_to_hsl(r, g, b)
    css_hsl_to_rgb(h, s, l) / np_css_hsl_to_rgb(h, s, l)

Node scale
----------
``convert`` and ``np_convert`` work on the scale the nodes store:
r, g, b in 0..255, h in degrees, s and l in 0..100, alpha in 0..1.
Alpha always passes through untouched.

Examples
--------
>>> from swatch.conversions import convert
>>> convert((255, 0, 0, 0.4), "rgba", "hsla")
(0.0, 100.0, 50.0, 0.4)
>>> convert((0.0, 100.0, 50.0, 1.0), "hsla", "rgba")
(255, 0, 0, 1.0)
"""

from .css_to_hsl import (
    normalize_hue,
    css_hsl_to_rgb,
    css_rgb_to_hsl,
    np_css_hsl_to_rgb,
    np_css_rgb_to_hsl,
)
from .numbers import round_half_up, np_round_half_up
from .wrapper import convert, np_convert

__all__ = [
    'normalize_hue',
    'css_hsl_to_rgb',
    'css_rgb_to_hsl',
    'np_css_hsl_to_rgb',
    'np_css_rgb_to_hsl',
    'round_half_up',
    'np_round_half_up',
    'convert',
    'np_convert',
]
