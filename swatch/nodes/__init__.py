"""
Swatch Nodes
============

Immutable value nodes produced and consumed by the evaluator.

Variants
--------
    unit     Unit(val, type=None)        number with optional unit tag
    color    RGBA(r, g, b, a=1)          red/green/blue 0..255, alpha 0..1
    hsla     HSLA(h, s, l, a=1)          hue degrees, saturation/lightness percent
    string   String(val)                 quoted text
    boolean  Boolean(val)
    null     Null()

Every node knows its variant tag (``node.variant``); ``Node.registry`` maps
tags to classes. ``RGBA`` and ``HSLA`` expose ``.rgba`` and ``.hsla``
projections computed on each access.
"""

from .node_base import Node
from .unit import Unit, format_number
from .color import ColorNode, RGBA, HSLA
from .string import String, Boolean, Null

__all__ = [
    'Node',
    'Unit',
    'format_number',
    'ColorNode',
    'RGBA',
    'HSLA',
    'String',
    'Boolean',
    'Null',
]
