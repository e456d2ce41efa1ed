"""Swatch: color builtins for a stylesheet expression evaluator."""

from .nodes import (
    Node,
    Unit,
    ColorNode,
    RGBA,
    HSLA,
    String,
    Boolean,
    Null,
)
from .errors import EvaluationError, TypeMismatch, UnsupportedArity
from .evaluator import (
    BIFS,
    call_builtin,
    has_builtin,
    lookup,
    assert_type,
    assert_color,
)
from .conversions import (
    convert,
    np_convert,
    css_rgb_to_hsl,
    css_hsl_to_rgb,
    np_css_rgb_to_hsl,
    np_css_hsl_to_rgb,
)
from .types.format_type import UnitTag

__version__ = "0.1.0"

__all__ = [
    # Nodes
    'Node',
    'Unit',
    'ColorNode',
    'RGBA',
    'HSLA',
    'String',
    'Boolean',
    'Null',
    'UnitTag',

    # Errors
    'EvaluationError',
    'TypeMismatch',
    'UnsupportedArity',

    # Builtins
    'BIFS',
    'call_builtin',
    'has_builtin',
    'lookup',
    'assert_type',
    'assert_color',

    # Conversions
    'convert',
    'np_convert',
    'css_rgb_to_hsl',
    'css_hsl_to_rgb',
    'np_css_rgb_to_hsl',
    'np_css_hsl_to_rgb',
]
