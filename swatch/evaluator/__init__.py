from .bifs import (
    BIFS,
    Builtin,
    call_builtin,
    has_builtin,
    lookup,
)
from .utils import assert_type, assert_color, variant_of, COLOR_VARIANTS

__all__ = [
    'BIFS',
    'Builtin',
    'call_builtin',
    'has_builtin',
    'lookup',
    'assert_type',
    'assert_color',
    'variant_of',
    'COLOR_VARIANTS',
]
