from .format_type import UnitTag, unit_text, CHANNEL_MAX, HUE_360, PERCENT_MAX, ALPHA_MAX
from .color_types import ColorSpace, ColorElement, ColorValue, Scalar, element_to_array, is_color_space

__all__ = [
    'UnitTag',
    'unit_text',
    'CHANNEL_MAX',
    'HUE_360',
    'PERCENT_MAX',
    'ALPHA_MAX',
    'ColorSpace',
    'ColorElement',
    'ColorValue',
    'Scalar',
    'element_to_array',
    'is_color_space',
]
