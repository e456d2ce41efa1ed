from __future__ import annotations
from typing import Any, TypeVar

from ..errors import TypeMismatch
from ..nodes import Node, RGBA, HSLA

N = TypeVar('N', bound=Node)

COLOR_VARIANTS = frozenset({RGBA.variant, HSLA.variant})


def variant_of(value: Any) -> str:
    """Variant tag of a node; plain Python values report their lower-cased class name."""
    if isinstance(value, Node):
        return Node.type_name(value)
    return type(value).__name__.lower()


def assert_type(value: Any, required: type[N]) -> N:
    """Return ``value`` unchanged if it is exactly the ``required`` variant, else raise TypeMismatch."""
    expected = Node.type_name(required)
    actual = variant_of(value)
    if actual != expected:
        raise TypeMismatch(expected, actual, value)
    return value


def assert_color(value: Any) -> RGBA | HSLA:
    """Return ``value`` unchanged if it is color-like (RGBA or HSLA), else raise TypeMismatch."""
    actual = variant_of(value)
    if actual not in COLOR_VARIANTS:
        raise TypeMismatch("color", actual, value)
    return value
