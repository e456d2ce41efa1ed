"""
Color nodes.

``RGBA`` (variant ``color``) and ``HSLA`` (variant ``hsla``) each store their
own channels and project into the other representation on demand. The
projection is recomputed on every read; nothing is cached on the node.

>>> from swatch.nodes import RGBA, HSLA
>>> RGBA(255, 0, 0, 0.4).hsla
HSLA(0.0, 100.0, 50.0, 0.4)
>>> HSLA(0, 100, 50, 1).rgba
RGBA(255, 0, 0, 1.0)
"""
from __future__ import annotations
from typing import Any, ClassVar, Tuple

from boundednumbers import clamp

from ..conversions import convert, round_half_up
from ..types.color_types import Scalar
from ..types.format_type import CHANNEL_MAX, ALPHA_MAX
from .node_base import Node
from .unit import format_number


class ColorNode(Node):
    """Shared behaviour of the color-like variants."""

    __slots__ = ()

    mode:   ClassVar[str]

    rgba: RGBA
    hsla: HSLA

    @property
    def value(self) -> Tuple[Scalar, Scalar, Scalar, Scalar]:
        return self.fields

    @property
    def alpha(self) -> Scalar:
        return self.fields[3]

    @property
    def is_opaque(self) -> bool:
        return self.alpha == ALPHA_MAX


class RGBA(ColorNode, tag="color"):
    """Red, green, blue (conventionally 0..255) and alpha (conventionally 0..1)."""

    __slots__ = ('r', 'g', 'b', 'a')

    mode:   ClassVar[str] = "rgba"

    def __init__(self, r: Scalar, g: Scalar, b: Scalar, a: Scalar = ALPHA_MAX) -> None:
        self.r = r
        self.g = g
        self.b = b
        self.a = a
        self._freeze()

    @property
    def fields(self) -> tuple[Any, ...]:
        return (self.r, self.g, self.b, self.a)

    @property
    def rgba(self) -> RGBA:
        return self

    @property
    def hsla(self) -> HSLA:
        return HSLA(*convert(self.fields, self.mode, HSLA.mode))

    def __str__(self) -> str:
        r, g, b = (int(clamp(round_half_up(c), 0, CHANNEL_MAX)) for c in (self.r, self.g, self.b))
        if self.is_opaque:
            return f"#{r:02x}{g:02x}{b:02x}"
        return f"rgba({r},{g},{b},{format_number(self.a)})"


class HSLA(ColorNode, tag="hsla"):
    """Hue in degrees, saturation and lightness in percent, alpha in 0..1."""

    __slots__ = ('h', 's', 'l', 'a')

    mode:   ClassVar[str] = "hsla"

    def __init__(self, h: Scalar, s: Scalar, l: Scalar, a: Scalar = ALPHA_MAX) -> None:
        self.h = h
        self.s = s
        self.l = l
        self.a = a
        self._freeze()

    @property
    def fields(self) -> tuple[Any, ...]:
        return (self.h, self.s, self.l, self.a)

    @property
    def rgba(self) -> RGBA:
        return RGBA(*convert(self.fields, self.mode, RGBA.mode))

    @property
    def hsla(self) -> HSLA:
        return self

    def __str__(self) -> str:
        return (
            f"hsla({format_number(self.h)},{format_number(self.s)}%,"
            f"{format_number(self.l)}%,{format_number(self.a)})"
        )
