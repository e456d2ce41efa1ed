from __future__ import annotations
from typing import Any

from ..types.color_types import Scalar
from ..types.format_type import UnitTag, unit_text
from .node_base import Node


def format_number(value: Scalar) -> str:
    """Render a number the way a stylesheet prints it: no trailing zeros, at most 3 decimals."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.3f}".rstrip("0").rstrip(".")


class Unit(Node, tag="unit"):
    """A number with an optional unit tag such as ``deg``, ``%`` or ``px``."""

    __slots__ = ('val', 'type')

    def __init__(self, val: Scalar, type: UnitTag | str | None = None) -> None:
        self.val = val
        self.type = unit_text(type)
        self._freeze()

    @property
    def fields(self) -> tuple[Any, ...]:
        return (self.val, self.type)

    def __str__(self) -> str:
        return format_number(self.val) + (self.type or "")
