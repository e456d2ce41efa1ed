from __future__ import annotations
from typing import Any

from .node_base import Node


class String(Node, tag="string"):
    """Quoted text. ``type()`` wraps its result in one of these."""

    __slots__ = ('val',)

    def __init__(self, val: str) -> None:
        self.val = val
        self._freeze()

    @property
    def fields(self) -> tuple[Any, ...]:
        return (self.val,)

    def __str__(self) -> str:
        return f"'{self.val}'"


class Boolean(Node, tag="boolean"):
    __slots__ = ('val',)

    def __init__(self, val: bool) -> None:
        self.val = bool(val)
        self._freeze()

    @property
    def fields(self) -> tuple[Any, ...]:
        return (self.val,)

    def __str__(self) -> str:
        return "true" if self.val else "false"


class Null(Node, tag="null"):
    __slots__ = ()

    def __init__(self) -> None:
        self._freeze()

    def __str__(self) -> str:
        return "null"
