from __future__ import annotations
from typing import Any, ClassVar


class Node:
    """
    Base for every value the evaluator passes around.

    Each concrete subclass declares its variant tag at class creation:

        class Unit(Node, tag="unit"): ...

    The tag is what type assertions compare and what ``type()`` reports.
    Instances are frozen once ``__init__`` returns.
    """

    __slots__ = ('_is_frozen',)

    variant: ClassVar[str]
    registry: ClassVar[dict[str, type[Node]]] = {}
    names:    ClassVar[dict[type[Node], str]] = {}

    def __init_subclass__(cls, tag: str | None = None, **kwargs):
        super().__init_subclass__(**kwargs)
        if tag is None:
            return
        if tag in Node.registry:
            raise ValueError(f"Node variant {tag!r} is already registered to {Node.registry[tag].__name__}")
        cls.variant = tag
        Node.registry[tag] = cls
        Node.names[cls] = tag

    def __new__(cls, *args, **kwargs):
        if cls not in Node.names:
            raise TypeError(f"{cls.__name__} has no variant tag and cannot be instantiated")
        return super().__new__(cls)

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def _freeze(self) -> None:
        super().__setattr__('_is_frozen', True)

    @staticmethod
    def type_name(cls_or_node: type[Node] | Node) -> str:
        """Variant name of a node class or instance, looked up from the registry."""
        cls = cls_or_node if isinstance(cls_or_node, type) else type(cls_or_node)
        try:
            return Node.names[cls]
        except KeyError:
            raise KeyError(f"{cls.__name__} is not a registered node variant") from None

    # ------------------ VALUE SEMANTICS ------------------
    @property
    def fields(self) -> tuple[Any, ...]:
        return ()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return type(self) is type(other) and self.fields == other.fields

    def __hash__(self) -> int:
        return hash((self.variant, self.fields))

    def __repr__(self) -> str:
        args = ", ".join(repr(f) for f in self.fields)
        return f"{self.__class__.__name__}({args})"
