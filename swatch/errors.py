from __future__ import annotations
from typing import Any


class EvaluationError(Exception):
    """Base class for failures raised while a builtin runs."""


class TypeMismatch(EvaluationError, TypeError):
    """An argument is not of the variant (or variant set) a builtin requires."""

    def __init__(self, expected: str, actual: str, value: Any = None) -> None:
        self.expected = expected
        self.actual = actual
        self.value = value
        shown = f" {value}" if value is not None else ""
        super().__init__(f"expected {expected}, but got {actual}{shown}")


class UnsupportedArity(EvaluationError, TypeError):
    """A builtin was called with an argument count none of its overloads accept."""

    def __init__(self, name: str, given: int, expected: tuple[int, ...]) -> None:
        self.name = name
        self.given = given
        self.expected = expected
        accepted = " or ".join(str(n) for n in expected)
        noun = "argument" if expected == (1,) else "arguments"
        super().__init__(f"{name}() takes {accepted} {noun}, {given} given")
