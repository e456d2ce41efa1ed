"""
Built-in functions
==================

Color constructors, color-space converters and channel accessors reachable
from stylesheet expressions by name.

Every builtin takes already-evaluated argument nodes positionally. The
overload is picked from the argument count first; only then are the
arguments type-checked. A count no overload accepts raises
``UnsupportedArity``, a wrong argument variant raises ``TypeMismatch``.

Examples
--------
>>> from swatch.evaluator import call_builtin
>>> from swatch.nodes import Unit
>>> str(call_builtin("rgba", Unit(255), Unit(0), Unit(0), Unit(0.5)))
'rgba(255,0,0,0.5)'
>>> str(call_builtin("hue", call_builtin("hsl", Unit(50, "deg"), Unit(100, "%"), Unit(80, "%"))))
'50deg'
"""
from __future__ import annotations
import logging
from types import MappingProxyType
from typing import Callable, Mapping

from ..conversions import round_half_up
from ..errors import UnsupportedArity
from ..nodes import Node, Unit, RGBA, HSLA, String
from ..types.format_type import UnitTag, ALPHA_MAX
from .utils import assert_type, assert_color, variant_of

log = logging.getLogger(__name__)

Builtin = Callable[..., Node]


def _arity(name: str, args: tuple, *accepted: int) -> int:
    """Return the argument count if some overload of ``name`` accepts it."""
    given = len(args)
    if given not in accepted:
        raise UnsupportedArity(name, given, accepted)
    return given


## Color constructors

def hsla(*args: Node) -> HSLA:
    """
    Convert the given color to an HSLA node, or build one from h, s, l, a.

        hsla(10deg, 50%, 30%, 0.5)   // => HSLA
        hsla(#ffcc00)                // => HSLA
    """
    if _arity("hsla", args, 1, 4) == 1:
        return assert_color(args[0]).hsla
    h, s, l, a = (assert_type(arg, Unit) for arg in args)
    return HSLA(h.val, s.val, l.val, a.val)


def hsl(*args: Node) -> HSLA:
    """
    Convert the given color to an HSLA node, or build an opaque one from h, s, l.

    Unlike ``rgb(color)`` the one-argument form keeps the source alpha.

        hsl(10, 50, 30)   // => HSLA
        hsl(#ffcc00)      // => HSLA
    """
    if _arity("hsl", args, 1, 3) == 3:
        return hsla(*args, Unit(ALPHA_MAX))
    return assert_color(args[0]).hsla


def rgba(*args: Node) -> RGBA:
    """
    Return an RGBA color from the r, g, b, a channels, from a color and a new
    alpha, or as a normalized copy of a color.

        rgba(255, 0, 0, 0.5)   // => rgba(255,0,0,0.5)
        rgba(255, 0, 0, 1)     // => #ff0000
        rgba(#ffcc00, 0.5)     // => rgba(255,204,0,0.5)
        rgba(hsl(0, 100%, 50%)) // => #ff0000
    """
    count = _arity("rgba", args, 1, 2, 4)
    if count == 1:
        color = assert_color(args[0]).rgba
        return RGBA(color.r, color.g, color.b, color.a)
    if count == 2:
        color = assert_color(args[0]).rgba
        new_alpha = assert_type(args[1], Unit)
        return RGBA(color.r, color.g, color.b, new_alpha.val)
    r, g, b, a = (assert_type(arg, Unit) for arg in args)
    return RGBA(r.val, g.val, b.val, a.val)


def rgb(*args: Node) -> RGBA:
    """
    Return an opaque RGBA color from the r, g, b channels or from a color.

    The one-argument form always drops the source alpha.

        rgb(255, 204, 0)   // => #ffcc00
        rgb(#fff)          // => #ffffff
    """
    if _arity("rgb", args, 1, 3) == 3:
        return rgba(*args, Unit(ALPHA_MAX))
    color = assert_color(args[0]).rgba
    return RGBA(color.r, color.g, color.b, ALPHA_MAX)


## Introspection

def type_(*args: Node) -> String:
    """
    Return the variant name of ``node``.

        type(12)     // => 'unit'
        type(#fff)   // => 'color'
    """
    _arity("type", args, 1)
    return String(variant_of(args[0]).lower())


## HSLA components

def hue(*args: Node) -> Unit:
    """hue(hsl(50deg, 100%, 80%)) // => 50deg"""
    _arity("hue", args, 1)
    color = assert_type(args[0], HSLA)
    return Unit(round_half_up(color.h), UnitTag.DEG)


def saturation(*args: Node) -> Unit:
    """saturation(hsl(50deg, 100%, 80%)) // => 100%"""
    _arity("saturation", args, 1)
    color = assert_type(args[0], HSLA)
    return Unit(round_half_up(color.s), UnitTag.PERCENT)


def lightness(*args: Node) -> Unit:
    """lightness(hsl(50deg, 100%, 80%)) // => 80%"""
    _arity("lightness", args, 1)
    color = assert_type(args[0], HSLA)
    return Unit(round_half_up(color.l), UnitTag.PERCENT)


## RGBA components

def alpha(*args: Node) -> Unit:
    """
    alpha(#fff)                // => 1
    alpha(rgba(0, 0, 0, 0.3))  // => 0.3
    """
    _arity("alpha", args, 1)
    return Unit(assert_color(args[0]).rgba.a)


def red(*args: Node) -> Unit:
    """red(#c00) // => 204"""
    _arity("red", args, 1)
    return Unit(assert_color(args[0]).rgba.r)


def green(*args: Node) -> Unit:
    """green(#0c0) // => 204"""
    _arity("green", args, 1)
    return Unit(assert_color(args[0]).rgba.g)


def blue(*args: Node) -> Unit:
    """blue(#00c) // => 204"""
    _arity("blue", args, 1)
    return Unit(assert_color(args[0]).rgba.b)


BIFS: Mapping[str, Builtin] = MappingProxyType({
    "hsla": hsla,
    "hsl": hsl,
    "type": type_,
    "hue": hue,
    "saturation": saturation,
    "lightness": lightness,
    "alpha": alpha,
    "red": red,
    "green": green,
    "blue": blue,
    "rgba": rgba,
    "rgb": rgb,
})


def has_builtin(name: str) -> bool:
    return name in BIFS


def lookup(name: str) -> Builtin:
    try:
        return BIFS[name]
    except KeyError as e:
        raise KeyError(f"unknown builtin '{name}'") from e


def call_builtin(name: str, *args: Node) -> Node:
    """Look up ``name`` and apply it to ``args``. Evaluation errors propagate unchanged."""
    fn = lookup(name)
    log.debug("calling %s with %d argument(s)", name, len(args))
    return fn(*args)
