"""Basic swatch usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import numpy as np

from swatch import (
    RGBA,
    Unit,
    TypeMismatch,
    UnsupportedArity,
    call_builtin,
    np_convert,
)


def demonstrate_builtins() -> None:
    # Build colors from components and read them back.
    accent = call_builtin("rgba", Unit(255), Unit(128), Unit(64), Unit(0.5))
    print("rgba(255,128,64,0.5):", accent)

    as_hsl = call_builtin("hsl", accent)
    print("hsl(accent):", as_hsl)
    print("hue(hsl(accent)):", call_builtin("hue", as_hsl))
    print("red(hsl(accent)):", call_builtin("red", as_hsl))

    # rgb() of a color always comes out opaque.
    print("rgb(accent):", call_builtin("rgb", accent))
    print("type(accent):", call_builtin("type", accent))


def demonstrate_errors() -> None:
    try:
        call_builtin("hue", RGBA(255, 0, 0))
    except TypeMismatch as e:
        print("hue(#ff0000) failed:", e)

    try:
        call_builtin("rgba", Unit(1), Unit(2), Unit(3))
    except UnsupportedArity as e:
        print("rgba(1,2,3) failed:", e)


def demonstrate_batch_conversion() -> None:
    # Convert many colors at once.
    palette = np.array([
        [255, 0, 0, 1.0],
        [255, 204, 0, 1.0],
        [51, 102, 153, 0.5],
    ])
    print("palette as HSLA:\n", np_convert(palette, "rgba", "hsla"))


if __name__ == "__main__":
    demonstrate_builtins()
    demonstrate_errors()
    demonstrate_batch_conversion()
