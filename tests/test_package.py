import swatch
from swatch import BIFS, RGBA, Unit, call_builtin


def test_public_exports():
    for name in swatch.__all__:
        assert hasattr(swatch, name), name

def test_version():
    assert swatch.__version__ == "0.1.0"

def test_nested_calls():
    # rgba(hsl(rgb(255, 204, 0)), 0.5)
    color = call_builtin(
        "rgba",
        call_builtin("hsl", call_builtin("rgb", Unit(255), Unit(204), Unit(0))),
        Unit(0.5),
    )
    assert color == RGBA(255, 204, 0, 0.5)
    assert len(BIFS) == 12
