from swatch.conversions.numbers import round_half_up, np_round_half_up
from swatch.conversions import css_to_hsl, wrapper
from swatch.nodes import color
import boundednumbers
import numpy as np

def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(0.5) == 1
    assert round_half_up(49.999999) == 50
    assert round_half_up(203.49) == 203
    assert isinstance(round_half_up(1.0), int)

def test_np_round_half_up_differs_from_bankers_rounding():
    values = np.array([0.5, 1.5, 2.5, 3.5])
    assert np.array_equal(np_round_half_up(values), [1, 2, 3, 4])
    assert not np.array_equal(np.round(values), [1, 2, 3, 4])

def test_clamping_comes_from_boundednumbers():
    assert css_to_hsl.UnitFloat is boundednumbers.UnitFloat
    assert color.clamp is boundednumbers.clamp
    assert css_to_hsl.np_clamp01 is boundednumbers.np_functions.clamp01
    assert wrapper.np_clamp is boundednumbers.np_functions.clamp

def test_rgb_scale_clamps_to_channel_range():
    scaled = wrapper.scale(np.array([[1.5, -0.2, 0.5]]), "rgba")
    assert np.array_equal(scaled, [[255, 0, 128]])
