from swatch.conversions.wrapper import convert, np_convert
import numpy as np
import pytest
import warnings
from ..samples import samples_rgb_hsl

def test_convert_rgba_to_hsla():
    for (r, g, b), (h_exp, s_exp, l_exp) in samples_rgb_hsl.items():
        h, s, l, a = convert((r, g, b, 1.0), "rgba", "hsla")

        assert abs(h - h_exp) < 1e-6
        assert abs(s - s_exp) < 1e-6
        assert abs(l - l_exp) < 1e-6
        assert a == 1.0

def test_convert_hsla_to_rgba():
    for (r_exp, g_exp, b_exp), (h, s, l) in samples_rgb_hsl.items():
        r, g, b, a = convert((h, s, l, 1.0), "hsla", "rgba")

        assert (r, g, b) == (r_exp, g_exp, b_exp)
        assert all(isinstance(c, int) for c in (r, g, b))

def test_alpha_is_carried_through():
    assert convert((255, 0, 0, 0.4), "rgba", "hsla")[3] == 0.4
    assert convert((0, 100, 50, 0.25), "hsla", "rgba")[3] == 0.25
    # no range enforcement on alpha in either direction
    assert convert((0, 100, 50, 1.5), "hsla", "rgba")[3] == 1.5

def test_rgb_output_is_rounded_and_clamped():
    # 0.5 * 255 = 127.5 rounds half up
    assert convert((0, 0, 50, 1), "hsla", "rgba")[:3] == (128, 128, 128)
    assert convert((0, 150, 50, 1), "hsla", "rgba")[:3] == (255, 0, 0)
    assert convert((0, 100, 120, 1), "hsla", "rgba")[:3] == (255, 255, 255)

def test_same_space_is_returned_unchanged():
    color = (10, 20, 30, 0.5)
    assert convert(color, "rgba", "rgba") is color
    assert convert(color, "RGBA", "rgba") is color

def test_unknown_space_raises():
    with pytest.raises(ValueError):
        convert((0, 0, 0, 1), "rgba", "hsva")
    with pytest.raises(ValueError):
        np_convert(np.zeros((2, 4)), "cmyk", "rgba")

def test_wrong_channel_count_raises():
    with pytest.raises(ValueError):
        np_convert(np.zeros((2, 3)), "rgba", "hsla")

def test_np_convert_matches_scalar():
    rgba = np.array([[r, g, b, 0.5] for (r, g, b) in samples_rgb_hsl])
    hsla = np_convert(rgba, "rgba", "hsla")

    assert hsla.shape == rgba.shape
    for row, (r, g, b) in zip(hsla, samples_rgb_hsl):
        assert np.allclose(row, convert((r, g, b, 0.5), "rgba", "hsla"))

def test_round_trip_all_channels_within_one():
    steps = np.arange(0, 256, 15)
    r, g, b = np.meshgrid(steps, steps, steps, indexing="ij")
    rgba = np.stack([r, g, b, np.ones_like(r)], axis=-1).reshape(-1, 4).astype(float)

    hsla = np_convert(rgba, "rgba", "hsla")
    back = np_convert(hsla, "hsla", "rgba")

    assert np.all(np.abs(back[..., :3] - rgba[..., :3]) <= 1)
    assert np.array_equal(back[..., 3], rgba[..., 3])

def test_round_trip_is_deterministic():
    first = convert(convert((37, 201, 99, 0.7), "rgba", "hsla"), "hsla", "rgba")
    second = convert(convert((37, 201, 99, 0.7), "rgba", "hsla"), "hsla", "rgba")
    assert first == second
    assert all(abs(x - y) <= 1 for x, y in zip(first[:3], (37, 201, 99)))

def test_out_of_range_rgb_converts_without_warnings():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        h, s, l, a = convert((510, 0, 0, 1.0), "rgba", "hsla")
    assert (h, s, l, a) == (0.0, 100.0, 100.0, 1.0)
