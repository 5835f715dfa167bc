from icolor.conversions import rgb_to_hsl, rgb_hue
from ..samples import PRIMARIES, PRIMARY_HUES
import numpy as np


def test_rgb_to_hsl_magenta_pink():
    h, s, l = rgb_to_hsl(1.0, 0.0, 170 / 255)
    assert abs(h - 320) < 1e-3
    assert abs(s - 1.0) < 1e-6
    assert abs(l - 0.5) < 1e-6


def test_rgb_to_hsl_grey_has_no_hue_or_saturation():
    h, s, l = rgb_to_hsl(0.5, 0.5, 0.5)
    assert h == 0
    assert s == 0
    assert abs(l - 0.5) < 1e-6


def test_rgb_to_hsl_white_does_not_divide_by_zero():
    with np.errstate(all="raise"):
        h, s, l = rgb_to_hsl(1.0, 1.0, 1.0)
    assert (h, s, l) == (0, 0, 1)


def test_rgb_to_hsl_primaries_numpy():
    unit = PRIMARIES / 255
    hsl = rgb_to_hsl(unit[..., 0], unit[..., 1], unit[..., 2])
    assert hsl.shape == (6, 3)
    assert hsl.dtype == np.float32
    assert np.allclose(hsl[..., 0], PRIMARY_HUES, atol=1e-3)
    assert np.allclose(hsl[..., 1], 1.0)
    assert np.allclose(hsl[..., 2], 0.5)


def test_rgb_hue_wraps_negative_red_sector():
    # (g - b) / delta = -0.5 keeps its sign under a truncated modulo
    assert abs(rgb_hue(1.0, 0.0, 0.5) - 330) < 1e-3
