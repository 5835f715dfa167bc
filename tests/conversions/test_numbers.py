from icolor.conversions import (
    blend_with_white,
    clamp01,
    format_float,
    is_unit,
    percent,
    round_half_away,
    scaled_round,
    to_byte,
)
import numpy as np


def test_to_byte_truncates_and_saturates():
    assert to_byte([12.9, 254.99, -5.0, 300.0, np.nan]).tolist() == [12, 254, 0, 255, 0]


def test_blend_with_white():
    blended = blend_with_white(np.array([0, 255, 170], dtype=np.uint8), 0.5)
    assert blended.dtype == np.float32
    assert blended.tolist() == [127.5, 255.0, 212.5]


def test_blend_with_white_opaque_keeps_channels():
    channels = np.array([16, 76, 136], dtype=np.uint8)
    assert blend_with_white(channels, 1.0).tolist() == [16.0, 76.0, 136.0]


def test_round_half_away():
    assert round_half_away(0.5) == 1
    assert round_half_away(2.5) == 3
    assert round_half_away(-0.5) == -1
    assert round_half_away(67.49) == 67


def test_scaled_round_two_decimals():
    assert format_float(scaled_round(0.456)) == "0.46"
    assert format_float(scaled_round(0.25)) == "0.25"


def test_is_unit():
    assert is_unit(0.0)
    assert is_unit(1.0)
    assert not is_unit(1.01)
    assert not is_unit(-0.01)
    assert not is_unit(float("nan"))


def test_clamp01():
    assert clamp01(2) == 1
    assert clamp01(-3) == 0
    assert clamp01(float("nan")) == 0
    assert clamp01(0.5) == np.float32(0.5)


def test_percent_is_float32():
    assert percent(79) == np.float32(0.79)
    assert percent(79).dtype == np.float32


def test_format_float_is_shortest_float32():
    assert format_float(1.0) == "1"
    assert format_float(0.0) == "0"
    assert format_float(0.5) == "0.5"
    assert format_float(np.float32(0.67)) == "0.67"
    assert format_float(0.8) == "0.8"
