from icolor.errors import ColorFormatError
from icolor.parsing import hex_byte, decimal_byte, decimal_u32, decimal_float
import numpy as np
import pytest


def test_hex_byte_doubles_single_digit():
    assert hex_byte("f") == 255
    assert hex_byte("0") == 0
    assert hex_byte("a") == 170


def test_hex_byte_pairs():
    assert hex_byte("ff") == 255
    assert hex_byte("4C") == 76
    assert hex_byte("80") == 128


@pytest.mark.parametrize("token", ["zz", "Z0", "_", "a_", "g"])
def test_hex_byte_rejects_non_hex_word_characters(token):
    with pytest.raises(ColorFormatError):
        hex_byte(token)


def test_decimal_byte_bounds():
    assert decimal_byte("0") == 0
    assert decimal_byte("255") == 255
    assert decimal_byte("007") == 7
    with pytest.raises(ColorFormatError):
        decimal_byte("256")


def test_decimal_u32_bounds():
    assert decimal_u32("4294967295") == 2**32 - 1
    with pytest.raises(ColorFormatError):
        decimal_u32("4294967296")


def test_decimal_float_is_float32():
    value = decimal_float("0.8")
    assert isinstance(value, np.float32)
    assert value == np.float32(0.8)


def test_decimal_float_rejects_garbage():
    with pytest.raises(ColorFormatError):
        decimal_float("0.8.1")
