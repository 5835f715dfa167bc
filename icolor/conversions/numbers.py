import numpy as np
from numpy import ndarray as NDArray
from ..types.format_type import ALPHA_DTYPE, CHANNEL_DTYPE, CHANNEL_MAX
from ..types.color_types import FloatLike

# All component math runs in float32, the width of the stored alpha.
_ZERO = ALPHA_DTYPE(0.0)
_ONE = ALPHA_DTYPE(1.0)
_HUNDRED = ALPHA_DTYPE(100.0)
_BYTE = ALPHA_DTYPE(CHANNEL_MAX)


def is_unit(value: FloatLike) -> bool:
    """Check that a scalar lies in the closed interval [0, 1]. NaN is rejected."""
    return bool(_ZERO <= value <= _ONE)


def clamp01(value: FloatLike) -> np.float32:
    """Clamp a ratio to [0, 1] as float32; NaN becomes 0."""
    value = ALPHA_DTYPE(value)
    if np.isnan(value):
        return _ZERO
    return ALPHA_DTYPE(np.clip(value, _ZERO, _ONE))


def percent(value: FloatLike) -> np.float32:
    """Scale an integer percentage down to a float32 fraction."""
    return ALPHA_DTYPE(value) / _HUNDRED


def to_byte(values: FloatLike) -> NDArray:
    """
    Truncate float values to bytes.

    Values saturate at 0 and 255 and NaN maps to 0, so this never wraps
    around the way a bare ``astype(np.uint8)`` would.
    """
    values = np.nan_to_num(np.asarray(values, dtype=ALPHA_DTYPE), nan=0.0)
    return np.clip(values, _ZERO, _BYTE).astype(CHANNEL_DTYPE)


def blend_with_white(channels: NDArray, alpha: FloatLike) -> NDArray:
    """
    Composite channels over a white backdrop.

    Args:
        channels: uint8 channel values, any shape
        alpha: Opacity in [0, 1] (not enforced)

    Returns:
        float32 array of ``channel * alpha + 255 * (1 - alpha)``, not truncated
    """
    alpha = ALPHA_DTYPE(alpha)
    return np.asarray(channels).astype(ALPHA_DTYPE) * alpha + _BYTE * (_ONE - alpha)


def round_half_away(value: FloatLike) -> NDArray:
    """Round to the nearest integer, ties away from zero (not numpy's ties-to-even)."""
    value = np.asarray(value, dtype=np.float64)
    return np.sign(value) * np.floor(np.abs(value) + 0.5)


def scaled_round(value: FloatLike) -> np.float32:
    """Round a fraction to two decimal digits in float32."""
    hundredths = ALPHA_DTYPE(value) * _HUNDRED
    return ALPHA_DTYPE(round_half_away(hundredths)) / _HUNDRED


def format_float(value: FloatLike) -> str:
    """
    Shortest decimal text that reads back as the same float32.

    Integral values drop the fractional part: ``1.0 -> "1"``, ``0.5 -> "0.5"``.
    """
    return np.format_float_positional(ALPHA_DTYPE(value), trim="-")
