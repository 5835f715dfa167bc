import string
from ..errors import ColorFormatError
from ..types.format_type import ALPHA_DTYPE, CHANNEL_MAX, U32_MAX
import numpy as np

_HEX_DIGITS = frozenset(string.hexdigits)


def hex_byte(token: str) -> int:
    """
    Decode a one or two character hex token to a byte.

    A single character is doubled first (``"f" -> "ff"``). The grammar only
    guarantees word characters, so digits outside 0-9a-fA-F fail here.
    """
    pair = (token * 2)[:2]
    if len(pair) != 2 or not _HEX_DIGITS.issuperset(pair):
        raise ColorFormatError(f"invalid hex digits: {token!r}")
    return int(pair, 16)


def _bounded_int(token: str, maximum: int) -> int:
    if not token.isdigit():
        raise ColorFormatError(f"not a decimal integer: {token!r}")
    value = int(token)
    if value > maximum:
        raise ColorFormatError(f"{token} does not fit in 0..{maximum}")
    return value


def decimal_byte(token: str) -> int:
    """Decode a decimal channel token; anything above 255 is a format error."""
    return _bounded_int(token, CHANNEL_MAX)


def decimal_u32(token: str) -> int:
    """Decode an unsigned 32-bit decimal token (hue, percentages)."""
    return _bounded_int(token, U32_MAX)


def decimal_float(token: str) -> np.float32:
    """Decode a decimal fraction token to float32."""
    try:
        value = float(token)
    except ValueError as exc:
        raise ColorFormatError(f"not a decimal number: {token!r}") from exc
    with np.errstate(over="ignore"):
        return ALPHA_DTYPE(value)
