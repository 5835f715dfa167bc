import numpy as np
from numpy import ndarray as NDArray
from ..types.format_type import CHANNEL_MAX, HUE_SECTOR
from ..types.color_types import element_to_array
from .numbers import to_byte

## Hue sectors

def _sector_rgb(h: NDArray, c: NDArray, x: NDArray, m: NDArray) -> NDArray:
    """
    Pick (r, g, b) from the 60° hue sector of ``h`` and lift it by ``m``.

    Sectors are [0,60) [60,120) ... [300,360). A hue outside [0, 360) lands
    on (0, 0, 0) before the offset is added.

    Returns:
        uint8 array of shape (..., 3), truncated toward zero
    """
    h, c, x, m = np.broadcast_arrays(h, c, x, m)
    zero = np.zeros_like(c)

    sectors = [h < HUE_SECTOR * k for k in range(1, 7)]
    r = np.select(sectors, [c, x, zero, zero, x, c], zero)
    g = np.select(sectors, [x, c, c, x, zero, zero], zero)
    b = np.select(sectors, [zero, zero, x, c, c, x], zero)

    rgb = np.stack([r + m, g + m, b + m], axis=-1)
    return to_byte(rgb * CHANNEL_MAX)


def _secondary(h: NDArray, c: NDArray) -> NDArray:
    """x = c * (1 - |((h / 60) mod 2) - 1|), with a C-style (truncated) modulo."""
    return c * (1 - np.abs(np.fmod(h / HUE_SECTOR, 2) - 1))

## HSL to RGB

def hsl_to_rgb(h, s, l) -> NDArray:
    """
    Convert HSL to 8-bit RGB.

    Args:
        h: Hue in degrees [0, 360)
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        uint8 array of shape (..., 3). Channels are truncated, not rounded.
    """
    h = element_to_array(h)
    s = element_to_array(s)
    l = element_to_array(l)

    c = (1 - np.abs(l * 2 - 1)) * s
    x = _secondary(h, c)
    m = l - c / 2
    return _sector_rgb(h, c, x, m)

## HSV to RGB

def hsv_to_rgb(h, s, v) -> NDArray:
    """
    Convert HSV to 8-bit RGB.

    Args:
        h: Hue in degrees [0, 360)
        s: Saturation in [0, 1]
        v: Value in [0, 1]

    Returns:
        uint8 array of shape (..., 3). Channels are truncated, not rounded.
    """
    h = element_to_array(h)
    s = element_to_array(s)
    v = element_to_array(v)

    c = v * s
    x = _secondary(h, c)
    m = v - c
    return _sector_rgb(h, c, x, m)

## CMYK to RGB

def cmyk_to_rgb(c, m, y, k) -> NDArray:
    """
    Convert CMYK fractions to 8-bit RGB.

    Each channel is ``(1 - X) * (1 - k) * 255`` truncated to a byte.
    """
    c = element_to_array(c)
    m = element_to_array(m)
    y = element_to_array(y)
    t = 1 - element_to_array(k)

    rgb = np.stack(np.broadcast_arrays((1 - c) * t, (1 - m) * t, (1 - y) * t), axis=-1)
    return to_byte(rgb * CHANNEL_MAX)
