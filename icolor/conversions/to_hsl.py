import numpy as np
from numpy import ndarray as NDArray
from ..types.format_type import HUE_360, HUE_SECTOR
from ..types.color_types import element_to_array


def extrema(r: NDArray, g: NDArray, b: NDArray) -> tuple[NDArray, NDArray, NDArray]:
    """Return (c_max, c_min, delta) of normalized channels."""
    c_max = np.maximum(np.maximum(r, g), b)
    c_min = np.minimum(np.minimum(r, g), b)
    return c_max, c_min, c_max - c_min


def rgb_hue(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Hue in degrees [0, 360) of normalized RGB, unrounded.

    Grey (delta == 0) has hue 0. The red sector uses a truncated modulo, so a
    negative result is brought back into range by adding 360.
    """
    c_max, _, delta = extrema(r, g, b)
    grey = delta == 0
    safe_delta = np.where(grey, 1, delta)

    h_red = HUE_SECTOR * np.fmod((g - b) / safe_delta, 6)
    h_green = HUE_SECTOR * ((b - r) / safe_delta + 2)
    h_blue = HUE_SECTOR * ((r - g) / safe_delta + 4)

    h = np.where(c_max == r, h_red, np.where(c_max == g, h_green, h_blue))
    h = np.where(grey, 0, h)
    return np.where(h < 0, h + HUE_360, h)


def rgb_to_hsl(r, g, b) -> NDArray:
    """
    Convert normalized RGB to HSL.

    Args:
        r, g, b: array-like or scalar in [0, 1]

    Returns:
        float32 array of shape (..., 3): (hue [0,360), saturation [0,1], lightness [0,1])
    """
    r = element_to_array(r)
    g = element_to_array(g)
    b = element_to_array(b)

    c_max, c_min, delta = extrema(r, g, b)
    grey = delta == 0

    l = (c_max + c_min) / 2
    denom = np.where(grey, 1, 1 - np.abs(2 * l - 1))
    s = np.where(grey, 0, delta / denom)

    return np.stack(np.broadcast_arrays(rgb_hue(r, g, b), s, l), axis=-1)
