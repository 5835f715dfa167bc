import numpy as np
from numpy import ndarray as NDArray
from ..types.color_types import element_to_array
from .to_hsl import extrema, rgb_hue


def rgb_to_hsv(r, g, b) -> NDArray:
    """
    Convert normalized RGB to HSV.

    Args:
        r, g, b: array-like or scalar in [0, 1]

    Returns:
        float32 array of shape (..., 3): (hue [0,360), saturation [0,1], value [0,1])
    """
    r = element_to_array(r)
    g = element_to_array(g)
    b = element_to_array(b)

    c_max, _, delta = extrema(r, g, b)
    black = c_max == 0
    s = np.where(black, 0, delta / np.where(black, 1, c_max))

    return np.stack(np.broadcast_arrays(rgb_hue(r, g, b), s, c_max), axis=-1)
