import numpy as np
from numpy import ndarray as NDArray
from ..types.color_types import element_to_array
from .to_hsl import extrema


def rgb_to_cmyk(r, g, b) -> NDArray:
    """
    Convert normalized RGB to CMYK fractions.

    ``k = 1 - max(r, g, b)``; pure black (k == 1) has no chromatic ink.

    Returns:
        float32 array of shape (..., 4): (c, m, y, k), each in [0, 1]
    """
    r = element_to_array(r)
    g = element_to_array(g)
    b = element_to_array(b)

    c_max, _, _ = extrema(r, g, b)
    k = 1 - c_max
    black = k == 1
    rest = np.where(black, 1, 1 - k)

    def ink(channel: NDArray) -> NDArray:
        return np.where(black, 0, (1 - channel - k) / rest)

    return np.stack(np.broadcast_arrays(ink(r), ink(g), ink(b), k), axis=-1)
