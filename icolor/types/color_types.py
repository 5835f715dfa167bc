from __future__ import annotations
from typing import Tuple, Union
import numpy as np
from numpy import ndarray

Scalar = int | float
FloatLike = Union[float, np.floating, ndarray]
RGBTuple = Tuple[int, int, int]
RGBATuple = Tuple[int, int, int, float]
HSLValues = Tuple[int, float, float]
Tokens = Tuple[str, ...]


def element_to_array(element: Union[Scalar, ndarray], dtype=np.float32) -> ndarray:
    """
    Convert a scalar or array-like component to a numpy array.

    Args:
        element: Scalar, sequence, or already an ndarray
        dtype: Target dtype (float32 unless stated otherwise)

    Returns:
        numpy array representation
    """
    return np.asarray(element, dtype=dtype)
