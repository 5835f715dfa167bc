# No dependencies beyond numpy
from enum import Enum
import numpy as np


class ColorFormat(str, Enum):
    """Textual notations a color can be parsed from or rendered to."""
    HEX = "hex"
    HEX_ALPHA = "hex_alpha"
    ALPHA_HEX = "alpha_hex"
    RGB = "rgb"
    RGBA = "rgba"
    HSL = "hsl"
    HSLA = "hsla"
    HSV = "hsv"
    CMYK = "cmyk"


# Canonical storage of a Color
CHANNEL_DTYPE = np.uint8
ALPHA_DTYPE = np.float32

CHANNEL_MAX = 255
HUE_360 = 360
HUE_SECTOR = 60
U32_MAX = 2**32 - 1
