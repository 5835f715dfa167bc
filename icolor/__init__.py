"""
icolor - Color Notation Parsing and Conversion
==============================================

Parse a color written in one of the common textual notations, hold it as one
canonical RGBA value, and write it back out in any of them.

Key Features
------------
- Hex (#RGB, #RRGGBB, #RRGGBBAA), rgb/rgba, hsl/hsla, hsv and cmyk notations
- RGB ↔ HSL, RGB ↔ HSV, RGB ↔ CMYK conversions (scalar or numpy arrays)
- Rendering composited over white for notations without alpha
- Alpha transforms: set_alpha, fade, opaquer, negate
- Dark/light classification

Quick Start
-----------
>>> import icolor
>>>
>>> color = icolor.parse("hsl(210, 79%, 30%)")
>>> color.to_hex()
'#104C88'
>>> color.to_rgb()
'rgb(16,76,136)'
>>>
>>> icolor.Color.from_cmyk(0.5, 0.2, 0.1, 0.1).to_hex()
'#72B7CE'

Modules
-------
- colors: the Color value
- conversions: color space conversion functions
- parsing: notation recognizer and token decoders
- errors: ColorFormatError, ColorValueError, AlphaRangeWarning
"""

from .colors import Color
from .errors import (
    AlphaRangeWarning,
    ColorError,
    ColorFormatError,
    ColorValueError,
    ErrorKind,
)
from .types.format_type import ColorFormat
from .conversions import (
    hsl_to_rgb,
    hsv_to_rgb,
    cmyk_to_rgb,
    rgb_to_hsl,
    rgb_to_hsv,
    rgb_to_cmyk,
)


def parse(text: str) -> Color:
    """Shortcut for :meth:`Color.parse`."""
    return Color.parse(text)


__all__ = [
    # core
    "Color",
    "ColorFormat",
    "parse",
    # errors
    "ColorError",
    "ColorFormatError",
    "ColorValueError",
    "AlphaRangeWarning",
    "ErrorKind",
    # conversions
    "hsl_to_rgb",
    "hsv_to_rgb",
    "cmyk_to_rgb",
    "rgb_to_hsl",
    "rgb_to_hsv",
    "rgb_to_cmyk",
]
