"""
icolor Color Space Conversions
==============================

Numeric conversions between 8-bit RGB and the HSL, HSV and CMYK spaces. Every
function accepts scalars or numpy arrays (broadcast together) and computes in
float32, the precision of a stored alpha.

Conversion Functions
-------------------

HSL / HSV / CMYK → RGB (truncating, uint8 output):
    hsl_to_rgb(h, s, l)
    hsv_to_rgb(h, s, v)
    cmyk_to_rgb(c, m, y, k)

RGB → HSL / HSV / CMYK (normalized [0, 1] input, unrounded float32 output):
    rgb_to_hsl(r, g, b)
    rgb_to_hsv(r, g, b)
    rgb_to_cmyk(r, g, b)

Helpers
-------
    blend_with_white(channels, alpha)
        Composite channels over white
    to_byte(values)
        Saturating, truncating float → uint8
    round_half_away(value)
        Round with ties away from zero

Rounding
--------
Space → RGB conversions truncate fractional bytes while renderers round the
RGB → space results. The two directions are deliberately not symmetric:
``hsl_to_rgb(210, 0.79, 0.30)`` gives ``(16, 76, 136)``.

Examples
--------
>>> from icolor.conversions import hsv_to_rgb, rgb_to_hsv
>>> hsv_to_rgb(210, 0.44, 0.80)
array([114, 159, 204], dtype=uint8)
>>>
>>> import numpy as np
>>> rgb = np.array([[255, 0, 170], [16, 76, 136]]) / 255
>>> hsv = rgb_to_hsv(rgb[..., 0], rgb[..., 1], rgb[..., 2])
"""

# Space → RGB
from .to_rgb import hsl_to_rgb, hsv_to_rgb, cmyk_to_rgb

# RGB → space
from .to_hsl import rgb_to_hsl, rgb_hue
from .to_hsv import rgb_to_hsv
from .to_cmyk import rgb_to_cmyk

# Numeric helpers
from .numbers import (
    blend_with_white,
    clamp01,
    format_float,
    is_unit,
    percent,
    round_half_away,
    scaled_round,
    to_byte,
)

__all__ = [
    # Space → RGB
    'hsl_to_rgb',
    'hsv_to_rgb',
    'cmyk_to_rgb',

    # RGB → space
    'rgb_to_hsl',
    'rgb_to_hsv',
    'rgb_to_cmyk',
    'rgb_hue',

    # Helpers
    'blend_with_white',
    'clamp01',
    'format_float',
    'is_unit',
    'percent',
    'round_half_away',
    'scaled_round',
    'to_byte',
]
