"""
icolor Color Class
==================

A single mutable color value: red, green and blue as 8-bit channels and an
alpha stored as float32.

Features
--------
- Parsing of hex, rgb, rgba, hsl, hsla, hsv and cmyk notations
- Validated constructors from RGB, HSL, HSV and CMYK components
- Renderers for every notation
- In-place alpha transforms that chain (``set_alpha``, ``fade``, ``opaquer``)
- Inversion and dark/light classification

Usage
-----
>>> from icolor.colors import Color
>>>
>>> color = Color.parse("#ff00aa")
>>> color.to_hsl()
'hsl(320,100%,50%)'
>>> color.to_cmyk()
'cmyk(0,100,33,0)'
>>>
>>> # Transforms change the color and return it
>>> color.set_alpha(0.5).to_hex()
'#FF7FD4'
>>> color.is_light()
True

Notes
-----
- Renderers without alpha in their notation (hex, rgb, hsl, hsv, cmyk) show
  the color composited over white. ``to_hex_alpha``, ``to_alpha_hex``,
  ``to_rgba`` and ``to_hsla`` show the raw channels and the stored alpha.
- HSL/HSV/CMYK → RGB truncates; RGB → HSL/HSV/CMYK rounds.
"""

from .color import Color


__all__ = ['Color']
