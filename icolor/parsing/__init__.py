"""
icolor Text Recognizer
======================

Turns color text into raw tokens. Nothing here checks numeric ranges beyond
what the grammar shape and the token width imply; that is the job of the
``Color`` constructors.

Accepted notations
------------------
    #RGB, #RRGGBB          hex
    #RRGGBBAA              hex with alpha
    rgb(r,g,b)             decimal bytes
    rgba(r,g,b,a)          decimal bytes + decimal alpha
    hsl(h,s%,l%)           integer degrees and percentages
    hsla(h,s%,l%,0.a)      alpha must be written as "0.<digits>"
    hsv(h,s%,v%)
    cmyk(c,m,y,k)          integer percentages

Spaces are only stripped by ``recognize`` for the functional notations.
"""

from .recognizer import recognize, normalize, match_tokens
from .tokens import hex_byte, decimal_byte, decimal_u32, decimal_float
from .patterns import GRAMMARS, HEX_LENGTHS, PREFIXES

__all__ = [
    'recognize',
    'normalize',
    'match_tokens',
    'hex_byte',
    'decimal_byte',
    'decimal_u32',
    'decimal_float',
    'GRAMMARS',
    'HEX_LENGTHS',
    'PREFIXES',
]
