"""
Compiled grammars for every accepted notation.

Patterns are compiled once at import and only ever read afterwards. They are
applied with ``fullmatch`` and compiled with ``re.ASCII`` so ``\\w`` and
``\\d`` never accept non-ASCII letters or digits.
"""
import re
from typing import Dict, Tuple
from ..types.format_type import ColorFormat

HEX_REG = re.compile(r"#(\w{2})(\w{2})(\w{2})", re.ASCII)
SHORT_HEX_REG = re.compile(r"#(\w)(\w)(\w)", re.ASCII)
HEX_WITH_ALPHA_REG = re.compile(r"#(\w{2})(\w{2})(\w{2})(\w{2})", re.ASCII)
RGB_REG = re.compile(r"rgb\((\d+),(\d+),(\d+)\)", re.ASCII)
RGBA_REG = re.compile(r"rgba\((\d+),(\d+),(\d+),(\d+(?:\.\d+)?)\)", re.ASCII)
HSL_REG = re.compile(r"hsl\((\d+),(\d+)%,(\d+)%\)", re.ASCII)
HSLA_REG = re.compile(r"hsla\((\d+),(\d+)%,(\d+)%,(0\.\d+)\)", re.ASCII)
HSV_REG = re.compile(r"hsv\((\d+),(\d+)%,(\d+)%\)", re.ASCII)
CMYK_REG = re.compile(r"cmyk\((\d+),(\d+),(\d+),(\d+)\)", re.ASCII)

# Tried in order; the long form wins for #RRGGBB
GRAMMARS: Dict[ColorFormat, Tuple[re.Pattern, ...]] = {
    ColorFormat.HEX: (HEX_REG, SHORT_HEX_REG),
    ColorFormat.HEX_ALPHA: (HEX_WITH_ALPHA_REG,),
    ColorFormat.RGB: (RGB_REG,),
    ColorFormat.RGBA: (RGBA_REG,),
    ColorFormat.HSL: (HSL_REG,),
    ColorFormat.HSLA: (HSLA_REG,),
    ColorFormat.HSV: (HSV_REG,),
    ColorFormat.CMYK: (CMYK_REG,),
}

# Length of a "#..." string decides its grammar
HEX_LENGTHS: Dict[int, ColorFormat] = {
    4: ColorFormat.HEX,
    7: ColorFormat.HEX,
    9: ColorFormat.HEX_ALPHA,
}

# Checked in this order. "hsla" has no "(" unlike its siblings; the grammar
# still rejects anything that is not "hsla(".
PREFIXES: Tuple[Tuple[str, ColorFormat], ...] = (
    ("rgb(", ColorFormat.RGB),
    ("rgba(", ColorFormat.RGBA),
    ("hsl(", ColorFormat.HSL),
    ("hsla", ColorFormat.HSLA),
    ("hsv(", ColorFormat.HSV),
    ("cmyk(", ColorFormat.CMYK),
)
