from __future__ import annotations
from typing import Callable, ClassVar, Dict, Tuple
import warnings

import numpy as np
from numpy import ndarray

from ..conversions import (
    blend_with_white,
    clamp01,
    cmyk_to_rgb,
    format_float,
    hsl_to_rgb,
    hsv_to_rgb,
    is_unit,
    percent,
    rgb_to_cmyk,
    rgb_to_hsl,
    rgb_to_hsv,
    round_half_away,
    scaled_round,
    to_byte,
)
from ..errors import AlphaRangeWarning, ColorValueError
from ..parsing import (
    decimal_byte,
    decimal_float,
    decimal_u32,
    hex_byte,
    match_tokens,
    recognize,
)
from ..types.color_types import HSLValues, RGBATuple, RGBTuple, Scalar
from ..types.format_type import (
    ALPHA_DTYPE,
    CHANNEL_DTYPE,
    CHANNEL_MAX,
    HUE_360,
    ColorFormat,
)


def _check_channel(value) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ColorValueError(f"channel must be an integer, got {value!r}")
    if not 0 <= value <= CHANNEL_MAX:
        raise ColorValueError(f"channel {value} is outside 0..{CHANNEL_MAX}")
    return int(value)


def _check_unit(name: str, value: Scalar) -> np.float32:
    value = ALPHA_DTYPE(value)
    if not is_unit(value):
        raise ColorValueError(f"{name} {format_float(value)} is outside [0, 1]")
    return value


def _check_hue(h: Scalar) -> Scalar:
    if not 0 <= h < HUE_360:
        raise ColorValueError(f"hue {h} is outside [0, {HUE_360})")
    return h


class Color:
    """
    A single RGBA color: three 8-bit channels and a float32 alpha.

    Colors are built with one of the ``from_*`` class methods or parsed from
    text with :meth:`parse`. Renderers (``to_*``) never change the color;
    ``set_alpha``, ``negate``, ``fade`` and ``opaquer`` change it in place
    and return it so calls can be chained.

    Constructors validate their inputs, transforms do not: an alpha outside
    [0, 1] can only enter through ``set_alpha``/``from_hsla`` (with an
    :class:`~icolor.errors.AlphaRangeWarning`) or ``negate``.

    >>> Color.parse("#ff00aa").set_alpha(0.5).to_hex()
    '#FF7FD4'
    """

    __slots__ = ('_rgb', '_alpha')

    _rgb: ndarray
    _alpha: np.float32

    _parsers: ClassVar[Dict[ColorFormat, str]] = {
        ColorFormat.HEX: 'from_hex',
        ColorFormat.HEX_ALPHA: 'from_hex_alpha',
        ColorFormat.RGB: 'from_rgb_str',
        ColorFormat.RGBA: 'from_rgba_str',
        ColorFormat.HSL: 'from_hsl_str',
        ColorFormat.HSLA: 'from_hsla_str',
        ColorFormat.HSV: 'from_hsv_str',
        ColorFormat.CMYK: 'from_cmyk_str',
    }

    def __init__(self, red: int = 0, green: int = 0, blue: int = 0, alpha: Scalar = 0.0) -> None:
        channels = [_check_channel(v) for v in (red, green, blue)]
        self._rgb = np.array(channels, dtype=CHANNEL_DTYPE)
        self._alpha = ALPHA_DTYPE(alpha)

    @classmethod
    def _from_array(cls, rgb: ndarray, alpha: Scalar) -> Color:
        color = cls.__new__(cls)
        color._rgb = np.asarray(rgb, dtype=CHANNEL_DTYPE).reshape(3).copy()
        color._alpha = ALPHA_DTYPE(alpha)
        return color

    # ------------------ NUMERIC CONSTRUCTORS ------------------
    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> Color:
        """Opaque color from three bytes."""
        return cls(r, g, b, 1.0)

    @classmethod
    def from_rgba(cls, r: int, g: int, b: int, a: Scalar) -> Color:
        """
        Color from three bytes and an alpha.

        Raises:
            ColorValueError: If ``a`` is outside [0, 1].
        """
        return cls(r, g, b, _check_unit("alpha", a))

    @classmethod
    def from_hsl(cls, h: Scalar, s: Scalar, l: Scalar) -> Color:
        """
        Opaque color from hue (degrees), saturation and lightness.

        >>> Color.from_hsl(210, 0.79, 0.30).to_hex()
        '#104C88'

        Raises:
            ColorValueError: If ``h`` is outside [0, 360) or ``s``/``l`` outside [0, 1].
        """
        s = _check_unit("saturation", s)
        l = _check_unit("lightness", l)
        return cls._from_array(hsl_to_rgb(_check_hue(h), s, l), 1.0)

    @classmethod
    def from_hsla(cls, h: Scalar, s: Scalar, l: Scalar, a: Scalar) -> Color:
        """Same as :meth:`from_hsl`, then :meth:`set_alpha` (alpha is not validated)."""
        color = cls.from_hsl(h, s, l)
        color.set_alpha(a)
        return color

    @classmethod
    def from_hsv(cls, h: Scalar, s: Scalar, v: Scalar) -> Color:
        """
        Opaque color from hue (degrees), saturation and value.

        >>> Color.from_hsv(210, 0.44, 0.80).to_hex()
        '#729FCC'
        """
        s = _check_unit("saturation", s)
        v = _check_unit("value", v)
        return cls._from_array(hsv_to_rgb(_check_hue(h), s, v), 1.0)

    @classmethod
    def from_cmyk(cls, c: Scalar, m: Scalar, y: Scalar, k: Scalar) -> Color:
        """
        Opaque color from CMYK fractions.

        >>> Color.from_cmyk(0.5, 0.2, 0.1, 0.1).to_hex()
        '#72B7CE'
        """
        inks = [_check_unit(name, v) for name, v in zip("cmyk", (c, m, y, k))]
        return cls._from_array(cmyk_to_rgb(*inks), 1.0)

    # ------------------ TEXT CONSTRUCTORS ------------------
    @classmethod
    def parse(cls, text: str) -> Color:
        """
        Parse any supported notation.

        Examples: ``#FF00AA``, ``#f0a``, ``#FF00AA80``, ``rgb(129,45,78)``,
        ``rgba(129,45,78, 0.8)``, ``hsl(120, 45%, 90%)``,
        ``hsla(120, 45%, 90%, 0.5)``, ``hsv(120, 60%, 80%)``,
        ``cmyk(100, 40, 70, 90)``.

        Raises:
            ColorFormatError: If the text matches no notation.
            ColorValueError: If it does but a component is out of range.
        """
        fmt, candidate = recognize(text)
        parser: Callable[[str], Color] = getattr(cls, cls._parsers[fmt])
        return parser(candidate)

    @classmethod
    def from_hex(cls, text: str) -> Color:
        """Opaque color from ``#RRGGBB`` or ``#RGB``."""
        r, g, b = (hex_byte(t) for t in match_tokens(ColorFormat.HEX, text))
        return cls._from_array([r, g, b], 1.0)

    @classmethod
    def from_hex_alpha(cls, text: str) -> Color:
        """Color from ``#RRGGBBAA``; the alpha byte is divided by 255."""
        r, g, b, a = (hex_byte(t) for t in match_tokens(ColorFormat.HEX_ALPHA, text))
        return cls._from_array([r, g, b], ALPHA_DTYPE(a) / ALPHA_DTYPE(CHANNEL_MAX))

    @classmethod
    def from_rgb_str(cls, text: str) -> Color:
        """Color from ``rgb(R,G,B)`` (no spaces)."""
        r, g, b = (decimal_byte(t) for t in match_tokens(ColorFormat.RGB, text))
        return cls.from_rgb(r, g, b)

    @classmethod
    def from_rgba_str(cls, text: str) -> Color:
        """Color from ``rgba(R,G,B,A)`` (no spaces)."""
        *rgb, a = match_tokens(ColorFormat.RGBA, text)
        r, g, b = (decimal_byte(t) for t in rgb)
        return cls.from_rgba(r, g, b, decimal_float(a))

    @classmethod
    def from_hsl_str(cls, text: str) -> Color:
        """Color from ``hsl(H,S%,L%)`` (no spaces)."""
        h, s, l = (decimal_u32(t) for t in match_tokens(ColorFormat.HSL, text))
        return cls.from_hsl(h, percent(s), percent(l))

    @classmethod
    def from_hsla_str(cls, text: str) -> Color:
        """Color from ``hsla(H,S%,L%,0.A)`` (no spaces)."""
        *hsl, a = match_tokens(ColorFormat.HSLA, text)
        h, s, l = (decimal_u32(t) for t in hsl)
        return cls.from_hsla(h, percent(s), percent(l), decimal_float(a))

    @classmethod
    def from_hsv_str(cls, text: str) -> Color:
        """Color from ``hsv(H,S%,V%)`` (no spaces)."""
        h, s, v = (decimal_u32(t) for t in match_tokens(ColorFormat.HSV, text))
        return cls.from_hsv(h, percent(s), percent(v))

    @classmethod
    def from_cmyk_str(cls, text: str) -> Color:
        """Color from ``cmyk(C,M,Y,K)`` with integer percentages (no spaces)."""
        inks = [percent(decimal_u32(t)) for t in match_tokens(ColorFormat.CMYK, text)]
        return cls.from_cmyk(*inks)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def red(self) -> int:
        return int(self._rgb[0])

    @property
    def green(self) -> int:
        return int(self._rgb[1])

    @property
    def blue(self) -> int:
        return int(self._rgb[2])

    @property
    def alpha(self) -> float:
        return float(self._alpha)

    @property
    def rgb(self) -> RGBTuple:
        r, g, b = self._rgb.tolist()
        return r, g, b

    @property
    def channels(self) -> RGBATuple:
        return self.rgb + (self.alpha,)

    # ------------------ INTERNALS ------------------
    def _blended(self) -> ndarray:
        """Channels composited over white, as float32 (not truncated)."""
        return blend_with_white(self._rgb, self._alpha)

    def _unit_channels(self, blend: bool) -> ndarray:
        if blend:
            return self._blended() / CHANNEL_MAX
        return self._rgb.astype(ALPHA_DTYPE) / CHANNEL_MAX

    def _flattened(self) -> Tuple[int, ...]:
        return tuple(to_byte(self._blended()).tolist())

    def _alpha_byte(self) -> int:
        return int(to_byte(self._alpha * CHANNEL_MAX))

    def _hsl(self, blend: bool) -> Tuple[int, np.float32, np.float32]:
        h, s, l = rgb_to_hsl(*self._unit_channels(blend))
        return int(round_half_away(h)), s, l

    # ------------------ RENDERERS ------------------
    def to_hsl_values(self, blend: bool = True) -> HSLValues:
        """
        (hue, saturation, lightness) with the hue rounded to whole degrees.

        Args:
            blend: Composite over white first (as ``to_hsl`` does) or use the
                raw channels (as ``to_hsla`` does).
        """
        h, s, l = self._hsl(blend)
        return h, float(s), float(l)

    def to_hex(self) -> str:
        """``#RRGGBB`` of the color composited over white."""
        return "#{:02X}{:02X}{:02X}".format(*self._flattened())

    def to_hex_alpha(self) -> str:
        """``#RRGGBBAA`` of the raw channels."""
        return "#{:02X}{:02X}{:02X}{:02X}".format(*self.rgb, self._alpha_byte())

    def to_alpha_hex(self) -> str:
        """``#AARRGGBB``, the ordering spreadsheet tools use."""
        return "#{:02X}{:02X}{:02X}{:02X}".format(self._alpha_byte(), *self.rgb)

    def to_rgb(self) -> str:
        """``rgb(r,g,b)`` of the color composited over white."""
        return "rgb({},{},{})".format(*self._flattened())

    def to_rgba(self) -> str:
        """``rgba(r,g,b,a)`` of the raw channels; alpha in shortest form."""
        return "rgba({},{},{},{})".format(*self.rgb, format_float(self._alpha))

    def to_hsl(self) -> str:
        """``hsl(h,s%,l%)`` of the color composited over white."""
        h, s, l = self._hsl(blend=True)
        return f"hsl({h},{s * 100:.0f}%,{l * 100:.0f}%)"

    def to_hsla(self) -> str:
        """``hsla(h,s%,l%,a)`` of the raw channels; alpha with one decimal."""
        h, s, l = self._hsl(blend=False)
        return f"hsla({h},{s * 100:.0f}%,{l * 100:.0f}%,{self._alpha:.1f})"

    def to_hsv(self) -> str:
        """``hsv(h,s%,v%)`` of the color composited over white."""
        h, s, v = rgb_to_hsv(*self._unit_channels(blend=True))
        return f"hsv({h:.0f},{s * 100:.0f}%,{v * 100:.0f}%)"

    def to_cmyk(self) -> str:
        """``cmyk(c,m,y,k)`` in whole percent of the color composited over white."""
        c, m, y, k = rgb_to_cmyk(*self._unit_channels(blend=True))
        return f"cmyk({c * 100:.0f},{m * 100:.0f},{y * 100:.0f},{k * 100:.0f})"

    def format(self, fmt: ColorFormat | str) -> str:
        """Render in the notation named by ``fmt`` (e.g. ``"hsla"``)."""
        return getattr(self, f"to_{ColorFormat(fmt).value}")()

    # ------------------ TRANSFORMS ------------------
    def set_alpha(self, alpha: Scalar) -> Color:
        """
        Overwrite alpha. Out-of-range values are stored as given, with an
        :class:`~icolor.errors.AlphaRangeWarning`.
        """
        alpha = ALPHA_DTYPE(alpha)
        if not is_unit(alpha):
            warnings.warn(
                f"alpha {format_float(alpha)} is outside [0, 1]; stored unchanged",
                AlphaRangeWarning,
                stacklevel=2,
            )
        self._alpha = alpha
        return self

    def negate(self) -> Color:
        """Invert every channel (255 - c) and the alpha (1 - a)."""
        self._rgb = CHANNEL_MAX - self._rgb
        self._alpha = ALPHA_DTYPE(1) - self._alpha
        return self

    def fade(self, ratio: Scalar) -> Color:
        """
        Reduce alpha by ``ratio`` (clamped to [0, 1]), rounded to 2 decimals.

        >>> Color.parse("#000").fade(0.5).fade(0.5).to_rgba()
        'rgba(0,0,0,0.25)'
        """
        ratio = clamp01(ratio)
        self._alpha = scaled_round(self._alpha - self._alpha * ratio)
        return self

    def opaquer(self, ratio: Scalar) -> Color:
        """
        Increase alpha by ``ratio`` (clamped to [0, 1]), capped at 1 and
        rounded to 2 decimals.

        >>> Color.from_rgba(0, 0, 0, 0.3).opaquer(0.5).to_rgba()
        'rgba(0,0,0,0.45)'
        """
        ratio = clamp01(ratio)
        self._alpha = scaled_round(np.fmin(self._alpha + self._alpha * ratio, ALPHA_DTYPE(1)))
        return self

    # ------------------ QUERIES ------------------
    def is_dark(self) -> bool:
        """Lightness of the color composited over white is below one half."""
        _, _, l = self._hsl(blend=True)
        return bool(l < 0.5)

    def is_light(self) -> bool:
        return not self.is_dark()

    # ------------------ VALUE SEMANTICS ------------------
    def copy(self) -> Color:
        return self._from_array(self._rgb, self._alpha)

    __copy__ = copy

    def __deepcopy__(self, memo) -> Color:
        return self.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return bool(np.array_equal(self._rgb, other._rgb) and self._alpha == other._alpha)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.red}, {self.green}, {self.blue}, {format_float(self._alpha)})"

    def __str__(self) -> str:
        return self.to_hex_alpha()

    def __format__(self, spec: str) -> str:
        if not spec:
            return str(self)
        try:
            return self.format(spec)
        except ValueError as exc:
            raise ValueError(f"unknown color format {spec!r}") from exc
