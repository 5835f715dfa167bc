"""
Exceptions and warnings raised by icolor.

Two failure kinds exist. A *format* error means the text does not match any
accepted grammar, or matched one but a token could not be decoded. A *value*
error means the numbers were read fine but fall outside their domain (hue
outside [0, 360), a unit component outside [0, 1], a channel outside 0..255).
Both derive from ``ValueError`` so callers that only care about "bad input"
can catch that.
"""
from enum import Enum


class ErrorKind(str, Enum):
    FORMAT = "format"
    VALUE = "value"


class ColorError(ValueError):
    """Base class for every error raised while building a Color."""

    kind: ErrorKind


class ColorFormatError(ColorError):
    """Input text does not conform to any recognized grammar."""

    kind = ErrorKind.FORMAT


class ColorValueError(ColorError):
    """A well-formed component is outside its valid range."""

    kind = ErrorKind.VALUE


class AlphaRangeWarning(UserWarning):
    """An alpha outside [0, 1] was stored without validation."""
