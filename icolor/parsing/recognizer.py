from typing import Tuple
from ..errors import ColorFormatError
from ..types.format_type import ColorFormat
from ..types.color_types import Tokens
from .patterns import GRAMMARS, HEX_LENGTHS, PREFIXES


def normalize(text: str) -> str:
    """Drop every space character. Other whitespace is kept."""
    return text.replace(" ", "")


def recognize(text: str) -> Tuple[ColorFormat, str]:
    """
    Decide which notation ``text`` is written in.

    Strings starting with ``#`` are classified by length alone (4 or 7 is
    hex, 9 is hex with alpha). Anything else has its spaces removed and is
    classified by prefix.

    Args:
        text: Raw user input, e.g. ``"#f0a"`` or ``"hsl(120, 45%, 90%)"``

    Returns:
        (format, candidate) where ``candidate`` is the string the format's
        grammar must match: ``text`` itself for hex, the space-stripped form
        otherwise.

    Raises:
        ColorFormatError: If no length or prefix applies.
    """
    if text.startswith("#"):
        fmt = HEX_LENGTHS.get(len(text))
        if fmt is not None:
            return fmt, text

    candidate = normalize(text)
    for prefix, fmt in PREFIXES:
        if candidate.startswith(prefix):
            return fmt, candidate

    raise ColorFormatError(f"unrecognized color notation: {text!r}")


def match_tokens(fmt: ColorFormat, text: str) -> Tokens:
    """
    Match ``text`` against the grammar of ``fmt`` and return its captures.

    Raises:
        ColorFormatError: If the grammar does not match the whole string.
    """
    for pattern in GRAMMARS[fmt]:
        match = pattern.fullmatch(text)
        if match is not None:
            return match.groups()
    raise ColorFormatError(f"{text!r} is not valid {fmt.value} notation")
