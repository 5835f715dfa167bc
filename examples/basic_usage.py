"""Basic icolor usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import warnings

from icolor import Color, ColorFormat, ColorFormatError, parse
from icolor.errors import AlphaRangeWarning


def demonstrate_parsing() -> None:
    # Any supported notation goes through parse; spaces are ignored.
    for text in ("#ff00aa", "rgba(129,45,78, 0.8)", "hsl(120, 45%, 90%)", "cmyk(100, 40,70,90)"):
        color = parse(text)
        print(f"{text!r:>26} -> {color!r}")

    try:
        parse("red")
    except ColorFormatError as exc:
        print("Named colors are not supported:", exc)


def demonstrate_rendering() -> None:
    color = Color.parse("#ff00aa").set_alpha(0.5)
    for fmt in ColorFormat:
        print(f"{fmt.value:>10}: {color.format(fmt)}")
    print("Dark?", color.is_dark())


def demonstrate_transforms() -> None:
    color = Color.from_rgba(0, 0, 0, 0.3)
    print("opaquer:", color.opaquer(0.5).to_rgba())
    print("fade:   ", color.fade(0.5).to_rgba())
    print("negate: ", color.negate().to_rgba())

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", AlphaRangeWarning)
        color.set_alpha(1.5)
    print("set_alpha(1.5) warned:", caught[0].message)


if __name__ == "__main__":
    demonstrate_parsing()
    demonstrate_rendering()
    demonstrate_transforms()
