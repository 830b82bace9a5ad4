"""Basic Tinct usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from tinct import Color, InvalidColorCode


def demonstrate_parsing() -> None:
    # Hex codes, shorthand and named colors all produce the same type.
    accent = Color.html("#ff8040")
    print("Hex accent:", accent)
    print("Shorthand:", Color.html("#f84"))
    print("Named:", Color.named("Cornflower"))

    try:
        Color.html("#12345")
    except InvalidColorCode as err:
        print("Rejected:", err, "- fallback", err.default)

    fallback = Color.try_html("not-a-color").unwrap_or(Color.named("magenta"))
    print("Explicit fallback:", fallback.to_html())


def demonstrate_conversions() -> None:
    accent = Color.html("#ff8040")
    print("HSV:", accent.get_h(), accent.get_s(), accent.get_v())

    # Two HSV algorithms, same color up to rounding.
    sector = Color()
    sector.set_hsv(accent.get_h(), accent.get_s(), accent.get_v())
    chroma = Color.from_hsv(accent.get_h(), accent.get_s(), accent.get_v())
    print("set_hsv:", sector.to_html(), "from_hsv:", chroma.to_html())

    print("ARGB32: 0x%08x" % accent.to_argb32())
    print("RGBA32: 0x%08x" % accent.to_rgba32())


def demonstrate_arithmetic() -> None:
    red = Color.named("red")
    blue = Color.named("blue")
    print("Average:", (red + blue) / 2)
    print("Divide by zero:", red / 0)
    print("Negated:", -red.with_alpha(0.25), "inverted:", red.with_alpha(0.25).inverted())
    print("Blend:", red.blend(blue.with_alpha(0.5)))


if __name__ == "__main__":
    demonstrate_parsing()
    demonstrate_conversions()
    demonstrate_arithmetic()
