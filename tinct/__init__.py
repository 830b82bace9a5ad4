"""
Tinct - RGBA Color Values
=========================

A small, mutable RGBA color type with float32 channels, for code that stores,
combines and exchanges colors.

Key Features
------------
- Elementwise arithmetic on all four channels (no clamping)
- HSV accessors and two HSV to RGB algorithms (sector and chroma)
- Packed 32/64-bit integers in ARGB, ABGR and RGBA byte orders
- Hex ("HTML") codes with 3/4/6/8 digits, validation and formatting
- Case and punctuation insensitive named colors
- Result-style parsing (``try_html`` / ``try_named``) with explicit fallbacks

Quick Start
-----------
>>> from tinct import Color
>>> c = Color.html("#80ff0000")
>>> c.r, c.g
(1.0, 0.0)
>>> Color.named("cornflower").to_html(with_alpha=False)
'6495ed'
>>> Color.try_html("#nope").unwrap_or(Color.named("magenta"))
Color(r=1.0, g=0.0, b=1.0, a=1.0)

Modules
-------
- colors: the Color type and its operators
- conversions: scalar conversion functions used by Color
- samples: built-in named color data
- types: constants, aliases and errors
"""

from .colors import Color
from .types.errors import ColorError, InvalidColorCode, InvalidColorName, ParseResult
from .conversions import named_color_names, normalize_name

__version__ = "1.0.0"

__all__ = [
    "Color",
    "ColorError",
    "InvalidColorCode",
    "InvalidColorName",
    "ParseResult",
    "named_color_names",
    "normalize_name",
    "__version__",
]
