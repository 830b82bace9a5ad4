"""
Tinct Color Type
================

``Color`` is a mutable RGBA value with float32 channels in nominal [0, 1].

Usage
-----
>>> from tinct.colors import Color
>>> red = Color.html("#f00")
>>> red.to_html(False)
'ff0000'
>>> Color.named("Dark Blue").to_argb32() == 0xff00008b
True
>>> half = (red + Color.named("blue")) / 2
>>> c = Color()
>>> c.set_hsv(1 / 3, 1.0, 1.0)   # sector algorithm, pure green
>>> green = Color.from_hsv(1 / 3, 1.0, 1.0)  # chroma algorithm, same color

Notes
-----
- Packed integer encoders truncate (``int(c * 255)``); ``to_html`` rounds.
- ``Color.hex`` decodes ``0xRRGGBBAA``, the ``to_rgba32`` layout.
- 8 digit hex codes are ARGB, alpha first.
- Importing this package attaches the arithmetic operators.
"""

from .color import Color
from . import arithmetic  # noqa: F401  attaches operators to Color


__all__ = ['Color']
