"""
Tinct Color Conversions
=======================

Scalar conversion functions behind the ``Color`` type. All functions work on
plain floats or small numpy arrays in r, g, b, a order, so they can be used
without constructing colors.

RGB → HSV:
    rgb_to_hue, rgb_to_saturation, rgb_to_value, unit_rgb_to_hsv

HSV → RGB:
    hsv_to_unit_rgb_sector
        Sector / fmod algorithm (``Color.set_hsv``)
    hsv_to_unit_rgb_chroma
        Chroma / offset algorithm (``Color.from_hsv``)

Packed integers:
    pack32, pack64, unpack32, unpack64

Hex codes:
    parse_html, format_html, expand_html

Named colors:
    lookup_named, normalize_name, named_color_names

sRGB transfer (channel arrays, alpha passed through):
    srgb_to_linear, linear_to_srgb

Examples
--------
>>> from tinct.conversions import unit_rgb_to_hsv, hsv_to_unit_rgb_sector
>>> h, s, v = unit_rgb_to_hsv(1.0, 0.5, 0.0)
>>> r, g, b = hsv_to_unit_rgb_sector(h, s, v)
"""

from .to_hsv import rgb_to_hue, rgb_to_saturation, rgb_to_value, unit_rgb_to_hsv
from .to_rgb import hsv_to_unit_rgb_sector, hsv_to_unit_rgb_chroma
from .packed import pack32, pack64, unpack32, unpack64, ByteOrder
from .html import parse_html, format_html, expand_html
from .named import lookup_named, normalize_name, named_color_names
from .srgb import srgb_to_linear, linear_to_srgb

__all__ = [
    # RGB → HSV
    'rgb_to_hue',
    'rgb_to_saturation',
    'rgb_to_value',
    'unit_rgb_to_hsv',

    # HSV → RGB
    'hsv_to_unit_rgb_sector',
    'hsv_to_unit_rgb_chroma',

    # Packed integers
    'pack32',
    'pack64',
    'unpack32',
    'unpack64',
    'ByteOrder',

    # Hex codes
    'parse_html',
    'format_html',
    'expand_html',

    # Named colors
    'lookup_named',
    'normalize_name',
    'named_color_names',

    # sRGB
    'srgb_to_linear',
    'linear_to_srgb',
]
