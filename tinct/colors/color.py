from __future__ import annotations
import logging
from functools import total_ordering
from typing import Iterator

import numpy as np
from numpy import ndarray

from ..conversions import (
    format_html,
    hsv_to_unit_rgb_chroma,
    hsv_to_unit_rgb_sector,
    linear_to_srgb,
    lookup_named,
    pack32,
    pack64,
    parse_html,
    rgb_to_hue,
    rgb_to_saturation,
    rgb_to_value,
    srgb_to_linear,
    unpack32,
    unpack64,
)
from ..types.color_types import CHANNEL_NAMES, COMPONENT_DTYPE, MAX_BYTE, NUM_CHANNELS, ColorTuple
from ..types.errors import InvalidColorCode, InvalidColorName, ParseResult

logger = logging.getLogger(__name__)


@total_ordering
class Color:
    """
    RGBA color with float32 channels.

    Channels are nominally in [0, 1] but never clamped by the type; only the
    integer and hex encoders clamp or wrap. Colors are mutable through the
    documented mutators (``invert``, ``contrast``, ``set_hsv``, channel
    setters, item assignment and the in-place operators), and therefore
    unhashable. Use ``copy()`` before mutating a shared value.

    Arithmetic operators live in ``tinct.colors.arithmetic``.
    """
    __slots__ = ('_value',)
    __hash__ = None  # type: ignore[assignment]
    __array_ufunc__ = None  # numpy scalars defer to our reflected operators

    def __init__(self, r: float = 0.0, g: float = 0.0, b: float = 0.0, a: float = 1.0) -> None:
        self._value = np.array((r, g, b, a), dtype=COMPONENT_DTYPE)

    @classmethod
    def _from_array(cls, arr: ndarray) -> Color:
        color = cls.__new__(cls)
        color._value = np.array(arr, dtype=COMPONENT_DTYPE)
        if color._value.shape != (NUM_CHANNELS,):
            raise ValueError(f"Color expects {NUM_CHANNELS} channels, got shape {color._value.shape}")
        return color

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_8bit(cls, r8: int, g8: int, b8: int, a8: int = MAX_BYTE) -> Color:
        """Build a color from 0..255 integer channels."""
        return cls(r8 / MAX_BYTE, g8 / MAX_BYTE, b8 / MAX_BYTE, a8 / MAX_BYTE)

    @classmethod
    def hex(cls, value: int) -> Color:
        """Decode a ``0xRRGGBBAA`` integer, the layout written by ``to_rgba32``."""
        return cls(*unpack32(value))

    @classmethod
    def hex64(cls, value: int) -> Color:
        """Decode a ``0xRRRRGGGGBBBBAAAA`` integer, the layout written by ``to_rgba64``."""
        return cls(*unpack64(value))

    @classmethod
    def from_hsv(cls, h: float, s: float, v: float, a: float = 1.0) -> Color:
        """
        Build a color from HSV using the chroma algorithm.

        Args:
            h: Hue as a fraction of 360 degrees, wrapped into range
            s: Saturation
            v: Value
            a: Alpha

        Returns:
            New color. See ``set_hsv`` for the sector algorithm.
        """
        return cls(*hsv_to_unit_rgb_chroma(h, s, v), a)

    @classmethod
    def try_html(cls, code: str) -> ParseResult:
        """
        Parse a hex color code without raising on bad input.

        Returns:
            ParseResult holding either the color or an InvalidColorCode.
        """
        if not isinstance(code, str):
            raise TypeError(f"Color code must be a string, got {type(code).__name__}")
        channels = parse_html(code)
        if channels is None:
            logger.debug("Rejected color code %r", code)
            return ParseResult(error=InvalidColorCode(code, cls()))
        return ParseResult(color=cls(*channels))

    @classmethod
    def html(cls, code: str) -> Color:
        """
        Parse a hex color code.

        Accepts an optional '#', then 3, 4, 6 or 8 hex digits. The 8 digit
        form is ARGB. Short forms double each digit ("f80" is "ff8800").

        Raises:
            InvalidColorCode: if the code has the wrong length or a non-hex
                digit. The error's ``default`` holds opaque black.
        """
        return cls.try_html(code).unwrap()

    @staticmethod
    def html_is_valid(code: str) -> bool:
        """Return True exactly when ``Color.html(code)`` would succeed."""
        if not isinstance(code, str):
            return False
        return parse_html(code) is not None

    @classmethod
    def try_named(cls, name: str) -> ParseResult:
        """Look up a named color without raising on unknown names."""
        if not isinstance(name, str):
            raise TypeError(f"Color name must be a string, got {type(name).__name__}")
        packed = lookup_named(name)
        if packed is None:
            logger.debug("Unknown color name %r", name)
            return ParseResult(error=InvalidColorName(name, cls()))
        return ParseResult(color=cls.hex(packed))

    @classmethod
    def named(cls, name: str) -> Color:
        """
        Look up a named color.

        Case, spaces, hyphens, underscores, apostrophes and periods are
        ignored, so "Dark Blue" and "dark_blue" both find "darkblue".

        Raises:
            InvalidColorName: if the normalized name is not in the table.
        """
        return cls.try_named(name).unwrap()

    # ------------------ CHANNELS ------------------
    @property
    def r(self) -> float:
        return float(self._value[0])

    @r.setter
    def r(self, value: float) -> None:
        self._value[0] = value

    @property
    def g(self) -> float:
        return float(self._value[1])

    @g.setter
    def g(self, value: float) -> None:
        self._value[1] = value

    @property
    def b(self) -> float:
        return float(self._value[2])

    @b.setter
    def b(self, value: float) -> None:
        self._value[2] = value

    @property
    def a(self) -> float:
        return float(self._value[3])

    @a.setter
    def a(self, value: float) -> None:
        self._value[3] = value

    @property
    def value(self) -> ndarray:
        """Copy of the channels as a float32 array (r, g, b, a)."""
        return self._value.copy()

    def to_tuple(self) -> ColorTuple:
        r, g, b, a = (float(c) for c in self._value)
        return r, g, b, a

    def copy(self) -> Color:
        return self._from_array(self._value)

    def with_alpha(self, alpha: float) -> Color:
        """Return a copy with the alpha channel replaced."""
        color = self.copy()
        color._value[3] = alpha
        return color

    def __getitem__(self, index: int) -> float:
        return float(self._value[self._check_index(index)])

    def __setitem__(self, index: int, value: float) -> None:
        self._value[self._check_index(index)] = value

    @staticmethod
    def _check_index(index: int) -> int:
        if not isinstance(index, (int, np.integer)) or isinstance(index, bool):
            raise TypeError(f"Color indices must be integers, got {type(index).__name__}")
        if not 0 <= index < NUM_CHANNELS:
            raise IndexError(f"Color index out of range: {index}")
        return int(index)

    def __iter__(self) -> Iterator[float]:
        return (float(c) for c in self._value)

    def __len__(self) -> int:
        return NUM_CHANNELS

    # ------------------ COMPARISON ------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return bool(np.array_equal(self._value, other._value))

    def __lt__(self, other: Color) -> bool:
        """Lexicographic on (r, g, b, a)."""
        if not isinstance(other, Color):
            return NotImplemented
        return bool(tuple(self._value) < tuple(other._value))

    def is_equal_approx(self, other: Color, atol: float = 1e-5) -> bool:
        return bool(np.allclose(self._value, other._value, rtol=0.0, atol=atol))

    # ------------------ PACKED INTEGERS ------------------
    def to_argb32(self) -> int:
        return pack32(self._value, "argb")

    def to_abgr32(self) -> int:
        return pack32(self._value, "abgr")

    def to_rgba32(self) -> int:
        return pack32(self._value, "rgba")

    def to_argb64(self) -> int:
        return pack64(self._value, "argb")

    def to_abgr64(self) -> int:
        return pack64(self._value, "abgr")

    def to_rgba64(self) -> int:
        return pack64(self._value, "rgba")

    # ------------------ HSV ------------------
    def get_h(self) -> float:
        """Hue as a fraction of 360 degrees, in [0, 1)."""
        return rgb_to_hue(self.r, self.g, self.b)

    def get_s(self) -> float:
        return rgb_to_saturation(self.r, self.g, self.b)

    def get_v(self) -> float:
        return rgb_to_value(self.r, self.g, self.b)

    h = property(get_h)
    s = property(get_s)
    v = property(get_v)

    def set_hsv(self, h: float, s: float, v: float, alpha: float = 1.0) -> None:
        """
        Overwrite this color from HSV using the sector algorithm.

        Args:
            h: Hue as a fraction of 360 degrees
            s: Saturation; 0 gives r = g = b = v whatever the hue
            v: Value
            alpha: New alpha
        """
        r, g, b = hsv_to_unit_rgb_sector(h, s, v)
        self._value[:] = (r, g, b, alpha)

    # ------------------ MUTATORS ------------------
    def invert(self) -> None:
        """Replace r, g, b with 1 - channel. Alpha is left alone."""
        self._value[:3] = 1.0 - self._value[:3]

    def contrast(self) -> None:
        """Shift r, g, b by half a unit, wrapping at 1."""
        self._value[:3] = np.fmod(self._value[:3] + 0.5, 1.0)

    def inverted(self) -> Color:
        color = self.copy()
        color.invert()
        return color

    def contrasted(self) -> Color:
        color = self.copy()
        color.contrast()
        return color

    # ------------------ DERIVED COLORS ------------------
    def gray(self) -> float:
        """Plain average of r, g, b (not luminance weighted)."""
        total = self._value[0] + self._value[1] + self._value[2]
        # float32 sum, divided in double, stored back as a float32 channel value
        return float(COMPONENT_DTYPE(np.float64(total) / 3.0))

    def lerp(self, to: Color, weight: float) -> Color:
        """Linear interpolation of all four channels toward ``to``."""
        return self._from_array(self._value + (to._value - self._value) * COMPONENT_DTYPE(weight))

    def blend(self, over: Color) -> Color:
        """
        Composite ``over`` on top of this color (source-over).

        Returns:
            Blended color; a fully transparent result is (0, 0, 0, 0).
        """
        sa = 1.0 - over.a
        out_a = self.a * sa + over.a
        if out_a == 0:
            return Color(0.0, 0.0, 0.0, 0.0)
        rgb = (self._value[:3] * self.a * sa + over._value[:3] * over.a) / out_a
        return Color(*(float(c) for c in rgb), out_a)

    def darkened(self, amount: float) -> Color:
        """Move r, g, b toward black by ``amount``."""
        color = self.copy()
        color._value[:3] = self._value[:3] * (1.0 - amount)
        return color

    def lightened(self, amount: float) -> Color:
        """Move r, g, b toward white by ``amount``."""
        color = self.copy()
        color._value[:3] = self._value[:3] + (1.0 - self._value[:3]) * amount
        return color

    def to_linear(self) -> Color:
        """Decode sRGB gamma on r, g, b."""
        return self._from_array(srgb_to_linear(self._value))

    def to_srgb(self) -> Color:
        """Encode linear r, g, b with the sRGB transfer curve."""
        return self._from_array(linear_to_srgb(self._value))

    # ------------------ TEXT ------------------
    def to_html(self, with_alpha: bool = True) -> str:
        """
        Lowercase hex code without '#': "aarrggbb", or "rrggbb" without alpha.

        Channels are rounded to the nearest byte and clamped to 0..255.
        """
        return format_html(self._value, with_alpha)

    def __str__(self) -> str:
        return ", ".join(str(c) for c in self._value)

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={c}" for name, c in zip(CHANNEL_NAMES, self._value))
        return f"{self.__class__.__name__}({fields})"
