"""
Packed integer encodings.

Encoders quantize each channel by *truncation* (``int(c * 255)``), which is
not what ``to_html`` does; the two are kept apart on purpose so packed values
stay stable across versions. Channel names list bytes from most to least
significant: ``"argb"`` puts alpha in the top byte.
"""
from typing import Literal, Tuple

import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import COMPONENT_DTYPE, MAX_BYTE, MAX_WORD
from ..utils.num_utils import truncate_channels

ByteOrder = Literal["argb", "abgr", "rgba"]

# Position of each byte-order letter inside an (r, g, b, a) array
_CHANNEL_INDEX = {"r": 0, "g": 1, "b": 2, "a": 3}


def _pack(channels: NDArray, order: ByteOrder, scale: int, bits: int) -> int:
    if sorted(order) != sorted("rgba"):
        raise ValueError(f"Invalid byte order: {order}")
    quantized = truncate_channels(channels, scale)
    packed = 0
    for letter in order:
        packed = (packed << bits) | int(quantized[_CHANNEL_INDEX[letter]])
    return packed


def _unpack(value: int, scale: int, bits: int) -> Tuple[float, float, float, float]:
    a = (value & scale) / scale
    value >>= bits
    b = (value & scale) / scale
    value >>= bits
    g = (value & scale) / scale
    value >>= bits
    r = (value & scale) / scale
    return r, g, b, a


def pack32(channels: NDArray, order: ByteOrder) -> int:
    """
    Pack (r, g, b, a) float channels into a 32-bit integer.

    Args:
        channels: Array-like of 4 unit floats in r, g, b, a order
        order: Byte order, most significant byte first

    Returns:
        Unsigned 32-bit value as a Python int
    """
    return _pack(np.asarray(channels, dtype=COMPONENT_DTYPE), order, MAX_BYTE, 8)


def pack64(channels: NDArray, order: ByteOrder) -> int:
    """Like pack32 with 16-bit channels."""
    return _pack(np.asarray(channels, dtype=COMPONENT_DTYPE), order, MAX_WORD, 16)


def unpack32(value: int) -> Tuple[float, float, float, float]:
    """Decode ``0xRRGGBBAA`` into unit floats (r, g, b, a)."""
    return _unpack(value & 0xFFFFFFFF, MAX_BYTE, 8)


def unpack64(value: int) -> Tuple[float, float, float, float]:
    """Decode ``0xRRRRGGGGBBBBAAAA`` into unit floats (r, g, b, a)."""
    return _unpack(value & 0xFFFFFFFFFFFFFFFF, MAX_WORD, 16)
