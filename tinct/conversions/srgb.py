"""
sRGB transfer curve applied to a channel array.

Only the r, g, b entries are transformed; an alpha entry is copied through.
"""
import numpy as np
from numpy import ndarray
from numpy.typing import ArrayLike

from ..types.color_types import COMPONENT_DTYPE

DECODE_THRESHOLD = 0.04045
ENCODE_THRESHOLD = 0.0031308


def srgb_to_linear(channels: ArrayLike) -> ndarray:
    """Decode sRGB gamma, returning a new float32 array."""
    out = np.array(channels, dtype=COMPONENT_DTYPE)
    rgb = out[:3].astype(np.float64)
    # negative inputs take the linear branch; nan from the unused branch is discarded
    with np.errstate(invalid='ignore'):
        out[:3] = np.where(rgb < DECODE_THRESHOLD, rgb / 12.92, ((rgb + 0.055) / 1.055) ** 2.4)
    return out


def linear_to_srgb(channels: ArrayLike) -> ndarray:
    """Encode linear-light values with the sRGB curve, returning a new float32 array."""
    out = np.array(channels, dtype=COMPONENT_DTYPE)
    rgb = out[:3].astype(np.float64)
    with np.errstate(invalid='ignore'):
        out[:3] = np.where(rgb < ENCODE_THRESHOLD, 12.92 * rgb, 1.055 * rgb ** (1 / 2.4) - 0.055)
    return out
