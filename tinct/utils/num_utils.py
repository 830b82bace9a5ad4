import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import COMPONENT_DTYPE


def truncate_channels(values: NDArray, scale: int) -> NDArray:
    """
    Quantize float channels by truncation, wrapping into the channel width.

    ``values * scale`` is computed in float32 and cast toward zero, so 0.999
    at 8 bits gives 254, not 255. Channels outside [0, 1] wrap modulo
    ``scale + 1``.

    Args:
        values: Float channels.
        scale: Largest channel value (255 or 65535).

    Returns:
        int64 array of quantized channels.
    """
    scaled = np.asarray(values, dtype=COMPONENT_DTYPE) * COMPONENT_DTYPE(scale)
    return scaled.astype(np.int64) & scale


def round_channels(values: NDArray, scale: int) -> NDArray:
    """Quantize float channels by rounding half away from zero, clamped to [0, scale]."""
    scaled = np.asarray(values, dtype=np.float64) * scale
    rounded = np.sign(scaled) * np.floor(np.abs(scaled) + 0.5)
    return np.clip(rounded, 0, scale).astype(np.int64)
