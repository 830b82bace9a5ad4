"""
HSV to RGB conversions.

Two algorithms are provided and both are kept on purpose:

- ``hsv_to_unit_rgb_sector`` scales hue to [0, 6) and interpolates inside the
  selected sector with the classic ``p, q, t`` terms. ``Color.set_hsv`` uses it.
- ``hsv_to_unit_rgb_chroma`` works in degrees, builds the color from chroma
  and an offset ``m``. ``Color.from_hsv`` uses it.

They agree up to float rounding but can differ in the last bits near sector
boundaries, and callers may rely on either one. Both compute in float32,
the channel type of ``Color``, so hue wrapping rounds the way stored colors do.
"""
from typing import Tuple

import numpy as np

from ..types.color_types import COMPONENT_DTYPE

F32 = COMPONENT_DTYPE
# sector index given to hues that fmod turns into nan (nan or infinite input)
_NO_SECTOR = -1


def _sector_index(x: np.float32) -> int:
    return int(x) if np.isfinite(x) else _NO_SECTOR


def hsv_to_unit_rgb_sector(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """
    Sector based HSV to RGB.

    Args:
        h: Hue as a fraction of a full turn. Values outside [0, 1) are
           reduced with fmod; negative and non-finite hues fall into the
           last sector branch.
        s: Saturation
        v: Value

    Returns:
        (r, g, b), computed in float32
    """
    if s == 0:
        # achromatic (grey)
        return v, v, v

    s, v = F32(s), F32(v)
    with np.errstate(over='ignore', invalid='ignore'):
        h = np.fmod(F32(h) * F32(6.0), F32(6.0))
        i = _sector_index(np.floor(h))

        f = h - F32(i)
        p = v * (F32(1.0) - s)
        q = v * (F32(1.0) - s * f)
        t = v * (F32(1.0) - s * (F32(1.0) - f))

    if i == 0:  # red is the dominant color
        rgb = v, t, p
    elif i == 1:  # green is the dominant color
        rgb = q, v, p
    elif i == 2:
        rgb = p, v, t
    elif i == 3:  # blue is the dominant color
        rgb = p, q, v
    elif i == 4:
        rgb = t, p, v
    else:  # 5, red is the dominant color
        rgb = v, p, q
    r, g, b = (float(c) for c in rgb)
    return r, g, b


def hsv_to_unit_rgb_chroma(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """
    Chroma based HSV to RGB.

    Args:
        h: Hue as a fraction of a full turn, wrapped into [0, 360] degrees.
           A hue that wraps to exactly 360 (a tiny negative one, in float32)
           or a non-finite hue gives no sector, so only ``m`` remains.
        s: Saturation
        v: Value

    Returns:
        (r, g, b), computed in float32
    """
    s, v = F32(s), F32(v)
    with np.errstate(over='ignore', invalid='ignore'):
        h = np.fmod(F32(h) * F32(360.0), F32(360.0))
        if h < 0.0:
            h += F32(360.0)

        h_ = h / F32(60.0)
        c = v * s
        x = c * (F32(1.0) - abs(np.fmod(h_, F32(2.0)) - F32(1.0)))

    zero = F32(0.0)
    sector = _sector_index(h_)
    if sector == 0:
        rgb = c, x, zero
    elif sector == 1:
        rgb = x, c, zero
    elif sector == 2:
        rgb = zero, c, x
    elif sector == 3:
        rgb = zero, x, c
    elif sector == 4:
        rgb = x, zero, c
    elif sector == 5:
        rgb = c, zero, x
    else:
        rgb = zero, zero, zero

    m = v - c
    r, g, b = (float(m + channel) for channel in rgb)
    return r, g, b
