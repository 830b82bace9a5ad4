# No dependencies
from typing import Tuple


def rgb_to_hue(r: float, g: float, b: float) -> float:
    """
    Hue of a unit RGB color as a fraction of a full turn.

    Returns:
        h in [0, 1). Achromatic colors (max == min) give 0.
    """
    lo = min(r, g, b)
    hi = max(r, g, b)
    delta = hi - lo

    if delta == 0:
        return 0.0

    if r == hi:
        h = (g - b) / delta  # between yellow & magenta
    elif g == hi:
        h = 2 + (b - r) / delta  # between cyan & yellow
    else:
        h = 4 + (r - g) / delta  # between magenta & cyan

    h /= 6.0
    if h < 0:
        h += 1.0
    return h


def rgb_to_saturation(r: float, g: float, b: float) -> float:
    """Saturation in [0, 1]; 0 for pure black."""
    lo = min(r, g, b)
    hi = max(r, g, b)
    return (hi - lo) / hi if hi != 0 else 0.0


def rgb_to_value(r: float, g: float, b: float) -> float:
    return max(r, g, b)


def unit_rgb_to_hsv(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert unit RGB to HSV with every channel in unit range.

    Args:
        r, g, b: Channels, nominally in [0, 1]

    Returns:
        (h, s, v) with h as a fraction of 360 degrees
    """
    return rgb_to_hue(r, g, b), rgb_to_saturation(r, g, b), rgb_to_value(r, g, b)
