"""
Hex ("HTML") color codes.

Accepted input: an optional ``#`` followed by 3, 4, 6 or 8 hex digits, case
insensitive. 3 and 4 digit codes are shorthand, each digit doubled. The 8
digit form carries alpha *first* (``AARRGGBB``), which is a different byte
order from the packed RGBA integers.
"""
import re
from typing import Optional, Tuple

import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import MAX_BYTE
from ..utils.num_utils import round_channels

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]*")


def expand_html(code: str) -> str:
    """Strip one leading '#' and expand 3/4 digit shorthand."""
    if code.startswith("#"):
        code = code[1:]
    if len(code) in (3, 4):
        code = "".join(ch * 2 for ch in code)
    return code


def parse_html(code: str) -> Optional[Tuple[float, float, float, float]]:
    """
    Parse a hex color code.

    Args:
        code: Color code such as "#f80", "ff8800" or "80ff8800"

    Returns:
        (r, g, b, a) unit floats, or None if the code is invalid
    """
    digits = expand_html(code)
    if len(digits) not in (6, 8):
        return None
    if not _HEX_DIGITS.fullmatch(digits):
        return None

    pairs = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
    if len(pairs) == 4:
        a, r, g, b = pairs
    else:
        r, g, b = pairs
        a = MAX_BYTE
    return r / MAX_BYTE, g / MAX_BYTE, b / MAX_BYTE, a / MAX_BYTE


def format_html(channels: NDArray, with_alpha: bool = True) -> str:
    """
    Format (r, g, b, a) channels as lowercase hex without a '#'.

    Channels are rounded to the nearest byte and clamped, so out of range
    values saturate.
    """
    r, g, b, a = (int(v) for v in round_channels(np.asarray(channels), MAX_BYTE))
    txt = f"{r:02x}{g:02x}{b:02x}"
    if with_alpha:
        txt = f"{a:02x}" + txt
    return txt
