"""
Named color lookup.

Names are compared after normalization: spaces, hyphens, underscores,
apostrophes and periods are dropped and the rest lowercased, so
"Dark Slate-Gray" and "darkslategray" are the same key.

The table is built from ``samples.named_colors`` on first use. A lock makes
the build happen exactly once even if several threads race for it; after
that the table is a read-only mapping and lookups take no lock.
"""
import logging
import threading
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from ..samples.named_colors import NAMED_COLORS

logger = logging.getLogger(__name__)

_STRIP = str.maketrans("", "", " -_'.")

_table: Optional[Mapping[str, int]] = None
_table_lock = threading.Lock()


def normalize_name(name: str) -> str:
    return name.translate(_STRIP).lower()


def _named_table() -> Mapping[str, int]:
    global _table
    table = _table
    if table is not None:
        return table
    with _table_lock:
        if _table is None:
            built = {normalize_name(name): packed for name, packed in NAMED_COLORS}
            _table = MappingProxyType(built)
            logger.debug("Populated named color table with %d entries", len(built))
        return _table


def lookup_named(name: str) -> Optional[int]:
    """
    Find the packed RGBA value for a color name.

    Args:
        name: Color name in any case, punctuation ignored

    Returns:
        ``0xRRGGBBAA`` value, or None if the name is unknown
    """
    return _named_table().get(normalize_name(name))


def named_color_names() -> Tuple[str, ...]:
    """Sorted normalized names available for lookup."""
    return tuple(sorted(_named_table()))
