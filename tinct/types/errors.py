from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Union

if TYPE_CHECKING:
    from ..colors.color import Color


class ColorError(ValueError):
    """Base class for color parsing failures.

    Every failure carries ``default``, the value a caller may fall back to
    (opaque black), so the error path never has to invent one.
    """

    def __init__(self, message: str, default: Color) -> None:
        super().__init__(message)
        self.default = default


class InvalidColorCode(ColorError):
    """Raised when a hex/HTML color code cannot be parsed."""

    def __init__(self, code: str, default: Color) -> None:
        super().__init__(f"Invalid color code: {code}", default)
        self.code = code


class InvalidColorName(ColorError):
    """Raised when a name is missing from the named color table."""

    def __init__(self, name: str, default: Color) -> None:
        super().__init__(f"Invalid color name: {name}", default)
        self.name = name


@dataclass(frozen=True)
class ParseResult:
    """
    Outcome of a parse that may fail.

    Exactly one of ``color`` and ``error`` is set.

    Args:
        color: Parsed color on success.
        error: The failure on error.
    """
    color: Optional[Color] = None
    error: Optional[ColorError] = None

    def __post_init__(self) -> None:
        if (self.color is None) == (self.error is None):
            raise ValueError("ParseResult needs exactly one of color or error")

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Color:
        """Return the parsed color, or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.color.copy()  # type: ignore[union-attr]

    def unwrap_or(self, default: Union[Color, None] = None) -> Color:
        """
        Return the parsed color, or a fallback.

        Args:
            default: Fallback color. If None, uses the error's own default.

        Returns:
            A fresh color the caller may mutate.
        """
        if self.error is None:
            return self.color.copy()  # type: ignore[union-attr]
        fallback = self.error.default if default is None else default
        return fallback.copy()
