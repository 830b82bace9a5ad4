"""
Elementwise arithmetic for ``Color``.

All four channels take part, alpha included, and nothing is clamped:

- ``+`` and ``-`` take another Color.
- ``*`` and ``/`` take a Color (per channel) or a real scalar; scalars may
  also sit on the left of ``*``.
- Per channel division by a zero channel follows IEEE rules (inf / nan).
- Scalar division by zero gives white (1, 1, 1, 1).
- ``-color`` is (1 - r, 1 - g, 1 - b, 1 - a); ``~color`` is
  ``color.inverted()``, which keeps alpha.

The operators are attached to ``Color`` when this module is imported, which
``tinct.colors`` does on package import.
"""
from numbers import Real
from typing import Callable, Optional

import numpy as np
from numpy import ndarray

from .color import Color
from ..types.color_types import COMPONENT_DTYPE

_WHITE = np.ones(4, dtype=COMPONENT_DTYPE)


def _operand(other, allow_scalar: bool) -> Optional[ndarray]:
    if isinstance(other, Color):
        return other._value
    if allow_scalar and isinstance(other, Real) and not isinstance(other, bool):
        return COMPONENT_DTYPE(other)
    return None


def _divide(a: ndarray, b) -> ndarray:
    if not isinstance(b, ndarray) and b == 0:
        return _WHITE.copy()
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.divide(a, b)


def _binary_operation(op: Callable, allow_scalar: bool, reflected: bool = False):
    """Create an operator returning a new Color."""
    def operation(self, other):
        b = _operand(other, allow_scalar)
        if b is None:
            return NotImplemented
        if reflected:
            return Color._from_array(op(b, self._value))
        return Color._from_array(op(self._value, b))
    return operation


def _inplace_operation(op: Callable, allow_scalar: bool):
    """Create an operator that overwrites the left-hand Color."""
    def operation(self, other):
        b = _operand(other, allow_scalar)
        if b is None:
            return NotImplemented
        self._value[:] = op(self._value, b)
        return self
    return operation


def _negate(self):
    return Color._from_array(1.0 - self._value)


def _invert(self):
    return self.inverted()


Color.__add__ = _binary_operation(np.add, allow_scalar=False)
Color.__sub__ = _binary_operation(np.subtract, allow_scalar=False)
Color.__mul__ = _binary_operation(np.multiply, allow_scalar=True)
Color.__rmul__ = _binary_operation(np.multiply, allow_scalar=True, reflected=True)
Color.__truediv__ = _binary_operation(_divide, allow_scalar=True)

Color.__iadd__ = _inplace_operation(np.add, allow_scalar=False)
Color.__isub__ = _inplace_operation(np.subtract, allow_scalar=False)
Color.__imul__ = _inplace_operation(np.multiply, allow_scalar=True)
Color.__itruediv__ = _inplace_operation(_divide, allow_scalar=True)

Color.__neg__ = _negate
Color.__invert__ = _invert
