"""Component-wise and reducing functions over :class:`Vector` values.

Reductions return a plain scalar of the vector's kind: single floats are
rounded to 32 bits after every step and integers wrap at 32 bits, as the
fixed-width arithmetic they model does.
"""

from __future__ import annotations

import math
import numbers
from functools import reduce
from typing import Callable, Tuple

from protocore.vectors import ScalarKind, Vector, _coerce

__all__ = [
    "vsum",
    "product",
    "mincomp",
    "maxcomp",
    "sq",
    "vabs",
    "vmin",
    "vmax",
    "clamp",
    "sign",
    "fract",
    "lerp",
    "dot",
    "lengthsq",
    "length",
    "normalize",
    "all_true",
    "any_true",
]

_ARITHMETIC = (ScalarKind.FLOAT, ScalarKind.DOUBLE, ScalarKind.INT, ScalarKind.UINT)
_REALS = (ScalarKind.FLOAT, ScalarKind.DOUBLE)
_BOOLS = (ScalarKind.BOOL,)


def _check(v, kinds, name: str) -> Vector:
    if not isinstance(v, Vector):
        raise TypeError(f"{name}() expects a Vector, got {type(v).__name__}")
    if v.kind not in kinds:
        raise TypeError(f"{name}() is not defined for {v.kind.value} vectors")
    return v


def _operand(v: Vector, other, name: str) -> Tuple:
    """Components of ``other`` matched to ``v``; scalars are broadcast."""
    if isinstance(other, Vector):
        if other.kind is not v.kind:
            raise TypeError(
                f"{name}() cannot mix {v.kind.value} and {other.kind.value} vectors"
            )
        if len(other) != len(v):
            raise TypeError(
                f"{name}() cannot mix vectors of {len(v)} and {len(other)} components"
            )
        return tuple(other)
    if isinstance(other, numbers.Real):
        return tuple(Vector.splat(other, len(v), v.kind))
    raise TypeError(f"{name}() cannot use {type(other).__name__} as an operand")


def _map(v: Vector, fn: Callable, *others) -> Vector:
    return Vector(*(fn(*parts) for parts in zip(v, *others)), kind=v.kind)


def _fold(v: Vector, fn: Callable):
    kind = v.kind
    return reduce(lambda acc, x: _coerce(fn(acc, x), kind), v)


def _min(a, b):
    return a if a < b else b


def _max(a, b):
    return a if a > b else b


def vsum(v):
    """Sum of all components."""
    _check(v, _ARITHMETIC, "vsum")
    return _fold(v, lambda a, b: a + b)


def product(v):
    """Product of all components."""
    _check(v, _ARITHMETIC, "product")
    return _fold(v, lambda a, b: a * b)


def mincomp(v):
    """Smallest component."""
    _check(v, _ARITHMETIC, "mincomp")
    return reduce(_min, v)


def maxcomp(v):
    """Largest component."""
    _check(v, _ARITHMETIC, "maxcomp")
    return reduce(_max, v)


def sq(v):
    """Each component squared."""
    _check(v, _ARITHMETIC, "sq")
    return _map(v, lambda a: a * a)


def vabs(v):
    """Absolute value of each component (unsigned vectors are unchanged)."""
    _check(v, _ARITHMETIC, "vabs")
    return _map(v, abs)


def vmin(a, b):
    """Component-wise minimum."""
    _check(a, _ARITHMETIC, "vmin")
    return _map(a, _min, _operand(a, b, "vmin"))


def vmax(a, b):
    """Component-wise maximum."""
    _check(a, _ARITHMETIC, "vmax")
    return _map(a, _max, _operand(a, b, "vmax"))


def clamp(a, b, c):
    """Clamp each component of ``a`` into ``[b, c]``."""
    _check(a, _ARITHMETIC, "clamp")
    lo = _operand(a, b, "clamp")
    hi = _operand(a, c, "clamp")
    return _map(a, lambda x, low, high: _min(_max(x, low), high), lo, hi)


def sign(a):
    """-1, 0 or +1 per component."""
    _check(a, _REALS, "sign")
    return _map(a, lambda x: float((x > 0.0) - (x < 0.0)))


def _fract(x: float) -> float:
    if not math.isfinite(x):
        return math.nan
    return x - math.floor(x)


def fract(a):
    """Fractional part ``x - floor(x)`` per component."""
    _check(a, _REALS, "fract")
    return _map(a, _fract)


def lerp(a, b, c):
    """Linear interpolation ``a + (b - a) * c`` per component."""
    _check(a, _REALS, "lerp")
    end = _operand(a, b, "lerp")
    t = _operand(a, c, "lerp")
    return _map(a, lambda x, y, s: x + (y - x) * s, end, t)


def dot(a, b):
    """Dot product."""
    _check(a, _REALS, "dot")
    _check(b, _REALS, "dot")
    return vsum(a * b)


def lengthsq(a):
    """Squared Euclidean length."""
    return dot(a, a)


def length(a):
    """Euclidean length."""
    return _coerce(math.sqrt(lengthsq(a)), a.kind)


def normalize(a):
    """The vector divided by its length (non-finite for a zero vector)."""
    return a / length(a)


def all_true(v) -> bool:
    """True when every component of a bool vector is true."""
    _check(v, _BOOLS, "all_true")
    return all(v)


def any_true(v) -> bool:
    """True when any component of a bool vector is true."""
    _check(v, _BOOLS, "any_true")
    return any(v)