"""Fixed-size numeric vectors (2 to 4 components) with C-like scalar semantics.

Each vector has a scalar kind: single-precision float, double, 32-bit signed
or unsigned integer, or bool. Components are stored already converted to that
kind. Single floats are rounded to 32-bit precision, and integers wrap around
at 32 bits.
"""

from __future__ import annotations

import enum
import math
import numbers
import struct
from typing import Callable, Iterable, Iterator, Optional, Tuple


class ScalarKind(enum.Enum):
    """The scalar type held by every component of a vector."""

    FLOAT = "float"
    DOUBLE = "double"
    INT = "int"
    UINT = "uint"
    BOOL = "bool"

    @property
    def is_real(self) -> bool:
        return self in (ScalarKind.FLOAT, ScalarKind.DOUBLE)

    @property
    def is_integer(self) -> bool:
        return self in (ScalarKind.INT, ScalarKind.UINT)

    @property
    def prefix(self) -> str:
        return _PREFIXES[self]


_PREFIXES = {
    ScalarKind.FLOAT: "",
    ScalarKind.DOUBLE: "d",
    ScalarKind.INT: "i",
    ScalarKind.UINT: "u",
    ScalarKind.BOOL: "b",
}

_ARITHMETIC = frozenset(
    {ScalarKind.FLOAT, ScalarKind.DOUBLE, ScalarKind.INT, ScalarKind.UINT}
)
_INTEGERS = frozenset({ScalarKind.INT, ScalarKind.UINT})
_MIN_SIZE = 2
_MAX_SIZE = 4
_COMPONENT_NAMES = "xyzw"


def _to_float32(value: float) -> float:
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _to_integer(value) -> int:
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"cannot convert {value!r} to an integer component")
        return int(value)  # truncates toward zero, as a C cast does
    return int(value)


def _wrap_signed(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _wrap_unsigned(value: int) -> int:
    return value & 0xFFFFFFFF


def _coerce(value, kind: ScalarKind):
    if isinstance(value, Vector) or not isinstance(value, numbers.Real):
        raise TypeError(f"expected a real number, got {type(value).__name__}")
    if kind is ScalarKind.BOOL:
        return bool(value)
    if kind is ScalarKind.FLOAT:
        return _to_float32(float(value))
    if kind is ScalarKind.DOUBLE:
        return float(value)
    if kind is ScalarKind.INT:
        return _wrap_signed(_to_integer(value))
    return _wrap_unsigned(_to_integer(value))


def _float_div(a: float, b: float) -> float:
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _trunc_div(a: int, b: int) -> int:
    if b == 0:
        raise ZeroDivisionError("integer division by zero")
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _check_shift(count: int) -> int:
    if not 0 <= count < 32:
        raise ValueError(f"shift count {count} out of range 0..31")
    return count


class Vector:
    """An immutable vector of 2 to 4 components of one scalar kind.

    Arguments are scalars or other vectors; their components are concatenated
    and converted to ``kind``. A single vector argument therefore converts it.
    """

    __slots__ = ("_kind", "_data")

    def __init__(self, *args, kind: ScalarKind = ScalarKind.FLOAT):
        kind = ScalarKind(kind)
        components = []
        for arg in args:
            if isinstance(arg, Vector):
                if (arg._kind is ScalarKind.BOOL) != (kind is ScalarKind.BOOL):
                    raise TypeError(
                        f"cannot build a {kind.value} vector from a "
                        f"{arg._kind.value} vector"
                    )
                components.extend(arg._data)
            elif isinstance(arg, numbers.Real):
                components.append(arg)
            else:
                raise TypeError(f"unsupported component {arg!r}")
        if not _MIN_SIZE <= len(components) <= _MAX_SIZE:
            raise ValueError(
                f"a vector needs {_MIN_SIZE} to {_MAX_SIZE} components, "
                f"got {len(components)}"
            )
        self._kind = kind
        self._data = tuple(_coerce(c, kind) for c in components)

    @classmethod
    def splat(cls, value, size: int, kind: ScalarKind = ScalarKind.FLOAT) -> "Vector":
        """Build a vector of ``size`` components all equal to ``value``."""
        return cls(*([value] * size), kind=kind)

    @classmethod
    def _make(cls, kind: ScalarKind, values: Iterable) -> "Vector":
        obj = object.__new__(cls)
        obj._kind = kind
        obj._data = tuple(_coerce(v, kind) for v in values)
        return obj

    @property
    def kind(self) -> ScalarKind:
        return self._kind

    def convert(self, kind: ScalarKind) -> "Vector":
        """Return this vector cast component-wise to another kind."""
        return Vector(self, kind=kind)

    def xy(self) -> "Vector":
        if len(self._data) < 3:
            raise ValueError("xy() needs a vector of 3 or 4 components")
        return Vector._make(self._kind, self._data[:2])

    def xyz(self) -> "Vector":
        if len(self._data) < 4:
            raise ValueError("xyz() needs a vector of 4 components")
        return Vector._make(self._kind, self._data[:3])

    def _component(self, i: int):
        if i >= len(self._data):
            raise AttributeError(
                f"{len(self._data)}-component vector has no '{_COMPONENT_NAMES[i]}'"
            )
        return self._data[i]

    @property
    def x(self):
        return self._component(0)

    @property
    def y(self):
        return self._component(1)

    @property
    def z(self):
        return self._component(2)

    @property
    def w(self):
        return self._component(3)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator:
        return iter(self._data)

    def __getitem__(self, idx):
        return self._data[idx]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._kind is other._kind and self._data == other._data

    def __hash__(self) -> int:
        return hash((self._kind, self._data))

    def __repr__(self) -> str:
        body = ", ".join(repr(c) for c in self._data)
        return f"{self._kind.prefix}vec{len(self._data)}({body})"

    # operand handling

    def _operand(self, other) -> Optional[Tuple]:
        if isinstance(other, Vector):
            if other._kind is not self._kind:
                raise TypeError(
                    f"cannot combine {self._kind.value} and "
                    f"{other._kind.value} vectors"
                )
            if len(other._data) != len(self._data):
                raise TypeError(
                    f"cannot combine vectors of {len(self._data)} and "
                    f"{len(other._data)} components"
                )
            return other._data
        if isinstance(other, numbers.Real):
            return (_coerce(other, self._kind),) * len(self._data)
        return None

    def _require(self, kinds, operation: str) -> None:
        if self._kind not in kinds:
            raise TypeError(f"{operation} is not defined for {self._kind.value} vectors")

    def _combine(self, other, fn: Callable, kinds, operation: str, reflected=False):
        self._require(kinds, operation)
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        pairs = zip(rhs, self._data) if reflected else zip(self._data, rhs)
        return Vector._make(self._kind, (fn(a, b) for a, b in pairs))

    def _divide(self, a, b):
        if self._kind.is_real:
            return _float_div(a, b)
        if self._kind is ScalarKind.INT:
            return _trunc_div(a, b)
        if b == 0:
            raise ZeroDivisionError("integer division by zero")
        return a // b

    # arithmetic

    def __add__(self, other):
        return self._combine(other, lambda a, b: a + b, _ARITHMETIC, "+")

    def __radd__(self, other):
        return self._combine(other, lambda a, b: a + b, _ARITHMETIC, "+", True)

    def __sub__(self, other):
        return self._combine(other, lambda a, b: a - b, _ARITHMETIC, "-")

    def __rsub__(self, other):
        return self._combine(other, lambda a, b: a - b, _ARITHMETIC, "-", True)

    def __mul__(self, other):
        return self._combine(other, lambda a, b: a * b, _ARITHMETIC, "*")

    def __rmul__(self, other):
        return self._combine(other, lambda a, b: a * b, _ARITHMETIC, "*", True)

    def __truediv__(self, other):
        return self._combine(other, self._divide, _ARITHMETIC, "/")

    def __rtruediv__(self, other):
        return self._combine(other, self._divide, _ARITHMETIC, "/", True)

    def __neg__(self):
        self._require(_ARITHMETIC, "negation")
        return Vector._make(self._kind, (-a for a in self._data))

    # bitwise

    def __and__(self, other):
        return self._combine(other, lambda a, b: a & b, _INTEGERS, "&")

    def __or__(self, other):
        return self._combine(other, lambda a, b: a | b, _INTEGERS, "|")

    def __xor__(self, other):
        return self._combine(other, lambda a, b: a ^ b, _INTEGERS, "^")

    def __lshift__(self, other):
        return self._combine(other, lambda a, b: a << _check_shift(b), _INTEGERS, "<<")

    def __rshift__(self, other):
        return self._combine(other, lambda a, b: a >> _check_shift(b), _INTEGERS, ">>")

    def __invert__(self):
        self._require(_INTEGERS, "~")
        return Vector._make(self._kind, (~a for a in self._data))

    # component-wise comparisons, returning bool vectors

    def _compare(self, other, fn: Callable, kinds, operation: str) -> "Vector":
        self._require(kinds, operation)
        rhs = self._operand(other)
        if rhs is None:
            raise TypeError(f"cannot compare a vector with {type(other).__name__}")
        return Vector._make(ScalarKind.BOOL, (fn(a, b) for a, b in zip(self._data, rhs)))

    def eq(self, other) -> "Vector":
        return self._compare(other, lambda a, b: a == b, ScalarKind, "==")

    def ne(self, other) -> "Vector":
        return self._compare(other, lambda a, b: a != b, ScalarKind, "!=")

    def gt(self, other) -> "Vector":
        return self._compare(other, lambda a, b: a > b, _ARITHMETIC, ">")

    def ge(self, other) -> "Vector":
        return self._compare(other, lambda a, b: a >= b, _ARITHMETIC, ">=")

    def lt(self, other) -> "Vector":
        return self._compare(other, lambda a, b: a < b, _ARITHMETIC, "<")

    def le(self, other) -> "Vector":
        return self._compare(other, lambda a, b: a <= b, _ARITHMETIC, "<=")

    # logic on bool vectors

    def logical_and(self, other) -> "Vector":
        return self._compare(other, lambda a, b: a and b, {ScalarKind.BOOL}, "&&")

    def logical_or(self, other) -> "Vector":
        return self._compare(other, lambda a, b: a or b, {ScalarKind.BOOL}, "||")

    def logical_not(self) -> "Vector":
        self._require({ScalarKind.BOOL}, "!")
        return Vector._make(ScalarKind.BOOL, (not a for a in self._data))


def vec(*args) -> Vector:
    """Single-precision float vector."""
    return Vector(*args, kind=ScalarKind.FLOAT)


def dvec(*args) -> Vector:
    """Double-precision float vector."""
    return Vector(*args, kind=ScalarKind.DOUBLE)


def ivec(*args) -> Vector:
    """Signed 32-bit integer vector."""
    return Vector(*args, kind=ScalarKind.INT)


def uvec(*args) -> Vector:
    """Unsigned 32-bit integer vector."""
    return Vector(*args, kind=ScalarKind.UINT)


def bvec(*args) -> Vector:
    """Bool vector."""
    return Vector(*args, kind=ScalarKind.BOOL)