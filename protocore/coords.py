"""Small 2D helpers, integer hashing and pixel-coordinate conversions.

Coordinate spaces used by the conversion functions:

* ``id``  - integer pixel index.
* ``st``  - pixel space with pixel centres at ``id + 0.5``.
* ``uv``  - ``st`` divided by the resolution, in ``[0, 1]``.
* ``xy``  - centred space in ``[-1, 1]`` scaled by the vertical resolution.
"""

from __future__ import annotations

import math
import numbers
from typing import Tuple

from protocore.vecfuncs import length
from protocore.vectors import ScalarKind, Vector, _to_float32, ivec, vec

__all__ = [
    "rotate",
    "rotation",
    "normalize2",
    "wang_hash",
    "wang_hash_float",
    "cubic_pulse",
    "rotation2d",
    "rotate2d",
    "round_vec",
    "st_from_id",
    "id_from_st",
    "id_from_uv",
    "xy_from_st",
    "st_from_xy",
    "xy_from_uv",
    "uv_from_xy",
    "uv_from_st",
    "uv_from_id",
    "st_from_uv",
    "uvw_from_id",
    "perp",
    "normalize_or_zero",
    "normalize_or",
]

_U32 = 0xFFFFFFFF
_HASH_UNIT = _to_float32(1.0 / 16777215.0)


def rotate(rx: float, ry: float, dx: float, dy: float) -> Tuple[float, float]:
    """Rotate direction ``(dx, dy)`` by the rotation ``(rx, ry)`` (cos, sin)."""
    return dx * rx - dy * ry, dx * ry + dy * rx


def rotation(rad: float) -> Tuple[float, float]:
    """The rotation ``(cos, sin)`` for an angle in radians."""
    return math.cos(rad), math.sin(rad)


def normalize2(dx: float, dy: float) -> Tuple[float, float]:
    """Scale ``(dx, dy)`` to unit length; a zero direction gives NaNs."""
    magnitude = math.sqrt(dx * dx + dy * dy)
    if magnitude == 0.0:
        return math.nan, math.nan
    inv = 1.0 / magnitude
    return dx * inv, dy * inv


def wang_hash(b: int) -> int:
    """A cheap 32-bit integer hash."""
    b &= _U32
    b = (b ^ 0x8564231) ^ (b >> 16)
    b = (b * 9) & _U32
    b ^= b >> 4
    b = (b * 0x27D4EB2D) & _U32
    b ^= b >> 15
    return b


def wang_hash_float(seed: int, val_min: float = 0.0, val_max: float = 1.0) -> float:
    """Hash ``seed`` to a single-precision float in ``[val_min, val_max]``."""
    unit = _to_float32(float(wang_hash(seed) % 16777216) * _HASH_UNIT)
    span = _to_float32(val_max - val_min)
    return _to_float32(val_min + _to_float32(span * unit))


def cubic_pulse(c: float, w: float, x: float) -> float:
    """Smooth bump of half-width ``w`` centred on ``c``, peaking at 1."""
    x = abs(x - c)
    if x > w:
        return 0.0
    x /= w
    return 1.0 - x * x * (3.0 - 2.0 * x)


def rotation2d(a: float) -> Vector:
    """The rotation vector ``(cos a, sin a)``."""
    return vec(math.cos(a), math.sin(a))


def rotate2d(r, v: Vector) -> Vector:
    """Rotate ``v`` by a rotation vector, or by an angle in radians."""
    if isinstance(r, numbers.Real):
        r = rotation2d(r)
    return vec(v.x * r.x - v.y * r.y, v.x * r.y + v.y * r.x)


def _round_half_away(x: float) -> float:
    if not math.isfinite(x):
        return x
    return math.copysign(float(math.floor(abs(x) + 0.5)), x)


def round_vec(v: Vector) -> Vector:
    """Round each component to the nearest integer, halves away from zero."""
    if not v.kind.is_real:
        raise TypeError(f"round_vec() is not defined for {v.kind.value} vectors")
    return Vector(*(_round_half_away(c) for c in v), kind=v.kind)


def _require_integer(id_: Vector) -> Vector:
    if not isinstance(id_, Vector) or not id_.kind.is_integer:
        raise TypeError("expected an integer vector of pixel indices")
    return id_


def st_from_id(id_: Vector) -> Vector:
    """Pixel centre of an integer pixel index."""
    return vec(_require_integer(id_)) + 0.5


def id_from_st(st: Vector) -> Vector:
    """Pixel index of a point in pixel space (truncating)."""
    return ivec(st)


def id_from_uv(uv: Vector, res: Vector) -> Vector:
    """Pixel index of a normalised coordinate."""
    return ivec(uv * res)


def xy_from_st(st: Vector, res: Vector) -> Vector:
    """Centred coordinates from pixel space."""
    return (2.0 * st - res) / res.y


def st_from_xy(xy: Vector, res: Vector) -> Vector:
    """Pixel space from centred coordinates."""
    return ((xy * res.y) + res) * 0.5


def xy_from_uv(uv: Vector) -> Vector:
    """Map ``[0, 1]`` to ``[-1, 1]``."""
    return uv * 2.0 - 1.0


def uv_from_xy(xy: Vector) -> Vector:
    """Map ``[-1, 1]`` to ``[0, 1]``."""
    return xy * 0.5 + 0.5


def uv_from_st(st: Vector, res: Vector) -> Vector:
    """Normalised coordinates from pixel space (2D or 3D)."""
    return st / res


def uv_from_id(id_: Vector, res: Vector) -> Vector:
    """Normalised coordinates of a pixel centre."""
    return (vec(_require_integer(id_)) + 0.5) / res


def st_from_uv(uv: Vector, res: Vector) -> Vector:
    """Pixel space from normalised coordinates."""
    return uv * res


def uvw_from_id(id_: Vector, res: Vector) -> Vector:
    """Normalised coordinates of a voxel centre."""
    return (vec(_require_integer(id_)) + 0.5) / res


def perp(v: Vector) -> Vector:
    """The vector rotated a quarter turn counter-clockwise."""
    return Vector(-v.y, v.x, kind=v.kind)


def normalize_or_zero(v: Vector) -> Vector:
    """``v`` at unit length, or the zero vector when ``v`` has no length."""
    magnitude = length(v)
    return v / magnitude if magnitude > 0.0 else Vector.splat(0.0, len(v), v.kind)


def normalize_or(v: Vector, or_v: Vector) -> Vector:
    """``v`` at unit length, or ``or_v`` when ``v`` has no length."""
    magnitude = length(v)
    return v / magnitude if magnitude > 0.0 else or_v