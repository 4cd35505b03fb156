"""4x4 matrices stored column-major, for column vectors."""

from __future__ import annotations

import math
from typing import Iterable, Iterator, Tuple

__all__ = ["Mat4", "inverse", "xfm_vec", "perspective_projection"]


class Mat4:
    """An immutable 4x4 matrix; ``entries[r + 4 * c]`` is row ``r``, column ``c``."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[float]):
        values = tuple(float(e) for e in entries)
        if len(values) != 16:
            raise ValueError(f"a 4x4 matrix needs 16 entries, got {len(values)}")
        self._entries = values

    @property
    def entries(self) -> Tuple[float, ...]:
        return self._entries

    @classmethod
    def from_cols(cls, col0, col1, col2, col3) -> "Mat4":
        """Build a matrix from four 4-component columns."""
        columns = [tuple(col0), tuple(col1), tuple(col2), tuple(col3)]
        if any(len(col) != 4 for col in columns):
            raise ValueError("every column needs 4 components")
        return cls(value for col in columns for value in col)

    @classmethod
    def from_pose(cls, pos, scale: float, q) -> "Mat4":
        """Transform from a position, a uniform scale and a quaternion ``(x, y, z, w)``.

        The quaternion need not be normalised. Only the diagonal carries the scale.
        """
        px, py, pz = pos
        qx, qy, qz, qw = q
        sqw, sqx, sqy, sqz = qw * qw, qx * qx, qy * qy, qz * qz
        invs = 1.0 / (sqx + sqy + sqz + sqw)
        e = [0.0] * 16

        def put(r: int, c: int, value: float) -> None:
            e[r + 4 * c] = value

        put(0, 0, (sqx - sqy - sqz + sqw) * invs * scale)
        put(1, 1, (-sqx + sqy - sqz + sqw) * invs * scale)
        put(2, 2, (-sqx - sqy + sqz + sqw) * invs * scale)

        tmp1, tmp2 = qx * qy, qz * qw
        put(1, 0, 2.0 * (tmp1 + tmp2) * invs)
        put(0, 1, 2.0 * (tmp1 - tmp2) * invs)

        tmp1, tmp2 = qx * qz, qy * qw
        put(2, 0, 2.0 * (tmp1 - tmp2) * invs)
        put(0, 2, 2.0 * (tmp1 + tmp2) * invs)

        tmp1, tmp2 = qy * qz, qx * qw
        put(2, 1, 2.0 * (tmp1 + tmp2) * invs)
        put(1, 2, 2.0 * (tmp1 - tmp2) * invs)

        put(0, 3, px)
        put(1, 3, py)
        put(2, 3, pz)
        put(3, 3, 1.0)
        return cls(e)

    def __getitem__(self, i: int) -> float:
        return self._entries[i]

    def __iter__(self) -> Iterator[float]:
        return iter(self._entries)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Mat4):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self) -> int:
        return hash(self._entries)

    def __repr__(self) -> str:
        return f"Mat4({list(self._entries)!r})"

    def __mul__(self, other):
        if not isinstance(other, Mat4):
            return NotImplemented
        a, b = self._entries, other._entries
        return Mat4(
            sum(a[k * 4 + r] * b[c * 4 + k] for k in range(4))
            for c in range(4)
            for r in range(4)
        )


def inverse(matrix: Mat4) -> Mat4:
    """The inverse matrix; raises ``ValueError`` for a singular one."""
    (mA, mB, mC, mD, mE, mF, mG, mH,
     mI, mJ, mK, mL, mM, mN, mO, mP) = matrix.entries

    tmp0 = mK * mD - mC * mL
    tmp1 = mO * mH - mG * mP
    tmp2 = mB * mK - mJ * mC
    tmp3 = mF * mO - mN * mG
    tmp4 = mJ * mD - mB * mL
    tmp5 = mN * mH - mF * mP
    r0 = [
        (mJ * tmp1 - mL * tmp3) - mK * tmp5,
        (mN * tmp0 - mP * tmp2) - mO * tmp4,
        (mD * tmp3 + mC * tmp5) - mB * tmp1,
        (mH * tmp2 + mG * tmp4) - mF * tmp0,
    ]
    det = mA * r0[0] + mE * r0[1] + mI * r0[2] + mM * r0[3]
    if det == 0.0:
        raise ValueError("matrix is singular")
    det_inv = 1.0 / det

    r1 = [mI * tmp1, mM * tmp0, mA * tmp1, mE * tmp0]
    r3 = [mI * tmp3, mM * tmp2, mA * tmp3, mE * tmp2]
    r2 = [mI * tmp5, mM * tmp4, mA * tmp5, mE * tmp4]

    tmp0 = mI * mB - mA * mJ
    tmp1 = mM * mF - mE * mN
    tmp2 = mI * mD - mA * mL
    tmp3 = mM * mH - mE * mP
    tmp4 = mI * mC - mA * mK
    tmp5 = mM * mG - mE * mO

    r2 = [
        (mL * tmp1 - mJ * tmp3) + r2[0],
        (mP * tmp0 - mN * tmp2) + r2[1],
        (mB * tmp3 - mD * tmp1) - r2[2],
        (mF * tmp2 - mH * tmp0) - r2[3],
    ]
    r3 = [
        (mJ * tmp5 - mK * tmp1) + r3[0],
        (mN * tmp4 - mO * tmp0) + r3[1],
        (mC * tmp1 - mB * tmp5) - r3[2],
        (mG * tmp0 - mF * tmp4) - r3[3],
    ]
    r1 = [
        (mK * tmp3 - mL * tmp5) - r1[0],
        (mO * tmp2 - mP * tmp4) - r1[1],
        (mD * tmp5 - mC * tmp3) + r1[2],
        (mH * tmp4 - mG * tmp2) + r1[3],
    ]
    return Mat4.from_cols(*([v * det_inv for v in col] for col in (r0, r1, r2, r3)))


def xfm_vec(matrix: Mat4, vec) -> Tuple[float, float, float, float]:
    """Multiply a 4-component column vector by the matrix."""
    components = tuple(vec)
    if len(components) != 4:
        raise ValueError("xfm_vec() needs a 4-component vector")
    e = matrix.entries
    return tuple(
        sum(e[r + 4 * c] * components[c] for c in range(4)) for r in range(4)
    )


def perspective_projection(half_fov_y_rad: float, aspect_ratio: float, z_near: float) -> Mat4:
    """Right-handed, reverse-z projection with an infinite far plane."""
    f = 1.0 / math.tan(half_fov_y_rad)
    e = [0.0] * 16
    e[0] = f / aspect_ratio
    e[5] = f
    e[11] = -1.0
    e[14] = z_near
    return Mat4(e)