"""2D similarity transforms: translation plus a combined rotation and scale.

A pose ``(x, y, z, w)`` maps a point ``p`` to ``(x, y) + rotate((z, w), p)``,
where ``(z, w)`` is ``scale * (cos angle, sin angle)``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from protocore.coords import rotate
from protocore.vectors import Vector, vec

__all__ = [
    "Pose",
    "identity",
    "inverse",
    "normalize",
    "rotation",
    "scaling",
    "trans",
    "scale_of",
]


@dataclass(frozen=True)
class Pose:
    """Translation ``(x, y)`` and rotation-scale ``(z, w)``; defaults to identity."""

    x: float = 0.0
    y: float = 0.0
    z: float = 1.0
    w: float = 0.0

    def __mul__(self, other):
        """Compose with another pose, or transform a 2D point."""
        if isinstance(other, Pose):
            px, py = rotate(self.z, self.w, other.x, other.y)
            rz, rw = rotate(self.z, self.w, other.z, other.w)
            return Pose(self.x + px, self.y + py, rz, rw)
        if isinstance(other, Vector):
            if len(other) != 2:
                raise ValueError("a pose transforms 2-component vectors only")
            px, py = rotate(self.z, self.w, other.x, other.y)
            return vec(self.x + px, self.y + py)
        try:
            vx, vy = other
        except (TypeError, ValueError):
            return NotImplemented
        px, py = rotate(self.z, self.w, vx, vy)
        return (self.x + px, self.y + py)

    def __invert__(self) -> "Pose":
        return inverse(self)


def identity() -> Pose:
    """The pose that changes nothing."""
    return Pose(0.0, 0.0, 1.0, 0.0)


def inverse(t: Pose) -> Pose:
    """The pose that undoes ``t``."""
    s = t.z * t.z + t.w * t.w
    if s == 0.0:
        raise ValueError("a pose with zero scale has no inverse")
    return Pose(0.0, 0.0, t.z / s, -t.w / s) * Pose(-t.x, -t.y, 1.0, 0.0)


def normalize(t: Pose) -> Pose:
    """``t`` with its scale removed; a zero scale becomes the identity rotation."""
    magnitude = math.hypot(t.z, t.w)
    if magnitude > 0.0:
        return Pose(t.x, t.y, t.z / magnitude, t.w / magnitude)
    return Pose(t.x, t.y, 1.0, 0.0)


def rotation(rad: float) -> Pose:
    """A pure rotation by ``rad`` radians."""
    return Pose(0.0, 0.0, math.cos(rad), math.sin(rad))


def scaling(s: float) -> Pose:
    """A pure uniform scale."""
    return Pose(0.0, 0.0, s, 0.0)


def trans(pos, rot: float = 0.0, scale: float = 1.0) -> Pose:
    """Translate to ``pos`` after rotating by ``rot`` and scaling by ``scale``."""
    px, py = pos
    return Pose(float(px), float(py), scale * math.cos(rot), scale * math.sin(rot))


def scale_of(t: Pose) -> float:
    """The uniform scale of a pose."""
    return math.hypot(t.z, t.w)