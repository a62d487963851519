"""Small three-component vector helpers."""

from __future__ import annotations

import math
from collections.abc import Sequence

Vec3 = tuple[float, float, float]
Point = Sequence[float]


def normalize(v: Sequence[float]) -> Vec3:
    """Return ``v`` scaled to unit length."""
    mag = math.sqrt(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])
    if mag == 0:
        raise ValueError("cannot normalize a zero-length vector")
    return (v[0] / mag, v[1] / mag, v[2] / mag)


def dot_prod(a: Sequence[float], b: Sequence[float]) -> float:
    """Return the dot product of the first three components of ``a`` and ``b``."""
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def normal_surface(r: Point, s: Point, t: Point) -> Vec3:
    """Return the cross product ``(s - r) x (t - r)``."""
    a = (s[0] - r[0], s[1] - r[1], s[2] - r[2])
    b = (t[0] - r[0], t[1] - r[1], t[2] - r[2])
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )