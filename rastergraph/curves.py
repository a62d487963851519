"""Parametric curves rendered as chains of short edges."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence

from .matrix import Matrix

INCR = 0.0005
_STEPS = round(1 / INCR)

# Columns of the inverse Hermite basis matrix.
_HERMITE_INVERSE = (
    (2, -3, 0, 1),
    (-2, 3, 0, 0),
    (1, -2, 1, 0),
    (1, -1, 0, 0),
)


def _parameters() -> Iterator[float]:
    """Yield the parameter values INCR, 2*INCR, ..., 1 + INCR."""
    for k in range(1, _STEPS + 2):
        yield k * INCR


def _from_columns(columns: Sequence[Sequence[float]]) -> Matrix:
    m = Matrix(len(columns), len(columns[0]))
    for target, values in zip(m.points, columns):
        target[: len(values)] = [float(v) for v in values]
    return m


def circle(m: Matrix, cx: float, cy: float, cz: float, r: float) -> None:
    """Add the edges of a circle of radius ``r`` in the plane ``z = cz``."""
    for t in _parameters():
        m.add_edge(
            r * math.cos(2 * math.pi * t) + cx,
            r * math.sin(2 * math.pi * t) + cy,
            cz,
            r * math.cos(2 * math.pi * (t - INCR)) + cx,
            r * math.sin(2 * math.pi * (t - INCR)) + cy,
            cz,
        )


def polynomial(pts: Sequence[float], x: float, y: float, c: bool = True) -> float:
    """Return ``sum(pts[j] * x**(n-1-j) * y**j)``, with binomial weights if ``c``."""
    n = len(pts)
    return sum(
        p * x ** (n - 1 - j) * y**j * (math.comb(n - 1, j) if c else 1)
        for j, p in enumerate(pts)
    )


def bezier_curve(m: Matrix, x0, y0, x1, y1, x2, y2, x3, y3) -> None:
    """Add the edges of a cubic Bezier curve with the given control points."""
    xs = (x0, x1, x2, x3)
    ys = (y0, y1, y2, y3)
    for t in _parameters():
        xcurr = polynomial(xs, 1 - t, t)
        ycurr = polynomial(ys, 1 - t, t)
        xprev = polynomial(xs, 1 - t + INCR, t - INCR)
        yprev = polynomial(ys, 1 - t + INCR, t - INCR)
        m.add_edge(xprev, yprev, 0, xcurr, ycurr, 0)


def hermite_curve(m: Matrix, x0, y0, x1, y1, rx0, ry0, rx1, ry1) -> None:
    """Add the edges of a cubic Hermite curve from its end points and tangents."""
    h_inv = _from_columns(_HERMITE_INVERSE)
    xcoeff = (h_inv * _from_columns([(x0, x1, rx0, rx1)]))[0]
    ycoeff = (h_inv * _from_columns([(y0, y1, ry0, ry1)]))[0]
    for t in _parameters():
        xcurr = polynomial(xcoeff, t, 1, False)
        ycurr = polynomial(ycoeff, t, 1, False)
        xprev = polynomial(xcoeff, t + INCR, 1, False)
        yprev = polynomial(ycoeff, t + INCR, 1, False)
        m.add_edge(xprev, yprev, 0, xcurr, ycurr, 0)