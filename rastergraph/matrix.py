"""Column-major 4-row matrices that hold points, edges and triangles."""

from __future__ import annotations

import math
from collections.abc import Sequence

from .canvas import Canvas
from .color import Color
from .lighting import LightingParams
from .vector_math import normal_surface

POINT_SIZE = 4
# A scanline pixel is only replaced when it is at least this much nearer.
DEPTH_MARGIN = 7


def sqr(a: float) -> float:
    """Return ``a`` squared."""
    return a * a


def distsqred(a: Sequence[float], b: Sequence[float]) -> float:
    """Return the squared distance between the first three components of two points."""
    return sqr(a[0] - b[0]) + sqr(a[1] - b[1]) + sqr(a[2] - b[2])


class Matrix:
    """A matrix stored as a list of columns; every column is a homogeneous point."""

    def __init__(self, columns: int = 0, rows: int = POINT_SIZE) -> None:
        if columns < 0:
            raise ValueError("column count must not be negative")
        if not 0 < rows <= POINT_SIZE:
            raise ValueError(f"row count must be between 1 and {POINT_SIZE}")
        self.rows = rows
        self.points: list[list[float]] = [
            [0.0] * POINT_SIZE for _ in range(columns)
        ]

    @classmethod
    def identity(cls) -> Matrix:
        """Return a new 4x4 identity matrix."""
        m = cls()
        m.ident()
        return m

    def clear(self) -> None:
        """Remove every column."""
        self.points.clear()

    def ident(self) -> None:
        """Turn this matrix into the 4x4 identity."""
        self.rows = POINT_SIZE
        self.points = [
            [1.0 if i == j else 0.0 for j in range(POINT_SIZE)]
            for i in range(POINT_SIZE)
        ]

    def __getitem__(self, index: int) -> list[float]:
        return self.points[index]

    def __len__(self) -> int:
        return len(self.points)

    def __mul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if len(self) != other.rows:
            raise ValueError(
                f"cannot multiply a matrix with {len(self)} columns "
                f"by one with {other.rows} rows"
            )
        result = Matrix(len(other), self.rows)
        for out_col, col in zip(result.points, other.points):
            for j in range(self.rows):
                out_col[j] = sum(
                    own[j] * value for own, value in zip(self.points, col)
                )
        return result

    def __str__(self) -> str:
        lines = [
            "[" + " ".join(f"{col[j]:g}" for col in self.points) + "]"
            for j in range(self.rows)
        ]
        return "\n".join(lines) + "\n\n"

    def add_point(self, x: float, y: float, z: float = 0.0) -> None:
        """Append the homogeneous point ``(x, y, z, 1)`` as a new column."""
        self.points.append([float(x), float(y), float(z), 1.0])

    def add_edge(self, x0, y0, z0, x1, y1, z1) -> None:
        """Append the two end points of an edge."""
        self.add_point(x0, y0, z0)
        self.add_point(x1, y1, z1)

    def draw_lines(self, canvas: Canvas, color: Color) -> None:
        """Draw every pair of consecutive columns as a line."""
        if len(self) % 2:
            raise ValueError("an edge matrix needs an even number of points")
        it = iter(self.points)
        for start, end in zip(it, it):
            canvas.draw_line(start[0], start[1], start[2], end[0], end[1], end[2], color)

    def add_poly(
        self, a: Sequence[float], b: Sequence[float], c: Sequence[float]
    ) -> None:
        """Append the three corners of a triangle."""
        if any(len(p) < 3 for p in (a, b, c)):
            raise ValueError("every corner needs three coordinates")
        for p in (a, b, c):
            self.add_point(p[0], p[1], p[2])

    def draw_poly(self, canvas: Canvas, params: LightingParams) -> None:
        """Fill every front-facing triangle, shaded flat by ``params``."""
        if len(self) % 3:
            raise ValueError("a polygon matrix needs a multiple of three points")
        for index in range(0, len(self), 3):
            norm = normal_surface(*self.points[index:index + 3])
            if norm[2] > 0:
                self.scanline_convert(index, canvas, params.shade(norm))

    def draw_scanline(
        self, canvas: Canvas, x0: float, x1: float, z0: float, z1: float,
        y: float, color: Color,
    ) -> None:
        """Fill one horizontal span, interpolating depth across it."""
        if x0 > x1:
            x0, x1, z0, z1 = x1, x0, z1, z0
        x1 = math.ceil(x1)
        x0 -= 1
        start = int(x0)
        z = z0
        row = int(y)
        for i in range(start, x1 + 1):
            if y >= 0 and canvas.in_bounds(i, row):
                if not math.isnan(z) and z - canvas.zbuffer[i][row] >= DEPTH_MARGIN:
                    canvas.pixels[i][row] = color
                    canvas.zbuffer[i][row] = z
            z = z0 + (i - start + 1) * (z1 - z0) / (x1 - x0)

    def scanline_convert(self, index: int, canvas: Canvas, color: Color) -> None:
        """Fill the triangle whose corners start at column ``index``."""
        corners = sorted(
            (list(p) for p in self.points[index:index + 3]), key=lambda p: p[1]
        )
        if len(corners) != 3:
            raise IndexError("triangle index out of range")
        b, m, t = corners
        b[1] -= 1
        m[1] -= 1
        x0 = x1 = b[0]
        z0 = z1 = b[2]
        y, ym, yt = b[1], m[1], t[1]
        switched = False
        while y <= yt:
            if not switched and y >= ym:
                switched = True
                x1 = m[0]
                z1 = m[2]
            self.draw_scanline(canvas, x0, x1, z0, z1, y, color)

            step_b = y - b[1] + 1
            x0 = b[0] + step_b * (t[0] - b[0]) / (t[1] - b[1])
            z0 = b[2] + step_b * (t[2] - b[2]) / (t[1] - b[1])
            if not switched:
                x1 = b[0] + step_b * (m[0] - b[0]) / (m[1] - b[1])
                z1 = b[2] + step_b * (m[2] - b[2]) / (m[1] - b[1])
            else:
                step_m = y - m[1] + 1
                x1 = m[0] + step_m * (t[0] - m[0]) / (t[1] - m[1])
                z1 = m[2] + step_m * (t[2] - m[2]) / (t[1] - m[1])
            y += 1