"""Triangle meshes for boxes, spheres and tori."""

from __future__ import annotations

import math

from .matrix import Matrix

Vertex = tuple[float, float, float]
Grid = list[list[Vertex]]


def add_box(m: Matrix, x: float, y: float, z: float, w: float, h: float, d: float) -> None:
    """Add the twelve triangles of a box whose front top left corner is ``(x, y, z)``."""
    faces = (
        # top
        ((x, y, z), (x + w, y, z), (x + w, y, z - d)),
        ((x + w, y, z - d), (x, y, z - d), (x, y, z)),
        # bottom
        ((x + w, y - h, z - d), (x + w, y - h, z), (x, y - h, z)),
        ((x, y - h, z), (x, y - h, z - d), (x + w, y - h, z - d)),
        # left
        ((x, y, z), (x, y, z - d), (x, y - h, z - d)),
        ((x, y - h, z - d), (x, y - h, z), (x, y, z)),
        # right
        ((x + w, y - h, z - d), (x + w, y, z - d), (x + w, y, z)),
        ((x + w, y, z), (x + w, y - h, z), (x + w, y - h, z - d)),
        # front
        ((x + w, y - h, z), (x + w, y, z), (x, y, z)),
        ((x, y, z), (x, y - h, z), (x + w, y - h, z)),
        # back
        ((x, y, z - d), (x + w, y, z - d), (x + w, y - h, z - d)),
        ((x + w, y - h, z - d), (x, y - h, z - d), (x, y, z - d)),
    )
    for a, b, c in faces:
        m.add_poly(a, b, c)


def gen_sphere(cx: float, cy: float, cz: float, r: float, step: int) -> Grid:
    """Return a ``(step + 1) x (step + 1)`` grid of points on a sphere, by rotation then arc."""
    return [
        [
            (
                r * math.cos(math.pi * circ / step) + cx,
                r * math.sin(math.pi * circ / step) * math.cos(2 * math.pi * rot / step) + cy,
                r * math.sin(math.pi * circ / step) * math.sin(2 * math.pi * rot / step) + cz,
            )
            for circ in range(step + 1)
        ]
        for rot in range(step + 1)
    ]


def add_sphere(m: Matrix, cx: float, cy: float, cz: float, r: float, step: int) -> None:
    """Add the triangles of a sphere built from ``step`` slices of ``step`` segments."""
    pts = gen_sphere(cx, cy, cz, r, step)
    for here, there in zip(pts, pts[1:]):
        for circ in range(len(pts) - 1):
            if circ != 0:
                m.add_poly(there[circ + 1], there[circ], here[circ])
            if circ != step - 1:
                m.add_poly(here[circ], here[circ + 1], there[circ + 1])


def gen_torus(cx: float, cy: float, cz: float, r1: float, r2: float, step: int) -> Grid:
    """Return a ``(step + 1) x (step + 1)`` grid of points on a torus.

    ``r1`` is the radius of the tube and ``r2`` the distance from the centre to the tube.
    """
    grid: Grid = []
    for rot in range(step + 1):
        phi = 2 * math.pi * rot / step
        row = []
        for circ in range(step + 1):
            theta = 2 * math.pi * circ / step
            ring = r1 * math.cos(theta) + r2
            row.append(
                (
                    math.cos(phi) * ring + cx,
                    r1 * math.sin(theta) + cy,
                    -math.sin(phi) * ring + cz,
                )
            )
        grid.append(row)
    return grid


def add_torus(
    m: Matrix, cx: float, cy: float, cz: float, r1: float, r2: float, step: int
) -> None:
    """Add the triangles of a torus built from ``step`` slices of ``step`` segments."""
    pts = gen_torus(cx, cy, cz, r1, r2, step)
    for here, there in zip(pts, pts[1:]):
        for circ in range(len(pts[0]) - 1):
            m.add_poly(here[circ], there[circ], there[circ + 1])
            m.add_poly(there[circ + 1], here[circ + 1], here[circ])