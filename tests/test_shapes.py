import math

import pytest

from rastergraph.matrix import Matrix
from rastergraph.shapes import add_box, add_sphere, add_torus, gen_sphere, gen_torus
from rastergraph.vector_math import dot_prod, normal_surface


def _triangles(m):
    pts = [tuple(p[:3]) for p in m.points]
    return [pts[i:i + 3] for i in range(0, len(pts), 3)]


def test_box_has_twelve_triangles():
    m = Matrix()
    add_box(m, 0, 0, 0, 10, 10, 10)
    assert len(m) == 36


def test_box_first_triangle_is_top_corner():
    m = Matrix()
    add_box(m, 1, 2, 3, 4, 5, 6)
    assert _triangles(m)[0] == [(1, 2, 3), (5, 2, 3), (5, 2, -3)]


def test_box_points_lie_within_bounds():
    m = Matrix()
    x, y, z, w, h, d = 5, 20, 3, 7, 9, 11
    add_box(m, x, y, z, w, h, d)
    for px, py, pz, one in m.points:
        assert x <= px <= x + w
        assert y - h <= py <= y
        assert z - d <= pz <= z
        assert one == 1


def test_box_normals_point_outward():
    m = Matrix()
    x, y, z, w, h, d = 0, 10, 0, 4, 6, 8
    add_box(m, x, y, z, w, h, d)
    centre = (x + w / 2, y - h / 2, z - d / 2)
    for tri in _triangles(m):
        norm = normal_surface(*tri)
        centroid = [sum(p[k] for p in tri) / 3 for k in range(3)]
        outward = [centroid[k] - centre[k] for k in range(3)]
        assert dot_prod(norm, outward) > 0


@pytest.mark.parametrize("step", [3, 6, 10])
def test_sphere_grid_shape_and_radius(step):
    grid = gen_sphere(1, 2, 3, 5, step)
    assert len(grid) == step + 1
    assert all(len(row) == step + 1 for row in grid)
    for row in grid:
        for px, py, pz in row:
            assert math.isclose(math.dist((px, py, pz), (1, 2, 3)), 5)


def test_sphere_starts_on_positive_x_axis():
    grid = gen_sphere(1, 2, 3, 5, 8)
    assert grid[0][0] == pytest.approx((6, 2, 3))


@pytest.mark.parametrize("step", [3, 5, 8])
def test_sphere_triangle_count(step):
    m = Matrix()
    add_sphere(m, 0, 0, 0, 10, step)
    assert len(m) == 3 * step * (2 * step - 2)


def test_sphere_triangles_are_on_surface():
    m = Matrix()
    add_sphere(m, 10, 0, -4, 3, 6)
    for p in m.points:
        assert math.isclose(math.dist(p[:3], (10, 0, -4)), 3)


@pytest.mark.parametrize("step", [3, 7])
def test_torus_grid_lies_on_tube(step):
    cx, cy, cz, r1, r2 = 1, -2, 4, 2, 6
    grid = gen_torus(cx, cy, cz, r1, r2, step)
    assert len(grid) == step + 1
    for row in grid:
        assert len(row) == step + 1
        for px, py, pz in row:
            radial = math.hypot(px - cx, pz - cz) - r2
            assert math.isclose(math.hypot(radial, py - cy), r1)


def test_torus_starts_at_outer_edge():
    grid = gen_torus(1, 2, 3, 2, 6, 8)
    assert grid[0][0] == pytest.approx((9, 2, 3))


@pytest.mark.parametrize("step", [3, 5])
def test_torus_triangle_count(step):
    m = Matrix()
    add_torus(m, 0, 0, 0, 1, 4, step)
    assert len(m) == 3 * 2 * step * step