import math

import pytest

from rastergraph.curves import bezier_curve, circle, hermite_curve, polynomial
from rastergraph.matrix import Matrix


def _near(points, x, y, tol=0.05):
    return any(math.hypot(p[0] - x, p[1] - y) < tol for p in points)


@pytest.mark.parametrize("t", [0.0, 0.3, 0.5, 0.9, 1.0])
def test_bernstein_weights_sum_to_one(t):
    assert polynomial((1, 1, 1, 1), 1 - t, t) == pytest.approx(1.0)


def test_polynomial_plain_endpoints():
    pts = (2.0, -3.0, 5.0, 7.0)
    assert polynomial(pts, 0, 1, False) == pytest.approx(pts[3])
    assert polynomial(pts, 1, 1, False) == pytest.approx(sum(pts))


def test_polynomial_bezier_endpoints():
    pts = (4.0, 8.0, 15.0, 16.0)
    assert polynomial(pts, 1, 0) == pytest.approx(pts[0])
    assert polynomial(pts, 0, 1) == pytest.approx(pts[3])


def test_polynomial_does_not_modify_input():
    pts = [1.0, 2.0, 3.0, 4.0]
    polynomial(pts, 0.5, 0.5)
    assert pts == [1.0, 2.0, 3.0, 4.0]


def test_circle_points_on_radius():
    m = Matrix()
    circle(m, 100, 50, 7, 20)
    assert len(m) > 0
    assert len(m) % 2 == 0
    for p in m.points:
        assert math.hypot(p[0] - 100, p[1] - 50) == pytest.approx(20)
        assert p[2] == 7


def test_circle_edges_are_short_and_closed():
    m = Matrix()
    circle(m, 0, 0, 0, 10)
    it = iter(m.points)
    for a, b in zip(it, it):
        assert math.hypot(a[0] - b[0], a[1] - b[1]) < 0.1
    assert _near(m.points, 10, 0, 1e-6)


def test_bezier_starts_at_first_control_point():
    m = Matrix()
    bezier_curve(m, 10, 20, 50, 90, 120, 5, 200, 60)
    assert m[0][:2] == pytest.approx([10, 20])
    assert _near(m.points, 200, 60)
    assert all(p[2] == 0 for p in m.points)


def test_bezier_stays_in_control_hull_box():
    m = Matrix()
    bezier_curve(m, 10, 20, 50, 90, 120, 5, 200, 60)
    for p in m.points[:-2]:
        assert 10 - 1 <= p[0] <= 200 + 1
        assert 5 - 1 <= p[1] <= 90 + 1


def test_hermite_straight_line_when_tangents_align():
    m = Matrix()
    hermite_curve(m, 0, 0, 100, 100, 100, 100, 100, 100)
    for p in m.points:
        assert p[0] == pytest.approx(p[1])