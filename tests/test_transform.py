import math

import pytest

from rastergraph.matrix import Matrix, distsqred
from rastergraph.transform import mk_rot_x, mk_rot_y, mk_rot_z, mk_scale, mk_translate


def _points(*coords):
    m = Matrix()
    for c in coords:
        m.add_point(*c)
    return m


def _assert_same(a, b):
    for pa, pb in zip(a.points, b.points):
        assert pa == pytest.approx(pb, abs=1e-9)
    assert len(a) == len(b)


def test_translate_roundtrip():
    pts = _points((1, 2, 3), (-5, 0.5, 7))
    moved = mk_translate(4, -2, 9) * pts
    back = mk_translate(-4, 2, -9) * moved
    _assert_same(back, pts)
    assert moved[0][3] == pytest.approx(1.0)


def test_translate_preserves_distances():
    pts = _points((1, 2, 3), (-5, 0.5, 7))
    moved = mk_translate(10, 20, 30) * pts
    assert distsqred(moved[0], moved[1]) == pytest.approx(distsqred(pts[0], pts[1]))


def test_scale_roundtrip():
    pts = _points((1, 2, 3), (-5, 0.5, 7))
    back = mk_scale(0.5, 0.25, 2) * (mk_scale(2, 4, 0.5) * pts)
    _assert_same(back, pts)


def test_scale_by_zero_collapses_axis():
    pts = _points((3, 4, 5))
    flat = mk_scale(1, 0, 1) * pts
    assert flat[0][1] == 0


def test_rot_z_quarter_turn():
    rotated = mk_rot_z(90) * _points((1, 0, 0))
    assert rotated[0][:3] == pytest.approx([0, 1, 0], abs=1e-12)


def test_rot_x_quarter_turn():
    rotated = mk_rot_x(90) * _points((0, 1, 0))
    assert rotated[0][:3] == pytest.approx([0, 0, 1], abs=1e-12)


@pytest.mark.parametrize("rot", [mk_rot_x, mk_rot_y, mk_rot_z])
def test_rotation_inverse_and_full_turn(rot):
    pts = _points((1, 2, 3), (-4, 5, -6))
    _assert_same(rot(-37) * (rot(37) * pts), pts)
    _assert_same(rot(360) * pts, pts)


@pytest.mark.parametrize("rot", [mk_rot_x, mk_rot_y, mk_rot_z])
def test_rotation_preserves_length(rot):
    pts = _points((1, 2, 3))
    origin = (0, 0, 0)
    rotated = rot(123) * pts
    assert distsqred(rotated[0], origin) == pytest.approx(distsqred(pts[0], origin))


def test_rot_y_keeps_y_axis():
    rotated = mk_rot_y(71) * _points((0, 3, 0))
    assert rotated[0][:3] == pytest.approx([0, 3, 0], abs=1e-12)


def test_composition_order():
    combined = mk_translate(5, 0, 0) * mk_scale(2, 2, 2)
    step = mk_translate(5, 0, 0) * (mk_scale(2, 2, 2) * _points((1, 1, 1)))
    _assert_same(combined * _points((1, 1, 1)), step)
    assert math.isclose(combined[0][0], 2)