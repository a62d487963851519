"""Builders for 4x4 affine transformation matrices."""

from __future__ import annotations

import math

from .matrix import Matrix


def mk_translate(x: float, y: float, z: float) -> Matrix:
    """Return a translation by ``(x, y, z)``."""
    m = Matrix.identity()
    m[3][0] = x
    m[3][1] = y
    m[3][2] = z
    return m


def mk_scale(x: float, y: float, z: float) -> Matrix:
    """Return a scaling by ``x``, ``y`` and ``z`` along the axes."""
    m = Matrix.identity()
    m[0][0] = x
    m[1][1] = y
    m[2][2] = z
    return m


def mk_rot_x(theta: float) -> Matrix:
    """Return a rotation by ``theta`` degrees about the x axis."""
    rad = math.radians(theta)
    m = Matrix.identity()
    m[1][1] = math.cos(rad)
    m[1][2] = math.sin(rad)
    m[2][1] = -math.sin(rad)
    m[2][2] = math.cos(rad)
    return m


def mk_rot_y(theta: float) -> Matrix:
    """Return a rotation by ``theta`` degrees about the y axis."""
    rad = math.radians(theta)
    m = Matrix.identity()
    m[0][0] = math.cos(rad)
    m[2][0] = math.sin(rad)
    m[0][2] = -math.sin(rad)
    m[2][2] = math.cos(rad)
    return m


def mk_rot_z(theta: float) -> Matrix:
    """Return a rotation by ``theta`` degrees about the z axis."""
    rad = math.radians(theta)
    m = Matrix.identity()
    m[0][0] = math.cos(rad)
    m[0][1] = math.sin(rad)
    m[1][0] = -math.sin(rad)
    m[1][1] = math.cos(rad)
    return m