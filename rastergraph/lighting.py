"""Phong-style flat shading: ambient, diffuse and specular terms."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .color import Color
from .vector_math import Vec3, dot_prod, normalize

SPECULAR_EXPONENT = 7


def _scaled(c: Color, k: Sequence[float], factor: float = 1.0) -> Color:
    return Color(
        int(c.r * k[0] * factor),
        int(c.g * k[1] * factor),
        int(c.b * k[2] * factor),
    )


def get_amb(camb: Color, kamb: Sequence[float]) -> Color:
    """Ambient term: ambient colour scaled by the ambient reflection constants."""
    return _scaled(camb, kamb)


def get_diff(
    clight: Color, light: Sequence[float], kdiff: Sequence[float], norm: Sequence[float]
) -> Color:
    """Diffuse term for unit vectors ``light`` and ``norm``."""
    return _scaled(clight, kdiff, dot_prod(norm, light))


def get_spec(
    clight: Color,
    light: Sequence[float],
    view: Sequence[float],
    kspec: Sequence[float],
    norm: Sequence[float],
) -> Color:
    """Specular term for unit vectors ``light``, ``view`` and ``norm``."""
    cf = 2 * dot_prod(norm, light)
    reflected = (
        norm[0] * cf - light[0],
        norm[1] * cf - light[1],
        norm[2] * cf - light[2],
    )
    cosin = dot_prod(reflected, view) ** SPECULAR_EXPONENT
    return _scaled(clight, kspec, cosin)


def limit(c: Color) -> Color:
    """Clamp every channel to the range 0..255."""
    return Color(*(min(max(0, v), 255) for v in (c.r, c.g, c.b)))


def get_lighting(
    camb: Color,
    clight: Sequence[Color],
    light: Sequence[Sequence[float]],
    view: Sequence[float],
    norm: Sequence[float],
    kamb: Sequence[float],
    kdiff: Sequence[float],
    kspec: Sequence[float],
) -> Color:
    """Return the clamped colour of a surface with normal ``norm``."""
    lights = [normalize(l) for l in light]
    view_n = normalize(view)
    norm_n = normalize(norm)
    amb = limit(get_amb(camb, kamb))
    r, g, b = amb.r, amb.g, amb.b
    for source, direction in zip(clight, lights):
        diff = limit(get_diff(source, direction, kdiff, norm_n))
        spec = limit(get_spec(source, direction, view_n, kspec, norm_n))
        r += diff.r + spec.r
        g += diff.g + spec.g
        b += diff.b + spec.b
    return limit(Color(r, g, b))


@dataclass(frozen=True)
class LightingParams:
    """Light sources, viewer direction and reflection constants of a scene."""

    camb: Color = Color(50, 50, 50)
    clight: tuple[Color, ...] = (Color(0, 255, 255),)
    light: tuple[Vec3, ...] = ((0.5, 0.75, 1.0),)
    view: Vec3 = (0.0, 0.0, 1.0)
    kamb: Vec3 = (0.2, 0.2, 0.2)
    kdiff: Vec3 = (0.6, 0.6, 0.6)
    kspec: Vec3 = (0.82, 0.82, 0.82)

    def shade(self, norm: Sequence[float]) -> Color:
        """Return the colour of a surface with normal ``norm`` under these lights."""
        return get_lighting(
            self.camb,
            self.clight,
            self.light,
            self.view,
            norm,
            self.kamb,
            self.kdiff,
            self.kspec,
        )