"""A pixel grid with a z-buffer and line drawing."""

from __future__ import annotations

import math

from .color import Color

BACKGROUND = Color(255, 255, 255)
MAX_COLOR = 255


class Canvas:
    """Pixels indexed ``[x][y]`` with ``y`` growing upwards, plus a depth buffer."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("canvas dimensions must be positive")
        self.width = width
        self.height = height
        self.pixels: list[list[Color]] = []
        self.zbuffer: list[list[float]] = []
        self.clear()

    def clear(self) -> None:
        """Fill with the background colour and reset every depth to -infinity."""
        self.pixels = [[BACKGROUND] * self.height for _ in range(self.width)]
        self.zbuffer = [[-math.inf] * self.height for _ in range(self.width)]

    def in_bounds(self, x: int, y: int) -> bool:
        """Return whether ``(x, y)`` lies on the canvas."""
        return 0 <= x < self.width and 0 <= y < self.height

    def plot(self, x: int, y: int, z: float, color: Color) -> None:
        """Set a pixel if it is on the canvas and nearer than what is there."""
        if self.in_bounds(x, y) and z > self.zbuffer[x][y]:
            self.pixels[x][y] = color
            self.zbuffer[x][y] = z

    def draw_line(self, x0, y0, z0, x1, y1, z1, color: Color) -> None:
        """Draw a z-buffered line with Bresenham's algorithm."""
        x0, y0, z0, x1, y1, z1 = (int(v) for v in (x0, y0, z0, x1, y1, z1))
        dx = abs(x1 - x0)
        dy = abs(y1 - y0)
        d = 0
        if dx > dy:
            if x0 > x1:
                x0, x1, y0, y1, z0, z1 = x1, x0, y1, y0, z1, z0
            y = y0
            incr = 1 if y0 < y1 else -1
            z = float(z0)
            for x in range(x0, x1 + 1):
                self.plot(x, y, z, color)
                d += 2 * dy - dx
                if d > 0:
                    d -= dx
                    y += incr
                else:
                    d += dx
                if x < x1:
                    z = z0 + (x - x0 + 1) * (z1 - z0) / (x1 - x0)
        else:
            if y0 > y1:
                x0, x1, y0, y1, z0, z1 = x1, x0, y1, y0, z1, z0
            x = x0
            incr = 1 if x0 < x1 else -1
            z = float(z0)
            for y in range(y0, y1 + 1):
                self.plot(x, y, z, color)
                d += dy - 2 * dx
                if d > 0:
                    d -= dy
                else:
                    d += dy
                    x += incr
                if y < y1:
                    z = z0 + (y - y0 + 1) * (z1 - z0) / (y1 - y0)

    def to_ppm(self) -> str:
        """Return the image as plain PPM (P3) text, top row first."""
        lines = [f"P3\n{self.width} {self.height}\n{MAX_COLOR}\n"]
        for y in reversed(range(self.height)):
            row = "".join(
                f"{self.pixels[x][y].r} {self.pixels[x][y].g} {self.pixels[x][y].b} "
                for x in range(self.width)
            )
            lines.append(row + "\n")
        return "".join(lines)