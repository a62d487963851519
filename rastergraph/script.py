"""Interpreter for the drawing-script language."""

from __future__ import annotations

import argparse
import copy
import itertools
import subprocess
import tempfile
from collections.abc import Iterable, Iterator
from pathlib import Path

from .canvas import Canvas
from .color import Color
from .curves import bezier_curve, circle, hermite_curve
from .lighting import LightingParams
from .matrix import Matrix
from .shapes import add_box, add_sphere, add_torus
from .transform import mk_rot_x, mk_rot_y, mk_rot_z, mk_scale, mk_translate

DEFAULT_SIZE = 500
DEFAULT_RESOLUTION = 30
DEFAULT_COLOR = Color(255, 0, 0)

_ROTATIONS = {"x": mk_rot_x, "y": mk_rot_y, "z": mk_rot_z}


class _TokenStream:
    """Whitespace-separated tokens that remember which line they came from."""

    def __init__(self, text: str) -> None:
        self._tokens = [
            (number, token)
            for number, line in enumerate(text.splitlines())
            for token in line.split()
        ]
        self._pos = 0
        self._line = -1

    def __iter__(self) -> _TokenStream:
        return self

    def __next__(self) -> str:
        if self._pos >= len(self._tokens):
            raise StopIteration
        self._line, token = self._tokens[self._pos]
        self._pos += 1
        return token

    def skip_line(self) -> None:
        """Drop the remaining tokens of the line of the last token returned."""
        while self._pos < len(self._tokens) and self._tokens[self._pos][0] == self._line:
            self._pos += 1


def _take(tokens: Iterator[str], count: int, command: str) -> list[float]:
    values = list(itertools.islice(tokens, count))
    if len(values) < count:
        raise ValueError(f"{command} needs {count} arguments, got {len(values)}")
    return [float(v) for v in values]


class ScriptInterpreter:
    """Runs drawing commands against a canvas and a stack of transformations."""

    def __init__(
        self,
        width: int = DEFAULT_SIZE,
        height: int = DEFAULT_SIZE,
        resolution: int = DEFAULT_RESOLUTION,
        color: Color = DEFAULT_COLOR,
        params: LightingParams = LightingParams(),
    ) -> None:
        self.canvas = Canvas(width, height)
        self.resolution = resolution
        self.color = color
        self.params = params
        self.stack: list[Matrix] = [Matrix.identity()]

    def run(self, text: str) -> None:
        """Execute every command in ``text`` until it ends or ``quit`` is met."""
        tokens = _TokenStream(text)
        for command in tokens:
            if command == "quit":
                break
            self.execute(command, tokens)

    def _draw_edges(self, edges: Matrix) -> None:
        (self.stack[-1] * edges).draw_lines(self.canvas, self.color)

    def _draw_polygons(self, polygons: Matrix) -> None:
        (self.stack[-1] * polygons).draw_poly(self.canvas, self.params)

    def _transform(self, matrix: Matrix) -> None:
        self.stack[-1] = self.stack[-1] * matrix

    def execute(self, command: str, tokens: Iterable[str]) -> None:
        """Execute one command, taking its arguments from ``tokens``."""
        it = tokens if isinstance(tokens, _TokenStream) else iter(tokens)
        if command.startswith("#"):
            if isinstance(it, _TokenStream):
                it.skip_line()
            return
        temp = Matrix()
        match command:
            case "clear":
                self.canvas.clear()
            case "push":
                self.stack.append(copy.deepcopy(self.stack[-1]))
            case "pop":
                if len(self.stack) == 1:
                    raise IndexError("cannot pop the last transformation")
                self.stack.pop()
            case "scale":
                self._transform(mk_scale(*_take(it, 3, command)))
            case "move":
                self._transform(mk_translate(*_take(it, 3, command)))
            case "rotate":
                axis_token = next(it, None)
                if axis_token is None:
                    raise ValueError("rotate needs an axis and an angle")
                axis, rest = axis_token[0], axis_token[1:]
                theta = float(rest) if rest else _take(it, 1, command)[0]
                rotation = _ROTATIONS.get(axis)
                if rotation is not None:
                    self._transform(rotation(theta))
            case "line":
                temp.add_edge(*_take(it, 6, command))
                self._draw_edges(temp)
            case "circle":
                circle(temp, *_take(it, 4, command))
                self._draw_edges(temp)
            case "hermite":
                hermite_curve(temp, *_take(it, 8, command))
                self._draw_edges(temp)
            case "bezier":
                bezier_curve(temp, *_take(it, 8, command))
                self._draw_edges(temp)
            case "triangle":
                v = _take(it, 9, command)
                temp.add_poly(v[0:3], v[3:6], v[6:9])
                self._draw_polygons(temp)
            case "box":
                add_box(temp, *_take(it, 6, command))
                self._draw_polygons(temp)
            case "sphere":
                add_sphere(temp, *_take(it, 4, command), self.resolution)
                self._draw_polygons(temp)
            case "torus":
                add_torus(temp, *_take(it, 5, command), self.resolution)
                self._draw_polygons(temp)
            case "display":
                self.display()
            case "save":
                filename = next(it, None)
                if filename is None:
                    raise ValueError("save needs a file name")
                self.save(filename)
            case _:
                print(f"unknown command {command}")

    def display(self) -> None:
        """Show the canvas by piping it to the ``display`` viewer."""
        subprocess.run(["display"], input=self.canvas.to_ppm(), text=True, check=False)

    def save(self, filename: str) -> None:
        """Write the canvas to ``filename``; names not ending in .ppm go through pnmtopng."""
        target = Path(filename)
        ppm = self.canvas.to_ppm()
        if target.suffix.lower() == ".ppm":
            target.write_text(ppm)
            return
        with tempfile.TemporaryDirectory() as workdir:
            temp = Path(workdir) / "temp.ppm"
            temp.write_text(ppm)
            with target.open("wb") as out:
                subprocess.run(["pnmtopng", str(temp)], stdout=out, check=True)


def main(argv: list[str] | None = None) -> int:
    """Run a drawing script file."""
    parser = argparse.ArgumentParser(description="Render a drawing script.")
    parser.add_argument("script", nargs="?", default="script", help="script file to run")
    args = parser.parse_args(argv)
    text = Path(args.script).read_text()
    ScriptInterpreter().run(text)
    return 0