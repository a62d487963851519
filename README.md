# rastergraph

rastergraph is a small software rasterizer. It reads a plain-text drawing
script and draws lines, circles, Bézier and Hermite curves and flat-shaded
3D shapes (triangles, boxes, spheres and tori) onto a 500×500 canvas with a
z-buffer. Shapes are lit with ambient, diffuse and specular terms. Images
are written as plain PPM (P3) text.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Running a script

```
rastergraph myscript
```

If no file name is given, the command reads a file named `script` in the
current directory. It runs the commands in order and stops at `quit` or at
the end of the file.

## Script commands

Each command is a word followed by its arguments, separated by whitespace.
A word that starts with `#` makes the rest of its line a comment.

| Command | Arguments | Effect |
|---|---|---|
| `clear` | | Fills the canvas with white and resets the z-buffer |
| `push` | | Copies the current transformation onto the stack |
| `pop` | | Drops the current transformation (popping the last one is an error) |
| `move` | `tx ty tz` | Applies a translation |
| `scale` | `sx sy sz` | Applies a scaling |
| `rotate` | `axis degrees` | Rotates about `x`, `y` or `z`; any other axis is ignored |
| `line` | `x0 y0 z0 x1 y1 z1` | Draws a line |
| `circle` | `cx cy cz r` | Draws a circle in the plane `z = cz` |
| `hermite` | `x0 y0 x1 y1 rx0 ry0 rx1 ry1` | Draws a Hermite curve from end points and tangents |
| `bezier` | `x0 y0 x1 y1 x2 y2 x3 y3` | Draws a cubic Bézier curve |
| `triangle` | `x0 y0 z0 x1 y1 z1 x2 y2 z2` | Draws a shaded triangle |
| `box` | `x y z w h d` | Draws a shaded box whose front top left corner is `(x, y, z)` |
| `sphere` | `x y z r` | Draws a shaded sphere |
| `torus` | `x y z r1 r2` | Draws a shaded torus (`r1` tube radius, `r2` distance to the tube) |
| `display` | | Pipes the image to the external `display` viewer |
| `save` | `filename` | Writes the image; see below |
| `quit` | | Stops the script |

Lines and curves are drawn in red. Only triangles that face the viewer
(positive z in their normal) are filled. Spheres and tori are built from 30
slices of 30 segments.

`save` writes PPM text directly when the file name ends in `.ppm`. For any
other name it writes a temporary PPM file and converts it with the external
`pnmtopng` program, whose output goes to the named file.

An unknown command is printed as `unknown command <name>` and the script
goes on. A command with too few arguments raises `ValueError`.

## Using it from Python

```python
from rastergraph.canvas import Canvas
from rastergraph.color import Color
from rastergraph.matrix import Matrix
from rastergraph.lighting import LightingParams
from rastergraph.shapes import add_sphere
from rastergraph.transform import mk_translate

canvas = Canvas(500, 500)
edges = Matrix()
edges.add_edge(0, 0, 0, 499, 499, 0)
edges.draw_lines(canvas, Color(255, 0, 0))

polys = Matrix()
add_sphere(polys, 0, 0, 0, 100, 30)
(mk_translate(250, 250, 0) * polys).draw_poly(canvas, LightingParams())

with open("out.ppm", "w") as fh:
    fh.write(canvas.to_ppm())
```

The modules:

- `rastergraph.color`: `Color`, a frozen RGB value.
- `rastergraph.vector_math`: `normalize`, `dot_prod`, `normal_surface`.
- `rastergraph.lighting`: `get_amb`, `get_diff`, `get_spec`, `limit`,
  `get_lighting`, and `LightingParams`, whose defaults are an ambient
  colour of (50, 50, 50), one light of colour (0, 255, 255) from direction
  (0.5, 0.75, 1), a view along (0, 0, 1) and reflection constants 0.2,
  0.6 and 0.82. Its `shade(norm)` method returns the colour for a normal.
- `rastergraph.canvas`: `Canvas`, a pixel grid indexed `[x][y]` with `y`
  growing upwards, with `clear`, `plot`, `draw_line` (Bresenham, depth
  tested) and `to_ppm`.
- `rastergraph.matrix`: `Matrix`, a list of homogeneous point columns with
  `add_point`, `add_edge`, `add_poly`, `draw_lines`, `draw_poly`,
  multiplication with `*`, and `Matrix.identity()`.
- `rastergraph.transform`: `mk_translate`, `mk_scale`, `mk_rot_x`,
  `mk_rot_y`, `mk_rot_z` (angles in degrees).
- `rastergraph.curves`: `circle`, `bezier_curve`, `hermite_curve`,
  `polynomial`.
- `rastergraph.shapes`: `add_box`, `add_sphere`, `add_torus`,
  `gen_sphere`, `gen_torus`.
- `rastergraph.script`: `ScriptInterpreter`, whose `run(text)` method
  runs script text, and `main`, the command-line entry point.

## What it does not do

rastergraph has no window of its own and no PNG encoder: `display` and
saving to non-PPM names rely on the external `display` and `pnmtopng`
programs being installed. There is no perspective projection; shapes are
drawn by dropping the z coordinate, which is used only for depth testing.