# visiogeo

A small geometry toolkit for 2D scenes. It provides points and segments,
orientation and intersection tests, an active-segment structure for an
angular visibility sweep, and a scene model that reads `.geo` files and
writes SVG elements.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `visiogeo.point`: `Point(x, y)`, a mutable dataclass with `distance_to`,
  `angle_from(origin)` (the polar angle in `[0, 2π)`) and `almost_equals`
  (tolerance `1e-9`).
- `visiogeo.segment`: `Segment` and `VertexKind` (`START`, `END`). A segment has
  an `id`, an `original_id`, two end points `p1` and `p2`, and a `color`. The
  colour defaults to `"black"` and is cut to 31 characters. Segments compare by
  identity. A segment offers `length()` and `split(point)`. `split` returns two
  halves that keep the segment's ids and colour. Use
  `Segment.from_points(...)` to build a segment from copies of two points.
- `visiogeo.geometry`: `Orientation` (`COLLINEAR`, `CLOCKWISE`,
  `COUNTERCLOCKWISE`), `cross_product`, `orientation`, `orientation_coords`,
  `ray_segment_intersection` (returns a `Point` or `None`),
  `ray_segment_distance` (returns `math.inf` on a miss), `point_in_front`,
  `compare_segments_along_ray`, `point_in_polygon` (an even-odd test that takes
  vertices as `(x, y)` pairs or points) and `segments_intersect` (touching
  counts as intersecting).
- `visiogeo.shapes`: the dataclasses `Circle`, `Rectangle`, `Line`, `Text` (with
  `length()`) and `TextStyle`, plus the `ShapeKind` enum. Each shape class has a
  `kind` class attribute. A colour or text given as `None` raises `TypeError`.
- `visiogeo.active_segments`: `ActiveSegmentTree(origin)`. It holds the segments
  that the sweep ray crosses. It has `set_angle`, `insert`, `remove` (which
  raises `KeyError` for a segment that is not stored), `first`, `next_after`,
  `len()` and `in`. Each segment takes its place in the tree by its distance
  along the ray at the angle in force when it was inserted. Changing the angle
  does not reorder the tree. `first()` scans every segment and returns the
  closest one along the current ray, or `None` if no segment is hit.
- `visiogeo.sourcefile`: `SourceFile` and `read_file(path)`. They read a text
  file into `lines`, with the trailing newlines removed, and set `name` to the
  file's base name without its last extension. A file that cannot be opened
  raises `OSError`.
- `visiogeo.geo`: `Geo`, an ordered collection of shapes loaded from `.geo`
  files.

## The `.geo` format

Each line holds one command:

```
c <id> <x> <y> <r> <border> <fill>
r <id> <x> <y> <w> <h> <border> <fill>
l <id> <x1> <y1> <x2> <y2> <color>
t <id> <x> <y> <border> <fill> <anchor> <text...>
```

- The text anchor is one character. `m` gives an SVG `text-anchor` of
  `middle`, `e` or `f` gives `end`, and any other character gives `start`.
- `Geo.parse_line` ignores blank lines and unknown commands. It raises
  `ValueError` when a known command has missing or malformed fields.
- `Geo.read` adds nothing if the file cannot be opened.

## Example

```python
from visiogeo.geo import Geo
from visiogeo.point import Point

scene = Geo()
scene.read("scene.geo")

scene.clone_shape(1, 5.0, 5.0)   # the copy gets id 10001
scene.set_color(2, "red")
scene.remove_shape(3)

min_x, min_y, max_x, max_y = scene.bounding_box()
walls = scene.barriers()                      # lines with id >= 5000
screen = scene.blast_screen(Point(0.0, 0.0))  # four segments framing the scene

with open("scene.svg", "w") as out:
    scene.write_svg(out)
```

- `bounding_box()` of an empty scene is `(0, 0, 1000, 1000)`.
- `blast_screen` and `blast_screen_within` enlarge the box around the shapes
  and the centre by 10% on each side. On an axis where the box is flat they use
  50 units instead.
- `write_svg` writes only the shape elements. The caller writes the enclosing
  `<svg>` element.

## What it does not do

The package has no command-line program and does not process query files. It
supplies the building blocks of a visibility sweep (barriers, the blast screen,
ray tests and the active-segment tree). It does not compute a visibility
polygon itself.