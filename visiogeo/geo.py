"""A collection of shapes read from a geometry (.geo) file."""

from __future__ import annotations

import dataclasses
import re
import sys
from collections.abc import Iterator
from typing import TextIO, Union

from visiogeo.point import Point
from visiogeo.segment import Segment
from visiogeo.shapes import Circle, Line, Rectangle, Text

Shape = Union[Circle, Rectangle, Line, Text]

# Lines with an id at or above this value are barriers placed by queries.
BARRIER_MIN_ID = 5000
# Clones get the id of the original shape plus this offset.
CLONE_ID_OFFSET = 10000
# Blast screen margin as a fraction of the box size.
_MARGIN_RATIO = 0.10
# Margin used when the box is flat along an axis.
_FLAT_MARGIN = 50.0
_EMPTY_BOX = (0.0, 0.0, 1000.0, 1000.0)

_TEXT_PATTERN = re.compile(
    r"\s*\S+\s+(\S+)\s+(\S+)\s+(\S+)\s+(\S+)\s+(\S+)\s+(\S)(.*)", re.DOTALL
)

_SVG_ANCHORS = {"m": "middle", "e": "end", "f": "end"}


def _fields(line: str, command: str, count: int) -> list[str]:
    tokens = line.split()[1:]
    if len(tokens) < count:
        raise ValueError(f"'{command}' needs {count} fields: {line.rstrip()!r}")
    return tokens[:count]


def _parse_circle(line: str) -> Circle:
    sid, x, y, r, border, fill = _fields(line, "c", 6)
    return Circle(int(sid), float(x), float(y), float(r), border, fill)


def _parse_rectangle(line: str) -> Rectangle:
    sid, x, y, w, h, border, fill = _fields(line, "r", 7)
    return Rectangle(int(sid), float(x), float(y), float(w), float(h), border, fill)


def _parse_line(line: str) -> Line:
    sid, x1, y1, x2, y2, color = _fields(line, "l", 6)
    return Line(int(sid), float(x1), float(y1), float(x2), float(y2), color)


def _parse_text(line: str) -> Text:
    match = _TEXT_PATTERN.match(line)
    if match is None:
        raise ValueError(f"'t' needs id, x, y, colours and anchor: {line.rstrip()!r}")
    sid, x, y, border, fill, anchor, rest = match.groups()
    content = rest.lstrip(" \t")
    if content.endswith("\n"):
        content = content[:-1]
    return Text(int(sid), float(x), float(y), border, fill, anchor, content)


_PARSERS = {
    "c": _parse_circle,
    "r": _parse_rectangle,
    "l": _parse_line,
    "t": _parse_text,
}


def _extent(shape: object) -> tuple[float, float, float, float] | None:
    if isinstance(shape, Circle):
        return (
            shape.x - shape.radius,
            shape.y - shape.radius,
            shape.x + shape.radius,
            shape.y + shape.radius,
        )
    if isinstance(shape, Rectangle):
        return shape.x, shape.y, shape.x + shape.width, shape.y + shape.height
    if isinstance(shape, Line):
        return (
            min(shape.x1, shape.x2),
            min(shape.y1, shape.y2),
            max(shape.x1, shape.x2),
            max(shape.y1, shape.y2),
        )
    if isinstance(shape, Text):
        return shape.x, shape.y, shape.x, shape.y
    return None


def _moved(shape: Shape, new_id: int, dx: float, dy: float) -> Shape:
    if isinstance(shape, Line):
        return dataclasses.replace(
            shape,
            id=new_id,
            x1=shape.x1 + dx,
            y1=shape.y1 + dy,
            x2=shape.x2 + dx,
            y2=shape.y2 + dy,
        )
    return dataclasses.replace(shape, id=new_id, x=shape.x + dx, y=shape.y + dy)


def _svg_element(shape: object) -> str | None:
    if isinstance(shape, Circle):
        return (
            f'<circle cx="{shape.x:.2f}" cy="{shape.y:.2f}" r="{shape.radius:.2f}" '
            f'stroke="{shape.border_color}" fill="{shape.fill_color}" stroke-width="1" '
            'fill-opacity="0.6" stroke-opacity="0.6" />\n'
        )
    if isinstance(shape, Rectangle):
        return (
            f'<rect x="{shape.x:.2f}" y="{shape.y:.2f}" width="{shape.width:.2f}" '
            f'height="{shape.height:.2f}" stroke="{shape.border_color}" '
            f'fill="{shape.fill_color}" stroke-width="1" fill-opacity="0.6" '
            'stroke-opacity="0.6" />\n'
        )
    if isinstance(shape, Line):
        return (
            f'<line x1="{shape.x1:.2f}" y1="{shape.y1:.2f}" x2="{shape.x2:.2f}" '
            f'y2="{shape.y2:.2f}" stroke="{shape.color}" stroke-width="1" '
            'stroke-opacity="0.6" />\n'
        )
    if isinstance(shape, Text):
        anchor = _SVG_ANCHORS.get(shape.anchor, "start")
        return (
            f'<text x="{shape.x:.2f}" y="{shape.y:.2f}" stroke="{shape.border_color}" '
            f'fill="{shape.fill_color}" text-anchor="{anchor}" fill-opacity="0.6" '
            f'stroke-opacity="0.6">{shape.text}</text>\n'
        )
    return None


def _screen(min_x: float, min_y: float, max_x: float, max_y: float) -> list[Segment]:
    width = max_x - min_x
    height = max_y - min_y
    dx = width * _MARGIN_RATIO if width > 0 else _FLAT_MARGIN
    dy = height * _MARGIN_RATIO if height > 0 else _FLAT_MARGIN
    min_x -= dx
    min_y -= dy
    max_x += dx
    max_y += dy
    corners = [
        Point(min_x, min_y),
        Point(max_x, min_y),
        Point(max_x, max_y),
        Point(min_x, max_y),
    ]
    return [
        Segment.from_points(-1, -1, start, end, "none")
        for start, end in zip(corners, corners[1:] + corners[:1])
    ]


class Geo:
    """Shapes in the order they were read or added."""

    def __init__(self) -> None:
        self.shapes: list[Shape] = []

    def __iter__(self) -> Iterator[Shape]:
        return iter(self.shapes)

    def __len__(self) -> int:
        return len(self.shapes)

    def read(self, path) -> None:
        """Add every shape described in the file at ``path``.

        A file that cannot be opened adds nothing.
        """
        try:
            with open(path, encoding="utf-8", newline="") as handle:
                content = handle.read()
        except OSError:
            return
        for line in content.split("\n"):
            self.parse_line(line)

    def parse_line(self, line: str) -> Shape | None:
        """Add the shape described by one line and return it.

        Blank lines and unknown commands add nothing and return None;
        a known command with missing or bad fields raises ValueError.
        """
        tokens = line.split(maxsplit=1)
        if not tokens:
            return None
        parser = _PARSERS.get(tokens[0])
        if parser is None:
            return None
        shape = parser(line)
        self.shapes.append(shape)
        return shape

    def write_svg(self, out: TextIO) -> None:
        """Write one SVG element per shape to the text stream ``out``."""
        for shape in self.shapes:
            element = _svg_element(shape)
            if element is not None:
                out.write(element)

    def barriers(self) -> list[Segment]:
        """Segments for every line whose id marks it as a barrier."""
        return [
            Segment(
                shape.id,
                shape.id,
                Point(shape.x1, shape.y1),
                Point(shape.x2, shape.y2),
                "black",
            )
            for shape in self.shapes
            if isinstance(shape, Line) and shape.id >= BARRIER_MIN_ID
        ]

    def bounding_box(self) -> tuple[float, float, float, float]:
        """``(min_x, min_y, max_x, max_y)`` of all shapes.

        An empty collection has the box ``(0, 0, 1000, 1000)``.
        """
        if not self.shapes:
            return _EMPTY_BOX
        big = sys.float_info.max
        min_x, min_y, max_x, max_y = big, big, -big, -big
        for shape in self.shapes:
            extent = _extent(shape)
            if extent is None:
                continue
            x1, y1, x2, y2 = extent
            min_x = min(min_x, x1)
            min_y = min(min_y, y1)
            max_x = max(max_x, x2)
            max_y = max(max_y, y2)
        return min_x, min_y, max_x, max_y

    def _box_around(self, center: Point) -> tuple[float, float, float, float]:
        if self.shapes:
            min_x, min_y, max_x, max_y = self.bounding_box()
        else:
            min_x = max_x = center.x
            min_y = max_y = center.y
        return (
            min(min_x, center.x),
            min(min_y, center.y),
            max(max_x, center.x),
            max(max_y, center.y),
        )

    def blast_screen(self, center: Point) -> list[Segment]:
        """Four segments enclosing all shapes and ``center`` with a margin."""
        return _screen(*self._box_around(center))

    def blast_screen_within(
        self,
        center: Point,
        min_x: float,
        min_y: float,
        max_x: float,
        max_y: float,
    ) -> list[Segment]:
        """Like :meth:`blast_screen`, but never smaller than the given limits."""
        box_min_x, box_min_y, box_max_x, box_max_y = self._box_around(center)
        return _screen(
            min(box_min_x, min_x),
            min(box_min_y, min_y),
            max(box_max_x, max_x),
            max(box_max_y, max_y),
        )

    def _find(self, shape_id: int) -> Shape | None:
        return next((shape for shape in self.shapes if shape.id == shape_id), None)

    def remove_shape(self, shape_id: int) -> Shape | None:
        """Remove the first shape with ``shape_id`` and return it, or None."""
        shape = self._find(shape_id)
        if shape is not None:
            self.shapes.remove(shape)
        return shape

    def set_color(self, shape_id: int, color: str) -> Shape | None:
        """Paint the first shape with ``shape_id`` in ``color``.

        Returns the shape, or None when no shape has that id.
        """
        shape = self._find(shape_id)
        if shape is None or color is None:
            return shape
        if isinstance(shape, Line):
            shape.color = color
        else:
            shape.border_color = color
            shape.fill_color = color
        return shape

    def clone_shape(self, shape_id: int, dx: float, dy: float) -> Shape | None:
        """Append a copy of a shape moved by ``(dx, dy)`` and return it.

        The copy's id is the original id plus 10000. Returns None when no
        shape has ``shape_id``.
        """
        shape = self._find(shape_id)
        if shape is None:
            return None
        clone = _moved(shape, shape_id + CLONE_ID_OFFSET, dx, dy)
        self.shapes.append(clone)
        return clone