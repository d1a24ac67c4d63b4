"""Drawable shapes read from geometry files."""

from __future__ import annotations

import enum
from dataclasses import dataclass, fields
from typing import ClassVar


class ShapeKind(enum.Enum):
    """The kinds of element a geometry file can describe."""

    CIRCLE = enum.auto()
    RECTANGLE = enum.auto()
    LINE = enum.auto()
    TEXT = enum.auto()
    TEXT_STYLE = enum.auto()


def _require_strings(obj: object, *names: str) -> None:
    for name in names:
        if getattr(obj, name) is None:
            raise TypeError(f"{type(obj).__name__}.{name} must be a string, not None")


@dataclass
class Circle:
    """A circle given by its centre, radius and colours."""

    kind: ClassVar[ShapeKind] = ShapeKind.CIRCLE

    id: int
    x: float
    y: float
    radius: float
    border_color: str
    fill_color: str

    def __post_init__(self) -> None:
        _require_strings(self, "border_color", "fill_color")


@dataclass
class Rectangle:
    """A rectangle anchored at ``(x, y)`` with a width, height and colours."""

    kind: ClassVar[ShapeKind] = ShapeKind.RECTANGLE

    id: int
    x: float
    y: float
    width: float
    height: float
    border_color: str
    fill_color: str

    def __post_init__(self) -> None:
        _require_strings(self, "border_color", "fill_color")


@dataclass
class Line:
    """A straight line from ``(x1, y1)`` to ``(x2, y2)``."""

    kind: ClassVar[ShapeKind] = ShapeKind.LINE

    id: int
    x1: float
    y1: float
    x2: float
    y2: float
    color: str

    def __post_init__(self) -> None:
        _require_strings(self, "color")


@dataclass
class Text:
    """A text label anchored at ``(x, y)``.

    ``anchor`` is a single character: ``i`` (start), ``m`` (middle)
    or ``f``/``e`` (end).
    """

    kind: ClassVar[ShapeKind] = ShapeKind.TEXT

    id: int
    x: float
    y: float
    border_color: str
    fill_color: str
    anchor: str
    text: str

    def __post_init__(self) -> None:
        _require_strings(self, "border_color", "fill_color", "text")

    def length(self) -> int:
        """Number of characters in the label."""
        return len(self.text)


@dataclass
class TextStyle:
    """Font settings applied to text labels."""

    kind: ClassVar[ShapeKind] = ShapeKind.TEXT_STYLE

    font_family: str
    font_weight: str
    font_size: int

    def __post_init__(self) -> None:
        _require_strings(self, "font_family")


__all__ = [
    "ShapeKind",
    "Circle",
    "Rectangle",
    "Line",
    "Text",
    "TextStyle",
]

# Keep ``fields`` referenced for introspection helpers that list shape attributes.
_SHAPE_FIELDS = {
    cls: tuple(f.name for f in fields(cls))
    for cls in (Circle, Rectangle, Line, Text, TextStyle)
}