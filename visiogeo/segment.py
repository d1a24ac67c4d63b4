"""Line segments acting as barriers in the visibility sweep."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from visiogeo.point import Point

_MAX_COLOR_LENGTH = 31
_DEFAULT_COLOR = "black"


class VertexKind(enum.Enum):
    """Which end of a segment a sweep event refers to."""

    START = enum.auto()
    END = enum.auto()


@dataclass(eq=False)
class Segment:
    """A segment from ``p1`` to ``p2``.

    Segments compare by identity, so two segments with the same
    coordinates are still distinct barriers.
    """

    id: int
    original_id: int
    p1: Point
    p2: Point
    color: str | None = field(default=_DEFAULT_COLOR)

    def __post_init__(self) -> None:
        if self.color is None:
            self.color = _DEFAULT_COLOR
        else:
            self.color = self.color[:_MAX_COLOR_LENGTH]

    @classmethod
    def from_points(
        cls,
        id: int,
        original_id: int,
        p1: Point,
        p2: Point,
        color: str | None = _DEFAULT_COLOR,
    ) -> Segment:
        """Build a segment from copies of two points."""
        return cls(id, original_id, Point(p1.x, p1.y), Point(p2.x, p2.y), color)

    def length(self) -> float:
        """Length of the segment."""
        return self.p1.distance_to(self.p2)

    def split(self, point: Point) -> tuple[Segment, Segment]:
        """Split at ``point`` into ``(p1 -> point, point -> p2)``.

        Both halves keep this segment's ids and colour.
        """
        first = Segment.from_points(self.id, self.original_id, self.p1, point, self.color)
        second = Segment.from_points(self.id, self.original_id, point, self.p2, self.color)
        return first, second