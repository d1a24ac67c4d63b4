"""Two-dimensional points used by the visibility computations."""

from __future__ import annotations

import math
from dataclasses import dataclass

EPSILON = 1e-9


@dataclass
class Point:
    """A mutable point in the plane."""

    x: float
    y: float

    def distance_to(self, other: Point) -> float:
        """Euclidean distance between this point and ``other``."""
        return math.hypot(other.x - self.x, other.y - self.y)

    def angle_from(self, origin: Point) -> float:
        """Polar angle of this point seen from ``origin``, in ``[0, 2*pi)``."""
        angle = math.atan2(self.y - origin.y, self.x - origin.x)
        if angle < 0:
            angle += 2.0 * math.pi
        return angle

    def almost_equals(self, other: Point) -> bool:
        """True when both coordinates differ by less than the tolerance."""
        return abs(self.x - other.x) < EPSILON and abs(self.y - other.y) < EPSILON