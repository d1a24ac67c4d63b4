"""Active segment set for the angular visibility sweep.

Segments are kept in a plain binary search tree ordered by their distance
from the viewpoint along the ray at the sweep angle in force when each one
was inserted. Changing the angle does not reorder the tree, so the closest
segment is always found by scanning every stored segment.
"""

from __future__ import annotations

from collections.abc import Iterator

from visiogeo.geometry import compare_segments_along_ray, ray_segment_distance
from visiogeo.point import Point
from visiogeo.segment import Segment

# Segments farther than this along the current ray are never reported as first.
_FAR_AWAY = 1e18


class _Node:
    __slots__ = ("segment", "left", "right", "parent")

    def __init__(self, segment: Segment, parent: _Node | None = None) -> None:
        self.segment = segment
        self.left: _Node | None = None
        self.right: _Node | None = None
        self.parent = parent


def _minimum(node: _Node) -> _Node:
    while node.left is not None:
        node = node.left
    return node


def _successor(node: _Node) -> _Node | None:
    if node.right is not None:
        return _minimum(node.right)
    parent = node.parent
    while parent is not None and node is parent.right:
        node = parent
        parent = parent.parent
    return parent


class ActiveSegmentTree:
    """Segments currently crossed by the sweep ray, seen from ``origin``."""

    def __init__(self, origin: Point) -> None:
        if origin is None:
            raise TypeError("origin must be a Point, not None")
        self.origin = origin
        self.angle = 0.0
        self._root: _Node | None = None
        self._size = 0

    def set_angle(self, angle: float) -> None:
        """Set the current sweep angle, in radians."""
        self.angle = angle

    def _compare(self, seg1: Segment, seg2: Segment) -> int:
        if seg1 is seg2:
            return 0
        return compare_segments_along_ray(self.origin, self.angle, seg1, seg2)

    def _preorder(self) -> Iterator[_Node]:
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def _find(self, segment: Segment) -> _Node | None:
        return next((node for node in self._preorder() if node.segment is segment), None)

    def _transplant(self, old: _Node, new: _Node | None) -> None:
        if old.parent is None:
            self._root = new
        elif old is old.parent.left:
            old.parent.left = new
        else:
            old.parent.right = new
        if new is not None:
            new.parent = old.parent

    def insert(self, segment: Segment) -> None:
        """Add ``segment``, ordered by its distance along the current ray."""
        if segment is None:
            raise TypeError("segment must be a Segment, not None")

        parent: _Node | None = None
        current = self._root
        go_left = False
        while current is not None:
            parent = current
            go_left = self._compare(segment, current.segment) < 0
            current = current.left if go_left else current.right

        node = _Node(segment, parent)
        if parent is None:
            self._root = node
        elif go_left:
            parent.left = node
        else:
            parent.right = node
        self._size += 1

    def remove(self, segment: Segment) -> None:
        """Remove ``segment``; raise KeyError if it is not stored."""
        node = self._find(segment) if segment is not None else None
        if node is None:
            raise KeyError(segment)

        if node.left is None:
            self._transplant(node, node.right)
        elif node.right is None:
            self._transplant(node, node.left)
        else:
            successor = _minimum(node.right)
            if successor.parent is not node:
                self._transplant(successor, successor.right)
                successor.right = node.right
                successor.right.parent = successor
            self._transplant(node, successor)
            successor.left = node.left
            successor.left.parent = successor

        self._size -= 1

    def first(self) -> Segment | None:
        """The segment closest to the origin along the current ray.

        Returns None when the set is empty or no segment is hit.
        """
        closest: Segment | None = None
        best = _FAR_AWAY
        for node in self._preorder():
            distance = ray_segment_distance(self.origin, self.angle, node.segment)
            if distance < best:
                best = distance
                closest = node.segment
        return closest

    def next_after(self, segment: Segment) -> Segment | None:
        """The segment that follows ``segment`` in the tree order.

        Returns None when ``segment`` is last or not stored.
        """
        node = self._find(segment) if segment is not None else None
        if node is None:
            return None
        successor = _successor(node)
        return successor.segment if successor is not None else None

    def __len__(self) -> int:
        return self._size

    def __contains__(self, segment: object) -> bool:
        return any(node.segment is segment for node in self._preorder())