import pytest

from visiogeo.point import Point
from visiogeo.segment import Segment


def test_fields_are_kept():
    seg = Segment(7, 3, Point(1.0, 2.0), Point(3.0, 4.0), "red")
    assert seg.id == 7
    assert seg.original_id == 3
    assert seg.p1 == Point(1.0, 2.0)
    assert seg.p2 == Point(3.0, 4.0)
    assert seg.color == "red"


def test_default_and_missing_color_become_black():
    assert Segment(1, 1, Point(0, 0), Point(1, 1)).color == "black"
    assert Segment(1, 1, Point(0, 0), Point(1, 1), None).color == "black"


def test_long_color_is_truncated():
    seg = Segment(1, 1, Point(0, 0), Point(1, 1), "x" * 40)
    assert seg.color == "x" * 31


def test_from_points_copies_points():
    a = Point(0.0, 0.0)
    b = Point(2.0, 2.0)
    seg = Segment.from_points(5, 6, a, b, "blue")
    a.x = 100.0
    b.y = -100.0
    assert seg.p1 == Point(0.0, 0.0)
    assert seg.p2 == Point(2.0, 2.0)
    assert (seg.id, seg.original_id, seg.color) == (5, 6, "blue")


def test_length():
    seg = Segment(1, 1, Point(1.0, 1.0), Point(4.0, 5.0))
    assert seg.length() == pytest.approx(5.0)


def test_split_halves():
    seg = Segment(9, 2, Point(0.0, 0.0), Point(10.0, 0.0), "green")
    cut = Point(4.0, 0.0)
    first, second = seg.split(cut)
    assert first.p1 == seg.p1
    assert first.p2 == cut
    assert second.p1 == cut
    assert second.p2 == seg.p2
    assert first.length() + second.length() == pytest.approx(seg.length())
    for half in (first, second):
        assert (half.id, half.original_id, half.color) == (9, 2, "green")


def test_split_does_not_alias_cut_point():
    seg = Segment(1, 1, Point(0.0, 0.0), Point(2.0, 2.0))
    cut = Point(1.0, 1.0)
    first, second = seg.split(cut)
    cut.x = 50.0
    assert first.p2 == Point(1.0, 1.0)
    assert second.p1 == Point(1.0, 1.0)


def test_segments_compare_by_identity():
    a = Segment(1, 1, Point(0, 0), Point(1, 1))
    b = Segment(1, 1, Point(0, 0), Point(1, 1))
    assert a == a
    assert not (a == b)
    assert len({a, b}) == 2