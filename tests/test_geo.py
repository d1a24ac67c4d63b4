import io

import pytest

from visiogeo.geo import Geo
from visiogeo.point import Point
from visiogeo.shapes import Circle, Line, Rectangle, Text

SAMPLE = (
    "c 1 10 10 5 red blue\n"
    "r 2 20 20 10 5 green yellow\n"
    "l 3 0 0 100 100 black\n"
    "t 4 50 50 purple orange i HelloTest\n"
)


@pytest.fixture
def sample_geo(tmp_path):
    path = tmp_path / "test_sample.geo"
    path.write_text(SAMPLE, encoding="utf-8")
    geo = Geo()
    geo.read(path)
    return geo


def _coords(segment):
    return (segment.p1.x, segment.p1.y, segment.p2.x, segment.p2.y)


def test_lifecycle_read_and_remove(sample_geo):
    assert len(sample_geo.shapes) == 4
    sample_geo.remove_shape(1)
    assert len(sample_geo.shapes) == 3
    assert [s.id for s in sample_geo.shapes] == [2, 3, 4]


def test_read_values(sample_geo):
    circle, rect, line, text = sample_geo.shapes
    assert circle == Circle(1, 10.0, 10.0, 5.0, "red", "blue")
    assert rect == Rectangle(2, 20.0, 20.0, 10.0, 5.0, "green", "yellow")
    assert line == Line(3, 0.0, 0.0, 100.0, 100.0, "black")
    assert text == Text(4, 50.0, 50.0, "purple", "orange", "i", "HelloTest")


def test_read_missing_file_adds_nothing(tmp_path):
    geo = Geo()
    geo.read(tmp_path / "missing.geo")
    assert geo.shapes == []


def test_parse_text_keeps_inner_spaces():
    geo = Geo()
    shape = geo.parse_line("t 7 1 2 a b m   Hello World \n")
    assert shape.anchor == "m"
    assert shape.text == "Hello World "


def test_parse_text_without_content():
    geo = Geo()
    shape = geo.parse_line("t 8 1 2 a b e\n")
    assert shape.text == ""
    assert shape.anchor == "e"


def test_parse_ignores_blank_and_unknown():
    geo = Geo()
    assert geo.parse_line("") is None
    assert geo.parse_line("   \n") is None
    assert geo.parse_line("ts serif n 12") is None
    assert len(geo) == 0


def test_parse_malformed_raises():
    geo = Geo()
    with pytest.raises(ValueError):
        geo.parse_line("c 1 2")
    with pytest.raises(ValueError):
        geo.parse_line("t 1 2 3 a")
    assert len(geo) == 0


def test_write_svg(sample_geo):
    out = io.StringIO()
    sample_geo.write_svg(out)
    lines = out.getvalue().splitlines()
    assert lines[0] == (
        '<circle cx="10.00" cy="10.00" r="5.00" stroke="red" fill="blue" '
        'stroke-width="1" fill-opacity="0.6" stroke-opacity="0.6" />'
    )
    assert lines[1] == (
        '<rect x="20.00" y="20.00" width="10.00" height="5.00" stroke="green" '
        'fill="yellow" stroke-width="1" fill-opacity="0.6" stroke-opacity="0.6" />'
    )
    assert lines[2] == (
        '<line x1="0.00" y1="0.00" x2="100.00" y2="100.00" stroke="black" '
        'stroke-width="1" stroke-opacity="0.6" />'
    )
    assert lines[3] == (
        '<text x="50.00" y="50.00" stroke="purple" fill="orange" '
        'text-anchor="start" fill-opacity="0.6" stroke-opacity="0.6">HelloTest</text>'
    )


@pytest.mark.parametrize("anchor,expected", [("m", "middle"), ("e", "end"), ("f", "end")])
def test_write_svg_anchors(anchor, expected):
    geo = Geo()
    geo.parse_line(f"t 1 0 0 a b {anchor} x")
    out = io.StringIO()
    geo.write_svg(out)
    assert f'text-anchor="{expected}"' in out.getvalue()


def test_bounding_box(sample_geo):
    assert sample_geo.bounding_box() == (0.0, 0.0, 100.0, 100.0)


def test_bounding_box_empty():
    assert Geo().bounding_box() == (0.0, 0.0, 1000.0, 1000.0)


def test_barriers_only_high_ids():
    geo = Geo()
    geo.parse_line("l 3 0 0 1 1 red")
    geo.parse_line("l 5000 1 2 3 4 red")
    geo.parse_line("r 6000 0 0 1 1 a b")
    barriers = geo.barriers()
    assert len(barriers) == 1
    seg = barriers[0]
    assert (seg.id, seg.original_id, seg.color) == (5000, 5000, "black")
    assert _coords(seg) == (1.0, 2.0, 3.0, 4.0)


def test_blast_screen(sample_geo):
    screen = sample_geo.blast_screen(Point(50, 50))
    assert [_coords(s) for s in screen] == [
        (-10.0, -10.0, 110.0, -10.0),
        (110.0, -10.0, 110.0, 110.0),
        (110.0, 110.0, -10.0, 110.0),
        (-10.0, 110.0, -10.0, -10.0),
    ]
    assert all(s.id == -1 and s.color == "none" for s in screen)


def test_blast_screen_empty_geo():
    screen = Geo().blast_screen(Point(5, 5))
    assert _coords(screen[0]) == (-45.0, -45.0, 55.0, -45.0)
    assert _coords(screen[2]) == (55.0, 55.0, -45.0, 55.0)


def test_blast_screen_within_limits():
    screen = Geo().blast_screen_within(Point(0, 0), -100, -100, 100, 100)
    assert _coords(screen[0]) == (-120.0, -120.0, 120.0, -120.0)
    assert _coords(screen[1]) == (120.0, -120.0, 120.0, 120.0)


def test_set_color(sample_geo):
    sample_geo.set_color(1, "white")
    sample_geo.set_color(3, "gold")
    circle, _, line, _ = sample_geo.shapes
    assert (circle.border_color, circle.fill_color) == ("white", "white")
    assert line.color == "gold"
    assert sample_geo.set_color(99, "red") is None


def test_clone_shape(sample_geo):
    clone = sample_geo.clone_shape(3, 5, -5)
    assert len(sample_geo) == 5
    assert sample_geo.shapes[-1] is clone
    assert clone == Line(10003, 5.0, -5.0, 105.0, 95.0, "black")
    original = sample_geo.shapes[2]
    assert (original.x1, original.y1) == (0.0, 0.0)


def test_clone_text_and_missing(sample_geo):
    clone = sample_geo.clone_shape(4, 1, 2)
    assert clone == Text(10004, 51.0, 52.0, "purple", "orange", "i", "HelloTest")
    assert sample_geo.clone_shape(42, 1, 1) is None
    assert len(sample_geo) == 5


def test_remove_missing_returns_none(sample_geo):
    assert sample_geo.remove_shape(42) is None
    assert len(sample_geo) == 4