"""
Tests for the structured text form of shapes
"""

import numpy as np
import pytest

from planegeom import Circle, Line, Point, format_shape, parse_shape


def test_point_text():
    assert str(Point(1, 2)) == "{'x':1.0,'y':2.0}"
    assert format_shape(Point(-0.5, 3)) == "{'x':-0.5,'y':3.0}"


def test_line_text():
    assert str(Line(0, 0, 1, 1)) == "{'x1':0.0,'y1':0.0,'x2':1.0,'y2':1.0}"


def test_circle_text():
    assert str(Circle(0, 0, 5)) == "{'cx':0.0,'cy':0.0,'r':5.0}"


def test_render_then_parse_gives_back_the_shape():
    shapes = [
        Point(0.1 + 0.2, -1e-300),
        Point(),
        Line(1.25, -2, 1e10, 3.141592653589793),
        Circle(-4, 7.5, 0.3333333333333333),
    ]
    for shape in shapes:
        parsed = parse_shape(format_shape(shape))
        assert type(parsed) is type(shape)
        assert parsed == shape


def test_translate_by_numpy_values_keeps_text_form():
    """NumPy scalars from points() are stored as plain floats"""
    dx, dy = Circle(0, 0, 1).points(4)[1]
    p = Point(2, 3).translate(dx, dy)
    assert type(p.x) is float and type(p.y) is float
    assert parse_shape(format_shape(p)) == p

    line = Line(0, 0, 1, 1).translate(np.float64(0.5), np.float32(2))
    assert format_shape(line) == "{'x1':0.5,'y1':2.0,'x2':1.5,'y2':3.0}"
    assert parse_shape(format_shape(line)) == line

    circle = Circle(0, 0, 1).translate(*np.array([1.25, -1.0]))
    assert parse_shape(format_shape(circle)) == circle


def test_parse_accepts_whitespace_and_ints():
    assert parse_shape("  {'x': 1, 'y': 2}\n") == Point(1, 2)
    assert parse_shape("{'r': 2, 'cx': 0, 'cy': 1}") == Circle(0, 1, 2)


@pytest.mark.parametrize("text", [
    "hello",
    "[1, 2]",
    "{'a': 1}",
    "{'x': 1}",
    "{'x': 'one', 'y': 2}",
    "{'x': True, 'y': 2}",
])
def test_parse_rejects_bad_records(text):
    with pytest.raises(ValueError):
        parse_shape(text)


def test_format_rejects_other_types():
    with pytest.raises(TypeError):
        format_shape((1.0, 2.0))
