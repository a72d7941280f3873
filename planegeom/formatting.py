"""
Structured text form of points, lines and circles

Each shape renders as a Python-literal record, e.g.

    {'x':1.0,'y':2.0}
    {'x1':0.0,'y1':0.0,'x2':1.0,'y2':1.0}
    {'cx':0.0,'cy':0.0,'r':5.0}

Floats are written with repr(), so parse_shape(format_shape(s)) == s for
finite coordinates.
"""

import ast

from .circles import Circle
from .lines import Line
from .points import Point

_FIELDS = {
    frozenset(("x", "y")): lambda f: Point(f["x"], f["y"]),
    frozenset(("x1", "y1", "x2", "y2")): lambda f: Line(f["x1"], f["y1"], f["x2"], f["y2"]),
    frozenset(("cx", "cy", "r")): lambda f: Circle(f["cx"], f["cy"], f["r"]),
}


def format_shape(shape):
    """
    Render a Point, Line or Circle as structured text

    Raises:
    -------
    TypeError
        If shape is not one of the three supported types
    """
    if not isinstance(shape, (Point, Line, Circle)):
        raise TypeError(f"Cannot format {type(shape).__name__}")
    return str(shape)


def parse_shape(text):
    """
    Parse the output of format_shape back into a shape

    The record's keys decide the type: x/y is a Point, x1/y1/x2/y2 a Line
    and cx/cy/r a Circle.

    Raises:
    -------
    ValueError
        If text is not a record with one of those key sets
    """
    try:
        fields = ast.literal_eval(text.strip())
    except (SyntaxError, ValueError) as e:
        raise ValueError(f"Not a shape record: {text!r}") from e
    if not isinstance(fields, dict):
        raise ValueError(f"Not a shape record: {text!r}")

    build = _FIELDS.get(frozenset(fields))
    if build is None:
        raise ValueError(f"Unknown shape fields: {sorted(fields)}")
    for key, value in fields.items():
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"Field {key!r} must be a number, got {value!r}")
    return build(fields)
