"""
planegeom

Small 2D geometry toolkit: points, lines and circles as plain values, with
line-line intersection classification and circle-circle intersection.

# Quick Start
```python
from planegeom import Circle, Intersection, Line

kind, point = Line(0, 0, 2, 2).intersection(Line(0, 2, 2, 0))
assert kind is Intersection.INTERSECTING   # point == Point(1.0, 1.0)

found, p1, p2 = Circle(0, 0, 5).intersection(Circle(8, 0, 5))
# found is True, p1 == Point(4.0, 3.0), p2 == Point(4.0, -3.0)
```

# Numeric policy
Classification compares with exact float equality by default. Use
``PlaneGeometry.configure(tolerance=1e-9)`` or pass ``policy=NumericPolicy(...)``
to an intersection call to change that, or to enable strict validation.
"""

import logging

from .core import NumericPolicy, PlaneGeometry
from .exceptions import DegenerateGeometryError, GeometryError
from .points import Point
from .lines import Intersection, Line, LineIntersection
from .circles import Circle, CircleIntersection
from .formatting import format_shape, parse_shape

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    "NumericPolicy",
    "PlaneGeometry",
    "GeometryError",
    "DegenerateGeometryError",
    "Point",
    "Line",
    "Intersection",
    "LineIntersection",
    "Circle",
    "CircleIntersection",
    "format_shape",
    "parse_shape",
]
