"""
Python interface for lines

A Line stores two endpoints but, for intersection purposes, stands for the
infinite line through them. Segment-bounded intersection is available with
``Line.intersection(other, segment=True)``.
"""

import logging
import math
from collections import namedtuple
from enum import Enum

from .core import PlaneGeometry
from .exceptions import DegenerateGeometryError
from .points import Point

logger = logging.getLogger(__name__)


class Intersection(Enum):
    """Classification of a line-line intersection"""

    PARALLEL = "parallel"
    COINCIDENT = "coincident"
    # Only reported for segment-bounded intersection
    NO_INTERSECTION = "no_intersection"
    INTERSECTING = "intersecting"


LineIntersection = namedtuple("LineIntersection", ["kind", "point"])
LineIntersection.__doc__ = """Result of Line.intersection: an Intersection and a Point or None"""


class Line:
    """Line through two points

    Accepts ``Line()``, ``Line(x1, y1, x2, y2)`` or ``Line(p1, p2)`` where
    p1 and p2 are Points or array-like (x, y) pairs. Endpoints are copied.
    A zero-length line is allowed; its intersections are undefined.
    """

    __slots__ = ("p1", "p2")

    def __init__(self, *args):
        if len(args) == 0:
            self.p1 = Point()
            self.p2 = Point()
        elif len(args) == 2:
            self.p1 = Point.from_array(args[0])
            self.p2 = Point.from_array(args[1])
        elif len(args) == 4:
            self.p1 = Point(args[0], args[1])
            self.p2 = Point(args[2], args[3])
        else:
            raise ValueError(
                f"Line takes (x1, y1, x2, y2), (p1, p2) or no arguments, got {len(args)} arguments")

    def copy(self):
        return Line(self.p1, self.p2)

    def mid_x(self):
        return (self.p2.x + self.p1.x) / 2.0

    def mid_y(self):
        return (self.p2.y + self.p1.y) / 2.0

    def dx(self):
        """X component of the direction vector p2 - p1"""
        return self.p2.x - self.p1.x

    def dy(self):
        """Y component of the direction vector p2 - p1"""
        return self.p2.y - self.p1.y

    def length(self):
        """Distance between the two endpoints"""
        return self.p1.distance(self.p2)

    def translate(self, dx, dy):
        """
        Move both endpoints in place

        Returns:
        --------
        Line
            This line, so that calls can be chained
        """
        self.p1.translate(dx, dy)
        self.p2.translate(dx, dy)
        return self

    def _check_degenerate(self, policy):
        policy.check_finite(self.p1.x, self.p1.y, self.p2.x, self.p2.y)
        if policy.strict and self.dx() == 0.0 and self.dy() == 0.0:
            raise DegenerateGeometryError(f"Zero-length line: {self}")

    def intersection(self, other, segment=False, policy=None):
        """
        Intersect this line with another one

        Both lines are treated as infinite unless ``segment`` is True.
        Zero tests on the determinant go through the NumericPolicy, which
        by default compares against exactly 0.0. With a tolerance, the
        determinant is divided by both line lengths first so the tolerance
        does not depend on the size of the lines.

        Parameters:
        -----------
        other : Line
            The other line
        segment : bool
            Restrict both lines to the segments between their endpoints.
            Only in this mode can the result be NO_INTERSECTION.
        policy : NumericPolicy, optional
            Overrides the package default

        Returns:
        --------
        LineIntersection
            (kind, point) where point is set only for INTERSECTING

        Examples:
        ---------
        >>> Line(0, 0, 1, 1).intersection(Line(0, 1, 1, 0))
        LineIntersection(kind=<Intersection.INTERSECTING: 'intersecting'>, point=Point(0.5, 0.5))
        """
        policy = PlaneGeometry.resolve(policy)
        self._check_degenerate(policy)
        other._check_degenerate(policy)

        dx, dy = self.dx(), self.dy()
        odx, ody = other.dx(), other.dy()
        ox = self.p1.x - other.p1.x
        oy = self.p1.y - other.p1.y

        denom = ody * dx - odx * dy
        num_a = odx * oy - ody * ox
        num_b = dx * oy - dy * ox

        len_a = math.hypot(dx, dy)
        len_b = math.hypot(odx, ody)
        if policy.tolerance and len_a and len_b:
            # Sine of the angle between the lines, and offsets in length units
            parallel = policy.is_zero(denom / (len_a * len_b))
            on_both = policy.is_zero(num_a / len_b) and policy.is_zero(num_b / len_a)
        else:
            parallel = policy.is_zero(denom)
            on_both = policy.is_zero(num_a) and policy.is_zero(num_b)

        if parallel:
            if on_both:
                logger.debug("Lines %s and %s are coincident", self, other)
                return LineIntersection(Intersection.COINCIDENT, None)
            logger.debug("Lines %s and %s are parallel", self, other)
            return LineIntersection(Intersection.PARALLEL, None)

        ua = num_a / denom
        if segment:
            ub = num_b / denom
            if not (0.0 <= ua <= 1.0 and 0.0 <= ub <= 1.0):
                return LineIntersection(Intersection.NO_INTERSECTION, None)

        point = Point(self.p1.x + ua * dx, self.p1.y + ua * dy)
        if not (math.isfinite(point.x) and math.isfinite(point.y)):
            logger.debug("Non-finite intersection of %s and %s", self, other)
        return LineIntersection(Intersection.INTERSECTING, point)

    def to_dict(self):
        return {"x1": self.p1.x, "y1": self.p1.y, "x2": self.p2.x, "y2": self.p2.y}

    def __eq__(self, other):
        if not isinstance(other, Line):
            return NotImplemented
        return self.p1 == other.p1 and self.p2 == other.p2

    __hash__ = None

    def __str__(self):
        return (f"{{'x1':{self.p1.x!r},'y1':{self.p1.y!r},"
                f"'x2':{self.p2.x!r},'y2':{self.p2.y!r}}}")

    def __repr__(self):
        return f"Line({self.p1.x!r}, {self.p1.y!r}, {self.p2.x!r}, {self.p2.y!r})"
