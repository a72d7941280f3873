"""
Python interface for circles
"""

import logging
import math
from collections import namedtuple

import numpy as np

from .core import PlaneGeometry
from .exceptions import DegenerateGeometryError
from .points import Point

logger = logging.getLogger(__name__)


CircleIntersection = namedtuple("CircleIntersection", ["found", "p1", "p2"])
CircleIntersection.__doc__ = """Result of Circle.intersection: a flag and two Points (None when not found)"""

_NOT_FOUND = CircleIntersection(False, None, None)


class Circle:
    """Circle given by center and radius

    Parameters:
    -----------
    cx, cy : float
        Center coordinates (default: origin)
    r : float
        Radius (default: 0.0). Zero and negative radii are accepted.
    """

    __slots__ = ("center", "r")

    def __init__(self, cx=0.0, cy=0.0, r=0.0):
        self.center = Point(cx, cy)
        self.r = float(r)

    @property
    def radius(self):
        """Get circle radius"""
        return self.r

    def copy(self):
        return Circle(self.center.x, self.center.y, self.r)

    def diameter(self):
        return self.r * 2.0

    def translate(self, dx, dy):
        """Move the center in place and return this circle"""
        self.center.translate(dx, dy)
        return self

    def _check_degenerate(self, policy):
        policy.check_finite(self.center.x, self.center.y, self.r)
        if policy.strict and self.r <= 0.0:
            raise DegenerateGeometryError(f"Radius must be positive, got {self.r}")

    def intersection(self, other, policy=None):
        """
        Compute the intersection points of two circles

        Uses the radical line construction, see
        http://paulbourke.net/geometry/circlesphere/

        Concentric circles of equal radius are reported as not intersecting,
        since their infinitely many common points cannot be returned as a pair.
        Tangent circles return the same point twice.

        Parameters:
        -----------
        other : Circle
            The other circle. Neither circle is modified.
        policy : NumericPolicy, optional
            Overrides the package default

        Returns:
        --------
        CircleIntersection
            (found, p1, p2); p1 and p2 are None when found is False

        Examples:
        ---------
        >>> found, p1, p2 = Circle(0, 0, 5).intersection(Circle(8, 0, 5))
        >>> found, p1, p2
        (True, Point(4.0, 3.0), Point(4.0, -3.0))
        """
        policy = PlaneGeometry.resolve(policy)
        self._check_degenerate(policy)
        other._check_degenerate(policy)

        dx = other.center.x - self.center.x
        dy = other.center.y - self.center.y
        d = math.hypot(dx, dy)

        # Too far apart
        if d > self.r + other.r:
            return _NOT_FOUND
        # One circle inside the other
        if d < abs(self.r - other.r):
            return _NOT_FOUND
        if policy.equal(self.r, other.r) and policy.is_zero(dx) and policy.is_zero(dy):
            logger.debug("Circles %s and %s are identical", self, other)
            return _NOT_FOUND

        # Distance from this center to where the radical line crosses the
        # line between the centers
        a = ((self.r * self.r) - (other.r * other.r) + (d * d)) / (2.0 * d)
        x2 = self.center.x + (dx * a / d)
        y2 = self.center.y + (dy * a / d)

        if policy.legacy_chord:
            h = math.hypot(self.r, a)
        else:
            # a**2 <= r**2 after the checks above, up to rounding
            h = math.sqrt(max(0.0, (self.r * self.r) - (a * a)))

        rx = -dy * (h / d)
        ry = dx * (h / d)
        return CircleIntersection(True, Point(x2 + rx, y2 + ry), Point(x2 - rx, y2 - ry))

    def intersects(self, other, policy=None):
        """True if intersection() finds a solution"""
        return self.intersection(other, policy=policy).found

    def points(self, n_points=100):
        """
        Generate points on the circle boundary

        Parameters:
        -----------
        n_points : int, optional
            Number of points to generate (default: 100)

        Returns:
        --------
        points : ndarray, shape (n_points, 2)
            Counterclockwise from (cx + r, cy)

        Examples:
        ---------
        >>> points = Circle(0, 0, 1).points(64)
        >>> points.shape
        (64, 2)
        """
        theta = np.linspace(0, 2 * np.pi, n_points, endpoint=False)
        x = self.center.x + self.r * np.cos(theta)
        y = self.center.y + self.r * np.sin(theta)
        return np.column_stack([x, y])

    def contains_point(self, point):
        """
        Check if a point is inside the circle or on its boundary

        Parameters:
        -----------
        point : Point or array-like, shape (2,)
            Point to test
        """
        return self.distance_to_point(point) <= 0.0

    def distance_to_point(self, point):
        """
        Calculate distance from point to circle boundary

        Returns:
        --------
        float
            Distance to circle boundary (negative if inside)
        """
        x, y = PlaneGeometry.numpy_to_xy(point)
        return math.hypot(x - self.center.x, y - self.center.y) - self.r

    def to_mpl_circle(self, **kwargs):
        """
        Convert to matplotlib Circle patch for quick plotting

        Parameters:
        -----------
        **kwargs
            Additional arguments passed to matplotlib.patches.Circle
            (e.g., facecolor, edgecolor, alpha, fill)
        """
        try:
            from matplotlib.patches import Circle as MPLCircle
        except ImportError:
            raise ImportError("Matplotlib is required for to_mpl_circle(). Install with: pip install matplotlib")

        return MPLCircle((self.center.x, self.center.y), self.r, **kwargs)

    def to_dict(self):
        return {"cx": self.center.x, "cy": self.center.y, "r": self.r}

    def __eq__(self, other):
        if not isinstance(other, Circle):
            return NotImplemented
        return self.center == other.center and self.r == other.r

    __hash__ = None

    def __str__(self):
        return f"{{'cx':{self.center.x!r},'cy':{self.center.y!r},'r':{self.r!r}}}"

    def __repr__(self):
        return f"Circle({self.center.x!r}, {self.center.y!r}, {self.r!r})"
