"""
Python interface for 2D points
"""

import math

from .core import PlaneGeometry


class Point:
    """Mutable 2D point

    Parameters:
    -----------
    x : float
        X coordinate (default: 0.0)
    y : float
        Y coordinate (default: 0.0)
    """

    __slots__ = ("x", "y")

    def __init__(self, x=0.0, y=0.0):
        self.x = float(x)
        self.y = float(y)

    @classmethod
    def from_array(cls, value):
        """
        Create a Point from any point-like value

        Parameters:
        -----------
        value : Point, tuple or array-like, shape (2,)
            Coordinates (x, y)

        Returns:
        --------
        Point
            A new point; the input is never aliased
        """
        x, y = PlaneGeometry.numpy_to_xy(value)
        return cls(x, y)

    def to_array(self):
        """Get point as NumPy array [x, y]"""
        return PlaneGeometry.xy_to_numpy(self.x, self.y)

    def copy(self):
        return Point(self.x, self.y)

    def translate(self, dx, dy):
        """
        Move the point in place

        Returns:
        --------
        Point
            This point, so that calls can be chained
        """
        self.x += float(dx)
        self.y += float(dy)
        return self

    def distance_squared(self, other):
        """Squared Euclidean distance to other point, avoids the sqrt"""
        a = self.x - other.x
        b = self.y - other.y
        return (a * a) + (b * b)

    def distance(self, other):
        """Euclidean distance to other point"""
        return math.hypot(self.x - other.x, self.y - other.y)

    def to_dict(self):
        return {"x": self.x, "y": self.y}

    def __iter__(self):
        yield self.x
        yield self.y

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    __hash__ = None

    def __str__(self):
        return f"{{'x':{self.x!r},'y':{self.y!r}}}"

    def __repr__(self):
        return f"Point({self.x!r}, {self.y!r})"
