"""
Package configuration and NumPy conversion for planegeom
"""

import logging
import math
from contextlib import contextmanager

import numpy as np

from .exceptions import DegenerateGeometryError

logger = logging.getLogger(__name__)


class NumericPolicy:
    """Comparison rules used when classifying intersections

    The default policy compares against exactly 0.0, with no epsilon, and
    accepts degenerate input. Near-parallel lines can therefore be reported
    as intersecting at a very distant point.

    Parameters:
    -----------
    tolerance : float
        Absolute tolerance for zero and equality tests. 0.0 means exact.
        Line intersection applies it to scale-free quantities: the sine of
        the angle between the lines for the parallel test, and the
        point-to-line distance for the coincident test.
    strict : bool
        Raise DegenerateGeometryError on degenerate or non-finite input
        instead of letting it propagate into the arithmetic.
    legacy_chord : bool
        Use hypot(r, a) as the circle intersection half-chord, which
        reproduces the numbers of older releases. The default is the
        geometric sqrt(r**2 - a**2).
    """

    def __init__(self, tolerance=0.0, strict=False, legacy_chord=False):
        tolerance = float(tolerance)
        if not tolerance >= 0.0:
            raise ValueError(f"Tolerance must be non-negative, got {tolerance}")
        self.tolerance = tolerance
        self.strict = bool(strict)
        self.legacy_chord = bool(legacy_chord)

    def is_zero(self, value):
        """True if value is zero under this policy"""
        if self.tolerance == 0.0:
            return value == 0.0
        return -self.tolerance <= value <= self.tolerance

    def equal(self, value1, value2):
        """True if the two values are equal under this policy"""
        if self.tolerance == 0.0:
            return value1 == value2
        return abs(value1 - value2) <= self.tolerance

    def check_finite(self, *values):
        """Raise DegenerateGeometryError for NaN/Inf values in strict mode"""
        if not self.strict:
            return
        for value in values:
            if not math.isfinite(value):
                raise DegenerateGeometryError(f"Non-finite coordinate: {value}")

    def replace(self, **changes):
        """Return a copy of this policy with some fields changed"""
        fields = {
            "tolerance": self.tolerance,
            "strict": self.strict,
            "legacy_chord": self.legacy_chord,
        }
        fields.update(changes)
        return NumericPolicy(**fields)

    def __eq__(self, other):
        if not isinstance(other, NumericPolicy):
            return NotImplemented
        return (self.tolerance, self.strict, self.legacy_chord) == (
            other.tolerance, other.strict, other.legacy_chord)

    def __repr__(self):
        return (f"NumericPolicy(tolerance={self.tolerance!r}, strict={self.strict}, "
                f"legacy_chord={self.legacy_chord})")


class PlaneGeometry:
    """Package-wide defaults for planegeom"""

    _policy = NumericPolicy()

    @classmethod
    def policy(cls):
        """Get the default NumericPolicy"""
        return cls._policy

    @classmethod
    def configure(cls, tolerance=None, strict=None, legacy_chord=None):
        """
        Update the default NumericPolicy

        Only the arguments that are not None are changed.

        Returns:
        --------
        NumericPolicy
            The new default policy
        """
        changes = {}
        if tolerance is not None:
            changes["tolerance"] = tolerance
        if strict is not None:
            changes["strict"] = strict
        if legacy_chord is not None:
            changes["legacy_chord"] = legacy_chord
        cls._policy = cls._policy.replace(**changes)
        logger.debug("Default policy set to %r", cls._policy)
        return cls._policy

    @classmethod
    def reset(cls):
        """Restore the exact, permissive default policy"""
        cls._policy = NumericPolicy()
        logger.debug("Default policy reset")

    @classmethod
    @contextmanager
    def using(cls, policy):
        """Temporarily replace the default policy"""
        previous = cls._policy
        cls._policy = policy
        try:
            yield policy
        finally:
            cls._policy = previous

    @staticmethod
    def resolve(policy=None):
        """Return policy, or the default policy if None"""
        if policy is None:
            return PlaneGeometry._policy
        return policy

    @staticmethod
    def numpy_to_xy(value):
        """Convert a point-like value (Point, tuple, NumPy array) to an (x, y) float tuple"""
        if hasattr(value, "x") and hasattr(value, "y"):
            return float(value.x), float(value.y)
        arr = np.asarray(value, dtype=float)
        if arr.shape != (2,):
            raise ValueError(f"Point must be 2D, got shape {arr.shape}")
        return float(arr[0]), float(arr[1])

    @staticmethod
    def xy_to_numpy(x, y):
        """Convert coordinates to a NumPy array of shape (2,)"""
        return np.array([x, y], dtype=float)
