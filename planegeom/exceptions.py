"""
Exceptions raised by planegeom
"""


class GeometryError(Exception):
    """Base exception for geometry operations"""

    pass


class DegenerateGeometryError(GeometryError, ValueError):
    """Input is degenerate (zero-length line, non-positive radius, non-finite value)

    Only raised when the active NumericPolicy is strict. In the default
    permissive mode degenerate inputs flow into the arithmetic instead.
    """

    pass
