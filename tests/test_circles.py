"""
Tests for Circle and circle-circle intersection
"""

import math

import numpy as np
import pytest

from planegeom import Circle, DegenerateGeometryError, NumericPolicy, PlaneGeometry, Point


def test_circle_creation():
    """Test Circle creation"""
    default = Circle()
    assert default.center == Point(0, 0)
    assert default.r == 0.0

    circle = Circle(100, 200, 15)
    assert np.allclose(circle.center.to_array(), [100, 200])
    assert circle.radius == 15.0
    assert circle.diameter() == 30.0
    print("✓ Circle creation test passed")


def test_separated_circles():
    """Centers further apart than the sum of radii"""
    a = Circle(0, 0, 1)
    b = Circle(10, 0, 1)
    found, p1, p2 = a.intersection(b)
    assert found is False
    assert p1 is None and p2 is None
    assert not a.intersects(b)
    print("✓ Separated circles test passed")


def test_contained_circle():
    """Center distance below the radius difference"""
    assert not Circle(0, 0, 5).intersects(Circle(1, 0, 1))
    assert not Circle(1, 0, 1).intersects(Circle(0, 0, 5))
    print("✓ Contained circle test passed")


def test_crossing_circles():
    """Both points are one radius away from each center"""
    a = Circle(0, 0, 5)
    b = Circle(8, 0, 5)
    found, p1, p2 = a.intersection(b)
    assert found
    assert a.intersects(b)

    for p in (p1, p2):
        assert np.isclose(p.distance(a.center), 5.0)
        assert np.isclose(p.distance(b.center), 5.0)
    assert np.allclose(p1.to_array(), [4.0, 3.0])
    assert np.allclose(p2.to_array(), [4.0, -3.0])
    print("✓ Crossing circles test passed")


def test_crossing_circles_off_axis():
    a = Circle(1, 2, 3)
    b = Circle(4, 6, 4)
    found, p1, p2 = a.intersection(b)
    assert found
    for p in (p1, p2):
        assert np.isclose(p.distance(a.center), 3.0)
        assert np.isclose(p.distance(b.center), 4.0)

    # Swapping the circles gives the same pair of points
    _, q1, q2 = b.intersection(a)
    assert np.allclose(q1.to_array(), p2.to_array())
    assert np.allclose(q2.to_array(), p1.to_array())


def test_tangent_circles():
    """Touching circles return the contact point twice"""
    found, p1, p2 = Circle(0, 0, 1).intersection(Circle(2, 0, 1))
    assert found
    assert np.allclose(p1.to_array(), [1.0, 0.0])
    assert np.allclose(p2.to_array(), [1.0, 0.0])

    # Internal tangency
    found, p1, p2 = Circle(0, 0, 2).intersection(Circle(1, 0, 1))
    assert found
    assert np.allclose(p1.to_array(), [2.0, 0.0])
    assert np.allclose(p2.to_array(), [2.0, 0.0])


def test_identical_circles():
    """Identical circles report no intersection rather than infinitely many"""
    found, p1, p2 = Circle(0, 0, 3).intersection(Circle(0, 0, 3))
    assert found is False
    assert p1 is None and p2 is None
    print("✓ Identical circles test passed")


def test_identical_circles_with_tolerance():
    nearly = Circle(1e-12, 0, 3)
    assert Circle(0, 0, 3).intersects(nearly)
    assert not Circle(0, 0, 3).intersects(nearly, policy=NumericPolicy(tolerance=1e-9))


def test_intersection_leaves_circles_unchanged():
    a = Circle(0, 0, 5)
    b = Circle(8, 0, 5)
    a.intersection(b)
    assert a == Circle(0, 0, 5)
    assert b == Circle(8, 0, 5)


def test_legacy_chord_formula():
    """hypot(r, a) reproduces the numbers of older releases"""
    legacy = NumericPolicy(legacy_chord=True)
    found, p1, p2 = Circle(0, 0, 5).intersection(Circle(8, 0, 5), policy=legacy)
    assert found
    assert np.isclose(p1.x, 4.0)
    assert np.isclose(p1.y, math.hypot(5.0, 4.0))
    assert np.isclose(p2.y, -math.hypot(5.0, 4.0))

    with PlaneGeometry.using(legacy):
        _, q1, _ = Circle(0, 0, 5).intersection(Circle(8, 0, 5))
    assert q1 == p1


def test_radius_is_not_validated_by_default():
    """Zero and negative radii pass through the permissive default"""
    Circle(0, 0, -1).intersection(Circle(1, 0, 2))
    found, p1, p2 = Circle(0, 0, 0).intersection(Circle(1, 0, 1))
    assert found
    assert np.allclose(p1.to_array(), [0.0, 0.0])


def test_strict_policy_rejects_bad_radius():
    strict = NumericPolicy(strict=True)
    with pytest.raises(DegenerateGeometryError):
        Circle(0, 0, -1).intersection(Circle(1, 0, 2), policy=strict)
    with pytest.raises(DegenerateGeometryError):
        Circle(0, 0, 1).intersects(Circle(1, 0, 0), policy=strict)
    with pytest.raises(DegenerateGeometryError):
        Circle(0, math.nan, 1).intersects(Circle(1, 0, 1), policy=strict)


def test_translate():
    circle = Circle(1, 1, 2)
    assert circle.translate(2, -1) is circle
    assert circle == Circle(3, 0, 2)


def test_boundary_points():
    """Test boundary sampling"""
    circle = Circle(2, 3, 1.5)
    points = circle.points(64)
    assert points.shape == (64, 2)
    distances = np.linalg.norm(points - circle.center.to_array(), axis=1)
    assert np.allclose(distances, 1.5)
    assert np.allclose(points[0], [3.5, 3.0])
    print("✓ Boundary points test passed")


def test_point_queries():
    circle = Circle(0, 0, 2)
    assert circle.contains_point([1, 1])
    assert circle.contains_point(Point(2, 0))
    assert not circle.contains_point(np.array([2.0, 2.0]))
    assert np.isclose(circle.distance_to_point((3, 4)), 3.0)
    assert np.isclose(circle.distance_to_point(Point(0, 0)), -2.0)


def test_point_queries_agree_on_the_boundary():
    """contains_point and distance_to_point classify every point the same way"""
    circle = Circle(0, 0, 5)
    assert circle.distance_to_point((3, 4)) == 0.0
    assert circle.contains_point((3, 4))

    circle = Circle(0.3, -1.7, 2.5)
    for row in circle.points(50):
        assert circle.contains_point(row) == (circle.distance_to_point(row) <= 0.0)


def test_circle_to_matplotlib():
    """Test Circle to matplotlib patch conversion"""
    try:
        from matplotlib.patches import Circle as MPLCircle
    except ImportError:
        print("⊘ Matplotlib not installed - skipping matplotlib tests")
        return

    circle = Circle(100, 200, 15.0)
    patch = circle.to_mpl_circle(fill=False)

    assert isinstance(patch, MPLCircle)
    assert np.allclose(patch.center, [100, 200])
    assert np.isclose(patch.radius, 15.0)
    print("✓ Circle to matplotlib Circle patch test passed")
