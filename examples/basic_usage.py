#!/usr/bin/env python3
"""
Basic usage examples for planegeom
"""

import logging

import numpy as np
from planegeom import Circle, Intersection, Line, NumericPolicy, Point, parse_shape


def example_points():
    """Example using Point"""
    print("=== Point Example ===")

    p = Point(1.0, 2.0)
    q = Point(4.0, 6.0)
    print(f"Points: {p} and {q}")
    print(f"Distance: {p.distance(q):.3f} (squared {p.distance_squared(q):.3f})")

    p.translate(1.0, 1.0).translate(-1.0, -1.0)
    print(f"Translated there and back: {p}")


def example_lines():
    """Example using Line intersection"""
    print("\n=== Line Example ===")

    a = Line(0, 0, 2, 2)
    b = Line(0, 2, 2, 0)
    kind, point = a.intersection(b)
    print(f"{a} x {b}: {kind.name} at {point}")

    parallel = Line(0, 1, 2, 3)
    print(f"{a} x {parallel}: {a.intersection(parallel).kind.name}")

    far = Line(5, -1, 5, 1)
    print(f"As lines:    {a.intersection(far).kind.name}")
    print(f"As segments: {a.intersection(far, segment=True).kind.name}")

    noisy = Line(0, 0, 1, 1e-13)
    flat = Line(0, 1, 1, 1)
    kind, point = noisy.intersection(flat)
    print(f"Near-parallel, exact policy: {kind.name} at {point}")
    kind, _ = noisy.intersection(flat, policy=NumericPolicy(tolerance=1e-9))
    print(f"Near-parallel, tolerance 1e-9: {kind.name}")

    return a, b, a.intersection(b)


def example_circles():
    """Example using Circle intersection"""
    print("\n=== Circle Example ===")

    a = Circle(0, 0, 5)
    b = Circle(8, 0, 5)
    found, p1, p2 = a.intersection(b)
    print(f"{a} x {b}: found={found} {p1} {p2}")
    print(f"Distances to centers: {p1.distance(a.center):.3f}, {p1.distance(b.center):.3f}")

    print(f"Separated: {Circle(0, 0, 1).intersects(Circle(10, 0, 1))}")
    print(f"Contained: {Circle(0, 0, 5).intersects(Circle(1, 0, 1))}")
    print(f"Identical: {Circle(0, 0, 3).intersects(Circle(0, 0, 3))}")

    print(f"Parsed back: {parse_shape(str(a))!r}")
    return a, b, (p1, p2)


def plot_examples():
    """Plot the line and circle intersections"""
    import matplotlib.pyplot as plt

    print("\n=== Plotting Examples ===")

    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(12, 5))

    a, b, (_, point) = example_lines()
    for line, style in ((a, 'b-'), (b, 'g-')):
        ax1.plot([line.p1.x, line.p2.x], [line.p1.y, line.p2.y], style, linewidth=2)
    ax1.plot(point.x, point.y, 'ro', markersize=8, label='Intersection')
    ax1.set_aspect('equal')
    ax1.grid(True)
    ax1.legend()
    ax1.set_title('Lines')

    c1, c2, points = example_circles()
    for circle, style in ((c1, 'b-'), (c2, 'g-')):
        boundary = circle.points(100)
        boundary = np.vstack([boundary, boundary[:1]])
        ax2.plot(boundary[:, 0], boundary[:, 1], style, linewidth=2)
    ax2.plot([p.x for p in points], [p.y for p in points], 'ro', markersize=8, label='Intersections')
    ax2.set_aspect('equal')
    ax2.grid(True)
    ax2.legend()
    ax2.set_title('Circles')

    plt.tight_layout()
    plt.savefig('planegeom_examples.png', dpi=150, bbox_inches='tight')
    print("Saved plot as 'planegeom_examples.png'")
    plt.show()


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    # Run examples
    example_points()
    example_lines()
    example_circles()

    # Create plots if matplotlib is available
    try:
        plot_examples()
    except ImportError:
        print("Matplotlib not available - skipping plots")
        print("Install with: pip install matplotlib")
