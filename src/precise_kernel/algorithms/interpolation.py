"""Linear and bezier interpolation over corrected arithmetic.

Every formula is written purely in terms of the precision-corrected
operations, so interpolated coordinates carry the same rounding as raw
arithmetic. Point interpolants evaluate each axis independently.

Bernstein forms:
- Linear:    a + (b - a)·t
- Quadratic: a·(1-t)² + c·2(t - t²) + b·t²      (a, b endpoints, c control)
- Cubic:     a·(1-t)³ + 3b·t(1-t)² + 3c·t²(1-t) + d·t³

References:
- Farin: "Curves and Surfaces for CAGD" (5th ed.), Ch. 4
"""

from __future__ import annotations

from precise_kernel.algorithms.arithmetic import (
    add,
    delta,
    e2,
    e3,
    inv,
    multiply,
    neg,
    subtract,
)
from precise_kernel.algorithms.geometry import Point


def lerp_value(a: float, b: float, t: float) -> float:
    """
    Linear interpolation between a and b.

    Args:
        a: Start value.
        b: End value.
        t: Parameter; values outside [0, 1] extrapolate.
    """
    return add(a, multiply(delta(a, b), t))


def lerp_point(p0: Point, p1: Point, t: float) -> Point:
    """Linear interpolation between two points."""
    return Point(lerp_value(p0.x, p1.x, t), lerp_value(p0.y, p1.y, t))


def qbez_value(start: float, end: float, control: float, t: float) -> float:
    """
    Quadratic bezier value.

    Note the slot order: both endpoints first, then the control value.

    Args:
        start: Value at t = 0.
        end: Value at t = 1.
        control: Control value.
        t: Parameter in [0, 1].
    """
    return add(
        multiply(start, e2(inv(t))),
        multiply(end, e2(t)),
        multiply(control, multiply(2, subtract(t, e2(t)))),
    )


def qbez_point(p0: Point, pc: Point, p1: Point, t: float) -> Point:
    """
    Quadratic bezier point.

    Args:
        p0: Start point.
        pc: Control point.
        p1: End point.
        t: Parameter in [0, 1].
    """
    return Point(
        qbez_value(p0.x, p1.x, pc.x, t),
        qbez_value(p0.y, p1.y, pc.y, t),
    )


def cbez_value(a: float, b: float, c: float, d: float, t: float) -> float:
    """
    Cubic bezier value from the expanded Bernstein polynomial.

    Args:
        a: Start value.
        b: First control value.
        c: Second control value.
        d: End value.
        t: Parameter in [0, 1].
    """
    t2 = e2(t)
    t3 = e3(t)
    return add(
        a,
        multiply(neg(3), a, t),
        multiply(3, a, t2),
        multiply(neg(a), t3),
        multiply(3, b, t),
        multiply(neg(6), b, t2),
        multiply(3, b, t3),
        multiply(3, c, t2),
        multiply(neg(3), c, t3),
        multiply(d, t3),
    )


def cbez_point(p0: Point, c0: Point, c1: Point, p1: Point, t: float) -> Point:
    """
    Cubic bezier point.

    Args:
        p0: Start point.
        c0: First control point.
        c1: Second control point.
        p1: End point.
        t: Parameter in [0, 1].
    """
    return Point(
        cbez_value(p0.x, c0.x, c1.x, p1.x, t),
        cbez_value(p0.y, c0.y, c1.y, p1.y, t),
    )
