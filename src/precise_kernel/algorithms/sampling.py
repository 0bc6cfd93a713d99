"""Curve sampling utilities.

Evaluates the point interpolants over evenly spaced parameters and collects
the results in numpy arrays of shape (count, 2), one row per sample. Also
builds the cubic bezier control polygon approximating an ellipse quadrant.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import numpy as np

from precise_kernel.algorithms.arithmetic import add, multiply, precise
from precise_kernel.algorithms.geometry import Point
from precise_kernel.algorithms.interpolation import cbez_point, lerp_point, qbez_point
from precise_kernel.data.constants import KAPPA
from precise_kernel.log import get_logger

if TYPE_CHECKING:
    from numpy.typing import NDArray

log = get_logger(__name__)

MIN_SAMPLES = 2


def sample_parameters(count: int) -> NDArray[np.float64]:
    """
    Evenly spaced curve parameters from 0 to 1 inclusive.

    Each parameter is rounded like any arithmetic result, so e.g. thirds
    become 0.33333 and 0.66667.

    Args:
        count: Number of parameters (>= 2).

    Returns:
        1-D float64 array of length ``count``.

    Raises:
        ValueError: If count < 2.
    """
    if count < MIN_SAMPLES:
        raise ValueError(f"count must be >= {MIN_SAMPLES}, got {count}")

    raw = np.linspace(0.0, 1.0, count, dtype=np.float64)
    return np.array([precise(float(t)) for t in raw], dtype=np.float64)


def sample_curve(
    curve: Callable[[float], Point],
    count: int,
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """
    Evaluate a point-valued curve at evenly spaced parameters.

    Args:
        curve: Callable mapping a parameter t to a Point.
        count: Number of samples (>= 2).

    Returns:
        (params, samples): the 1-D parameter array and the matching
        (count, 2) array of x, y rows.

    Raises:
        ValueError: If count < 2.
    """
    params = sample_parameters(count)
    log.debug("Sampling curve at %d parameters", count)

    samples = np.empty((count, 2), dtype=np.float64)
    for i, t in enumerate(params):
        point = curve(float(t))
        samples[i, 0] = point.x
        samples[i, 1] = point.y
    return params, samples


def sample_lerp(p0: Point, p1: Point, count: int) -> NDArray[np.float64]:
    """Sample the segment from p0 to p1."""
    return sample_curve(lambda t: lerp_point(p0, p1, t), count)[1]


def sample_qbez(p0: Point, pc: Point, p1: Point, count: int) -> NDArray[np.float64]:
    """Sample the quadratic bezier from p0 to p1 with control point pc."""
    return sample_curve(lambda t: qbez_point(p0, pc, p1, t), count)[1]


def sample_cbez(
    p0: Point,
    c0: Point,
    c1: Point,
    p1: Point,
    count: int,
) -> NDArray[np.float64]:
    """Sample the cubic bezier from p0 to p1 with control points c0, c1."""
    return sample_curve(lambda t: cbez_point(p0, c0, c1, p1, t), count)[1]


def ellipse_quadrant(center: Point, rx: float, ry: float) -> tuple[Point, Point, Point, Point]:
    """
    Cubic bezier control points for the first quadrant of an ellipse.

    The curve runs counter-clockwise from (cx + rx, cy) to (cx, cy + ry);
    control points are offset by KAPPA times the radii.

    Args:
        center: Ellipse center.
        rx: Horizontal radius.
        ry: Vertical radius.

    Returns:
        (start, control1, control2, end) ready for ``cbez_point``.

    Example:
        >>> start, c0, c1, end = ellipse_quadrant(Point(0, 0), 1, 1)
        >>> c0
        Point(x=1.0, y=0.55228, z=None, orientation=<Orientation.RIGHT: 'right'>)
    """
    ox = multiply(rx, KAPPA)
    oy = multiply(ry, KAPPA)
    right = add(center.x, rx)
    top = add(center.y, ry)

    return (
        Point(right, center.y),
        Point(right, add(center.y, oy)),
        Point(add(center.x, ox), top),
        Point(center.x, top),
    )
