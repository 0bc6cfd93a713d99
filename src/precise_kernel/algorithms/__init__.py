"""Numerical algorithms module.

This module contains implementations of:
- Precision-corrected variadic arithmetic
- Points with computed cartesian, galactic and spherical accessors
- Linear, quadratic and cubic bezier interpolation
- Curve sampling and ellipse approximation
"""

from precise_kernel.algorithms.arithmetic import (
    DEFAULT_ENGINE,
    PrecisionEngine,
    add,
    delta,
    divide,
    e2,
    e3,
    get_operation,
    inv,
    multiply,
    neg,
    pow,
    precise,
    scale_down,
    scale_up,
    subtract,
)
from precise_kernel.algorithms.geometry import Point
from precise_kernel.algorithms.interpolation import (
    cbez_point,
    cbez_value,
    lerp_point,
    lerp_value,
    qbez_point,
    qbez_value,
)
from precise_kernel.algorithms.sampling import (
    ellipse_quadrant,
    sample_cbez,
    sample_curve,
    sample_lerp,
    sample_parameters,
    sample_qbez,
)

__all__ = [
    # Precision core
    "DEFAULT_ENGINE",
    "PrecisionEngine",
    "add",
    "delta",
    "divide",
    "e2",
    "e3",
    "get_operation",
    "inv",
    "multiply",
    "neg",
    "pow",
    "precise",
    "scale_down",
    "scale_up",
    "subtract",
    # Geometry
    "Point",
    # Interpolation
    "cbez_point",
    "cbez_value",
    "lerp_point",
    "lerp_value",
    "qbez_point",
    "qbez_value",
    # Sampling
    "ellipse_quadrant",
    "sample_cbez",
    "sample_curve",
    "sample_lerp",
    "sample_parameters",
    "sample_qbez",
]
