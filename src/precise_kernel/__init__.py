"""Precise Kernel: decimal-corrected arithmetic and bezier interpolation."""

__version__ = "0.1.0"

from precise_kernel.algorithms.arithmetic import (
    PrecisionEngine,
    add,
    delta,
    divide,
    e2,
    e3,
    inv,
    multiply,
    neg,
    pow,
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
from precise_kernel.data.constants import GAMMA, KAPPA, SIGDIG

__all__ = [
    "__version__",
    "GAMMA",
    "KAPPA",
    "SIGDIG",
    "Point",
    "PrecisionEngine",
    "add",
    "cbez_point",
    "cbez_value",
    "delta",
    "divide",
    "e2",
    "e3",
    "inv",
    "lerp_point",
    "lerp_value",
    "multiply",
    "neg",
    "pow",
    "qbez_point",
    "qbez_value",
    "subtract",
]
