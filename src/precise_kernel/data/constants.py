"""
Numeric Constants - Single Source of Truth

Every arithmetic result in this package is rounded to ``SIGDIG`` digits after
the decimal point. The remaining constants are exported for geometric and
physical formulas built on the corrected arithmetic.

References:
    - ECMA-262 ``Number.prototype.toFixed`` (fixed-decimal formatting rules)
    - Riškus: "Approximation of a Cubic Bezier Curve by Circular Arcs" (2006)
"""

from typing import Final

# =============================================================================
# PRECISION
# =============================================================================

SIGDIG: Final[int] = 5
"""Digits kept after the decimal point by every arithmetic operation."""

MAX_SIGDIG: Final[int] = 100
"""Largest digit count accepted by fixed-decimal formatting."""

FIXED_DECIMAL_LIMIT: Final[float] = 1e21
"""Magnitudes at or above this are left untouched by fixed-decimal rounding."""

# =============================================================================
# GEOMETRY & PHYSICS
# =============================================================================

# 4 * (sqrt(2) - 1) / 3
KAPPA: Final[float] = 0.552284749830793398402251632279597438092895833835930764235
"""Control point offset ratio for a cubic bezier quarter-circle approximation."""

GAMMA: Final[float] = 6.67408e-11
"""Gravitational constant (m^3 kg^-1 s^-2)."""
