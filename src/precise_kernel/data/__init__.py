"""Data module for numeric constants and coordinate symbols."""

from precise_kernel.data.constants import (
    FIXED_DECIMAL_LIMIT,
    GAMMA,
    KAPPA,
    MAX_SIGDIG,
    SIGDIG,
)
from precise_kernel.data.symbols import (
    Axis,
    Dimension,
    Orientation,
    Sign,
    SphericalSymbol,
    parse_axis,
    parse_symbol,
)

__all__ = [
    "FIXED_DECIMAL_LIMIT",
    "GAMMA",
    "KAPPA",
    "MAX_SIGDIG",
    "SIGDIG",
    "Axis",
    "Dimension",
    "Orientation",
    "Sign",
    "SphericalSymbol",
    "parse_axis",
    "parse_symbol",
]
