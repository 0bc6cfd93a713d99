"""
Symbolic labels for coordinate systems.

Closed enum types for the axes, dimensions, orientations and spherical
coordinate symbols used to address point components.
"""

from enum import Enum


class Sign(Enum):
    """Sign of a direction."""

    POS = 1
    NEG = -1


class Orientation(Enum):
    """Orientation of a coordinate system (direction of rotation)."""

    RIGHT = "right"
    LEFT = "left"

    @property
    def sign(self) -> Sign:
        """Sign associated with this orientation."""
        return Sign.POS if self is Orientation.RIGHT else Sign.NEG


class Dimension(Enum):
    """Space dimensions in n-dimensional geometric settings."""

    ONE = 1
    TWO = 2
    THREE = 3


class Axis(Enum):
    """Coordinate axes in cartesian (x, y, z) and galactic (U, V, W) systems."""

    X = "x"
    Y = "y"
    Z = "z"
    U = "U"
    V = "V"
    W = "W"

    @property
    def cartesian(self) -> "Axis":
        """Cartesian axis at the same position (galactic axes alias x, y, z)."""
        return _GALACTIC_TO_CARTESIAN.get(self, self)


class SphericalSymbol(Enum):
    """Components of spherical coordinates."""

    R = "r"  # radial distance
    THETA = "θ"  # polar angle from the zenith
    PHI = "φ"  # azimuth angle in the reference plane


_GALACTIC_TO_CARTESIAN: dict[Axis, Axis] = {
    Axis.U: Axis.X,
    Axis.V: Axis.Y,
    Axis.W: Axis.Z,
}

_SYMBOL_ALIASES: dict[str, SphericalSymbol] = {
    "r": SphericalSymbol.R,
    "radius": SphericalSymbol.R,
    "θ": SphericalSymbol.THETA,
    "theta": SphericalSymbol.THETA,
    "φ": SphericalSymbol.PHI,
    "phi": SphericalSymbol.PHI,
}


def parse_axis(name: Axis | str) -> Axis:
    """
    Parse an axis name into an Axis enum.

    Cartesian names are case-insensitive; galactic names are upper case but
    lower case input is accepted as well.

    Raises:
        ValueError: If the name matches no axis.

    Example:
        >>> parse_axis("u")
        <Axis.U: 'U'>
    """
    if isinstance(name, Axis):
        return name

    stripped = name.strip()
    for axis in Axis:
        if axis.value in (stripped, stripped.lower(), stripped.upper()):
            return axis

    valid = [a.value for a in Axis]
    raise ValueError(f"Unknown axis: '{name}'. Valid: {valid}")


def parse_symbol(name: SphericalSymbol | str) -> SphericalSymbol:
    """
    Parse a spherical symbol name ('r', 'theta', 'θ', 'phi', 'φ').

    Raises:
        ValueError: If the name matches no symbol.
    """
    if isinstance(name, SphericalSymbol):
        return name

    normalized = name.strip().lower()
    if normalized in _SYMBOL_ALIASES:
        return _SYMBOL_ALIASES[normalized]

    valid = sorted(_SYMBOL_ALIASES)
    raise ValueError(f"Unknown spherical symbol: '{name}'. Valid: {valid}")
