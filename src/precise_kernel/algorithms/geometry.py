"""Immutable points with computed coordinate accessors.

Cartesian coordinates are stored; galactic aliases and spherical components
(radius, polar angle, azimuth) are derived on access through the corrected
arithmetic so they carry the same rounding as every other result.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

import numpy as np

from precise_kernel.algorithms.arithmetic import add, divide, e2, precise
from precise_kernel.algorithms.arithmetic import pow as power
from precise_kernel.data.symbols import (
    Axis,
    Dimension,
    Orientation,
    SphericalSymbol,
    parse_axis,
    parse_symbol,
)


@dataclass(frozen=True, slots=True)
class Point:
    """A 2-D or 3-D point in a cartesian coordinate system."""

    x: float
    """Distance from 0 on the first axis."""

    y: float
    """Distance from 0 on the second axis."""

    z: float | None = None
    """Distance from 0 on the third axis (None for planar points)."""

    orientation: Orientation = Orientation.RIGHT
    """Direction of rotation about the origin."""

    @property
    def dimensions(self) -> Dimension:
        """Number of stored coordinates."""
        return Dimension.TWO if self.z is None else Dimension.THREE

    @property
    def rotation(self) -> Orientation:
        """Direction of rotation about the origin."""
        return self.orientation

    def with_rotation(self, orientation: Orientation) -> Point:
        """Copy of this point with a different orientation."""
        return replace(self, orientation=orientation)

    def coordinate(self, axis: Axis | str) -> float | None:
        """Value along an axis; galactic U, V, W alias x, y, z."""
        cartesian = parse_axis(axis).cartesian
        if cartesian is Axis.X:
            return self.x
        if cartesian is Axis.Y:
            return self.y
        return self.z

    @property
    def u(self) -> float:
        """Galactic alias of x."""
        return self.x

    @property
    def v(self) -> float:
        """Galactic alias of y."""
        return self.y

    @property
    def w(self) -> float | None:
        """Galactic alias of z; None for planar points."""
        return self.z

    @property
    def radius(self) -> float:
        """Radial distance from the origin."""
        return power(add(e2(self.x), e2(self.y), e2(self._z_or_zero())), 0.5)

    @property
    def polar_angle(self) -> float:
        """Polar angle (radians) measured from the zenith; nan at the origin."""
        ratio = divide(self._z_or_zero(), self.radius)
        with np.errstate(all="ignore"):
            angle = np.arccos(np.clip(ratio, -1.0, 1.0))
        return precise(float(angle))

    @property
    def azimuth(self) -> float:
        """Azimuth angle (radians) in the reference plane."""
        return precise(float(np.arctan2(self.y, self.x)))

    def spherical(self, symbol: SphericalSymbol | str) -> float:
        """Spherical component by symbol ('r', 'theta', 'phi')."""
        parsed = parse_symbol(symbol)
        if parsed is SphericalSymbol.R:
            return self.radius
        if parsed is SphericalSymbol.THETA:
            return self.polar_angle
        return self.azimuth

    def as_tuple(self) -> tuple[float, ...]:
        """Stored coordinates as a tuple."""
        if self.z is None:
            return (self.x, self.y)
        return (self.x, self.y, self.z)

    def _z_or_zero(self) -> float:
        return 0.0 if self.z is None else self.z
