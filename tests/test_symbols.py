"""Tests for constants and coordinate symbols."""

import math

import pytest

from precise_kernel.data.constants import GAMMA, KAPPA, MAX_SIGDIG, SIGDIG
from precise_kernel.data.symbols import (
    Axis,
    Dimension,
    Orientation,
    Sign,
    SphericalSymbol,
    parse_axis,
    parse_symbol,
)


class TestConstants:
    """Tests for numeric constants."""

    def test_sigdig(self) -> None:
        """Five digits after the decimal point."""
        assert SIGDIG == 5
        assert 0 <= SIGDIG <= MAX_SIGDIG

    def test_kappa_matches_formula(self) -> None:
        """KAPPA == 4 * (sqrt(2) - 1) / 3."""
        assert KAPPA == pytest.approx(4 * (math.sqrt(2) - 1) / 3, abs=1e-15)

    def test_gamma(self) -> None:
        """Gravitational constant."""
        assert GAMMA == 6.67408e-11


class TestEnums:
    """Tests for enum types."""

    def test_axes_defined(self) -> None:
        """Cartesian and galactic axes exist."""
        assert {a.value for a in Axis} == {"x", "y", "z", "U", "V", "W"}

    @pytest.mark.parametrize(
        "axis,expected",
        [
            (Axis.U, Axis.X),
            (Axis.V, Axis.Y),
            (Axis.W, Axis.Z),
            (Axis.X, Axis.X),
            (Axis.Z, Axis.Z),
        ],
    )
    def test_cartesian_alias(self, axis: Axis, expected: Axis) -> None:
        """Galactic axes map onto cartesian ones."""
        assert axis.cartesian is expected

    def test_orientation_sign(self) -> None:
        """Right is positive, left is negative."""
        assert Orientation.RIGHT.sign is Sign.POS
        assert Orientation.LEFT.sign is Sign.NEG
        assert Sign.NEG.value == -1

    def test_dimension_values(self) -> None:
        """Dimensions carry their integer count."""
        assert [d.value for d in Dimension] == [1, 2, 3]

    def test_axes_are_distinct(self) -> None:
        """Every axis is a distinct member."""
        assert len(set(Axis)) == 6


class TestParseAxis:
    """Tests for parse_axis."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("x", Axis.X),
            ("X", Axis.X),
            (" y ", Axis.Y),
            ("U", Axis.U),
            ("u", Axis.U),
            (Axis.W, Axis.W),
        ],
    )
    def test_parse(self, name: Axis | str, expected: Axis) -> None:
        """Names are matched case-insensitively."""
        assert parse_axis(name) is expected

    def test_unknown_raises(self) -> None:
        """Unknown names list valid choices."""
        with pytest.raises(ValueError, match="Unknown axis: 't'"):
            parse_axis("t")


class TestParseSymbol:
    """Tests for parse_symbol."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("r", SphericalSymbol.R),
            ("radius", SphericalSymbol.R),
            ("θ", SphericalSymbol.THETA),
            ("Theta", SphericalSymbol.THETA),
            ("φ", SphericalSymbol.PHI),
            ("phi", SphericalSymbol.PHI),
            (SphericalSymbol.PHI, SphericalSymbol.PHI),
        ],
    )
    def test_parse(self, name: SphericalSymbol | str, expected: SphericalSymbol) -> None:
        """Greek letters and spelled-out names are accepted."""
        assert parse_symbol(name) is expected

    def test_unknown_raises(self) -> None:
        """Unknown names raise ValueError."""
        with pytest.raises(ValueError, match="Unknown spherical symbol"):
            parse_symbol("rho")
