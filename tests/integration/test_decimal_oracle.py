"""Integration tests against a decimal-arithmetic oracle.

Binary floating point results must match exact decimal arithmetic rounded to
SIGDIG places after every fold step. The oracle uses the standard library
``decimal`` module with ties rounded away from zero.

Operands are generated once from a fixed seed and rounded to SIGDIG places,
so every operand is an exact decimal.
"""

import operator
from collections.abc import Callable
from decimal import ROUND_HALF_UP, Decimal

import numpy as np
import pytest

from precise_kernel.algorithms.arithmetic import add, divide, multiply, subtract
from precise_kernel.data.constants import SIGDIG

# Test parameters
SEED = 42
NUM_CASES = 25
MIN_MAGNITUDE = 0.5
MAX_MAGNITUDE = 100.0

QUANTUM = Decimal(1).scaleb(-SIGDIG)

OPERATIONS: dict[str, tuple[Callable[..., float], Callable[[Decimal, Decimal], Decimal]]] = {
    "add": (add, operator.add),
    "subtract": (subtract, operator.sub),
    "multiply": (multiply, operator.mul),
    "divide": (divide, operator.truediv),
}


def oracle(op: Callable[[Decimal, Decimal], Decimal], *values: float) -> float:
    """Fold values with exact decimal arithmetic, rounding after each step."""
    acc = Decimal(repr(values[0]))
    for value in values[1:]:
        acc = op(acc, Decimal(repr(value))).quantize(QUANTUM, rounding=ROUND_HALF_UP)
    return float(acc)


def generate_operands() -> list[tuple[float, float, float]]:
    """Signed five-decimal operands with magnitudes in [0.5, 100]."""
    rng = np.random.default_rng(SEED)
    magnitudes = rng.uniform(MIN_MAGNITUDE, MAX_MAGNITUDE, size=(NUM_CASES, 3))
    signs = rng.choice([-1.0, 1.0], size=(NUM_CASES, 3))

    return [
        tuple(round(float(s * m), SIGDIG) for s, m in zip(sign_row, mag_row, strict=True))
        for sign_row, mag_row in zip(signs, magnitudes, strict=True)
    ]


OPERANDS = generate_operands()


class TestReferenceValues:
    """Fixed operands covering binary and ternary folds."""

    A = 1.12345
    B = 1.01234
    C = 1.00123

    @pytest.mark.parametrize("name", list(OPERATIONS))
    def test_binary(self, name: str) -> None:
        """Two-operand results match the decimal oracle."""
        func, op = OPERATIONS[name]
        assert func(self.A, self.B) == oracle(op, self.A, self.B)

    @pytest.mark.parametrize("name", list(OPERATIONS))
    def test_ternary(self, name: str) -> None:
        """Three-operand results match the decimal oracle."""
        func, op = OPERATIONS[name]
        assert func(self.A, self.B, self.C) == oracle(op, self.A, self.B, self.C)

    def test_known_values(self) -> None:
        """Spot-check the oracle itself."""
        assert oracle(operator.add, self.A, self.B) == 2.13579
        assert oracle(operator.mul, self.A, self.B) == 1.13731
        assert oracle(operator.truediv, self.A, self.B) == 1.10976


class TestSeededOperands:
    """Seeded operand triples across signs and magnitudes."""

    @pytest.mark.parametrize("name", list(OPERATIONS))
    @pytest.mark.parametrize("values", OPERANDS)
    def test_matches_oracle(self, name: str, values: tuple[float, float, float]) -> None:
        """Ternary folds match exact decimal folds."""
        func, op = OPERATIONS[name]
        assert func(*values) == oracle(op, *values)
