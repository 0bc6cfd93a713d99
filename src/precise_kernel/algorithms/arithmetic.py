"""Precision-corrected arithmetic with fixed decimal rounding.

Binary floating point cannot represent most decimal fractions, so naive
chained arithmetic leaks artifacts such as ``0.1 + 0.2 == 0.30000000000000004``.
Every operation here routes each intermediate value through one rounding
step (``precise``) and performs additive steps on values shifted past the
decimal point (``scale_up`` / ``scale_down``), so results always carry exactly
``sigdig`` digits after the decimal point.

Key Properties:
- All operations are variadic folds over their operands
- Subtraction and division are left-to-right, power is a right-associative tower
- Non-finite values follow IEEE-754 and propagate; nothing raises

References:
- Goldberg: "What Every Computer Scientist Should Know About Floating-Point
  Arithmetic" (1991)
- ECMA-262 ``Number.prototype.toFixed``
"""

from __future__ import annotations

import math
from collections.abc import Callable
from decimal import ROUND_HALF_UP, Context, Decimal

import numpy as np

from precise_kernel.data.constants import FIXED_DECIMAL_LIMIT, MAX_SIGDIG, SIGDIG
from precise_kernel.log import get_logger

log = get_logger(__name__)

_OPERATION_ALIASES: dict[str, str] = {
    "add": "add",
    "subtract": "subtract",
    "sub": "subtract",
    "multiply": "multiply",
    "mul": "multiply",
    "divide": "divide",
    "div": "divide",
    "pow": "pow",
}


class PrecisionEngine:
    """Arithmetic engine rounding every result to a fixed digit count.

    The module-level functions (``add``, ``subtract``, ...) are bound to a
    default engine using ``SIGDIG`` digits. Build a separate engine only when
    a different digit count is needed.

    Example:
        >>> engine = PrecisionEngine(2)
        >>> engine.divide(2, 3)
        0.67
    """

    __slots__ = (
        "_sigdig",
        "_scale",
        "_quantum",
        "_context",
    )

    def __init__(self, sigdig: int = SIGDIG) -> None:
        """Initialize engine.

        Args:
            sigdig: Digits kept after the decimal point, in [0, MAX_SIGDIG].

        Raises:
            ValueError: If sigdig is out of range.
        """
        if not 0 <= sigdig <= MAX_SIGDIG:
            raise ValueError(f"sigdig must be in [0, {MAX_SIGDIG}], got {sigdig}")

        self._sigdig = int(sigdig)
        self._scale = 10.0**self._sigdig
        self._quantum = Decimal(1).scaleb(-self._sigdig)
        # Integer part below FIXED_DECIMAL_LIMIT needs at most 21 digits
        self._context = Context(prec=22 + self._sigdig, rounding=ROUND_HALF_UP)

    @property
    def sigdig(self) -> int:
        """Digits kept after the decimal point."""
        return self._sigdig

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(sigdig={self._sigdig})"

    # -------------------------------------------------------------------------
    # Normalization primitives
    # -------------------------------------------------------------------------

    def precise(self, value: float) -> float:
        """Round value to ``sigdig`` decimal places.

        Rounds the exact binary value with ties away from zero, the same rule
        as fixed-decimal string formatting. Non-finite values and magnitudes
        of at least 1e21 are returned unchanged. Zero always comes back as
        positive zero; small negatives that round to zero keep their sign.
        """
        if value == 0:
            return 0.0
        if not math.isfinite(value) or abs(value) >= FIXED_DECIMAL_LIMIT:
            return float(value)
        rounded = Decimal(value).quantize(
            self._quantum, rounding=ROUND_HALF_UP, context=self._context
        )
        return float(rounded)

    def scale_up(self, value: float) -> float:
        """Shift the decimal point right by ``sigdig`` places."""
        return self.precise(value) * self._scale

    def scale_down(self, value: float) -> float:
        """Shift the decimal point left by ``sigdig`` places and re-round."""
        return self.precise(value / self._scale)

    # -------------------------------------------------------------------------
    # Variadic operations
    # -------------------------------------------------------------------------

    def add(self, *values: float) -> float:
        """Sum values left to right. ``add()`` is 0."""
        acc = 0.0
        for value in values:
            acc = self.scale_down(self.scale_up(acc) + self.scale_up(value))
        return self._finish("add", acc)

    def subtract(self, *values: float) -> float:
        """Subtract left to right: ``subtract(a, b, c) == (a - b) - c``.

        The first operand seeds the accumulator as is, so ``subtract(a)``
        returns ``a`` without rounding.
        """
        if not values:
            return 0.0
        acc = float(values[0])
        for value in values[1:]:
            acc = self.scale_down(self.scale_up(acc) - self.scale_up(value))
        return self._finish("subtract", acc)

    def multiply(self, *values: float) -> float:
        """Multiply left to right. ``multiply()`` is 1.

        Only the accumulator is scaled; each operand enters unscaled.
        """
        acc = 1.0
        for value in values:
            acc = self.scale_down(self.scale_up(acc) * value)
        return self._finish("multiply", acc)

    def divide(self, *values: float) -> float:
        """Divide left to right: ``divide(a, b, c) == (a / b) / c``.

        Division by zero yields inf or nan.
        """
        if not values:
            return 0.0
        acc = float(values[0])
        with np.errstate(all="ignore"):
            for value in values[1:]:
                acc = self.scale_down(float(np.divide(self.scale_up(acc), value)))
        return self._finish("divide", acc)

    def pow(self, *values: float) -> float:
        """Evaluate an exponent tower, innermost (last) exponent first.

        The operands are reversed and folded from 1, so ``pow(a, b, c)``
        raises ``a`` to ``b ** c``. Negative bases with fractional exponents
        yield nan.

        Example:
            >>> PrecisionEngine().pow(2, -2, 2)
            16.0
        """
        acc = 1.0
        with np.errstate(all="ignore"):
            for value in reversed(values):
                acc = self.precise(float(np.power(self.precise(value), acc)))
        return self._finish("pow", acc)

    # -------------------------------------------------------------------------
    # Derived helpers
    # -------------------------------------------------------------------------

    def inv(self, value: float, minuend: float = 1) -> float:
        """Additive inverse of value relative to minuend (default 1)."""
        return self.subtract(minuend, value)

    def neg(self, value: float) -> float:
        """Negate value."""
        return self.multiply(value, -1)

    def e2(self, value: float) -> float:
        """Square of value."""
        return self.pow(value, 2)

    def e3(self, value: float) -> float:
        """Cube of value."""
        return self.pow(value, 3)

    def delta(self, a: float, b: float) -> float:
        """Signed change from a to b (``b - a``)."""
        return self.subtract(b, a)

    def get_operation(self, name: str) -> Callable[..., float]:
        """
        Look up a variadic operation by name.

        Args:
            name: 'add', 'subtract', 'multiply', 'divide', 'pow', or one of
                the short aliases 'sub', 'mul', 'div'.

        Returns:
            Bound engine method.

        Raises:
            ValueError: If the name is unknown.
        """
        normalized = name.strip().lower()
        if normalized not in _OPERATION_ALIASES:
            valid = sorted(_OPERATION_ALIASES)
            raise ValueError(f"Unknown operation: '{name}'. Valid: {valid}")
        method: Callable[..., float] = getattr(self, _OPERATION_ALIASES[normalized])
        return method

    def _finish(self, operation: str, result: float) -> float:
        if not math.isfinite(result):
            log.debug("%s produced non-finite result %r", operation, result)
        return result


DEFAULT_ENGINE = PrecisionEngine(SIGDIG)


# =============================================================================
# PUBLIC API (default engine)
# =============================================================================


def precise(value: float) -> float:
    """Round value to SIGDIG decimal places."""
    return DEFAULT_ENGINE.precise(value)


def scale_up(value: float) -> float:
    """Shift the decimal point right by SIGDIG places."""
    return DEFAULT_ENGINE.scale_up(value)


def scale_down(value: float) -> float:
    """Shift the decimal point left by SIGDIG places and re-round."""
    return DEFAULT_ENGINE.scale_down(value)


def add(*values: float) -> float:
    """
    Add values with floating point error correction.

    Example:
        >>> add(0.1, 0.2)
        0.3
    """
    return DEFAULT_ENGINE.add(*values)


def subtract(*values: float) -> float:
    """
    Subtract values left to right with floating point error correction.

    Example:
        >>> subtract(0.3, 0.1)
        0.2
    """
    return DEFAULT_ENGINE.subtract(*values)


def multiply(*values: float) -> float:
    """
    Multiply values with floating point error correction.

    Example:
        >>> multiply(-2, -2, -2)
        -8.0
    """
    return DEFAULT_ENGINE.multiply(*values)


def divide(*values: float) -> float:
    """
    Divide values left to right with floating point error correction.

    Example:
        >>> divide(2, 3)
        0.66667
    """
    return DEFAULT_ENGINE.divide(*values)


def pow(*values: float) -> float:
    """
    Right-associative power tower: ``pow(a, b, c) == a ** (b ** c)``.

    Example:
        >>> pow(2, 2, 2)
        16.0
    """
    return DEFAULT_ENGINE.pow(*values)


def inv(value: float, minuend: float = 1) -> float:
    """Additive inverse of value relative to minuend (default 1)."""
    return DEFAULT_ENGINE.inv(value, minuend)


def neg(value: float) -> float:
    """Negate value."""
    return DEFAULT_ENGINE.neg(value)


def e2(value: float) -> float:
    """Square of value."""
    return DEFAULT_ENGINE.e2(value)


def e3(value: float) -> float:
    """Cube of value."""
    return DEFAULT_ENGINE.e3(value)


def delta(a: float, b: float) -> float:
    """Signed change from a to b (``b - a``)."""
    return DEFAULT_ENGINE.delta(a, b)


def get_operation(name: str) -> Callable[..., float]:
    """Look up a variadic operation of the default engine by name."""
    return DEFAULT_ENGINE.get_operation(name)
