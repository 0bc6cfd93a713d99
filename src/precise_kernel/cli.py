"""
Command-line interface for Precise Kernel.

Usage:
    precise-kernel info          Show constants and available operations
    precise-kernel calc          Run a precision-corrected operation
    precise-kernel curve         Sample a lerp / quadratic / cubic bezier curve
"""

from collections.abc import Callable
from functools import partial
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from precise_kernel import __version__
from precise_kernel.algorithms import (
    Point,
    PrecisionEngine,
    cbez_point,
    lerp_point,
    qbez_point,
    sample_curve,
)
from precise_kernel.data import GAMMA, KAPPA, SIGDIG
from precise_kernel.log import get_logger

log = get_logger(__name__)

app = typer.Typer(
    name="precise-kernel",
    help="Decimal-corrected arithmetic and bezier interpolation",
    add_completion=False,
)
console = Console()

# kind -> (number of points, point interpolant)
_CURVES: dict[str, tuple[int, Callable[..., Point]]] = {
    "lerp": (2, lerp_point),
    "qbez": (3, qbez_point),
    "cbez": (4, cbez_point),
}

_OPERATIONS: dict[str, str] = {
    "add": "a + b + ... (left fold)",
    "subtract": "a - b - ... (left fold)",
    "multiply": "a * b * ... (left fold)",
    "divide": "a / b / ... (left fold)",
    "pow": "a ^ (b ^ (...)) (right fold)",
}


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"precise-kernel version {__version__}")
        raise typer.Exit()


def parse_point(text: str) -> Point:
    """Parse 'x,y' into a Point."""
    parts = [p.strip() for p in text.split(",")]
    if len(parts) != 2:
        raise ValueError(f"Point must look like 'x,y', got '{text}'")
    try:
        return Point(float(parts[0]), float(parts[1]))
    except ValueError:
        raise ValueError(f"Point coordinates must be numbers, got '{text}'") from None


def _fail(error: ValueError) -> typer.Exit:
    console.print(f"[red]Error:[/] {escape(str(error))}")
    return typer.Exit(code=1)


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Precise Kernel - decimal-corrected numerics."""
    pass


@app.command()
def info() -> None:
    """Display constants and available operations."""
    constants = Table(title="Constants")

    constants.add_column("Name", style="cyan", no_wrap=True)
    constants.add_column("Value", justify="right")
    constants.add_column("Meaning")

    constants.add_row("SIGDIG", str(SIGDIG), "Digits kept after the decimal point")
    constants.add_row("KAPPA", f"{KAPPA:.15f}", "Cubic bezier circle constant")
    constants.add_row("GAMMA", f"{GAMMA:.5e}", "Gravitational constant")

    console.print(constants)

    operations = Table(title="Operations")
    operations.add_column("Operation", style="cyan", no_wrap=True)
    operations.add_column("Evaluation")

    for name, evaluation in _OPERATIONS.items():
        operations.add_row(name, evaluation)

    console.print(operations)


@app.command()
def calc(
    operation: Annotated[
        str,
        typer.Argument(help="add, subtract, multiply, divide or pow"),
    ],
    values: Annotated[
        list[float],
        typer.Argument(help="Operands (use -- before negative numbers)"),
    ],
    digits: Annotated[
        int,
        typer.Option("--digits", "-d", help="Digits after the decimal point"),
    ] = SIGDIG,
) -> None:
    """Run a precision-corrected operation over the operands."""
    try:
        engine = PrecisionEngine(digits)
        func = engine.get_operation(operation)
    except ValueError as e:
        raise _fail(e) from e

    result = func(*values)
    log.info("%s%s = %r", operation, tuple(values), result)
    console.print(repr(result))


@app.command()
def curve(
    kind: Annotated[
        str,
        typer.Argument(help="lerp, qbez or cbez"),
    ],
    points: Annotated[
        list[str] | None,
        typer.Option("--point", "-p", help="Point as 'x,y' (repeat in curve order)"),
    ] = None,
    samples: Annotated[
        int,
        typer.Option("--samples", "-n", help="Number of samples"),
    ] = 5,
) -> None:
    """Sample a curve and print its points.

    Points are given in curve order: start, controls, end.
    """
    normalized = kind.strip().lower()
    try:
        if normalized not in _CURVES:
            valid = list(_CURVES)
            raise ValueError(f"Unknown curve: '{kind}'. Valid: {valid}")

        expected, interpolant = _CURVES[normalized]
        parsed = [parse_point(p) for p in points or []]
        if len(parsed) != expected:
            raise ValueError(f"{normalized} needs {expected} points, got {len(parsed)}")

        params, rows = sample_curve(partial(interpolant, *parsed), samples)
    except ValueError as e:
        raise _fail(e) from e

    table = Table(title=f"{normalized.upper()} samples")
    table.add_column("t", justify="right")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")

    for t, (x, y) in zip(params, rows, strict=True):
        table.add_row(repr(float(t)), repr(float(x)), repr(float(y)))

    console.print(table)


if __name__ == "__main__":
    app()
