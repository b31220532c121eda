"""Durand–Kerner (Weierstrass) solver for monic cubics x^3 + a x^2 + b x + c.

All three roots are refined together. Every guess ``x`` is corrected by

    x <- x - f(x) / ((x - other1) * (x - other2))

for a fixed number of sweeps. Two interleavings are supported:

- ``sequential`` (default): p is updated first, q then reads the updated p and
  the previous r, and r reads the updated p and q. This is the ordering the
  presentation's golden values were captured with.
- ``simultaneous``: all three corrections are computed from one snapshot of
  (p, q, r) before any guess moves.

Both converge to the same roots for well-separated inputs; near repeated roots
the outputs differ slightly.
"""
from __future__ import annotations

from typing import Optional, Sequence, Tuple

from .complex_ops import Complex, add, divide, magnitude, multiply, subtract
from .errors import DivisionByZeroError, InvalidArgumentError

DEFAULT_ITERATIONS = 20
SEEDS: Tuple[Complex, Complex, Complex] = (
    Complex(0.4, 0.9),
    Complex(-0.9, 0.4),
    Complex(0.5, -0.8),
)
MODES = ("sequential", "simultaneous")

Roots = Tuple[Complex, Complex, Complex]


def evaluate_cubic(a: float, b: float, c: float, x: Complex) -> Complex:
    """Evaluate x^3 + a x^2 + b x + c with the engine's complex arithmetic."""
    x2 = multiply(x, x)
    x3 = multiply(x2, x)
    ax2 = multiply(Complex(a, 0.0), x2)
    bx = multiply(Complex(b, 0.0), x)
    res = add(x3, ax2)
    res = add(res, bx)
    return add(res, Complex(c, 0.0))


def _correction(a: float, b: float, c: float, x: Complex, o1: Complex, o2: Complex) -> Complex:
    denom = multiply(subtract(x, o1), subtract(x, o2))
    try:
        return divide(evaluate_cubic(a, b, c, x), denom)
    except DivisionByZeroError:
        # coincident guesses: hold this one for the sweep
        return Complex(0.0, 0.0)


def solve_cubic_equation(
    a: float,
    b: float,
    c: float,
    *,
    iterations: int = DEFAULT_ITERATIONS,
    tol: Optional[float] = None,
    mode: str = "sequential",
) -> Roots:
    """Return the three complex roots of x^3 + a x^2 + b x + c.

    The root order follows the seeds and the iteration path; no canonical
    ordering is applied. With ``tol`` set, iteration stops early once every
    correction in a sweep is smaller than ``tol`` in magnitude. The solver
    never signals non-convergence.
    """
    if not isinstance(iterations, int) or iterations < 1:
        raise InvalidArgumentError(f"iterations must be a positive integer, got {iterations!r}")
    if mode not in MODES:
        raise InvalidArgumentError(f"unknown update mode {mode!r}; expected one of {MODES}")
    a, b, c = float(a), float(b), float(c)
    p, q, r = SEEDS

    for _ in range(iterations):
        if mode == "sequential":
            dp = _correction(a, b, c, p, q, r)
            p = subtract(p, dp)
            dq = _correction(a, b, c, q, p, r)
            q = subtract(q, dq)
            dr = _correction(a, b, c, r, p, q)
            r = subtract(r, dr)
        else:
            dp = _correction(a, b, c, p, q, r)
            dq = _correction(a, b, c, q, p, r)
            dr = _correction(a, b, c, r, p, q)
            p, q, r = subtract(p, dp), subtract(q, dq), subtract(r, dr)
        if tol is not None and max(magnitude(dp), magnitude(dq), magnitude(dr)) < tol:
            break

    return (p, q, r)


def residuals(a: float, b: float, c: float, roots: Sequence[Complex]) -> Tuple[float, ...]:
    """|f(x)| for each root; small values mean the roots satisfy the cubic."""
    return tuple(magnitude(evaluate_cubic(a, b, c, x)) for x in roots)


__all__ = [
    "DEFAULT_ITERATIONS",
    "SEEDS",
    "MODES",
    "evaluate_cubic",
    "solve_cubic_equation",
    "residuals",
]
