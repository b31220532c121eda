"""Minimal complex arithmetic on an immutable (r, i) value type.

The presentation layer exchanges roots as plain pairs, so the engine keeps its
own small value type instead of Python's ``complex``. Converters to and from
``complex`` are provided for numerical cross-checks.
"""
from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Tuple

from .errors import DivisionByZeroError


@dataclass(frozen=True)
class Complex:
    """Complex number ``r + i·j``."""

    r: float
    i: float = 0.0

    def to_complex(self) -> complex:
        return complex(self.r, self.i)

    def as_tuple(self) -> Tuple[float, float]:
        return (float(self.r), float(self.i))

    def __str__(self) -> str:
        sign = "+" if self.i >= 0 else "-"
        return f"{self.r:.6f} {sign} {abs(self.i):.6f}i"


def from_complex(z: complex) -> Complex:
    return Complex(float(z.real), float(z.imag))


def add(a: Complex, b: Complex) -> Complex:
    return Complex(a.r + b.r, a.i + b.i)


def subtract(a: Complex, b: Complex) -> Complex:
    return Complex(a.r - b.r, a.i - b.i)


def multiply(a: Complex, b: Complex) -> Complex:
    return Complex(a.r * b.r - a.i * b.i, a.r * b.i + a.i * b.r)


def divide(a: Complex, b: Complex) -> Complex:
    """Return ``a / b``; a divisor of zero magnitude raises DivisionByZeroError."""
    denom = b.r * b.r + b.i * b.i
    if denom == 0.0:
        raise DivisionByZeroError(f"cannot divide {a} by a zero-magnitude complex number")
    return Complex(
        (a.r * b.r + a.i * b.i) / denom,
        (a.i * b.r - a.r * b.i) / denom,
    )


def magnitude(z: Complex) -> float:
    return math.sqrt(z.r * z.r + z.i * z.i)


def from_angle(theta: float) -> Complex:
    """Unit complex number at angle ``theta`` (radians)."""
    return Complex(math.cos(theta), math.sin(theta))


def cube(z: Complex) -> Complex:
    z2 = multiply(z, z)
    return multiply(z2, z)


# primitive cube roots of unity
OMEGA = from_angle((2 * math.pi) / 3)
OMEGA_SQ = from_angle((4 * math.pi) / 3)


__all__ = [
    "Complex",
    "from_complex",
    "add",
    "subtract",
    "multiply",
    "divide",
    "magnitude",
    "from_angle",
    "cube",
    "OMEGA",
    "OMEGA_SQ",
]
