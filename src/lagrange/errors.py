"""Error types raised by the lagrange engine."""
from __future__ import annotations


class LagrangeError(Exception):
    """Base class for engine errors."""


class DivisionByZeroError(LagrangeError, ZeroDivisionError):
    """Complex division by a divisor of zero magnitude."""


class InvalidArgumentError(LagrangeError, ValueError):
    """Input outside the contract of a group or solver operation."""


__all__ = ["LagrangeError", "DivisionByZeroError", "InvalidArgumentError"]
