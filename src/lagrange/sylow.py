"""Counting constraints from the Sylow theorems.

For |G| = p^alpha * m with p not dividing m, the number n_p of Sylow
p-subgroups divides m and satisfies n_p = 1 (mod p).
"""
from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from .errors import InvalidArgumentError


def _is_prime(p: int) -> bool:
    if p < 2:
        return False
    f = 2
    while f * f <= p:
        if p % f == 0:
            return False
        f += 1
    return True


def _check(order: int, p: int) -> None:
    if isinstance(order, bool) or not isinstance(order, int) or order < 1:
        raise InvalidArgumentError(f"group order must be a positive integer, got {order!r}")
    if isinstance(p, bool) or not isinstance(p, int) or not _is_prime(p):
        raise InvalidArgumentError(f"p must be prime, got {p!r}")


def sylow_decomposition(order: int, p: int) -> Tuple[int, int]:
    """Return ``(alpha, m)`` with ``order == p**alpha * m`` and ``m % p != 0``."""
    _check(order, p)
    alpha, m = 0, order
    while m % p == 0:
        m //= p
        alpha += 1
    return alpha, m


def divisors(m: int) -> List[int]:
    return [d for d in range(1, m + 1) if m % d == 0]


def sylow_candidates(order: int, p: int) -> List[int]:
    """Values of n_p allowed by the divisibility and congruence conditions."""
    _, m = sylow_decomposition(order, p)
    return [d for d in divisors(m) if d % p == 1]


def count_sylow_subgroups(element_orders: Iterable[int], p: int) -> int:
    """n_p for a group whose Sylow p-subgroups have order exactly p.

    Such subgroups are cyclic and intersect trivially, so each one holds
    p - 1 elements of order p.
    """
    orders = list(element_orders)
    _check(len(orders), p)
    alpha, _ = sylow_decomposition(len(orders), p)
    if alpha != 1:
        raise InvalidArgumentError(f"Sylow {p}-subgroups have order {p}**{alpha}, not {p}")
    return sum(1 for o in orders if o == p) // (p - 1)


def sylow_report(order: int, p: int) -> Dict[str, object]:
    alpha, m = sylow_decomposition(order, p)
    return {
        "order": order,
        "p": p,
        "alpha": alpha,
        "m": m,
        "divisors": divisors(m),
        "candidates": sylow_candidates(order, p),
    }


__all__ = [
    "sylow_decomposition",
    "divisors",
    "sylow_candidates",
    "count_sylow_subgroups",
    "sylow_report",
]
