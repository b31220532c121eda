"""Lagrange resolvent of a cubic's roots under a permutation from S3.

    y = (x_p0 + w * x_p1 + w^2 * x_p2)^3

Only |y| is surfaced. Over the six permutations y takes at most two values:
the 3-cycles leave it unchanged and the transpositions swap the two.
"""
from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

from .complex_ops import OMEGA, OMEGA_SQ, Complex, add, cube, magnitude, multiply
from .symmetric import S3_ELEMENTS, apply_permutation, validate_permutation


def resolvent_value(roots: Sequence[Complex], perm: Sequence[int]) -> Complex:
    x1, x2, x3 = apply_permutation(list(roots), validate_permutation(perm))
    term2 = multiply(x2, OMEGA)
    term3 = multiply(x3, OMEGA_SQ)
    return cube(add(add(x1, term2), term3))


def evaluate_resolvent(roots: Sequence[Complex], perm: Sequence[int]) -> float:
    return magnitude(resolvent_value(roots, perm))


def resolvent_table(roots: Sequence[Complex]) -> List[Dict[str, object]]:
    rows = []
    for el in S3_ELEMENTS:
        y = resolvent_value(roots, el.perm)
        rows.append(
            {
                "id": el.id,
                "label": el.label,
                "perm": list(el.perm),
                "y": list(y.as_tuple()),
                "magnitude": magnitude(y),
            }
        )
    return rows


def distinct_resolvent_values(roots: Sequence[Complex], *, tol: float = 1e-9) -> List[Tuple[Complex, List[str]]]:
    """Group S3 elements by the resolvent value they produce (within ``tol``)."""
    groups: List[Tuple[Complex, List[str]]] = []
    for el in S3_ELEMENTS:
        y = resolvent_value(roots, el.perm)
        for value, ids in groups:
            if magnitude(Complex(y.r - value.r, y.i - value.i)) <= tol * max(1.0, magnitude(value)):
                ids.append(el.id)
                break
        else:
            groups.append((y, [el.id]))
    return groups


__all__ = [
    "resolvent_value",
    "evaluate_resolvent",
    "resolvent_table",
    "distinct_resolvent_values",
]
