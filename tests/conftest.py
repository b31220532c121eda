import math

import pytest

from lagrange.complex_ops import Complex


def match_roots(found, expected, tol):
    """True when ``found`` equals ``expected`` as a multiset, within ``tol``."""
    remaining = list(expected)
    for z in found:
        dists = [abs(z.to_complex() - w) for w in remaining]
        best = min(range(len(dists)), key=dists.__getitem__)
        if dists[best] > tol:
            return False
        remaining.pop(best)
    return not remaining


@pytest.fixture
def cube_roots_of_unity():
    return (
        Complex(1.0, 0.0),
        Complex(math.cos(2 * math.pi / 3), math.sin(2 * math.pi / 3)),
        Complex(math.cos(4 * math.pi / 3), math.sin(4 * math.pi / 3)),
    )
