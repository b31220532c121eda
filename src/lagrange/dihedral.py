"""Dihedral group D_n of order 2n acting on the vertices of a regular n-gon.

Elements are tagged values ``(kind, k, n)`` rather than stored closures so they
stay hashable and comparable; the action is dispatched on the tag.

Convention: ``s`` is the reflection across the axis through vertex 0, so
``s(i) = -i mod n``, and ``sr^k(i) = s(i + k) = -(i + k) mod n``.
"""
from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Dict, Iterable, List, Sequence, Tuple

import numpy as np

from .errors import InvalidArgumentError

ROTATION = "rotation"
REFLECTION = "reflection"
KINDS = (ROTATION, REFLECTION)


def dihedral_action(kind: str, k: int, i: int, n: int) -> int:
    """Image of vertex ``i`` under rotation ``r^k`` or reflection ``sr^k``."""
    rotated = (i + k) % n
    if kind == ROTATION:
        return rotated
    if kind == REFLECTION:
        return (n - rotated) % n
    raise InvalidArgumentError(f"unknown dihedral element kind {kind!r}")


@dataclass(frozen=True)
class DihedralElement:
    """Rotation ``r^k`` or reflection ``sr^k`` of the n-gon."""

    kind: str
    k: int
    n: int

    def __post_init__(self) -> None:
        _check_n(self.n)
        if self.kind not in KINDS:
            raise InvalidArgumentError(f"unknown dihedral element kind {self.kind!r}")
        if isinstance(self.k, bool) or not isinstance(self.k, int) or not 0 <= self.k < self.n:
            raise InvalidArgumentError(f"exponent k must be in [0, {self.n}), got {self.k!r}")

    @property
    def id(self) -> str:
        return f"r{self.k}" if self.kind == ROTATION else f"s{self.k}"

    @property
    def latex(self) -> str:
        if self.kind == ROTATION:
            if self.k == 0:
                return "e"
            return "r" if self.k == 1 else f"r^{self.k}"
        return "s" if self.k == 0 else f"sr^{self.k}"

    @property
    def name(self) -> str:
        if self.kind == ROTATION:
            return "Identity" if self.k == 0 else f"Rotation {self.k}"
        return f"Reflection {self.k}"

    def action(self, index: int, n: int | None = None) -> int:
        return dihedral_action(self.kind, self.k, int(index), self.n if n is None else int(n))

    def permutation(self) -> Tuple[int, ...]:
        """Images of vertices 0..n-1."""
        return tuple(self.action(i) for i in range(self.n))

    def to_dict(self) -> Dict[str, object]:
        return {
            "id": self.id,
            "latex": self.latex,
            "name": self.name,
            "type": self.kind,
            "k": self.k,
            "permutation": list(self.permutation()),
        }


def _check_n(n: int) -> int:
    if isinstance(n, bool) or not isinstance(n, int) or n < 3:
        raise InvalidArgumentError(f"dihedral group needs a polygon with n >= 3 vertices, got {n!r}")
    return n


def generate_dihedral_group(n: int) -> List[DihedralElement]:
    """The 2n elements of D_n: rotations r^0..r^(n-1), then reflections sr^0..sr^(n-1)."""
    n = _check_n(n)
    elements = [DihedralElement(ROTATION, k, n) for k in range(n)]
    elements.extend(DihedralElement(REFLECTION, k, n) for k in range(n))
    return elements


def _check_vertex(vertex: int, n: int) -> int:
    if isinstance(vertex, bool) or not isinstance(vertex, int) or not 0 <= vertex < n:
        raise InvalidArgumentError(f"vertex must be in [0, {n}), got {vertex!r}")
    return vertex


def stabilizer(elements: Iterable[DihedralElement], vertex: int, n: int) -> List[DihedralElement]:
    vertex = _check_vertex(vertex, _check_n(n))
    return [el for el in elements if el.action(vertex, n) == vertex]


def orbit(elements: Iterable[DihedralElement], vertex: int, n: int) -> List[int]:
    vertex = _check_vertex(vertex, _check_n(n))
    return sorted({el.action(vertex, n) for el in elements})


def compose(first: DihedralElement, second: DihedralElement) -> DihedralElement:
    """Element acting as ``first`` followed by ``second``."""
    if first.n != second.n:
        raise InvalidArgumentError(f"cannot compose elements of D{first.n} and D{second.n}")
    n = first.n
    if first.kind == ROTATION and second.kind == ROTATION:
        return DihedralElement(ROTATION, (first.k + second.k) % n, n)
    if first.kind == ROTATION:
        return DihedralElement(REFLECTION, (first.k + second.k) % n, n)
    if second.kind == ROTATION:
        return DihedralElement(REFLECTION, (first.k - second.k) % n, n)
    return DihedralElement(ROTATION, (first.k - second.k) % n, n)


def inverse(element: DihedralElement) -> DihedralElement:
    if element.kind == REFLECTION:
        return element
    return DihedralElement(ROTATION, (-element.k) % element.n, element.n)


def element_order(element: DihedralElement) -> int:
    if element.kind == REFLECTION:
        return 2
    return element.n // math.gcd(element.k, element.n)


@dataclass(frozen=True)
class Vertex:
    x: float
    y: float
    label: int

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y, "label": self.label}


def generate_polygon_vertices(n: int, radius: float = 1.0) -> List[Vertex]:
    """Regular n-gon with vertex 0 at the top (angle -pi/2).

    Angles grow with the index, which runs clockwise in y-down screen
    coordinates. Labels are 1-based.
    """
    n = _check_n(n)
    theta = -math.pi / 2 + (2 * math.pi / n) * np.arange(n)
    xs = float(radius) * np.cos(theta)
    ys = float(radius) * np.sin(theta)
    return [Vertex(x=float(x), y=float(y), label=i + 1) for i, (x, y) in enumerate(zip(xs, ys))]


def group_table(elements: Sequence[DihedralElement]) -> np.ndarray:
    """Cayley table as indices into ``elements`` (row ``a``, column ``b`` -> ``compose(a, b)``)."""
    index = {el: pos for pos, el in enumerate(elements)}
    table = np.zeros((len(elements), len(elements)), dtype=int)
    for i, a in enumerate(elements):
        for j, b in enumerate(elements):
            table[i, j] = index[compose(a, b)]
    return table


__all__ = [
    "ROTATION",
    "REFLECTION",
    "KINDS",
    "DihedralElement",
    "Vertex",
    "dihedral_action",
    "generate_dihedral_group",
    "stabilizer",
    "orbit",
    "compose",
    "inverse",
    "element_order",
    "generate_polygon_vertices",
    "group_table",
]
