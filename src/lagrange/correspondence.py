"""Correspondence theorem for D_n over its center N = <r^(n/2)> (n even).

Subgroups of D_n containing N are in inclusion-preserving bijection with the
subgroups of D_n/N. Every subgroup of D_n is generated by at most two
elements, so the lattice is found by closing N together with each pair.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, List, Tuple

from . import dihedral
from .dihedral import DihedralElement
from .errors import InvalidArgumentError

Coset = FrozenSet[DihedralElement]


def _sort_key(el: DihedralElement) -> Tuple[int, int]:
    return (dihedral.KINDS.index(el.kind), el.k)


def closure(generators: Iterable[DihedralElement]) -> FrozenSet[DihedralElement]:
    """Smallest subgroup containing ``generators`` (closed under ``dihedral.compose``)."""
    members = set(generators)
    frontier = list(members)
    while frontier:
        fresh = []
        for a in frontier:
            for b in list(members):
                for c in (dihedral.compose(a, b), dihedral.compose(b, a)):
                    if c not in members:
                        members.add(c)
                        fresh.append(c)
        frontier = fresh
    return frozenset(members)


def central_subgroup(n: int) -> FrozenSet[DihedralElement]:
    """N = {e, r^(n/2)}; only defined for even n."""
    if isinstance(n, bool) or not isinstance(n, int) or n < 4 or n % 2:
        raise InvalidArgumentError(f"correspondence lattice needs an even n >= 4, got {n!r}")
    return frozenset({
        DihedralElement(dihedral.ROTATION, 0, n),
        DihedralElement(dihedral.ROTATION, n // 2, n),
    })


def subgroups_containing(n: int, normal: FrozenSet[DihedralElement]) -> List[FrozenSet[DihedralElement]]:
    elements = dihedral.generate_dihedral_group(n)
    found = set()
    for i, a in enumerate(elements):
        for b in elements[i:]:
            found.add(closure(normal | {a, b}))
    return sorted(found, key=lambda h: (-len(h), sorted(_sort_key(el) for el in h)))


def coset(element: DihedralElement, normal: FrozenSet[DihedralElement]) -> Coset:
    return frozenset(dihedral.compose(element, x) for x in normal)


def quotient_image(subgroup: FrozenSet[DihedralElement], normal: FrozenSet[DihedralElement]) -> FrozenSet[Coset]:
    return frozenset(coset(el, normal) for el in subgroup)


def covering_edges(sets: List[FrozenSet]) -> List[Tuple[int, int]]:
    """Hasse diagram edges ``(larger, smaller)`` by index into ``sets``."""
    edges = []
    for i, big in enumerate(sets):
        for j, small in enumerate(sets):
            if i == j or not small < big:
                continue
            if any(small < mid < big for mid in sets):
                continue
            edges.append((i, j))
    return edges


@dataclass
class LatticeNode:
    elements: List[str]
    order: int
    quotient_order: int

    @property
    def label(self) -> str:
        return "{" + ", ".join(self.elements) + "}"


@dataclass
class CorrespondenceLattice:
    n: int
    normal: List[str]
    nodes: List[LatticeNode] = field(default_factory=list)
    edges: List[Tuple[int, int]] = field(default_factory=list)
    quotient_edges: List[Tuple[int, int]] = field(default_factory=list)

    def to_report(self) -> Dict[str, object]:
        return {
            "group": f"D{self.n}",
            "normal": list(self.normal),
            "quotient_order": 2 * self.n // len(self.normal),
            "nodes": [
                {"elements": n.elements, "order": n.order, "quotient_order": n.quotient_order}
                for n in self.nodes
            ],
            "edges": [list(e) for e in self.edges],
            "quotient_edges": [list(e) for e in self.quotient_edges],
        }


def _latex(members: Iterable[DihedralElement]) -> List[str]:
    return [el.latex for el in sorted(members, key=_sort_key)]


def correspondence_lattice(n: int) -> CorrespondenceLattice:
    normal = central_subgroup(n)
    subgroups = subgroups_containing(n, normal)
    images = [quotient_image(h, normal) for h in subgroups]
    return CorrespondenceLattice(
        n=n,
        normal=_latex(normal),
        nodes=[
            LatticeNode(elements=_latex(h), order=len(h), quotient_order=len(img))
            for h, img in zip(subgroups, images)
        ],
        edges=covering_edges(subgroups),
        quotient_edges=covering_edges(images),
    )


__all__ = [
    "CorrespondenceLattice",
    "LatticeNode",
    "closure",
    "central_subgroup",
    "subgroups_containing",
    "coset",
    "quotient_image",
    "covering_edges",
    "correspondence_lattice",
]
