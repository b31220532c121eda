"""Conjugacy classes and the class equation |G| = |Z(G)| + sum of non-central class sizes."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Hashable, List, Sequence, Tuple, TypeVar

from . import dihedral, symmetric

G = TypeVar("G", bound=Hashable)


def conjugacy_classes(
    elements: Sequence[G],
    compose: Callable[[G, G], G],
    inverse: Callable[[G], G],
) -> List[List[G]]:
    """Partition ``elements`` into classes {g h g^-1}, in first-seen order."""
    seen = set()
    classes: List[List[G]] = []
    for h in elements:
        if h in seen:
            continue
        members = {compose(compose(inverse(g), h), g) for g in elements}
        cls = [x for x in elements if x in members]
        seen.update(cls)
        classes.append(cls)
    return classes


@dataclass
class ClassEquation:
    group: str
    order: int
    center: List[str]
    classes: List[List[str]] = field(default_factory=list)

    @property
    def sizes(self) -> Tuple[int, ...]:
        return tuple(len(c) for c in self.classes)

    @property
    def equation(self) -> str:
        noncentral = sorted(len(c) for c in self.classes if len(c) > 1)
        terms = [str(len(self.center))] + [str(s) for s in noncentral]
        return f"{self.order} = " + " + ".join(terms)

    def to_report(self) -> Dict[str, object]:
        return {
            "group": self.group,
            "order": self.order,
            "center": list(self.center),
            "classes": [list(c) for c in self.classes],
            "equation": self.equation,
        }


def _equation(name: str, classes: List[List[str]]) -> ClassEquation:
    center = [c[0] for c in classes if len(c) == 1]
    return ClassEquation(
        group=name,
        order=sum(len(c) for c in classes),
        center=center,
        classes=classes,
    )


def s3_class_equation() -> ClassEquation:
    perms = [el.perm for el in symmetric.S3_ELEMENTS]
    classes = conjugacy_classes(perms, symmetric.compose, symmetric.inverse)
    return _equation("S3", [[symmetric.find_element(p).label for p in c] for c in classes])


def dihedral_class_equation(n: int) -> ClassEquation:
    elements = dihedral.generate_dihedral_group(n)
    classes = conjugacy_classes(elements, dihedral.compose, dihedral.inverse)
    return _equation(f"D{n}", [[el.latex for el in c] for c in classes])


__all__ = [
    "ClassEquation",
    "conjugacy_classes",
    "s3_class_equation",
    "dihedral_class_equation",
]
