"""The symmetric group S3 as a fixed table of permutations.

A permutation is the tuple of images of 0, 1, 2. Applying it to an ordered
triple substitutes by index: ``apply(values, perm)[j] == values[perm[j]]``.
"""
from __future__ import annotations

from dataclasses import dataclass
import numbers
from typing import List, Sequence, Tuple, TypeVar, Union

from .errors import InvalidArgumentError

T = TypeVar("T")
Perm = Tuple[int, int, int]


@dataclass(frozen=True)
class GroupElement:
    """Named element of S3."""

    id: str
    label: str  # cycle notation
    latex: str
    perm: Perm

    def to_dict(self) -> dict:
        return {"id": self.id, "label": self.label, "latex": self.latex, "perm": list(self.perm)}


S3_ELEMENTS: Tuple[GroupElement, ...] = (
    GroupElement(id="e", label="e", latex="e", perm=(0, 1, 2)),
    GroupElement(id="12", label="(1 2)", latex="(1\\,2)", perm=(1, 0, 2)),
    GroupElement(id="13", label="(1 3)", latex="(1\\,3)", perm=(2, 1, 0)),
    GroupElement(id="23", label="(2 3)", latex="(2\\,3)", perm=(0, 2, 1)),
    GroupElement(id="123", label="(1 2 3)", latex="(1\\,2\\,3)", perm=(1, 2, 0)),
    GroupElement(id="132", label="(1 3 2)", latex="(1\\,3\\,2)", perm=(2, 0, 1)),
)
IDENTITY: Perm = (0, 1, 2)

_BY_ID = {el.id: el for el in S3_ELEMENTS}
_BY_PERM = {el.perm: el for el in S3_ELEMENTS}


def list_symmetric_group_s3() -> Tuple[GroupElement, ...]:
    return S3_ELEMENTS


def validate_permutation(perm: Sequence[int]) -> Perm:
    """Return ``perm`` as a tuple, or raise if it is not a bijection on {0, 1, 2}."""
    if isinstance(perm, (str, bytes)):
        raise InvalidArgumentError(f"permutation must be a sequence of ints, got {perm!r}")
    try:
        out = tuple(perm)
    except TypeError as exc:
        raise InvalidArgumentError(f"permutation must be a sequence of ints, got {perm!r}") from exc
    if any(isinstance(x, bool) or not isinstance(x, numbers.Integral) for x in out):
        raise InvalidArgumentError(f"permutation entries must be ints, got {perm!r}")
    out = tuple(int(x) for x in out)
    if len(out) != 3 or sorted(out) != [0, 1, 2]:
        raise InvalidArgumentError(f"not a permutation of (0, 1, 2): {perm!r}")
    return out  # type: ignore[return-value]


def get_element(key: Union[str, int]) -> GroupElement:
    """Look up an element by id (``"12"``) or by its position in the table."""
    if isinstance(key, int) and not isinstance(key, bool):
        if not 0 <= key < len(S3_ELEMENTS):
            raise InvalidArgumentError(f"S3 index out of range: {key}")
        return S3_ELEMENTS[key]
    if key not in _BY_ID:
        raise InvalidArgumentError(f"unknown S3 element {key!r}; expected one of {sorted(_BY_ID)}")
    return _BY_ID[key]


def find_element(perm: Sequence[int]) -> GroupElement:
    return _BY_PERM[validate_permutation(perm)]


def apply_permutation(values: Sequence[T], perm: Sequence[int]) -> List[T]:
    return [values[perm[0]], values[perm[1]], values[perm[2]]]


def compose(first: Sequence[int], second: Sequence[int]) -> Perm:
    """Permutation equal to applying ``first`` and then ``second``."""
    return (first[second[0]], first[second[1]], first[second[2]])


def inverse(perm: Sequence[int]) -> Perm:
    out = [0, 0, 0]
    for idx, img in enumerate(perm):
        out[img] = idx
    return (out[0], out[1], out[2])


def element_order(perm: Sequence[int]) -> int:
    perm = validate_permutation(perm)
    current = perm
    order = 1
    while current != IDENTITY:
        current = compose(current, perm)
        order += 1
    return order


__all__ = [
    "GroupElement",
    "S3_ELEMENTS",
    "IDENTITY",
    "list_symmetric_group_s3",
    "validate_permutation",
    "get_element",
    "find_element",
    "apply_permutation",
    "compose",
    "inverse",
    "element_order",
]
