"""Numerical and group-theoretic engine behind the group-theory presentation.

Provides:
- complex_ops: immutable complex values and arithmetic, roots of unity
- cubic: Durand–Kerner solver for monic cubics
- symmetric / dihedral: S3 table and D_n generator with vertex actions
- resolvent: Lagrange resolvent magnitudes under S3
- classes / sylow: class equations and Sylow counting
- correspondence: subgroup lattice of D_n over its center and its quotient image
- explore: CLI that assembles all widget payloads as JSON
"""

__all__ = [
    "complex_ops",
    "cubic",
    "symmetric",
    "dihedral",
    "resolvent",
    "classes",
    "sylow",
    "errors",
    "runtime",
    "correspondence",
    "explore",
]
