#!/usr/bin/env python
"""explore.py
Compute every widget payload of the presentation for one set of inputs.

Solves the cubic x^3 + a x^2 + b x + c, evaluates the Lagrange resolvent for
the chosen S3 element and for all six, builds D_n with the stabilizer and
orbit of the chosen vertex, and attaches class equations, the correspondence
lattice of D_n over its center (even n) and Sylow counts.

Usage example
-------------
python -m lagrange.explore --a 0 --b 0 --c -1 --perm 12 --n 6 --vertex 0 \
  --out runs/explore.json
"""
from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from lagrange import classes, correspondence, dihedral, sylow
from lagrange.cubic import residuals, solve_cubic_equation
from lagrange.errors import InvalidArgumentError
from lagrange.resolvent import distinct_resolvent_values, evaluate_resolvent, resolvent_table
from lagrange.runtime import SolverSettings, resolve_settings
from lagrange.symmetric import get_element

# (order, p) pairs shown in the counting panel
SYLOW_EXAMPLES: Tuple[Tuple[int, int], ...] = (
    (6, 3),
    (12, 3),
    (15, 3),
    (15, 5),
    (20, 5),
    (24, 2),
)


def _cubic_payload(a: float, b: float, c: float, perm_id: str, settings: SolverSettings) -> dict:
    roots = solve_cubic_equation(a, b, c, iterations=settings.iterations, tol=settings.tol, mode=settings.mode)
    element = get_element(perm_id)
    return {
        "coefficients": {"a": a, "b": b, "c": c},
        "solver": {"iterations": settings.iterations, "mode": settings.mode, "tol": settings.tol},
        "roots": [list(z.as_tuple()) for z in roots],
        "residuals": list(residuals(a, b, c, roots)),
        "permutation": element.to_dict(),
        "resolvent_magnitude": evaluate_resolvent(roots, element.perm),
        "resolvent_table": resolvent_table(roots),
        "resolvent_orbits": [ids for _, ids in distinct_resolvent_values(roots, tol=1e-6)],
    }


def _dihedral_payload(n: int, vertex: Optional[int], radius: float) -> dict:
    elements = dihedral.generate_dihedral_group(n)
    payload: Dict[str, object] = {
        "n": n,
        "order": len(elements),
        "elements": [el.to_dict() for el in elements],
        "vertices": [v.to_dict() for v in dihedral.generate_polygon_vertices(n, radius)],
    }
    if vertex is not None:
        if not 0 <= vertex < n:
            raise InvalidArgumentError(f"vertex must be in [0, {n}), got {vertex}")
        stab = dihedral.stabilizer(elements, vertex, n)
        orb = dihedral.orbit(elements, vertex, n)
        payload["vertex"] = vertex
        payload["stabilizer"] = [el.id for el in stab]
        payload["orbit"] = orb
        payload["orbit_stabilizer"] = f"{len(orb)} * {len(stab)} = {len(orb) * len(stab)}"
    return payload


def _sylow_payload(pairs: Sequence[Tuple[int, int]]) -> List[dict]:
    return [sylow.sylow_report(order, p) for order, p in pairs]


def build_report(
    *,
    a: float,
    b: float,
    c: float,
    perm_id: str = "e",
    n: int = 4,
    vertex: Optional[int] = None,
    radius: float = 80.0,
    settings: Optional[SolverSettings] = None,
) -> dict:
    settings = settings or resolve_settings()
    return {
        "cubic": _cubic_payload(a, b, c, perm_id, settings),
        "dihedral": _dihedral_payload(n, vertex, radius),
        "class_equations": [
            classes.s3_class_equation().to_report(),
            classes.dihedral_class_equation(n).to_report(),
        ],
        "correspondence": correspondence.correspondence_lattice(n).to_report() if n % 2 == 0 else None,
        "sylow": _sylow_payload(SYLOW_EXAMPLES),
    }


def main() -> None:
    ap = argparse.ArgumentParser(description="Solve a cubic, evaluate resolvents and build D_n payloads")
    ap.add_argument("--a", type=float, default=0.0)
    ap.add_argument("--b", type=float, default=0.0)
    ap.add_argument("--c", type=float, default=-1.0)
    ap.add_argument("--perm", type=str, default="e", help="S3 element id: e, 12, 13, 23, 123, 132")
    ap.add_argument("--n", type=int, default=4, help="polygon size for D_n (>= 3)")
    ap.add_argument("--vertex", type=int, default=None)
    ap.add_argument("--radius", type=float, default=80.0)
    ap.add_argument("--iterations", type=int, default=None, help="overrides LAGRANGE_DK_ITERATIONS")
    ap.add_argument("--mode", type=str, default=None, choices=["sequential", "simultaneous"])
    ap.add_argument("--tol", type=float, default=None)
    ap.add_argument("--out", type=Path, default=None)
    args = ap.parse_args()

    try:
        settings = resolve_settings(iterations=args.iterations, mode=args.mode, tol=args.tol)
        report = build_report(
            a=args.a,
            b=args.b,
            c=args.c,
            perm_id=args.perm,
            n=int(args.n),
            vertex=args.vertex,
            radius=float(args.radius),
            settings=settings,
        )
    except InvalidArgumentError as exc:
        raise SystemExit(str(exc))

    cubic = report["cubic"]
    print("== Lagrange Explorer ==")
    print(f"x^3 + ({args.a})x^2 + ({args.b})x + ({args.c}) | mode={settings.mode} | iterations={settings.iterations}")
    print(f"|y| under {cubic['permutation']['label']}: {cubic['resolvent_magnitude']:.6f}")

    if args.out is not None:
        args.out.parent.mkdir(parents=True, exist_ok=True)
        with args.out.open("w", encoding="utf-8") as f:
            json.dump(report, f, ensure_ascii=False, indent=2)
        print(f"Wrote {args.out}")
    else:
        print(json.dumps(report, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
