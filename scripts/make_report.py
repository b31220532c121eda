#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import List


def read_json(path: Path):
    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        return None


def _fmt_root(z) -> str:
    re, im = float(z[0]), float(z[1])
    sign = "+" if im >= 0 else "-"
    return f"{re:.6f} {sign} {abs(im):.6f}i"


def _cubic_lines(cubic: dict) -> List[str]:
    co = cubic.get("coefficients", {})
    lines = [
        "## Lagrange resolvent",
        "",
        f"Equation: x^3 + ({co.get('a')})x^2 + ({co.get('b')})x + ({co.get('c')}) = 0",
        "",
    ]
    for idx, (z, res) in enumerate(zip(cubic.get("roots", []), cubic.get("residuals", []))):
        lines.append(f"- x{idx + 1} = {_fmt_root(z)} (|f(x)| = {float(res):.2e})")
    lines.append("")
    lines.append("| permutation | \\|y\\| |")
    lines.append("|---|---|")
    for row in cubic.get("resolvent_table", []):
        lines.append(f"| {row.get('label')} | {float(row.get('magnitude', float('nan'))):.6f} |")
    orbits = cubic.get("resolvent_orbits") or []
    if orbits:
        lines.append("")
        lines.append("Distinct resolvent values: {}".format(len(orbits)))
    return lines


def _dihedral_lines(dih: dict) -> List[str]:
    lines = ["## Dihedral group", "", f"D{dih.get('n')} has {dih.get('order')} elements."]
    if "vertex" in dih:
        lines.append(f"Stabilizer of vertex {int(dih['vertex']) + 1}: {', '.join(dih.get('stabilizer', []))}")
        lines.append(f"Orbit-stabilizer: {dih.get('orbit_stabilizer')}")
    return lines


def main() -> None:
    ap = argparse.ArgumentParser(description="Summarize a lagrange.explore report as markdown")
    ap.add_argument("--report", type=Path, default=Path("runs/explore.json"))
    ap.add_argument("--out", type=Path, default=Path("runs/report.md"))
    args = ap.parse_args()

    report = read_json(args.report)
    if report is None:
        raise SystemExit(f"report not found: {args.report}")

    lines = ["# Group theory explorer report", ""]
    if "cubic" in report:
        lines.extend(_cubic_lines(report["cubic"]))
        lines.append("")
    if "dihedral" in report:
        lines.extend(_dihedral_lines(report["dihedral"]))
        lines.append("")
    eqs = report.get("class_equations") or []
    if eqs:
        lines.append("## Class equations")
        lines.append("")
        for eq in eqs:
            lines.append(f"- {eq.get('group')}: {eq.get('equation')}")
        lines.append("")
    lattice = report.get("correspondence")
    if lattice:
        lines.append(f"## Correspondence: {lattice.get('group')} / N")
        lines.append("")
        lines.append("N = {" + ", ".join(lattice.get("normal", [])) + "}")
        for node in lattice.get("nodes", []):
            members = ", ".join(node.get("elements", []))
            lines.append(f"- {{{members}}} (order {node.get('order')}) -> order {node.get('quotient_order')} in the quotient")
        lines.append("")
    syl = report.get("sylow") or []
    if syl:
        lines.append("## Sylow counting")
        lines.append("")
        for item in syl:
            cands = " or ".join(str(c) for c in item.get("candidates", []))
            lines.append(f"- |G|={item.get('order')}, p={item.get('p')}: n_p = {cands}")

    args.out.parent.mkdir(parents=True, exist_ok=True)
    with args.out.open("w", encoding="utf-8") as f:
        f.write("\n".join(lines))
    print(f"Saved summary → {args.out}")


if __name__ == "__main__":
    main()
