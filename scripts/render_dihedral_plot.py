#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
from pathlib import Path


def main() -> None:
    ap = argparse.ArgumentParser(description='Render the n-gon with orbit and stabilizer of a vertex')
    ap.add_argument('--report', type=Path, required=True, help='explore.json from lagrange.explore')
    ap.add_argument('--out-dir', type=Path, required=True)
    args = ap.parse_args()

    try:
        import matplotlib.pyplot as plt
    except Exception:
        raise SystemExit('matplotlib is required: pip install matplotlib')

    with args.report.open('r', encoding='utf-8') as f:
        report = json.load(f)
    dih = report['dihedral']
    verts = dih['vertices']
    vertex = dih.get('vertex')

    # y is flipped so vertex 1 sits at the top as on screen
    xs = [v['x'] for v in verts] + [verts[0]['x']]
    ys = [-v['y'] for v in verts] + [-verts[0]['y']]

    plt.figure(figsize=(5, 5))
    plt.plot(xs, ys, color='#334155', lw=2)
    for i, v in enumerate(verts):
        color = '#f43f5e' if i == vertex else '#22d3ee'
        plt.scatter([v['x']], [-v['y']], s=120, color=color, zorder=3)
        plt.text(v['x'] * 1.15, -v['y'] * 1.15, str(v['label']), ha='center', va='center', fontsize=10)
    title = f"D{dih['n']} (order {dih['order']})"
    if vertex is not None:
        stab = ', '.join(dih['stabilizer'])
        title += f"\nStab({vertex + 1}) = {{{stab}}} | |Orb| = {len(dih['orbit'])}"
    plt.title(title)
    plt.axis('equal')
    plt.axis('off')
    plt.tight_layout()
    out_dir: Path = args.out_dir
    out_dir.mkdir(parents=True, exist_ok=True)
    out = out_dir / f"dihedral_d{dih['n']}.png"
    plt.savefig(out, dpi=150)
    plt.close()
    print(f'Wrote {out}')


if __name__ == '__main__':
    main()
