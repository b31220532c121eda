#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import math
from pathlib import Path


def main() -> None:
    ap = argparse.ArgumentParser(description='Render cubic roots on the complex plane with resolvent magnitudes')
    ap.add_argument('--report', type=Path, required=True, help='explore.json from lagrange.explore')
    ap.add_argument('--out-dir', type=Path, required=True, help='output directory for PNGs')
    args = ap.parse_args()

    try:
        import matplotlib.pyplot as plt
        import numpy as np
    except Exception:
        raise SystemExit('matplotlib/numpy required: pip install matplotlib numpy')

    with args.report.open('r', encoding='utf-8') as f:
        report = json.load(f)
    cubic = report['cubic']
    roots = [tuple(z) for z in cubic['roots']]
    perm = cubic['permutation']['perm']
    coeffs = cubic['coefficients']

    fig, (ax_roots, ax_bar) = plt.subplots(1, 2, figsize=(10, 4.5))

    # unit circle as a reference scale
    t = np.linspace(0.0, 2 * math.pi, 200)
    ax_roots.plot(np.cos(t), np.sin(t), color='#94a3b8', lw=0.8, ls='--')
    ax_roots.axhline(0.0, color='#cbd5e1', lw=0.6)
    ax_roots.axvline(0.0, color='#cbd5e1', lw=0.6)
    colors = ['#22d3ee', '#fbbf24', '#f43f5e']
    for pos, idx in enumerate(perm):
        re, im = roots[idx]
        ax_roots.scatter([re], [im], s=80, color=colors[pos], zorder=3)
        ax_roots.annotate(f'x{pos + 1}', (re, im), textcoords='offset points', xytext=(6, 6), fontsize=9)
    lim = max([1.2] + [abs(v) * 1.2 for z in roots for v in z])
    ax_roots.set_xlim(-lim, lim)
    ax_roots.set_ylim(-lim, lim)
    ax_roots.set_aspect('equal')
    ax_roots.set_title(f"x^3 + {coeffs['a']}x^2 + {coeffs['b']}x + {coeffs['c']}")

    table = cubic['resolvent_table']
    labels = [row['label'] for row in table]
    mags = [row['magnitude'] for row in table]
    x = np.arange(len(labels))
    bars = ax_bar.bar(x, mags, color='#4C78A8')
    sel = [row['id'] for row in table].index(cubic['permutation']['id'])
    bars[sel].set_color('#E45756')
    for xi, v in zip(x, mags):
        ax_bar.text(xi, v, f'{v:.3f}', ha='center', va='bottom', fontsize=8)
    ax_bar.set_xticks(x)
    ax_bar.set_xticklabels(labels)
    ax_bar.set_ylabel('|y|')
    ax_bar.set_title('Resolvent magnitude per permutation')

    plt.tight_layout()
    out_dir: Path = args.out_dir
    out_dir.mkdir(parents=True, exist_ok=True)
    out = out_dir / 'cubic_roots_resolvent.png'
    plt.savefig(out, dpi=150)
    plt.close()
    print(f'Wrote {out}')


if __name__ == '__main__':
    main()
