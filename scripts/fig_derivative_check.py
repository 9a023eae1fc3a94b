#!/usr/bin/env python
"""
Analytic derivatives vs. centered finite differences.

For each bundled soil, compares d p_c/d S_w, d k_rw/d S_w and d k_rn/d S_w
with (f(S_w + h) - f(S_w - h)) / 2h on the open interval (0, 1) and plots
the relative deviation. Prints the worst deviation per curve.

Usage: python fig_derivative_check.py [--step H]

Output: figures/fig_derivative_check.pdf
"""

import sys
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))
from _style import apply_style, save

from van_genuchten_2p import CLAY, SANDY_LOAM
from van_genuchten_2p import capillary_pressure, dkrn_dsw, dkrw_dsw, dpc_dsw, krn, krw

apply_style()

h = float(sys.argv[sys.argv.index("--step") + 1]) if "--step" in sys.argv else 1e-6

curves = [
    (r"$p_c$", capillary_pressure, dpc_dsw),
    (r"$k_{rw}$", krw, dkrw_dsw),
    (r"$k_{rn}$", krn, dkrn_dsw),
]
soils = {"Sandy loam": SANDY_LOAM, "Clay": CLAY}

sw = np.linspace(0.02, 0.98, 97)

print(f"Derivative check, centered FD step h={h:.1e}")
print(f"{'Soil':>12} {'curve':>10} {'max rel. dev.':>14} {'at S_w':>7}")
print("-" * 47)

fig, axes = plt.subplots(1, len(curves), figsize=(12, 3.5), sharey=True)
for ax, (name, f, df) in zip(axes, curves):
    for label, p in soils.items():
        exact = df(p, sw)
        fd = (f(p, sw + h) - f(p, sw - h)) / (2.0 * h)
        rel = np.abs(exact - fd) / np.abs(exact)
        k = int(np.argmax(rel))
        print(f"{label:>12} {name:>10} {rel[k]:>14.3e} {sw[k]:>7.2f}")
        ax.semilogy(sw, rel, label=label)
    ax.set_xlabel(r"$S_w$ [-]")
    ax.set_title(name)
axes[0].set_ylabel("relative deviation [-]")
axes[0].legend()
fig.tight_layout()

save(fig, "fig_derivative_check")
plt.close()
