#!/usr/bin/env python
"""
Van Genuchten-Mualem curves for the bundled soils.

(a) capillary pressure p_c(S_w), log scale.
(b) relative permeabilities k_rw(S_w) and k_rn(S_w).

Output: figures/fig_vg_curves.pdf
"""

import sys
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))
from _style import apply_style, save

from van_genuchten_2p import CLAY, SANDY_LOAM, VanGenuchtenParams
from van_genuchten_2p import capillary_pressure, krn, krw

apply_style()

soils = {
    "Sandy loam": SANDY_LOAM,
    "Clay": CLAY,
    r"$\alpha=10^{-4}$, $n=2$": VanGenuchtenParams.from_n(1.0e-4, 2.0),
}

# p_c is infinite at S_w = 0 and zero at S_w = 1; keep both off the log axis.
sw = np.linspace(1e-3, 1.0 - 1e-3, 500)
sw_kr = np.linspace(0.0, 1.0, 501)

print(f"{'Soil':>24} {'alpha [1/Pa]':>13} {'n':>5} {'m':>6} {'p_c(0.5) [Pa]':>14}")
print("-" * 66)
for label, p in soils.items():
    print(f"{label:>24} {p.alpha:>13.3e} {p.n:>5.2f} {p.m:>6.3f} "
          f"{capillary_pressure(p, 0.5):>14.4e}")

fig, axes = plt.subplots(1, 2, figsize=(10, 4))
cmap = plt.cm.viridis

ax = axes[0]
for i, (label, p) in enumerate(soils.items()):
    ax.semilogy(sw, capillary_pressure(p, sw), color=cmap(i / len(soils)), label=label)
ax.set_xlabel(r"$S_w$ [-]")
ax.set_ylabel(r"$p_c$ [Pa]")
ax.set_title("(a)")
ax.legend(loc="upper right")

ax = axes[1]
for i, (label, p) in enumerate(soils.items()):
    c = cmap(i / len(soils))
    ax.plot(sw_kr, krw(p, sw_kr), color=c, label=f"{label} $k_{{rw}}$")
    ax.plot(sw_kr, krn(p, sw_kr), color=c, ls="--", label=f"{label} $k_{{rn}}$")
ax.set_xlabel(r"$S_w$ [-]")
ax.set_ylabel(r"$k_r$ [-]")
ax.set_title("(b)")
ax.legend(fontsize=6, loc="center left")
fig.tight_layout()

save(fig, "fig_vg_curves")
plt.close()
