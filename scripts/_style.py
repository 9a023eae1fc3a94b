"""
Shared matplotlib styling for the constitutive-law figures.
"""

from pathlib import Path

import matplotlib.pyplot as plt

# Resolve to repo root / figures regardless of CWD
REPO_ROOT = Path(__file__).resolve().parent.parent
FIGURES_DIR = REPO_ROOT / "figures"


def apply_style():
    """Set consistent matplotlib rcParams for the curve figures."""
    plt.rcParams.update({
        "font.size": 10,
        "legend.fontsize": 8,
        "savefig.bbox": "tight",
        "axes.grid": True,
        "grid.alpha": 0.3,
        "mathtext.fontset": "cm",
    })


def save(fig, name):
    """Save ``fig`` as figures/<name>.pdf and return the path."""
    out = FIGURES_DIR / f"{name}.pdf"
    out.parent.mkdir(exist_ok=True)
    fig.savefig(out)
    print(f"Saved: {out}")
    return out
