from __future__ import annotations

import json
from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

from .basis import AngleBasis
from .qa import probe_means


def write_summary(path: Path, summary: dict) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(summary, indent=2))
    return path


def plot_profile(outdir: Path, basis: AngleBasis, raw, corrected, nominal_radius: float,
                 title="Bore profile (probe means)", stem="profile"):
    """
    Polar plot of the per-probe mean reading before and after correction.
    The nominal circle is drawn for reference; curves are closed at 360 deg.
    """
    th = np.deg2rad(np.append(basis.angles_deg(), 360.0))
    raw_m = probe_means(raw)
    cor_m = probe_means(corrected)
    raw_m = np.append(raw_m, raw_m[0])
    cor_m = np.append(cor_m, cor_m[0])
    outdir = Path(outdir)
    outdir.mkdir(parents=True, exist_ok=True)
    fig = plt.figure(figsize=(5.6, 5.6))
    ax = fig.add_subplot(111, projection="polar")
    ax.plot(th, np.full_like(th, float(nominal_radius)), color="0.6", linestyle=":", label="Nominal")
    ax.plot(th, raw_m, label="Raw", alpha=0.7)
    ax.plot(th, cor_m, label="Corrected", linestyle="--")
    ax.set_title(title)
    ax.legend(loc="lower right", fontsize="small")
    p = outdir / f"{stem}.png"
    fig.tight_layout()
    fig.savefig(p, dpi=150)
    plt.close(fig)
    return str(p)
