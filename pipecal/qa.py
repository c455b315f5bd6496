from __future__ import annotations

import numpy as np


def deviation_stats(table, nominal_radius: float) -> dict:
    """Summary of ``reading - nominal_radius`` over the whole table."""
    dev = np.asarray(table, dtype=float) - float(nominal_radius)
    return {
        "mean": float(np.mean(dev)),
        "rms": float(np.sqrt(np.mean(dev ** 2))),
        "min": float(np.min(dev)),
        "max": float(np.max(dev)),
    }


def probe_means(table) -> np.ndarray:
    """Per-probe mean reading (one value per column)."""
    return np.asarray(table, dtype=float).mean(axis=0)
