from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import numbers

import numpy as np

from .errors import DegenerateFit


@dataclass(frozen=True)
class AngleBasis:
    """Unit-circle projections of evenly spaced probes.

    Probe ``i`` sits at ``2*pi*i/N`` radians, probe 0 at angle 0, angles
    increasing with the column index of the scan table.
    """

    probe_count: int
    cos: np.ndarray
    sin: np.ndarray

    def angles_deg(self) -> np.ndarray:
        return np.arange(self.probe_count, dtype=float) * (360.0 / self.probe_count)


@lru_cache(maxsize=None)
def _build(n: int) -> AngleBasis:
    theta = np.arange(n, dtype=float) * 2.0 * np.pi / n
    c = np.cos(theta)
    s = np.sin(theta)
    c.setflags(write=False)
    s.setflags(write=False)
    return AngleBasis(probe_count=n, cos=c, sin=s)


def angle_basis(probe_count: int) -> AngleBasis:
    """Return the (memoised) basis for ``probe_count`` probes."""
    if isinstance(probe_count, bool) or not isinstance(probe_count, numbers.Integral):
        raise DegenerateFit(f"probe count must be an integer, got {probe_count!r}")
    if probe_count < 1:
        raise DegenerateFit(f"probe count must be >= 1, got {probe_count}")
    return _build(int(probe_count))
