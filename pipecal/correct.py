from __future__ import annotations

import math

import numpy as np

from .basis import AngleBasis
from .errors import DegenerateFit
from .offset import Offset, as_scan_table, estimate_offset


def apply_correction(table, basis: AngleBasis, offset: Offset) -> np.ndarray:
    """Add back the angular projection of ``offset`` to every reading.

    Inverse of the bias model used by :func:`estimate_offset`. Returns a new
    array of the same shape; ``table`` is left untouched.
    """
    data = as_scan_table(table, basis.probe_count)
    if not (math.isfinite(offset.dx) and math.isfinite(offset.dy)):
        raise DegenerateFit(f"offset must be finite, got dx={offset.dx}, dy={offset.dy}")
    shift = offset.dx * basis.cos + offset.dy * basis.sin
    out = data + shift
    if not np.isfinite(out).all():
        raise DegenerateFit("correction produced non-finite readings")
    return out


def refine(table, basis: AngleBasis, nominal_radius: float, passes: int = 1):
    """Run estimate+correct ``passes`` times, feeding each result into the next.

    Returns ``(corrected, offsets)`` with one :class:`Offset` per pass. Later
    offsets shrink toward zero; the first one is the tool eccentricity.
    """
    if passes < 1:
        raise ValueError(f"passes must be >= 1, got {passes}")
    current = as_scan_table(table, basis.probe_count)
    offsets: list[Offset] = []
    for _ in range(passes):
        off = estimate_offset(current, basis, nominal_radius)
        current = apply_correction(current, basis, off)
        offsets.append(off)
    return current, offsets
