from __future__ import annotations

from dataclasses import dataclass, asdict
import math

import numpy as np

from .basis import AngleBasis
from .errors import DegenerateFit, EmptyInput, ShapeMismatch

# Denominators below this (per table cell) are float residue, not signal:
# sin(pi)**2 ~ 1.5e-32 for a two-probe tool.
_DEGENERATE_TOL = 1e-12


@dataclass(frozen=True)
class Offset:
    """Displacement of the tool center from the bore center."""

    dx: float
    dy: float

    @property
    def magnitude(self) -> float:
        return math.hypot(self.dx, self.dy)

    @property
    def angle_deg(self) -> float:
        return math.degrees(math.atan2(self.dy, self.dx))

    def to_dict(self) -> dict:
        d = asdict(self)
        d["magnitude"] = self.magnitude
        d["angle_deg"] = self.angle_deg
        return d


def as_scan_table(table, probe_count: int) -> np.ndarray:
    """Coerce ``table`` to an R x N float array, raising on empty or ragged input."""
    if hasattr(table, "to_numpy"):
        table = table.to_numpy(dtype=float)
    if not isinstance(table, np.ndarray):
        # ragged lists must fail on length, not inside numpy
        table = list(table)
        if not table:
            raise EmptyInput()
        for row in table:
            if np.ndim(row) != 1 or len(row) != probe_count:
                raise ShapeMismatch(probe_count, int(np.size(row)))
    arr = np.asarray(table, dtype=float)
    if arr.size == 0 and arr.ndim < 2:
        raise EmptyInput()
    if arr.ndim != 2:
        raise ShapeMismatch(
            probe_count, arr.shape[-1] if arr.ndim else 0,
            detail=f"expected a 2-D table (rows x {probe_count} probes), got {arr.ndim}-D input",
        )
    if arr.shape[0] == 0:
        raise EmptyInput()
    if arr.shape[1] != probe_count:
        raise ShapeMismatch(probe_count, arr.shape[1])
    return arr


def estimate_offset(table, basis: AngleBasis, nominal_radius: float) -> Offset:
    """Fit the tool-center offset that best explains the radial deviations.

    Each axis is an independent univariate least-squares slope against the
    probe cosines (x) or sines (y). This matches a joint fit only while the
    cross term ``sum(cos*sin)`` vanishes, i.e. for evenly spaced probes
    covering the full circle; irregular layouts are not supported.

    The model is ``reading - nominal_radius ~= -dx*cos - dy*sin``, so a probe
    at angle 0 reading long gives a negative ``dx``.
    """
    data = as_scan_table(table, basis.probe_count)
    r = float(nominal_radius)
    if not math.isfinite(r):
        raise DegenerateFit(f"nominal radius must be finite, got {nominal_radius!r}")
    if not np.isfinite(data).all():
        raise DegenerateFit("scan table contains non-finite readings")

    diff = data - r
    cos = np.broadcast_to(basis.cos, diff.shape)
    sin = np.broadcast_to(basis.sin, diff.shape)

    s_cy = float(np.sum(cos * diff))
    s_sy = float(np.sum(sin * diff))
    s_cc = float(np.sum(cos * cos))
    s_ss = float(np.sum(sin * sin))

    floor = _DEGENERATE_TOL * diff.size
    if s_cc <= floor or s_ss <= floor:
        raise DegenerateFit(
            f"{basis.probe_count} probe(s) cannot resolve both axes "
            f"(sum cos^2={s_cc:.3g}, sum sin^2={s_ss:.3g})"
        )

    a = s_cy / s_cc
    b = s_sy / s_ss
    if not (math.isfinite(a) and math.isfinite(b)):
        raise DegenerateFit(f"fit overflowed: slopes a={a}, b={b}")
    return Offset(dx=-a, dy=-b)
