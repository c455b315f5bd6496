"""One-shot correction run: load -> estimate -> correct -> write."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from .basis import angle_basis
from .correct import refine
from .geometry import Instrument
from .offset import Offset
from .io import load_scan_table, write_corrected
from .qa import deviation_stats
from .report import plot_profile, write_summary

logger = logging.getLogger(__name__)


def run_correction(
    in_path: Path,
    instrument: Instrument,
    *,
    passes: int = 1,
    summary_json: Optional[Path] = None,
    plot_dir: Optional[Path] = None,
) -> Dict[str, Any]:
    """Correct one scan file and return a JSON-ready summary.

    Nothing is written unless the load, the fit and the correction all
    succeed; errors from any stage propagate unchanged.
    """
    in_path = Path(in_path)
    radius = instrument.nominal_radius()
    basis = angle_basis(instrument.probe_count)
    logger.info(
        "Run start: input=%s instrument=%s probes=%d radius=%.3f mm",
        in_path, instrument.name, instrument.probe_count, radius,
    )

    raw = load_scan_table(in_path, instrument.probe_count)
    corrected, offsets = refine(raw, basis, radius, passes=passes)
    for k, off in enumerate(offsets, start=1):
        logger.info("pass %d: dx = %.3f mm, dy = %.3f mm", k, off.dx, off.dy)

    # offsets from successive passes add up to the total eccentricity
    total = Offset(sum(o.dx for o in offsets), sum(o.dy for o in offsets))

    out = write_corrected(
        corrected,
        in_path,
        suffix=instrument.output_suffix,
        ext=instrument.output_ext,
        sig_digits=instrument.sig_digits,
    )

    summary: Dict[str, Any] = {
        "input": str(in_path),
        "output": str(out),
        "instrument": instrument.name,
        "rows": int(raw.shape[0]),
        "cols": int(raw.shape[1]),
        "nominal_radius": radius,
        "dx": total.dx,
        "dy": total.dy,
        "magnitude": total.magnitude,
        "angle_deg": total.angle_deg,
        "passes": [o.to_dict() for o in offsets],
        "raw_stats": deviation_stats(raw, radius),
        "corrected_stats": deviation_stats(corrected, radius),
    }
    if plot_dir is not None:
        summary["plot_png"] = plot_profile(Path(plot_dir), basis, raw, corrected, radius,
                                           stem=f"{in_path.stem}_profile")
    if summary_json is not None:
        summary["summary_json"] = str(summary_json)
        write_summary(Path(summary_json), summary)
    return summary
