
"""
pipecal - eccentricity estimation and correction for multi-finger pipe calipers.
"""

__version__ = "0.1.0"

from .basis import AngleBasis, angle_basis
from .offset import Offset, estimate_offset, as_scan_table
from .correct import apply_correction, refine
from .qa import deviation_stats, probe_means
from .geometry import Instrument
from .presets import PRESETS, DEFAULT_PRESET
from .io import load_scan_table, write_corrected, corrected_path
from .report import write_summary, plot_profile
from .pipeline import run_correction
from .errors import (
    PipecalError,
    InputNotFound,
    ParseError,
    ShapeMismatch,
    DegenerateFit,
    EmptyInput,
)

__all__ = [
    "__version__",
    "AngleBasis", "angle_basis",
    "Offset", "estimate_offset", "as_scan_table",
    "apply_correction", "refine",
    "deviation_stats", "probe_means",
    "Instrument", "PRESETS", "DEFAULT_PRESET",
    "load_scan_table", "write_corrected", "corrected_path",
    "write_summary", "plot_profile",
    "run_correction",
    "PipecalError", "InputNotFound", "ParseError", "ShapeMismatch",
    "DegenerateFit", "EmptyInput",
]
