from __future__ import annotations
import argparse, json, logging
from pathlib import Path

from .errors import PipecalError, InputNotFound
from .geometry import Instrument
from .pipeline import run_correction
from .presets import PRESETS, DEFAULT_PRESET


def build_parser():
    p = argparse.ArgumentParser(
        prog="pipecal",
        description="Estimate and remove tool-center eccentricity from multi-finger caliper scans",
    )
    p.add_argument("path", nargs="?", default=None,
                   help="Whitespace-delimited scan file (one row per scan); prompted for if omitted")
    p.add_argument("--instrument", default=DEFAULT_PRESET, choices=PRESETS.keys())
    p.add_argument("--config", type=Path, default=None, help="JSON file with Instrument fields (overrides preset)")
    p.add_argument("--probes", type=int, default=None, help="Override probe (finger) count")
    p.add_argument("--diameter", type=float, default=None, help="Override nominal pipe diameter [mm]")
    p.add_argument("--passes", type=int, default=1, help="Estimate+correct passes (default 1)")
    p.add_argument("--summary-json", type=Path, default=None, help="Optional path to write the run summary as JSON")
    p.add_argument("--plot", type=Path, default=None, help="Directory for a polar profile PNG")
    p.add_argument("--json", action="store_true", help="Print the run summary as JSON instead of text")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p


def retrieve_path(arg: str | None) -> str:
    if arg:
        return arg
    try:
        return input("Enter input file path: ").strip()
    except EOFError:
        # closed stdin reads as an empty path
        return ""


def resolve_instrument(a) -> Instrument:
    inst = PRESETS[a.instrument]
    if a.config:
        inst = Instrument.load_json(a.config, base=inst)
    overrides = {"probe_count": a.probes, "pipe_diameter_mm": a.diameter}
    return Instrument.from_dict(overrides, base=inst)


def main(argv=None):
    ap = build_parser()
    a = ap.parse_args(argv)
    logging.basicConfig(level=getattr(logging, a.log_level), format="%(levelname)s %(name)s: %(message)s")

    in_path = Path(retrieve_path(a.path))
    if not in_path.is_file():
        raise SystemExit(str(InputNotFound(in_path)))
    try:
        inst = resolve_instrument(a)
        res = run_correction(
            in_path,
            inst,
            passes=a.passes,
            summary_json=a.summary_json,
            plot_dir=a.plot,
        )
    except (PipecalError, ValueError, OSError) as e:
        raise SystemExit(str(e))

    if a.json:
        print(json.dumps(res, indent=2))
    else:
        print(f"Loaded {res['rows']} rows x {res['cols']} cols")
        print(f"dx = {res['dx']:.3f} mm, dy = {res['dy']:.3f} mm")
        print(f"Saved corrected file -> {res['output']}")
    return 0

if __name__ == "__main__":
    main()
