from __future__ import annotations

from dataclasses import dataclass, fields, asdict
import json
from pathlib import Path


@dataclass
class Instrument:
    """Caliper geometry and output conventions for one tool."""

    name: str = "UNSPECIFIED"
    probe_count: int = 40
    pipe_diameter_mm: float = 254.0

    # output file naming / formatting
    output_suffix: str = "_corrected"
    output_ext: str = ".csv"
    sig_digits: int = 5

    def nominal_radius(self) -> float:
        if not self.pipe_diameter_mm or self.pipe_diameter_mm <= 0:
            raise ValueError(f"pipe diameter must be > 0 mm, got {self.pipe_diameter_mm}")
        return self.pipe_diameter_mm / 2.0

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict, base: "Instrument | None" = None) -> "Instrument":
        """Build from a loose mapping; unknown keys are ignored.

        Values are coerced to the field types so JSON written by hand
        (``"probe_count": "40"``) still loads. ``base`` supplies defaults.
        """
        inst = cls(**asdict(base)) if base is not None else cls()
        for f in fields(cls):
            if f.name not in data or data[f.name] is None:
                continue
            raw = data[f.name]
            if f.type in ("int", int):
                val = int(raw)
            elif f.type in ("float", float):
                val = float(raw)
            else:
                val = str(raw)
            setattr(inst, f.name, val)
        return inst

    @classmethod
    def load_json(cls, path: Path, base: "Instrument | None" = None) -> "Instrument":
        return cls.from_dict(json.loads(Path(path).read_text()), base=base)
