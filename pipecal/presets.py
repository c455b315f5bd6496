from .geometry import Instrument

# In a real deployment these would be loaded from an external presets file.
PRESETS: dict[str, Instrument] = {
    "Caliper40": Instrument(name="Caliper40", probe_count=40, pipe_diameter_mm=254.0),
    "Caliper24": Instrument(name="Caliper24", probe_count=24, pipe_diameter_mm=152.4),
}

DEFAULT_PRESET = "Caliper40"
