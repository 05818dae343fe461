"""Clamps raw model input into the ranges the scoring rules expect."""

from dataclasses import replace

from shepredicts.prediction.models import HealthRecord

# Inclusive (min, max) per numeric field. Binary fields are passed through.
FIELD_RANGES: dict[str, tuple[float, float]] = {
    "bmi": (10.0, 60.0),
    "waist_hip_ratio": (0.5, 2.0),
    "fsh_lh_ratio": (0.0, 10.0),
    "amh": (0.0, 20.0),
    "prg": (0.0, 50.0),
    "rbs": (50.0, 500.0),
    "cycle_length": (10.0, 90.0),
    "follicle_left": (0.0, 50.0),
    "follicle_right": (0.0, 50.0),
    "avg_follicle_size_left": (0.0, 50.0),
    "avg_follicle_size_right": (0.0, 50.0),
    "endometrium_thickness": (0.0, 30.0),
}


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def normalize_record(record: HealthRecord) -> HealthRecord:
    """Return a copy of the record with every ranged field clamped.

    Never raises: out-of-range values snap to the nearest bound.
    """
    clamped = {
        name: clamp(getattr(record, name), low, high)
        for name, (low, high) in FIELD_RANGES.items()
    }
    return replace(record, **clamped)
