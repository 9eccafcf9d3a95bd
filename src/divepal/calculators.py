"""Dive-planning arithmetic. Every calculator returns None for insufficient input."""

import math

from divepal.models import GasDurationInput, ModInput, SacInput, WeightInput

SURFACE_CONSUMPTION_LPM = 20.0  # Assumed surface breathing rate (L/min)
METERS_PER_ATM = 10.0

PPO2_LIMITS: dict[float, str] = {
    1.4: "Conservative",
    1.6: "Standard",
}

SUIT_OFFSETS_KG: dict[str, float] = {
    "swimsuit": 0.0,
    "wetsuit-3mm": 2.0,
    "wetsuit-5mm": 4.0,
    "wetsuit-7mm": 6.0,
    "drysuit": 8.0,
}

EXPERIENCE_OFFSETS_KG: dict[str, float] = {
    "beginner": 2.0,
    "intermediate": 0.0,
    "advanced": -2.0,
}

SALTWATER_OFFSET_KG = 2.0

# PADI RDP quick reference, air. Display only.
NDL_TABLE: tuple[tuple[int, str], ...] = (
    (10, "No Limit"),
    (12, "No Limit"),
    (15, "No Limit"),
    (18, "56 min"),
    (20, "45 min"),
    (22, "37 min"),
    (25, "29 min"),
    (30, "20 min"),
    (35, "14 min"),
    (40, "9 min"),
)


def _is_number(value: float | None) -> bool:
    return value is not None and math.isfinite(value)


def _round_half_up(value: float, digits: int = 0) -> float:
    scale = 10**digits
    return math.floor(value * scale + 0.5) / scale


def pressure_factor(depth: float) -> float:
    """Absolute pressure in atmospheres at `depth` meters of seawater."""
    return depth / METERS_PER_ATM + 1


def gas_duration(data: GasDurationInput) -> int | None:
    """Minutes of breathing gas at depth, assuming 20 L/min at the surface.

    Returns None unless every input is positive and the reserve is below the
    start pressure.
    """
    values = (data.tank_size, data.start_pressure, data.end_pressure, data.depth)
    if not all(_is_number(v) for v in values):
        return None
    assert data.tank_size is not None and data.start_pressure is not None
    assert data.end_pressure is not None and data.depth is not None
    if data.tank_size <= 0 or data.start_pressure <= 0 or data.depth <= 0:
        return None
    if data.end_pressure <= 0 or data.end_pressure >= data.start_pressure:
        return None

    usable_gas = (data.start_pressure - data.end_pressure) * data.tank_size
    duration = usable_gas / (SURFACE_CONSUMPTION_LPM * pressure_factor(data.depth))
    return int(_round_half_up(duration))


def sac_rate(data: SacInput) -> float | None:
    """Surface air consumption in L/min, one decimal place."""
    values = (data.air_used, data.depth, data.time)
    if not all(_is_number(v) and v > 0 for v in values):  # type: ignore[operator]
        return None
    assert data.air_used is not None and data.depth is not None and data.time is not None
    sac = data.air_used / data.time / pressure_factor(data.depth)
    return _round_half_up(sac, 1)


def sac_rating(sac: float) -> str:
    """Qualitative band for display."""
    if sac < 15:
        return "excellent"
    if sac < 20:
        return "good"
    if sac < 25:
        return "average"
    return "needs improvement"


def max_operating_depth(data: ModInput) -> int | None:
    """Nitrox maximum operating depth in meters for the given PPO2 limit."""
    o2 = data.oxygen_percentage
    if not _is_number(o2) or not _is_number(data.max_ppo2):
        return None
    assert o2 is not None
    if not 0 < o2 <= 100 or data.max_ppo2 <= 0:
        return None
    mod = (data.max_ppo2 / (o2 / 100) - 1) * METERS_PER_ATM
    return int(_round_half_up(mod))


def starting_weight(data: WeightInput) -> int | None:
    """Advisory starting lead weight in kg. Adjust after a buoyancy check."""
    body_weight = data.body_weight
    if body_weight is None or not _is_number(body_weight) or body_weight <= 0:
        return None
    suit_offset = SUIT_OFFSETS_KG.get(data.suit_type or "")
    experience_offset = EXPERIENCE_OFFSETS_KG.get(data.experience or "")
    if suit_offset is None or experience_offset is None:
        return None

    weight = body_weight * 0.1 + suit_offset + experience_offset
    if data.saltwater:
        weight += SALTWATER_OFFSET_KG
    return int(_round_half_up(weight))
