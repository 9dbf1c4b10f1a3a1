"""Additive success score for a species, water type and set of conditions.

Five independently bounded components are summed and the total is clamped to
[0, 100]. Near-ideal conditions add up to roughly 115, so they saturate at 100
even with small penalties.

Unknown readings never count as zero; each component has a fixed fallback:

    temperature  45  (low middle of its 35-85 range)
    wind         10  (its maximum)
    cloud         5
    pressure      5
    turbidity     5
"""

from dataclasses import dataclass

from fishcast.models.common import ThermalBand, clamp, is_river_like
from fishcast.models.conditions import ConditionSet
from fishcast.models.recommendation import ScoreBreakdown
from fishcast.scoring.species import classify


@dataclass(frozen=True)
class TemperatureBand:
    ideal: float
    low: float
    high: float


TEMPERATURE_BANDS: dict[ThermalBand, TemperatureBand] = {
    ThermalBand.COLD: TemperatureBand(ideal=54, low=40, high=65),
    ThermalBand.COOL: TemperatureBand(ideal=64, low=50, high=75),
    ThermalBand.WARM: TemperatureBand(ideal=74, low=60, high=85),
}

TEMP_FLOOR = 35.0
TEMP_SPAN = 50.0
TEMP_UNKNOWN = 45.0
MIN_SHOULDER_F = 8.0

WIND_MAX = 10.0
WIND_UNKNOWN = 10.0
WIND_SWEET_SPOT_RIVER = 3.0
WIND_SWEET_SPOT_LAKE = 6.0
WIND_WINDOW = 10.0

CLOUD_MAX = 8.0
CLOUD_UNKNOWN = 5.0
CLOUD_TARGET_COLD = 60.0
CLOUD_TARGET_OTHER = 40.0
CLOUD_WINDOW = 50.0

PRESSURE_MAX = 7.0
PRESSURE_UNKNOWN = 5.0
PRESSURE_STEADY_INHG = 29.95
PRESSURE_WINDOW = 0.35

TURBIDITY_MAX = 5.0
TURBIDITY_UNKNOWN = 5.0
TURBIDITY_IDEAL_COLD = 5.0
TURBIDITY_IDEAL_OTHER = 15.0
TURBIDITY_WINDOW_COLD = 10.0
TURBIDITY_WINDOW_OTHER = 25.0


def _linear_fraction(value: float, target: float, window: float) -> float:
    """1.0 at the target, decaying linearly to 0.0 at ``window`` away."""
    return clamp(1 - abs(value - target) / window, 0.0, 1.0)


def temperature_component(band: ThermalBand, water_temp_f: float | None) -> float:
    if water_temp_f is None:
        return TEMP_UNKNOWN
    prefs = TEMPERATURE_BANDS[band]
    if water_temp_f < prefs.ideal:
        shoulder = prefs.ideal - prefs.low
    else:
        shoulder = prefs.high - prefs.ideal
    shoulder = max(shoulder, MIN_SHOULDER_F)
    fraction = _linear_fraction(water_temp_f, prefs.ideal, shoulder)
    return TEMP_FLOOR + fraction * TEMP_SPAN


def wind_component(water_type: str | None, wind_mph: float | None) -> float:
    if wind_mph is None:
        return WIND_UNKNOWN
    spot = WIND_SWEET_SPOT_RIVER if is_river_like(water_type) else WIND_SWEET_SPOT_LAKE
    return _linear_fraction(wind_mph, spot, WIND_WINDOW) * WIND_MAX


def cloud_component(band: ThermalBand, cloud_pct: float | None) -> float:
    if cloud_pct is None:
        return CLOUD_UNKNOWN
    # Cold-water fish prefer lower light.
    target = CLOUD_TARGET_COLD if band == ThermalBand.COLD else CLOUD_TARGET_OTHER
    return _linear_fraction(cloud_pct, target, CLOUD_WINDOW) * CLOUD_MAX


def pressure_component(barometer_inhg: float | None) -> float:
    if barometer_inhg is None:
        return PRESSURE_UNKNOWN
    return _linear_fraction(barometer_inhg, PRESSURE_STEADY_INHG, PRESSURE_WINDOW) * PRESSURE_MAX


def turbidity_component(band: ThermalBand, turbidity_fnu: float | None) -> float:
    if turbidity_fnu is None:
        return TURBIDITY_UNKNOWN
    if band == ThermalBand.COLD:
        ideal, window = TURBIDITY_IDEAL_COLD, TURBIDITY_WINDOW_COLD
    else:
        ideal, window = TURBIDITY_IDEAL_OTHER, TURBIDITY_WINDOW_OTHER
    return _linear_fraction(turbidity_fnu, ideal, window) * TURBIDITY_MAX


def score_breakdown(
    species: str | None,
    water_type: str | None,
    conditions: ConditionSet | None,
) -> ScoreBreakdown | None:
    """Per-component points for a species/water/conditions tuple.

    Returns None when the species or the whole condition set is missing.
    """
    if species is None or conditions is None:
        return None
    band = classify(species)
    return ScoreBreakdown(
        temperature=temperature_component(band, conditions.water_temp_f),
        wind=wind_component(water_type, conditions.wind_mph),
        cloud=cloud_component(band, conditions.cloud_pct),
        pressure=pressure_component(conditions.barometer_inhg),
        turbidity=turbidity_component(band, conditions.turbidity_fnu),
    )


def success_score(
    species: str | None,
    water_type: str | None,
    conditions: ConditionSet | None,
) -> int | None:
    """Success percentage in [0, 100], or None if it cannot be evaluated."""
    breakdown = score_breakdown(species, water_type, conditions)
    if breakdown is None:
        return None
    return breakdown.score


def success_label(score: int | None) -> str:
    if score is None:
        return "unknown"
    if score >= 80:
        return "excellent"
    if score >= 65:
        return "good"
    if score >= 50:
        return "fair"
    return "poor"
