"""Build a ConditionSet from weather and hydrology collaborator data."""

from fishcast.models.common import round_half_up
from fishcast.models.conditions import ConditionSet, HydroReading, WeatherDay

HPA_TO_INHG = 0.02953
AIR_TO_WATER_OFFSET_F = 5.0


def estimate_water_temp_f(weather: WeatherDay) -> float | None:
    """Rough water temperature: mean air temperature of the day minus 5F."""
    temps = [h.air_temp_f for h in weather.hourly if h.air_temp_f is not None]
    if not temps:
        return None
    return float(round_half_up(sum(temps) / len(temps) - AIR_TO_WATER_OFFSET_F))


def hpa_to_inhg(pressure_hpa: float | None) -> float | None:
    if pressure_hpa is None:
        return None
    return round(pressure_hpa * HPA_TO_INHG, 2)


def derive_conditions(
    weather: WeatherDay | None,
    hydro: HydroReading | None,
    hour: int,
) -> ConditionSet | None:
    """Conditions for ``hour`` of the forecast day.

    Measured water temperature and turbidity win over estimates. Returns None
    when there is no weather at all, which the scorer reports as unscorable.
    """
    if weather is None:
        return None

    measured_temp = hydro.water_temp_f if hydro is not None else None
    turbidity = hydro.turbidity_fnu if hydro is not None else None

    if measured_temp is not None:
        water_temp = measured_temp
    else:
        water_temp = estimate_water_temp_f(weather)

    record = next((h for h in weather.hourly if h.time.hour == hour), None)

    return ConditionSet(
        water_temp_f=water_temp,
        wind_mph=record.wind_mph if record is not None else None,
        cloud_pct=record.cloud_pct if record is not None else None,
        barometer_inhg=hpa_to_inhg(record.pressure_msl) if record is not None else None,
        turbidity_fnu=turbidity,
        estimated=measured_temp is None,
    )
