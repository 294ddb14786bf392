"""Felt-temperature calculation shared by every zone rule.

The stages run in a fixed order: wind chill or heat index first, then the
workout intensity offset, then the long-ride offset, then rounding. The workout
offsets apply to the weather-adjusted value, never to the raw temperature.
"""

from __future__ import annotations

import math
from typing import Dict

from models.inputs import WeatherSnapshot, WorkoutContext
from models.recommendation import EffectiveTemperatureBreakdown
from models.taxonomy import WorkoutIntensity

WIND_CHILL_MAX_TEMPERATURE_C = 15.0
WIND_CHILL_MIN_WIND_KMH = 5.0
WIND_CHILL_LINEAR_FACTOR = 0.3
KMH_PER_MS = 3.6

HEAT_INDEX_MIN_TEMPERATURE_C = 18.0
HEAT_INDEX_MIN_HUMIDITY = 50
HEAT_INDEX_HUMIDITY_BASELINE = 40
HEAT_INDEX_FACTOR = 0.2

INTENSITY_OFFSETS_C: Dict[WorkoutIntensity, float] = {
    WorkoutIntensity.RECREATIONAL: 0.0,
    WorkoutIntensity.TEMPO: 1.0,
    WorkoutIntensity.INTENSIVE: 2.0,
    WorkoutIntensity.ENDURANCE: 0.0,
}

LONG_RIDE_MINUTES = 120
LONG_RIDE_OFFSET_C = 0.5


def round_half_up(value: float, digits: int = 1) -> float:
    """Round halves away from the floor, e.g. 8.25 -> 8.3 and -6.75 -> -6.7."""

    scale = 10 ** digits
    return math.floor(value * scale + 0.5) / scale


def wind_chill_applies(weather: WeatherSnapshot) -> bool:
    # Strictly below 15: a 15 degree day with a light breeze still reads as 15.
    return weather.temperature < WIND_CHILL_MAX_TEMPERATURE_C and weather.wind_speed >= WIND_CHILL_MIN_WIND_KMH


def wind_chill(temperature: float, wind_speed_kmh: float) -> float:
    """Wind-chilled temperature; the caller decides whether wind chill applies."""

    if temperature <= 0:
        velocity = (wind_speed_kmh / KMH_PER_MS) ** 0.16
        return 13.12 + 0.6215 * temperature - 11.37 * velocity + 0.3965 * temperature * velocity
    return temperature - wind_speed_kmh * WIND_CHILL_LINEAR_FACTOR


def heat_index_applies(weather: WeatherSnapshot) -> bool:
    return weather.temperature >= HEAT_INDEX_MIN_TEMPERATURE_C and weather.humidity >= HEAT_INDEX_MIN_HUMIDITY


def heat_index(temperature: float, humidity: int) -> float:
    return temperature + (humidity - HEAT_INDEX_HUMIDITY_BASELINE) * HEAT_INDEX_FACTOR


def explain_effective_temperature(weather: WeatherSnapshot, workout: WorkoutContext) -> EffectiveTemperatureBreakdown:
    """Compute the effective temperature and keep every intermediate stage."""

    baseline = float(weather.temperature)
    chilled = wind_chill_applies(weather)
    after_wind_chill = wind_chill(baseline, weather.wind_speed) if chilled else baseline

    humid = heat_index_applies(weather)
    after_heat_index = heat_index(after_wind_chill, weather.humidity) if humid else after_wind_chill

    intensity_offset = INTENSITY_OFFSETS_C[workout.intensity]
    duration_offset = LONG_RIDE_OFFSET_C if workout.duration_minutes >= LONG_RIDE_MINUTES else 0.0

    return EffectiveTemperatureBreakdown(
        baseline=baseline,
        after_wind_chill=round_half_up(after_wind_chill, 2),
        after_heat_index=round_half_up(after_heat_index, 2),
        intensity_offset=intensity_offset,
        duration_offset=duration_offset,
        value=round_half_up(after_heat_index + intensity_offset + duration_offset),
        wind_chill_applied=chilled,
        heat_index_applied=humid,
    )


def compute_effective_temperature(weather: WeatherSnapshot, workout: WorkoutContext) -> float:
    """Return the felt temperature rounded to one decimal."""

    return explain_effective_temperature(weather, workout).value


__all__ = [
    "compute_effective_temperature",
    "explain_effective_temperature",
    "heat_index",
    "heat_index_applies",
    "round_half_up",
    "wind_chill",
    "wind_chill_applies",
]
