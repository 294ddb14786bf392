"""Input value objects consumed once per recommendation call."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from models.taxonomy import WorkoutIntensity


@dataclass(frozen=True)
class WeatherSnapshot:
    """Resolved weather for the ride: degrees Celsius, percent humidity, km/h wind."""

    temperature: float
    humidity: int
    wind_speed: float

    def with_temperature_offset(self, delta: float) -> "WeatherSnapshot":
        if not delta:
            return self
        return replace(self, temperature=self.temperature + delta)


@dataclass(frozen=True)
class WorkoutContext:
    intensity: WorkoutIntensity
    duration_minutes: int


@dataclass(frozen=True)
class ThermalPreferences:
    """Profile preferences carried alongside the bias.

    The decision rules never read these; they travel with the recommendation so
    callers can render or persist them next to the outfit.
    """

    general_feeling: str = "neutral"
    cold_hands: bool = False
    cold_feet: bool = False
    cap_threshold_temp: float = 10.0

    def to_dict(self) -> dict:
        return {
            "general_feeling": self.general_feeling,
            "cold_hands": self.cold_hands,
            "cold_feet": self.cold_feet,
            "cap_threshold_temp": self.cap_threshold_temp,
        }


@dataclass(frozen=True)
class PersonalizationBias:
    """Signed thermal adjustment in degrees Celsius.

    A rider who runs cold carries a negative adjustment, which lowers the
    temperature every rule sees.
    """

    thermal_adjustment: float = 0.0
    preferences: Optional[ThermalPreferences] = None

    @property
    def is_personalized(self) -> bool:
        return self.thermal_adjustment != 0


NEUTRAL_BIAS = PersonalizationBias()


__all__ = [
    "NEUTRAL_BIAS",
    "PersonalizationBias",
    "ThermalPreferences",
    "WeatherSnapshot",
    "WorkoutContext",
]
