"""Model package exports."""

from models.taxonomy import *  # noqa: F401,F403
from models.inputs import NEUTRAL_BIAS, PersonalizationBias, ThermalPreferences, WeatherSnapshot, WorkoutContext
from models.outfit import FeetCoverage, TorsoLayers, ZoneOutfit
from models.recommendation import ClothingRecommendation, EffectiveTemperatureBreakdown

__all__ = [
    "ClothingItem",
    "ClothingRecommendation",
    "EffectiveTemperatureBreakdown",
    "FeetCoverage",
    "NEUTRAL_BIAS",
    "PersonalizationBias",
    "ThermalPreferences",
    "TorsoLayers",
    "WeatherSnapshot",
    "WorkoutContext",
    "WorkoutIntensity",
    "Zone",
    "ZoneOutfit",
]
