"""Recommendation assembly: bias, one effective temperature, seven zones, fixed order."""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from logic.effective_temperature import explain_effective_temperature
from logic.zone_rules import ZONE_PROCEDURES, ZoneItems
from models.inputs import NEUTRAL_BIAS, PersonalizationBias, WeatherSnapshot, WorkoutContext
from models.recommendation import ClothingRecommendation
from models.taxonomy import ClothingItem, Zone

SAFETY_ITEM = ClothingItem.HELMET

# Torso first so the base layer follows the helmet; feet keep socks before covers.
ASSEMBLY_ORDER: Tuple[Zone, ...] = (
    Zone.TORSO,
    Zone.LEGS,
    Zone.ARMS,
    Zone.HEAD,
    Zone.HANDS,
    Zone.NECK,
    Zone.FEET,
)


def decide_zones(
    weather: WeatherSnapshot, workout: WorkoutContext, effective_temperature: float
) -> Dict[Zone, ZoneItems]:
    """Run every zone procedure against the same inputs."""

    return {zone: procedure(weather, workout, effective_temperature) for zone, procedure in ZONE_PROCEDURES.items()}


def generate_recommendation(
    weather: WeatherSnapshot,
    workout: WorkoutContext,
    bias: Optional[PersonalizationBias] = None,
) -> ClothingRecommendation:
    """Build the ordered outfit for one ride.

    The bias shifts the raw temperature before anything else, so every rule,
    including those gated on raw temperature, sees the personalised value.
    """

    bias = bias or NEUTRAL_BIAS
    adjusted = weather.with_temperature_offset(bias.thermal_adjustment)
    breakdown = explain_effective_temperature(adjusted, workout)
    zones = decide_zones(adjusted, workout, breakdown.value)

    items: List[ClothingItem] = [SAFETY_ITEM]
    for zone in ASSEMBLY_ORDER:
        items.extend(zones[zone])
    return ClothingRecommendation(items=tuple(items), breakdown=breakdown)


__all__ = ["ASSEMBLY_ORDER", "SAFETY_ITEM", "decide_zones", "generate_recommendation"]
