"""Deterministic clothing rules, one procedure per body zone.

Every procedure takes the same ``(weather, workout, effective_temperature)``
triple. The effective temperature is computed once by the assembler and passed
in; no procedure derives its own from the raw weather.
"""

from __future__ import annotations

from typing import Callable, Dict, Optional, Tuple

from models.inputs import WeatherSnapshot, WorkoutContext
from models.taxonomy import ClothingItem, WorkoutIntensity, Zone

ZoneItems = Tuple[ClothingItem, ...]
ZoneProcedure = Callable[[WeatherSnapshot, WorkoutContext, float], ZoneItems]


def _relaxed(workout: WorkoutContext) -> bool:
    return workout.intensity in {WorkoutIntensity.RECREATIONAL, WorkoutIntensity.ENDURANCE}


def needs_long_pants(weather: WeatherSnapshot, workout: WorkoutContext, effective_temperature: float) -> bool:
    intensity = workout.intensity
    duration = workout.duration_minutes
    return (
        effective_temperature <= 15
        or (intensity is WorkoutIntensity.INTENSIVE and effective_temperature <= 15)
        or (intensity is WorkoutIntensity.TEMPO and effective_temperature <= 14)
        or (duration >= 120 and weather.wind_speed >= 15)
        or (duration >= 180 and effective_temperature <= 25)
    )


def choose_legs(weather: WeatherSnapshot, workout: WorkoutContext, effective_temperature: float) -> ZoneItems:
    """Long pants, or shorts with optional leg warmers. Never pants with warmers."""

    if needs_long_pants(weather, workout, effective_temperature):
        return (ClothingItem.LONG_PANTS,)
    if workout.duration_minutes >= 90 and effective_temperature <= 16:
        return (ClothingItem.SHORTS, ClothingItem.LEG_WARMERS)
    return (ClothingItem.SHORTS,)


def _mid_layer_for_cool_band(workout: WorkoutContext, effective_temperature: float) -> bool:
    if workout.intensity is WorkoutIntensity.INTENSIVE:
        return True
    if workout.intensity is WorkoutIntensity.TEMPO:
        return effective_temperature <= 11
    return effective_temperature <= 10 or workout.duration_minutes >= 120


def choose_torso(weather: WeatherSnapshot, workout: WorkoutContext, effective_temperature: float) -> ZoneItems:
    """Base, mid and outer layers picked by effective temperature band.

    Bands are checked coldest first and exactly one applies. The base is the
    thermal layer whenever anything is worn over it, otherwise the jersey.
    """

    wind = weather.wind_speed
    duration = workout.duration_minutes
    mid: Optional[ClothingItem] = None
    outer: Optional[ClothingItem] = None

    if effective_temperature <= -2:
        mid = ClothingItem.SWEATSHIRT
        outer = ClothingItem.WINTER_JACKET
    elif effective_temperature <= 6:
        mid = ClothingItem.SWEATSHIRT
        if wind >= 15 or (wind >= 10 and weather.humidity >= 80):
            outer = ClothingItem.WIND_JACKET
        elif effective_temperature <= 2:
            outer = ClothingItem.WINTER_JACKET
    elif effective_temperature <= 13:
        if _mid_layer_for_cool_band(workout, effective_temperature):
            mid = ClothingItem.SWEATSHIRT
        if wind >= 15:
            outer = ClothingItem.WIND_VEST
    elif effective_temperature <= 18:
        if wind >= 18 and duration >= 90:
            outer = ClothingItem.WIND_VEST
        if _relaxed(workout) and duration >= 150:
            mid = ClothingItem.SWEATSHIRT
    elif weather.temperature >= 20:
        if wind >= 15 and duration >= 90:
            outer = ClothingItem.WIND_VEST
        # light layer against the sun on very long hot rides
        if duration >= 180 and weather.temperature >= 25:
            mid = ClothingItem.SWEATSHIRT

    base = ClothingItem.THERMAL_BASE_LAYER if (mid or outer) else ClothingItem.CYCLING_JERSEY
    return tuple(item for item in (base, mid, outer) if item is not None)


def choose_arms(weather: WeatherSnapshot, workout: WorkoutContext, effective_temperature: float) -> ZoneItems:
    if workout.duration_minutes >= 90 and effective_temperature <= 18:
        return (ClothingItem.ARM_WARMERS,)
    return ()


def choose_head(weather: WeatherSnapshot, workout: WorkoutContext, effective_temperature: float) -> ZoneItems:
    wants_cap = (
        effective_temperature <= 12
        or (weather.temperature >= 13 and workout.duration_minutes >= 60)
        or (weather.temperature >= 15 and workout.intensity is WorkoutIntensity.INTENSIVE)
    )
    return (ClothingItem.CAP,) if wants_cap else ()


def choose_hands(weather: WeatherSnapshot, workout: WorkoutContext, effective_temperature: float) -> ZoneItems:
    """Exactly one glove tier, with upgrades applied after the base pick."""

    if effective_temperature <= 5:
        gloves = ClothingItem.WINTER_GLOVES
    elif effective_temperature <= 12:
        gloves = ClothingItem.TRANSITIONAL_GLOVES
    else:
        gloves = ClothingItem.SUMMER_GLOVES

    if effective_temperature <= 10 and (
        workout.intensity is WorkoutIntensity.INTENSIVE or workout.duration_minutes >= 120
    ):
        gloves = ClothingItem.WINTER_GLOVES
    # duration and wind alone never jump straight to winter gloves
    if gloves is ClothingItem.SUMMER_GLOVES and (workout.duration_minutes >= 180 or weather.wind_speed >= 25):
        gloves = ClothingItem.TRANSITIONAL_GLOVES
    return (gloves,)


def choose_neck(weather: WeatherSnapshot, workout: WorkoutContext, effective_temperature: float) -> ZoneItems:
    wind = weather.wind_speed
    duration = workout.duration_minutes
    wants_gaiter = (
        effective_temperature <= 8
        or wind >= 18
        or (effective_temperature <= 10 and weather.humidity >= 80)
        or (effective_temperature <= 13 and workout.intensity is WorkoutIntensity.INTENSIVE)
        or (duration >= 120 and wind >= 18)
        or duration >= 200
    )
    return (ClothingItem.NECK_GAITER,) if wants_gaiter else ()


def needs_shoe_covers(weather: WeatherSnapshot, workout: WorkoutContext, effective_temperature: float) -> bool:
    wind = weather.wind_speed
    intensity = workout.intensity
    return (
        effective_temperature <= -2
        or wind >= 25
        or (effective_temperature <= 6 and weather.humidity >= 80)
        or (effective_temperature <= 10 and intensity is WorkoutIntensity.INTENSIVE)
        or (effective_temperature <= 8 and intensity is WorkoutIntensity.TEMPO)
        or (wind >= 20 and effective_temperature <= 12)
    )


def choose_feet(weather: WeatherSnapshot, workout: WorkoutContext, effective_temperature: float) -> ZoneItems:
    """Socks sized by temperature, with shoe covers on top when protection is needed."""

    socks = ClothingItem.WINTER_SOCKS if effective_temperature <= 12 else ClothingItem.SUMMER_SOCKS
    if needs_shoe_covers(weather, workout, effective_temperature):
        return (socks, ClothingItem.SHOE_COVERS)
    return (socks,)


ZONE_PROCEDURES: Dict[Zone, ZoneProcedure] = {
    Zone.TORSO: choose_torso,
    Zone.LEGS: choose_legs,
    Zone.ARMS: choose_arms,
    Zone.HEAD: choose_head,
    Zone.HANDS: choose_hands,
    Zone.NECK: choose_neck,
    Zone.FEET: choose_feet,
}


__all__ = [
    "ZONE_PROCEDURES",
    "ZoneItems",
    "ZoneProcedure",
    "choose_arms",
    "choose_feet",
    "choose_hands",
    "choose_head",
    "choose_legs",
    "choose_neck",
    "choose_torso",
    "needs_long_pants",
    "needs_shoe_covers",
]
