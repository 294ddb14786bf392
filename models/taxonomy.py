"""Canonical vocabularies for body zones, clothing items and workout intensity.

This module centralises the closed set of garments the engine may recommend.
Every item belongs to exactly one zone and one slot, so downstream consumers
(rendering, feedback forms) can map a flat recommendation back onto the body
without string matching.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Iterable, Tuple


def _normalize_key(value: str) -> str:
    """Normalise a free-form string into a vocabulary key."""

    return value.strip().lower().replace(" ", "_").replace("-", "_")


class WorkoutIntensity(str, Enum):
    """Workout effort levels."""

    RECREATIONAL = "recreational"
    TEMPO = "tempo"
    INTENSIVE = "intensive"
    ENDURANCE = "endurance"

    @classmethod
    def parse(cls, value: "WorkoutIntensity | str") -> "WorkoutIntensity":
        """Resolve an intensity from an enum member, an English label or a legacy label.

        Raises a :class:`ValueError` for labels outside the vocabulary.
        """

        if isinstance(value, cls):
            return value
        key = _normalize_key(str(value))
        if key in LEGACY_INTENSITY_LABELS:
            return LEGACY_INTENSITY_LABELS[key]
        try:
            return cls(key)
        except ValueError:
            allowed = sorted(member.value for member in cls)
            raise ValueError(f"Unsupported workout intensity '{value}'. Allowed: {allowed}") from None


# Labels used by earlier clients of the recommendation endpoint.
LEGACY_INTENSITY_LABELS: Dict[str, WorkoutIntensity] = {
    "rekreacyjny": WorkoutIntensity.RECREATIONAL,
    "intensywny": WorkoutIntensity.INTENSIVE,
    "długodystansowy": WorkoutIntensity.ENDURANCE,
    "dlugodystansowy": WorkoutIntensity.ENDURANCE,
}


class Zone(str, Enum):
    """Body regions the engine dresses, plus the safety slot for the helmet."""

    SAFETY = "safety"
    HEAD = "head"
    NECK = "neck"
    TORSO = "torso"
    ARMS = "arms"
    HANDS = "hands"
    LEGS = "legs"
    FEET = "feet"


class ClothingItem(str, Enum):
    """Closed vocabulary of garments the engine can recommend."""

    HELMET = "helmet"
    THERMAL_BASE_LAYER = "thermal_base_layer"
    CYCLING_JERSEY = "cycling_jersey"
    SWEATSHIRT = "sweatshirt"
    WINTER_JACKET = "winter_jacket"
    WIND_JACKET = "wind_jacket"
    WIND_VEST = "wind_vest"
    LONG_PANTS = "long_pants"
    SHORTS = "shorts"
    LEG_WARMERS = "leg_warmers"
    ARM_WARMERS = "arm_warmers"
    CAP = "cap"
    WINTER_GLOVES = "winter_gloves"
    TRANSITIONAL_GLOVES = "transitional_gloves"
    SUMMER_GLOVES = "summer_gloves"
    NECK_GAITER = "neck_gaiter"
    WINTER_SOCKS = "winter_socks"
    SUMMER_SOCKS = "summer_socks"
    SHOE_COVERS = "shoe_covers"

    @property
    def zone(self) -> Zone:
        return ITEM_SLOTS[self][0]

    @property
    def slot(self) -> str:
        return ITEM_SLOTS[self][1]

    @property
    def label(self) -> str:
        return ITEM_LABELS[self]


# (zone, slot) per item. Slots subdivide the torso and feet into their layers.
ITEM_SLOTS: Dict[ClothingItem, Tuple[Zone, str]] = {
    ClothingItem.HELMET: (Zone.SAFETY, "safety"),
    ClothingItem.THERMAL_BASE_LAYER: (Zone.TORSO, "torso.base"),
    ClothingItem.CYCLING_JERSEY: (Zone.TORSO, "torso.base"),
    ClothingItem.SWEATSHIRT: (Zone.TORSO, "torso.mid"),
    ClothingItem.WINTER_JACKET: (Zone.TORSO, "torso.outer"),
    ClothingItem.WIND_JACKET: (Zone.TORSO, "torso.outer"),
    ClothingItem.WIND_VEST: (Zone.TORSO, "torso.outer"),
    ClothingItem.LONG_PANTS: (Zone.LEGS, "legs"),
    ClothingItem.SHORTS: (Zone.LEGS, "legs"),
    ClothingItem.LEG_WARMERS: (Zone.LEGS, "legs.warmers"),
    ClothingItem.ARM_WARMERS: (Zone.ARMS, "arms"),
    ClothingItem.CAP: (Zone.HEAD, "head"),
    ClothingItem.WINTER_GLOVES: (Zone.HANDS, "hands"),
    ClothingItem.TRANSITIONAL_GLOVES: (Zone.HANDS, "hands"),
    ClothingItem.SUMMER_GLOVES: (Zone.HANDS, "hands"),
    ClothingItem.NECK_GAITER: (Zone.NECK, "neck"),
    ClothingItem.WINTER_SOCKS: (Zone.FEET, "feet.socks"),
    ClothingItem.SUMMER_SOCKS: (Zone.FEET, "feet.socks"),
    ClothingItem.SHOE_COVERS: (Zone.FEET, "feet.covers"),
}

ITEM_LABELS: Dict[ClothingItem, str] = {
    ClothingItem.HELMET: "Helmet",
    ClothingItem.THERMAL_BASE_LAYER: "Thermal base layer",
    ClothingItem.CYCLING_JERSEY: "Cycling jersey",
    ClothingItem.SWEATSHIRT: "Sweatshirt",
    ClothingItem.WINTER_JACKET: "Winter jacket",
    ClothingItem.WIND_JACKET: "Wind jacket",
    ClothingItem.WIND_VEST: "Wind vest",
    ClothingItem.LONG_PANTS: "Long pants",
    ClothingItem.SHORTS: "Shorts",
    ClothingItem.LEG_WARMERS: "Leg warmers",
    ClothingItem.ARM_WARMERS: "Arm warmers",
    ClothingItem.CAP: "Cap",
    ClothingItem.WINTER_GLOVES: "Winter gloves",
    ClothingItem.TRANSITIONAL_GLOVES: "Transitional gloves",
    ClothingItem.SUMMER_GLOVES: "Summer gloves",
    ClothingItem.NECK_GAITER: "Neck gaiter",
    ClothingItem.WINTER_SOCKS: "Winter socks",
    ClothingItem.SUMMER_SOCKS: "Summer socks",
    ClothingItem.SHOE_COVERS: "Shoe covers",
}


def items_for_zone(zone: Zone) -> Tuple[ClothingItem, ...]:
    """Return the vocabulary of a zone in declaration order."""

    return tuple(item for item in ClothingItem if item.zone is zone)


ZONE_VOCABULARY: Dict[Zone, Tuple[ClothingItem, ...]] = {zone: items_for_zone(zone) for zone in Zone}


def parse_items(values: Iterable[str]) -> Tuple[ClothingItem, ...]:
    """Resolve item values or names to vocabulary members.

    Raises a :class:`ValueError` for anything outside the vocabulary.
    """

    parsed = []
    for value in values:
        key = _normalize_key(str(value.value if isinstance(value, ClothingItem) else value))
        try:
            parsed.append(ClothingItem(key))
        except ValueError:
            raise ValueError(f"Unsupported clothing item '{value}'") from None
    return tuple(parsed)


__all__ = [
    "ClothingItem",
    "ITEM_LABELS",
    "ITEM_SLOTS",
    "LEGACY_INTENSITY_LABELS",
    "WorkoutIntensity",
    "ZONE_VOCABULARY",
    "Zone",
    "items_for_zone",
    "parse_items",
]
