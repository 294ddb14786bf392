"""Evaluation scenarios exercising cold, mild, hot and long-ride conditions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class EvaluationScenario:
    name: str
    description: str
    request: Dict[str, object]
    expectations: Dict[str, object] = field(default_factory=dict)


SCENARIOS: List[EvaluationScenario] = [
    EvaluationScenario(
        name="freezing_windy_recreational",
        description="Sub-zero morning with a stiff breeze on a 90 minute easy ride.",
        request={
            "temperature": -5,
            "humidity": 70,
            "wind_speed": 15,
            "workout_intensity": "recreational",
            "workout_duration": 90,
        },
        expectations={
            "effective_temperature": -6.8,
            "must_include": ["winter_jacket", "winter_gloves", "shoe_covers", "neck_gaiter", "long_pants"],
            "must_exclude": ["shorts"],
        },
    ),
    EvaluationScenario(
        name="humid_summer_hour",
        description="Hot humid hour where the heat index lifts the felt temperature.",
        request={
            "temperature": 28,
            "humidity": 50,
            "wind_speed": 5,
            "workout_intensity": "recreational",
            "workout_duration": 60,
        },
        expectations={
            "effective_temperature": 30.0,
            "must_include": ["shorts", "summer_socks", "cycling_jersey"],
            "must_exclude": ["shoe_covers", "sweatshirt", "winter_jacket", "wind_jacket", "wind_vest"],
        },
    ),
    EvaluationScenario(
        name="mild_boundary_still_air",
        description="Fifteen degrees with a light breeze sits exactly on the long pants boundary.",
        request={
            "temperature": 15,
            "humidity": 60,
            "wind_speed": 5,
            "workout_intensity": "recreational",
            "workout_duration": 60,
        },
        expectations={
            "effective_temperature": 15.0,
            "must_include": ["long_pants"],
            "must_exclude": ["shorts", "leg_warmers"],
        },
    ),
    EvaluationScenario(
        name="cool_tempo_breeze",
        description="Cool tempo session where effort offsets some of the wind chill.",
        request={
            "temperature": 10,
            "humidity": 60,
            "wind_speed": 10,
            "workout_intensity": "tempo",
            "workout_duration": 60,
        },
        expectations={
            "effective_temperature": 8.0,
            "must_include": ["sweatshirt", "transitional_gloves", "neck_gaiter", "shoe_covers"],
            "must_exclude": ["winter_jacket", "wind_vest"],
        },
    ),
    EvaluationScenario(
        name="windy_autumn_long_ride",
        description="Damp gusty autumn day on a two and a half hour ride.",
        request={
            "temperature": 12,
            "humidity": 85,
            "wind_speed": 20,
            "workout_intensity": "recreational",
            "workout_duration": 150,
        },
        expectations={
            "effective_temperature": 6.5,
            "must_include": ["wind_vest", "arm_warmers", "winter_gloves", "shoe_covers"],
            "must_exclude": ["shorts", "winter_jacket"],
        },
    ),
    EvaluationScenario(
        name="long_summer_endurance",
        description="Warm dry endurance day over three hours in the saddle.",
        request={
            "temperature": 26,
            "humidity": 40,
            "wind_speed": 10,
            "workout_intensity": "endurance",
            "workout_duration": 200,
        },
        expectations={
            "effective_temperature": 26.5,
            "must_include": ["shorts", "transitional_gloves", "neck_gaiter", "summer_socks"],
            "must_exclude": ["long_pants", "shoe_covers", "arm_warmers"],
        },
    ),
]


__all__ = ["EvaluationScenario", "SCENARIOS"]
