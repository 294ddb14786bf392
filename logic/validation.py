"""Pydantic schemas guarding the engine boundary.

The decision rules assume finite numbers and a known intensity. Everything
that reaches them passes through these models first.
"""

from __future__ import annotations

from typing import Annotated, Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from models.inputs import ThermalPreferences
from models.taxonomy import WorkoutIntensity

MIN_WORKOUT_DURATION = 15
MAX_WORKOUT_DURATION = 300
MAX_THERMAL_ADJUSTMENT = 10.0

LEGACY_FEELINGS = {
    "marzlak": "cold",
    "neutralnie": "neutral",
    "szybko_mi_goraco": "warm",
}

ThermalAdjustment = Annotated[float, Field(ge=-MAX_THERMAL_ADJUSTMENT, le=MAX_THERMAL_ADJUSTMENT, allow_inf_nan=False)]


class ThermalPreferencesPayload(BaseModel):
    """Profile preferences forwarded untouched alongside the recommendation."""

    general_feeling: Literal["cold", "neutral", "warm"] = "neutral"
    cold_hands: bool = False
    cold_feet: bool = False
    cap_threshold_temp: float = Field(default=10.0, ge=0, le=30)

    @field_validator("general_feeling", mode="before")
    @classmethod
    def _map_legacy_feeling(cls, value: Any) -> Any:
        if isinstance(value, str):
            key = value.strip().lower()
            return LEGACY_FEELINGS.get(key, key)
        return value

    def to_preferences(self) -> ThermalPreferences:
        return ThermalPreferences(**self.model_dump())


class RecommendationRequest(BaseModel):
    """Input contract for a single outfit recommendation."""

    user_id: Optional[str] = Field(default=None, min_length=1)
    temperature: float = Field(ge=-60, le=60, allow_inf_nan=False)
    humidity: int = Field(ge=0, le=100)
    wind_speed: float = Field(ge=0, le=200, allow_inf_nan=False)
    workout_intensity: WorkoutIntensity = WorkoutIntensity.RECREATIONAL
    workout_duration: int = Field(default=60, ge=MIN_WORKOUT_DURATION, le=MAX_WORKOUT_DURATION)
    thermal_adjustment: Optional[ThermalAdjustment] = None
    thermal_preferences: Optional[ThermalPreferencesPayload] = None

    @field_validator("workout_intensity", mode="before")
    @classmethod
    def _parse_intensity(cls, value: Any) -> WorkoutIntensity:
        return WorkoutIntensity.parse(value)


class RecommendationResponse(BaseModel):
    """Structure returned by the recommendation agent and the HTTP layer."""

    status: Literal["ok", "error", "needs_review"]
    items: List[str]
    item_labels: List[str]
    outfit: Dict[str, Any]
    effective_temperature: float
    workout_intensity: WorkoutIntensity
    workout_duration: int
    personalized: bool
    thermal_adjustment: float
    thermal_preferences: Optional[Dict[str, Any]] = None
    computation_time_ms: float
    user_facing_summary: Optional[str] = None
    debug_summary: Optional[Dict[str, Any]] = None


class ValidationResult(BaseModel):
    """Wrapper returned to callers when validation fails."""

    status: Literal["needs_review"] = "needs_review"
    message: str
    details: List[Dict[str, Any]]


def validation_failure(message: str, exc: ValidationError) -> Dict[str, Any]:
    """Translate Pydantic errors into a consistent review payload."""

    details = [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", ""), "type": error.get("type", "")}
        for error in exc.errors()
    ]
    return ValidationResult(message=message, details=details).model_dump()


__all__ = [
    "MAX_THERMAL_ADJUSTMENT",
    "MAX_WORKOUT_DURATION",
    "MIN_WORKOUT_DURATION",
    "RecommendationRequest",
    "RecommendationResponse",
    "ThermalPreferencesPayload",
    "ValidationResult",
    "validation_failure",
]
