"""Recommendation agent wrapping the deterministic clothing engine."""

from __future__ import annotations

import logging
import time
from typing import Any, Dict, Mapping, Optional

from pydantic import ValidationError

from logic.assembler import generate_recommendation
from logic.outfit_converter import convert_items_to_outfit
from logic.validation import RecommendationRequest, RecommendationResponse, validation_failure
from models.inputs import NEUTRAL_BIAS, PersonalizationBias, WeatherSnapshot, WorkoutContext
from models.recommendation import ClothingRecommendation
from models.taxonomy import Zone
from ride_app.config import RideAppConfig
from ride_app.logging_config import get_logger, log_event, operation_context
from ride_app.observability import instrument_operation
from tools.profile_provider import ProfileProvider

logger = get_logger(__name__)


class RecommendationAgent:
    """Validates ride requests, resolves the rider's bias and calls the engine."""

    def __init__(self, config: RideAppConfig, profile_provider: Optional[ProfileProvider] = None) -> None:
        self.config = config
        self.profile_provider = profile_provider
        self._generate = instrument_operation("engine.generate_recommendation")(generate_recommendation)

    def _with_defaults(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        data = dict(payload)
        if data.get("workout_intensity") is None:
            data["workout_intensity"] = self.config.default_workout_intensity
        if data.get("workout_duration") is None:
            data["workout_duration"] = self.config.default_workout_duration
        return data

    def resolve_bias(self, request: RecommendationRequest) -> PersonalizationBias:
        """An explicit adjustment wins, then the stored profile, then neutral."""

        preferences = request.thermal_preferences.to_preferences() if request.thermal_preferences else None
        if request.thermal_adjustment is not None:
            return PersonalizationBias(thermal_adjustment=request.thermal_adjustment, preferences=preferences)

        bias = NEUTRAL_BIAS
        if request.user_id and self.profile_provider is not None:
            bias = self.profile_provider.get_bias(request.user_id)
        if preferences is not None:
            bias = PersonalizationBias(thermal_adjustment=bias.thermal_adjustment, preferences=preferences)
        return bias

    def recommend(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        """Return the recommendation envelope, or a ``needs_review`` payload on bad input."""

        with operation_context("agent:recommendation.recommend") as correlation_id:
            start = time.perf_counter()
            try:
                request = RecommendationRequest(**self._with_defaults(payload))
            except ValidationError as exc:
                failure = validation_failure("Invalid recommendation request", exc)
                log_event(
                    logger,
                    level=logging.WARNING,
                    event="recommendation_validation_failed",
                    correlation_id=correlation_id,
                    error_count=len(failure["details"]),
                    fields=[".".join(str(part) for part in detail["loc"]) for detail in failure["details"]],
                )
                return failure

            weather = WeatherSnapshot(
                temperature=request.temperature,
                humidity=request.humidity,
                wind_speed=request.wind_speed,
            )
            workout = WorkoutContext(intensity=request.workout_intensity, duration_minutes=request.workout_duration)
            bias = self.resolve_bias(request)

            recommendation = self._generate(weather, workout, bias)
            computation_time_ms = round((time.perf_counter() - start) * 1000, 3)

            response = RecommendationResponse(
                status="ok",
                items=recommendation.values(),
                item_labels=recommendation.labels(),
                outfit=convert_items_to_outfit(recommendation.items).to_dict(),
                effective_temperature=recommendation.effective_temperature,
                workout_intensity=workout.intensity,
                workout_duration=workout.duration_minutes,
                personalized=bias.is_personalized,
                thermal_adjustment=bias.thermal_adjustment,
                thermal_preferences=bias.preferences.to_dict() if bias.preferences else None,
                computation_time_ms=computation_time_ms,
                user_facing_summary=self._summarize(recommendation, workout),
                debug_summary=self._debug_summary(request, weather, bias, recommendation),
            ).model_dump(mode="json")

            log_event(
                logger,
                level=logging.INFO,
                event="recommendation_generated",
                correlation_id=correlation_id,
                user_id=request.user_id,
                effective_temperature=recommendation.effective_temperature,
                item_count=len(recommendation),
                personalized=bias.is_personalized,
                computation_time_ms=computation_time_ms,
            )
            return response

    @staticmethod
    def _summarize(recommendation: ClothingRecommendation, workout: WorkoutContext) -> str:
        labels = ", ".join(label.lower() for label in recommendation.labels())
        return (
            f"Feels like {recommendation.effective_temperature:.1f}°C for a {workout.duration_minutes} minute "
            f"{workout.intensity.value} ride. Wear: {labels}."
        )

    @staticmethod
    def _debug_summary(
        request: RecommendationRequest,
        weather: WeatherSnapshot,
        bias: PersonalizationBias,
        recommendation: ClothingRecommendation,
    ) -> Dict[str, Any]:
        breakdown = recommendation.breakdown
        return {
            "inputs": {
                "temperature": weather.temperature,
                "humidity": weather.humidity,
                "wind_speed": weather.wind_speed,
                "workout_intensity": request.workout_intensity.value,
                "workout_duration": request.workout_duration,
                "thermal_adjustment": bias.thermal_adjustment,
            },
            "adjusted_temperature": breakdown.baseline,
            "effective_temperature": breakdown.to_dict(),
            "adjustments_applied": [
                name
                for name, applied in (
                    ("bias", bias.is_personalized),
                    ("wind_chill", breakdown.wind_chill_applied),
                    ("heat_index", breakdown.heat_index_applied),
                    ("intensity", breakdown.intensity_offset != 0),
                    ("long_ride", breakdown.duration_offset != 0),
                )
                if applied
            ],
            "zones": {
                zone.value: [item.value for item in recommendation.for_zone(zone)] for zone in Zone
            },
        }


__all__ = ["RecommendationAgent"]
