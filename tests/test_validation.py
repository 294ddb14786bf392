"""Boundary schemas for recommendation requests."""

import math

import pytest
from pydantic import ValidationError

from logic.validation import RecommendationRequest, ThermalPreferencesPayload, validation_failure
from models.taxonomy import WorkoutIntensity


def _payload(**overrides) -> dict:
    payload = {"temperature": 10, "humidity": 60, "wind_speed": 12}
    payload.update(overrides)
    return payload


def test_request_defaults() -> None:
    request = RecommendationRequest(**_payload())
    assert request.workout_intensity is WorkoutIntensity.RECREATIONAL
    assert request.workout_duration == 60
    assert request.thermal_adjustment is None
    assert request.thermal_preferences is None


def test_legacy_intensity_label_is_accepted() -> None:
    request = RecommendationRequest(**_payload(workout_intensity="intensywny"))
    assert request.workout_intensity is WorkoutIntensity.INTENSIVE


@pytest.mark.parametrize(
    "overrides, field",
    [
        ({"humidity": 101}, "humidity"),
        ({"temperature": math.nan}, "temperature"),
        ({"temperature": 75}, "temperature"),
        ({"wind_speed": -1}, "wind_speed"),
        ({"workout_duration": 10}, "workout_duration"),
        ({"workout_duration": 301}, "workout_duration"),
        ({"workout_intensity": "sprint"}, "workout_intensity"),
        ({"thermal_adjustment": 11}, "thermal_adjustment"),
    ],
)
def test_out_of_range_values_are_rejected(overrides: dict, field: str) -> None:
    with pytest.raises(ValidationError) as excinfo:
        RecommendationRequest(**_payload(**overrides))
    assert excinfo.value.errors()[0]["loc"][0] == field


def test_legacy_feeling_is_mapped() -> None:
    preferences = ThermalPreferencesPayload(general_feeling="marzlak", cold_hands=True).to_preferences()
    assert preferences.general_feeling == "cold"
    assert preferences.cold_hands is True
    assert preferences.cap_threshold_temp == 10.0


def test_cap_threshold_is_bounded() -> None:
    with pytest.raises(ValidationError):
        ThermalPreferencesPayload(cap_threshold_temp=31)


def test_validation_failure_envelope() -> None:
    with pytest.raises(ValidationError) as excinfo:
        RecommendationRequest(**_payload(humidity=-5))

    failure = validation_failure("Invalid recommendation request", excinfo.value)
    assert failure["status"] == "needs_review"
    assert failure["message"] == "Invalid recommendation request"
    assert failure["details"][0]["loc"] == ["humidity"]
    assert failure["details"][0]["type"] == "greater_than_equal"
