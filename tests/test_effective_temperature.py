"""Felt temperature: wind chill, heat index, effort and ride length offsets."""

import pytest

from logic.effective_temperature import (
    compute_effective_temperature,
    explain_effective_temperature,
    round_half_up,
    wind_chill,
    wind_chill_applies,
)
from models.inputs import WeatherSnapshot, WorkoutContext
from models.taxonomy import WorkoutIntensity


def _effective(
    temperature: float,
    humidity: int = 40,
    wind_speed: float = 0,
    intensity: WorkoutIntensity = WorkoutIntensity.RECREATIONAL,
    duration: int = 60,
) -> float:
    return compute_effective_temperature(
        WeatherSnapshot(temperature=temperature, humidity=humidity, wind_speed=wind_speed),
        WorkoutContext(intensity=intensity, duration_minutes=duration),
    )


@pytest.mark.parametrize("temperature", [-10, 0, 7, 14])
def test_light_wind_never_chills(temperature: float) -> None:
    assert _effective(temperature, wind_speed=4.9) == temperature


def test_linear_wind_chill_above_freezing() -> None:
    assert _effective(10, humidity=50, wind_speed=5) == 8.5


def test_wind_chill_starts_strictly_below_fifteen() -> None:
    assert _effective(15, humidity=60, wind_speed=5) == 15.0
    assert _effective(15, wind_speed=40) == 15.0
    assert wind_chill_applies(WeatherSnapshot(temperature=14.9, humidity=40, wind_speed=5))


def test_sub_zero_uses_wind_chill_index() -> None:
    assert wind_chill(-5, 15) == pytest.approx(-6.765, abs=0.01)
    assert wind_chill(-10, 20) == pytest.approx(-13.27, abs=0.01)
    assert _effective(-5, humidity=70, wind_speed=15, duration=90) == -6.8


def test_index_at_freezing_reads_warmer_than_the_raw_temperature() -> None:
    # The index branch covers T <= 0 and is not continuous with the linear branch.
    assert wind_chill(0, 5) == pytest.approx(1.14, abs=0.01)


def test_heat_index_needs_warmth_and_humidity() -> None:
    assert _effective(28, humidity=50, wind_speed=5) == 30.0
    assert _effective(18, humidity=50) == 20.0
    assert _effective(18, humidity=49) == 18.0
    assert _effective(17.9, humidity=90) == 17.9


@pytest.mark.parametrize(
    "intensity, expected",
    [
        (WorkoutIntensity.RECREATIONAL, 20.0),
        (WorkoutIntensity.TEMPO, 21.0),
        (WorkoutIntensity.INTENSIVE, 22.0),
        (WorkoutIntensity.ENDURANCE, 20.0),
    ],
)
def test_intensity_offsets(intensity: WorkoutIntensity, expected: float) -> None:
    assert _effective(20, intensity=intensity) == expected


def test_long_ride_offset_from_two_hours() -> None:
    assert _effective(20, duration=119) == 20.0
    assert _effective(20, duration=120) == 20.5
    assert _effective(10, humidity=50, wind_speed=5, duration=150) == 9.0


def test_round_half_up() -> None:
    assert round_half_up(8.25) == 8.3
    assert round_half_up(-6.75) == -6.7
    assert round_half_up(3.0) == 3.0


def test_breakdown_keeps_each_stage() -> None:
    breakdown = explain_effective_temperature(
        WeatherSnapshot(temperature=-5, humidity=70, wind_speed=15),
        WorkoutContext(intensity=WorkoutIntensity.TEMPO, duration_minutes=150),
    )

    assert breakdown.baseline == -5.0
    assert breakdown.wind_chill_applied is True
    assert breakdown.heat_index_applied is False
    assert breakdown.after_wind_chill == pytest.approx(-6.765, abs=0.01)
    assert breakdown.after_heat_index == breakdown.after_wind_chill
    assert breakdown.intensity_offset == 1
    assert breakdown.duration_offset == 0.5
    assert breakdown.value == -5.3
    assert breakdown.to_dict()["value"] == breakdown.value
