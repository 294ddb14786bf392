"""End to end recommendations from the assembler, including bias handling."""

from itertools import product

import pytest

from logic.assembler import generate_recommendation
from models.inputs import PersonalizationBias, WeatherSnapshot, WorkoutContext
from models.taxonomy import ClothingItem as C
from models.taxonomy import WorkoutIntensity, Zone

REC = WorkoutIntensity.RECREATIONAL


def _recommend(
    temperature: float,
    humidity: int,
    wind: float,
    intensity: WorkoutIntensity = REC,
    duration: int = 60,
    adjustment: float = 0.0,
):
    return generate_recommendation(
        WeatherSnapshot(temperature=temperature, humidity=humidity, wind_speed=wind),
        WorkoutContext(intensity=intensity, duration_minutes=duration),
        PersonalizationBias(thermal_adjustment=adjustment),
    )


def test_freezing_windy_ride() -> None:
    recommendation = _recommend(-5, 70, 15, duration=90)

    assert recommendation.effective_temperature == -6.8
    assert recommendation.items == (
        C.HELMET,
        C.THERMAL_BASE_LAYER,
        C.SWEATSHIRT,
        C.WINTER_JACKET,
        C.LONG_PANTS,
        C.ARM_WARMERS,
        C.CAP,
        C.WINTER_GLOVES,
        C.NECK_GAITER,
        C.WINTER_SOCKS,
        C.SHOE_COVERS,
    )
    assert C.SHORTS not in recommendation


def test_humid_summer_hour() -> None:
    recommendation = _recommend(28, 50, 5)

    assert recommendation.effective_temperature == 30.0
    assert recommendation.items == (C.HELMET, C.CYCLING_JERSEY, C.SHORTS, C.CAP, C.SUMMER_GLOVES, C.SUMMER_SOCKS)
    assert recommendation.for_zone(Zone.TORSO) == (C.CYCLING_JERSEY,)
    assert C.SHOE_COVERS not in recommendation


def test_fifteen_degrees_is_still_long_pants() -> None:
    recommendation = _recommend(15, 60, 5)

    assert recommendation.effective_temperature == 15.0
    assert recommendation.for_zone(Zone.LEGS) == (C.LONG_PANTS,)
    assert recommendation.items == (C.HELMET, C.CYCLING_JERSEY, C.LONG_PANTS, C.CAP, C.SUMMER_GLOVES, C.SUMMER_SOCKS)


def test_colder_bias_never_dresses_lighter() -> None:
    warm = _recommend(8, 60, 10, duration=90, adjustment=3)
    cold = _recommend(8, 60, 10, duration=90, adjustment=-3)

    assert warm.effective_temperature == 8.0
    assert cold.effective_temperature == 2.0
    assert C.WINTER_JACKET in cold and C.WINTER_JACKET not in warm
    assert C.WINTER_GLOVES in cold and C.TRANSITIONAL_GLOVES in warm
    for zone in Zone:
        assert len(cold.for_zone(zone)) >= len(warm.for_zone(zone))


def test_bias_shifts_raw_temperature_gates() -> None:
    plain = _recommend(24, 40, 0, duration=200)
    shifted = _recommend(24, 40, 0, duration=200, adjustment=1)

    assert plain.breakdown.baseline == 24.0
    assert shifted.breakdown.baseline == 25.0
    assert plain.for_zone(Zone.TORSO) == (C.CYCLING_JERSEY,)
    assert shifted.for_zone(Zone.TORSO) == (C.THERMAL_BASE_LAYER, C.SWEATSHIRT)
    assert plain.for_zone(Zone.LEGS) == (C.LONG_PANTS,)
    assert shifted.for_zone(Zone.LEGS) == (C.SHORTS,)


def test_missing_bias_is_neutral() -> None:
    weather = WeatherSnapshot(temperature=10, humidity=50, wind_speed=5)
    workout = WorkoutContext(intensity=REC, duration_minutes=60)

    assert generate_recommendation(weather, workout) == generate_recommendation(
        weather, workout, PersonalizationBias(thermal_adjustment=0.0)
    )


def test_identical_inputs_give_identical_output() -> None:
    first = _recommend(3, 90, 12, WorkoutIntensity.TEMPO, 150)
    second = _recommend(3, 90, 12, WorkoutIntensity.TEMPO, 150)

    assert first == second
    assert first.values() == second.values()


def test_helmet_leads_every_recommendation() -> None:
    grid = product(
        [-25, -2, 0, 0.5, 6, 12, 15, 18, 22, 35],
        [0, 50, 95],
        [0, 5, 18, 40],
        list(WorkoutIntensity),
        [15, 90, 200, 300],
        [-5, 0, 5],
    )
    for temperature, humidity, wind, intensity, duration, adjustment in grid:
        recommendation = _recommend(temperature, humidity, wind, intensity, duration, adjustment)
        assert recommendation.items[0] is C.HELMET
        assert recommendation.items.count(C.HELMET) == 1
        assert len(recommendation.for_zone(Zone.HANDS)) == 1
        assert len(recommendation.for_zone(Zone.FEET)) in (1, 2)
        assert not (C.LONG_PANTS in recommendation and C.LEG_WARMERS in recommendation)


@pytest.mark.parametrize("duration", [60, 120])
def test_breakdown_matches_reported_value(duration: int) -> None:
    recommendation = _recommend(10, 50, 5, duration=duration)
    assert recommendation.breakdown.value == recommendation.effective_temperature
    assert recommendation.breakdown.wind_chill_applied is True
