"""Tests for daily aggregation."""

from datetime import date

from visioncal.services.aggregation import (
    aggregate_by_day,
    calories_burned_by_day,
    day_key,
    totals_for_day,
    water_by_day,
)
from tests.conftest import make_exercise, make_meal, make_water


def test_day_key_truncates_without_timezone_conversion() -> None:
    assert day_key("2024-06-15T23:59:00-07:00") == "2024-06-15"
    assert day_key("2024-06-15T00:10:00.000Z") == "2024-06-15"
    assert day_key("2024-06-15") == "2024-06-15"


def test_day_key_rejects_malformed_timestamps() -> None:
    assert day_key("") is None
    assert day_key("not-a-date") is None
    assert day_key("2024-13-01T10:00:00Z") is None
    assert day_key("15/06/2024 10:00") is None


def test_aggregate_by_day_sums_nutrients_per_day() -> None:
    meals = [
        make_meal("2024-06-15T08:00:00Z", nutrition={"calories": 300, "iron": 4}),
        make_meal("2024-06-15T19:00:00Z", name="Steak", nutrition={"calories": 700}),
        make_meal("2024-06-14T12:00:00Z", nutrition={"calories": 500, "protein": 30}),
    ]

    totals = aggregate_by_day(meals)

    assert set(totals) == {"2024-06-15", "2024-06-14"}
    assert totals["2024-06-15"]["calories"] == 1000
    assert totals["2024-06-15"]["iron"] == 4
    assert totals["2024-06-15"]["protein"] == 0
    assert totals["2024-06-14"]["protein"] == 30


def test_aggregate_by_day_is_order_independent() -> None:
    meals = [
        make_meal("2024-06-15T08:00:00Z", name="A", nutrition={"calories": 120.5}),
        make_meal("2024-06-16T08:00:00Z", name="B", nutrition={"calories": 80}),
        make_meal("2024-06-15T09:00:00Z", name="C", nutrition={"calories": 79.5}),
    ]

    forward = aggregate_by_day(meals)
    backward = aggregate_by_day(list(reversed(meals)))

    assert forward == backward
    assert forward["2024-06-15"]["calories"] == 200


def test_aggregate_by_day_skips_bad_dates_and_values() -> None:
    meals = [
        make_meal("garbage", nutrition={"calories": 900}),
        make_meal("2024-06-15T08:00:00Z", nutrition={"calories": 250, "fat": "lots"}),
    ]

    totals = aggregate_by_day(meals)

    assert list(totals) == ["2024-06-15"]
    assert totals["2024-06-15"]["calories"] == 250
    assert totals["2024-06-15"]["fat"] == 0


def test_aggregate_by_day_empty_input() -> None:
    assert aggregate_by_day([]) == {}


def test_water_and_exercise_summaries() -> None:
    day = date(2024, 6, 15)
    water = [make_water(day, 500), make_water(day, 750.5)]
    exercises = [make_exercise(day, 320)]

    assert water_by_day(water) == {"2024-06-15": 1250.5}
    assert calories_burned_by_day(exercises) == {"2024-06-15": 320}


def test_totals_for_day_defaults_to_zero_macros() -> None:
    totals = totals_for_day([make_meal("2024-06-14T08:00:00Z")], "2024-06-15")

    assert dict(totals) == {"calories": 0, "protein": 0, "carbs": 0, "fat": 0}
