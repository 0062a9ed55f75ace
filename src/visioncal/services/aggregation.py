"""Per-day aggregation of meal, water and exercise logs."""

import logging
from collections.abc import Iterable
from datetime import date

from visioncal.domain.logs import Exercise, Meal, WaterLog
from visioncal.domain.nutrition import (
    CORE_MACROS,
    NutritionSample,
    coerce_amount,
    make_sample,
)

DAY_KEY_LENGTH = 10

_logger = logging.getLogger(__name__)


def day_key(timestamp: str) -> str | None:
    """Return the calendar-date prefix of an ISO-8601 timestamp.

    The prefix is taken as written, so a timestamp stored in local time groups
    under its local date. Returns None when the prefix is not a valid date.
    """
    if not isinstance(timestamp, str) or len(timestamp) < DAY_KEY_LENGTH:
        return None
    prefix = timestamp[:DAY_KEY_LENGTH]
    if prefix[4] != "-" or prefix[7] != "-":
        return None
    try:
        date.fromisoformat(prefix)
    except ValueError:
        return None
    if len(timestamp) > DAY_KEY_LENGTH and timestamp[DAY_KEY_LENGTH] in "0123456789":
        return None
    return prefix


def aggregate_by_day(meals: Iterable[Meal]) -> dict[str, NutritionSample]:
    """Sum meal nutrition into per-day totals keyed by day key."""
    totals: dict[str, dict[str, float]] = {}
    for meal in meals:
        key = day_key(meal.date)
        if key is None:
            _logger.debug("Skipping meal with unparsable date: id=%s", meal.id)
            continue
        day_totals = totals.setdefault(key, dict.fromkeys(CORE_MACROS, 0.0))
        for name, amount in meal.nutrition.items():
            day_totals[name] = day_totals.get(name, 0.0) + coerce_amount(amount)
    return {key: make_sample(values) for key, values in totals.items()}


def water_by_day(water_logs: Iterable[WaterLog]) -> dict[str, float]:
    """Sum water intake in milliliters per day."""
    totals: dict[str, float] = {}
    for log in water_logs:
        key = day_key(log.date)
        if key is None:
            _logger.debug("Skipping water log with unparsable date: id=%s", log.id)
            continue
        totals[key] = totals.get(key, 0.0) + coerce_amount(log.amount_ml)
    return totals


def calories_burned_by_day(exercises: Iterable[Exercise]) -> dict[str, float]:
    """Sum calories burned per day."""
    totals: dict[str, float] = {}
    for exercise in exercises:
        key = day_key(exercise.date)
        if key is None:
            _logger.debug("Skipping exercise with unparsable date: id=%s", exercise.id)
            continue
        totals[key] = totals.get(key, 0.0) + coerce_amount(exercise.calories_burned)
    return totals


def totals_for_day(meals: Iterable[Meal], day: str) -> NutritionSample:
    """Return nutrition totals for one day, core macros always present."""
    by_day = aggregate_by_day(meal for meal in meals if day_key(meal.date) == day)
    return by_day.get(day, make_sample(dict.fromkeys(CORE_MACROS, 0.0)))
