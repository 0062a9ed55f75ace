"""Logging streak calculations."""

from collections.abc import Iterable, Sequence
from datetime import date

from visioncal.domain.logs import Meal
from visioncal.services.aggregation import day_key

STREAK_MILESTONES = (3, 7, 14, 30, 50, 100)


def days_between(earlier: str, later: str) -> int:
    """Return the whole-day difference between two day keys."""
    return (date.fromisoformat(later) - date.fromisoformat(earlier)).days


def logged_days(meals: Iterable[Meal]) -> list[str]:
    """Return distinct valid day keys, most recent first."""
    keys = {key for key in (day_key(meal.date) for meal in meals) if key is not None}
    return sorted(keys, reverse=True)


def current_streak(meals: Iterable[Meal], today: date) -> int:
    """Return the run of consecutive logged days ending today or yesterday.

    A streak survives one day without a log: if the last meal was yesterday
    the run is still reported, and it only resets after a full skipped day.
    """
    days = logged_days(meals)
    if not days:
        return 0
    if days_between(days[0], today.isoformat()) > 1:
        return 0

    streak = 1
    for newer, older in zip(days, days[1:], strict=False):
        if days_between(older, newer) != 1:
            break
        streak += 1
    return streak


def longest_streak(day_keys: Iterable[str]) -> int:
    """Return the longest run of consecutive days anywhere in history."""
    days = sorted(set(day_keys))
    if not days:
        return 0

    best = 1
    run = 1
    for previous, current in zip(days, days[1:], strict=False):
        if days_between(previous, current) == 1:
            run += 1
        else:
            run = 1
        best = max(best, run)
    return best


def streak_milestone(
    streak: int, milestones: Sequence[int] = STREAK_MILESTONES
) -> int | None:
    """Return the milestone reached exactly by this streak, if any."""
    if streak <= 0:
        return None
    return streak if streak in milestones else None
