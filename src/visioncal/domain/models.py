"""Domain models for per-user state."""

from dataclasses import dataclass, field

from visioncal.domain.logs import Exercise, Meal, WaterLog
from visioncal.domain.nutrition import DEFAULT_DAILY_GOAL, NutritionSample


@dataclass(frozen=True)
class UserData:
    """Event log, goals and unlocked achievements for a single user."""

    meals: tuple[Meal, ...] = ()
    exercises: tuple[Exercise, ...] = ()
    water_logs: tuple[WaterLog, ...] = ()
    daily_goal: NutritionSample = field(default_factory=lambda: DEFAULT_DAILY_GOAL)
    unlocked_achievements: frozenset[str] = frozenset()
