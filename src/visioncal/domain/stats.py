"""Domain models for derived statistics."""

from dataclasses import dataclass

from visioncal.domain.nutrition import NutritionSample


@dataclass(frozen=True)
class AchievementStats:
    """Statistics computed once per evaluation and shared by every rule."""

    meal_count: int
    sources_used: frozenset[str]
    unique_meal_name_count: int
    photo_log_count: int
    max_streak_ever: int
    calorie_goal_hit_count: int
    iron_goal_hit: bool
    vitamin_c_goal_hit: bool
    protein_powerhouse_day: bool
    water_goal_hit: bool
    macro_master_day: bool


@dataclass(frozen=True)
class DailyProgress:
    """Today's derived state for a user."""

    day: str
    nutrition: NutritionSample
    daily_goal: NutritionSample
    water_intake_ml: float
    calories_burned: float
    current_streak: int
    streak_milestone: int | None
    unlocked_count: int
    total_achievements: int
