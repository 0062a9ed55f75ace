"""Achievement evaluation over a user's event log."""

import logging
import math
from collections.abc import Callable, Iterable, Mapping, Sequence, Set
from dataclasses import dataclass
from types import MappingProxyType
from uuid import UUID

from visioncal.domain.achievements import Achievement, AchievementStatus
from visioncal.domain.logs import Exercise, Meal, MealSource, WaterLog
from visioncal.domain.nutrition import (
    WATER_GOAL_KEY,
    NutritionSample,
    goal_value,
    nutrient,
)
from visioncal.domain.stats import AchievementStats
from visioncal.services.aggregation import aggregate_by_day, water_by_day
from visioncal.services.catalog import ACHIEVEMENT_CATALOG, catalog_order
from visioncal.services.streaks import longest_streak
from visioncal.services.users import UserStore

GOAL_TOLERANCE_PERCENT = 10
PROTEIN_POWERHOUSE_GRAMS = 100
MACRO_KEYS = ("protein", "carbs", "fat")

_logger = logging.getLogger(__name__)


def is_within_percentage(value: float, target: float, percent: float) -> bool:
    """Return True when value deviates from target by at most percent."""
    if target == 0:
        return value == 0
    deviation = abs(value - target) / target
    limit = percent / 100
    return deviation <= limit or math.isclose(deviation, limit)


def _reaches(value: float, target: float | None) -> bool:
    return target is not None and value >= target


def _near_goal(value: float, target: float | None) -> bool:
    return target is not None and is_within_percentage(
        value, target, GOAL_TOLERANCE_PERCENT
    )


def compute_stats(
    meals: Sequence[Meal],
    water_logs: Iterable[WaterLog],
    daily_goal: Mapping[str, object],
) -> AchievementStats:
    """Derive every statistic the rule table needs in a single pass."""
    meals_by_day = aggregate_by_day(meals)
    water_logged = water_by_day(water_logs)
    sources = frozenset(str(meal.source) for meal in meals)

    calorie_goal = goal_value(daily_goal, "calories")
    iron_goal = goal_value(daily_goal, "iron")
    vitamin_c_goal = goal_value(daily_goal, "vitaminC")
    water_goal = goal_value(daily_goal, WATER_GOAL_KEY)
    macro_goals = [goal_value(daily_goal, key) for key in MACRO_KEYS]

    calorie_goal_hits = 0
    iron_hit = vitamin_c_hit = protein_day = macro_day = False
    for totals in meals_by_day.values():
        if _near_goal(nutrient(totals, "calories"), calorie_goal):
            calorie_goal_hits += 1
        iron_hit = iron_hit or _reaches(nutrient(totals, "iron"), iron_goal)
        vitamin_c_hit = vitamin_c_hit or _reaches(
            nutrient(totals, "vitaminC"), vitamin_c_goal
        )
        protein_day = protein_day or (
            nutrient(totals, "protein") >= PROTEIN_POWERHOUSE_GRAMS
        )
        macro_day = macro_day or all(
            _near_goal(nutrient(totals, key), goal)
            for key, goal in zip(MACRO_KEYS, macro_goals, strict=True)
        )

    water_days = set(meals_by_day) | set(water_logged)
    water_hit = any(
        _reaches(_water_total(meals_by_day.get(day), water_logged.get(day)), water_goal)
        for day in water_days
    )

    return AchievementStats(
        meal_count=len(meals),
        sources_used=sources,
        unique_meal_name_count=len({meal.name.strip().lower() for meal in meals}),
        photo_log_count=sum(1 for meal in meals if meal.source == MealSource.PHOTO),
        max_streak_ever=longest_streak(meals_by_day),
        calorie_goal_hit_count=calorie_goal_hits,
        iron_goal_hit=iron_hit,
        vitamin_c_goal_hit=vitamin_c_hit,
        protein_powerhouse_day=protein_day,
        water_goal_hit=water_hit,
        macro_master_day=macro_day,
    )


def _water_total(totals: NutritionSample | None, logged_ml: float | None) -> float:
    from_meals = nutrient(totals, "water") if totals is not None else 0.0
    return from_meals + (logged_ml or 0.0)


def _used(*sources: MealSource) -> Callable[[AchievementStats], bool]:
    return lambda stats: all(source in stats.sources_used for source in sources)


ACHIEVEMENT_RULES: Mapping[str, Callable[[AchievementStats], bool]] = MappingProxyType(
    {
        # Milestone
        "first_log": lambda stats: stats.meal_count >= 1,
        "culinary_explorer_5": lambda stats: stats.unique_meal_name_count >= 5,
        # Logging
        "photogenic": _used(MealSource.PHOTO),
        "sharp_shooter_10": lambda stats: stats.photo_log_count >= 10,
        "good_listener": _used(MealSource.VOICE),
        "scanner": _used(MealSource.BARCODE),
        "trifecta": _used(MealSource.PHOTO, MealSource.VOICE, MealSource.BARCODE),
        # Consistency
        "streak_3": lambda stats: stats.max_streak_ever >= 3,
        "streak_7": lambda stats: stats.max_streak_ever >= 7,
        "streak_30": lambda stats: stats.max_streak_ever >= 30,
        # Hydration
        "hydration_hero_1": lambda stats: stats.water_goal_hit,
        # Nutrition
        "goal_crusher_3": lambda stats: stats.calorie_goal_hit_count >= 3,
        "protein_powerhouse": lambda stats: stats.protein_powerhouse_day,
        "iron_clad": lambda stats: stats.iron_goal_hit,
        "vitamin_c_victor": lambda stats: stats.vitamin_c_goal_hit,
        "macro_master": lambda stats: stats.macro_master_day,
    }
)

if set(ACHIEVEMENT_RULES) != {achievement.id for achievement in ACHIEVEMENT_CATALOG}:
    raise RuntimeError("Achievement rules do not match the achievement catalog")


def evaluate(  # noqa: PLR0913
    meals: Sequence[Meal],
    exercises: Sequence[Exercise],
    water_logs: Sequence[WaterLog],
    daily_goal: Mapping[str, object],
    unlocked: Set[str],
) -> list[Achievement]:
    """Return newly qualifying achievements in catalog order.

    Exercises are accepted so callers can pass the whole event log; no
    current rule depends on them. ``unlocked`` is never modified.
    """
    if not meals:
        return []
    stats = compute_stats(meals, water_logs, daily_goal)
    return [
        achievement
        for achievement in ACHIEVEMENT_CATALOG
        if achievement.id not in unlocked and ACHIEVEMENT_RULES[achievement.id](stats)
    ]


@dataclass
class AchievementService:
    """Service that evaluates and persists achievement unlocks."""

    store: UserStore

    def check_achievements(self, user_id: UUID) -> list[Achievement]:
        """Evaluate a user's log and persist any newly unlocked achievements."""
        data = self.store.load_user_data(user_id)
        newly_unlocked = evaluate(
            data.meals,
            data.exercises,
            data.water_logs,
            data.daily_goal,
            data.unlocked_achievements,
        )
        if not newly_unlocked:
            return []

        merged = set(data.unlocked_achievements)
        merged.update(achievement.id for achievement in newly_unlocked)
        self.store.save_unlocked_achievements(
            user_id, sorted(merged, key=lambda item: (catalog_order(item), item))
        )
        for achievement in newly_unlocked:
            _logger.info(
                "Achievement unlocked: user_id=%s achievement=%s",
                user_id,
                achievement.id,
            )
        return newly_unlocked

    def list_achievements(self, user_id: UUID) -> list[AchievementStatus]:
        """Return the full catalog with the user's unlock state."""
        unlocked = self.store.load_user_data(user_id).unlocked_achievements
        return [
            AchievementStatus(
                achievement=achievement, unlocked=achievement.id in unlocked
            )
            for achievement in ACHIEVEMENT_CATALOG
        ]
