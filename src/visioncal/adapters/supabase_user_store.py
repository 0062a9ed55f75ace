"""Supabase repository for per-user app state."""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TypeVar
from uuid import UUID

from supabase import Client

from visioncal.domain.logs import (
    Exercise,
    FoodItem,
    Meal,
    MealSource,
    MealType,
    WaterLog,
)
from visioncal.domain.models import UserData
from visioncal.domain.nutrition import DEFAULT_DAILY_GOAL, coerce_amount, make_sample
from visioncal.services.users import UserStore

_logger = logging.getLogger(__name__)

T = TypeVar("T")

_USER_DATA_COLUMNS = (
    "id, meals, exercises, water_logs, daily_goal, unlocked_achievements"
)


@dataclass
class SupabaseUserStore(UserStore):
    """Supabase implementation backed by a single JSON row per user."""

    client: Client
    table: str = "users"

    def load_user_data(self, user_id: UUID) -> UserData:
        """Return the user's event log, goal and unlocked achievements."""
        response = (
            self.client.table(self.table)
            .select(_USER_DATA_COLUMNS)
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return UserData()
        return _parse_user_data(response.data[0])

    def save_unlocked_achievements(
        self, user_id: UUID, achievement_ids: list[str]
    ) -> None:
        """Replace the stored unlocked achievement ids, creating the row if needed."""
        self.client.table(self.table).upsert(
            {"id": str(user_id), "unlocked_achievements": list(achievement_ids)}
        ).execute()


def _parse_user_data(row: Mapping[str, object]) -> UserData:
    raw_goal = row.get("daily_goal")
    unlocked = row.get("unlocked_achievements")
    return UserData(
        meals=_parse_records(row.get("meals"), _parse_meal),
        exercises=_parse_records(row.get("exercises"), _parse_exercise),
        water_logs=_parse_records(row.get("water_logs"), _parse_water_log),
        daily_goal=make_sample(raw_goal)
        if isinstance(raw_goal, dict) and raw_goal
        else DEFAULT_DAILY_GOAL,
        unlocked_achievements=frozenset(
            item for item in unlocked if isinstance(item, str)
        )
        if isinstance(unlocked, list)
        else frozenset(),
    )


def _parse_records(
    raw: object, parser: Callable[[Mapping[str, object]], T]
) -> tuple[T, ...]:
    if not isinstance(raw, list):
        return ()
    records = []
    for entry in raw:
        if not isinstance(entry, dict):
            _logger.warning("Skipping non-object record in user data")
            continue
        try:
            records.append(parser(entry))
        except (KeyError, TypeError, ValueError):
            _logger.warning(
                "Skipping malformed record: id=%s", entry.get("id"), exc_info=True
            )
    return tuple(records)


def _parse_meal(entry: Mapping[str, object]) -> Meal:
    raw_type = entry.get("mealType")
    try:
        meal_type = MealType(raw_type)
    except ValueError:
        meal_type = MealType.SNACK
    raw_items = entry.get("items")
    items = tuple(
        FoodItem(name=str(item.get("name", "")), nutrition=make_sample(item))
        for item in (raw_items if isinstance(raw_items, list) else [])
        if isinstance(item, dict)
    )
    raw_nutrition = entry.get("nutrition")
    if not isinstance(raw_nutrition, dict):
        raw_nutrition = {}
    image_url = entry.get("imageUrl")
    return Meal(
        id=_record_id(entry),
        name=str(entry.get("name", "")),
        nutrition=make_sample(raw_nutrition),
        date=str(entry.get("date", "")),
        source=MealSource(entry["source"]),
        meal_type=meal_type,
        time=str(entry.get("time", "")),
        items=items,
        image_url=image_url if isinstance(image_url, str) else None,
    )


def _parse_exercise(entry: Mapping[str, object]) -> Exercise:
    return Exercise(
        id=_record_id(entry),
        name=str(entry.get("name", "")),
        duration_minutes=coerce_amount(entry.get("durationMinutes")),
        calories_burned=coerce_amount(entry.get("caloriesBurned")),
        date=str(entry.get("date", "")),
    )


def _parse_water_log(entry: Mapping[str, object]) -> WaterLog:
    return WaterLog(
        id=_record_id(entry),
        amount_ml=coerce_amount(entry.get("amount")),
        date=str(entry.get("date", "")),
    )


def _record_id(entry: Mapping[str, object]) -> str:
    value = entry.get("id")
    if not isinstance(value, str) or not value:
        raise ValueError("Record id must be a non-empty string")
    return value
