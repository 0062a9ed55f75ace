"""Domain models for the meal, exercise and water logs."""

from dataclasses import dataclass, field
from enum import StrEnum

from visioncal.domain.nutrition import NutritionSample, make_sample


class MealSource(StrEnum):
    """How a meal was logged."""

    PHOTO = "photo"
    MANUAL = "manual"
    VOICE = "voice"
    BARCODE = "barcode"


class MealType(StrEnum):
    """Meal slot within a day."""

    BREAKFAST = "Breakfast"
    LUNCH = "Lunch"
    DINNER = "Dinner"
    SNACK = "Snack"


@dataclass(frozen=True)
class FoodItem:
    """A named food item detected within a meal."""

    name: str
    nutrition: NutritionSample = field(default_factory=make_sample)


@dataclass(frozen=True)
class Meal:
    """A single logged eating event.

    ``date`` is the raw ISO-8601 timestamp as stored; it is grouped by its
    date prefix and never converted between time zones.
    """

    id: str
    name: str
    nutrition: NutritionSample
    date: str
    source: MealSource
    meal_type: MealType = MealType.SNACK
    time: str = ""
    items: tuple[FoodItem, ...] = ()
    image_url: str | None = None


@dataclass(frozen=True)
class Exercise:
    """A logged activity."""

    id: str
    name: str
    duration_minutes: float
    calories_burned: float
    date: str


@dataclass(frozen=True)
class WaterLog:
    """A single hydration entry."""

    id: str
    amount_ml: float
    date: str
