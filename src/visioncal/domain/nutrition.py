"""Nutrition sample models and helpers."""

from collections.abc import Mapping
from types import MappingProxyType

NutritionSample = Mapping[str, float]

CORE_MACROS = ("calories", "protein", "carbs", "fat")

NUTRIENT_KEYS = (
    *CORE_MACROS,
    "water",
    "fiber",
    "sugar",
    "sodium",
    "potassium",
    "cholesterol",
    "saturatedFat",
    "transFat",
    "calcium",
    "iron",
    "zinc",
    "magnesium",
    "phosphorus",
    "manganese",
    "copper",
    "selenium",
    "iodine",
    "vitaminA",
    "vitaminC",
    "vitaminD",
    "vitaminE",
    "vitaminK",
    "vitaminB1",
    "vitaminB2",
    "vitaminB3",
    "vitaminB5",
    "vitaminB6",
    "vitaminB7",
    "vitaminB9",
    "vitaminB12",
)

WATER_GOAL_KEY = "waterGoal"


def coerce_amount(value: object) -> float:
    """Return a numeric amount, treating anything non-numeric as 0."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        return 0.0
    if value != value:  # NaN
        return 0.0
    return float(value)


def make_sample(raw: Mapping[str, object] | None = None) -> NutritionSample:
    """Build a read-only nutrition sample from raw nutrient values.

    Keys whose values are not numbers are dropped so that they contribute 0
    when summed.
    """
    values: dict[str, float] = {}
    for key, value in (raw or {}).items():
        if isinstance(value, bool) or not isinstance(value, int | float):
            continue
        values[str(key)] = coerce_amount(value)
    return MappingProxyType(values)


def nutrient(sample: Mapping[str, object], key: str) -> float:
    """Return a nutrient amount, 0 when absent or malformed."""
    return coerce_amount(sample.get(key))


def goal_value(goal: Mapping[str, object], key: str) -> float | None:
    """Return a goal target, or None when the goal is not set."""
    value = goal.get(key)
    if isinstance(value, bool) or not isinstance(value, int | float):
        return None
    if value != value:  # NaN
        return None
    return float(value)


DEFAULT_DAILY_GOAL: NutritionSample = make_sample(
    {
        "calories": 2000,
        "protein": 150,
        "carbs": 200,
        "fat": 70,
        WATER_GOAL_KEY: 3000,
        "fiber": 30,
        "sugar": 25,
        "sodium": 2300,
        "potassium": 3500,
        "cholesterol": 300,
        "saturatedFat": 20,
        "transFat": 0,
        "calcium": 1000,
        "iron": 18,
        "vitaminA": 900,
        "vitaminC": 90,
        "vitaminD": 20,
    }
)
