"""Shared test fixtures."""

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from datetime import date, timedelta
from uuid import UUID

import pytest

from visioncal.config import Settings
from visioncal.containers import AppContainer
from visioncal.domain.logs import Exercise, Meal, MealSource, MealType, WaterLog
from visioncal.domain.models import UserData
from visioncal.domain.nutrition import make_sample
from visioncal.services.achievements import AchievementService
from visioncal.services.progress import ProgressService
from visioncal.services.users import UserStore

TODAY = date(2024, 6, 15)


def make_meal(  # noqa: PLR0913
    day: date | str,
    *,
    name: str = "Oatmeal",
    source: MealSource = MealSource.MANUAL,
    meal_type: MealType = MealType.BREAKFAST,
    nutrition: Mapping[str, object] | None = None,
    meal_id: str | None = None,
) -> Meal:
    """Build a meal logged at 08:30 on the given day."""
    stamp = day if isinstance(day, str) else f"{day.isoformat()}T08:30:00.000Z"
    return Meal(
        id=meal_id or f"meal-{stamp}-{name}",
        name=name,
        nutrition=make_sample(
            nutrition or {"calories": 400, "protein": 20, "carbs": 50, "fat": 10}
        ),
        date=stamp,
        source=source,
        meal_type=meal_type,
        time="08:30",
    )


def days_before(today: date, *offsets: int) -> list[date]:
    return [today - timedelta(days=offset) for offset in offsets]


def make_water(day: date, amount_ml: float) -> WaterLog:
    return WaterLog(
        id=f"water-{day.isoformat()}-{amount_ml}",
        amount_ml=amount_ml,
        date=f"{day.isoformat()}T12:00:00.000Z",
    )


def make_exercise(day: date, calories: float) -> Exercise:
    return Exercise(
        id=f"exercise-{day.isoformat()}",
        name="Running",
        duration_minutes=30,
        calories_burned=calories,
        date=f"{day.isoformat()}T18:00:00.000Z",
    )


@dataclass
class InMemoryUserStore(UserStore):
    """In-memory user store for tests."""

    users: dict[UUID, UserData] = field(default_factory=dict)
    saved: list[tuple[UUID, list[str]]] = field(default_factory=list)

    def load_user_data(self, user_id: UUID) -> UserData:
        return self.users.get(user_id, UserData())

    def save_unlocked_achievements(
        self, user_id: UUID, achievement_ids: list[str]
    ) -> None:
        self.saved.append((user_id, list(achievement_ids)))
        current = self.users.get(user_id, UserData())
        self.users[user_id] = replace(
            current, unlocked_achievements=frozenset(achievement_ids)
        )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        api_token="api-token",
    )


@pytest.fixture
def user_store() -> InMemoryUserStore:
    return InMemoryUserStore()


@pytest.fixture
def container(settings: Settings, user_store: InMemoryUserStore) -> AppContainer:
    return AppContainer(
        settings=settings,
        user_store=user_store,
        achievement_service=AchievementService(user_store),
        progress_service=ProgressService(user_store),
    )
