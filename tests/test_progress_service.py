"""Tests for the progress service."""

from uuid import uuid4

from visioncal.domain.models import UserData
from visioncal.domain.nutrition import DEFAULT_DAILY_GOAL
from visioncal.services.progress import ProgressService
from tests.conftest import (
    TODAY,
    InMemoryUserStore,
    days_before,
    make_exercise,
    make_meal,
    make_water,
)


def test_get_progress_summarizes_today() -> None:
    user_id = uuid4()
    store = InMemoryUserStore()
    yesterday = days_before(TODAY, 1)[0]
    store.users[user_id] = UserData(
        meals=(
            make_meal(TODAY, nutrition={"calories": 500, "protein": 30}),
            make_meal(TODAY, name="Soup", nutrition={"calories": 250, "fiber": 6}),
            make_meal(yesterday, nutrition={"calories": 900}),
            make_meal(days_before(TODAY, 2)[0]),
        ),
        exercises=(make_exercise(TODAY, 300), make_exercise(yesterday, 120)),
        water_logs=(make_water(TODAY, 250), make_water(TODAY, 500)),
        unlocked_achievements=frozenset({"first_log", "retired_badge"}),
    )
    service = ProgressService(store)

    progress = service.get_progress(user_id, today=TODAY)

    assert progress.day == "2024-06-15"
    assert progress.nutrition["calories"] == 750
    assert progress.nutrition["fiber"] == 6
    assert progress.water_intake_ml == 750
    assert progress.calories_burned == 300
    assert progress.current_streak == 3
    assert progress.streak_milestone == 3
    assert progress.unlocked_count == 1
    assert progress.total_achievements == 16
    assert progress.daily_goal == DEFAULT_DAILY_GOAL


def test_get_progress_for_new_user() -> None:
    service = ProgressService(InMemoryUserStore(), milestones=(1,))

    progress = service.get_progress(uuid4(), today=TODAY)

    assert progress.current_streak == 0
    assert progress.streak_milestone is None
    assert progress.nutrition["calories"] == 0
    assert progress.water_intake_ml == 0
