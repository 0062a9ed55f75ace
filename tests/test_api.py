"""Tests for the HTTP API."""

from datetime import UTC, datetime
from uuid import uuid4

from fastapi.testclient import TestClient

from visioncal.api.app import create_app
from visioncal.containers import AppContainer
from visioncal.domain.logs import MealSource
from visioncal.domain.models import UserData
from tests.conftest import InMemoryUserStore, make_meal

HEADERS = {"X-Api-Token": "api-token"}


def test_health(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_app_lifespan_starts_and_stops(container: AppContainer) -> None:
    with TestClient(create_app(container)) as client:
        response = client.get("/health")

    assert response.status_code == 200


def test_catalog_is_public_and_grouped(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/achievements")

    assert response.status_code == 200
    groups = response.json()
    assert groups[0]["category"] == "Milestone"
    assert groups[0]["achievements"][0]["id"] == "first_log"
    assert sum(len(group["achievements"]) for group in groups) == 16


def test_user_endpoints_require_token(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    user_id = uuid4()

    missing = client.get(f"/users/{user_id}/progress")
    wrong = client.post(
        f"/users/{user_id}/achievements/check", headers={"X-Api-Token": "nope"}
    )

    assert missing.status_code == 401
    assert wrong.status_code == 401


def test_check_endpoint_unlocks_and_persists(
    container: AppContainer, user_store: InMemoryUserStore
) -> None:
    client = TestClient(create_app(container))
    user_id = uuid4()
    today = datetime.now(tz=UTC).date()
    user_store.users[user_id] = UserData(
        meals=(make_meal(today, source=MealSource.PHOTO),)
    )

    first = client.post(f"/users/{user_id}/achievements/check", headers=HEADERS)
    second = client.post(f"/users/{user_id}/achievements/check", headers=HEADERS)

    assert first.status_code == 200
    assert [item["id"] for item in first.json()["unlocked"]] == [
        "first_log",
        "photogenic",
    ]
    assert second.json() == {"unlocked": []}
    assert user_store.saved[0][1] == ["first_log", "photogenic"]


def test_list_user_achievements(
    container: AppContainer, user_store: InMemoryUserStore
) -> None:
    client = TestClient(create_app(container))
    user_id = uuid4()
    user_store.users[user_id] = UserData(unlocked_achievements=frozenset({"scanner"}))

    response = client.get(f"/users/{user_id}/achievements", headers=HEADERS)

    assert response.status_code == 200
    unlocked = [item["id"] for item in response.json() if item["unlocked"]]
    assert unlocked == ["scanner"]


def test_progress_endpoint(
    container: AppContainer, user_store: InMemoryUserStore
) -> None:
    client = TestClient(create_app(container))
    user_id = uuid4()
    today = datetime.now(tz=UTC).date()
    user_store.users[user_id] = UserData(
        meals=(make_meal(today, nutrition={"calories": 640, "protein": 35}),)
    )

    response = client.get(f"/users/{user_id}/progress", headers=HEADERS)

    assert response.status_code == 200
    body = response.json()
    assert body["day"] == today.isoformat()
    assert body["nutrition"]["calories"] == 640
    assert body["current_streak"] == 1
    assert body["streak_milestone"] is None
    assert body["total_achievements"] == 16


def test_invalid_user_id_is_rejected(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/users/not-a-uuid/progress", headers=HEADERS)

    assert response.status_code == 422
