"""Per-user achievement and progress endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request

from visioncal.api.auth import require_api_token
from visioncal.api.models import (
    AchievementOut,
    AchievementStatusOut,
    ProgressOut,
    UnlockResultOut,
)

if TYPE_CHECKING:
    from visioncal.containers import AppContainer

router = APIRouter(
    prefix="/users", tags=["users"], dependencies=[Depends(require_api_token)]
)


@router.get("/{user_id}/achievements")
async def list_user_achievements(
    user_id: UUID, request: Request
) -> list[AchievementStatusOut]:
    """Return the catalog with the user's unlock state."""
    container: AppContainer = request.app.state.container
    statuses = container.achievement_service.list_achievements(user_id)
    return [AchievementStatusOut.from_status(status) for status in statuses]


@router.post("/{user_id}/achievements/check")
async def check_user_achievements(user_id: UUID, request: Request) -> UnlockResultOut:
    """Evaluate the user's log and return newly unlocked achievements."""
    container: AppContainer = request.app.state.container
    unlocked = container.achievement_service.check_achievements(user_id)
    return UnlockResultOut(
        unlocked=[AchievementOut.from_domain(achievement) for achievement in unlocked]
    )


@router.get("/{user_id}/progress")
async def user_progress(user_id: UUID, request: Request) -> ProgressOut:
    """Return today's totals, streak and achievement counts."""
    container: AppContainer = request.app.state.container
    return ProgressOut.from_domain(container.progress_service.get_progress(user_id))
