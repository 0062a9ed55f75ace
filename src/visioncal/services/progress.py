"""Derived daily progress for a user."""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, date, datetime
from uuid import UUID

from visioncal.domain.stats import DailyProgress
from visioncal.services.aggregation import (
    calories_burned_by_day,
    totals_for_day,
    water_by_day,
)
from visioncal.services.catalog import ACHIEVEMENT_CATALOG
from visioncal.services.streaks import (
    STREAK_MILESTONES,
    current_streak,
    streak_milestone,
)
from visioncal.services.users import UserStore


@dataclass
class ProgressService:
    """Service for today's totals and streak state."""

    store: UserStore
    milestones: Sequence[int] = STREAK_MILESTONES

    def get_progress(self, user_id: UUID, today: date | None = None) -> DailyProgress:
        """Return today's totals, streak and achievement counts.

        ``today`` defaults to the current UTC date.
        """
        resolved_today = today or datetime.now(tz=UTC).date()
        day = resolved_today.isoformat()
        data = self.store.load_user_data(user_id)
        streak = current_streak(data.meals, resolved_today)
        known_ids = {achievement.id for achievement in ACHIEVEMENT_CATALOG}
        return DailyProgress(
            day=day,
            nutrition=totals_for_day(data.meals, day),
            daily_goal=data.daily_goal,
            water_intake_ml=water_by_day(data.water_logs).get(day, 0.0),
            calories_burned=calories_burned_by_day(data.exercises).get(day, 0.0),
            current_streak=streak,
            streak_milestone=streak_milestone(streak, self.milestones),
            unlocked_count=len(data.unlocked_achievements & known_ids),
            total_achievements=len(ACHIEVEMENT_CATALOG),
        )
