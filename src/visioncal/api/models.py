"""Pydantic response models for the HTTP API."""

from pydantic import BaseModel

from visioncal.domain.achievements import (
    Achievement,
    AchievementCategory,
    AchievementRarity,
    AchievementStatus,
)
from visioncal.domain.stats import DailyProgress


class AchievementOut(BaseModel):
    """Achievement catalog entry."""

    id: str
    name: str
    description: str
    icon_path: str
    category: AchievementCategory
    rarity: AchievementRarity

    @classmethod
    def from_domain(cls, achievement: Achievement) -> "AchievementOut":
        return cls(
            id=achievement.id,
            name=achievement.name,
            description=achievement.description,
            icon_path=achievement.icon_path,
            category=achievement.category,
            rarity=achievement.rarity,
        )


class AchievementStatusOut(AchievementOut):
    """Catalog entry with the user's unlock state."""

    unlocked: bool

    @classmethod
    def from_status(cls, status: AchievementStatus) -> "AchievementStatusOut":
        base = AchievementOut.from_domain(status.achievement)
        return cls(**base.model_dump(), unlocked=status.unlocked)


class CatalogGroupOut(BaseModel):
    """Catalog entries sharing a category."""

    category: AchievementCategory
    achievements: list[AchievementOut]


class UnlockResultOut(BaseModel):
    """Achievements unlocked by an evaluation."""

    unlocked: list[AchievementOut]


class ProgressOut(BaseModel):
    """Today's progress for a user."""

    day: str
    nutrition: dict[str, float]
    daily_goal: dict[str, float]
    water_intake_ml: float
    calories_burned: float
    current_streak: int
    streak_milestone: int | None
    unlocked_count: int
    total_achievements: int

    @classmethod
    def from_domain(cls, progress: DailyProgress) -> "ProgressOut":
        return cls(
            day=progress.day,
            nutrition=dict(progress.nutrition),
            daily_goal=dict(progress.daily_goal),
            water_intake_ml=progress.water_intake_ml,
            calories_burned=progress.calories_burned,
            current_streak=progress.current_streak,
            streak_milestone=progress.streak_milestone,
            unlocked_count=progress.unlocked_count,
            total_achievements=progress.total_achievements,
        )
