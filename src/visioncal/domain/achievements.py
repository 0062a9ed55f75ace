"""Domain models for achievements."""

from dataclasses import dataclass
from enum import StrEnum


class AchievementCategory(StrEnum):
    """Grouping shown on the achievements screen."""

    MILESTONE = "Milestone"
    CONSISTENCY = "Consistency"
    NUTRITION = "Nutrition"
    LOGGING = "Logging"
    HYDRATION = "Hydration"


class AchievementRarity(StrEnum):
    """How hard an achievement is to earn."""

    COMMON = "Common"
    RARE = "Rare"
    EPIC = "Epic"


@dataclass(frozen=True)
class Achievement:
    """Static achievement catalog entry."""

    id: str
    name: str
    description: str
    icon_path: str
    category: AchievementCategory
    rarity: AchievementRarity


@dataclass(frozen=True)
class AchievementStatus:
    """Catalog entry paired with the user's unlock state."""

    achievement: Achievement
    unlocked: bool
