"""Per-user state access."""

from typing import Protocol
from uuid import UUID

from visioncal.domain.models import UserData


class UserStore(Protocol):
    """Persistence interface for a user's event log and unlocked achievements."""

    def load_user_data(self, user_id: UUID) -> UserData:
        """Return the stored state for a user, empty when none exists."""

    def save_unlocked_achievements(
        self, user_id: UUID, achievement_ids: list[str]
    ) -> None:
        """Replace the user's unlocked achievement ids."""
