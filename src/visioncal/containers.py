"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from visioncal.adapters.supabase_user_store import SupabaseUserStore
from visioncal.config import Settings, parse_milestones
from visioncal.services.achievements import AchievementService
from visioncal.services.progress import ProgressService
from visioncal.services.users import UserStore


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_store: UserStore
    achievement_service: AchievementService
    progress_service: ProgressService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_store = SupabaseUserStore(
        supabase_client, table=resolved_settings.user_data_table
    )
    achievement_service = AchievementService(user_store)
    progress_service = ProgressService(
        store=user_store,
        milestones=parse_milestones(resolved_settings.streak_milestones),
    )

    return AppContainer(
        settings=resolved_settings,
        user_store=user_store,
        achievement_service=achievement_service,
        progress_service=progress_service,
    )
