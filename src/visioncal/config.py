"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from visioncal.services.streaks import STREAK_MILESTONES

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    api_token: str
    user_data_table: str = "users"
    log_level: str = "INFO"
    streak_milestones: str = ",".join(str(value) for value in STREAK_MILESTONES)
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_milestones(raw: str | None) -> tuple[int, ...]:
    """Parse streak milestones from env, falling back to the defaults."""
    if raw is None:
        return STREAK_MILESTONES
    values: set[int] = set()
    for chunk in raw.split(","):
        value = chunk.strip()
        if not value:
            continue
        if value.isdigit() and int(value) > 0:
            values.add(int(value))
    return tuple(sorted(values)) or STREAK_MILESTONES
