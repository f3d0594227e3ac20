"""Application configuration."""

import os
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from eco_tracker.domain.challenges import ChallengeCategory
from eco_tracker.domain.profile import DEFAULT_BADGE_CATEGORIES

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")
_CATEGORY_NAMES = {category.value for category in ChallengeCategory}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    environment: str = _ENVIRONMENT
    storage_backend: Literal["json", "supabase"] = "json"
    data_dir: Path = Path(".eco_tracker")
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    supabase_table: str = "eco_tracker_store"
    user_id: str = "user_123"
    username: str = "Eco Master"
    timezone: str = "Asia/Hong_Kong"
    seed_sample_data: bool = True
    daily_target_kg: float = 20.0
    badge_categories: str = "transportation,energy,food"
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="ECO_TRACKER_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_badge_categories(raw: str | None) -> tuple[ChallengeCategory, ...]:
    """Parse the categories that earn badges from a comma separated list."""
    if raw is None:
        return DEFAULT_BADGE_CATEGORIES
    categories: list[ChallengeCategory] = []
    for chunk in raw.split(","):
        value = chunk.strip().lower()
        if value in _CATEGORY_NAMES:
            category = ChallengeCategory(value)
            if category not in categories:
                categories.append(category)
    return tuple(categories) or DEFAULT_BADGE_CATEGORIES
