"""Dependency container wiring for the application."""

import logging
from dataclasses import dataclass
from zoneinfo import ZoneInfo

from supabase import create_client

from eco_tracker.adapters.json_file_store import JsonFileStore
from eco_tracker.adapters.supabase_store import SupabaseStore
from eco_tracker.config import Settings, parse_badge_categories
from eco_tracker.errors import PersistenceError
from eco_tracker.services.aggregator import FootprintAggregator, KeyValueStore
from eco_tracker.services.seed import sample_challenges, sample_footprints

_logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    store: KeyValueStore
    aggregator: FootprintAggregator


def build_store(settings: Settings) -> KeyValueStore:
    """Create the key-value store selected by the settings."""
    if settings.storage_backend == "supabase":
        if not settings.supabase_url or not settings.supabase_service_key:
            raise ValueError(
                "Supabase storage requires supabase_url and supabase_service_key"
            )
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return SupabaseStore(
            client=client, user_id=settings.user_id, table=settings.supabase_table
        )
    return JsonFileStore(settings.data_dir)


def build_container(
    settings: Settings | None = None, store: KeyValueStore | None = None
) -> AppContainer:
    """Create the default dependency container.

    Stored state is loaded when readable. Unreadable state is logged and the
    tracker starts empty; sample data is seeded into empty collections when
    enabled.
    """
    resolved_settings = settings or Settings()
    resolved_store = store or build_store(resolved_settings)
    aggregator = FootprintAggregator(
        store=resolved_store,
        user_id=resolved_settings.user_id,
        username=resolved_settings.username,
        timezone=ZoneInfo(resolved_settings.timezone),
        badge_categories=parse_badge_categories(resolved_settings.badge_categories),
        daily_target_kg=resolved_settings.daily_target_kg,
    )
    try:
        aggregator.load()
    except PersistenceError:
        _logger.warning(
            "Stored tracker data is unreadable; starting empty", exc_info=True
        )

    if resolved_settings.seed_sample_data:
        now = aggregator.clock()
        try:
            aggregator.seed(sample_footprints(now), sample_challenges(now))
        except PersistenceError:
            _logger.warning("Sample data was seeded but could not be saved")

    return AppContainer(
        settings=resolved_settings,
        store=resolved_store,
        aggregator=aggregator,
    )
