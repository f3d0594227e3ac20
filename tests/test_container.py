"""Tests for container wiring."""

import pytest

from eco_tracker.adapters.json_file_store import JsonFileStore
from eco_tracker.config import Settings
from eco_tracker.containers import build_container, build_store
from eco_tracker.domain.challenges import ChallengeCategory
from tests.conftest import FailingKeyValueStore, InMemoryKeyValueStore


def test_build_container_seeds_empty_store(settings: Settings) -> None:
    store = InMemoryKeyValueStore()

    container = build_container(settings, store=store)
    aggregator = container.aggregator

    assert container.store is store
    assert len(aggregator.history) == 7
    assert len(aggregator.get_challenges()) == 6
    assert aggregator.profile.total_points == 60
    assert [badge.category for badge in aggregator.profile.badges] == [
        ChallengeCategory.FOOD
    ]
    assert set(store.values) == {"footprints", "challenges", "profile"}


def test_build_container_loads_existing_state(settings: Settings) -> None:
    store = InMemoryKeyValueStore()
    first = build_container(settings, store=store).aggregator

    second = build_container(settings, store=store).aggregator

    assert second.history == first.history
    assert second.get_challenges() == first.get_challenges()
    assert second.profile.join_date == first.profile.join_date


def test_build_container_without_seeding(settings: Settings) -> None:
    settings.seed_sample_data = False

    container = build_container(settings, store=InMemoryKeyValueStore())

    assert container.aggregator.history == ()
    assert container.aggregator.get_challenges() == []


def test_build_container_starts_empty_on_unreadable_state(
    settings: Settings,
) -> None:
    store = InMemoryKeyValueStore(values={"challenges": "garbage"})
    settings.seed_sample_data = False

    container = build_container(settings, store=store)

    assert container.aggregator.get_challenges() == []


def test_build_container_tolerates_failed_seed_write(settings: Settings) -> None:
    container = build_container(settings, store=FailingKeyValueStore())

    assert len(container.aggregator.history) == 7


def test_build_container_uses_json_store_by_default(settings: Settings) -> None:
    container = build_container(settings)

    assert isinstance(container.store, JsonFileStore)
    assert (settings.data_dir / "footprints.json").exists()


def test_build_store_requires_supabase_credentials(tmp_path) -> None:
    settings = Settings(
        storage_backend="supabase",
        data_dir=tmp_path,
        supabase_url=None,
        supabase_service_key=None,
    )

    with pytest.raises(ValueError, match="supabase_url"):
        build_store(settings)
