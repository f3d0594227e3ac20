"""Tests for configuration parsing."""

from pathlib import Path

from eco_tracker.config import Settings, parse_badge_categories
from eco_tracker.domain.challenges import ChallengeCategory
from eco_tracker.domain.profile import DEFAULT_BADGE_CATEGORIES


def test_parse_badge_categories_accepts_known_names() -> None:
    assert parse_badge_categories(" Waste, lifestyle ,waste") == (
        ChallengeCategory.WASTE,
        ChallengeCategory.LIFESTYLE,
    )


def test_parse_badge_categories_falls_back_to_default() -> None:
    assert parse_badge_categories(None) == DEFAULT_BADGE_CATEGORIES
    assert parse_badge_categories("") == DEFAULT_BADGE_CATEGORIES
    assert parse_badge_categories("gardening") == DEFAULT_BADGE_CATEGORIES


def test_settings_read_prefixed_environment(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("ECO_TRACKER_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("ECO_TRACKER_SEED_SAMPLE_DATA", "false")
    monkeypatch.setenv("ECO_TRACKER_DAILY_TARGET_KG", "12.5")

    settings = Settings()

    assert settings.data_dir == Path(tmp_path)
    assert settings.seed_sample_data is False
    assert settings.daily_target_kg == 12.5
    assert settings.storage_backend == "json"


def test_settings_log_level(monkeypatch) -> None:
    monkeypatch.delenv("ECO_TRACKER_LOG_LEVEL", raising=False)
    assert Settings().log_level == "INFO"

    monkeypatch.setenv("ECO_TRACKER_LOG_LEVEL", "warning")

    assert Settings().log_level == "warning"
