"""Console summary of the current footprint and profile."""

from eco_tracker.app_logging import configure_logging
from eco_tracker.config import Settings
from eco_tracker.containers import build_container


def main() -> None:
    """Print today's footprint and the profile rollups."""
    settings = Settings()
    configure_logging(settings.log_level)
    container = build_container(settings)
    aggregator = container.aggregator
    today = aggregator.get_today_record()
    profile = aggregator.profile

    print("Eco Tracker")
    print(f"Today: {today.total_emission:.1f} kg CO2e")
    for category, emission in today.breakdown().items():
        print(f"  {category.value}: {emission:.1f} kg")
    print(f"Daily target used: {aggregator.daily_progress(today):.0%}")
    print(f"Week: {profile.weekly_emission:.1f} kg CO2e")
    print(f"Month: {profile.monthly_emission:.1f} kg CO2e")
    print(f"Level {profile.level} ({profile.level_title}), {profile.total_points} pts")
    for badge in profile.badges:
        print(f"  Badge: {badge.name}")


if __name__ == "__main__":
    main()
