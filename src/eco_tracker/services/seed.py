"""Sample data used to seed a fresh tracker."""

from datetime import datetime, timedelta

from eco_tracker.domain.challenges import Challenge, ChallengeCategory
from eco_tracker.domain.footprints import FootprintRecord
from eco_tracker.services.calculator import build_record

# (walking km, public transport km, electricity kWh, gas m3, meat kg,
#  vegetables kg, plastic kg, organic kg), oldest day first
_SAMPLE_WEEK = (
    (2.0, 8.0, 12.0, 1.5, 0.2, 0.6, 0.1, 0.7),
    (1.5, 10.0, 14.0, 2.0, 0.3, 0.5, 0.2, 0.8),
    (3.0, 6.0, 11.0, 1.8, 0.1, 0.8, 0.15, 0.6),
    (2.5, 9.0, 13.0, 1.7, 0.25, 0.7, 0.18, 0.75),
    (1.8, 12.0, 15.0, 2.2, 0.4, 0.4, 0.25, 0.9),
    (2.2, 7.0, 10.0, 1.6, 0.15, 0.9, 0.12, 0.65),
    (2.0, 10.0, 15.0, 2.0, 0.3, 0.5, 0.2, 0.8),
)


def sample_footprints(now: datetime) -> list[FootprintRecord]:
    """Return a week of synthetic records ending on ``now``."""
    records = []
    days = len(_SAMPLE_WEEK)
    for offset, row in enumerate(_SAMPLE_WEEK):
        walking, transit, electricity, gas, meat, vegetables, plastic, organic = row
        records.append(
            build_record(
                now - timedelta(days=days - 1 - offset),
                transportation={"walking": walking, "public_transport": transit},
                energy={"electricity_usage": electricity, "gas_usage": gas},
                food={
                    "meat_consumption": meat,
                    "vegetables_consumption": vegetables,
                },
                waste={"plastic_waste": plastic, "organic_waste": organic},
            )
        )
    return records


def sample_challenges(now: datetime) -> list[Challenge]:
    """Return the starter challenge catalog."""
    return [
        Challenge(
            title="Car-Free Week",
            description="Use public transport or walk for 7 consecutive days",
            category=ChallengeCategory.TRANSPORTATION,
            points=100,
            duration_days=7,
        ),
        Challenge(
            title="Energy Saver",
            description="Reduce electricity usage by 20% for one week",
            category=ChallengeCategory.ENERGY,
            points=80,
            duration_days=7,
        ),
        Challenge(
            title="Vegetarian Challenge",
            description="Choose vegetarian meals for 3 consecutive days",
            category=ChallengeCategory.FOOD,
            points=60,
            duration_days=3,
            is_completed=True,
            start_date=now - timedelta(days=5),
            end_date=now - timedelta(days=2),
        ),
        Challenge(
            title="Zero Waste Life",
            description="Reduce waste production by 50% for one week",
            category=ChallengeCategory.WASTE,
            points=120,
            duration_days=7,
        ),
        Challenge(
            title="Green Commute",
            description="Cycle or walk to work for 5 consecutive days",
            category=ChallengeCategory.TRANSPORTATION,
            points=90,
            duration_days=5,
        ),
        Challenge(
            title="Eco Shopping",
            description="Only buy eco-friendly packaged products for one week",
            category=ChallengeCategory.LIFESTYLE,
            points=70,
            duration_days=7,
        ),
    ]
