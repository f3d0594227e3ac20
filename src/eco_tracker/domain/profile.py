"""Gamification profile models."""

from dataclasses import dataclass
from datetime import datetime

from eco_tracker.domain.challenges import ChallengeCategory

POINTS_PER_LEVEL = 100
MAX_LEVEL = 20

_LEVEL_TITLES = (
    (5, "Eco Novice"),
    (10, "Eco Enthusiast"),
    (15, "Eco Expert"),
    (20, "Eco Master"),
)


@dataclass(frozen=True)
class Badge:
    """Achievement marker for completing challenges in a category."""

    name: str
    description: str
    icon_name: str
    earned_date: datetime
    category: ChallengeCategory


@dataclass(frozen=True)
class BadgeDefinition:
    """Static presentation data for a category badge."""

    name: str
    description: str
    icon_name: str


BADGE_DEFINITIONS = {
    ChallengeCategory.TRANSPORTATION: BadgeDefinition(
        name="Transport Master",
        description="Completed transportation challenges",
        icon_name="car.fill",
    ),
    ChallengeCategory.ENERGY: BadgeDefinition(
        name="Energy Expert",
        description="Completed energy challenges",
        icon_name="bolt.fill",
    ),
    ChallengeCategory.FOOD: BadgeDefinition(
        name="Vegetarian Pioneer",
        description="Completed food challenges",
        icon_name="fork.knife",
    ),
    ChallengeCategory.WASTE: BadgeDefinition(
        name="Zero Waste Hero",
        description="Completed waste challenges",
        icon_name="trash.fill",
    ),
    ChallengeCategory.LIFESTYLE: BadgeDefinition(
        name="Green Lifestyle",
        description="Completed lifestyle challenges",
        icon_name="leaf.fill",
    ),
}

DEFAULT_BADGE_CATEGORIES = (
    ChallengeCategory.TRANSPORTATION,
    ChallengeCategory.ENERGY,
    ChallengeCategory.FOOD,
)


@dataclass(frozen=True)
class Profile:
    """Derived gamification and rollup state for a user."""

    user_id: str
    username: str
    total_points: int
    level: int
    badges: tuple[Badge, ...]
    weekly_emission: float
    monthly_emission: float
    yearly_emission: float
    join_date: datetime

    @property
    def level_title(self) -> str:
        """Return the display title for the current level."""
        return level_title(self.level)


def level_for_points(points: int) -> int:
    """Return the level reached with ``points``, capped at MAX_LEVEL."""
    return min(points // POINTS_PER_LEVEL + 1, MAX_LEVEL)


def level_title(level: int) -> str:
    """Return the title shown for a level."""
    for upper, title in _LEVEL_TITLES:
        if 1 <= level <= upper:
            return title
    return "Eco Legend"
