"""Domain models for eco challenges."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import StrEnum
from uuid import UUID, uuid4


class ChallengeCategory(StrEnum):
    """Area of everyday life a challenge targets."""

    TRANSPORTATION = "transportation"
    ENERGY = "energy"
    FOOD = "food"
    WASTE = "waste"
    LIFESTYLE = "lifestyle"


class ChallengeStatus(StrEnum):
    """Lifecycle state derived from the challenge fields."""

    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


@dataclass
class Challenge:
    """A time-boxed, point-valued user goal."""

    title: str
    description: str
    category: ChallengeCategory
    points: int
    duration_days: int
    is_completed: bool = False
    start_date: datetime | None = None
    end_date: datetime | None = None
    id: UUID = field(default_factory=uuid4)

    @property
    def status(self) -> ChallengeStatus:
        """Return the current lifecycle state."""
        if self.is_completed:
            return ChallengeStatus.COMPLETED
        if self.start_date is not None:
            return ChallengeStatus.IN_PROGRESS
        return ChallengeStatus.NOT_STARTED

    def start(self, now: datetime) -> None:
        """Begin the challenge window at ``now``.

        Completed challenges are final, so starting one leaves it unchanged.
        Starting an in-progress challenge restarts its window.
        """
        if self.is_completed:
            return
        self.start_date = now
        self.end_date = now + timedelta(days=self.duration_days)

    def complete(self) -> None:
        """Mark the challenge completed, keeping any start and end dates."""
        self.is_completed = True
