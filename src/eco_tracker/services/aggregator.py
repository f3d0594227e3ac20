"""Footprint history, rollups and gamification profile."""

import logging
import threading
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field, replace
from datetime import UTC, date, datetime, time, timedelta
from enum import StrEnum
from typing import Protocol
from uuid import UUID
from zoneinfo import ZoneInfo

from eco_tracker.adapters.serialization import (
    decode_challenges,
    decode_footprints,
    decode_profile,
    encode_challenges,
    encode_footprints,
    encode_profile,
)
from eco_tracker.domain.challenges import Challenge, ChallengeCategory
from eco_tracker.domain.footprints import FootprintRecord
from eco_tracker.domain.profile import (
    BADGE_DEFINITIONS,
    DEFAULT_BADGE_CATEGORIES,
    Badge,
    Profile,
    level_for_points,
)
from eco_tracker.errors import ChallengeNotFoundError, PersistenceError

WEEKLY_RECORDS = 7
MONTHLY_RECORDS = 30
WEEK_DAYS = 7
MONTH_DAYS = 30

_logger = logging.getLogger(__name__)


class StorageKey(StrEnum):
    """Keys under which tracker state is persisted."""

    FOOTPRINTS = "footprints"
    PROFILE = "profile"
    CHALLENGES = "challenges"


class KeyValueStore(Protocol):
    """Durable storage for JSON-compatible values.

    Implementations raise PersistenceError when the backend fails.
    """

    def get(self, key: str) -> object | None:
        """Return the stored value for key, or None if absent."""

    def set(self, key: str, value: object) -> None:
        """Store a value under key."""


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class FootprintAggregator:
    """Owns footprint history and the challenge catalog, and derives the profile.

    Every mutation and the profile recomputation it triggers run under one
    lock, so readers never see a history newer than the profile. Mutations
    are applied in memory before being written through to the store; a failed
    write raises PersistenceError but the in-memory state stays authoritative.
    """

    store: KeyValueStore
    user_id: str = "user_123"
    username: str = "Eco Master"
    timezone: ZoneInfo = field(default_factory=lambda: ZoneInfo("UTC"))
    badge_categories: tuple[ChallengeCategory, ...] = DEFAULT_BADGE_CATEGORIES
    daily_target_kg: float = 20.0
    clock: Callable[[], datetime] = _utc_now
    _history: list[FootprintRecord] = field(init=False, default_factory=list)
    _challenges: list[Challenge] = field(init=False, default_factory=list)
    _profile: Profile = field(init=False)
    _join_date: datetime = field(init=False)
    _lock: threading.RLock = field(init=False, default_factory=threading.RLock)

    def __post_init__(self) -> None:
        self._join_date = self.clock()
        self._profile = self._build_profile(previous=None)

    @property
    def profile(self) -> Profile:
        """Return the current profile."""
        with self._lock:
            return self._profile

    @property
    def history(self) -> tuple[FootprintRecord, ...]:
        """Return footprint records in insertion order."""
        with self._lock:
            return tuple(self._history)

    def load(self) -> None:
        """Replace in-memory state with the stored state.

        Raises PersistenceError if the store fails or holds malformed data;
        the current state is left untouched in that case.
        """
        with self._lock:
            raw_footprints = self.store.get(StorageKey.FOOTPRINTS.value)
            raw_challenges = self.store.get(StorageKey.CHALLENGES.value)
            raw_profile = self.store.get(StorageKey.PROFILE.value)
            history = decode_footprints(raw_footprints) if raw_footprints else []
            challenges = decode_challenges(raw_challenges) if raw_challenges else []
            stored_profile = decode_profile(raw_profile) if raw_profile else None

            self._history = history
            self._challenges = challenges
            if stored_profile is not None:
                self._join_date = stored_profile.join_date
            self._profile = self._build_profile(previous=stored_profile)
            _logger.info(
                "Loaded tracker state: records=%s challenges=%s",
                len(history),
                len(challenges),
            )

    def seed(
        self, records: Iterable[FootprintRecord], challenges: Iterable[Challenge]
    ) -> bool:
        """Fill empty history and catalog with sample data.

        Collections that already hold data are kept. Returns True when
        anything was seeded.
        """
        with self._lock:
            keys: list[StorageKey] = []
            if not self._history:
                self._history = list(records)
                keys.append(StorageKey.FOOTPRINTS)
            if not self._challenges:
                self._challenges = [replace(challenge) for challenge in challenges]
                keys.append(StorageKey.CHALLENGES)
            if not keys:
                return False
            self._profile = self._build_profile(previous=self._profile)
            _logger.info(
                "Seeded sample data: %s", ", ".join(key.value for key in keys)
            )
            self._persist(*keys, StorageKey.PROFILE)
            return True

    def add_record(self, record: FootprintRecord) -> Profile:
        """Append a record to history and return the recomputed profile.

        Records for a day that already has one are kept alongside it.
        """
        with self._lock:
            self._history.append(record)
            self._profile = self._build_profile(previous=self._profile)
            _logger.info(
                "Footprint recorded: date=%s total=%.3f",
                record.date.isoformat(),
                record.total_emission,
            )
            self._persist(StorageKey.FOOTPRINTS, StorageKey.PROFILE)
            return self._profile

    def recompute_profile(self) -> Profile:
        """Recompute points, level, badges and rollups from current state."""
        with self._lock:
            self._profile = self._build_profile(previous=self._profile)
            return self._profile

    def get_record_for_date(self, day: date | datetime) -> FootprintRecord:
        """Return the first record on the same calendar day as ``day``.

        Days are compared in the tracker's timezone, which is also assumed for
        a naive ``day``. When no record exists a zero-valued record is returned;
        history is not modified.
        """
        if isinstance(day, datetime):
            default_date = self._localize(day)
            target = default_date.astimezone(self.timezone).date()
        else:
            target = day
            default_date = datetime.combine(day, time.min, tzinfo=self.timezone)
        with self._lock:
            for record in self._history:
                if record.date.astimezone(self.timezone).date() == target:
                    return record
        return FootprintRecord(date=default_date)

    def get_today_record(self) -> FootprintRecord:
        """Return today's record or a zero-valued one."""
        return self.get_record_for_date(self.clock())

    def get_records_in_window(
        self, days: int, anchor: datetime | None = None
    ) -> list[FootprintRecord]:
        """Return records dated within ``days`` before ``anchor``, oldest first.

        The window is the trailing interval [anchor - days, anchor]; anchor
        defaults to now and a naive anchor is read in the tracker's timezone.
        """
        end = self._localize(anchor or self.clock())
        start = end - timedelta(days=days)
        with self._lock:
            matched = [
                record for record in self._history if start <= record.date <= end
            ]
        return sorted(matched, key=lambda record: record.date)

    def get_weekly_data(self) -> list[FootprintRecord]:
        """Return records from the trailing seven days."""
        return self.get_records_in_window(WEEK_DAYS)

    def get_monthly_data(self) -> list[FootprintRecord]:
        """Return records from the trailing thirty days."""
        return self.get_records_in_window(MONTH_DAYS)

    def daily_progress(self, record: FootprintRecord | None = None) -> float:
        """Return the share of the daily target used, between 0 and 1."""
        current = record or self.get_today_record()
        if self.daily_target_kg <= 0:
            return 1.0
        return min(max(current.total_emission / self.daily_target_kg, 0.0), 1.0)

    def get_challenges(
        self, category: ChallengeCategory | None = None
    ) -> list[Challenge]:
        """Return copies of the catalog, optionally filtered by category."""
        with self._lock:
            return [
                replace(challenge)
                for challenge in self._challenges
                if category is None or challenge.category == category
            ]

    def get_challenge(self, challenge_id: UUID | str) -> Challenge:
        """Return a copy of one challenge or raise ChallengeNotFoundError."""
        with self._lock:
            challenge = self._find_challenge(challenge_id)
            if challenge is None:
                raise ChallengeNotFoundError(challenge_id)
            return replace(challenge)

    def start_challenge(self, challenge_id: UUID | str) -> Challenge | None:
        """Start a challenge now; returns None if the id is unknown."""
        with self._lock:
            challenge = self._find_challenge(challenge_id)
            if challenge is None:
                _logger.warning(
                    "Start requested for unknown challenge %s", challenge_id
                )
                return None
            if challenge.is_completed:
                _logger.warning(
                    "Start requested for completed challenge %s", challenge_id
                )
                return replace(challenge)
            challenge.start(self.clock())
            _logger.info("Challenge started: %s", challenge.title)
            self._persist(StorageKey.CHALLENGES)
            return replace(challenge)

    def complete_challenge(self, challenge_id: UUID | str) -> Challenge | None:
        """Complete a challenge and refresh the profile; None if id unknown."""
        with self._lock:
            challenge = self._find_challenge(challenge_id)
            if challenge is None:
                _logger.warning(
                    "Completion requested for unknown challenge %s", challenge_id
                )
                return None
            challenge.complete()
            self._profile = self._build_profile(previous=self._profile)
            _logger.info(
                "Challenge completed: %s points=%s total_points=%s",
                challenge.title,
                challenge.points,
                self._profile.total_points,
            )
            self._persist(StorageKey.CHALLENGES, StorageKey.PROFILE)
            return replace(challenge)

    def _localize(self, moment: datetime) -> datetime:
        if moment.tzinfo is None or moment.utcoffset() is None:
            return moment.replace(tzinfo=self.timezone)
        return moment

    def _find_challenge(self, challenge_id: UUID | str) -> Challenge | None:
        parsed = _parse_uuid(challenge_id)
        if parsed is None:
            return None
        for challenge in self._challenges:
            if challenge.id == parsed:
                return challenge
        return None

    def _build_profile(self, previous: Profile | None) -> Profile:
        completed = [
            challenge for challenge in self._challenges if challenge.is_completed
        ]
        total_points = sum(challenge.points for challenge in completed)
        return Profile(
            user_id=self.user_id,
            username=self.username,
            total_points=total_points,
            level=level_for_points(total_points),
            badges=self._build_badges(completed, previous),
            weekly_emission=_sum_emissions(self._history[-WEEKLY_RECORDS:]),
            monthly_emission=_sum_emissions(self._history[-MONTHLY_RECORDS:]),
            yearly_emission=_sum_emissions(self._history),
            join_date=self._join_date,
        )

    def _build_badges(
        self, completed: list[Challenge], previous: Profile | None
    ) -> tuple[Badge, ...]:
        earned_before: dict[ChallengeCategory, datetime] = {}
        if previous is not None:
            earned_before = {
                badge.category: badge.earned_date for badge in previous.badges
            }
        completed_categories = {challenge.category for challenge in completed}
        now: datetime | None = None
        badges: list[Badge] = []
        for category in self.badge_categories:
            if category not in completed_categories:
                continue
            earned = earned_before.get(category)
            if earned is None:
                now = now or self.clock()
                earned = now
            definition = BADGE_DEFINITIONS[category]
            badges.append(
                Badge(
                    name=definition.name,
                    description=definition.description,
                    icon_name=definition.icon_name,
                    earned_date=earned,
                    category=category,
                )
            )
        return tuple(badges)

    def _persist(self, *keys: StorageKey) -> None:
        encoders: dict[StorageKey, Callable[[], object]] = {
            StorageKey.FOOTPRINTS: lambda: encode_footprints(self._history),
            StorageKey.CHALLENGES: lambda: encode_challenges(self._challenges),
            StorageKey.PROFILE: lambda: encode_profile(self._profile),
        }
        for key in keys:
            try:
                self.store.set(key.value, encoders[key]())
            except PersistenceError:
                _logger.warning("Failed to persist %s; keeping in-memory state", key)
                raise


def _sum_emissions(records: Iterable[FootprintRecord]) -> float:
    return sum((record.total_emission for record in records), 0.0)


def _parse_uuid(value: object) -> UUID | None:
    if isinstance(value, UUID):
        return value
    if isinstance(value, str):
        try:
            return UUID(value)
        except ValueError:
            return None
    return None
