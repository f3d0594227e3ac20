"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

import pytest

from eco_tracker.config import Settings
from eco_tracker.domain.challenges import Challenge, ChallengeCategory
from eco_tracker.errors import PersistenceError
from eco_tracker.services.aggregator import FootprintAggregator, KeyValueStore

FIXED_NOW = datetime(2024, 5, 10, 12, 0, tzinfo=UTC)


@dataclass
class InMemoryKeyValueStore(KeyValueStore):
    """In-memory key-value store for tests."""

    values: dict[str, object] = field(default_factory=dict)
    writes: list[str] = field(default_factory=list)

    def get(self, key: str) -> object | None:
        return self.values.get(key)

    def set(self, key: str, value: object) -> None:
        self.writes.append(key)
        self.values[key] = value


@dataclass
class FailingKeyValueStore(KeyValueStore):
    """Store whose reads and writes can be made to fail."""

    values: dict[str, object] = field(default_factory=dict)
    fail_reads: bool = False
    fail_writes: bool = True

    def get(self, key: str) -> object | None:
        if self.fail_reads:
            raise PersistenceError(f"read failed: {key}")
        return self.values.get(key)

    def set(self, key: str, value: object) -> None:
        if self.fail_writes:
            raise PersistenceError(f"write failed: {key}")
        self.values[key] = value


@dataclass
class FakeClock:
    """Manually advanced clock."""

    now: datetime = FIXED_NOW

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now = self.now + timedelta(**kwargs)


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    name: str
    rows: list[dict[str, object]] = field(default_factory=list)
    upserts: list[tuple[dict[str, object], str | None]] = field(default_factory=list)

    def select(self, *_args) -> "FakeTable":
        self._action = "select"
        self._filters: list[tuple[str, object]] = []
        self._limit: int | None = None
        return self

    def upsert(self, payload, on_conflict: str | None = None) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "upsert"
        self._payload = payload
        self.upserts.append((payload, on_conflict))
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._filters.append((column, value))
        return self

    def limit(self, count: int) -> "FakeTable":
        self._limit = count
        return self

    def execute(self) -> FakeResponse:
        if self._action == "upsert":
            payload = dict(self._payload)
            self.rows = [
                row
                for row in self.rows
                if (row["user_id"], row["key"]) != (payload["user_id"], payload["key"])
            ]
            self.rows.append(payload)
            return FakeResponse(data=[payload])
        matched = [
            row
            for row in self.rows
            if all(row.get(column) == value for column, value in self._filters)
        ]
        if self._limit is not None:
            matched = matched[: self._limit]
        return FakeResponse(data=matched)


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


class BrokenSupabaseClient:
    """Client whose every call fails like a dropped connection."""

    def table(self, name: str) -> FakeTable:
        raise RuntimeError(f"connection refused for {name}")


def make_challenge(
    category: ChallengeCategory = ChallengeCategory.TRANSPORTATION,
    points: int = 100,
    duration_days: int = 7,
    title: str = "Car-Free Week",
) -> Challenge:
    return Challenge(
        title=title,
        description=f"{title} description",
        category=category,
        points=points,
        duration_days=duration_days,
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def aggregator(store: InMemoryKeyValueStore, clock: FakeClock) -> FootprintAggregator:
    return FootprintAggregator(store=store, clock=clock)


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        storage_backend="json",
        data_dir=tmp_path / "data",
        timezone="UTC",
        seed_sample_data=True,
    )
