"""JSON-compatible encoding of stored footprints, challenges and profiles."""

from datetime import datetime
from typing import Self
from uuid import UUID

from pydantic import (
    AwareDatetime,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
)

from eco_tracker.domain.challenges import Challenge, ChallengeCategory
from eco_tracker.domain.footprints import (
    EnergyEmission,
    FoodEmission,
    FootprintRecord,
    TransportationEmission,
    WasteEmission,
)
from eco_tracker.domain.profile import Badge, Profile
from eco_tracker.errors import InvalidInputError, PersistenceError


class _StoredModel(BaseModel):
    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)


class TransportationModel(_StoredModel):
    """Stored transportation quantities."""

    walking: float = Field(default=0.0, ge=0)
    cycling: float = Field(default=0.0, ge=0)
    public_transport: float = Field(default=0.0, ge=0)
    private_vehicle: float = Field(default=0.0, ge=0)
    emission: float = 0.0


class EnergyModel(_StoredModel):
    """Stored energy quantities."""

    electricity_usage: float = Field(default=0.0, ge=0)
    gas_usage: float = Field(default=0.0, ge=0)
    water_usage: float = Field(default=0.0, ge=0)
    emission: float = 0.0


class FoodModel(_StoredModel):
    """Stored food quantities."""

    meat_consumption: float = Field(default=0.0, ge=0)
    dairy_consumption: float = Field(default=0.0, ge=0)
    vegetables_consumption: float = Field(default=0.0, ge=0)
    processed_food: float = Field(default=0.0, ge=0)
    emission: float = 0.0


class WasteModel(_StoredModel):
    """Stored waste quantities."""

    plastic_waste: float = Field(default=0.0, ge=0)
    paper_waste: float = Field(default=0.0, ge=0)
    organic_waste: float = Field(default=0.0, ge=0)
    electronic_waste: float = Field(default=0.0, ge=0)
    emission: float = 0.0


class FootprintRecordModel(_StoredModel):
    """Stored footprint record.

    Emission values are written for readability only; they are recomputed
    from the quantities when a record is decoded.
    """

    id: UUID
    date: AwareDatetime
    transportation: TransportationModel
    energy: EnergyModel
    food: FoodModel
    waste: WasteModel
    total_emission: float = 0.0

    @classmethod
    def from_domain(cls, record: FootprintRecord) -> Self:
        return cls(
            id=record.id,
            date=record.date,
            transportation=TransportationModel(
                **record.transportation.quantities(),
                emission=record.transportation.emission,
            ),
            energy=EnergyModel(
                **record.energy.quantities(), emission=record.energy.emission
            ),
            food=FoodModel(**record.food.quantities(), emission=record.food.emission),
            waste=WasteModel(
                **record.waste.quantities(), emission=record.waste.emission
            ),
            total_emission=record.total_emission,
        )

    def to_domain(self) -> FootprintRecord:
        return FootprintRecord(
            id=self.id,
            date=self.date,
            transportation=TransportationEmission(
                **self.transportation.model_dump(exclude={"emission"})
            ),
            energy=EnergyEmission(**self.energy.model_dump(exclude={"emission"})),
            food=FoodEmission(**self.food.model_dump(exclude={"emission"})),
            waste=WasteEmission(**self.waste.model_dump(exclude={"emission"})),
        )


class ChallengeModel(_StoredModel):
    """Stored challenge."""

    id: UUID
    title: str
    description: str
    category: ChallengeCategory
    points: int = Field(ge=0)
    duration_days: int = Field(ge=0)
    is_completed: bool = False
    start_date: datetime | None = None
    end_date: datetime | None = None

    @classmethod
    def from_domain(cls, challenge: Challenge) -> Self:
        return cls(
            id=challenge.id,
            title=challenge.title,
            description=challenge.description,
            category=challenge.category,
            points=challenge.points,
            duration_days=challenge.duration_days,
            is_completed=challenge.is_completed,
            start_date=challenge.start_date,
            end_date=challenge.end_date,
        )

    def to_domain(self) -> Challenge:
        return Challenge(**self.model_dump())


class BadgeModel(_StoredModel):
    """Stored badge."""

    name: str
    description: str
    icon_name: str
    earned_date: datetime
    category: ChallengeCategory


class ProfileModel(_StoredModel):
    """Stored profile snapshot."""

    user_id: str
    username: str
    total_points: int
    level: int
    badges: list[BadgeModel] = Field(default_factory=list)
    weekly_emission: float
    monthly_emission: float
    yearly_emission: float
    join_date: datetime

    @classmethod
    def from_domain(cls, profile: Profile) -> Self:
        return cls(
            user_id=profile.user_id,
            username=profile.username,
            total_points=profile.total_points,
            level=profile.level,
            badges=[
                BadgeModel(
                    name=badge.name,
                    description=badge.description,
                    icon_name=badge.icon_name,
                    earned_date=badge.earned_date,
                    category=badge.category,
                )
                for badge in profile.badges
            ],
            weekly_emission=profile.weekly_emission,
            monthly_emission=profile.monthly_emission,
            yearly_emission=profile.yearly_emission,
            join_date=profile.join_date,
        )

    def to_domain(self) -> Profile:
        return Profile(
            user_id=self.user_id,
            username=self.username,
            total_points=self.total_points,
            level=self.level,
            badges=tuple(Badge(**badge.model_dump()) for badge in self.badges),
            weekly_emission=self.weekly_emission,
            monthly_emission=self.monthly_emission,
            yearly_emission=self.yearly_emission,
            join_date=self.join_date,
        )


_FOOTPRINTS = TypeAdapter(list[FootprintRecordModel])
_CHALLENGES = TypeAdapter(list[ChallengeModel])


def encode_footprints(records: list[FootprintRecord]) -> list[dict[str, object]]:
    """Encode footprint history as JSON-compatible data."""
    return [
        FootprintRecordModel.from_domain(record).model_dump(mode="json")
        for record in records
    ]


def decode_footprints(payload: object) -> list[FootprintRecord]:
    """Decode footprint history, preserving order."""
    try:
        return [model.to_domain() for model in _FOOTPRINTS.validate_python(payload)]
    except (ValidationError, InvalidInputError) as exc:
        raise PersistenceError("Stored footprints are malformed") from exc


def encode_challenges(challenges: list[Challenge]) -> list[dict[str, object]]:
    """Encode the challenge catalog as JSON-compatible data."""
    return [
        ChallengeModel.from_domain(challenge).model_dump(mode="json")
        for challenge in challenges
    ]


def decode_challenges(payload: object) -> list[Challenge]:
    """Decode the challenge catalog, preserving order."""
    try:
        return [model.to_domain() for model in _CHALLENGES.validate_python(payload)]
    except ValidationError as exc:
        raise PersistenceError("Stored challenges are malformed") from exc


def encode_profile(profile: Profile) -> dict[str, object]:
    """Encode a profile snapshot as JSON-compatible data."""
    return ProfileModel.from_domain(profile).model_dump(mode="json")


def decode_profile(payload: object) -> Profile:
    """Decode a profile snapshot."""
    try:
        return ProfileModel.model_validate(payload).to_domain()
    except ValidationError as exc:
        raise PersistenceError("Stored profile is malformed") from exc
