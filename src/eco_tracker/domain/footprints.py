"""Domain models for daily carbon footprints."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import ClassVar
from uuid import UUID, uuid4

from eco_tracker.domain.factors import (
    ENERGY_FACTORS,
    FOOD_FACTORS,
    TRANSPORTATION_FACTORS,
    WASTE_FACTORS,
    EmissionCategory,
    weighted_emission,
)
from eco_tracker.errors import InvalidInputError


class CategoryEmission:
    """Shared behaviour for category emission records.

    Subclasses declare one float field per entry in ``factors`` and an
    ``emission`` field that is derived at construction and never passed in.
    """

    category: ClassVar[EmissionCategory]
    factors: ClassVar[dict[str, float]]

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "emission", weighted_emission(self.factors, self.quantities())
        )

    def quantities(self) -> dict[str, float]:
        """Return the raw activity quantities keyed by factor name."""
        return {name: getattr(self, name) for name in self.factors}


@dataclass(frozen=True)
class TransportationEmission(CategoryEmission):
    """Distances travelled in km."""

    category: ClassVar[EmissionCategory] = EmissionCategory.TRANSPORTATION
    factors: ClassVar[dict[str, float]] = TRANSPORTATION_FACTORS

    walking: float = 0.0
    cycling: float = 0.0
    public_transport: float = 0.0
    private_vehicle: float = 0.0
    emission: float = field(init=False, default=0.0)


@dataclass(frozen=True)
class EnergyEmission(CategoryEmission):
    """Household energy use: electricity in kWh, gas and water in m3."""

    category: ClassVar[EmissionCategory] = EmissionCategory.ENERGY
    factors: ClassVar[dict[str, float]] = ENERGY_FACTORS

    electricity_usage: float = 0.0
    gas_usage: float = 0.0
    water_usage: float = 0.0
    emission: float = field(init=False, default=0.0)


@dataclass(frozen=True)
class FoodEmission(CategoryEmission):
    """Food consumed in kg."""

    category: ClassVar[EmissionCategory] = EmissionCategory.FOOD
    factors: ClassVar[dict[str, float]] = FOOD_FACTORS

    meat_consumption: float = 0.0
    dairy_consumption: float = 0.0
    vegetables_consumption: float = 0.0
    processed_food: float = 0.0
    emission: float = field(init=False, default=0.0)


@dataclass(frozen=True)
class WasteEmission(CategoryEmission):
    """Waste produced in kg."""

    category: ClassVar[EmissionCategory] = EmissionCategory.WASTE
    factors: ClassVar[dict[str, float]] = WASTE_FACTORS

    plastic_waste: float = 0.0
    paper_waste: float = 0.0
    organic_waste: float = 0.0
    electronic_waste: float = 0.0
    emission: float = field(init=False, default=0.0)


@dataclass(frozen=True)
class FootprintRecord:
    """One day's footprint across all four categories.

    ``date`` must be timezone-aware so records compare across timezones.
    """

    date: datetime = field(default_factory=lambda: datetime.now(tz=UTC))
    transportation: TransportationEmission = field(
        default_factory=TransportationEmission
    )
    energy: EnergyEmission = field(default_factory=EnergyEmission)
    food: FoodEmission = field(default_factory=FoodEmission)
    waste: WasteEmission = field(default_factory=WasteEmission)
    id: UUID = field(default_factory=uuid4)
    total_emission: float = field(init=False, default=0.0)

    def __post_init__(self) -> None:
        if self.date.tzinfo is None or self.date.utcoffset() is None:
            raise InvalidInputError("date", self.date, "must be timezone-aware")
        object.__setattr__(
            self,
            "total_emission",
            self.transportation.emission
            + self.energy.emission
            + self.food.emission
            + self.waste.emission,
        )

    def breakdown(self) -> dict[EmissionCategory, float]:
        """Return emissions keyed by category."""
        return {
            EmissionCategory.TRANSPORTATION: self.transportation.emission,
            EmissionCategory.ENERGY: self.energy.emission,
            EmissionCategory.FOOD: self.food.emission,
            EmissionCategory.WASTE: self.waste.emission,
        }
