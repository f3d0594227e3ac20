"""Emission calculator: pure conversions from activity quantities to kg CO2e."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import StrEnum
from typing import TypeVar

from eco_tracker.domain.factors import (
    CATEGORY_FACTORS,
    FOOD_GROUP_FACTORS,
    TRANSPORT_MODE_FACTORS,
    EmissionCategory,
    FoodGroup,
    TransportMode,
    checked_quantity,
    weighted_emission,
)
from eco_tracker.domain.footprints import (
    EnergyEmission,
    FoodEmission,
    FootprintRecord,
    TransportationEmission,
    WasteEmission,
)
from eco_tracker.errors import InvalidInputError

_E = TypeVar("_E", bound=StrEnum)


@dataclass(frozen=True)
class FoodItem:
    """Single food item with its weight in kg."""

    name: str
    weight_kg: float
    group: FoodGroup


def _lookup(kind: type[_E], name: str, value: object) -> _E:
    try:
        return kind(value)
    except ValueError as exc:
        raise InvalidInputError(name, value, f"unknown {name}") from exc


def compute_category_emission(
    category: EmissionCategory | str, quantities: Mapping[str, object]
) -> float:
    """Return the emission for one category's quantities.

    Missing quantities count as zero. Negative, non-finite or unknown
    quantities raise InvalidInputError, as does an unknown category.
    """
    factors = CATEGORY_FACTORS[_lookup(EmissionCategory, "category", category)]
    return weighted_emission(factors, quantities)


def compute_total(
    transportation: float, energy: float, food: float, waste: float
) -> float:
    """Return the summed emission of the four categories."""
    return transportation + energy + food + waste


def transport_mode_emission(distance_km: object, mode: TransportMode | str) -> float:
    """Return the emission for a trip of ``distance_km`` using ``mode``."""
    distance = checked_quantity("distance_km", distance_km)
    return distance * TRANSPORT_MODE_FACTORS[_lookup(TransportMode, "mode", mode)]


def food_items_emission(items: Iterable[FoodItem]) -> float:
    """Return the summed emission of individually weighed food items."""
    total = 0.0
    for item in items:
        weight = checked_quantity(item.name, item.weight_kg)
        total += weight * FOOD_GROUP_FACTORS[_lookup(FoodGroup, "group", item.group)]
    return total


def build_record(
    date: datetime | None = None,
    *,
    transportation: Mapping[str, float] | None = None,
    energy: Mapping[str, float] | None = None,
    food: Mapping[str, float] | None = None,
    waste: Mapping[str, float] | None = None,
) -> FootprintRecord:
    """Validate raw quantities for every category and build a record.

    Every category is checked before anything is constructed, so one bad
    quantity rejects the whole record. A given ``date`` must be timezone-aware.
    """
    inputs = {
        EmissionCategory.TRANSPORTATION: dict(transportation or {}),
        EmissionCategory.ENERGY: dict(energy or {}),
        EmissionCategory.FOOD: dict(food or {}),
        EmissionCategory.WASTE: dict(waste or {}),
    }
    for category, quantities in inputs.items():
        compute_category_emission(category, quantities)

    return FootprintRecord(
        date=date or datetime.now(tz=UTC),
        transportation=TransportationEmission(
            **inputs[EmissionCategory.TRANSPORTATION]
        ),
        energy=EnergyEmission(**inputs[EmissionCategory.ENERGY]),
        food=FoodEmission(**inputs[EmissionCategory.FOOD]),
        waste=WasteEmission(**inputs[EmissionCategory.WASTE]),
    )
