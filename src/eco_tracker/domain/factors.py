"""Emission factor tables in kg CO2e per unit."""

import math
from collections.abc import Mapping
from enum import StrEnum

from eco_tracker.errors import InvalidInputError


class EmissionCategory(StrEnum):
    """Footprint categories with their own factor table."""

    TRANSPORTATION = "transportation"
    ENERGY = "energy"
    FOOD = "food"
    WASTE = "waste"


TRANSPORTATION_FACTORS = {
    "walking": 0.0,
    "cycling": 0.0,
    "public_transport": 0.1,
    "private_vehicle": 0.2,
}

ENERGY_FACTORS = {
    "electricity_usage": 0.7,
    "gas_usage": 1.9,
    "water_usage": 0.3,
}

FOOD_FACTORS = {
    "meat_consumption": 27.0,
    "dairy_consumption": 3.2,
    "vegetables_consumption": 2.0,
    "processed_food": 3.5,
}

WASTE_FACTORS = {
    "plastic_waste": 6.0,
    "paper_waste": 1.3,
    "organic_waste": 0.5,
    "electronic_waste": 12.0,
}

CATEGORY_FACTORS: dict[EmissionCategory, dict[str, float]] = {
    EmissionCategory.TRANSPORTATION: TRANSPORTATION_FACTORS,
    EmissionCategory.ENERGY: ENERGY_FACTORS,
    EmissionCategory.FOOD: FOOD_FACTORS,
    EmissionCategory.WASTE: WASTE_FACTORS,
}


class TransportMode(StrEnum):
    """Individual ways of getting around town."""

    WALKING = "walking"
    CYCLING = "cycling"
    BUS = "bus"
    MTR = "mtr"
    TAXI = "taxi"
    PRIVATE_CAR = "private_car"
    MOTORCYCLE = "motorcycle"


TRANSPORT_MODE_FACTORS = {
    TransportMode.WALKING: 0.0,
    TransportMode.CYCLING: 0.0,
    TransportMode.BUS: 0.1,
    TransportMode.MTR: 0.08,
    TransportMode.TAXI: 0.25,
    TransportMode.PRIVATE_CAR: 0.2,
    TransportMode.MOTORCYCLE: 0.15,
}


class FoodGroup(StrEnum):
    """Food groups for itemised meal estimates."""

    MEAT = "meat"
    DAIRY = "dairy"
    VEGETABLES = "vegetables"
    FRUITS = "fruits"
    GRAINS = "grains"
    PROCESSED = "processed"


FOOD_GROUP_FACTORS = {
    FoodGroup.MEAT: 27.0,
    FoodGroup.DAIRY: 3.2,
    FoodGroup.VEGETABLES: 2.0,
    FoodGroup.FRUITS: 1.5,
    FoodGroup.GRAINS: 1.8,
    FoodGroup.PROCESSED: 3.5,
}


def checked_quantity(name: str, value: object) -> float:
    """Return a quantity as float, rejecting negative and non-finite values."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise InvalidInputError(name, value, "must be a number")
    quantity = float(value)
    if not math.isfinite(quantity) or quantity < 0:
        raise InvalidInputError(name, value)
    return quantity


def weighted_emission(
    factors: Mapping[str, float], quantities: Mapping[str, object]
) -> float:
    """Return sum(quantity * factor) after validating every quantity."""
    unknown = set(quantities) - set(factors)
    if unknown:
        name = sorted(unknown)[0]
        raise InvalidInputError(name, quantities[name], "unknown quantity")
    checked = {
        name: checked_quantity(name, quantities.get(name, 0.0)) for name in factors
    }
    return sum(checked[name] * factor for name, factor in factors.items())
