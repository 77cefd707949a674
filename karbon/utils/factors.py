"""Emission factor tables for both calculator variants.

All weights are kg CO2e per year unless noted otherwise. The two variants
were built independently and disagree on magnitudes and granularity for
comparable behaviour; keep them separate.
"""

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Type, TypeVar

from ..models.tokens import (
    DailyDiet,
    DailyTransport,
    DietType,
    MeatFrequency,
    RecyclingFrequency,
    WaterUsage,
    YesNo,
)

T = TypeVar("T")


def lookup(table: Mapping, token_type: Type[Enum], token, default: T) -> T:
    """Resolve a raw answer token through its enum and return its factor.

    Empty or unknown tokens fall to ``default`` (0 for additive weights,
    1.0 for multipliers) instead of raising.
    """
    if not token:
        return default
    try:
        key = token_type(token)
    except ValueError:
        return default
    return table.get(key, default)


# ---------------------------------------------------------------------------
# Habits variant: consumption / environment / transportation
# ---------------------------------------------------------------------------

# Weekly meat habit, annualised
MEAT_FREQUENCY = MappingProxyType({
    MeatFrequency.DAILY: 1300,
    MeatFrequency.FIVE_SIX_DAYS: 1100,
    MeatFrequency.THREE_FOUR_DAYS: 800,
    MeatFrequency.ONE_TWO_DAYS: 500,
    MeatFrequency.NEVER: 200,
})

DAILY_DIET = MappingProxyType({
    DailyDiet.FAST_FOOD: 500,
    DailyDiet.PROCESSED: 300,
    DailyDiet.HOME_COOKED: 150,
    DailyDiet.ORGANIC: 100,
})

PACKAGE_EMISSION = 2.5  # kg CO2e per package

# Behaviour multipliers
RECYCLING = MappingProxyType({YesNo.YES: 0.9, YesNo.NO: 1.1})
RENEWABLE_ENERGY = MappingProxyType({YesNo.YES: 0.8, YesNo.NO: 1.2})
TREE_PLANTING = MappingProxyType({YesNo.YES: 0.95, YesNo.NO: 1.0})
LIGHTS_OFF = MappingProxyType({YesNo.YES: 0.95, YesNo.NO: 1.05})
WATER_USAGE = MappingProxyType({
    WaterUsage.SAVING: 0.9,
    WaterUsage.NORMAL: 1.0,
    WaterUsage.EXCESSIVE: 1.1,
})

# Main daily mode of transport, annualised
DAILY_TRANSPORT = MappingProxyType({
    DailyTransport.CAR: 2200,
    DailyTransport.MOTORCYCLE: 1200,
    DailyTransport.PUBLIC_TRANSPORT: 800,
    DailyTransport.BICYCLE: 50,
    DailyTransport.WALK: 20,
})


# ---------------------------------------------------------------------------
# Usage variant: transportation / energy / lifestyle
# ---------------------------------------------------------------------------

CAR_PER_KM = 0.21
PUBLIC_TRANSPORT_PER_KM = 0.05
FLIGHT_PER_HOUR = 90.0
ELECTRICITY_PER_KWH = 0.42
NATURAL_GAS_PER_KWH = 0.2

BASE_FOOD_EMISSIONS = 1500.0

DIET_MULTIPLIERS = MappingProxyType({
    DietType.VEGAN: 0.5,
    DietType.VEGETARIAN: 0.7,
    DietType.MIXED: 1.0,
    DietType.MEAT_HEAVY: 1.3,
})

RECYCLING_MULTIPLIERS = MappingProxyType({
    RecyclingFrequency.OFTEN: 0.9,
    RecyclingFrequency.SOMETIMES: 1.0,
    RecyclingFrequency.NEVER: 1.1,
})
