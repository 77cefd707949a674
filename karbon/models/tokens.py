"""Answer tokens stored for the categorical questions of both variants."""

from enum import Enum


# Habits variant

class MeatFrequency(str, Enum):
    DAILY = "gunluk"
    FIVE_SIX_DAYS = "5-6-gun"
    THREE_FOUR_DAYS = "3-4-gun"
    ONE_TWO_DAYS = "1-2-gun"
    NEVER = "hic"


class DailyDiet(str, Enum):
    FAST_FOOD = "fast-food"
    PROCESSED = "islenmis"
    HOME_COOKED = "evde"
    ORGANIC = "organik"


class YesNo(str, Enum):
    YES = "evet"
    NO = "hayir"


class WaterUsage(str, Enum):
    SAVING = "tasarruf"
    NORMAL = "normal"
    EXCESSIVE = "fazla"


class DailyTransport(str, Enum):
    CAR = "araba"
    MOTORCYCLE = "motosiklet"
    PUBLIC_TRANSPORT = "toplu-tasima"
    BICYCLE = "bisiklet"
    WALK = "yuru"


# Usage variant

class DietType(str, Enum):
    VEGAN = "vegan"
    VEGETARIAN = "vejetaryen"
    MIXED = "karisik"
    MEAT_HEAVY = "etcil"


class RecyclingFrequency(str, Enum):
    OFTEN = "cok"
    SOMETIMES = "bazen"
    NEVER = "hic"
