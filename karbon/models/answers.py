"""Survey answer models using Pydantic."""

import math
import re
from decimal import Decimal, InvalidOperation
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Upper bound for any numeric answer (km, hours, kWh, packages); larger
# entries are clamped so every total stays finite.
MAX_QUANTITY = 1e9

NUMBER_PATTERN = re.compile(r"[-+]?(\d+\.?\d*|\.\d+)(e[-+]?\d+)?", flags=re.I)


def extract_number(v: Any) -> float:
    """Parse a non-negative quantity from user input, clamped to MAX_QUANTITY.

    Only a whole-string number is accepted; text around it, NaN, negatives
    and anything else unusable give 0.
    """
    if v is None or isinstance(v, bool):
        return 0.0
    try:
        if isinstance(v, (int, float)):
            number = float(v)
        else:
            s = str(v).strip()
            s = s.replace('\u2212', '-')   # minus sign → hyphen
            s = s.replace(',', '.')        # European decimals
            if not NUMBER_PATTERN.fullmatch(s):
                return 0.0
            number = float(Decimal(s))
    except (TypeError, ValueError, OverflowError, InvalidOperation):
        return 0.0
    if math.isnan(number) or number < 0:
        return 0.0
    return min(number, MAX_QUANTITY)


def clean_token(v: Any) -> str:
    """Normalise a categorical answer; unanswered becomes the empty token."""
    if v is None:
        return ""
    if hasattr(v, "value"):
        v = v.value
    return str(v).strip()


Token = Annotated[str, BeforeValidator(clean_token)]
Quantity = Annotated[float, BeforeValidator(extract_number), Field(ge=0, le=MAX_QUANTITY)]


class AnswerSection(BaseModel):
    """Base for one wizard section; accepts snake_case or camelCase keys."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class SurveyAnswers(AnswerSection):
    """Full questionnaire for one variant, grouped by section."""

    def with_answer(self, section: str, field: str, value: Any) -> "SurveyAnswers":
        """Return a copy with one field of one section replaced."""
        current = getattr(self, section)
        data = current.model_dump()
        data[field] = value
        updated = type(current).model_validate(data)
        return self.model_copy(update={section: updated})


# Habits variant

class ConsumptionAnswers(AnswerSection):
    meat_frequency: Token = ""
    daily_diet: Token = ""
    monthly_packages: Quantity = 0.0


class EnvironmentAnswers(AnswerSection):
    recycling: Token = ""
    renewable_energy: Token = ""
    tree_planting: Token = ""
    lights_off: Token = ""
    water_usage: Token = ""


class CommuteAnswers(AnswerSection):
    daily_transport: Token = ""
    # Collected by the form state but not used by the habits formula
    car_km: Quantity = 0.0
    public_transport_km: Quantity = 0.0


class HabitsAnswers(SurveyAnswers):
    consumption: ConsumptionAnswers = Field(default_factory=ConsumptionAnswers)
    environment: EnvironmentAnswers = Field(default_factory=EnvironmentAnswers)
    transportation: CommuteAnswers = Field(default_factory=CommuteAnswers)


# Usage variant

class TravelAnswers(AnswerSection):
    car_km: Quantity = 0.0
    public_transport_km: Quantity = 0.0
    flight_hours: Quantity = 0.0


class EnergyAnswers(AnswerSection):
    # Stored annualised; the form multiplies monthly entries by 12
    electricity_kwh: Quantity = 0.0
    natural_gas_kwh: Quantity = 0.0


class LifestyleAnswers(AnswerSection):
    diet_type: Token = ""
    recycling_frequency: Token = ""


class UsageAnswers(SurveyAnswers):
    transportation: TravelAnswers = Field(default_factory=TravelAnswers)
    energy: EnergyAnswers = Field(default_factory=EnergyAnswers)
    lifestyle: LifestyleAnswers = Field(default_factory=LifestyleAnswers)
