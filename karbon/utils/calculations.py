"""Carbon footprint calculation utilities."""

import logging
from abc import ABC, abstractmethod
from decimal import ROUND_HALF_UP, Decimal
from typing import ClassVar, Dict, Tuple

from ..models.answers import HabitsAnswers, SurveyAnswers, UsageAnswers
from ..models.assessment import CategoryAssessment, CategoryTier, FootprintResult
from ..models.questions import HABITS_STEPS, USAGE_STEPS, Step
from . import factors as f
from .advice import HABITS_TIPS, USAGE_TIPS

logger = logging.getLogger(__name__)

LOW_THRESHOLD = 4000
HIGH_THRESHOLD = 8000


def round_kg(value: float) -> int:
    """Round to the nearest whole kilogram, halves going up."""
    return int(Decimal(repr(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def categorize(total: float) -> CategoryAssessment:
    """Map an annual total (kg CO2e) onto the Low/Medium/High band."""
    if total < LOW_THRESHOLD:
        return CategoryAssessment(
            tier=CategoryTier.LOW,
            label="Düşük",
            color="leaf",
            description="Tebrikler! Karbon ayak iziniz ortalamanın altında.",
        )
    if total < HIGH_THRESHOLD:
        return CategoryAssessment(
            tier=CategoryTier.MEDIUM,
            label="Orta",
            color="earth",
            description="Ortalama seviyedesiniz. Bazı iyileştirmeler yapabilirsiniz.",
        )
    return CategoryAssessment(
        tier=CategoryTier.HIGH,
        label="Yüksek",
        color="destructive",
        description="Karbon ayak izinizi azaltmak için harekete geçme zamanı.",
    )


class FootprintCalculator(ABC):
    """A questionnaire variant: its steps, its formula and its tips."""

    variant: str = ""
    title: str = ""
    steps: ClassVar[Tuple[Step, ...]] = ()
    answers_model = SurveyAnswers

    def empty_answers(self) -> SurveyAnswers:
        return self.answers_model()

    def tips(self) -> Tuple[str, ...]:
        return ()

    @abstractmethod
    def breakdown(self, answers) -> Dict[str, float]:
        """Per-contribution emissions in kg CO2e/year, before rounding."""

    @abstractmethod
    def total(self, answers) -> float:
        """Unrounded annual total in kg CO2e."""

    def compute(self, answers) -> FootprintResult:
        if not isinstance(answers, self.answers_model):
            answers = self.answers_model.model_validate(answers or {})
        result = FootprintResult(
            total_kg=round_kg(self.total(answers)),
            breakdown=self.breakdown(answers),
        )
        logger.debug(f"{self.variant} footprint computed: {result.total_kg} kg")
        return result


class HabitsCalculator(FootprintCalculator):
    """Consumption, environment and transportation habits.

    Additive weights for diet, packages and the daily transport mode form
    the base; five behaviour multipliers then scale the whole base.
    """

    variant = "habits"
    title = "Yaşam Alışkanlıkları"
    steps = HABITS_STEPS
    answers_model = HabitsAnswers

    def tips(self) -> Tuple[str, ...]:
        return HABITS_TIPS

    def base_emissions(self, answers: HabitsAnswers) -> Dict[str, float]:
        consumption = answers.consumption
        return {
            "meat": f.lookup(f.MEAT_FREQUENCY, f.MeatFrequency, consumption.meat_frequency, 0),
            "diet": f.lookup(f.DAILY_DIET, f.DailyDiet, consumption.daily_diet, 0),
            "packages": consumption.monthly_packages * 12 * f.PACKAGE_EMISSION,
            "transport": f.lookup(
                f.DAILY_TRANSPORT, f.DailyTransport, answers.transportation.daily_transport, 0
            ),
        }

    def multiplier(self, answers: HabitsAnswers) -> float:
        env = answers.environment
        recycling = f.lookup(f.RECYCLING, f.YesNo, env.recycling, 1.0)
        renewable = f.lookup(f.RENEWABLE_ENERGY, f.YesNo, env.renewable_energy, 1.0)
        trees = f.lookup(f.TREE_PLANTING, f.YesNo, env.tree_planting, 1.0)
        lights = f.lookup(f.LIGHTS_OFF, f.YesNo, env.lights_off, 1.0)
        water = f.lookup(f.WATER_USAGE, f.WaterUsage, env.water_usage, 1.0)
        return recycling * renewable * trees * lights * water

    def breakdown(self, answers: HabitsAnswers) -> Dict[str, float]:
        factor = self.multiplier(answers)
        return {k: v * factor for k, v in self.base_emissions(answers).items()}

    def total(self, answers: HabitsAnswers) -> float:
        return sum(self.base_emissions(answers).values()) * self.multiplier(answers)


class UsageCalculator(FootprintCalculator):
    """Travel distances, household energy and lifestyle.

    Energy inputs are already annual when they reach the calculator.
    """

    variant = "usage"
    title = "Enerji ve Ulaşım"
    steps = USAGE_STEPS
    answers_model = UsageAnswers

    def tips(self) -> Tuple[str, ...]:
        return USAGE_TIPS

    def breakdown(self, answers: UsageAnswers) -> Dict[str, float]:
        travel = answers.transportation
        energy = answers.energy
        lifestyle = answers.lifestyle
        diet = f.lookup(f.DIET_MULTIPLIERS, f.DietType, lifestyle.diet_type, 1.0)
        recycling = f.lookup(
            f.RECYCLING_MULTIPLIERS, f.RecyclingFrequency, lifestyle.recycling_frequency, 1.0
        )
        return {
            "transport": (
                travel.car_km * f.CAR_PER_KM
                + travel.public_transport_km * f.PUBLIC_TRANSPORT_PER_KM
                + travel.flight_hours * f.FLIGHT_PER_HOUR
            ),
            "energy": (
                energy.electricity_kwh * f.ELECTRICITY_PER_KWH
                + energy.natural_gas_kwh * f.NATURAL_GAS_PER_KWH
            ),
            "lifestyle": f.BASE_FOOD_EMISSIONS * diet * recycling,
        }

    def total(self, answers: UsageAnswers) -> float:
        parts = self.breakdown(answers)
        return parts["transport"] + parts["energy"] + parts["lifestyle"]


CALCULATORS: Dict[str, FootprintCalculator] = {
    HabitsCalculator.variant: HabitsCalculator(),
    UsageCalculator.variant: UsageCalculator(),
}


def get_calculator(variant: str) -> FootprintCalculator:
    """Return the registered calculator for a variant name."""
    return CALCULATORS[variant]
