import pytest

from karbon.models.answers import HabitsAnswers, UsageAnswers
from karbon.models.assessment import CategoryTier
from karbon.utils.advice import HABITS_TIPS, USAGE_TIPS
from karbon.utils.calculations import (
    HabitsCalculator,
    UsageCalculator,
    categorize,
    get_calculator,
    round_kg,
)


@pytest.fixture
def habits():
    return get_calculator("habits")


@pytest.fixture
def usage():
    return get_calculator("usage")


def test_registry_returns_both_variants():
    assert isinstance(get_calculator("habits"), HabitsCalculator)
    assert isinstance(get_calculator("usage"), UsageCalculator)
    with pytest.raises(KeyError):
        get_calculator("unknown")


# Habits variant

def test_habits_empty_answers_give_zero(habits):
    assert habits.compute(HabitsAnswers()).total_kg == 0
    assert habits.compute({}).total_kg == 0


def test_habits_literal_case(habits):
    answers = HabitsAnswers.model_validate({
        "consumption": {"meatFrequency": "hic", "dailyDiet": "organik", "monthlyPackages": 0},
        "environment": {
            "recycling": "evet",
            "renewableEnergy": "evet",
            "treePlanting": "evet",
            "lightsOff": "evet",
            "waterUsage": "tasarruf",
        },
        "transportation": {"dailyTransport": "yuru"},
    })
    assert sum(habits.base_emissions(answers).values()) == 320
    assert habits.multiplier(answers) == pytest.approx(0.58482)
    assert habits.compute(answers).total_kg == 187


def test_habits_packages_are_annualised(habits):
    answers = HabitsAnswers(consumption={"monthly_packages": 10})
    assert habits.compute(answers).total_kg == 300


def test_habits_multipliers_scale_the_whole_base(habits):
    answers = HabitsAnswers(
        consumption={"meat_frequency": "gunluk", "daily_diet": "fast-food"},
        environment={"recycling": "hayir", "renewable_energy": "hayir"},
        transportation={"daily_transport": "araba"},
    )
    # (1300 + 500 + 2200) * 1.1 * 1.2
    assert habits.compute(answers).total_kg == 5280


def test_habits_unused_distances_do_not_count(habits):
    answers = HabitsAnswers(transportation={"car_km": 5000, "public_transport_km": 100})
    assert habits.compute(answers).total_kg == 0


def test_habits_breakdown_sums_to_total(habits):
    answers = HabitsAnswers(
        consumption={"meat_frequency": "3-4-gun", "monthly_packages": 4},
        environment={"water_usage": "fazla"},
        transportation={"daily_transport": "motosiklet"},
    )
    result = habits.compute(answers)
    assert set(result.breakdown) == {"meat", "diet", "packages", "transport"}
    assert round_kg(sum(result.breakdown.values())) == result.total_kg


# Usage variant

def test_usage_empty_answers_give_base_food_emissions(usage):
    assert usage.compute(UsageAnswers()).total_kg == 1500
    assert usage.compute(None).total_kg == 1500


def test_usage_literal_case(usage):
    answers = UsageAnswers.model_validate({
        "transportation": {"carKm": 1000, "publicTransportKm": 0, "flightHours": 0},
        "energy": {"electricityKwh": 0, "naturalGasKwh": 0},
        "lifestyle": {"dietType": "vegan", "recyclingFrequency": "cok"},
    })
    parts = usage.breakdown(answers)
    assert parts["transport"] == pytest.approx(210)
    assert parts["energy"] == 0
    assert parts["lifestyle"] == pytest.approx(675)
    assert usage.compute(answers).total_kg == 885


def test_usage_energy_is_not_rescaled(usage):
    # 3600 kWh stored as the annual figure
    answers = UsageAnswers(energy={"electricity_kwh": 3600, "natural_gas_kwh": 1000})
    assert usage.compute(answers).total_kg == round_kg(3600 * 0.42 + 1000 * 0.2 + 1500)


def test_usage_flights(usage):
    answers = UsageAnswers(transportation={"flight_hours": 10})
    assert usage.compute(answers).total_kg == 2400


# Shared properties

@pytest.mark.parametrize("variant, section, field", [
    ("habits", "consumption", "monthly_packages"),
    ("usage", "transportation", "car_km"),
    ("usage", "transportation", "public_transport_km"),
    ("usage", "transportation", "flight_hours"),
    ("usage", "energy", "electricity_kwh"),
    ("usage", "energy", "natural_gas_kwh"),
])
def test_numeric_inputs_are_monotonic(variant, section, field):
    calculator = get_calculator(variant)
    answers = calculator.empty_answers()
    previous = calculator.compute(answers).total_kg
    for value in (1, 5, 12.5, 100, 2500, 1e12, 1e307, 1e308, float("inf")):
        answers = answers.with_answer(section, field, value)
        total = calculator.compute(answers).total_kg
        assert total >= previous
        previous = total


@pytest.mark.parametrize("variant", ["habits", "usage"])
def test_compute_is_deterministic(variant):
    calculator = get_calculator(variant)
    answers = calculator.empty_answers()
    for section in type(answers).model_fields:
        for field in type(getattr(answers, section)).model_fields:
            answers = answers.with_answer(section, field, 7)
    assert calculator.compute(answers) == calculator.compute(answers)


def test_round_kg_rounds_halves_up():
    assert round_kg(0.5) == 1
    assert round_kg(2.5) == 3
    assert round_kg(186.49) == 186
    assert round_kg(0) == 0


# Categorizer

@pytest.mark.parametrize("total, tier", [
    (0, CategoryTier.LOW),
    (3999, CategoryTier.LOW),
    (3999.99, CategoryTier.LOW),
    (4000, CategoryTier.MEDIUM),
    (7999, CategoryTier.MEDIUM),
    (8000, CategoryTier.HIGH),
    (25000, CategoryTier.HIGH),
])
def test_categorize_boundaries(total, tier):
    assert categorize(total).tier == tier


def test_categorize_texts():
    low = categorize(100)
    assert (low.label, low.color) == ("Düşük", "leaf")
    assert low.description == "Tebrikler! Karbon ayak iziniz ortalamanın altında."
    medium = categorize(5000)
    assert (medium.label, medium.color) == ("Orta", "earth")
    high = categorize(9000)
    assert (high.label, high.color) == ("Yüksek", "destructive")
    assert high.description == "Karbon ayak izinizi azaltmak için harekete geçme zamanı."


# Advice

def test_tips_are_static(habits, usage):
    assert habits.tips() == HABITS_TIPS
    assert len(habits.tips()) == 9
    assert len(usage.tips()) == 4
    assert usage.tips() == USAGE_TIPS


@pytest.mark.parametrize("variant", ["habits", "usage"])
@pytest.mark.parametrize("value", [1e15, 1e307, 1e308, "1e400"])
def test_extreme_numeric_inputs_give_a_finite_result(variant, value):
    calculator = get_calculator(variant)
    answers = calculator.empty_answers()
    for section in type(answers).model_fields:
        section_model = type(getattr(answers, section))
        for field, info in section_model.model_fields.items():
            if info.annotation is float:
                answers = answers.with_answer(section, field, value)
    result = calculator.compute(answers)
    assert result.total_kg > 0
    assert categorize(result.total_kg).tier == CategoryTier.HIGH


def test_step_lists_are_immutable_and_not_shared():
    assert isinstance(HabitsCalculator.steps, tuple)
    assert isinstance(UsageCalculator.steps, tuple)
    assert HabitsCalculator.steps is not UsageCalculator.steps
    with pytest.raises(AttributeError):
        HabitsCalculator.steps.append(None)
