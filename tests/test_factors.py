import pytest

from karbon.utils import factors as f


def test_known_tokens_resolve_to_their_weights():
    assert f.lookup(f.MEAT_FREQUENCY, f.MeatFrequency, "gunluk", 0) == 1300
    assert f.lookup(f.DAILY_DIET, f.DailyDiet, "fast-food", 0) == 500
    assert f.lookup(f.DAILY_TRANSPORT, f.DailyTransport, "toplu-tasima", 0) == 800
    assert f.lookup(f.WATER_USAGE, f.WaterUsage, "fazla", 1.0) == 1.1
    assert f.lookup(f.DIET_MULTIPLIERS, f.DietType, "vegan", 1.0) == 0.5
    assert f.lookup(f.RECYCLING_MULTIPLIERS, f.RecyclingFrequency, "cok", 1.0) == 0.9


def test_enum_members_are_accepted_as_tokens():
    assert f.lookup(f.RENEWABLE_ENERGY, f.YesNo, f.YesNo.YES, 1.0) == 0.8


@pytest.mark.parametrize("token", ["", None, "sometimes", "EVET", "araba "])
def test_unknown_or_empty_tokens_take_the_default(token):
    assert f.lookup(f.RECYCLING, f.YesNo, token, 1.0) == 1.0
    assert f.lookup(f.DAILY_TRANSPORT, f.DailyTransport, token, 0) == 0


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        f.MEAT_FREQUENCY[f.MeatFrequency.DAILY] = 0


def test_every_enum_member_has_a_weight():
    pairs = [
        (f.MEAT_FREQUENCY, f.MeatFrequency),
        (f.DAILY_DIET, f.DailyDiet),
        (f.RECYCLING, f.YesNo),
        (f.RENEWABLE_ENERGY, f.YesNo),
        (f.TREE_PLANTING, f.YesNo),
        (f.LIGHTS_OFF, f.YesNo),
        (f.WATER_USAGE, f.WaterUsage),
        (f.DAILY_TRANSPORT, f.DailyTransport),
        (f.DIET_MULTIPLIERS, f.DietType),
        (f.RECYCLING_MULTIPLIERS, f.RecyclingFrequency),
    ]
    for table, token_type in pairs:
        assert set(table) == set(token_type)


def test_variants_keep_their_own_recycling_factors():
    # habits only knows yes/no, usage knows three frequencies
    assert f.lookup(f.RECYCLING, f.YesNo, "cok", 1.0) == 1.0
    assert f.lookup(f.RECYCLING_MULTIPLIERS, f.RecyclingFrequency, "evet", 1.0) == 1.0
    assert f.lookup(f.RECYCLING, f.YesNo, "hayir", 1.0) == 1.1
    assert f.lookup(f.RECYCLING_MULTIPLIERS, f.RecyclingFrequency, "hic", 1.0) == 1.1
