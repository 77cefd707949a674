from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

APP = str(Path(__file__).resolve().parent.parent / "main.py")


def _key(variant, section, field):
    return f"q::{variant}::{section}::{field}"


@pytest.fixture
def app():
    at = AppTest.from_file(APP, default_timeout=30)
    at.run()
    assert not at.exception
    return at


def _start(at):
    at.button(key="start_calculation").click().run()
    assert at.session_state["show_calculator"] is True
    return at


def test_landing_page_is_shown_first(app):
    assert app.session_state["show_calculator"] is False
    assert app.session_state["wizard"].step == 0
    assert app.button(key="start_calculation")


def test_habits_flow_computes_and_resets(app):
    at = _start(app)

    at.selectbox(key=_key("habits", "consumption", "meat_frequency")).set_value("hic").run()
    at.selectbox(key=_key("habits", "consumption", "daily_diet")).set_value("organik").run()
    at.button(key="nav_next").click().run()
    assert at.session_state["wizard"].step == 1

    for field in ("recycling", "renewable_energy", "tree_planting", "lights_off"):
        at.selectbox(key=_key("habits", "environment", field)).set_value("evet").run()
    at.selectbox(key=_key("habits", "environment", "water_usage")).set_value("tasarruf").run()
    at.button(key="nav_next").click().run()

    at.selectbox(key=_key("habits", "transportation", "daily_transport")).set_value("yuru").run()
    at.button(key="nav_next").click().run()

    wizard = at.session_state["wizard"]
    assert not at.exception
    assert wizard.is_results_step
    assert wizard.result.total_kg == 187

    at.button(key="nav_reset").click().run()
    wizard = at.session_state["wizard"]
    assert wizard.step == 0
    assert wizard.result is None
    assert wizard.answers.consumption.meat_frequency == ""


def test_back_button_keeps_answers(app):
    at = _start(app)
    at.number_input(key=_key("habits", "consumption", "monthly_packages")).set_value(4).run()
    at.button(key="nav_next").click().run()
    at.button(key="nav_back").click().run()
    wizard = at.session_state["wizard"]
    assert wizard.step == 0
    assert wizard.answers.consumption.monthly_packages == 4


def test_usage_variant_stores_monthly_energy_annualised(app):
    at = app
    at.radio(key="variant_choice").set_value("usage").run()
    at = _start(at)
    assert at.session_state["wizard"].variant == "usage"

    at.number_input(key=_key("usage", "transportation", "car_km")).set_value(1000).run()
    at.button(key="nav_next").click().run()
    at.number_input(key=_key("usage", "energy", "electricity_kwh")).set_value(100).run()
    assert at.session_state["wizard"].answers.energy.electricity_kwh == 1200

    at.button(key="nav_next").click().run()
    at.selectbox(key=_key("usage", "lifestyle", "diet_type")).set_value("vegan").run()
    at.selectbox(key=_key("usage", "lifestyle", "recycling_frequency")).set_value("cok").run()
    at.button(key="nav_next").click().run()

    assert not at.exception
    # 210 + 1200 * 0.42 + 675
    assert at.session_state["wizard"].result.total_kg == 1389
