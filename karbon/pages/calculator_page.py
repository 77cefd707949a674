"""Multi-step questionnaire page."""

import streamlit as st
from ..config.logging_config import setup_logging
from ..models.questions import Question, QuestionKind, Step
from ..ui.header import Header
from ..utils.i18n import Translator
from .results_page import ResultsPage

logger = setup_logging()

WIDGET_PREFIX = "q::"


class CalculatorPage:
    """Wizard page: progress, current step's questions and navigation."""

    @staticmethod
    def widget_key(variant: str, section: str, field: str) -> str:
        return f"{WIDGET_PREFIX}{variant}::{section}::{field}"

    @staticmethod
    def clear_widgets():
        """Drop cached widget values so inputs re-read the wizard answers."""
        for key in [k for k in st.session_state.keys() if str(k).startswith(WIDGET_PREFIX)]:
            del st.session_state[key]

    @staticmethod
    def _render_select(question: Question, label: str, key: str, current: str):
        t = Translator.t
        variant = st.session_state.wizard.variant
        tokens = [""] + [option.token for option in question.options]

        def format_option(token: str) -> str:
            if not token:
                return t(f"{variant}.{question.field}.placeholder", question.placeholder or "—")
            return t(f"{variant}.{question.field}.{token}", question.option_label(token))

        return st.selectbox(
            label,
            options=tokens,
            index=tokens.index(current) if current in tokens else 0,
            format_func=format_option,
            key=key,
        )

    @staticmethod
    def _render_number(question: Question, label: str, key: str, current: float):
        entered = st.number_input(
            label,
            min_value=0.0,
            max_value=question.max_entry,
            value=float(question.entered_value(current)),
            step=1.0,
            key=key,
        )
        return question.stored_value(entered)

    @staticmethod
    def _render_questions(step: Step):
        """Render the step's questions two per row and write answers back."""
        t = Translator.t
        wizard = st.session_state.wizard
        section = getattr(wizard.answers, step.section)

        slots = []
        for question in step.questions:
            if question.wide:
                target = st.container()
                slots = []
            else:
                if not slots:
                    slots = list(st.columns(2))
                target = slots.pop(0)

            label = t(f"{wizard.variant}.{question.field}.label", question.label)
            key = CalculatorPage.widget_key(wizard.variant, step.section, question.field)
            current = getattr(section, question.field)
            with target:
                if question.kind == QuestionKind.SELECT:
                    value = CalculatorPage._render_select(question, label, key, current)
                else:
                    value = CalculatorPage._render_number(question, label, key, current)

            if value != current:
                wizard = wizard.with_answer(step.section, question.field, value)
        st.session_state.wizard = wizard

    @staticmethod
    def _render_navigation():
        t = Translator.t
        wizard = st.session_state.wizard
        back, _, forward = st.columns([1, 2, 1])

        with back:
            if st.button(t("nav.back", "Geri"), key="nav_back", disabled=wizard.is_first_step,
                         use_container_width=True):
                st.session_state.wizard = wizard.prev_step()
                logger.debug(f"Wizard back to step {st.session_state.wizard.step}")
                st.rerun()

        with forward:
            if wizard.is_results_step:
                if st.button(t("nav.reset", "Yeniden Hesapla"), key="nav_reset", type="primary",
                             use_container_width=True):
                    logger.info(f"Wizard reset ({wizard.variant})")
                    st.session_state.wizard = wizard.reset()
                    CalculatorPage.clear_widgets()
                    st.rerun()
            else:
                label = t("nav.calculate", "Hesapla") if wizard.is_last_input_step else t("nav.next", "İleri")
                if st.button(label, key="nav_next", type="primary", use_container_width=True):
                    st.session_state.wizard = wizard.next_step()
                    logger.debug(f"Wizard advanced to step {st.session_state.wizard.step}")
                    st.rerun()

    @staticmethod
    def render():
        """Render the complete calculator page."""
        Header().render()

        wizard = st.session_state.wizard
        step = wizard.current_step
        with st.container(border=True):
            if step.is_results:
                ResultsPage.render(wizard)
            else:
                CalculatorPage._render_questions(step)
            CalculatorPage._render_navigation()
