"""Results step: total, category band, breakdown chart and tips."""

import streamlit as st
import pandas as pd
import plotly.express as px
import logging
from ..config.settings import BG, CATEGORY_COLORS, FOREST
from ..models.session import WizardSession
from ..utils.calculations import categorize
from ..utils.i18n import Translator

logger = logging.getLogger(__name__)

BREAKDOWN_LABELS = {
    "meat": "Et tüketimi",
    "diet": "Beslenme",
    "packages": "Kargo",
    "transport": "Ulaşım",
    "energy": "Enerji",
    "lifestyle": "Yaşam tarzı",
}


def format_tonnes(total_kg: int) -> str:
    """Kilograms to tonnes with one decimal, as shown to the user."""
    return f"{total_kg / 1000:.1f}"


class ResultsPage:
    """Results view rendered on the final wizard step."""

    @staticmethod
    def breakdown_frame(breakdown: dict) -> pd.DataFrame:
        """Build the chart table; contributions are shown in whole kilograms."""
        t = Translator.t
        rows = [
            {
                "Source": t(f"breakdown.{key}", BREAKDOWN_LABELS.get(key, key)),
                "CO2e (kg)": round(value),
            }
            for key, value in breakdown.items()
        ]
        return pd.DataFrame(rows, columns=["Source", "CO2e (kg)"])

    @staticmethod
    def render(wizard: WizardSession):
        """Render the results of a completed questionnaire."""
        if wizard.result is None:
            st.info(Translator.t("results.missing", "Sonuç henüz hesaplanmadı."))
            return

        result = wizard.result
        ResultsPage._render_summary(result.total_kg)
        st.divider()
        ResultsPage._render_breakdown(result.breakdown)
        st.divider()
        ResultsPage._render_tips(wizard.variant, wizard.calculator.tips())

    @staticmethod
    def _render_summary(total_kg: int):
        t = Translator.t
        assessment = categorize(total_kg)
        level = t(f"category.{assessment.tier.value}", assessment.label)
        st.markdown(
            f"<p class='result-total'>{format_tonnes(total_kg)} {t('results.unit', 'ton CO₂')}</p>",
            unsafe_allow_html=True
        )
        st.markdown(
            f"<p style='text-align:center'>{t('results.caption', 'Yıllık karbon ayak iziniz')}</p>",
            unsafe_allow_html=True
        )
        st.markdown(
            f"<div style='text-align:center'><span class='badge' "
            f"style='background:{CATEGORY_COLORS[assessment.color]}'>"
            f"{level} {t('results.level', 'Seviye')}</span></div>",
            unsafe_allow_html=True
        )
        st.markdown(
            f"<p style='text-align:center;margin-top:12px'>"
            f"{t(f'category.{assessment.tier.value}.description', assessment.description)}</p>",
            unsafe_allow_html=True
        )

    @staticmethod
    def _render_breakdown(breakdown: dict):
        df = ResultsPage.breakdown_frame(breakdown)
        if df.empty or df["CO2e (kg)"].sum() == 0:
            return

        fig = px.bar(
            df, x="Source", y="CO2e (kg)",
            title=Translator.t("results.breakdown", "Emisyon Dağılımı"),
            color_discrete_sequence=[FOREST],
        )
        fig.update_layout(
            plot_bgcolor=BG, paper_bgcolor=BG,
            font=dict(color="#000", size=14),
            title_x=0.5, title_font_size=20,
            xaxis_title=None,
        )
        st.plotly_chart(fig, use_container_width=True)

    @staticmethod
    def _render_tips(variant: str, tips):
        t = Translator.t
        st.markdown(f"#### {t('results.tips', 'Kişiselleştirilmiş Öneriler:')}")
        for index, tip in enumerate(tips):
            st.markdown(
                f"<div class='tip'>🌿 {t(f'tips.{variant}.{index}', tip)}</div>",
                unsafe_allow_html=True
            )
