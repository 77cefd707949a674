"""Landing page shown before the calculator."""

import logging
import streamlit as st
from ..utils.i18n import Translator

logger = logging.getLogger(__name__)

FEATURES = [
    ("🧮", "feature.easy", "Kolay Hesaplama",
     "Birkaç basit soruyla karbon ayak izinizi hesaplayın"),
    ("📉", "feature.tips", "Azaltma Önerileri",
     "Kişiselleştirilmiş çevre dostu öneriler alın"),
    ("🌍", "feature.awareness", "Çevre Bilinci",
     "Gezegenimizi korumak için attığınız adımları izleyin"),
]

STATS = [
    ("2.4M+", "stats.footprints", "Hesaplanan Ayak İzi"),
    ("15%", "stats.reduction", "Ortalama Azalma"),
    ("50+", "stats.tips", "Azaltma Önerisi"),
    ("24/7", "stats.available", "Erişilebilir"),
]


class HeroPage:
    """Marketing view with the entry point into the calculator."""

    @staticmethod
    def about_content() -> dict:
        """Return the "learn more" sections."""
        t = Translator.t
        return {
            t("about.what", "Karbon ayak izi nedir?"): t("about.what.body", """
Karbon ayak izi, yaşam tarzınızın bir yılda atmosfere saldığı sera gazlarının
CO₂ eşdeğeri (CO₂e) cinsinden toplamıdır.
"""),
            t("about.how", "Nasıl hesaplıyoruz?"): t("about.how.body", """
- Her cevap sabit bir emisyon faktörüne karşılık gelir (kg CO₂e / yıl).
- Sayısal girdiler (km, saat, kWh, kargo) birim katsayılarla çarpılır.
- Geri dönüşüm gibi davranışlar toplamı bir çarpanla azaltır veya artırır.
- Sonuç en yakın kilograma yuvarlanır ve ton olarak gösterilir.
"""),
            t("about.levels", "Seviyeler"): t("about.levels.body", """
| Seviye | Yıllık emisyon |
|---|---|
| Düşük | 4 ton altı |
| Orta | 4 - 8 ton |
| Yüksek | 8 ton ve üzeri |
"""),
        }

    @staticmethod
    def _render_hero():
        t = Translator.t
        st.markdown(
            f"""
            <div class='hero'>
              <div class='hero-badge'>🌿 {t("hero.badge", "Sürdürülebilir Gelecek")}</div>
              <h1>{t("hero.title", "Karbon Ayak İzinizi")}
                <span>{t("hero.title.accent", "Keşfedin")}</span></h1>
              <p>{t("hero.lead", "Çevre dostu yaşam tarzınızı ölçün ve gezegenimizi korumak için "
                                 "somut adımlar atın. Birkaç dakikada karbon ayak izinizi hesaplayın.")}</p>
            </div>
            """,
            unsafe_allow_html=True
        )

    @staticmethod
    def _render_features():
        t = Translator.t
        for col, (icon, key, title, description) in zip(st.columns(len(FEATURES)), FEATURES):
            col.markdown(
                f"<div class='feature-card'><div class='icon'>{icon}</div>"
                f"<h4>{t(key + '.title', title)}</h4>"
                f"<p>{t(key + '.description', description)}</p></div>",
                unsafe_allow_html=True
            )

    @staticmethod
    def _render_stats():
        t = Translator.t
        for col, (number, key, label) in zip(st.columns(len(STATS)), STATS):
            col.markdown(
                f"<div class='stat'><div class='number'>{number}</div>"
                f"<div class='label'>{t(key, label)}</div></div>",
                unsafe_allow_html=True
            )

    @staticmethod
    def render():
        """Render the landing page."""
        t = Translator.t
        HeroPage._render_hero()

        left, right = st.columns(2)
        with left:
            if st.button(f"🧮 {t('hero.start', 'Hemen Hesapla')}", key="start_calculation",
                         type="primary", use_container_width=True):
                logger.info("Calculator started from landing page")
                st.session_state.show_calculator = True
                st.rerun()
        with right:
            show_more = st.toggle(t("hero.more", "Daha Fazla Bilgi"), key="show_about")

        if show_more:
            for title, body in HeroPage.about_content().items():
                with st.expander(title, expanded=True):
                    st.markdown(body)

        st.write("")
        HeroPage._render_features()
        st.write("")
        HeroPage._render_stats()
