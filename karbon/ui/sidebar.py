"""Sidebar component for navigation."""

import logging
import streamlit as st
from ..config.settings import SUPPORTED_LANGS
from ..utils.calculations import CALCULATORS
from ..utils.i18n import Translator

logger = logging.getLogger(__name__)

class Sidebar:
    """Application sidebar for navigation, calculator and language choice."""
    
    def __init__(self):
        self.t = Translator.t
    
    def _render_language(self):
        codes = list(SUPPORTED_LANGS)
        current = Translator.get_language()
        lang = st.selectbox(
            self.t("sidebar.language", "Dil"),
            options=codes,
            index=codes.index(current) if current in codes else 0,
            format_func=lambda code: SUPPORTED_LANGS[code],
            key="lang_choice",
        )
        if lang != current:
            Translator.set_language(lang)
            st.rerun()
    
    def _render_variant(self):
        variants = list(CALCULATORS)
        wizard = st.session_state.wizard
        choice = st.radio(
            self.t("sidebar.variant", "Hesaplayıcı"),
            options=variants,
            index=variants.index(wizard.variant),
            format_func=lambda v: self.t(f"{v}.title", CALCULATORS[v].title),
            key="variant_choice",
        )
        if choice != wizard.variant:
            logger.info(f"Calculator variant changed: {wizard.variant} -> {choice}")
            st.session_state.wizard = wizard.switch_variant(choice)
    
    def render(self) -> str:
        """Render the sidebar and return the selected page."""
        with st.sidebar:
            st.markdown(
                f"<div class='brand-title'>🌿 {self.t('brand', 'Karbon Ayak İzi')}</div>",
                unsafe_allow_html=True
            )
            
            self._render_variant()
            self._render_language()
            
            st.markdown("---")
            if st.session_state.show_calculator:
                if st.button(self.t("sidebar.home", "Ana Sayfa"), key="go_home"):
                    st.session_state.show_calculator = False
                    st.rerun()
        
        return "calculator" if st.session_state.show_calculator else "hero"
