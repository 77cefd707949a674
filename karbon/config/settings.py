"""Application settings and constants."""

import os

import streamlit as st

# Visual Theme
BG = "#F1F5EE"       # Mist
FOREST = "#1F5E3B"   # Primary / navigation
LEAF = "#4CAF50"     # Low band, completed steps
EARTH = "#C58B3C"    # Medium band
DESTRUCTIVE = "#D64545"  # High band
OCEAN = "#2F80A8"    # Chart accent

# Badge colours for the category bands
CATEGORY_COLORS = {
    "leaf": LEAF,
    "earth": EARTH,
    "destructive": DESTRUCTIVE,
}

# Defaults, overridable from the environment
DEFAULT_VARIANT = os.getenv("KARBON_DEFAULT_VARIANT", "habits")
DEFAULT_LANG = os.getenv("KARBON_LANG", "tr")
LOG_LEVEL = os.getenv("KARBON_LOG_LEVEL", "INFO")

SUPPORTED_LANGS = {"tr": "Türkçe", "en": "English"}


def initialize_session_state():
    """Initialize session state defaults. Call after st.set_page_config()."""
    from ..models.session import WizardSession

    if "lang" not in st.session_state:
        st.session_state.lang = DEFAULT_LANG

    if "show_calculator" not in st.session_state:
        st.session_state.show_calculator = False

    if "wizard" not in st.session_state:
        st.session_state.wizard = WizardSession.start(DEFAULT_VARIANT)


# Page configuration
PAGE_CONFIG = {
    "page_title": "Karbon Ayak İzi Hesaplayıcı",
    "page_icon": "🌿",
    "layout": "centered",
    "initial_sidebar_state": "expanded",
}
