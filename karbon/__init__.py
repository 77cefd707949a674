"""Karbon Ayak İzi: Streamlit carbon footprint questionnaire."""
