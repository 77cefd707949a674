"""Internationalization utilities."""

import json
import logging
import streamlit as st
from functools import lru_cache
from typing import Optional
from ..config.paths import LANG_FILE_DIR
from ..config.settings import DEFAULT_LANG

logger = logging.getLogger(__name__)


@lru_cache(maxsize=8)
def _load_catalog(lang: str) -> dict:
    path = LANG_FILE_DIR / f"{lang}.json"
    if not path.exists():
        return {}
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        logger.warning(f"Could not read translations from {path}")
        return {}


class Translator:
    """Handles translation and internationalization.

    Turkish text lives in the code as the default; other languages are
    looked up in ``assets/i18n/<lang>.json``.
    """
    
    @staticmethod
    def t(key: str, default: Optional[str] = None) -> str:
        """Translate a key to the current language."""
        lang = st.session_state.get("lang", DEFAULT_LANG)
        return _load_catalog(lang).get(key, default or key)
    
    @staticmethod
    def set_language(lang_code: str):
        """Set the current language."""
        st.session_state.lang = lang_code
    
    @staticmethod
    def get_language() -> str:
        """Get the current language code."""
        return st.session_state.get("lang", DEFAULT_LANG)
