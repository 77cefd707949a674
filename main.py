"""
Karbon Ayak İzi Hesaplayıcı - Main Application Entry Point

This module serves as the primary entry point for the carbon footprint
calculator. It initializes the core components and routes between the
landing page and the multi-step calculator.

Architecture:
    1. Configuration Setup (config/)
    2. UI Components (ui/)
    3. Page Routing (pages/)
    4. Business Logic (utils/, models/)

Key Responsibilities:
    - Streamlit page configuration and setup
    - Logging system initialization
    - UI theme application
    - Navigation and page routing
    - Session state management

Flow:
    main() → configure → sidebar → route → render_page
"""

import streamlit as st

# Core configuration and setup components
from karbon.config import PAGE_CONFIG, setup_logging, initialize_session_state
st.set_page_config(**PAGE_CONFIG)

# User interface and presentation components
from karbon.ui import UIStyles, Sidebar

# Application pages and views
from karbon.pages import HeroPage, CalculatorPage


def main():
    """
    Main application function that initializes and runs the calculator.

    1. Initializes session state (language, view toggle, wizard session)
    2. Initializes logging
    3. Applies custom UI styling and theme
    4. Renders the sidebar (calculator variant, language, home)
    5. Routes to the landing page or the calculator

    Each Streamlit session owns its own wizard state; nothing is shared
    between sessions or persisted.
    """
    # Must be called after set_page_config()
    initialize_session_state()

    logger = setup_logging()
    logger.debug("Karbon app run started")

    UIStyles.apply_theme()

    sidebar = Sidebar()
    page = sidebar.render()
    logger.debug(f"Routing to page: {page}")

    if page == "hero":
        HeroPage.render()

    elif page == "calculator":
        CalculatorPage.render()

    else:
        # Handle unknown page navigation
        logger.error(f"Unknown page requested: {page}")
        st.error(f"Unknown page: {page}")


if __name__ == "__main__":
    main()
