"""Header component for the calculator view."""

import streamlit as st
from ..utils.i18n import Translator

class Header:
    """Step progress indicator with the current step's title."""
    
    def __init__(self):
        self.t = Translator.t
    
    def render(self):
        """Render one dot per step, bars between them, then title and description."""
        wizard = st.session_state.wizard
        steps = wizard.calculator.steps
        
        parts = []
        for index, step in enumerate(steps):
            state = "active" if index == wizard.step else ("done" if index < wizard.step else "")
            parts.append(f"<div class='step-dot {state}' title='{step.title}'>{step.icon}</div>")
            if index < len(steps) - 1:
                bar = "done" if index < wizard.step else ""
                parts.append(f"<div class='step-bar {bar}'></div>")
        st.markdown(f"<div class='steps'>{''.join(parts)}</div>", unsafe_allow_html=True)
        
        step = wizard.current_step
        prefix = f"{wizard.variant}.step.{step.key}"
        st.markdown(f"## {self.t(prefix + '.title', step.title)}")
        st.caption(self.t(prefix + ".description", step.description))
