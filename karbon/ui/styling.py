"""UI styling and theming."""

import streamlit as st
from ..config.settings import BG, FOREST, LEAF, OCEAN
from ..config.paths import HERO_IMAGE_CANDIDATES
from ..utils.file_utils import FileUtils

class UIStyles:
    """Manages UI styling and theme application."""
    
    @staticmethod
    def apply_theme():
        """Apply the custom theme styling to the Streamlit app."""
        hero_css = FileUtils.create_background_css(
            FileUtils.load_image_bytes(HERO_IMAGE_CANDIDATES)
        )
        
        theme_css = f"""
        <style>
          {hero_css}

          .stApp {{
            background: {BG};
            color: #1B2A22;
          }}

          h1, h2, h3, h4, .brand-title {{
            font-weight: 600 !important;
            letter-spacing: 0.2px;
          }}

          .brand-title {{ font-size: 26px; text-align: center; color: {FOREST}; }}

          .hero {{
            position: relative;
            overflow: hidden;
            padding: 48px 24px;
            border-radius: 16px;
            text-align: center;
            color: #fff;
            background: linear-gradient(135deg, {FOREST} 0%, {OCEAN} 100%);
          }}
          .hero > * {{ position: relative; z-index: 1; }}
          .hero h1 {{ font-size: 48px; line-height: 1.1; margin-bottom: 16px; color: #fff; }}
          .hero h1 span {{ display: block; color: {LEAF}; }}
          .hero p {{ font-size: 19px; opacity: 0.9; }}

          .hero-badge {{
            display: inline-block;
            padding: 6px 16px;
            margin-bottom: 18px;
            border-radius: 999px;
            background: rgba(255,255,255,0.18);
            font-size: 14px;
            font-weight: 500;
          }}

          .feature-card {{
            border-radius: 12px;
            padding: 18px;
            text-align: center;
            background: rgba(255,255,255,0.75);
            border: 1px solid rgba(31,94,59,0.15);
            min-height: 160px;
          }}
          .feature-card .icon {{ font-size: 28px; }}

          .stat {{ text-align: center; }}
          .stat .number {{ font-size: 28px; font-weight: 700; color: {FOREST}; }}
          .stat .label {{ font-size: 13px; opacity: 0.7; }}

          .steps {{
            display: flex;
            align-items: center;
            justify-content: space-between;
            margin-bottom: 16px;
          }}
          .step-dot {{
            width: 44px;
            height: 44px;
            border-radius: 50%;
            border: 2px solid #C9D3CB;
            display: flex;
            align-items: center;
            justify-content: center;
            background: #fff;
            font-size: 20px;
          }}
          .step-dot.active {{ background: {FOREST}; border-color: {FOREST}; }}
          .step-dot.done {{ background: {LEAF}; border-color: {LEAF}; }}
          .step-bar {{ flex: 1; height: 4px; margin: 0 8px; border-radius: 4px; background: #C9D3CB; }}
          .step-bar.done {{ background: {LEAF}; }}

          .result-total {{ text-align: center; font-size: 40px; font-weight: 700; margin: 0; }}

          .badge {{
            display: inline-block;
            padding: 8px 18px;
            border-radius: 999px;
            color: #fff;
            font-size: 18px;
            font-weight: 600;
          }}

          .tip {{
            padding: 10px 14px;
            margin-bottom: 8px;
            border-radius: 8px;
            background: rgba(255,255,255,0.7);
            font-size: 14px;
          }}
        </style>
        """
        
        st.markdown(theme_css, unsafe_allow_html=True)
