"""PDF Stamper Frontend Application.

Streamlit app that builds stamp configurations and sends them to the
stamping service.
"""

import logging
import sys
from pathlib import Path

# Load environment variables from .env file BEFORE any other imports
# This ensures API_BASE_URL and friends are visible to the config module
from dotenv import load_dotenv
load_dotenv(Path(__file__).parent.parent / ".env")

import streamlit as st

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from frontend.config.settings import config
from frontend.utils import SessionState
from frontend.ui.pages import render_stamp_page

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def main():
    """Main application entry point."""
    # Page configuration - must be first Streamlit command
    st.set_page_config(
        page_title=config.APP_NAME,
        page_icon=config.APP_ICON,
        layout="centered",
    )

    _apply_custom_css()

    SessionState.init_defaults()

    render_stamp_page()


def _apply_custom_css():
    """Apply custom CSS styling."""
    st.markdown("""
        <style>
        /* Improve button consistency */
        .stButton > button {
            font-size: 0.875rem;
        }

        /* Toast notifications */
        div[data-testid="stToast"] {
            background-color: #1E1E1E;
            color: white;
        }

        /* Hide Streamlit footer only (keep menu for theme settings) */
        footer {visibility: hidden;}
        </style>
    """, unsafe_allow_html=True)


if __name__ == "__main__":
    main()
