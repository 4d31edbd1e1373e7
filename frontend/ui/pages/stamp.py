"""Stamp page.

Single page of the app: stamp configuration form plus the result of the
last submission.
"""

import logging

import streamlit as st

from frontend.config.settings import config
from frontend.ui.components import render_stamp_form, render_result

logger = logging.getLogger(__name__)


def render_stamp_page() -> None:
    """Render the stamp page."""
    st.title(f"{config.APP_ICON} {config.APP_NAME}")
    st.caption("Configure a stamp, apply it to a PDF and download the result")

    render_stamp_form()

    render_result()
