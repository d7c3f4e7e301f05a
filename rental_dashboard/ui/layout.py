"""
Layout helpers for the Streamlit application (page config, sidebar).
"""

from __future__ import annotations

from typing import Any, MutableMapping

import streamlit as st

from rental_dashboard.config import DashboardSettings
from rental_dashboard.data.views import invalidate_views


def setup_page() -> None:
    """Set Streamlit page configuration and top-level styling."""
    st.set_page_config(
        page_title="Brazilian Rental Price Predictor",
        layout="wide",
        page_icon=":house:",
    )
    _inject_sidebar_primary_button_red()


def sidebar_ui(settings: DashboardSettings, store: MutableMapping[str, Any], viewport_width: int, desktop: bool) -> None:
    st.sidebar.header("Service")
    st.sidebar.caption(f"Prediction service: `{settings.api_base_url}`")
    if st.sidebar.button("🔄 Refresh Data", type="primary", help="Fetch feature importance and rental trends again."):
        invalidate_views(store)
    layout_name = "desktop" if desktop else "mobile"
    st.sidebar.caption(f"Viewport {viewport_width}px · {layout_name} layout")


def _inject_sidebar_primary_button_red() -> None:
    """Style PRIMARY buttons in the sidebar as red so the refresh action stands out."""
    st.markdown(
        """
        <style>
        div[data-testid="stSidebar"] button[kind="primary"],
        div[data-testid="stSidebar"] button[data-testid="baseButton-primary"] {
            background-color: #e53935 !important;
            border-color: #e53935 !important;
            color: #ffffff !important;
        }
        div[data-testid="stSidebar"] button[kind="primary"]:hover,
        div[data-testid="stSidebar"] button[data-testid="baseButton-primary"]:hover {
            background-color: #c62828 !important;
            border-color: #c62828 !important;
            color: #ffffff !important;
        }
        </style>
        """,
        unsafe_allow_html=True,
    )
