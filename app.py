import streamlit as st

from rental_dashboard.bootstrap_env import ensure_env
from rental_dashboard.config import load_settings
from rental_dashboard.data.client import AnalyticsClient
from rental_dashboard.logging import configure_logging
from rental_dashboard.ui.layout import setup_page, sidebar_ui
from rental_dashboard.ui.pages import feature_importance, prediction, rental_trends
from rental_dashboard.ui.pages.context import PageContext
from rental_dashboard.ui.responsive import detect_viewport_width


def main() -> None:
    ensure_env()
    settings = load_settings()
    configure_logging(settings.log_level)

    setup_page()
    st.title("Brazilian Rental Price Predictor 💸")

    context = PageContext(
        settings=settings,
        client=AnalyticsClient.from_settings(settings),
        store=st.session_state,
        viewport_width=detect_viewport_width(),
    )
    sidebar_ui(settings, st.session_state, context.viewport_width, context.desktop)

    form_col, insight_col = st.columns(2, gap="large")
    with form_col:
        prediction.render_form(context)
    with insight_col:
        prediction.render_result(context)
        feature_importance.render(context)
        rental_trends.render(context)


if __name__ == "__main__":
    main()
