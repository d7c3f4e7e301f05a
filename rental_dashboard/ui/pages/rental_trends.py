from __future__ import annotations

from typing import List

import streamlit as st

from rental_dashboard.data.transform import DisplayTrend, transform_trends, trends_frame
from rental_dashboard.data.views import ViewState, load_view, view_state
from rental_dashboard.ui.components.charts import ClickTracker, clicked_record, render_plotly, rental_trend_chart
from rental_dashboard.ui.components.detail import render_detail_surface
from rental_dashboard.ui.components.kpi import KpiCard, render_kpi_cards
from rental_dashboard.ui.components.tables import render_table
from rental_dashboard.ui.pages.context import PageContext
from rental_dashboard.ui.selection import SelectionController

VIEW_NAME = "rental_trends"

TABLE_COLUMNS = {
    "average_rent": {"type": "currency", "decimals": 2},
    "median_rent": {"type": "currency", "decimals": 2},
    "min_rent": {"type": "currency", "decimals": 2},
    "max_rent": {"type": "currency", "decimals": 2},
    "listing_count": {"type": "number", "decimals": 0},
}
TABLE_LABELS = {
    "city": "City",
    "average_rent": "Average Rent",
    "median_rent": "Median Rent",
    "min_rent": "Min Rent",
    "max_rent": "Max Rent",
    "listing_count": "Listings",
}


def load_trends(context: PageContext) -> ViewState:
    state = view_state(context.store, VIEW_NAME)
    if state.needs_load(None):
        load_view(state, context.client.rental_trends, transform_trends)
    return state


def _render_trend_detail(trend: DisplayTrend) -> None:
    st.markdown(f"### {trend.city}")
    render_kpi_cards(
        [
            KpiCard("Average Rent", value=trend.average_rent, currency=True, decimals=2),
            KpiCard("Median Rent", value=trend.median_rent, currency=True, decimals=2),
            KpiCard("Listings", value=trend.listing_count),
            KpiCard("Min Rent", value=trend.min_rent, currency=True, decimals=2),
            KpiCard("Max Rent", value=trend.max_rent, currency=True, decimals=2),
        ],
        columns=3,
    )


def render(context: PageContext) -> None:
    st.subheader("Rental Trends")

    controller = SelectionController(context.store, VIEW_NAME)
    tracker = ClickTracker(context.store, VIEW_NAME)
    previous = view_state(context.store, VIEW_NAME).generation

    with st.spinner("Loading rental trends…"):
        state = load_trends(context)
    if state.generation != previous:
        controller.close()
        tracker.reset()

    if state.error:
        st.error(f"Could not load rental trends. {state.error}")
        return
    trends: List[DisplayTrend] = state.items
    if not trends:
        st.info("The service returned no rental trends.")
        return

    if not controller.is_open and tracker.has_selection:
        # Closed by the other view; clear the chart's sticky selection
        tracker.reset()

    fig = rental_trend_chart(trends, title="Average monthly rent by city")
    event = render_plotly(fig, key=tracker.widget_key)
    st.caption("Click a city to compare its rent range and listing volume.")

    trend = clicked_record(event, trends, tracker)
    if trend is not None:
        controller.select(trend)

    render_detail_surface(
        controller,
        desktop=context.desktop,
        render_body=_render_trend_detail,
        title="City rent summary",
        key=VIEW_NAME,
        on_close=tracker.reset,
    )

    with st.expander("Rental trend table", expanded=False):
        render_table(
            trends_frame(trends),
            column_config=TABLE_COLUMNS,
            rename=TABLE_LABELS,
            export_file_name="rental_trends.csv",
        )
