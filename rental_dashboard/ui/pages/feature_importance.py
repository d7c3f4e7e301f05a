from __future__ import annotations

from typing import List

import streamlit as st

from rental_dashboard.config import DEFAULT_TOP_N, TOP_N_OPTIONS
from rental_dashboard.data.transform import DisplayFeature, RawFeatureRecord, transform_features
from rental_dashboard.data.views import ViewState, load_view, view_state
from rental_dashboard.ui.components.charts import ClickTracker, clicked_record, feature_importance_chart, render_plotly
from rental_dashboard.ui.components.detail import render_detail_surface
from rental_dashboard.ui.components.formatting import format_importance
from rental_dashboard.ui.pages.context import PageContext
from rental_dashboard.ui.selection import SelectionController

VIEW_NAME = "feature_importance"


def load_features(context: PageContext, top_n: int) -> ViewState:
    """Fetch and rank features when the view is new or top-N changed."""
    state = view_state(context.store, VIEW_NAME)
    if state.needs_load(top_n):

        def _derive(records: List[RawFeatureRecord]) -> List[DisplayFeature]:
            return transform_features(records, top_n)

        load_view(state, context.client.feature_importances, _derive, params=top_n)
    return state


def _render_feature_detail(feature: DisplayFeature) -> None:
    st.markdown(f"### {feature.label}")
    st.metric("Importance", format_importance(feature.importance))
    st.write(feature.description)


def render(context: PageContext) -> None:
    st.subheader("Feature Importance")
    top_n = st.selectbox(
        "Features to show",
        options=list(TOP_N_OPTIONS),
        index=TOP_N_OPTIONS.index(DEFAULT_TOP_N),
        key="feature_importance_top_n",
        help="How many of the most influential model features to chart.",
    )

    controller = SelectionController(context.store, VIEW_NAME)
    tracker = ClickTracker(context.store, VIEW_NAME)
    previous = view_state(context.store, VIEW_NAME).generation

    with st.spinner("Loading feature importance…"):
        state = load_features(context, top_n)
    if state.generation != previous:
        # The ranking was rebuilt; drop anything pointing into the old one
        controller.close()
        tracker.reset()

    if state.error:
        st.error(f"Could not load feature importance. {state.error}")
        return
    features: List[DisplayFeature] = state.items
    if not features:
        st.info("The service returned no feature importances.")
        return

    if not controller.is_open and tracker.has_selection:
        # Closed by the other view; clear the chart's sticky selection
        tracker.reset()

    fig = feature_importance_chart(features, title=f"Top {len(features)} features")
    event = render_plotly(fig, key=tracker.widget_key)
    st.caption("Click a bar to see what the feature means.")

    feature = clicked_record(event, features, tracker)
    if feature is not None:
        controller.select(feature)

    render_detail_surface(
        controller,
        desktop=context.desktop,
        render_body=_render_feature_detail,
        title="Feature details",
        key=VIEW_NAME,
        on_close=tracker.reset,
    )
