"""
Plotly chart factory functions with consistent styling for the dashboard,
plus the click-to-record wiring used by the drill-down views.
"""

from __future__ import annotations

from typing import Any, List, MutableMapping, Optional, Sequence, Tuple

import plotly.graph_objects as go
import streamlit as st

from rental_dashboard.data.transform import DisplayFeature, DisplayTrend
from rental_dashboard.ui.components.formatting import format_brl, format_importance, format_number


DEFAULT_TEMPLATE = "plotly_white"
TREND_LINE_COLOR = "#ff7f0e"


def _configure_layout(
    fig: go.Figure,
    title: Optional[str] = None,
    yaxis_title: Optional[str] = None,
    yaxis_tickformat: Optional[str] = None,
) -> go.Figure:
    fig.update_layout(
        template=DEFAULT_TEMPLATE,
        title=title,
        showlegend=False,
        hovermode="closest",
        clickmode="event+select",
        margin=dict(l=40, r=20, t=60, b=40),
    )
    if yaxis_title:
        fig.update_yaxes(title=yaxis_title)
    if yaxis_tickformat:
        fig.update_yaxes(tickformat=yaxis_tickformat)
    fig.update_xaxes(showgrid=False)
    fig.update_yaxes(showgrid=True, zeroline=True)
    return fig


def render_plotly(fig: go.Figure, key: str) -> Any:
    """Draw the figure and return Streamlit's selection event for it."""
    return st.plotly_chart(
        fig,
        width="stretch",
        config={"displayModeBar": False},
        on_select="rerun",
        selection_mode="points",
        key=key,
    )


def feature_importance_chart(features: Sequence[DisplayFeature], title: Optional[str] = None) -> go.Figure:
    labels = [f.label for f in features]
    fig = go.Figure(
        go.Bar(
            x=labels,
            y=[f.importance for f in features],
            marker_color=[f.color for f in features],
            customdata=[[f.description, format_importance(f.importance)] for f in features],
            hovertemplate="<b>%{x}</b><br>Importance: %{customdata[1]}<br>%{customdata[0]}<extra></extra>",
        )
    )
    fig = _configure_layout(fig, title, yaxis_title="Importance", yaxis_tickformat=".2f")
    # Keep the ranking order even if two labels collide
    fig.update_xaxes(categoryorder="array", categoryarray=labels)
    return fig


def _trend_hover_row(trend: DisplayTrend) -> List[str]:
    return [
        format_brl(trend.average_rent),
        format_brl(trend.median_rent),
        format_brl(trend.min_rent),
        format_brl(trend.max_rent),
        format_number(trend.listing_count, 0),
    ]


def rental_trend_chart(trends: Sequence[DisplayTrend], title: Optional[str] = None) -> go.Figure:
    cities = [t.city for t in trends]
    fig = go.Figure(
        go.Scatter(
            x=cities,
            y=[t.average_rent for t in trends],
            mode="lines+markers",
            line=dict(color=TREND_LINE_COLOR),
            marker=dict(size=10),
            customdata=[_trend_hover_row(t) for t in trends],
            hovertemplate=(
                "<b>%{x}</b><br>"
                "Average: %{customdata[0]}<br>"
                "Median: %{customdata[1]}<br>"
                "Min: %{customdata[2]}<br>"
                "Max: %{customdata[3]}<br>"
                "Listings: %{customdata[4]}<extra></extra>"
            ),
        )
    )
    fig = _configure_layout(fig, title, yaxis_title="Average rent (R$)", yaxis_tickformat=",.0f")
    fig.update_layout(separators=",.")
    fig.update_xaxes(categoryorder="array", categoryarray=cities)
    return fig


def _selected_points(event: Any) -> List[dict]:
    if not event:
        return []
    try:
        selection = event["selection"]
        points = selection["points"]
    except (KeyError, TypeError):
        return []
    return [p for p in points or [] if isinstance(p, dict)]


def _point_index(point: dict) -> Optional[int]:
    for field in ("point_index", "point_number", "pointIndex", "pointNumber"):
        value = point.get(field)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    return None


def selection_signature(event: Any) -> Tuple[Tuple[int, int], ...]:
    signature = []
    for point in _selected_points(event):
        index = _point_index(point)
        if index is not None:
            signature.append((int(point.get("curve_number", 0) or 0), index))
    return tuple(signature)


class ClickTracker:
    """Turns Streamlit's sticky chart selection into one-shot click events.

    A selection keeps being reported on every rerun until it changes, so only
    a signature different from the last one counts as a click. ``reset``
    swaps the widget key, which gives the chart a fresh, empty selection.
    """

    def __init__(self, store: MutableMapping[str, Any], key: str) -> None:
        self._store = store
        self._key = f"clicks_{key}"
        self._base = key
        if not isinstance(store.get(self._key), dict):
            store[self._key] = {"nonce": 0, "last": ()}

    @property
    def widget_key(self) -> str:
        return f"{self._base}_chart_{self._store[self._key]['nonce']}"

    @property
    def has_selection(self) -> bool:
        return bool(self._store[self._key]["last"])

    def consume(self, event: Any) -> Optional[int]:
        record = self._store[self._key]
        signature = selection_signature(event)
        if not signature or signature == record["last"]:
            return None
        record["last"] = signature
        # Single-trace charts: the last point is the one just clicked
        return signature[-1][1]

    def reset(self) -> None:
        record = self._store[self._key]
        self._store[self._key] = {"nonce": record["nonce"] + 1, "last": ()}


def clicked_record(event: Any, records: Sequence[Any], tracker: ClickTracker) -> Optional[Any]:
    """The exact display record behind a newly clicked chart element."""
    index = tracker.consume(event)
    if index is None or not 0 <= index < len(records):
        return None
    return records[index]
