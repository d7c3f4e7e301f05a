from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, MutableMapping, Optional

import streamlit as st

from rental_dashboard.data.client import AnalyticsClient
from rental_dashboard.data.form import FIELD_SPECS, FLAG_FIELDS, PropertyAttributes, submit_form
from rental_dashboard.errors import ServiceError, UnknownError, describe_error
from rental_dashboard.ui.components.formatting import format_prediction
from rental_dashboard.ui.pages.context import PageContext

logger = logging.getLogger(__name__)

STATE_KEY = "prediction_state"


@dataclass
class PredictionState:
    value: Optional[float] = None
    error: Optional[str] = None

    @property
    def display(self) -> Optional[str]:
        return format_prediction(self.value) if self.value is not None else None


def request_prediction(client: AnalyticsClient, attributes: PropertyAttributes) -> PredictionState:
    state = PredictionState()
    try:
        state.value = client.predict(attributes.to_payload())
    except (ServiceError, UnknownError) as exc:
        logger.warning("Prediction failed: %s", exc)
        state.error = describe_error(exc)
    return state


def prediction_state(store: MutableMapping[str, Any]) -> PredictionState:
    state = store.get(STATE_KEY)
    if not isinstance(state, PredictionState):
        state = PredictionState()
        store[STATE_KEY] = state
    return state


def render_form(context: PageContext) -> None:
    st.subheader("Property details")
    values: Dict[str, Any] = {}
    slots = {}
    with st.form("property_form", border=False):
        for spec in FIELD_SPECS:
            values[spec.name] = st.text_input(spec.label, key=f"form_{spec.name}", help=spec.help_text)
            # Error goes right under its field once we know the outcome
            slots[spec.name] = st.empty()
        for name, label in FLAG_FIELDS:
            values[name] = st.toggle(label, key=f"form_{name}")
        submitted = st.form_submit_button("Predict Rental Price", type="primary", width="stretch")

    if not submitted:
        return

    def _submit(attributes: PropertyAttributes) -> None:
        with st.spinner("Requesting prediction…"):
            context.store[STATE_KEY] = request_prediction(context.client, attributes)

    errors = submit_form(values, _submit)
    for name, message in errors.items():
        slots[name].error(message)


def render_result(context: PageContext) -> None:
    state = prediction_state(context.store)
    if state.error:
        st.error(state.error)
    elif state.display is not None:
        with st.container(border=True):
            st.markdown("#### Predicted Rental Price")
            st.markdown(f"<p style='font-size:2.2rem;font-weight:700;text-align:center'>{state.display}</p>", unsafe_allow_html=True)
            st.caption("Estimated total monthly cost in BRL.")
