from __future__ import annotations

import requests

from conftest import FakeSession, make_response
from rental_dashboard.data.client import AnalyticsClient
from rental_dashboard.data.form import submit_form
from rental_dashboard.ui.pages.prediction import PredictionState, prediction_state, request_prediction

FORM_VALUES = {
    "city": "São Paulo",
    "area": 50,
    "rooms": 2,
    "bathroom": 1,
    "parking_spaces": 1,
    "floor": 3,
    "animal": True,
    "furniture": False,
    "hoa": 300,
    "property_tax": 100,
    "fire_insurance": 50,
}


def test_end_to_end_prediction_display() -> None:
    session = FakeSession(make_response(200, {"total_monthly_cost_brl": 2345.67}))
    client = AnalyticsClient(session=session)
    results = []

    errors = submit_form(FORM_VALUES, lambda attrs: results.append(request_prediction(client, attrs)))

    assert errors == {}
    assert len(results) == 1
    assert results[0].display == "R$ 2345.67"
    assert session.calls[0]["json"] == {
        "city": "São Paulo",
        "area": 50,
        "rooms": 2,
        "bathroom": 1,
        "parkingSpaces": 1,
        "floor": 3,
        "animal": True,
        "furniture": False,
        "hoa": 300,
        "propertyTax": 100,
        "fireInsurance": 50,
    }


def test_invalid_form_never_reaches_service() -> None:
    session = FakeSession()
    client = AnalyticsClient(session=session)

    errors = submit_form(dict(FORM_VALUES, rooms="two"), lambda attrs: request_prediction(client, attrs))

    assert errors == {"rooms": "Valid number of rooms is required"}
    assert session.calls == []


def test_service_failure_becomes_display_message() -> None:
    session = FakeSession(make_response(400, {"message": "Area must be positive"}, reason="Bad Request"))
    client = AnalyticsClient(session=session)
    results = []

    submit_form(FORM_VALUES, lambda attrs: results.append(request_prediction(client, attrs)))

    assert results[0].value is None
    assert results[0].display is None
    assert results[0].error == "Area must be positive"


def test_unreachable_service_becomes_display_message() -> None:
    client = AnalyticsClient(session=FakeSession(requests.Timeout("timed out")))
    results = []

    submit_form(FORM_VALUES, lambda attrs: results.append(request_prediction(client, attrs)))

    assert results[0].error.startswith("Could not reach the prediction service")


def test_prediction_state_is_created_once() -> None:
    store: dict = {}
    state = prediction_state(store)

    assert state == PredictionState()
    assert prediction_state(store) is state
