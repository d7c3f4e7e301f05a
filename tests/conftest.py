from __future__ import annotations

import json
from typing import Any

import pytest
import requests


def make_response(status: int, body: Any = None, reason: str = "OK", raw_text: str | None = None) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    resp.reason = reason
    text = raw_text if raw_text is not None else json.dumps(body)
    resp._content = text.encode("utf-8")
    resp.encoding = "utf-8"
    return resp


class FakeSession:
    def __init__(self, *outcomes: requests.Response | Exception) -> None:
        self.outcomes = list(outcomes)
        self.calls: list[dict[str, Any]] = []

    def request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        self.calls.append({"method": method, "url": url, **kwargs})
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        outcome.url = url
        return outcome


@pytest.fixture
def feature_payload() -> dict[str, Any]:
    return {
        "feature_importances": [
            {"Feature": "floor", "Importance": 0.05},
            {"Feature": "area", "Importance": 0.31},
            {"Feature": "city_São Paulo", "Importance": 0.12},
            {"Feature": "hoa (R$)", "Importance": 0.12},
            {"Feature": "fire insurance (R$)", "Importance": 0.22},
            {"Feature": "rooms", "Importance": 0.08},
            {"Feature": "mystery_feature", "Importance": 0.01},
        ]
    }


@pytest.fixture
def trend_payload() -> dict[str, Any]:
    return {
        "rental_trends": [
            {
                "city": "São Paulo",
                "average_rent_brl": 4652.79,
                "median_rent_brl": 3400.0,
                "min_rent_brl": 501.0,
                "max_rent_brl": 45000.0,
                "count": 5887,
            },
            {
                "city": "Campinas",
                "average_rent_brl": 1999.995,
                "median_rent_brl": 1500.5,
                "min_rent_brl": 450.0,
                "max_rent_brl": 15000.25,
                "count": 853,
            },
        ]
    }
