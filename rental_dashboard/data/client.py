"""
HTTP client for the rental prediction service.

The base URL is handed in at construction time; nothing here reads the
environment.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, List, Optional

import requests

from rental_dashboard.config import (
    DEFAULT_API_BASE_URL,
    DEFAULT_REQUEST_TIMEOUT,
    FEATURE_IMPORTANCE_ENDPOINT,
    PREDICT_ENDPOINT,
    RENTAL_TRENDS_ENDPOINT,
    DashboardSettings,
)
from rental_dashboard.data.transform import (
    RawFeatureRecord,
    RawTrendRecord,
    parse_feature_importances,
    parse_rental_trends,
)
from rental_dashboard.errors import ServiceError, UnknownError

logger = logging.getLogger(__name__)


def _error_message(resp: requests.Response) -> Optional[str]:
    try:
        body = resp.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, str) and message.strip():
            return message
    return None


class AnalyticsClient:
    def __init__(
        self,
        base_url: str = DEFAULT_API_BASE_URL,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_settings(cls, settings: DashboardSettings, session: Optional[requests.Session] = None) -> "AnalyticsClient":
        return cls(settings.api_base_url, timeout=settings.request_timeout, session=session)

    def url_for(self, endpoint: str) -> str:
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    def _send(self, method: str, endpoint: str, **kwargs) -> requests.Response:
        url = self.url_for(endpoint)
        logger.debug("%s %s", method, url)
        try:
            resp = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise UnknownError(f"Could not reach the prediction service at {self.base_url}", cause=exc) from exc
        if not resp.ok:
            err = ServiceError.from_status(resp.status_code, resp.reason or "", _error_message(resp))
            logger.warning("%s %s returned %s: %s", method, url, resp.status_code, err)
            raise err
        return resp

    @staticmethod
    def _json(resp: requests.Response, endpoint: str) -> Any:
        try:
            return resp.json()
        except ValueError as exc:
            raise ServiceError(
                f"Malformed payload from /{endpoint}: response is not valid JSON",
                status=resp.status_code,
                status_text=resp.reason,
            ) from exc

    def fetch(self, endpoint: str) -> Dict[str, Any]:
        """GET an analytic endpoint and return its decoded JSON object."""
        resp = self._send("GET", endpoint)
        payload = self._json(resp, endpoint)
        if not isinstance(payload, dict):
            raise ServiceError(
                f"Malformed payload from /{endpoint}: expected a JSON object",
                status=resp.status_code,
                status_text=resp.reason,
            )
        return payload

    def feature_importances(self) -> List[RawFeatureRecord]:
        return parse_feature_importances(self.fetch(FEATURE_IMPORTANCE_ENDPOINT))

    def rental_trends(self) -> List[RawTrendRecord]:
        return parse_rental_trends(self.fetch(RENTAL_TRENDS_ENDPOINT))

    def predict(self, payload: Dict[str, Any]) -> float:
        """POST the property attributes and return the predicted monthly cost in BRL."""
        resp = self._send("POST", PREDICT_ENDPOINT, json=payload)
        body = self._json(resp, PREDICT_ENDPOINT)
        value = body.get("total_monthly_cost_brl") if isinstance(body, dict) else None
        if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
            raise ServiceError(
                "Malformed payload from /predict: missing total_monthly_cost_brl",
                status=resp.status_code,
                status_text=resp.reason,
            )
        return float(value)
