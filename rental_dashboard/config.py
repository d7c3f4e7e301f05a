"""
Application-wide configuration constants and helper utilities.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional, Tuple

import streamlit as st

logger = logging.getLogger(__name__)

DEFAULT_API_BASE_URL = "http://127.0.0.1:5000"
DEFAULT_REQUEST_TIMEOUT = 10.0
DEFAULT_MOBILE_BREAKPOINT = 768

TOP_N_OPTIONS: Tuple[int, ...] = (5, 10, 15)
DEFAULT_TOP_N = 10

FEATURE_IMPORTANCE_ENDPOINT = "feature_importance"
RENTAL_TRENDS_ENDPOINT = "rental_trends"
PREDICT_ENDPOINT = "predict"


@dataclass(frozen=True)
class DashboardSettings:
    api_base_url: str = DEFAULT_API_BASE_URL
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    mobile_breakpoint: int = DEFAULT_MOBILE_BREAKPOINT
    log_level: str = "INFO"


def _get_secret(name: str, default: Optional[str] = None) -> Optional[str]:
    """Try env first, then st.secrets (if available)."""
    val = os.getenv(name)
    if val:
        return val
    try:
        sec = getattr(st, "secrets", None)
        if sec:
            v = sec.get(name)  # type: ignore[index]
            return str(v) if v is not None else default
    except FileNotFoundError:
        pass
    except Exception as exc:
        logger.debug("Could not read %s from st.secrets: %s", name, exc)
    return default


def _positive_number(name: str, raw: Optional[str], default, cast):
    if raw is None:
        return default
    try:
        value = cast(raw)
    except (TypeError, ValueError):
        logger.warning("Ignoring invalid %s=%r; using %s", name, raw, default)
        return default
    if value <= 0:
        logger.warning("Ignoring non-positive %s=%r; using %s", name, raw, default)
        return default
    return value


def normalize_base_url(url: Optional[str]) -> str:
    cleaned = (url or "").strip()
    if not cleaned:
        return DEFAULT_API_BASE_URL
    return cleaned.rstrip("/")


def load_settings() -> DashboardSettings:
    """Resolve settings once per run; the service client receives them explicitly."""
    return DashboardSettings(
        api_base_url=normalize_base_url(_get_secret("API_BASE_URL")),
        request_timeout=_positive_number(
            "REQUEST_TIMEOUT", _get_secret("REQUEST_TIMEOUT"), DEFAULT_REQUEST_TIMEOUT, float
        ),
        mobile_breakpoint=_positive_number(
            "MOBILE_BREAKPOINT", _get_secret("MOBILE_BREAKPOINT"), DEFAULT_MOBILE_BREAKPOINT, int
        ),
        log_level=(_get_secret("LOG_LEVEL", "INFO") or "INFO").upper(),
    )
