from __future__ import annotations

import pytest

from rental_dashboard.config import DEFAULT_API_BASE_URL, DashboardSettings, load_settings, normalize_base_url

ENV_KEYS = ["API_BASE_URL", "REQUEST_TIMEOUT", "MOBILE_BREAKPOINT", "LOG_LEVEL"]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults_when_unset() -> None:
    settings = load_settings()

    assert settings == DashboardSettings()
    assert settings.api_base_url == "http://127.0.0.1:5000"


def test_env_overrides(monkeypatch) -> None:
    monkeypatch.setenv("API_BASE_URL", "https://rent-api.example.com/")
    monkeypatch.setenv("REQUEST_TIMEOUT", "2.5")
    monkeypatch.setenv("MOBILE_BREAKPOINT", "900")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = load_settings()

    assert settings.api_base_url == "https://rent-api.example.com"
    assert settings.request_timeout == 2.5
    assert settings.mobile_breakpoint == 900
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("raw", ["abc", "0", "-4"])
def test_invalid_numbers_fall_back(monkeypatch, raw: str) -> None:
    monkeypatch.setenv("REQUEST_TIMEOUT", raw)
    monkeypatch.setenv("MOBILE_BREAKPOINT", raw)

    settings = load_settings()

    assert settings.request_timeout == DashboardSettings().request_timeout
    assert settings.mobile_breakpoint == DashboardSettings().mobile_breakpoint


def test_normalize_base_url() -> None:
    assert normalize_base_url(None) == DEFAULT_API_BASE_URL
    assert normalize_base_url("   ") == DEFAULT_API_BASE_URL
    assert normalize_base_url(" http://10.0.0.5:5000// ") == "http://10.0.0.5:5000"
