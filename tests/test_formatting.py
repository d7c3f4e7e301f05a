from __future__ import annotations

from rental_dashboard.ui.components.formatting import (
    format_brl,
    format_importance,
    format_number,
    format_prediction,
    round_half_up,
)


def test_round_half_up_handles_float_noise() -> None:
    assert round_half_up(1999.995, 2) == 2000.0
    assert round_half_up(2.675, 2) == 2.68
    assert round_half_up(1.005, 2) == 1.01
    assert round_half_up(1.004, 2) == 1.0


def test_format_brl_uses_brazilian_separators() -> None:
    assert format_brl(1999.995) == "R$ 2.000,00"
    assert format_brl(1234567.891) == "R$ 1.234.567,89"
    assert format_brl(450) == "R$ 450,00"
    assert format_brl(0.5) == "R$ 0,50"


def test_missing_values_render_as_dash() -> None:
    assert format_brl(None) == "–"
    assert format_brl("abc") == "–"  # type: ignore[arg-type]
    assert format_number(None) == "–"
    assert format_prediction(None) == "–"


def test_prediction_has_two_decimals_without_grouping() -> None:
    assert format_prediction(2345.67) == "R$ 2345.67"
    assert format_prediction(1000) == "R$ 1000.00"


def test_format_number_and_importance() -> None:
    assert format_number(5887) == "5,887"
    assert format_importance(0.31) == "0.310"
