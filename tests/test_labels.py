from __future__ import annotations

from rental_dashboard.data.labels import (
    FALLBACK_COLOR,
    FALLBACK_DESCRIPTION,
    FEATURE_COLORS,
    FEATURE_DESCRIPTIONS,
    FEATURE_LABELS,
    feature_color,
    feature_description,
    feature_label,
)


def test_known_keys_resolve_to_labels() -> None:
    assert feature_label("parking spaces") == "Parking Spaces"
    assert feature_label("city_São Paulo") == "São Paulo"
    assert feature_label("hoa (R$)") == "HOA"


def test_unknown_key_is_returned_unchanged() -> None:
    for key in ["", "num__area", "AREA", "city_Recife", "  area  "]:
        assert feature_label(key) == key


def test_description_and_color_are_keyed_by_label() -> None:
    label = feature_label("bathroom")
    assert feature_description(label) == FEATURE_DESCRIPTIONS["Bathrooms"]
    assert feature_color(label) == FEATURE_COLORS["Bathrooms"]
    # The raw key itself is not a description/color key
    assert feature_description("bathroom") == FALLBACK_DESCRIPTION
    assert feature_color("bathroom") == FALLBACK_COLOR


def test_unknown_labels_use_fallbacks() -> None:
    assert feature_description("Something Else") == "No description available."
    assert feature_color("Something Else") == FALLBACK_COLOR
    assert feature_description("") == FALLBACK_DESCRIPTION
    assert feature_color("") == FALLBACK_COLOR


def test_tables_are_complete_and_fallback_color_is_unused() -> None:
    labels = set(FEATURE_LABELS.values())
    assert labels == set(FEATURE_DESCRIPTIONS)
    assert labels == set(FEATURE_COLORS)
    assert FALLBACK_COLOR not in FEATURE_COLORS.values()
    assert len(set(FEATURE_COLORS.values())) == len(FEATURE_COLORS)
