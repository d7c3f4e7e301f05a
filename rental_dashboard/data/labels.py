"""
Lookup tables that turn model feature identifiers into display labels,
one-sentence descriptions and bar colors.

Descriptions and colors are keyed by the resolved label, so a feature key
that has no label of its own falls through to the fallback description and
color.
"""

from __future__ import annotations

from typing import Dict

FALLBACK_DESCRIPTION = "No description available."
FALLBACK_COLOR = "#9e9e9e"

FEATURE_LABELS: Dict[str, str] = {
    "area": "Area",
    "rooms": "Rooms",
    "bathroom": "Bathrooms",
    "parking spaces": "Parking Spaces",
    "floor": "Floor",
    "hoa (R$)": "HOA",
    "property tax (R$)": "Property Tax",
    "fire insurance (R$)": "Fire Insurance",
    "animal_acept": "Animals Allowed",
    "animal_not acept": "No Animals",
    "furniture_furnished": "Furnished",
    "furniture_not furnished": "Unfurnished",
    "city_Belo Horizonte": "Belo Horizonte",
    "city_Campinas": "Campinas",
    "city_Porto Alegre": "Porto Alegre",
    "city_Rio de Janeiro": "Rio de Janeiro",
    "city_São Paulo": "São Paulo",
}

FEATURE_DESCRIPTIONS: Dict[str, str] = {
    "Area": "Usable floor area of the property in square meters.",
    "Rooms": "Number of rooms in the property.",
    "Bathrooms": "Number of bathrooms in the property.",
    "Parking Spaces": "Number of parking spaces included with the property.",
    "Floor": "Floor level the unit is on; houses are recorded as ground floor.",
    "HOA": "Monthly homeowners association (condominium) fee in BRL.",
    "Property Tax": "Monthly share of the municipal property tax (IPTU) in BRL.",
    "Fire Insurance": "Monthly fire insurance cost in BRL.",
    "Animals Allowed": "Whether the landlord accepts pets.",
    "No Animals": "Whether the landlord refuses pets.",
    "Furnished": "Whether the property is rented furnished.",
    "Unfurnished": "Whether the property is rented without furniture.",
    "Belo Horizonte": "Listing is located in Belo Horizonte.",
    "Campinas": "Listing is located in Campinas.",
    "Porto Alegre": "Listing is located in Porto Alegre.",
    "Rio de Janeiro": "Listing is located in Rio de Janeiro.",
    "São Paulo": "Listing is located in São Paulo.",
}

FEATURE_COLORS: Dict[str, str] = {
    "Area": "#1f77b4",
    "Rooms": "#ff7f0e",
    "Bathrooms": "#2ca02c",
    "Parking Spaces": "#d62728",
    "Floor": "#9467bd",
    "HOA": "#8c564b",
    "Property Tax": "#e377c2",
    "Fire Insurance": "#bcbd22",
    "Animals Allowed": "#17becf",
    "No Animals": "#0e7c86",
    "Furnished": "#aec7e8",
    "Unfurnished": "#5d7fa3",
    "Belo Horizonte": "#ffbb78",
    "Campinas": "#98df8a",
    "Porto Alegre": "#ff9896",
    "Rio de Janeiro": "#c5b0d5",
    "São Paulo": "#c49c94",
}


def feature_label(key: str) -> str:
    return FEATURE_LABELS.get(key, key)


def feature_description(label: str) -> str:
    return FEATURE_DESCRIPTIONS.get(label, FALLBACK_DESCRIPTION)


def feature_color(label: str) -> str:
    return FEATURE_COLORS.get(label, FALLBACK_COLOR)
