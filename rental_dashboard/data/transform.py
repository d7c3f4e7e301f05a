"""
Turn raw analytic payloads into display-ready records.

Feature importances are ranked and truncated to the selected top-N; rental
trends keep the order the service sends them in.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, List, Sequence

import pandas as pd

from rental_dashboard.config import TOP_N_OPTIONS
from rental_dashboard.data.labels import feature_color, feature_description, feature_label
from rental_dashboard.errors import ServiceError
from rental_dashboard.ui.components.formatting import round_half_up


@dataclass(frozen=True)
class RawFeatureRecord:
    feature_key: str
    importance: float


@dataclass(frozen=True)
class DisplayFeature:
    label: str
    importance: float
    description: str
    color: str


@dataclass(frozen=True)
class RawTrendRecord:
    city: str
    average_rent: float
    median_rent: float
    min_rent: float
    max_rent: float
    listing_count: int


@dataclass(frozen=True)
class DisplayTrend:
    city: str
    average_rent: float
    median_rent: float
    min_rent: float
    max_rent: float
    listing_count: int


def _envelope(payload: Any, key: str) -> List[Dict[str, Any]]:
    rows = payload.get(key) if isinstance(payload, dict) else None
    if not isinstance(rows, list):
        raise ServiceError(f"Malformed payload: expected a '{key}' list")
    return rows


def _number(row: Dict[str, Any], key: str) -> float:
    value = row.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ServiceError(f"Malformed payload: '{key}' must be numeric, got {value!r}")
    return float(value)


def parse_feature_importances(payload: Any) -> List[RawFeatureRecord]:
    records = []
    for row in _envelope(payload, "feature_importances"):
        if not isinstance(row, dict) or not isinstance(row.get("Feature"), str):
            raise ServiceError(f"Malformed payload: bad feature importance row {row!r}")
        records.append(RawFeatureRecord(row["Feature"], _number(row, "Importance")))
    return records


def parse_rental_trends(payload: Any) -> List[RawTrendRecord]:
    records = []
    for row in _envelope(payload, "rental_trends"):
        if not isinstance(row, dict) or not isinstance(row.get("city"), str):
            raise ServiceError(f"Malformed payload: bad rental trend row {row!r}")
        count = _number(row, "count")
        if count < 0 or count != int(count):
            raise ServiceError(f"Malformed payload: listing count must be a non-negative integer, got {count!r}")
        records.append(
            RawTrendRecord(
                city=row["city"],
                average_rent=_number(row, "average_rent_brl"),
                median_rent=_number(row, "median_rent_brl"),
                min_rent=_number(row, "min_rent_brl"),
                max_rent=_number(row, "max_rent_brl"),
                listing_count=int(count),
            )
        )
    return records


def to_display_feature(record: RawFeatureRecord) -> DisplayFeature:
    label = feature_label(record.feature_key)
    return DisplayFeature(
        label=label,
        importance=record.importance,
        description=feature_description(label),
        color=feature_color(label),
    )


def transform_features(records: Sequence[RawFeatureRecord], top_n: int) -> List[DisplayFeature]:
    if top_n not in TOP_N_OPTIONS:
        raise ValueError(f"top_n must be one of {TOP_N_OPTIONS}, got {top_n!r}")
    # sorted() is stable, so ties keep the service's order
    ranked = sorted(records, key=lambda rec: rec.importance, reverse=True)
    return [to_display_feature(rec) for rec in ranked[:top_n]]


def transform_trends(records: Iterable[RawTrendRecord]) -> List[DisplayTrend]:
    return [
        DisplayTrend(
            city=rec.city,
            average_rent=round_half_up(rec.average_rent, 2),
            median_rent=rec.median_rent,
            min_rent=rec.min_rent,
            max_rent=rec.max_rent,
            listing_count=rec.listing_count,
        )
        for rec in records
    ]


def features_frame(features: Sequence[DisplayFeature]) -> pd.DataFrame:
    columns = ["label", "importance", "description", "color"]
    if not features:
        return pd.DataFrame(columns=columns)
    return pd.DataFrame([asdict(f) for f in features], columns=columns)


def trends_frame(trends: Sequence[DisplayTrend]) -> pd.DataFrame:
    columns = ["city", "average_rent", "median_rent", "min_rent", "max_rent", "listing_count"]
    if not trends:
        return pd.DataFrame(columns=columns)
    return pd.DataFrame([asdict(t) for t in trends], columns=columns)
