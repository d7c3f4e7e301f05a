"""
Validation and normalisation of the property form.

Raw widget values come in as strings (and booleans for the two switches);
``validate_property_form`` turns them into a typed ``PropertyAttributes`` or
a per-field error mapping.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from rental_dashboard.errors import ValidationError


@dataclass(frozen=True)
class FieldSpec:
    name: str
    label: str
    kind: str  # text | count | float
    error: str
    help_text: Optional[str] = None


FIELD_SPECS: Tuple[FieldSpec, ...] = (
    FieldSpec("city", "City", "text", "City is required"),
    FieldSpec("area", "Area (m²)", "float", "Valid area is required"),
    FieldSpec("rooms", "Number of Rooms", "count", "Valid number of rooms is required"),
    FieldSpec("bathroom", "Number of Bathrooms", "count", "Valid number of bathrooms is required"),
    FieldSpec("parking_spaces", "Parking Spaces", "count", "Valid number of parking spaces is required"),
    FieldSpec("floor", "Floor", "count", "Valid floor number is required", help_text="Use 0 for houses and ground floor units."),
    FieldSpec("hoa", "HOA (R$)", "float", "Valid HOA amount is required"),
    FieldSpec("property_tax", "Property Tax (R$)", "float", "Valid property tax amount is required"),
    FieldSpec("fire_insurance", "Fire Insurance (R$)", "float", "Valid fire insurance amount is required"),
)

FLAG_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("animal", "Animals Allowed"),
    ("furniture", "Furnished"),
)


@dataclass(frozen=True)
class PropertyAttributes:
    city: str
    area: float
    rooms: float
    bathroom: float
    parking_spaces: float
    floor: float
    animal: bool
    furniture: bool
    hoa: float
    property_tax: float
    fire_insurance: float

    def to_payload(self) -> Dict[str, Any]:
        """Request body for ``POST /predict``."""
        return {
            "city": self.city,
            "area": self.area,
            "rooms": self.rooms,
            "bathroom": self.bathroom,
            "parkingSpaces": self.parking_spaces,
            "floor": self.floor,
            "animal": self.animal,
            "furniture": self.furniture,
            "hoa": self.hoa,
            "propertyTax": self.property_tax,
            "fireInsurance": self.fire_insurance,
        }


def _parse_field(spec: FieldSpec, raw: Any):
    if raw is None or isinstance(raw, bool):
        raise ValidationError(spec.name, spec.error)
    text = str(raw).strip()
    if not text:
        raise ValidationError(spec.name, spec.error)
    if spec.kind == "text":
        return text
    try:
        number = float(text)
    except ValueError:
        raise ValidationError(spec.name, spec.error) from None
    if not math.isfinite(number):
        raise ValidationError(spec.name, spec.error)
    if spec.kind == "count" and number.is_integer():
        # 3 rooms go out as 3, 2.5 rooms stay 2.5
        return int(number)
    return number


def validate_property_form(values: Mapping[str, Any]) -> Tuple[Optional[PropertyAttributes], Dict[str, str]]:
    parsed: Dict[str, Any] = {}
    errors: Dict[str, str] = {}
    for spec in FIELD_SPECS:
        try:
            parsed[spec.name] = _parse_field(spec, values.get(spec.name))
        except ValidationError as exc:
            errors[exc.field] = exc.message
    if errors:
        return None, errors
    for name, _ in FLAG_FIELDS:
        parsed[name] = bool(values.get(name, False))
    return PropertyAttributes(**parsed), {}


def submit_form(
    values: Mapping[str, Any],
    submit: Callable[[PropertyAttributes], Any],
) -> Dict[str, str]:
    """Validate and, only when every field passes, call ``submit`` once."""
    attributes, errors = validate_property_form(values)
    if attributes is not None:
        submit(attributes)
    return errors
