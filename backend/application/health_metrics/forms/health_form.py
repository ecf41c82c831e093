"""HealthForm - validated health form submitted by the user."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from domain.health_metrics.core.exceptions import InvalidHealthFormError
from domain.health_metrics.core.value_objects import (
    ActivityLevel,
    BodyMeasurement,
    Sex,
)

WEIGHT_RANGE_KG: Tuple[float, float] = (20, 500)
HEIGHT_RANGE_CM: Tuple[float, float] = (100, 250)
AGE_RANGE_YEARS: Tuple[int, int] = (13, 120)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of health form validation.

    Attributes:
        is_valid: True when no errors were found
        errors: Every validation message, in check order
    """

    is_valid: bool
    errors: List[str] = field(default_factory=list)


def _lookup(data: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    return None


def _is_blank(value: Any) -> bool:
    return value is None or value is False or value == "" or value == 0


def _parse_number(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    try:
        number = float(str(value).strip())
    except (TypeError, ValueError):
        return None
    if math.isnan(number):
        return None
    return number


def validate_health_form(data: Mapping[str, Any]) -> ValidationResult:
    """Check a raw health form and collect every error.

    Required fields are checked first, then ranges for the numeric fields
    that parsed. Both camelCase and snake_case keys are accepted.

    Args:
        data: Raw form fields

    Returns:
        ValidationResult with all error messages

    Example:
        >>> validate_health_form({"weight": 10, "height": 170, "age": 30,
        ...     "gender": "male", "activityLevel": "light"}).errors
        ['Weight must be between 20 and 500 kg']
    """
    errors: List[str] = []

    weight_raw = _lookup(data, "weight", "weight_kg")
    height_raw = _lookup(data, "height", "height_cm")
    age_raw = _lookup(data, "age", "age_years")
    gender = _lookup(data, "gender", "sex")
    activity = _lookup(data, "activityLevel", "activity_level")

    weight = None if _is_blank(weight_raw) else _parse_number(weight_raw)
    height = None if _is_blank(height_raw) else _parse_number(height_raw)
    age = None if _is_blank(age_raw) else _parse_number(age_raw)
    if age is not None and math.isfinite(age):
        age = float(math.trunc(age))

    if weight is None:
        errors.append("Valid weight is required")
    if height is None:
        errors.append("Valid height is required")
    if age is None:
        errors.append("Valid age is required")
    if not isinstance(gender, str) or gender not in {sex.value for sex in Sex}:
        errors.append("Valid gender is required")
    if not isinstance(activity, str) or activity not in {
        level.value for level in ActivityLevel
    }:
        errors.append("Valid activity level is required")

    if weight is not None and not WEIGHT_RANGE_KG[0] <= weight <= WEIGHT_RANGE_KG[1]:
        errors.append("Weight must be between 20 and 500 kg")
    if height is not None and not HEIGHT_RANGE_CM[0] <= height <= HEIGHT_RANGE_CM[1]:
        errors.append("Height must be between 100 and 250 cm")
    if age is not None and not AGE_RANGE_YEARS[0] <= age <= AGE_RANGE_YEARS[1]:
        errors.append("Age must be between 13 and 120 years")

    return ValidationResult(is_valid=not errors, errors=errors)


def _split_list(value: Any) -> List[str]:
    """Split a comma separated string into trimmed, non-empty items."""
    if value is None:
        return []
    if isinstance(value, str):
        items = value.split(",")
    else:
        items = [str(item) for item in value]
    return [item.strip() for item in items if item.strip()]


class HealthForm(BaseModel):
    """
    Health form after validation.

    Built with ``from_mapping``, which runs ``validate_health_form`` first
    so callers get the full list of user-facing messages.

    Example:
        >>> form = HealthForm.from_mapping({
        ...     "height": "170", "weight": "70", "age": "30",
        ...     "gender": "male", "activityLevel": "moderate",
        ...     "medicalConditions": "Diabetes, High blood pressure",
        ... })
        >>> form.medical_conditions
        ['Diabetes', 'High blood pressure']
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    height: float = Field(..., ge=HEIGHT_RANGE_CM[0], le=HEIGHT_RANGE_CM[1])
    weight: float = Field(..., ge=WEIGHT_RANGE_KG[0], le=WEIGHT_RANGE_KG[1])
    age: int = Field(..., ge=AGE_RANGE_YEARS[0], le=AGE_RANGE_YEARS[1])
    gender: Sex
    activity_level: ActivityLevel = Field(..., alias="activityLevel")
    medical_conditions: List[str] = Field(default_factory=list, alias="medicalConditions")
    dietary_restrictions: List[str] = Field(
        default_factory=list, alias="dietaryRestrictions"
    )
    goals: List[str] = Field(default_factory=list)

    @field_validator("age", mode="before")
    @classmethod
    def truncate_age(cls, v: Any) -> Any:
        """Accept fractional ages by dropping the decimals."""
        number = _parse_number(v)
        return int(number) if number is not None else v

    @field_validator("medical_conditions", "dietary_restrictions", "goals", mode="before")
    @classmethod
    def split_comma_separated(cls, v: Any) -> List[str]:
        """Turn "a, b" into ["a", "b"]."""
        return _split_list(v)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> HealthForm:
        """Validate raw form data and build the form.

        Args:
            data: Raw form fields (camelCase or snake_case keys)

        Returns:
            HealthForm: Validated form

        Raises:
            InvalidHealthFormError: With every validation message
        """
        result = validate_health_form(data)
        if not result.is_valid:
            raise InvalidHealthFormError(result.errors)

        normalized = {
            "height": _lookup(data, "height", "height_cm"),
            "weight": _lookup(data, "weight", "weight_kg"),
            "age": _lookup(data, "age", "age_years"),
            "gender": _lookup(data, "gender", "sex"),
            "activity_level": _lookup(data, "activityLevel", "activity_level"),
            "medical_conditions": _lookup(data, "medicalConditions", "medical_conditions"),
            "dietary_restrictions": _lookup(
                data, "dietaryRestrictions", "dietary_restrictions"
            ),
            "goals": _lookup(data, "goals"),
        }
        try:
            return cls.model_validate(normalized)
        except ValidationError as e:
            raise InvalidHealthFormError([err["msg"] for err in e.errors()]) from e

    def to_measurement(self) -> BodyMeasurement:
        """Convert to the body measurements used by the calculations."""
        return BodyMeasurement(
            height_cm=self.height,
            weight_kg=self.weight,
            age_years=self.age,
            sex=self.gender,
            activity_level=self.activity_level,
        )
