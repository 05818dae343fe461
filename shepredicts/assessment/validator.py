"""Validates questionnaire answers before they reach the predictor.

This mirrors the browser form rules: answers outside the accepted ranges are
rejected here with a message naming the field. The predictor itself never
rejects input; it clamps.
"""

import math
import re
from typing import Any

from shepredicts.assessment.exceptions import AssessmentValidationError
from shepredicts.assessment.models import (
    AssessmentData,
    HormonalIndicators,
    MenstrualHealth,
    PhysicalSymptoms,
    UserProfile,
)

_EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")
_MIN_NAME_LENGTH = 2
_CYCLE_REGULARITY_CHOICES = frozenset({"regular", "irregular"})

_SYMPTOM_FIELDS = ("hair_growth", "hair_loss", "skin_darkening", "pimples", "weight_gain")

# field -> (min, max, unit suffix for messages)
_MENSTRUAL_RANGES: dict[str, tuple[float, float, str]] = {
    "cycle_length": (10, 90, " days"),
    "follicle_left": (0, 50, ""),
    "follicle_right": (0, 50, ""),
    "avg_follicle_size_left": (0, 50, " mm"),
    "avg_follicle_size_right": (0, 50, " mm"),
    "endometrium_thickness": (0, 30, " mm"),
}
_HORMONAL_RANGES: dict[str, tuple[float, float, str]] = {
    "bmi": (10, 60, ""),
    "waist_hip_ratio": (0.5, 2.0, ""),
    "fsh_lh_ratio": (0, 10, ""),
    "amh": (0, 20, " ng/mL"),
    "prg": (0, 50, " ng/mL"),
    "rbs": (50, 500, " mg/dL"),
}

_CAMEL_PATTERN = re.compile(r"(?<!^)(?=[A-Z])")


def to_snake_case(key: str) -> str:
    """Convert browser-style camelCase keys (``waistHipRatio``) to snake_case."""
    return _CAMEL_PATTERN.sub("_", key).lower()


def _snake_keys(raw: Any, section: str) -> dict[str, Any]:
    if not isinstance(raw, dict):
        raise AssessmentValidationError(f"'{section}' must be an object")
    return {to_snake_case(str(key)): value for key, value in raw.items()}


def build_user(
    data: dict[str, Any],
    *,
    min_age: int = 12,
    max_age: int = 80,
    supported_gender: str = "female",
) -> UserProfile:
    """Validate the sign-in form and build a UserProfile.

    Raises:
        AssessmentValidationError: on the first failing field.
    """
    raw = _snake_keys(data, "user")
    name = raw.get("name")
    if not isinstance(name, str) or not name.strip():
        raise AssessmentValidationError("'name' is required")
    if len(name.strip()) < _MIN_NAME_LENGTH:
        raise AssessmentValidationError(
            f"'name' must be at least {_MIN_NAME_LENGTH} characters"
        )

    email = raw.get("email")
    if not isinstance(email, str) or not email.strip():
        raise AssessmentValidationError("'email' is required")
    if not _EMAIL_PATTERN.search(email.strip()):
        raise AssessmentValidationError("'email' must be a valid email address")

    age = raw.get("age")
    if age is None or (isinstance(age, str) and not age.strip()):
        raise AssessmentValidationError("'age' is required")
    if isinstance(age, str) and age.strip().isdigit():
        age = int(age.strip())
    if isinstance(age, float) and age.is_integer():
        age = int(age)
    if isinstance(age, bool) or not isinstance(age, int):
        raise AssessmentValidationError("'age' must be a whole number")
    if age < min_age or age > max_age:
        raise AssessmentValidationError(
            f"'age' must be between {min_age} and {max_age} years"
        )

    gender = raw.get("gender")
    if not isinstance(gender, str) or not gender:
        raise AssessmentValidationError("'gender' is required")
    if gender != supported_gender:
        raise AssessmentValidationError(
            f"'gender': this assessment is currently available for {supported_gender}s only"
        )
    return UserProfile(name=name.strip(), email=email.strip(), age=age, gender=gender)


def build_physical_symptoms(data: dict[str, Any]) -> PhysicalSymptoms:
    raw = _snake_keys(data, "physical_symptoms")
    values: dict[str, bool] = {}
    for field in _SYMPTOM_FIELDS:
        value = raw.get(field, False)
        if not isinstance(value, bool):
            raise AssessmentValidationError(f"'{field}' must be a boolean")
        values[field] = value
    return PhysicalSymptoms(**values)


def build_menstrual_health(data: dict[str, Any]) -> MenstrualHealth:
    raw = _snake_keys(data, "menstrual_health")
    regularity = raw.get("cycle_regularity", "regular")
    if not isinstance(regularity, str) or regularity not in _CYCLE_REGULARITY_CHOICES:
        raise AssessmentValidationError(
            f"'cycle_regularity' must be one of {sorted(_CYCLE_REGULARITY_CHOICES)}, "
            f"got {regularity!r}"
        )
    defaults = MenstrualHealth()
    numbers = {
        field: _ranged_number(raw, field, bounds, getattr(defaults, field))
        for field, bounds in _MENSTRUAL_RANGES.items()
    }
    return MenstrualHealth(cycle_regularity=regularity, **numbers)


def build_hormonal_indicators(data: dict[str, Any]) -> HormonalIndicators:
    raw = _snake_keys(data, "hormonal_indicators")
    numbers = {
        field: _ranged_number(raw, field, bounds, None)
        for field, bounds in _HORMONAL_RANGES.items()
    }
    return HormonalIndicators(**numbers)


def build_assessment_data(data: dict[str, Any]) -> AssessmentData:
    """Validate all three questionnaire sections at once."""
    raw = _snake_keys(data, "assessment")
    for section in ("physical_symptoms", "menstrual_health", "hormonal_indicators"):
        if section not in raw:
            raise AssessmentValidationError(f"Missing required section: {section}")
    return AssessmentData(
        physical_symptoms=build_physical_symptoms(raw["physical_symptoms"]),
        menstrual_health=build_menstrual_health(raw["menstrual_health"]),
        hormonal_indicators=build_hormonal_indicators(raw["hormonal_indicators"]),
    )


def _ranged_number(
    raw: dict[str, Any],
    field: str,
    bounds: tuple[float, float, str],
    default: float | None,
) -> float:
    low, high, unit = bounds
    value = raw.get(field, default)
    if value is None:
        raise AssessmentValidationError(f"'{field}' is required")
    if isinstance(value, bool) or not isinstance(value, (int, float)) or math.isnan(value):
        raise AssessmentValidationError(f"'{field}' must be a number")
    if value < low or value > high:
        raise AssessmentValidationError(
            f"'{field}' should be between {low:g}-{high:g}{unit}"
        )
    return float(value)
